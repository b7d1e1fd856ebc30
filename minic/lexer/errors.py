"""
Error handling for the MiniC lexer.

Defines the Diagnostic record shared by every phase and the fatal
LexerError raised when no lexical rule matches.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


# Prefix used when a diagnostic is rendered, keyed by (category, severity)
_HEADINGS = {
    ("lexical", "error"): "Lexical error",
    ("syntax", "error"): "Syntax error",
    ("semantic", "error"): "Semantic error",
    ("semantic", "warning"): "Semantic warning",
}


@dataclass(frozen=True)
class Diagnostic:
    """A single error or warning produced during analysis."""
    message: str
    line: Optional[int]
    severity: str   # "error", "warning"
    category: str   # "lexical", "syntax", "semantic"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def __str__(self) -> str:
        heading = _HEADINGS.get(
            (self.category, self.severity),
            f"{self.category.capitalize()} {self.severity}",
        )
        where = f"line {self.line}" if self.line is not None else "end of input"
        return f"{heading} ({where}): {self.message}"

    def to_dict(self) -> dict:
        return {
            "severity": self.severity,
            "category": self.category,
            "code": self.code,
            "line": self.line,
            "message": self.message,
            "text": str(self),
        }


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a character no rule accepts.

    Tokenization stops at the first one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            line=location.line,
            severity="error",
            category="lexical",
            code=code,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    if char.isprintable():
        shown = char
        help_text = f"The character '{char}' is not valid in MiniC source code."
    else:
        shown = f"U+{ord(char):04X}"
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"invalid character '{shown}'",
        location=location,
        code="L001",
        help_text=help_text,
    )
