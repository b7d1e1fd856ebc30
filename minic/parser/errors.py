"""
Error handling for the MiniC parser.

Any grammar violation is fatal: the parser raises ParseError, the parse is
abandoned and exactly one syntax diagnostic is reported for the run.
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Unwinds every grammar rule up to Compiler.analyze().
    """

    def __init__(
        self,
        message: str,
        line: Optional[int],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            category="syntax",
            code=code,
            help_text=help_text,
        )
        self.token = token

    @property
    def line(self) -> Optional[int]:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P005": "Invalid expression",
    "P013": "Invalid command",
    "P014": "Unexpected input after program end",
    "P015": "Nesting too deep",
}


def describe_token(token: Token) -> str:
    """Short description of a token for messages: `ID 'a'`, `SEMI`, `EOF`."""
    if token.type == TokenType.EOF:
        return "EOF"
    return f"{token.type.name} '{token.lexeme}'"


def create_unexpected_token_error(message: str, expected: TokenType, found: Token,
                                  line: Optional[int]) -> ParseError:
    """Create an error for a token other than the one the grammar requires."""
    return ParseError(
        message=f"{message}. Expected {expected.name} but found {describe_token(found)}",
        line=line,
        token=found,
        code="P001",
    )


def create_invalid_command_error(found: Token, line: Optional[int]) -> ParseError:
    """Create an error for a token that cannot start a command."""
    return ParseError(
        message=f"Invalid command starting with {describe_token(found)}",
        line=line,
        token=found,
        code="P013",
        help_text="Declarations must come before the first command of a block.",
    )


def create_invalid_expression_error(found: Token, line: Optional[int]) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message=f"Invalid expression. Unexpected token {describe_token(found)}",
        line=line,
        token=found,
        code="P005",
    )


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after the closing brace of main."""
    return ParseError(
        message=f"Unexpected {describe_token(found)} after the end of main",
        line=found.line,
        token=found,
        code="P014",
    )


def create_nesting_too_deep_error(line: Optional[int]) -> ParseError:
    """Create an error for blocks or expressions nested beyond the parser's depth."""
    return ParseError(
        message="Program nested too deeply to analyze",
        line=line,
        code="P015",
        help_text="Reduce the nesting of parentheses, operators or blocks.",
    )
