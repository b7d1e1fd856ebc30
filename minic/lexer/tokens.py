"""
Token definitions for the MiniC lexer.

This module defines all token types supported by MiniC:
- Keywords (types, control flow, `main`)
- Literals (integers, floats, character literals)
- Operators (arithmetic, comparison, logical, assignment)
- Punctuation and identifiers

It also holds the ordered lexical rule table. Order matters: the lexer takes
the first rule whose pattern matches at the cursor, so comments come before
the `/` operator, keywords before identifiers, `==` before `=` and `3.14`
before `3`.
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, List, Optional, Pattern, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in MiniC.

    Names are the kinds reported to callers (`INT`, `ID`, `SEMI`, ...).
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input (never stored in the token list)

    # ========================================================================
    # Keywords
    # ========================================================================
    INT = auto()                    # int
    FLOAT = auto()                  # float
    CHAR = auto()                   # char
    VOID = auto()                   # void
    IF = auto()                     # if
    ELSE = auto()                   # else
    WHILE = auto()                  # while
    FOR = auto()                    # for
    DO = auto()                     # do
    RETURN = auto()                 # return
    MAIN = auto()                   # main

    # ========================================================================
    # Literals
    # ========================================================================
    INTEGER = auto()                # 42
    FLOAT_LITERAL = auto()          # 3.14
    CHAR_LITERAL = auto()           # 'a', '\n'

    # ========================================================================
    # Operators
    # ========================================================================
    EQUALS = auto()                 # ==
    NE = auto()                     # !=
    LE = auto()                     # <=
    GE = auto()                     # >=
    LOGICAL_AND = auto()            # &&
    LOGICAL_OR = auto()             # ||
    ASSIGN = auto()                 # =
    LT = auto()                     # <
    GT = auto()                     # >
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    TIMES = auto()                  # *
    DIVIDE = auto()                 # /
    MODULO = auto()                 # %
    LOGICAL_NOT = auto()            # !

    # ========================================================================
    # Punctuation
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    SEMI = auto()                   # ;
    COMMA = auto()                  # ,

    # ========================================================================
    # Identifiers
    # ========================================================================
    ID = auto()                     # variable_name


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics and for the line shown next to each token.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the MiniC language.

    Contains the token type, lexeme (raw text), semantic value and source
    location. Tokens are immutable once produced.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Parsed value (int for INTEGER, str for CHAR_LITERAL, ...)
    location: SourceLocation

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def kind(self) -> str:
        """Kind name as shown to users (`INT`, `ID`, ...)."""
        return self.type.name

    def __str__(self) -> str:
        if self.type in (TokenType.ID, TokenType.INTEGER,
                         TokenType.FLOAT_LITERAL, TokenType.CHAR_LITERAL):
            return f"{self.type.name}({self.lexeme})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, line={self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_type_keyword(self) -> bool:
        """Check if this token starts a variable declaration."""
        return self.type in DECLARATION_TYPES


# Lookup tables

KEYWORDS = {
    "int": TokenType.INT,
    "float": TokenType.FLOAT,
    "char": TokenType.CHAR,
    "void": TokenType.VOID,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "do": TokenType.DO,
    "return": TokenType.RETURN,
    "main": TokenType.MAIN,
}

# Multi-character operators precede their single-character prefixes
OPERATORS = {
    "==": TokenType.EQUALS,
    "!=": TokenType.NE,
    "<=": TokenType.LE,
    ">=": TokenType.GE,
    "&&": TokenType.LOGICAL_AND,
    "||": TokenType.LOGICAL_OR,
    "=": TokenType.ASSIGN,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
    "!": TokenType.LOGICAL_NOT,
}

PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMI,
    ",": TokenType.COMMA,
}

LITERAL_TYPES = frozenset({
    TokenType.INTEGER,
    TokenType.FLOAT_LITERAL,
    TokenType.CHAR_LITERAL,
})

# Keywords that begin a declaration inside a block or a for initializer
DECLARATION_TYPES = frozenset({
    TokenType.INT,
    TokenType.FLOAT,
    TokenType.CHAR,
})

ESCAPE_SEQUENCES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '0': '\0',
    '\\': '\\',
    "'": "'",
    '"': '"',
}


def _build_lexical_rules() -> List[Tuple[Optional[TokenType], Pattern]]:
    """
    Build the ordered rule table.

    A rule with token type None is discarded after matching (comments,
    whitespace); its newlines still count towards the line number.
    """
    rules: List[Tuple[Optional[TokenType], Pattern]] = [
        # Comments first so '/' is not taken as an operator
        (None, re.compile(r'/\*[\s\S]*?\*/', re.ASCII)),
        (None, re.compile(r'//[^\n]*', re.ASCII)),
    ]

    # Keywords, bounded so that `ifx` or `int_value` stay identifiers
    for word, token_type in KEYWORDS.items():
        rules.append((token_type, re.compile(re.escape(word) + r'\b', re.ASCII)))

    # Literals: fractional part before plain integers
    rules.append((TokenType.FLOAT_LITERAL, re.compile(r'\d+\.\d+', re.ASCII)))
    rules.append((TokenType.INTEGER, re.compile(r'\d+', re.ASCII)))
    rules.append((TokenType.CHAR_LITERAL, re.compile(r"'(?:[^\\'\n]|\\.)'", re.ASCII)))

    for symbol, token_type in {**OPERATORS, **PUNCTUATION}.items():
        rules.append((token_type, re.compile(re.escape(symbol), re.ASCII)))

    rules.append((TokenType.ID, re.compile(r'[a-zA-Z_][a-zA-Z_0-9]*', re.ASCII)))
    # Any Unicode whitespace separates tokens; digits and word boundaries stay ASCII
    rules.append((None, re.compile(r'\s+')))

    return rules


LEXICAL_RULES = _build_lexical_rules()
