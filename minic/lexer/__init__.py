"""
MiniC Lexer Package

Implements the lexical analyzer (tokenizer) for MiniC. Tokens are recognized
by an ordered list of rules; the first rule matching at the cursor wins.

Key Features:
- Keyword priority with word boundaries (`ifx` stays an identifier)
- Multi-character operators before their single-character prefixes
- Float literals before integer literals (`3.14` is one token)
- Line tracking across comments and whitespace
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
