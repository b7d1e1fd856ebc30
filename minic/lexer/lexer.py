"""
MiniC Lexer - turns source text into tokens.

Walks a cursor over the input and, at each position, tries the ordered rules
from tokens.LEXICAL_RULES. The first match wins and advances the cursor by
its length. Comments and whitespace are dropped but still move the line
counter. The first character no rule accepts is a fatal lexical error:
tokenization stops there and later text is never tokenized.
"""

import logging
from typing import List

from .tokens import Token, TokenType, SourceLocation, LEXICAL_RULES, ESCAPE_SEQUENCES
from .errors import LexerError, create_invalid_character_error

logger = logging.getLogger(__name__)


class Lexer:
    """
    MiniC lexical analyzer.

    Converts source code text into a list of tokens in source order.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens. When a lexical error occurs the list holds only
            the tokens before it, and the error is in self.errors.
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        logger.debug("tokenizing %s (%d chars)", self.filename, len(self.source))

        while self.pos < len(self.source):
            try:
                token = self._next_token()
            except LexerError as e:
                logger.debug("lexical error: %s", e)
                self.errors.append(e)
                break
            if token is not None:
                self.tokens.append(token)

        logger.debug("produced %d tokens", len(self.tokens))
        return self.tokens

    def _next_token(self):
        """Match one rule at the cursor; returns None for discarded text."""
        location = self._location()

        for token_type, pattern in LEXICAL_RULES:
            match = pattern.match(self.source, self.pos)
            if match is None:
                continue

            lexeme = match.group(0)
            self._advance_over(lexeme)

            if token_type is None:
                return None
            return Token(token_type, lexeme, self._literal_value(token_type, lexeme), location)

        raise create_invalid_character_error(self.source[self.pos], location)

    @staticmethod
    def _literal_value(token_type: TokenType, lexeme: str):
        """Semantic value carried by a token."""
        if token_type == TokenType.INTEGER:
            return int(lexeme)
        if token_type == TokenType.FLOAT_LITERAL:
            return float(lexeme)
        if token_type == TokenType.CHAR_LITERAL:
            body = lexeme[1:-1]
            if body.startswith('\\'):
                return ESCAPE_SEQUENCES.get(body[1], body[1])
            return body
        if token_type == TokenType.ID:
            return lexeme
        return None

    def _advance_over(self, text: str):
        """Advance past matched text, updating line/column."""
        newlines = text.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind('\n')
        else:
            self.column += len(text)
        self.pos += len(text)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_errors(self) -> bool:
        """Check if lexer encountered an error."""
        return len(self.errors) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
