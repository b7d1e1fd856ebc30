"""
MiniC Recursive Descent Parser

One method per grammar rule, consuming tokens greedily. Binary operators
are parsed by precedence climbing over a level table, left-associative at
every level. Semantic actions (declaration, name resolution, type checks)
run inline through the SemanticAnalyzer as each construct is recognized,
so every expression node comes out of the parser with its type resolved.

Grammar:
    program     -> ("int" | "void") "main" "(" ")" block
    block       -> "{" declaration* command* "}"
    declaration -> type ID ("," ID)* ";"
    command     -> if | while | for | do-while | return | assignment | block | ";"

Any syntax error raises ParseError and abandons the whole parse.
"""

import logging
from typing import List, Optional, Union
from enum import IntEnum

from ..lexer.tokens import Token, TokenType, SourceLocation, DECLARATION_TYPES
from ..analyzer.types import DataType
from ..analyzer.symbol_table import ScopeKind
from ..analyzer.semantic_analyzer import SemanticAnalyzer
from .ast_nodes import (
    Program, Block, Declaration, Statement, Assignment, IfStatement,
    WhileStatement, ForStatement, DoWhileStatement, ReturnStatement,
    EmptyStatement, Expression, BinaryOp, UnaryOp, Literal, Identifier, Grouping,
)
from .errors import (
    create_unexpected_token_error, create_invalid_command_error,
    create_invalid_expression_error, create_trailing_input_error,
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Binary operator precedence levels, lowest first."""
    NONE = 0
    OR = 1              # ||
    AND = 2             # &&
    EQUALITY = 3        # ==, !=
    COMPARISON = 4      # <, >, <=, >=
    TERM = 5            # +, -
    FACTOR = 6          # *, /, %
    UNARY = 7           # -, !


BINARY_PRECEDENCE = {
    TokenType.LOGICAL_OR: Precedence.OR,
    TokenType.LOGICAL_AND: Precedence.AND,
    TokenType.EQUALS: Precedence.EQUALITY,
    TokenType.NE: Precedence.EQUALITY,
    TokenType.GT: Precedence.COMPARISON,
    TokenType.GE: Precedence.COMPARISON,
    TokenType.LT: Precedence.COMPARISON,
    TokenType.LE: Precedence.COMPARISON,
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.TIMES: Precedence.FACTOR,
    TokenType.DIVIDE: Precedence.FACTOR,
    TokenType.MODULO: Precedence.FACTOR,
}

LITERAL_TYPES = {
    TokenType.INTEGER: DataType.INT,
    TokenType.FLOAT_LITERAL: DataType.FLOAT,
    TokenType.CHAR_LITERAL: DataType.CHAR,
}


class Parser:
    """
    MiniC recursive descent parser with inline semantic analysis.
    """

    def __init__(self, tokens: List[Token], analyzer: Optional[SemanticAnalyzer] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer (no EOF token required)
            analyzer: Semantic analyzer receiving declarations and checks
        """
        self.tokens = tokens
        self.current = 0
        self.analyzer = analyzer if analyzer is not None else SemanticAnalyzer()

        last = tokens[-1].location if tokens else SourceLocation("<input>", 1, 1, 0)
        self._eof = Token(TokenType.EOF, "", None, last)

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Raises:
            ParseError: On the first syntax error
        """
        self.current = 0
        logger.debug("parsing %d tokens", len(self.tokens))

        program = self._parse_program()

        if not self._is_at_end():
            raise create_trailing_input_error(self._peek())

        return program

    @property
    def current_line(self) -> int:
        """Line of the token under the cursor."""
        return self._peek().line

    # ========================================================================
    # Program structure
    # ========================================================================

    def _parse_program(self) -> Program:
        self.analyzer.begin_scope(ScopeKind.GLOBAL)

        message = "Program must start with 'int main()' or 'void main()'"
        if self._check(TokenType.VOID):
            type_token = self._consume(TokenType.VOID, message)
        else:
            type_token = self._consume(TokenType.INT, message)
        return_type = DataType.from_keyword(type_token.lexeme)
        self.analyzer.begin_function(return_type)

        self._consume(TokenType.MAIN, "Missing 'main' after the return type")
        self._consume(TokenType.LPAREN, "Missing '(' after 'main'")
        self._consume(TokenType.RPAREN, "Missing ')' after 'main('")

        body = self._parse_block()

        self.analyzer.end_scope()
        return Program(return_type, body, type_token.line)

    def _parse_block(self) -> Block:
        start = self._consume(TokenType.LBRACE, "Missing '{' to open a block")
        self.analyzer.begin_scope(ScopeKind.BLOCK)

        # All declarations precede the first command
        declarations = []
        while self._peek().type in DECLARATION_TYPES:
            declarations.append(self._parse_declaration())

        commands = []
        while not self._check(TokenType.RBRACE) and not self._is_at_end():
            commands.append(self._parse_command())

        self.analyzer.end_scope()
        self._consume(TokenType.RBRACE, "Missing '}' to close the block")
        return Block(declarations, commands, start.line)

    def _parse_declaration(self) -> Declaration:
        type_token = self._advance()
        var_type = DataType.from_keyword(type_token.lexeme)

        variables = []
        while True:
            name_token = self._consume(TokenType.ID, "Missing variable name")
            self.analyzer.declare(name_token.lexeme, var_type, name_token.line)
            variables.append(Identifier(name_token.lexeme, var_type, name_token.line))
            if not self._match(TokenType.COMMA):
                break

        self._consume(TokenType.SEMI, "Declarations must end with ';'")
        return Declaration(var_type, variables, type_token.line)

    # ========================================================================
    # Commands
    # ========================================================================

    def _parse_command(self) -> Statement:
        if self._check(TokenType.IF):
            return self._parse_if_statement()
        elif self._check(TokenType.WHILE):
            return self._parse_while_statement()
        elif self._check(TokenType.FOR):
            return self._parse_for_statement()
        elif self._check(TokenType.DO):
            return self._parse_do_while_statement()
        elif self._check(TokenType.RETURN):
            return self._parse_return_statement()
        elif self._check(TokenType.ID):
            return self._parse_assignment()
        elif self._check(TokenType.LBRACE):
            return self._parse_block()
        elif self._check(TokenType.SEMI):
            token = self._advance()
            return EmptyStatement(token.line)

        found = self._peek()
        raise create_invalid_command_error(found, found.line)

    def _parse_assignment(self, terminated: bool = True) -> Assignment:
        """Parse `id = expression`, followed by ';' unless it is a for increment."""
        name_token = self._consume(TokenType.ID, "An assignment must start with a variable")
        symbol = self.analyzer.lookup(name_token.lexeme, name_token.line)

        self._consume(TokenType.ASSIGN, "Missing '=' in assignment")
        value = self._parse_expression()
        if terminated:
            self._consume(TokenType.SEMI, "Assignments must end with ';'")

        self.analyzer.check_assignment(symbol, value.data_type, name_token.line)
        return Assignment(name_token.lexeme, value, name_token.line)

    def _parse_if_statement(self) -> IfStatement:
        start = self._consume(TokenType.IF, "Missing 'if'")
        self._consume(TokenType.LPAREN, "Missing '(' after 'if'")
        condition = self._parse_expression()
        self._consume(TokenType.RPAREN, "Missing ')' after the if condition")

        then_branch = self._parse_command()

        # A trailing else binds to the nearest unmatched if
        else_branch = None
        if self._match(TokenType.ELSE):
            else_branch = self._parse_command()

        return IfStatement(condition, then_branch, else_branch, start.line)

    def _parse_while_statement(self) -> WhileStatement:
        start = self._consume(TokenType.WHILE, "Missing 'while'")
        self._consume(TokenType.LPAREN, "Missing '(' after 'while'")
        condition = self._parse_expression()
        self._consume(TokenType.RPAREN, "Missing ')' after the while condition")
        body = self._parse_command()
        return WhileStatement(condition, body, start.line)

    def _parse_for_statement(self) -> ForStatement:
        start = self._consume(TokenType.FOR, "Missing 'for'")
        self._consume(TokenType.LPAREN, "Missing '(' after 'for'")

        self.analyzer.begin_scope(ScopeKind.FOR)

        initializer: Optional[Union[Declaration, Assignment]] = None
        if self._match(TokenType.SEMI):
            pass
        elif self._peek().type in DECLARATION_TYPES:
            initializer = self._parse_declaration()
        else:
            initializer = self._parse_assignment()

        condition = None
        if not self._check(TokenType.SEMI):
            condition = self._parse_expression()
        self._consume(TokenType.SEMI, "Missing ';' after the for condition")

        increment = None
        if not self._check(TokenType.RPAREN):
            increment = self._parse_assignment(terminated=False)
        self._consume(TokenType.RPAREN, "Missing ')' after the for clauses")

        body = self._parse_command()

        self.analyzer.end_scope()
        return ForStatement(initializer, condition, increment, body, start.line)

    def _parse_do_while_statement(self) -> DoWhileStatement:
        start = self._consume(TokenType.DO, "Missing 'do'")
        body = self._parse_command()
        self._consume(TokenType.WHILE, "Missing 'while' after the do-while body")
        self._consume(TokenType.LPAREN, "Missing '(' after 'while'")
        condition = self._parse_expression()
        self._consume(TokenType.RPAREN, "Missing ')' after the do-while condition")
        self._consume(TokenType.SEMI, "Missing ';' after the do-while statement")
        return DoWhileStatement(body, condition, start.line)

    def _parse_return_statement(self) -> ReturnStatement:
        start = self._consume(TokenType.RETURN, "Missing 'return'")

        value = None
        if not self._check(TokenType.SEMI):
            value = self._parse_expression()
        self._consume(TokenType.SEMI, "Missing ';' after the return value")

        statement = ReturnStatement(value, start.line)
        self.analyzer.check_return(statement.value_type, start.line)
        return statement

    # ========================================================================
    # Expressions
    # ========================================================================

    def _parse_expression(self) -> Expression:
        return self._parse_binary(Precedence.OR)

    def _parse_binary(self, min_precedence: Precedence) -> Expression:
        """
        Precedence climbing: consume operators binding at least as tightly
        as min_precedence. Right operands are parsed one level tighter, which
        makes every level left-associative.
        """
        left = self._parse_unary()

        while True:
            precedence = self._get_precedence(self._peek().type)
            if precedence == Precedence.NONE or precedence < min_precedence:
                break

            operator_token = self._advance()
            operator = operator_token.lexeme
            right = self._parse_binary(Precedence(precedence + 1))

            data_type = self.analyzer.binary_type(
                operator, left.data_type, right.data_type, operator_token.line
            )
            left = BinaryOp(operator, left, right, data_type, operator_token.line)

        return left

    def _get_precedence(self, token_type: TokenType) -> Precedence:
        return BINARY_PRECEDENCE.get(token_type, Precedence.NONE)

    def _parse_unary(self) -> Expression:
        # Prefix operators are collected iteratively, then applied innermost first
        operators = []
        while self._check(TokenType.MINUS) or self._check(TokenType.LOGICAL_NOT):
            operators.append(self._advance())

        expression = self._parse_primary()
        for operator_token in reversed(operators):
            data_type = self.analyzer.unary_type(operator_token.lexeme, expression.data_type)
            expression = UnaryOp(operator_token.lexeme, expression, data_type, operator_token.line)

        return expression

    def _parse_primary(self) -> Expression:
        token = self._peek()

        if token.type in LITERAL_TYPES:
            self._advance()
            return Literal(token.value, LITERAL_TYPES[token.type], token.line)

        if token.type == TokenType.ID:
            self._advance()
            data_type = self.analyzer.identifier_type(token.lexeme, token.line)
            return Identifier(token.lexeme, data_type, token.line)

        if token.type == TokenType.LPAREN:
            self._advance()
            expression = self._parse_binary(Precedence.OR)
            self._consume(TokenType.RPAREN, "Missing ')' after expression")
            return Grouping(expression, token.line)

        raise create_invalid_expression_error(token, token.line)

    # ========================================================================
    # Utility methods
    # ========================================================================

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _peek(self) -> Token:
        """Return current token without consuming; EOF past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return self._eof

    def _previous(self) -> Token:
        if self.current > 0:
            return self.tokens[self.current - 1]
        return self._peek()

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise ParseError."""
        if self._check(token_type):
            return self._advance()

        found = self._peek()
        raise create_unexpected_token_error(message, token_type, found, found.line)
