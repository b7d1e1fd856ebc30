"""
MiniC Parser Package

Recursive descent parser with precedence climbing for binary operators.
Builds the AST and runs semantic checks inline, in a single pass.

Key Features:
- One method per grammar rule
- Left-associative binary operators over six precedence levels
- Expression types resolved while parsing
- Fail-fast: the first syntax error aborts the parse
"""

from .ast_nodes import *
from .parser import Parser, Precedence
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "Precedence",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "Statement", "Expression",
    "Program", "Block", "Declaration", "Assignment",
    "IfStatement", "WhileStatement", "ForStatement", "DoWhileStatement",
    "ReturnStatement", "EmptyStatement",
    "BinaryOp", "UnaryOp", "Literal", "Identifier", "Grouping",

    # Error handling
    "ParseError",
]
