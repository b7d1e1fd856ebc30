"""
Structural dumps of analysis results.

Plain data (lists and dicts) for tokens, the AST and the symbol table, a
JSON rendering of a whole AnalysisResult and a text tree of the AST. These
are verbatim dumps of the in-memory structures, not a stable file format.
"""

import json
from typing import Any, Dict, List, Optional

from .lexer import Token
from .parser import (
    ASTNode, Program, Declaration, Assignment, BinaryOp, UnaryOp, Literal, Identifier,
)
from .analyzer import Scope
from .compiler import AnalysisResult


def tokens_to_list(tokens: List[Token]) -> List[Dict[str, Any]]:
    return [
        {"type": token.type.name, "lexeme": token.lexeme, "line": token.line}
        for token in tokens
    ]


def ast_to_dict(ast: Optional[Program]) -> Optional[Dict[str, Any]]:
    return ast.to_dict() if ast is not None else None


def symbol_table_to_list(scopes: List[Scope]) -> List[Dict[str, Any]]:
    return [scope.to_dict() for scope in scopes]


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    return {
        "tokens": tokens_to_list(result.tokens),
        "ast": ast_to_dict(result.ast),
        "symbolTable": symbol_table_to_list(result.symbol_table),
        "errors": result.errors,
        "warnings": result.warnings,
        "diagnostics": [d.to_dict() for d in result.diagnostics],
    }


def result_to_json(result: AnalysisResult, indent: Optional[int] = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent, ensure_ascii=False)


def node_label(node: ASTNode) -> str:
    """
    One-line label for a node: type, then name, value, operator and declared
    type when the node has them, e.g. `BinaryOp [+]` or `Declaration <int>`.
    """
    label = node.node_type.value
    if isinstance(node, Identifier):
        label += f" ({node.name})"
    elif isinstance(node, Assignment):
        label += f" ({node.variable})"
    elif isinstance(node, Literal):
        label += f" = {node.value!r}"
    elif isinstance(node, (BinaryOp, UnaryOp)):
        label += f" [{node.operator}]"
    elif isinstance(node, Declaration):
        label += f" <{node.var_type}>"
    elif isinstance(node, Program):
        label += f" <{node.return_type}>"
    return label


def format_ast(ast: Program) -> str:
    """Render the AST as an indented text tree with box-drawing connectors."""
    lines: List[str] = []

    def visit(node: ASTNode, prefix: str, is_last: bool) -> None:
        lines.append(prefix + ("└── " if is_last else "├── ") + node_label(node))
        children = node.children()
        child_prefix = prefix + ("    " if is_last else "│   ")
        for index, child in enumerate(children):
            visit(child, child_prefix, index == len(children) - 1)

    visit(ast, "", True)
    return "\n".join(lines)
