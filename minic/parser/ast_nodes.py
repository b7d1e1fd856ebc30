"""
Abstract Syntax Tree node definitions for MiniC.

A closed set of node types. Every node records the line it starts on and
lists its children explicitly through children(); expression nodes also
carry the data type resolved while parsing.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from enum import Enum

from ..analyzer.types import DataType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"
    BLOCK = "Block"
    DECLARATION = "Declaration"

    # Statements
    ASSIGNMENT = "Assignment"
    IF_STATEMENT = "IfStatement"
    WHILE_STATEMENT = "WhileStatement"
    FOR_STATEMENT = "ForStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    RETURN_STATEMENT = "ReturnStatement"
    EMPTY_STATEMENT = "EmptyStatement"

    # Expressions
    BINARY_OP = "BinaryOp"
    UNARY_OP = "UnaryOp"
    LITERAL = "Literal"
    IDENTIFIER = "Identifier"
    GROUPING = "Grouping"


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, line: Optional[int]):
        self.node_type = node_type
        self.line = line

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes, in source order."""

    @abstractmethod
    def _fields(self) -> Dict[str, Any]:
        """Named fields of this node (scalars, nodes, lists of nodes or None)."""

    def to_dict(self) -> Dict[str, Any]:
        """Structural dump of this node and its subtree."""
        result: Dict[str, Any] = {"node": self.node_type.value}
        for name, value in self._fields().items():
            result[name] = _dump(value)
        if self.line is not None:
            result["line"] = self.line
        return result

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.line}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(line={self.line})"


def _dump(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, DataType):
        return value.value
    return value


class Statement(ASTNode):
    """Base class for commands."""


class Expression(ASTNode):
    """Base class for expressions; data_type is resolved during parsing."""

    def __init__(self, node_type: ASTNodeType, line: Optional[int], data_type: DataType):
        super().__init__(node_type, line)
        self.data_type = data_type

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["dataType"] = self.data_type.value
        return result


# ============================================================================
# Program structure
# ============================================================================

class Program(ASTNode):
    """Root node: `int main() { ... }` or `void main() { ... }`."""

    def __init__(self, return_type: DataType, body: 'Block', line: Optional[int] = None):
        super().__init__(ASTNodeType.PROGRAM, line)
        self.return_type = return_type
        self.body = body

    def children(self) -> List[ASTNode]:
        return [self.body]

    def _fields(self) -> Dict[str, Any]:
        return {"returnType": self.return_type, "body": self.body}


class Block(Statement):
    """`{ declarations commands }`, with its own scope."""

    def __init__(self, declarations: List['Declaration'], commands: List[Statement],
                 line: Optional[int] = None):
        super().__init__(ASTNodeType.BLOCK, line)
        self.declarations = declarations
        self.commands = commands

    def children(self) -> List[ASTNode]:
        return [*self.declarations, *self.commands]

    def _fields(self) -> Dict[str, Any]:
        return {"declarations": self.declarations, "commands": self.commands}


class Declaration(ASTNode):
    """`type id, id, ... ;`"""

    def __init__(self, var_type: DataType, variables: List['Identifier'], line: Optional[int] = None):
        super().__init__(ASTNodeType.DECLARATION, line)
        self.var_type = var_type
        self.variables = variables

    @property
    def names(self) -> List[str]:
        return [variable.name for variable in self.variables]

    def children(self) -> List[ASTNode]:
        return list(self.variables)

    def _fields(self) -> Dict[str, Any]:
        return {"varType": self.var_type, "variables": self.variables}


# ============================================================================
# Statements
# ============================================================================

class Assignment(Statement):
    """`id = expression`"""

    def __init__(self, variable: str, value: Expression, line: Optional[int] = None):
        super().__init__(ASTNodeType.ASSIGNMENT, line)
        self.variable = variable
        self.value = value

    def children(self) -> List[ASTNode]:
        return [self.value]

    def _fields(self) -> Dict[str, Any]:
        return {"variable": self.variable, "value": self.value}


class IfStatement(Statement):
    def __init__(self, condition: Expression, then_branch: Statement,
                 else_branch: Optional[Statement] = None, line: Optional[int] = None):
        super().__init__(ASTNodeType.IF_STATEMENT, line)
        self.condition = condition
        self.then_branch = then_branch
        self.else_branch = else_branch

    def children(self) -> List[ASTNode]:
        children = [self.condition, self.then_branch]
        if self.else_branch is not None:
            children.append(self.else_branch)
        return children

    def _fields(self) -> Dict[str, Any]:
        return {
            "condition": self.condition,
            "thenBranch": self.then_branch,
            "elseBranch": self.else_branch,
        }


class WhileStatement(Statement):
    def __init__(self, condition: Expression, body: Statement, line: Optional[int] = None):
        super().__init__(ASTNodeType.WHILE_STATEMENT, line)
        self.condition = condition
        self.body = body

    def children(self) -> List[ASTNode]:
        return [self.condition, self.body]

    def _fields(self) -> Dict[str, Any]:
        return {"condition": self.condition, "body": self.body}


class ForStatement(Statement):
    """`for (init; condition; increment) body`; every clause but the body is optional."""

    def __init__(self, initializer: Optional[Union[Declaration, Assignment]],
                 condition: Optional[Expression], increment: Optional[Assignment],
                 body: Statement, line: Optional[int] = None):
        super().__init__(ASTNodeType.FOR_STATEMENT, line)
        self.initializer = initializer
        self.condition = condition
        self.increment = increment
        self.body = body

    def children(self) -> List[ASTNode]:
        parts = [self.initializer, self.condition, self.increment, self.body]
        return [part for part in parts if part is not None]

    def _fields(self) -> Dict[str, Any]:
        return {
            "initializer": self.initializer,
            "condition": self.condition,
            "increment": self.increment,
            "body": self.body,
        }


class DoWhileStatement(Statement):
    def __init__(self, body: Statement, condition: Expression, line: Optional[int] = None):
        super().__init__(ASTNodeType.DO_WHILE_STATEMENT, line)
        self.body = body
        self.condition = condition

    def children(self) -> List[ASTNode]:
        return [self.body, self.condition]

    def _fields(self) -> Dict[str, Any]:
        return {"body": self.body, "condition": self.condition}


class ReturnStatement(Statement):
    def __init__(self, value: Optional[Expression] = None, line: Optional[int] = None):
        super().__init__(ASTNodeType.RETURN_STATEMENT, line)
        self.value = value

    @property
    def value_type(self) -> DataType:
        return self.value.data_type if self.value is not None else DataType.VOID

    def children(self) -> List[ASTNode]:
        return [self.value] if self.value is not None else []

    def _fields(self) -> Dict[str, Any]:
        return {"value": self.value}


class EmptyStatement(Statement):
    """A lone `;`."""

    def __init__(self, line: Optional[int] = None):
        super().__init__(ASTNodeType.EMPTY_STATEMENT, line)

    def children(self) -> List[ASTNode]:
        return []

    def _fields(self) -> Dict[str, Any]:
        return {}


# ============================================================================
# Expressions
# ============================================================================

class BinaryOp(Expression):
    def __init__(self, operator: str, left: Expression, right: Expression,
                 data_type: DataType, line: Optional[int] = None):
        super().__init__(ASTNodeType.BINARY_OP, line, data_type)
        self.operator = operator
        self.left = left
        self.right = right

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def _fields(self) -> Dict[str, Any]:
        return {"operator": self.operator, "left": self.left, "right": self.right}


class UnaryOp(Expression):
    def __init__(self, operator: str, operand: Expression, data_type: DataType,
                 line: Optional[int] = None):
        super().__init__(ASTNodeType.UNARY_OP, line, data_type)
        self.operator = operator
        self.operand = operand

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def _fields(self) -> Dict[str, Any]:
        return {"operator": self.operator, "operand": self.operand}


class Literal(Expression):
    """Integer, float or character constant."""

    def __init__(self, value: Union[int, float, str], data_type: DataType, line: Optional[int] = None):
        super().__init__(ASTNodeType.LITERAL, line, data_type)
        self.value = value

    def children(self) -> List[ASTNode]:
        return []

    def _fields(self) -> Dict[str, Any]:
        return {"value": self.value}


class Identifier(Expression):
    def __init__(self, name: str, data_type: DataType, line: Optional[int] = None):
        super().__init__(ASTNodeType.IDENTIFIER, line, data_type)
        self.name = name

    def children(self) -> List[ASTNode]:
        return []

    def _fields(self) -> Dict[str, Any]:
        return {"name": self.name}


class Grouping(Expression):
    """Parenthesized expression; keeps the inner expression's type."""

    def __init__(self, expression: Expression, line: Optional[int] = None):
        super().__init__(ASTNodeType.GROUPING, line, expression.data_type)
        self.expression = expression

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def _fields(self) -> Dict[str, Any]:
        return {"expression": self.expression}


# Alias for the root AST type
AST = Program
