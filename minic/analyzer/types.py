"""
Type domain and promotion rules for MiniC.

Types form a small lattice: char < int < float for arithmetic promotion,
`void` only appears as the type of an empty return, and `error` marks a
subexpression whose type could not be determined.
"""

from enum import Enum
from typing import Optional


class DataType(Enum):
    """Resolved type of a declaration or expression."""
    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    VOID = "void"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_keyword(cls, keyword: str) -> "DataType":
        """Map a type keyword (`int`, `float`, ...) to its DataType."""
        return cls(keyword)


# Operators whose result is always int (0 or 1)
COMPARISON_OPERATORS = frozenset({"==", "!=", "<", ">", "<=", ">="})
LOGICAL_OPERATORS = frozenset({"&&", "||"})


def is_assignable(target: DataType, source: DataType) -> bool:
    """
    Check assignment compatibility.

    Identical types are compatible; int and char widen implicitly to float.
    """
    if target == source:
        return True
    return target == DataType.FLOAT and source in (DataType.INT, DataType.CHAR)


def is_returnable(expected: DataType, actual: DataType) -> bool:
    """Check a returned expression against the function return type."""
    if expected == actual:
        return True
    return expected == DataType.FLOAT and actual == DataType.INT


def promote(operator: str, left: DataType, right: DataType) -> DataType:
    """
    Result type of an arithmetic operator over (left, right).

    Returns DataType.ERROR when either operand already is an error or when
    `%` is applied to a non-int operand.
    """
    if left == DataType.ERROR or right == DataType.ERROR:
        return DataType.ERROR
    if operator == "%" and (left != DataType.INT or right != DataType.INT):
        return DataType.ERROR
    if DataType.FLOAT in (left, right):
        return DataType.FLOAT
    if DataType.INT in (left, right):
        return DataType.INT
    return DataType.CHAR


def operand_violation(operator: str, left: DataType, right: DataType) -> Optional[str]:
    """
    Describe why operands are invalid for an operator, or None if valid.

    Operands already typed as error are not reported again.
    """
    if left == DataType.ERROR or right == DataType.ERROR:
        return None
    if operator == "%" and (left != DataType.INT or right != DataType.INT):
        return "Operator '%' requires operands of type 'int'"
    return None
