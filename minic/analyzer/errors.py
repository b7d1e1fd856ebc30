"""
Semantic analysis diagnostics for MiniC.

Semantic problems never stop parsing; they are recorded as Diagnostic
records and analysis continues with an `error` type or a missing symbol.
"""

from typing import Optional

from ..lexer.errors import Diagnostic
from .types import DataType


class ScopeError(RuntimeError):
    """Raised when the scope stack is used out of order (pop on empty stack)."""


# Semantic error codes for categorization
SEMANTIC_ERROR_CODES = {
    "S001": "Type mismatch in assignment",
    "S010": "Undeclared identifier",
    "S011": "Redeclaration in the same scope",
    "S053": "Invalid return type",
    "S080": "Invalid operand types",
    "W001": "Use before initialization",
}


def _semantic(message: str, line: int, code: str, help_text: Optional[str] = None,
              severity: str = "error") -> Diagnostic:
    return Diagnostic(
        message=message,
        line=line,
        severity=severity,
        category="semantic",
        code=code,
        help_text=help_text,
    )


def create_redeclaration_error(name: str, line: int, first_line: int) -> Diagnostic:
    """Create an error for a name declared twice in one scope."""
    return _semantic(
        f"Variable '{name}' already declared in this scope.",
        line,
        "S011",
        help_text=f"'{name}' was first declared on line {first_line}.",
    )


def create_undeclared_error(name: str, line: int) -> Diagnostic:
    """Create an error for a use of an undeclared identifier."""
    return _semantic(
        f"Variable '{name}' has not been declared.",
        line,
        "S010",
        help_text=f"Declare '{name}' at the start of an enclosing block.",
    )


def create_assignment_mismatch_error(target: DataType, source: DataType, line: int) -> Diagnostic:
    """Create an error for an incompatible assignment."""
    return _semantic(
        f"Cannot assign a value of type '{source}' to a variable of type '{target}'.",
        line,
        "S001",
        help_text="Only int and char values widen implicitly to float.",
    )


def create_return_mismatch_error(expected: DataType, actual: DataType, line: int) -> Diagnostic:
    """Create an error for a return value that does not fit the function type."""
    return _semantic(
        f"Incompatible return type. Function of type '{expected}' cannot return '{actual}'.",
        line,
        "S053",
    )


def create_operand_error(message: str, line: int) -> Diagnostic:
    """Create an error for operands an operator does not accept."""
    return _semantic(f"{message}.", line, "S080")


def create_uninitialized_warning(name: str, line: int) -> Diagnostic:
    """Create a warning for reading a variable before any assignment."""
    return _semantic(
        f"Variable '{name}' used before being initialized.",
        line,
        "W001",
        severity="warning",
    )
