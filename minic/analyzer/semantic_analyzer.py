"""
Inline semantic actions for MiniC.

The parser calls into SemanticAnalyzer as it recognizes each construct:
declarations, identifier reads, assignments, operators and returns. The
analyzer resolves names through the ScopeManager, computes expression types
bottom-up and records non-fatal diagnostics. Nothing here ever raises for a
semantic problem; callers get an `error` type or a missing symbol instead.
"""

from typing import Optional

from .types import (
    DataType, COMPARISON_OPERATORS, LOGICAL_OPERATORS,
    is_assignable, is_returnable, promote, operand_violation,
)
from .symbol_table import ScopeManager, ScopeKind, Symbol
from .diagnostics import DiagnosticCollector
from .errors import (
    create_undeclared_error, create_assignment_mismatch_error,
    create_return_mismatch_error, create_operand_error,
    create_uninitialized_warning,
)


class SemanticAnalyzer:
    """
    Semantic checks performed during parsing.

    Owns the scope stack and the return type of the function being parsed.
    """

    def __init__(self, diagnostics: Optional[DiagnosticCollector] = None):
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()
        self.scopes = ScopeManager(self.diagnostics)
        self.current_function_return_type: Optional[DataType] = None

    def reset(self) -> None:
        """Drop all run state."""
        self.scopes.reset()
        self.current_function_return_type = None

    # ========================================================================
    # Scopes and declarations
    # ========================================================================

    def begin_function(self, return_type: DataType) -> None:
        self.current_function_return_type = return_type

    def begin_scope(self, kind: ScopeKind = ScopeKind.BLOCK) -> None:
        self.scopes.begin_scope(kind)

    def end_scope(self) -> None:
        self.scopes.end_scope()

    def declare(self, name: str, var_type: DataType, line: int) -> bool:
        return self.scopes.declare(name, var_type, line)

    def lookup(self, name: str, line: int) -> Optional[Symbol]:
        """Resolve a name, reporting it when undeclared."""
        symbol = self.scopes.resolve(name)
        if symbol is None:
            self.diagnostics.report(create_undeclared_error(name, line))
        return symbol

    # ========================================================================
    # Expressions
    # ========================================================================

    def identifier_type(self, name: str, line: int) -> DataType:
        """
        Type of an identifier being read.

        Undeclared names yield DataType.ERROR; reading a declared but never
        assigned name is only a warning.
        """
        symbol = self.lookup(name, line)
        if symbol is None:
            return DataType.ERROR
        if not symbol.initialized:
            self.diagnostics.report(create_uninitialized_warning(name, line))
        return symbol.type

    def binary_type(self, operator: str, left: DataType, right: DataType, line: int) -> DataType:
        """Result type of a binary operator, reporting invalid operands."""
        if operator in LOGICAL_OPERATORS:
            # C-style truthiness: any operand type is accepted
            return DataType.INT

        violation = operand_violation(operator, left, right)
        if violation is not None:
            self.diagnostics.report(create_operand_error(violation, line))

        result = promote(operator, left, right)
        if operator in COMPARISON_OPERATORS:
            return DataType.INT
        return result

    @staticmethod
    def unary_type(operator: str, operand: DataType) -> DataType:
        if operator == "!":
            return DataType.INT
        return operand

    # ========================================================================
    # Statements
    # ========================================================================

    def check_assignment(self, symbol: Optional[Symbol], value_type: DataType, line: int) -> None:
        """
        Check an assignment to an already resolved target.

        The target becomes initialized once it resolves, even when the
        value type is rejected.
        """
        if symbol is None:
            return
        if value_type != DataType.ERROR and not is_assignable(symbol.type, value_type):
            self.diagnostics.report(
                create_assignment_mismatch_error(symbol.type, value_type, line)
            )
        symbol.mark_initialized()

    def check_return(self, value_type: DataType, line: int) -> None:
        """Check a return value (DataType.VOID when absent)."""
        expected = self.current_function_return_type
        if expected is None or value_type == DataType.ERROR:
            return
        if not is_returnable(expected, value_type):
            self.diagnostics.report(
                create_return_mismatch_error(expected, value_type, line)
            )
