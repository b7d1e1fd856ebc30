"""
Ordered collection of errors and warnings for one analysis run.
"""

from typing import List, Optional

from ..lexer.errors import Diagnostic


class DiagnosticCollector:
    """
    Accumulates diagnostics in the order they are reported.

    Append-only during a run and cleared at the start of the next one.
    Never raises.
    """

    def __init__(self):
        self._diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def error(self, message: str, line: int, category: str = "semantic",
              code: Optional[str] = None) -> None:
        """Record an error built from plain text."""
        self.report(Diagnostic(message, line, "error", category, code))

    def warning(self, message: str, line: int, code: Optional[str] = None) -> None:
        """Record a semantic warning built from plain text."""
        self.report(Diagnostic(message, line, "warning", "semantic", code))

    def clear(self) -> None:
        self._diagnostics = []

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> List[str]:
        return [str(d) for d in self._diagnostics if d.is_error]

    @property
    def warnings(self) -> List[str]:
        return [str(d) for d in self._diagnostics if not d.is_error]

    def has_errors(self) -> bool:
        return any(d.is_error for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
