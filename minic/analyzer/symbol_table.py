"""
Symbol table and scope management for MiniC semantic analysis.

A stack of scope frames (innermost last) implements nested lexical scoping:
- declarations go into the innermost frame
- lookups walk innermost to outermost, so inner names shadow outer ones
- a name may appear only once per frame
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from .types import DataType
from .errors import ScopeError, create_redeclaration_error
from .diagnostics import DiagnosticCollector

logger = logging.getLogger(__name__)


@dataclass
class Symbol:
    """Compile-time record of a declared variable."""
    name: str
    type: DataType
    declared_at_line: int
    initialized: bool = False

    def mark_initialized(self) -> None:
        # Monotonic: a symbol never goes back to uninitialized
        self.initialized = True

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "initialized": self.initialized,
            "declaredAtLine": self.declared_at_line,
        }


class ScopeKind(Enum):
    """Types of scopes."""
    GLOBAL = "global"
    BLOCK = "block"
    FOR = "for"


@dataclass
class Scope:
    """A single frame: the symbols declared directly in one block."""
    kind: ScopeKind
    depth: int
    symbols: Dict[str, Symbol] = field(default_factory=dict)

    def lookup_local(self, name: str) -> Optional[Symbol]:
        """Look up a symbol only in this scope (no parent traversal)."""
        return self.symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __str__(self) -> str:
        return f"Scope({self.kind.value}, depth={self.depth}, {len(self.symbols)} symbols)"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "depth": self.depth,
            "symbols": [symbol.to_dict() for symbol in self.symbols.values()],
        }


class ScopeManager:
    """
    Manages the stack of scope frames during one analysis run.

    Frames are pushed and popped in strict LIFO order matching block
    nesting. Popped frames are kept in closing order as the run's symbol
    table.
    """

    def __init__(self, diagnostics: DiagnosticCollector):
        self.diagnostics = diagnostics
        self.stack: List[Scope] = []
        self.closed_scopes: List[Scope] = []

    def reset(self) -> None:
        self.stack = []
        self.closed_scopes = []

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def current_scope(self) -> Optional[Scope]:
        return self.stack[-1] if self.stack else None

    def begin_scope(self, kind: ScopeKind = ScopeKind.BLOCK) -> Scope:
        """Push an empty frame."""
        scope = Scope(kind, len(self.stack))
        self.stack.append(scope)
        logger.debug("enter %s scope (depth %d)", kind.value, scope.depth)
        return scope

    def end_scope(self) -> Scope:
        """Pop the innermost frame."""
        if not self.stack:
            raise ScopeError("end_scope() called with an empty scope stack")
        scope = self.stack.pop()
        self.closed_scopes.append(scope)
        logger.debug("leave %s scope (depth %d)", scope.kind.value, scope.depth)
        return scope

    def unwind(self) -> None:
        """Pop every open frame, e.g. after a fatal syntax error."""
        while self.stack:
            self.end_scope()

    def declare(self, name: str, var_type: DataType, line: int) -> bool:
        """
        Declare a variable in the innermost frame.

        Returns False and records a redeclaration error when the name is
        already in that frame; the first declaration is kept. Shadowing a
        name from an outer frame is allowed.
        """
        scope = self.current_scope
        if scope is None:
            raise ScopeError(f"cannot declare '{name}' outside of any scope")

        existing = scope.lookup_local(name)
        if existing is not None:
            self.diagnostics.report(
                create_redeclaration_error(name, line, existing.declared_at_line)
            )
            return False

        scope.symbols[name] = Symbol(name, var_type, line)
        return True

    def resolve(self, name: str) -> Optional[Symbol]:
        """Find the nearest symbol named `name`, innermost frame first."""
        for scope in reversed(self.stack):
            symbol = scope.lookup_local(name)
            if symbol is not None:
                return symbol
        return None

    def mark_initialized(self, name: str) -> None:
        """Set the initialized flag on the nearest symbol named `name`."""
        symbol = self.resolve(name)
        if symbol is not None:
            symbol.mark_initialized()

    def symbol_table(self) -> List[Scope]:
        """Closed frames in closing order."""
        return list(self.closed_scopes)

    def __str__(self) -> str:
        return f"ScopeManager(depth={self.depth}, current={self.current_scope})"
