"""
MiniC Semantic Analyzer Package

Semantic analysis runs inline with parsing:
- Nested block scopes with shadowing
- Type checking over the int/float/char lattice
- Use-before-initialization warnings
- Ordered error and warning collection
"""

from .types import DataType, is_assignable, promote
from .symbol_table import ScopeManager, Scope, ScopeKind, Symbol
from .diagnostics import DiagnosticCollector
from .semantic_analyzer import SemanticAnalyzer
from .errors import ScopeError

__all__ = [
    # Main analyzer
    "SemanticAnalyzer",

    # Symbol management
    "ScopeManager", "Scope", "ScopeKind", "Symbol",

    # Types
    "DataType", "is_assignable", "promote",

    # Error handling
    "DiagnosticCollector", "ScopeError",
]
