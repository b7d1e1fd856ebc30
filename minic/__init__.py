"""
MiniC Compiler Front End

A single-pass front end for a small C-like teaching language. Lexing,
recursive-descent parsing and semantic analysis (scoped symbol table,
type checking, initialization tracking) all happen in one pass.

Architecture:
    minic/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Grammar rules and AST generation
    ├── analyzer/        # Scopes, types and diagnostics used inline by the parser
    ├── compiler.py      # analyze() entry point
    ├── export.py        # Structural dumps of tokens, AST and symbol table
    └── cli.py           # Command-line front end

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser
from .analyzer import SemanticAnalyzer, ScopeManager, DataType
from .compiler import Compiler, AnalysisResult, analyze_source, analyze_file

__all__ = [
    # Core classes
    "Compiler",
    "AnalysisResult",
    "Lexer",
    "Parser",
    "SemanticAnalyzer",
    "ScopeManager",

    # Data
    "Token",
    "TokenType",
    "DataType",

    # Convenience
    "analyze_source",
    "analyze_file",

    # Version info
    "__version__",
    "__license__",
]
