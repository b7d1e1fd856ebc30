"""
MiniC analysis entry point.

Compiler.analyze() runs the whole front end on one source text:
source -> Lexer -> tokens -> Parser (with SemanticAnalyzer) -> AST + diagnostics.
All run state is rebuilt at the start of every call, so a Compiler can be
reused; one instance must not be used by two threads at once.
"""

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from .lexer import Lexer, Token
from .lexer.errors import Diagnostic
from .parser import Parser, Program, ParseError
from .parser.errors import create_nesting_too_deep_error
from .analyzer import SemanticAnalyzer, DiagnosticCollector, Scope

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Everything one analyze() call produces."""
    tokens: List[Token]
    ast: Optional[Program]
    diagnostics: List[Diagnostic]
    symbol_table: List[Scope] = field(default_factory=list)

    @property
    def errors(self) -> List[str]:
        return [str(d) for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> List[str]:
        return [str(d) for d in self.diagnostics if not d.is_error]

    def has_errors(self) -> bool:
        """Check if analysis found any errors."""
        return any(d.is_error for d in self.diagnostics)

    def has_warnings(self) -> bool:
        """Check if analysis found any warnings."""
        return any(not d.is_error for d in self.diagnostics)

    @property
    def succeeded(self) -> bool:
        """AST was built and no error of any kind was reported."""
        return self.ast is not None and not self.has_errors()


class Compiler:
    """
    Front end for MiniC: lexing, parsing and semantic analysis in one pass.

    After analyze() the four outputs are also available as attributes:
    tokens, ast, errors and warnings.
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self.diagnostics = DiagnosticCollector()
        self.analyzer = SemanticAnalyzer(self.diagnostics)
        self.tokens: List[Token] = []
        self.ast: Optional[Program] = None

    @property
    def errors(self) -> List[str]:
        return self.diagnostics.errors

    @property
    def warnings(self) -> List[str]:
        return self.diagnostics.warnings

    def reset(self) -> None:
        """Drop the state of the previous run."""
        self.diagnostics.clear()
        self.analyzer.reset()
        self.tokens = []
        self.ast = None

    def analyze(self, source: str) -> AnalysisResult:
        """
        Analyze a complete source text.

        Args:
            source: MiniC program text

        Returns:
            AnalysisResult; ast is None after a lexical or syntax error
        """
        self.reset()

        lexer = Lexer(source, self.filename)
        self.tokens = lexer.tokenize()

        if lexer.has_errors():
            for error in lexer.errors:
                self.diagnostics.report(error.diagnostic)
        else:
            self._parse()

        return AnalysisResult(
            tokens=list(self.tokens),
            ast=self.ast,
            diagnostics=self.diagnostics.diagnostics,
            symbol_table=self.analyzer.scopes.symbol_table(),
        )

    def _parse(self) -> None:
        parser = Parser(self.tokens, self.analyzer)
        try:
            self.ast = parser.parse()
        except ParseError as e:
            logger.debug("parse aborted: %s", e)
            self.diagnostics.report(e.diagnostic)
            self.ast = None
        except RecursionError:
            error = create_nesting_too_deep_error(parser.current_line)
            logger.debug("parse aborted: %s", error)
            self.diagnostics.report(error.diagnostic)
            self.ast = None
        finally:
            # Frames left open by an aborted parse
            self.analyzer.scopes.unwind()


def analyze_source(source: str, filename: str = "<string>") -> AnalysisResult:
    """Convenience function to analyze a source string."""
    return Compiler(filename).analyze(source)


def analyze_file(filepath: str) -> AnalysisResult:
    """
    Convenience function to analyze a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return analyze_source(source, filepath)
