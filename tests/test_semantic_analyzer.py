"""
Test suite for the MiniC semantic analyzer.

Tests cover:
- Symbol resolution and scoping
- Type checking of assignments, operators and returns
- Initialization tracking
- Error accumulation without aborting the parse
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minic.compiler import Compiler
from minic.analyzer import SemanticAnalyzer, DataType


class TestSemanticAnalyzer(unittest.TestCase):
    """Test cases for the checks performed while parsing."""

    def setUp(self):
        """Set up test fixtures."""
        self.compiler = Compiler()

    def _analyze_code(self, code: str):
        """Helper to analyze a code snippet."""
        result = self.compiler.analyze(code)
        self.assertIsNotNone(result.ast, f"Unexpected syntax error: {result.errors}")
        return result

    def _codes(self, result):
        return [d.code for d in result.diagnostics]

    # ------------------------------------------------------------------
    # Names and scopes
    # ------------------------------------------------------------------

    def test_undeclared_identifier_in_expression(self):
        result = self._analyze_code("int main() { int a; a = b + 1; }")
        self.assertEqual(result.errors, ["Semantic error (line 1): Variable 'b' has not been declared."])
        self.assertEqual(result.warnings, [])
        value = result.ast.body.commands[0].value
        self.assertEqual(value.left.data_type, DataType.ERROR)
        self.assertEqual(value.data_type, DataType.ERROR)

    def test_undeclared_assignment_target(self):
        result = self._analyze_code("int main() { x = 1; }")
        self.assertEqual(self._codes(result), ["S010"])

    def test_redeclaration_keeps_first_type(self):
        code = """
        int main() {
            int a;
            float a;
            a = 1.5;
        }
        """
        result = self._analyze_code(code)
        self.assertEqual(self._codes(result), ["S011", "S001"])
        self.assertEqual(result.diagnostics[0].line, 4)
        self.assertIn("type 'int'", result.errors[1])

    def test_redeclaration_within_one_declaration(self):
        result = self._analyze_code("int main() { int a, a; }")
        self.assertEqual(self._codes(result), ["S011"])

    def test_shadowing_in_nested_block(self):
        code = """
        int main() {
            int x;
            x = 1;
            {
                float x;
                x = 2.5;
            }
            x = 2.5;
        }
        """
        result = self._analyze_code(code)
        # Only the assignment after the block sees the outer int
        self.assertEqual(self._codes(result), ["S001"])
        self.assertEqual(result.diagnostics[0].line, 9)

    def test_block_names_not_visible_outside(self):
        result = self._analyze_code("int main() { { int y; y = 1; } y = 2; }")
        self.assertEqual(self._codes(result), ["S010"])

    def test_for_scope(self):
        code = """
        int main() {
            int total;
            total = 0;
            for (int i; i < 3; i = i + 1) total = total + i;
            i = 0;
        }
        """
        result = self._analyze_code(code)
        self.assertEqual([d.code for d in result.diagnostics if d.is_error], ["S010"])
        self.assertEqual(result.diagnostics[-1].line, 6)

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def test_int_to_float_assignment(self):
        result = self._analyze_code("int main() { float f; char c; f = 1; c = 'a'; f = c; }")
        self.assertFalse(result.has_errors(), f"Unexpected errors: {result.errors}")

    def test_float_to_int_assignment(self):
        result = self._analyze_code("int main() { int a; float f; f = 1.5; a = f; }")
        self.assertEqual(result.errors, [
            "Semantic error (line 1): Cannot assign a value of type 'float' "
            "to a variable of type 'int'.",
        ])

    def test_char_does_not_widen_to_int(self):
        result = self._analyze_code("int main() { int a; a = 'x'; }")
        self.assertEqual(self._codes(result), ["S001"])

    def test_modulo_on_float(self):
        result = self._analyze_code("int main() { int a; float f; a = 5; f = 2.0; a = a % f; }")
        self.assertEqual(result.errors, [
            "Semantic error (line 1): Operator '%' requires operands of type 'int'.",
        ])
        self.assertEqual(result.ast.body.commands[2].value.data_type, DataType.ERROR)

    def test_error_does_not_cascade(self):
        result = self._analyze_code("int main() { int a; a = (b % 2.5) * 3; }")
        self.assertEqual(self._codes(result), ["S010"])

    def test_comparison_yields_int(self):
        result = self._analyze_code("int main() { int a; float f; f = 1.0; a = f > 2.5; a = f == f; }")
        self.assertFalse(result.has_errors(), f"Unexpected errors: {result.errors}")

    def test_logical_operators_accept_any_type(self):
        result = self._analyze_code("int main() { int a; float f; f = 1.0; a = f && 'c' || !f; }")
        self.assertFalse(result.has_errors(), f"Unexpected errors: {result.errors}")

    def test_return_types(self):
        cases = {
            "int main() { return 1; }": [],
            "int main() { return 1.5; }": ["S053"],
            "int main() { return; }": ["S053"],
            "void main() { return; }": [],
            "void main() { return 1; }": ["S053"],
        }
        for code, expected in cases.items():
            with self.subTest(code=code):
                self.assertEqual(self._codes(self._analyze_code(code)), expected)

    def test_return_mismatch_message(self):
        result = self._analyze_code("int main() {\n return 2.5;\n}")
        self.assertEqual(result.errors, [
            "Semantic error (line 2): Incompatible return type. "
            "Function of type 'int' cannot return 'float'.",
        ])

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def test_use_before_initialization(self):
        result = self._analyze_code("int main(){ int a; int b; b = a + 1; }")
        self.assertEqual(result.errors, [])
        self.assertEqual(result.warnings, ["Semantic warning (line 1): Variable 'a' used before being initialized."])

    def test_initialized_after_assignment(self):
        result = self._analyze_code("int main() { int a, b; a = 1; b = a; }")
        self.assertEqual(result.warnings, [])

    def test_mismatched_assignment_still_initializes(self):
        result = self._analyze_code("int main() { int a, b; a = 1.5; b = a; }")
        self.assertEqual(self._codes(result), ["S001"])

    def test_initialization_is_flow_insensitive(self):
        result = self._analyze_code("int main() { int a, b; if (0) a = 1; b = a; }")
        self.assertEqual(result.warnings, [])

    def test_for_increment_marks_initialized(self):
        result = self._analyze_code("int main() { int i, j; for (; 0; i = 1) ; j = i; }")
        self.assertEqual(result.diagnostics, [])

    def test_semantic_errors_accumulate(self):
        code = """
        int main() {
            int a;
            int a;
            float f;
            a = f;
            b = 1;
        }
        """
        result = self._analyze_code(code)
        self.assertEqual(self._codes(result), ["S011", "W001", "S001", "S010"])
        self.assertTrue(result.has_errors())
        self.assertTrue(result.has_warnings())
        self.assertFalse(result.succeeded)


class TestSemanticAnalyzerUnit(unittest.TestCase):
    """Direct calls into the analyzer without a parser."""

    def setUp(self):
        self.analyzer = SemanticAnalyzer()
        self.analyzer.begin_scope()

    def test_binary_type_reports_modulo(self):
        result = self.analyzer.binary_type("%", DataType.CHAR, DataType.INT, 7)
        self.assertEqual(result, DataType.ERROR)
        self.assertEqual(self.analyzer.diagnostics.diagnostics[0].line, 7)

    def test_unary_type(self):
        self.assertEqual(SemanticAnalyzer.unary_type("!", DataType.FLOAT), DataType.INT)
        self.assertEqual(SemanticAnalyzer.unary_type("-", DataType.CHAR), DataType.CHAR)

    def test_check_assignment_without_symbol(self):
        self.analyzer.check_assignment(None, DataType.FLOAT, 1)
        self.assertEqual(len(self.analyzer.diagnostics), 0)

    def test_check_return_outside_function(self):
        self.analyzer.check_return(DataType.FLOAT, 1)
        self.assertEqual(len(self.analyzer.diagnostics), 0)

    def test_reset(self):
        self.analyzer.begin_function(DataType.INT)
        self.analyzer.declare("x", DataType.INT, 1)
        self.analyzer.reset()
        self.assertIsNone(self.analyzer.current_function_return_type)
        self.assertEqual(self.analyzer.scopes.depth, 0)


if __name__ == '__main__':
    unittest.main()
