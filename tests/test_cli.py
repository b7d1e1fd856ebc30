"""
Tests for the minic command-line interface.
"""

import json
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from click.testing import CliRunner

from minic import __version__
from minic.cli import main

VALID_PROGRAM = "int main(){ int a; a = 5; if (a > 3) { a = a + 1; } }"


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def _check(self, source: str, *flags: str):
        return self.runner.invoke(main, ["check", "-", *flags], input=source)

    def test_version(self):
        result = self.runner.invoke(main, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_check_valid_program(self):
        result = self._check(VALID_PROGRAM)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No errors or warnings.", result.output)

    def test_check_warning_only(self):
        result = self._check("int main(){ int a; int b; b = a + 1; }")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Variable 'a' used before being initialized.", result.output)

    def test_check_error_exit_status(self):
        result = self._check("int main(){ int a a = 1; }")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Declarations must end with ';'", result.output)

    def test_check_ast_and_symbols(self):
        result = self._check(VALID_PROGRAM, "--ast", "--symbols")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Program <int>", result.output)
        self.assertIn("BinaryOp [>]", result.output)
        self.assertIn("Symbol table", result.output)

    def test_check_ast_after_fatal_error(self):
        result = self._check("int main() {", "--ast")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No syntax tree", result.output)

    def test_check_json(self):
        result = self._check("int main() { int a; a = 1.5; }", "--json")
        self.assertEqual(result.exit_code, 1)
        data = json.loads(result.output)
        self.assertEqual(data["diagnostics"][0]["code"], "S001")
        self.assertEqual(data["tokens"][0]["type"], "INT")

    def test_tokens_command(self):
        result = self.runner.invoke(main, ["tokens", "-"], input="int main")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("MAIN", result.output)

    def test_tokens_command_lexical_error(self):
        result = self.runner.invoke(main, ["tokens", "-"], input="int @")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("invalid character '@'", result.output)

    def test_log_level_from_environment(self):
        result = self.runner.invoke(
            main, ["check", "-"], input=VALID_PROGRAM, env={"MINIC_LOG_LEVEL": "ERROR"}
        )
        self.assertEqual(result.exit_code, 0, result.output)

    def test_invalid_log_level(self):
        result = self.runner.invoke(main, ["--log-level", "LOUD", "check", "-"], input="")
        self.assertEqual(result.exit_code, 2)


if __name__ == '__main__':
    unittest.main()
