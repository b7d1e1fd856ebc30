"""
Tests for the structural dumps of analysis results.
"""

import json
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minic import Compiler
from minic.export import (
    tokens_to_list, ast_to_dict, symbol_table_to_list, result_to_dict,
    result_to_json, node_label, format_ast,
)


class TestExport(unittest.TestCase):

    def setUp(self):
        self.result = Compiler().analyze("int main() { int a; a = 1 + 2; }")

    def test_tokens_to_list(self):
        tokens = tokens_to_list(self.result.tokens)
        self.assertEqual(tokens[0], {"type": "INT", "lexeme": "int", "line": 1})
        self.assertEqual(tokens[6], {"type": "ID", "lexeme": "a", "line": 1})

    def test_ast_to_dict(self):
        ast = ast_to_dict(self.result.ast)
        self.assertEqual(ast["node"], "Program")
        self.assertEqual(ast["returnType"], "int")

        block = ast["body"]
        self.assertEqual(block["declarations"][0]["varType"], "int")
        self.assertEqual(block["declarations"][0]["variables"][0]["name"], "a")

        value = block["commands"][0]["value"]
        self.assertEqual(value["operator"], "+")
        self.assertEqual(value["dataType"], "int")
        self.assertEqual(value["left"], {"node": "Literal", "value": 1, "line": 1, "dataType": "int"})

    def test_ast_to_dict_without_ast(self):
        self.assertIsNone(ast_to_dict(None))

    def test_symbol_table_to_list(self):
        table = symbol_table_to_list(self.result.symbol_table)
        self.assertEqual([scope["kind"] for scope in table], ["block", "global"])
        self.assertEqual(table[0]["symbols"], [
            {"name": "a", "type": "int", "initialized": True, "declaredAtLine": 1},
        ])

    def test_result_to_json(self):
        result = Compiler().analyze("int main() { int a; a = 1.5; }")
        data = json.loads(result_to_json(result))

        self.assertEqual(set(data), {"tokens", "ast", "symbolTable", "errors", "warnings", "diagnostics"})
        self.assertEqual(len(data["errors"]), 1)
        self.assertEqual(data["diagnostics"][0]["code"], "S001")
        self.assertEqual(data["diagnostics"][0]["text"], data["errors"][0])
        self.assertEqual(data, result_to_dict(result))

    def test_result_to_json_after_fatal_error(self):
        result = Compiler().analyze("int main() { int a a }")
        data = json.loads(result_to_json(result, indent=None))
        self.assertIsNone(data["ast"])
        self.assertEqual(data["diagnostics"][0]["category"], "syntax")

    def test_node_labels(self):
        program = self.result.ast
        declaration = program.body.declarations[0]
        assignment = program.body.commands[0]

        self.assertEqual(node_label(program), "Program <int>")
        self.assertEqual(node_label(program.body), "Block")
        self.assertEqual(node_label(declaration), "Declaration <int>")
        self.assertEqual(node_label(assignment), "Assignment (a)")
        self.assertEqual(node_label(assignment.value), "BinaryOp [+]")
        self.assertEqual(node_label(assignment.value.left), "Literal = 1")

    def test_format_ast(self):
        expected = "\n".join([
            "└── Program <int>",
            "    └── Block",
            "        ├── Declaration <int>",
            "        │   └── Identifier (a)",
            "        └── Assignment (a)",
            "            └── BinaryOp [+]",
            "                ├── Literal = 1",
            "                └── Literal = 2",
        ])
        self.assertEqual(format_ast(self.result.ast), expected)


if __name__ == '__main__':
    unittest.main()
