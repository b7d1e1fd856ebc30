"""
Tests for the MiniC type lattice: promotion and assignment compatibility.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minic.analyzer.types import (
    DataType, is_assignable, is_returnable, promote, operand_violation,
)

INT, FLOAT, CHAR, VOID, ERROR = (
    DataType.INT, DataType.FLOAT, DataType.CHAR, DataType.VOID, DataType.ERROR,
)


class TestPromotion(unittest.TestCase):

    def test_arithmetic_promotion(self):
        self.assertEqual(promote("+", INT, FLOAT), FLOAT)
        self.assertEqual(promote("*", FLOAT, CHAR), FLOAT)
        self.assertEqual(promote("-", INT, CHAR), INT)
        self.assertEqual(promote("/", CHAR, CHAR), CHAR)
        self.assertEqual(promote("+", INT, INT), INT)

    def test_modulo_requires_int(self):
        self.assertEqual(promote("%", INT, INT), INT)
        self.assertEqual(promote("%", INT, FLOAT), ERROR)
        self.assertEqual(promote("%", CHAR, INT), ERROR)
        self.assertIsNotNone(operand_violation("%", INT, FLOAT))
        self.assertIsNone(operand_violation("%", INT, INT))

    def test_error_is_contagious(self):
        self.assertEqual(promote("+", ERROR, INT), ERROR)
        self.assertEqual(promote("*", FLOAT, ERROR), ERROR)
        # Already-reported errors are not reported again
        self.assertIsNone(operand_violation("%", ERROR, FLOAT))


class TestCompatibility(unittest.TestCase):

    def test_identical_types(self):
        for data_type in (INT, FLOAT, CHAR):
            self.assertTrue(is_assignable(data_type, data_type))

    def test_widening_to_float(self):
        self.assertTrue(is_assignable(FLOAT, INT))
        self.assertTrue(is_assignable(FLOAT, CHAR))

    def test_no_narrowing(self):
        self.assertFalse(is_assignable(INT, FLOAT))
        self.assertFalse(is_assignable(CHAR, INT))
        self.assertFalse(is_assignable(INT, CHAR))

    def test_return_widening(self):
        self.assertTrue(is_returnable(FLOAT, INT))
        self.assertTrue(is_returnable(VOID, VOID))
        self.assertFalse(is_returnable(INT, FLOAT))
        self.assertFalse(is_returnable(INT, VOID))
        self.assertFalse(is_returnable(VOID, INT))

    def test_from_keyword(self):
        self.assertEqual(DataType.from_keyword("char"), CHAR)
        self.assertEqual(str(FLOAT), "float")


if __name__ == '__main__':
    unittest.main()
