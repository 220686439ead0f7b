"""
Tests for the variable table.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gillis.lexer.lexer import Lexer
from gillis.lexer.tokens import Symbol, LexicalUnit
from gillis.analyzer.symbol_table import VariableTable, collect_variables


class TestVariableTable(unittest.TestCase):
    """Test first-occurrence bookkeeping."""

    def test_first_occurrence_wins(self):
        table = VariableTable()
        self.assertTrue(table.record(Symbol(LexicalUnit.VARNAME, "x", 3, 1)))
        self.assertFalse(table.record(Symbol(LexicalUnit.VARNAME, "x", 7, 1)))
        self.assertEqual(table.first_line("x"), 3)

    def test_only_variables_are_recorded(self):
        table = VariableTable()
        self.assertFalse(table.record(Symbol(LexicalUnit.PROGNAME, "P", 1, 5)))
        self.assertFalse(table.record(Symbol(LexicalUnit.NUMBER, 3, 1, 9)))
        self.assertEqual(len(table), 0)
        self.assertIsNone(table.lookup("P"))

    def test_collect_from_lexer(self):
        """Test building the table straight from the token stream."""
        source = "LET P BE\n  zeta = 1 :\n  alpha = zeta :\n  OUT(alpha) :\n  IN(beta) :\nEND"
        table = collect_variables(Lexer(source))

        self.assertEqual(list(table), ["alpha", "beta", "zeta"])
        self.assertEqual(table.items(), [("alpha", 3), ("beta", 5), ("zeta", 2)])
        self.assertIn("zeta", table)
        self.assertEqual(str(table), "alpha\t3\nbeta\t5\nzeta\t2")

    def test_sorting_is_lexicographic(self):
        table = collect_variables(Lexer("b10 b2 a"))
        self.assertEqual(list(table), ["a", "b10", "b2"])


if __name__ == '__main__':
    unittest.main()
