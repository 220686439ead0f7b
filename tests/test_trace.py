"""
Tests for the rule trace collectors.

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gillis.lexer.tokens import BINARY_OPERATORS
from gillis.parser.grammar import RULES, OP_RULES, NonTerminal, widest_lhs
from gillis.parser.trace import FullRuleTrace, RuleNumberTrace, RecordingTrace, NullTrace
from gillis.parser.parser import parse_string
from gillis.parser.errors import ParseError


class TestRuleTable(unittest.TestCase):
    """Test the numbered grammar rules."""

    def test_rule_numbers_are_contiguous(self):
        self.assertEqual(sorted(RULES), list(range(1, 27)))

    def test_rule_left_hand_sides(self):
        self.assertEqual(RULES[1].lhs, NonTerminal.Program)
        self.assertEqual(RULES[3].rhs, "ε")
        self.assertEqual(RULES[14].rhs, "<ExprArith> <Op> <ExprArith>")
        self.assertEqual(RULES[25].lhs, NonTerminal.Output)
        self.assertEqual(RULES[26].lhs, NonTerminal.Input)

    def test_op_rules_cover_binary_operators(self):
        """Test that every binary operator has an <Op> production."""
        self.assertEqual(frozenset(OP_RULES), BINARY_OPERATORS)
        self.assertEqual(sorted(OP_RULES.values()), [15, 16, 17, 18])

    def test_widest_lhs(self):
        self.assertEqual(widest_lhs(), len("<Instruction>"))

    def test_nonterminal_display(self):
        self.assertEqual(str(NonTerminal.ExprArith), "ExprArith")
        self.assertEqual(NonTerminal.ExprArith.label, "<ExprArith>")


class TestTraceCollectors(unittest.TestCase):
    """Test how each collector displays the rules."""

    def test_full_rule_format(self):
        """Test alignment of rule numbers and left-hand sides."""
        trace = FullRuleTrace(io.StringIO())
        self.assertEqual(
            trace.format(RULES[1]),
            "   [1]  <Program>      →  LET [ProgName] BE <Code> END"
        )
        self.assertEqual(
            trace.format(RULES[14]),
            "   [14] <ExprArith>    →  <ExprArith> <Op> <ExprArith>"
        )

    def test_full_rule_output(self):
        """Test one line is written per rule."""
        out = io.StringIO()
        parse_string("LET P BE END", FullRuleTrace(out))
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("   [1]  <Program>"))
        self.assertTrue(lines[1].endswith("→  ε"))

    def test_rule_number_output(self):
        """Test the compact trace ends with a newline."""
        out = io.StringIO()
        parse_string("LET P BE x = 3 : END", RuleNumberTrace(out))
        self.assertEqual(out.getvalue(), "1 2 4 9 11 3 \n")

    def test_rule_number_output_on_error(self):
        """Test the compact trace is not terminated after a failure."""
        out = io.StringIO()
        with self.assertRaises(ParseError):
            parse_string("LET P BE x = :", RuleNumberTrace(out))
        self.assertEqual(out.getvalue(), "1 2 4 9 ")

    def test_rule_number_close_ends_partial_line(self):
        """Test closing a failed trace ends its line once, and an empty one not at all."""
        out = io.StringIO()
        trace = RuleNumberTrace(out)
        with self.assertRaises(ParseError):
            parse_string("LET P BE x = :", trace)
        trace.close()
        trace.close()
        self.assertEqual(out.getvalue(), "1 2 4 9 \n")

        untouched = io.StringIO()
        RuleNumberTrace(untouched).close()
        self.assertEqual(untouched.getvalue(), "")

    def test_recording_replay(self):
        """Test forwarding recorded rules to another collector."""
        held = RecordingTrace()
        held.rule(RULES[10])
        held.rule(RULES[15])

        target = RecordingTrace()
        target.rule(RULES[14])
        held.replay(target)

        self.assertEqual(target.numbers, [14, 10, 15])
        self.assertEqual(held.numbers, [])

    def test_null_trace(self):
        """Test the silent collector accepts rules."""
        trace = NullTrace()
        trace.rule(RULES[1])
        trace.close()


if __name__ == '__main__':
    unittest.main()
