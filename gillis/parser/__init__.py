"""
Gillis Parser Package

Implements an LL(1) recursive-descent parser for the Gillis language.
Produces a parse tree and reports every grammar rule it applies.

Key Features:
- One method per non-terminal, dispatching on a single look-ahead
- Parse trees made of Leaf, Empty and Node values
- Pluggable rule trace (full rules, rule numbers, recorded, or none)
- Fail-fast diagnostics listing the admissible lexical units

Author: xwest
"""

from .grammar import NonTerminal, Rule, RULES
from .parse_tree import ParseTree, Leaf, Empty, Node, walk, leaves, labels, height
from .trace import RuleTrace, FullRuleTrace, RuleNumberTrace, RecordingTrace, NullTrace
from .parser import Parser, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # Grammar
    "NonTerminal", "Rule", "RULES",

    # Parse trees
    "ParseTree", "Leaf", "Empty", "Node",
    "walk", "leaves", "labels", "height",

    # Rule trace
    "RuleTrace", "FullRuleTrace", "RuleNumberTrace", "RecordingTrace", "NullTrace",

    # Error handling
    "ParseError",
]
