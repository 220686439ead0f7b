"""
Rule trace collectors.

The parser reports every production it selects to a collector, in
derivation order. The collector decides how (and whether) to display it.

Author: xwest
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from .grammar import Rule, RULES, widest_lhs


# Width of the highest rule number
RULE_NUMBER_WIDTH = len(str(max(RULES)))


class RuleTrace(ABC):
    """Receives one rule per production applied by the parser."""

    @abstractmethod
    def rule(self, rule: Rule):
        """Record the application of a rule."""
        pass

    def close(self):
        """Called after a successful parse, and by callers that abandon a failed one."""
        pass


class FullRuleTrace(RuleTrace):
    """Writes each rule in full, with aligned left- and right-hand sides."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lhs_width = widest_lhs()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def format(self, rule: Rule) -> str:
        number = str(rule.number)
        lhs = rule.lhs.label
        return (
            f"   [{number}]"
            + " " * (1 + RULE_NUMBER_WIDTH - len(number))
            + lhs
            + " " * (2 + self._lhs_width - len(lhs))
            + f"→  {rule.rhs}"
        )

    def rule(self, rule: Rule):
        print(self.format(rule), file=self.stream)


class RuleNumberTrace(RuleTrace):
    """Writes only rule numbers, space separated, ending the run with a newline."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._line_open = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def rule(self, rule: Rule):
        self.stream.write(f"{rule.number} ")
        self._line_open = True

    def close(self):
        """End the current line of numbers, if one was started."""
        if self._line_open:
            self.stream.write("\n")
            self._line_open = False


class RecordingTrace(RuleTrace):
    """Keeps the applied rules in memory."""

    def __init__(self):
        self.rules: List[Rule] = []

    def rule(self, rule: Rule):
        self.rules.append(rule)

    @property
    def numbers(self) -> List[int]:
        return [rule.number for rule in self.rules]

    def replay(self, target: RuleTrace):
        """Forward the recorded rules to another collector, in order."""
        for rule in self.rules:
            target.rule(rule)
        self.rules.clear()


class NullTrace(RuleTrace):
    """Discards the trace."""

    def rule(self, rule: Rule):
        pass
