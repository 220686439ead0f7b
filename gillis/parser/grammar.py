"""
Grammar of the Gillis language.

Holds the non-terminals, the numbered production rules reported in the
rule trace, and the look-ahead sets the parser dispatches on.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict

from ..lexer.tokens import LexicalUnit


class NonTerminal(Enum):
    """Variables of the Gillis grammar."""
    Program = "Program"
    Code = "Code"
    Instruction = "Instruction"
    Assign = "Assign"
    ExprArith = "ExprArith"
    Op = "Op"
    If = "If"
    Cond = "Cond"
    Comp = "Comp"
    While = "While"
    Output = "Output"
    Input = "Input"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """The non-terminal surrounded by angle brackets, e.g. <Code>."""
        return f"<{self.value}>"


@dataclass(frozen=True)
class Rule:
    """A numbered production rule, as shown in the rule trace."""
    number: int
    lhs: NonTerminal
    rhs: str

    def __str__(self) -> str:
        return f"[{self.number}] {self.lhs.label} → {self.rhs}"


_RULE_TABLE = [
    (NonTerminal.Program, "LET [ProgName] BE <Code> END"),
    (NonTerminal.Code, "<Instruction> : <Code>"),
    (NonTerminal.Code, "ε"),
    (NonTerminal.Instruction, "<Assign>"),
    (NonTerminal.Instruction, "<If>"),
    (NonTerminal.Instruction, "<While>"),
    (NonTerminal.Instruction, "<Output>"),
    (NonTerminal.Instruction, "<Input>"),
    (NonTerminal.Assign, "[VarName] = <ExprArith>"),
    (NonTerminal.ExprArith, "[VarName]"),
    (NonTerminal.ExprArith, "[Number]"),
    (NonTerminal.ExprArith, "( <ExprArith> )"),
    (NonTerminal.ExprArith, "- <ExprArith>"),
    (NonTerminal.ExprArith, "<ExprArith> <Op> <ExprArith>"),
    (NonTerminal.Op, "+"),
    (NonTerminal.Op, "-"),
    (NonTerminal.Op, "*"),
    (NonTerminal.Op, "/"),
    (NonTerminal.If, "IF { <Cond> } THEN <Code> ELSE <Code> END"),
    (NonTerminal.Cond, "<ExprArith> <Comp> <ExprArith>"),
    (NonTerminal.Comp, "=="),
    (NonTerminal.Comp, "<="),
    (NonTerminal.Comp, "<"),
    (NonTerminal.While, "WHILE { <Cond> } REPEAT <Code> END"),
    (NonTerminal.Output, "OUT ( [VarName] )"),
    (NonTerminal.Input, "IN ( [VarName] )"),
]

# Rules indexed by their number (1-based)
RULES: Dict[int, Rule] = {
    number: Rule(number, lhs, rhs)
    for number, (lhs, rhs) in enumerate(_RULE_TABLE, start=1)
}

# Rule number selected by each look-ahead kind, per non-terminal.
# A Code list ends where its enclosing construct continues: END closes the
# program body, a WHILE body and an ELSE branch; ELSE closes a THEN branch.
_INSTRUCTION_STARTS = {
    LexicalUnit.VARNAME: 2,
    LexicalUnit.IF: 2,
    LexicalUnit.WHILE: 2,
    LexicalUnit.OUT: 2,
    LexicalUnit.IN: 2,
}

CODE_RULES = {**_INSTRUCTION_STARTS, LexicalUnit.END: 3}
THEN_CODE_RULES = {**_INSTRUCTION_STARTS, LexicalUnit.ELSE: 3}

INSTRUCTION_RULES = {
    LexicalUnit.VARNAME: 4,
    LexicalUnit.IF: 5,
    LexicalUnit.WHILE: 6,
    LexicalUnit.OUT: 7,
    LexicalUnit.IN: 8,
}

EXPR_ARITH_RULES = {
    LexicalUnit.VARNAME: 10,
    LexicalUnit.NUMBER: 11,
    LexicalUnit.LPAREN: 12,
    LexicalUnit.MINUS: 13,
}

BINARY_EXPR_RULE = 14

OP_RULES = {
    LexicalUnit.PLUS: 15,
    LexicalUnit.MINUS: 16,
    LexicalUnit.TIMES: 17,
    LexicalUnit.DIVIDE: 18,
}

COMP_RULES = {
    LexicalUnit.EQUAL: 21,
    LexicalUnit.SMALEQ: 22,
    LexicalUnit.SMALLER: 23,
}



def widest_lhs() -> int:
    """Width of the widest left-hand side label, used to align the full trace."""
    return max(len(rule.lhs.label) for rule in RULES.values())
