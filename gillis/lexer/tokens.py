"""
Token definitions for the Gillis lexer.

This module defines every lexical unit of the Gillis language:
- Keywords (LET, BE, END, IF, ...)
- Operators and punctuation
- Program names, variable names and numbers
- Internal markers used by the parser (BINOP, EPSILON, EOS)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class LexicalUnit(Enum):
    """
    Enumeration of all terminal kinds in Gillis.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Keywords
    # ========================================================================
    LET = auto()                    # LET (program header)
    BE = auto()                     # BE
    END = auto()                    # END (closes program and blocks)
    IF = auto()                     # IF
    THEN = auto()                   # THEN
    ELSE = auto()                   # ELSE
    WHILE = auto()                  # WHILE
    REPEAT = auto()                 # REPEAT
    OUT = auto()                    # OUT (print a variable)
    IN = auto()                     # IN (read a variable)

    # ========================================================================
    # Operators and Punctuation
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    TIMES = auto()                  # *
    DIVIDE = auto()                 # /
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACK = auto()                 # {
    RBRACK = auto()                 # }
    EQUAL = auto()                  # ==
    SMALLER = auto()                # <
    SMALEQ = auto()                 # <=
    COLON = auto()                  # : (instruction terminator)

    # ========================================================================
    # Names and Literals
    # ========================================================================
    PROGNAME = auto()               # Factorial, MyProgram
    VARNAME = auto()                # x, count2
    NUMBER = auto()                 # 0, 42

    # ========================================================================
    # Parser Markers
    # ========================================================================
    BINOP = auto()                  # Any binary arithmetic operator
    EPSILON = auto()                # Empty derivation
    EOS = auto()                    # End of stream


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column})"


@dataclass(frozen=True)
class Symbol:
    """
    A lexical token of a Gillis program.

    The value is the matched text for keywords, names and punctuation,
    the integer value for NUMBER, and None for EOS.
    """
    kind: LexicalUnit
    value: Any
    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"token: {str(self.value):<15} lexical unit: {self.kind.name}"

    def __repr__(self) -> str:
        return f"Symbol({self.kind.name}, {self.value!r}, {self.line}, {self.column})"

    @property
    def is_keyword(self) -> bool:
        """Check if this symbol is a keyword."""
        return self.kind in KEYWORDS.values()

    @property
    def is_binary_operator(self) -> bool:
        """Check if this symbol can join two arithmetic operands."""
        return self.kind in BINARY_OPERATORS

    @property
    def is_terminal(self) -> bool:
        """Check if this symbol stands for a real piece of source text."""
        return self.kind not in (LexicalUnit.BINOP, LexicalUnit.EPSILON, LexicalUnit.EOS)


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "LET": LexicalUnit.LET,
    "BE": LexicalUnit.BE,
    "END": LexicalUnit.END,
    "IF": LexicalUnit.IF,
    "THEN": LexicalUnit.THEN,
    "ELSE": LexicalUnit.ELSE,
    "WHILE": LexicalUnit.WHILE,
    "REPEAT": LexicalUnit.REPEAT,
    "OUT": LexicalUnit.OUT,
    "IN": LexicalUnit.IN,
}

# Two-character operators must be tried before their one-character prefixes
OPERATORS = {
    "==": LexicalUnit.EQUAL,
    "<=": LexicalUnit.SMALEQ,
    "=": LexicalUnit.ASSIGN,
    "<": LexicalUnit.SMALLER,
    "+": LexicalUnit.PLUS,
    "-": LexicalUnit.MINUS,
    "*": LexicalUnit.TIMES,
    "/": LexicalUnit.DIVIDE,
    "(": LexicalUnit.LPAREN,
    ")": LexicalUnit.RPAREN,
    "{": LexicalUnit.LBRACK,
    "}": LexicalUnit.RBRACK,
    ":": LexicalUnit.COLON,
}

BINARY_OPERATORS = frozenset({
    LexicalUnit.PLUS,
    LexicalUnit.MINUS,
    LexicalUnit.TIMES,
    LexicalUnit.DIVIDE,
})

# Comment delimiters
SHORT_COMMENT = "$"
LONG_COMMENT = "!!"
