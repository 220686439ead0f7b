"""
Gillis Analyzer Package

Lexical and syntax analysis for Gillis (a.k.a. PascalMaisPresque), a
small imperative teaching language: LET/BE/END programs with
assignments, IF, WHILE, OUT and IN instructions.

Architecture:
    gillis/
    ├── lexer/           # Pull-based tokenization
    ├── parser/          # LL(1) recursive descent and parse trees
    ├── analyzer/        # Variable table (first occurrences)
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Symbol, LexicalUnit, LexerError
from .parser import Parser, ParseError, NonTerminal, parse_string, parse_file
from .analyzer import VariableTable, collect_variables

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Symbol",
    "LexicalUnit",
    "NonTerminal",
    "VariableTable",

    # Convenience functions
    "parse_string",
    "parse_file",
    "collect_variables",

    # Errors
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
