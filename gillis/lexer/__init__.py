"""
Gillis Lexer Package

Implements the lexical analyzer for the Gillis teaching language.
Characters are consumed on demand and classified by longest match into
keywords, program names, variable names, numbers and operators.

Key Features:
- Pull-based tokenization (one Symbol per next_token() call)
- Short ($ ...) and long (!! ... !!) comments
- Line and column tracking for diagnostics

Author: xwest
"""

from .tokens import Symbol, LexicalUnit, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Symbol",
    "LexicalUnit",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
