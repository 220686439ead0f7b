"""
Error handling for the Gillis parser.

A syntax error records the symbol that was found, the set of lexical
units that would have been admissible at that point and, when the error
arose while choosing a production, the non-terminal being derived.

Author: xwest
"""

from typing import Iterable, List, Optional, FrozenSet

from ..lexer.tokens import Symbol, LexicalUnit, SourceLocation, KEYWORDS
from ..lexer.errors import Diagnostic, ErrorRecovery
from .grammar import NonTerminal


class ParseError(Exception):
    """
    Exception raised at the first syntax error.

    Parsing never continues past it.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        found: Symbol,
        expected: Iterable[LexicalUnit],
        nonterminal: Optional[NonTerminal] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.found = found
        self.expected: FrozenSet[LexicalUnit] = frozenset(expected)
        self.nonterminal = nonterminal
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Hints attached to syntax errors.

    Gillis stops at the first error, so these only help the user fix it.
    """

    MISSING_TOKEN_HINTS = {
        LexicalUnit.COLON: "Add a colon ':' after the instruction",
        LexicalUnit.RPAREN: "Add a closing parenthesis ')'",
        LexicalUnit.RBRACK: "Add a closing brace '}' after the condition",
        LexicalUnit.LBRACK: "Conditions are written between braces: { ... }",
        LexicalUnit.END: "Close the block with END",
        LexicalUnit.ASSIGN: "Add an assignment operator '='",
        LexicalUnit.ELSE: "An IF needs an ELSE branch (it may be empty)",
    }

    @staticmethod
    def suggest(found: Symbol, expected: FrozenSet[LexicalUnit]) -> List[str]:
        """Suggest fixes for an unexpected symbol."""
        suggestions = []

        # A misspelled keyword is lexed as a program name
        if found.kind == LexicalUnit.PROGNAME:
            for word in ErrorRecovery.suggest_keyword_corrections(found.value):
                if KEYWORDS[word] in expected:
                    suggestions.append(f"Did you mean '{word}'?")

        if len(expected) == 1:
            (kind,) = expected
            hint = SyntaxErrorRecovery.MISSING_TOKEN_HINTS.get(kind)
            if hint:
                suggestions.append(hint)

        return suggestions


# Parser error codes
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "No production applies",
    "P003": "Unexpected input after END",
}


def describe(found: Symbol) -> str:
    """Human-readable description of a symbol."""
    if found.kind == LexicalUnit.EOS:
        return "end of input"
    return f"{found.kind.name} '{found.value}'"


def format_expected(expected: Iterable[LexicalUnit]) -> str:
    """List the expected lexical units in a stable order."""
    names = sorted(kind.name for kind in expected)
    if len(names) == 1:
        return names[0]
    return "one of " + ", ".join(names)


def create_unexpected_token_error(expected: LexicalUnit, found: Symbol,
                                  location: SourceLocation) -> ParseError:
    """Create an error for a terminal that does not match the look-ahead."""
    expected_set = frozenset({expected})
    return ParseError(
        message=f"Expected {expected.name}, found {describe(found)} on line {found.line}",
        location=location,
        found=found,
        expected=expected_set,
        code="P001",
        help_text=f"The parser expected to see {expected.name} at this position.",
        suggestions=SyntaxErrorRecovery.suggest(found, expected_set) or None
    )


def create_no_production_error(nonterminal: NonTerminal, expected: FrozenSet[LexicalUnit],
                               found: Symbol, location: SourceLocation) -> ParseError:
    """Create an error for a look-ahead outside a non-terminal's selection set."""
    return ParseError(
        message=(f"Unexpected {describe(found)} on line {found.line} "
                 f"while parsing {nonterminal.label}"),
        location=location,
        found=found,
        expected=expected,
        nonterminal=nonterminal,
        code="P002",
        help_text=f"Expected {format_expected(expected)}.",
        suggestions=SyntaxErrorRecovery.suggest(found, expected) or None
    )


def create_trailing_input_error(found: Symbol, location: SourceLocation) -> ParseError:
    """Create an error for input left over after the program's END."""
    return ParseError(
        message=f"Unexpected {describe(found)} on line {found.line} after the end of the program",
        location=location,
        found=found,
        expected=frozenset({LexicalUnit.EOS}),
        code="P003",
        help_text="Nothing may follow the END that closes the program.",
        suggestions=["Remove the trailing input", "Check for an END closing a block too early"]
    )
