"""
Error handling for the Gillis lexer.

Provides error reporting with source location information
and keyword suggestions for misspelled input.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [
            f"{self.severity.upper()}: {self.message}",
            f"  --> {self.location}",
        ]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """
    Exception raised when the lexer meets input it cannot tokenize.

    Lexical errors are fatal: the stream is abandoned at the first one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        text: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.text = text
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Helpers for explaining errors.

    There is no multi-error recovery in Gillis; these only produce hints.
    """

    @staticmethod
    def suggest_keyword_corrections(word: str, max_distance: int = 2) -> List[str]:
        """Suggest keywords close to a misspelled word using edit distance."""
        from .tokens import KEYWORDS

        candidates = []
        for keyword in KEYWORDS.keys():
            distance = ErrorRecovery._edit_distance(word.upper(), keyword)
            if distance <= max_distance:
                candidates.append((distance, keyword))

        return [keyword for _, keyword in sorted(candidates)][:3]

    @staticmethod
    def _edit_distance(word: str, target: str) -> int:
        """Levenshtein distance, kept in a single row over the target."""
        row = list(range(len(target) + 1))
        for i, char in enumerate(word, start=1):
            # diagonal holds the row's previous value at j - 1
            diagonal, row[0] = row[0], i
            for j, expected in enumerate(target, start=1):
                diagonal, row[j] = row[j], min(
                    row[j] + 1,
                    row[j - 1] + 1,
                    diagonal + (char != expected),
                )
        return row[-1]


# Lexer error codes
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated comment",
    "L003": "Read past end of stream",
    "L004": "Undecodable input",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character outside the Gillis alphabet."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Gillis source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    suggestions = []
    if char == "_":
        suggestions.append("Names must start with a letter")
    elif char == "!":
        suggestions.append("Long comments are written !! ... !!")

    return LexerError(
        message=f"Invalid character: '{char}' on line {location.line}",
        location=location,
        text=char,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    """Create an error for a long comment that is never closed."""
    return LexerError(
        message="Unterminated comment",
        location=location,
        text="!!",
        code="L002",
        help_text="Long comments must be closed with '!!'.",
        suggestions=["Add a closing '!!'"]
    )


def create_read_past_end_error(location: SourceLocation) -> LexerError:
    """Create an error for a token request made after EOS was returned."""
    return LexerError(
        message="No token left: end of stream already reached",
        location=location,
        code="L003",
        help_text="The end-of-stream token is returned exactly once."
    )


def create_undecodable_input_error(reason: str, location: SourceLocation) -> LexerError:
    """Create an error for source bytes the stream cannot decode."""
    return LexerError(
        message=f"Cannot decode source text near line {location.line}: {reason}",
        location=location,
        code="L004",
        help_text="Gillis source files must be saved as UTF-8 text."
    )
