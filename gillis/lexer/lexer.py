"""
Gillis Lexer - turns a character stream into Symbols, one at a time.

The parser pulls tokens on demand through next_token(), so the lexer
never reads further ahead than one character.

Author: xwest
"""

from io import StringIO
from typing import Iterator, List, Optional, TextIO, Union

from .tokens import (
    Symbol, LexicalUnit, SourceLocation, KEYWORDS, OPERATORS,
    SHORT_COMMENT, LONG_COMMENT
)
from .errors import (
    create_invalid_character_error,
    create_unterminated_comment_error, create_read_past_end_error,
    create_undecodable_input_error
)


class Lexer:
    """
    Gillis lexical analyzer.

    Reads characters lazily from a string or text stream and classifies
    them by longest match into keywords, names, numbers and operators,
    skipping layout and comments.
    """

    def __init__(self, source: Union[str, TextIO], filename: str = "<unknown>"):
        """
        Initialize the lexer.

        Args:
            source: Source code string or readable text stream
            filename: Name of source file for error reporting
        """
        self.stream: TextIO = StringIO(source) if isinstance(source, str) else source
        self.filename = filename
        self.line = 1
        self.column = 1
        self._pending: Optional[str] = None
        self._finished = False

    def next_token(self) -> Symbol:
        """
        Return the next token of the stream.

        The EOS symbol is returned exactly once, after which the stream
        is closed.

        Raises:
            LexerError: On a character outside the Gillis alphabet or
                input that cannot be decoded, on an unterminated comment,
                and on a request made after EOS
        """
        if self._finished:
            raise create_read_past_end_error(self._location())

        self._skip_layout_and_comments()

        line, column = self.line, self.column
        char = self._peek()

        if char == "":
            self._finished = True
            self.close()
            return Symbol(LexicalUnit.EOS, None, line, column)

        if self._is_digit(char):
            return self._tokenize_number(line, column)

        if self._is_identifier_start(char):
            return self._tokenize_identifier_or_keyword(line, column)

        return self._tokenize_operator(line, column)

    def tokenize(self) -> List[Symbol]:
        """
        Tokenize the rest of the stream.

        Returns:
            List of symbols including the EOS symbol
        """
        return list(self)

    def __iter__(self) -> Iterator[Symbol]:
        while not self._finished:
            yield self.next_token()

    def close(self):
        """Release the underlying character stream."""
        if not self.stream.closed:
            self.stream.close()

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @property
    def finished(self) -> bool:
        """Whether the EOS symbol has already been returned."""
        return self._finished

    def _tokenize_number(self, line: int, column: int) -> Symbol:
        """Tokenize a non-negative integer literal."""
        digits = []
        while self._is_digit(self._peek()):
            digits.append(self._advance())

        return Symbol(LexicalUnit.NUMBER, int("".join(digits)), line, column)

    def _tokenize_identifier_or_keyword(self, line: int, column: int) -> Symbol:
        """
        Tokenize a keyword, program name or variable name.

        Keywords are matched exactly. Any other name starting with an
        uppercase letter is a program name, anything else a variable name.
        """
        chars = [self._advance()]
        while self._is_identifier_continue(self._peek()):
            chars.append(self._advance())

        lexeme = "".join(chars)

        if lexeme in KEYWORDS:
            kind = KEYWORDS[lexeme]
        elif lexeme[0].isupper():
            kind = LexicalUnit.PROGNAME
        else:
            kind = LexicalUnit.VARNAME

        return Symbol(kind, lexeme, line, column)

    def _tokenize_operator(self, line: int, column: int) -> Symbol:
        """Tokenize an operator or punctuation, preferring two-character forms."""
        char = self._advance()

        if char in "=<" and self._peek() == "=":
            lexeme = char + self._advance()
        else:
            lexeme = char

        if lexeme not in OPERATORS:
            raise create_invalid_character_error(
                char,
                SourceLocation(self.filename, line, column)
            )

        return Symbol(OPERATORS[lexeme], lexeme, line, column)

    def _skip_layout_and_comments(self):
        """Skip whitespace, short comments and long comments."""
        while True:
            char = self._peek()

            if char != "" and char.isspace():
                self._advance()
                continue

            if char == SHORT_COMMENT:
                while self._peek() not in ("", "\n"):
                    self._advance()
                continue

            if char == LONG_COMMENT[0]:
                start = self._location()
                self._advance()
                if self._peek() != LONG_COMMENT[1]:
                    # A lone '!' is not part of the alphabet
                    raise create_invalid_character_error(char, start)
                self._advance()
                self._skip_long_comment(start)
                continue

            break

    def _skip_long_comment(self, start: SourceLocation):
        while True:
            char = self._advance()
            if char == "":
                raise create_unterminated_comment_error(start)
            if char == LONG_COMMENT[0] and self._peek() == LONG_COMMENT[1]:
                self._advance()
                return

    def _is_digit(self, char: str) -> bool:
        return char != "" and char in "0123456789"

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start a name."""
        return char.isascii() and char.isalpha()

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue a name."""
        return char != "" and char.isascii() and (char.isalnum() or char == "_")

    def _peek(self) -> str:
        """Return the next character without consuming it ('' at end of input)."""
        if self._pending is None:
            try:
                self._pending = self.stream.read(1)
            except UnicodeDecodeError as e:
                raise create_undecodable_input_error(e.reason, self._location()) from e
        return self._pending

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self._peek()
        self._pending = None
        if char == "\n":
            self.line += 1
            self.column = 1
        elif char:
            self.column += 1
        return char

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column)


def tokenize_string(source: str, filename: str = "<string>") -> List[Symbol]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of symbols ending with EOS

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Symbol]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return Lexer(f, filepath).tokenize()
