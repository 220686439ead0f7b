"""
Variable table for Gillis programs.

Records every distinct variable name together with the symbol of its
first occurrence. No scoping or typing is involved: Gillis variables are
global and untyped.

Author: xwest
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..lexer.tokens import Symbol, LexicalUnit


@dataclass
class VariableTable:
    """First occurrence of each variable, reported in lexicographic order."""
    entries: Dict[str, Symbol] = field(default_factory=dict)

    def record(self, symbol: Symbol) -> bool:
        """
        Record a VARNAME symbol if its name has not been seen yet.

        Returns:
            True if the symbol was the first occurrence of its name
        """
        if symbol.kind != LexicalUnit.VARNAME:
            return False

        if symbol.value in self.entries:
            return False

        self.entries[symbol.value] = symbol
        return True

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the first occurrence of a variable, if any."""
        return self.entries.get(name)

    def first_line(self, name: str) -> Optional[int]:
        symbol = self.entries.get(name)
        return symbol.line if symbol is not None else None

    def items(self) -> List[Tuple[str, int]]:
        """(name, first line) pairs sorted by name."""
        return [(name, self.entries[name].line) for name in sorted(self.entries)]

    def __contains__(self, name: str) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "\n".join(f"{name}\t{line}" for name, line in self.items())


def collect_variables(symbols: Iterable[Symbol]) -> VariableTable:
    """Build the variable table from a token sequence (e.g. a Lexer)."""
    table = VariableTable()
    for symbol in symbols:
        table.record(symbol)
    return table
