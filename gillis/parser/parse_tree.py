"""
Parse tree definitions for Gillis.

A parse tree is one of three cases:

- Leaf: a matched terminal Symbol
- Empty: the marker of an empty (epsilon) derivation
- Node: a grammar non-terminal with its ordered children

The three cases share no base class; consumers dispatch on the concrete
type and must handle all of them.

Author: xwest
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from ..lexer.tokens import Symbol
from .grammar import NonTerminal


@dataclass(frozen=True)
class Leaf:
    """A matched terminal."""
    symbol: Symbol

    def __str__(self) -> str:
        return f"{self.symbol.kind.name}({self.symbol.value!r})"


@dataclass(frozen=True)
class Empty:
    """The empty derivation."""

    def __str__(self) -> str:
        return "ε"


@dataclass(frozen=True)
class Node:
    """A non-terminal and the right-hand side chosen for it."""
    label: NonTerminal
    children: Tuple["ParseTree", ...] = ()

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "children", tuple(self.children))

    def __str__(self) -> str:
        inner = ", ".join(str(child) for child in self.children)
        return f"{self.label}({inner})"


ParseTree = Union[Leaf, Empty, Node]


def walk(tree: ParseTree) -> Iterator[ParseTree]:
    """Iterate over a tree in pre-order."""
    stack = [tree]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Node):
            stack.extend(reversed(current.children))


def leaves(tree: ParseTree) -> List[Symbol]:
    """Return the matched symbols of a tree, left to right."""
    return [item.symbol for item in walk(tree) if isinstance(item, Leaf)]


def labels(tree: ParseTree) -> List[NonTerminal]:
    """Return the non-terminals of a tree in pre-order."""
    return [item.label for item in walk(tree) if isinstance(item, Node)]


def height(tree: ParseTree) -> int:
    """Number of levels in the tree; a single leaf has height 1."""
    deepest = 0
    stack = [(tree, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Node):
            stack.extend((child, depth + 1) for child in current.children)
        elif not isinstance(current, (Leaf, Empty)):
            raise TypeError(f"Not a parse tree: {current!r}")
        deepest = max(deepest, depth)
    return deepest
