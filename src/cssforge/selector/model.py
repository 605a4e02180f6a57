"""Selector model: part categories and combinator tokens."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol


class PartKind(StrEnum):
    """A selector-part category.

    Members are declared in the order CSS requires them to appear:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of the category in the fixed part order (0-based)."""
        return list(PartKind).index(self)

    @property
    def repeatable(self) -> bool:
        """True if the category may occur several times in one selector."""
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        """Wrap *value* in the category's prefix and suffix."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_REPEATABLE = frozenset({PartKind.CLASS, PartKind.ATTRIBUTE, PartKind.PSEUDO_CLASS})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Stringifiable(Protocol):
    """Anything that renders itself as a finalized selector string."""

    def stringify(self) -> str: ...
