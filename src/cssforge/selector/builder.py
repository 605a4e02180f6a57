"""CSS selector builder.

A compound selector is built part by part through a chain of calls::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")

Parts must arrive in CSS order (element, id, class, attribute, pseudo-class,
pseudo-element). Element, id and pseudo-element occur at most once; the other
categories may repeat. Two finished selectors are joined with ``combine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssforge.errors import DuplicatePartError, OrderError
from cssforge.selector.model import PartKind, Stringifiable

__all__ = [
    "SelectorBuilder",
    "CombinedSelector",
    "CssSelectorBuilder",
    "css_selector_builder",
]

log = logging.getLogger("cssforge.selector")


class SelectorBuilder:
    """Accumulates the fragments of one compound selector."""

    def __init__(self, kind: PartKind | str, value: str) -> None:
        self._fragments: dict[PartKind, str] = {k: "" for k in PartKind}
        self._seed(PartKind(kind), value)

    def _seed(self, kind: PartKind, value: str) -> None:
        if kind is PartKind.ELEMENT:
            self.set_element(value)
        elif kind is PartKind.ID:
            self.set_id(value)
        elif kind is PartKind.CLASS:
            self.add_class(value)
        elif kind is PartKind.ATTRIBUTE:
            self.add_attribute(value)
        elif kind is PartKind.PSEUDO_CLASS:
            self.add_pseudo_class(value)
        else:
            self.set_pseudo_element(value)

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        if not kind.repeatable and self._fragments[kind]:
            log.debug("Duplicate %s part rejected: %r", kind, value)
            raise DuplicatePartError(kind=kind.value, value=value)

        later = [k for k in PartKind if k.rank > kind.rank and self._fragments[k]]
        if later:
            log.debug(
                "Out-of-order %s part rejected: %r (already have %s)",
                kind,
                value,
                ", ".join(k.value for k in later),
            )
            raise OrderError(kind=kind.value, value=value)

        self._fragments[kind] += kind.render(value)
        log.debug("Added %s part: %r", kind, value)
        return self

    # --- parts ----------------------------------------------------------------

    def set_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def set_id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def add_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, value)

    def add_attribute(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def set_pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    # Chaining aliases that mirror the facade entry points.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector with its parts in CSS order."""
        return "".join(self._fragments[k] for k in PartKind)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two finalized selectors joined by a combinator.

    The combinator is surrounded by one space on each side whatever it is,
    so the descendant combinator (a single space) renders as three spaces.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


class CssSelectorBuilder:
    """Entry points for building selectors. Every call returns a new object."""

    @staticmethod
    def element(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.ELEMENT, value)

    @staticmethod
    def id(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.ID, value)

    @staticmethod
    def class_(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.CLASS, value)

    @staticmethod
    def attr(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.ATTRIBUTE, value)

    @staticmethod
    def pseudo_class(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.PSEUDO_CLASS, value)

    @staticmethod
    def pseudo_element(value: str) -> SelectorBuilder:
        return SelectorBuilder(PartKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(
        selector1: Stringifiable, combinator: str, selector2: Stringifiable
    ) -> CombinedSelector:
        return CombinedSelector(
            left=selector1.stringify(),
            combinator=str(combinator),
            right=selector2.stringify(),
        )


css_selector_builder = CssSelectorBuilder()
