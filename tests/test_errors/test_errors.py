"""Tests for cssforge.errors."""
from __future__ import annotations

from cssforge.errors import (
    CssForgeError,
    DuplicatePartError,
    OrderError,
    SelectorError,
    SerializationError,
)


class TestHierarchy:
    def test_base_is_exception(self) -> None:
        assert issubclass(CssForgeError, Exception)

    def test_selector_errors(self) -> None:
        assert issubclass(SelectorError, CssForgeError)
        assert issubclass(DuplicatePartError, SelectorError)
        assert issubclass(OrderError, SelectorError)

    def test_serialization_error(self) -> None:
        assert issubclass(SerializationError, CssForgeError)
        assert not issubclass(SerializationError, SelectorError)


class TestMessages:
    def test_cause(self) -> None:
        cause = ValueError("bad")
        err = CssForgeError("boom", cause=cause)
        assert str(err) == "boom"
        assert err.cause is cause

    def test_default_messages(self) -> None:
        assert str(DuplicatePartError()) == (
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )
        assert str(OrderError()) == (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )

    def test_custom_message(self) -> None:
        err = OrderError("nope", kind="id", value="x")
        assert str(err) == "nope"
        assert (err.kind, err.value) == ("id", "x")
