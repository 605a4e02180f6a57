"""Error hierarchy for cssforge."""
from __future__ import annotations


class CssForgeError(Exception):
    """Base error for all cssforge errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(CssForgeError):
    """A selector part was rejected by the builder."""

    default_message = "Invalid selector part"

    def __init__(
        self,
        message: str | None = None,
        *,
        kind: str = "",
        value: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message or self.default_message, cause=cause)
        self.kind = kind
        self.value = value


class DuplicatePartError(SelectorError):
    """Element, id or pseudo-element supplied a second time."""

    default_message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )


class OrderError(SelectorError):
    """A part was supplied after a part of a later category."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(CssForgeError):
    """JSON text could not be produced or turned back into an object."""
