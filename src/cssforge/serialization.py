"""JSON helpers: dump objects to JSON and rebuild typed objects from it.

Objects are written as their own data attributes. Reading goes the other way:
the decoded mapping becomes the instance data of the requested type without
running its ``__init__``, so the instance gets its behaviour from the type and
its state from the JSON text::

    r = from_json(Rectangle, '{"width":10,"height":20}')
    r.get_area()  # 200
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from cssforge.errors import SerializationError

__all__ = ["get_json", "from_json"]

log = logging.getLogger("cssforge.serialization")

T = TypeVar("T")


def _own_data(obj: Any) -> dict[str, Any]:
    """Return the data attributes of *obj*, leaving out callables."""
    try:
        attrs = vars(obj)
    except TypeError:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from None
    return {key: value for key, value in attrs.items() if not callable(value)}


def get_json(
    obj: Any,
    *,
    indent: int | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
) -> str:
    """Return the JSON representation of *obj*.

    Output is compact (``[1,2,3]``, ``{"width":10,"height":20}``) unless
    *indent* is given. NaN and infinities have no JSON form and raise
    SerializationError.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            obj,
            indent=indent,
            separators=separators,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            default=_own_data,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize object: {exc}", cause=exc) from exc


def from_json(proto: type[T], json_text: str | bytes) -> T:
    """Return an instance of *proto* carrying the data decoded from *json_text*."""
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {proto.__name__}, got {type(data).__name__}"
        )

    instance = proto.__new__(proto)
    try:
        vars(instance).update(data)
    except TypeError as exc:
        raise SerializationError(
            f"{proto.__name__} instances cannot hold arbitrary data", cause=exc
        ) from exc

    log.debug("Rebuilt %s from JSON with keys %s", proto.__name__, sorted(data))
    return instance
