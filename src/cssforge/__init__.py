"""cssforge - CSS selector builder and small object utilities."""

from cssforge.errors import (
    CssForgeError,
    DuplicatePartError,
    OrderError,
    SelectorError,
    SerializationError,
)
from cssforge.selector import (
    CombinedSelector,
    Combinator,
    CssSelectorBuilder,
    PartKind,
    SelectorBuilder,
    css_selector_builder,
)
from cssforge.serialization import from_json, get_json
from cssforge.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CssForgeError",
    "DuplicatePartError",
    "OrderError",
    "SelectorError",
    "SerializationError",
    "CombinedSelector",
    "Combinator",
    "CssSelectorBuilder",
    "PartKind",
    "SelectorBuilder",
    "css_selector_builder",
    "from_json",
    "get_json",
    "Rectangle",
]
