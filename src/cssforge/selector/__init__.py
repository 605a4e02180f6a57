from cssforge.selector.builder import (
    CombinedSelector,
    CssSelectorBuilder,
    SelectorBuilder,
    css_selector_builder,
)
from cssforge.selector.model import Combinator, PartKind, Stringifiable

__all__ = [
    "CombinedSelector",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "PartKind",
    "Stringifiable",
]
