"""CSS selector construction -- public re-exports."""

from cssbuilder.selector.builder import CombinedSelector, Selector, SelectorBuilder
from cssbuilder.selector.facade import css_selector_builder
from cssbuilder.selector.model import Combinator, FragmentKind

__all__ = [
    "FragmentKind",
    "Combinator",
    "Selector",
    "SelectorBuilder",
    "CombinedSelector",
    "css_selector_builder",
]
