"""cssbuilder: CSS selector builder and small object utilities."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import (
    CssBuilderError,
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
    SerializationError,
)
from cssbuilder.objects import Rectangle, from_json, to_json
from cssbuilder.selector import (
    Combinator,
    CombinedSelector,
    FragmentKind,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "CssBuilderConfig",
    # errors
    "CssBuilderError",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "SerializationError",
    # selector
    "FragmentKind",
    "Combinator",
    "SelectorBuilder",
    "CombinedSelector",
    "css_selector_builder",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
]
