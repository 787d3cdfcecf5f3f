"""Stateless entry points that start a new selector per call.

    >>> from cssbuilder.selector import css_selector_builder as builder
    >>> builder.id("main").class_("container").class_("editable").render()
    '#main.container.editable'
"""

from __future__ import annotations

from types import SimpleNamespace

from cssbuilder.selector.builder import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
)
from cssbuilder.selector.builder import combine as _combine

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(left: Selector, separator: str, right: Selector) -> CombinedSelector:
    return _combine(left, separator, right)


css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
