"""Chainable builder for compound CSS selectors and their combinations.

A builder collects the simple-selector fragments of one compound selector::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

and renders them with ``render()``.  Two selectors are joined into a
``CombinedSelector`` with ``combine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from cssbuilder.errors import DuplicateFragmentError, OrderViolationError
from cssbuilder.selector.model import FragmentKind

__all__ = ["Selector", "SelectorBuilder", "CombinedSelector", "combine"]

log = logging.getLogger(__name__)


class Selector(Protocol):
    """Anything that renders to selector text."""

    def render(self) -> str: ...


class SelectorBuilder:
    """Accumulates fragments of a single compound selector.

    Fragment methods validate grammar order and cardinality, then return
    ``self`` so calls can be chained.  A rejected call leaves the builder
    untouched.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._kinds: list[FragmentKind] = []

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._element = self._claim_singleton(FragmentKind.ELEMENT, value)
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._id = self._claim_singleton(FragmentKind.ID, value)
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._append(FragmentKind.CLASS, value, self._classes)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        """Add ``[value]``; *value* is the bracket interior, e.g. ``href$=".png"``."""
        self._append(FragmentKind.ATTRIBUTE, value, self._attributes)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._append(FragmentKind.PSEUDO_CLASS, value, self._pseudo_classes)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._pseudo_element = self._claim_singleton(FragmentKind.PSEUDO_ELEMENT, value)
        return self

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Add a fragment of *kind*; dispatches to the matching method."""
        return _ADDERS[kind](self, value)

    # --- combination / rendering ------------------------------------------------

    def combine(self, other: Selector, separator: str) -> CombinedSelector:
        """Join this selector (left) with *other* (right)."""
        return combine(self, separator, other)

    def render(self) -> str:
        """Return the selector text; never alters the builder."""
        return "".join(self._text_for(kind) for kind in self._kinds)

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """Fragment kinds in the order they were first added."""
        return tuple(self._kinds)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"

    # --- internals --------------------------------------------------------------

    def _check_order(self, kind: FragmentKind) -> None:
        # Every kind already present must sit at or before *kind*.
        later = [seen for seen in self._kinds if seen.position > kind.position]
        if later:
            raise OrderViolationError(kind, after=later[-1])

    def _claim_singleton(self, kind: FragmentKind, value: str) -> str:
        self._check_order(kind)
        if kind in self._kinds:
            raise DuplicateFragmentError(kind)
        self._kinds.append(kind)
        log.debug("Selector fragment: %s=%r", kind, value)
        return kind.render(value)

    def _append(self, kind: FragmentKind, value: str, slot: list[str]) -> None:
        self._check_order(kind)
        if kind not in self._kinds:
            self._kinds.append(kind)
        slot.append(kind.render(value))
        log.debug("Selector fragment: %s=%r", kind, value)

    def _text_for(self, kind: FragmentKind) -> str:
        if kind is FragmentKind.ELEMENT:
            return self._element or ""
        if kind is FragmentKind.ID:
            return self._id or ""
        if kind is FragmentKind.CLASS:
            return "".join(self._classes)
        if kind is FragmentKind.ATTRIBUTE:
            return "".join(self._attributes)
        if kind is FragmentKind.PSEUDO_CLASS:
            return "".join(self._pseudo_classes)
        return self._pseudo_element or ""


_ADDERS = {
    FragmentKind.ELEMENT: SelectorBuilder.element,
    FragmentKind.ID: SelectorBuilder.id,
    FragmentKind.CLASS: SelectorBuilder.class_,
    FragmentKind.ATTRIBUTE: SelectorBuilder.attr,
    FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Operand text is captured when the combination is made, so later changes
    to an operand builder do not show up here.  One space is placed on each
    side of the separator, whatever the separator is.
    """

    left: str
    separator: str
    right: str

    def combine(self, other: Selector, separator: str) -> CombinedSelector:
        return combine(self, separator, other)

    def render(self) -> str:
        return f"{self.left} {self.separator} {self.right}"

    def __str__(self) -> str:
        return self.render()


def combine(left: Selector, separator: str, right: Selector) -> CombinedSelector:
    """Join *left* and *right* with *separator* into a CombinedSelector."""
    combined = CombinedSelector(
        left=left.render(), separator=str(separator), right=right.render()
    )
    log.debug("Combined selector: %r", combined.render())
    return combined
