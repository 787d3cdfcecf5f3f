"""Selector vocabulary: fragment kinds in grammar order and combinators."""

from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """One kind of simple-selector fragment.

    Members are declared in grammar order:

        element#id.class[attr]:pseudo-class::pseudo-element

    ``element``, ``id`` and ``pseudo_element`` may occur at most once per
    selector; the others may repeat.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def position(self) -> int:
        return _GRAMMAR_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.value.replace("_", "-")

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's CSS syntax."""
        prefix, suffix = _SYNTAX[self]
        return f"{prefix}{value}{suffix}"


_GRAMMAR_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

_SINGLETONS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_SYNTAX: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """CSS combinators accepted by ``combine``."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
