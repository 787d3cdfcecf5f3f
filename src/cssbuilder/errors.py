"""Error hierarchy for cssbuilder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import FragmentKind


class CssBuilderError(Exception):
    """Base error for all cssbuilder errors."""


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(CssBuilderError):
    """A fragment call broke the selector grammar."""

    def __init__(self, message: str, *, kind: FragmentKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element added twice to one selector."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            f"{kind.label} should not occur more than one time inside the selector",
            kind=kind,
        )


class OrderViolationError(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(self, kind: FragmentKind, *, after: FragmentKind) -> None:
        super().__init__(
            f"{kind.label} cannot follow {after.label}: selector parts should be "
            "arranged in the following order: element, id, class, attribute, "
            "pseudo-class, pseudo-element",
            kind=kind,
        )
        self.after = after


# ---------------------------------------------------------------------------
# Object utility errors
# ---------------------------------------------------------------------------


class SerializationError(CssBuilderError):
    """JSON text could not be turned into the requested object."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
