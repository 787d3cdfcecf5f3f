"""JSON helpers: dump any object, load JSON back into a given class."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import SerializationError

__all__ = ["to_json", "from_json"]

log = logging.getLogger(__name__)

T = TypeVar("T")


def _default(obj: Any) -> Any:
    """Fallback encoder for objects json does not know."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, config: CssBuilderConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances and plain objects are written out through their
    instance attributes, e.g. ``Rectangle(10, 20)`` becomes
    ``{"width":10,"height":20}``.  Output is compact unless the config sets
    an indent.
    """
    config = config or CssBuilderConfig()
    separators = (",", ":") if config.json_indent is None else None
    return json.dumps(
        obj,
        default=_default,
        sort_keys=config.json_sort_keys,
        indent=config.json_indent,
        separators=separators,
    )


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object, bypassing ``__init__``.

    Every top-level key becomes an instance attribute, so the result has the
    class's methods available::

        >>> from_json(Rectangle, '{"width": 10, "height": 20}').get_area()
        200
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    # object.__setattr__ also fills frozen dataclasses.
    instance = cls.__new__(cls)
    for key, value in data.items():
        try:
            object.__setattr__(instance, key, value)
        except (AttributeError, TypeError) as exc:
            raise SerializationError(
                f"Cannot set {key!r} on {cls.__name__}: {exc}", cause=exc
            ) from exc
    log.debug("Loaded %s from JSON with keys %s", cls.__name__, list(data))
    return instance
