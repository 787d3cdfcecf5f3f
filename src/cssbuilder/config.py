from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
    json_sort_keys: bool = False
    json_indent: int | None = None  # None renders compact JSON: [1,2,3]
