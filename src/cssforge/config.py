from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssForgeConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None keeps the output compact
    json_sort_keys: bool = False
    ensure_ascii: bool = False
