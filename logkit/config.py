from __future__ import annotations
from typing import Any, Dict, Optional

try:
    from chz import chz, field
except Exception as exc:  # pragma: no cover
    raise ImportError("chz is required: https://github.com/openai/chz") from exc

from .logger import Level

TRACE = 5


@chz
class LogConfig:
    service_name: str = field(default="app")
    service_version: Optional[str] = field(default=None)
    environment: Optional[str] = field(default=None)
    level: Optional[str] = field(default=None)
    static: Dict[str, Any] = field(default_factory=dict)


_STDLIB_LEVELS = {
    Level.TRACE: TRACE,
    Level.DEBUG: 10,
    Level.INFO: 20,
    Level.WARN: 30,
    Level.ERROR: 40,
}


def stdlib_level(level: Level) -> int:
    """Map a logkit level to the stdlib logging level number."""

    return _STDLIB_LEVELS[level]
