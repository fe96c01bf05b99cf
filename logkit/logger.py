"""Logger capability contract shared by every backend and adapter."""

from __future__ import annotations

import enum
from typing import Any, Callable, Mapping, Protocol, Union, runtime_checkable

Fields = Mapping[str, Any]
LogFunc = Callable[..., None]


class Level(enum.IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name.lower()


_LEVEL_NAMES = {
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
}


def parse_level(value: Union[Level, int, str]) -> Level:
    if isinstance(value, Level):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            raise ValueError(f"Unknown log level: {value}") from None
    level = _LEVEL_NAMES.get(str(value).strip().lower())
    if level is None:
        raise ValueError(f"Unknown log level: {value}")
    return level


@runtime_checkable
class Logger(Protocol):
    """Five leveled entry points plus context attachment.

    ``with_fields`` must not mutate the receiver: it returns a logger whose
    future calls carry the merged context.
    """

    def trace(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...

    def warn(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...

    def with_fields(self, fields: Fields) -> "Logger": ...


@runtime_checkable
class LevelEnabler(Protocol):
    def level_enabled(self, level: Level) -> bool: ...


class NoopLogger:
    """Logger that discards everything."""

    def trace(self, msg: str, *args: Any) -> None:
        return None

    def debug(self, msg: str, *args: Any) -> None:
        return None

    def info(self, msg: str, *args: Any) -> None:
        return None

    def warn(self, msg: str, *args: Any) -> None:
        return None

    def error(self, msg: str, *args: Any) -> None:
        return None

    def with_fields(self, fields: Fields) -> "NoopLogger":
        return self

    def level_enabled(self, level: Level) -> bool:
        return False
