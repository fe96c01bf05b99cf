from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict

from .logger import Fields, Level, LevelEnabler, Logger


def with_fields(logger: Logger, fields: Fields) -> Logger:
    """Return a logger that attaches ``fields`` to every call made through it.

    An empty mapping returns ``logger`` itself. Adding context to a
    :class:`ContextualLogger` flattens into a single wrapper instead of
    nesting one wrapper inside another.
    """
    if not fields:
        return logger
    if isinstance(logger, ContextualLogger):
        return logger.with_fields(fields)
    return ContextualLogger(logger, fields)


class ContextualLogger:
    """Wraps a logger plus an immutable field set.

    Every leveled call asks the inner logger for a contextual copy carrying
    the stored fields and forwards the message and arguments to it.
    """

    __slots__ = ("_logger", "_fields")

    def __init__(self, logger: Logger, fields: Fields):
        self._logger = logger
        self._fields: Fields = MappingProxyType(dict(fields))

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def fields(self) -> Fields:
        return self._fields

    def trace(self, msg: str, *args: Any) -> None:
        self._logger.with_fields(self._fields).trace(msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self._logger.with_fields(self._fields).debug(msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._logger.with_fields(self._fields).info(msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._logger.with_fields(self._fields).warn(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._logger.with_fields(self._fields).error(msg, *args)

    def with_fields(self, fields: Fields) -> Logger:
        """Merge grandparent fields, then own fields, then ``fields`` (later wins)."""
        if not fields:
            return self
        logger = self._logger
        merged: Dict[str, Any] = {}
        # keep wrapper depth at one
        if isinstance(logger, ContextualLogger) and logger._fields:
            merged.update(logger._fields)
            logger = logger._logger
        merged.update(self._fields)
        merged.update(fields)
        return ContextualLogger(logger, merged)

    def level_enabled(self, level: Level) -> bool:
        if isinstance(self._logger, LevelEnabler):
            return self._logger.level_enabled(level)
        return True

    def __repr__(self) -> str:
        return f"ContextualLogger({self._logger!r}, {dict(self._fields)!r})"
