"""Adapter exposing a :class:`~logkit.logger.Logger` through the gRPC LoggerV2 vocabulary.

gRPC style consumers log at three severities (info, warning, error) plus
fatal, each in three formatting flavours:

* ``info(*args)`` concatenates like ``print`` (see :func:`sprint`),
* ``infoln(*args)`` joins with spaces; no trailing newline is forwarded,
* ``infof(format, *args)`` applies ``%``-style formatting.

Fatal messages are logged at error severity. Terminating the process after a
fatal message is left to whoever installs the adapter.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .logger import Level, LevelEnabler, Logger

_FATAL_VERBOSITY = 3
_ERROR_VERBOSITY = 2
# gRPC has no trace or debug levels
_LEVEL_OFFSET = 2


def sprint(*args: Any) -> str:
    """Concatenate operands, adding a space between two non-string operands."""
    parts = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintln(*args: Any) -> str:
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(format: str, *args: Any) -> str:
    if not args:
        return format
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return format % values
    except (TypeError, ValueError, KeyError):
        return " ".join([format, *(str(arg) for arg in args)])


def _line(*args: Any) -> str:
    return sprintln(*args).rstrip("\n")


class GRPCLogger:
    """gRPC LoggerV2 compatible wrapper around a logger.

    ``v()`` consults the wrapped logger when it is also a
    :class:`~logkit.logger.LevelEnabler` and reports every level enabled
    otherwise.
    """

    __slots__ = ("_logger", "_level_enabler")

    def __init__(self, logger: Logger):
        self._logger = logger
        self._level_enabler: Optional[LevelEnabler] = (
            logger if isinstance(logger, LevelEnabler) else None
        )

    def info(self, *args: Any) -> None:
        self._logger.info(sprint(*args))

    def infoln(self, *args: Any) -> None:
        self._logger.info(_line(*args))

    def infof(self, format: str, *args: Any) -> None:
        self._logger.info(sprintf(format, *args))

    def warning(self, *args: Any) -> None:
        self._logger.warn(sprint(*args))

    def warningln(self, *args: Any) -> None:
        self._logger.warn(_line(*args))

    def warningf(self, format: str, *args: Any) -> None:
        self._logger.warn(sprintf(format, *args))

    def error(self, *args: Any) -> None:
        self._logger.error(sprint(*args))

    def errorln(self, *args: Any) -> None:
        self._logger.error(_line(*args))

    def errorf(self, format: str, *args: Any) -> None:
        self._logger.error(sprintf(format, *args))

    def fatal(self, *args: Any) -> None:
        self._logger.error(sprint(*args))

    def fatalln(self, *args: Any) -> None:
        self._logger.error(_line(*args))

    def fatalf(self, format: str, *args: Any) -> None:
        self._logger.error(sprintf(format, *args))

    def v(self, level: int) -> bool:
        """Report whether verbosity ``level`` (0 info .. 3 fatal) is enabled."""
        if self._level_enabler is None:
            return True
        if level == _FATAL_VERBOSITY:
            level = _ERROR_VERBOSITY
        query = min(max(level + _LEVEL_OFFSET, Level.TRACE), Level.ERROR)
        return self._level_enabler.level_enabled(Level(query))
