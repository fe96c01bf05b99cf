from __future__ import annotations
import logging, os, sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple, cast
from .config import TRACE, LogConfig, stdlib_level
from .context import with_fields
from .logger import Fields, Level, Logger, parse_level

_CTX: ContextVar[Dict[str, Any]] = ContextVar("logkit_ctx", default={})

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# LogRecord refuses extras that shadow its own attributes
_RESERVED_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
_RESERVED_PREFIX = "field_"

logging.addLevelName(TRACE, "TRACE")


@contextmanager
def log_context(**attrs: Any):
    token = _CTX.set({**_CTX.get(), **attrs})
    try:
        yield
    finally:
        _CTX.reset(token)


class ContextAdapter(logging.LoggerAdapter[logging.Logger]):
    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        extra: Dict[str, Any] = dict(self.extra) if self.extra else {}
        extra.update(cast(Optional[Dict[str, Any]], kwargs.get("extra")) or {})
        extra.update(_CTX.get())
        kwargs["extra"] = _safe_extra(extra)
        return msg, kwargs


def _safe_extra(extra: Dict[str, Any]) -> Dict[str, Any]:
    return {
        f"{_RESERVED_PREFIX}{key}" if key in _RESERVED_KEYS else key: value
        for key, value in extra.items()
    }


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside logkit, as seen from ``_log``."""
    frame = sys._getframe(2)
    level = 2
    while frame.f_back is not None and os.path.dirname(frame.f_code.co_filename) == _PACKAGE_DIR:
        frame = frame.f_back
        level += 1
    return level


def _split_fields(args: Tuple[Any, ...]) -> Tuple[Dict[str, Any], Tuple[Any, ...]]:
    if args and isinstance(args[-1], Mapping):
        return dict(args[-1]), args[:-1]
    return {}, args


class StdlibLogger:
    """Logger and LevelEnabler backed by a stdlib ``logging.Logger``.

    A trailing mapping argument is attached to the record as ``extra``; the
    remaining arguments are ``%``-style message arguments.
    """

    __slots__ = ("_adapter",)

    def __init__(self, logger: logging.Logger, fields: Optional[Fields] = None):
        self._adapter = ContextAdapter(logger, dict(fields or {}))

    @property
    def logger(self) -> logging.Logger:
        return self._adapter.logger

    @property
    def fields(self) -> Dict[str, Any]:
        return dict(self._adapter.extra or {})

    def _log(self, level: Level, msg: str, args: Tuple[Any, ...]) -> None:
        levelno = stdlib_level(level)
        if not self._adapter.isEnabledFor(levelno):
            return
        extra, args = _split_fields(args)
        self._adapter.log(levelno, msg, *args, extra=extra, stacklevel=_caller_stacklevel())

    def trace(self, msg: str, *args: Any) -> None:
        self._log(Level.TRACE, msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._log(Level.DEBUG, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._log(Level.INFO, msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._log(Level.WARN, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._log(Level.ERROR, msg, args)

    def with_fields(self, fields: Fields) -> "StdlibLogger":
        if not fields:
            return self
        return StdlibLogger(self._adapter.logger, {**self.fields, **fields})

    def level_enabled(self, level: Level) -> bool:
        return self._adapter.isEnabledFor(stdlib_level(level))


def _resolve_level(level: Optional[str]) -> Optional[int]:
    if level is None:
        return None
    try:
        return int(level)
    except (TypeError, ValueError):
        pass
    try:
        return stdlib_level(parse_level(level))
    except ValueError:
        pass
    numeric = getattr(logging, str(level).upper(), None)
    if isinstance(numeric, int):
        return numeric
    raise ValueError(f"Unknown log level: {level}")


def get_logger(name: Optional[str], cfg: LogConfig) -> Logger:
    base: Dict[str, Any] = {"service.name": cfg.service_name}
    if cfg.service_version:
        base["service.version"] = cfg.service_version
    if cfg.environment:
        base["deployment.environment"] = cfg.environment
    base.update(cfg.static)
    logger = logging.getLogger(name or cfg.service_name)
    if (resolved := _resolve_level(cfg.level)) is not None:
        logger.setLevel(resolved)
    return with_fields(StdlibLogger(logger), base)
