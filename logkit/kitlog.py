"""go-kit style logging on top of a :class:`~logkit.logger.Logger`.

The consumer hands over one flat key/value sequence where severity and
message are ordinary keys::

    kit = KitLogger(logger)
    kit.log("level", "warn", "msg", "disk almost full", "free_mb", 12)

``level`` selects the leveled call (``info`` when absent or unknown), ``msg``
becomes the message and every other pair is forwarded as a field mapping.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from . import keyvals
from .logger import LogFunc, Logger

LEVEL_KEY = "level"
MESSAGE_KEY = "msg"


class KitLogger:
    __slots__ = ("_log_funcs", "_default_log_func")

    def __init__(self, logger: Logger):
        self._log_funcs: Mapping[str, LogFunc] = MappingProxyType(
            {
                "trace": logger.trace,
                "debug": logger.debug,
                "info": logger.info,
                "warn": logger.warn,
                "warning": logger.warn,
                "error": logger.error,
            }
        )
        self._default_log_func: LogFunc = logger.info

    def log(self, *kvs: Any) -> None:
        fields = keyvals.to_map(kvs)
        log_func = self._default_log_func
        if LEVEL_KEY in fields:
            func = self._log_funcs.get(str(fields[LEVEL_KEY]).lower())
            if func is not None:
                del fields[LEVEL_KEY]
                log_func = func
        msg = ""
        if MESSAGE_KEY in fields:
            msg = str(fields.pop(MESSAGE_KEY))
        log_func(msg, fields)
