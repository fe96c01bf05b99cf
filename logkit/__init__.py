"""Top‑level package for logkit.

Exposes the `Logger` contract, `with_fields`, the `GRPCLogger` and `KitLogger`
adapters, and the stdlib bridge (`LogConfig`, `get_logger`, `log_context`).
See module docstrings for usage examples.
"""

from .logger import Fields, Level, LevelEnabler, LogFunc, Logger, NoopLogger, parse_level
from .context import ContextualLogger, with_fields
from .grpclog import GRPCLogger
from .kitlog import KitLogger
from .config import LogConfig
from .adapter import StdlibLogger, get_logger, log_context

__all__ = [
    "Fields",
    "Level",
    "LevelEnabler",
    "LogFunc",
    "Logger",
    "NoopLogger",
    "parse_level",
    "ContextualLogger",
    "with_fields",
    "GRPCLogger",
    "KitLogger",
    "LogConfig",
    "StdlibLogger",
    "get_logger",
    "log_context",
]
