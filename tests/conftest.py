import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Iterator, cast

pytest = cast(Any, importlib.import_module("pytest"))

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from logkit.testing import RecordingLogger  # noqa: E402


def _reset_test_loggers() -> None:
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("tests."):
            logger = logging.getLogger(name)
            logger.setLevel(logging.NOTSET)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Ensure each test starts with a clean logging configuration."""
    root = logging.getLogger()
    root_level = root.level
    _reset_test_loggers()
    yield
    _reset_test_loggers()
    root.setLevel(root_level)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


class PlainLogger:
    """Logger without the level enabling capability."""

    def __init__(self) -> None:
        self.events: list = []

    def trace(self, msg: str, *args: Any) -> None:
        self.events.append(("trace", msg, args))

    def debug(self, msg: str, *args: Any) -> None:
        self.events.append(("debug", msg, args))

    def info(self, msg: str, *args: Any) -> None:
        self.events.append(("info", msg, args))

    def warn(self, msg: str, *args: Any) -> None:
        self.events.append(("warn", msg, args))

    def error(self, msg: str, *args: Any) -> None:
        self.events.append(("error", msg, args))

    def with_fields(self, fields: Any) -> "PlainLogger":
        return self


@pytest.fixture
def plain_logger() -> PlainLogger:
    return PlainLogger()
