"""In-memory logger for asserting on emitted events in tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from .logger import Fields, Level


@dataclass(frozen=True)
class LogEvent:
    level: Level
    msg: str
    args: Tuple[Any, ...] = ()
    fields: Dict[str, Any] = field(default_factory=dict)


class RecordingLogger:
    """Records every leveled call as a :class:`LogEvent`.

    Children created by ``with_fields`` share the event list and the
    ``with_fields_calls`` counter of their root, so a single recorder
    observes everything logged through any of them.
    """

    def __init__(
        self,
        min_level: Level = Level.TRACE,
        fields: Optional[Fields] = None,
        *,
        _events: Optional[List[LogEvent]] = None,
        _calls: Optional[List[Dict[str, Any]]] = None,
    ):
        self.min_level = min_level
        self.fields: Fields = MappingProxyType(dict(fields or {}))
        self.events: List[LogEvent] = _events if _events is not None else []
        self.with_fields_calls: List[Dict[str, Any]] = _calls if _calls is not None else []

    def _record(self, level: Level, msg: str, args: Tuple[Any, ...]) -> None:
        self.events.append(LogEvent(level, msg, args, dict(self.fields)))

    def trace(self, msg: str, *args: Any) -> None:
        self._record(Level.TRACE, msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._record(Level.DEBUG, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._record(Level.INFO, msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._record(Level.WARN, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._record(Level.ERROR, msg, args)

    def with_fields(self, fields: Fields) -> "RecordingLogger":
        self.with_fields_calls.append(dict(fields))
        return RecordingLogger(
            self.min_level,
            {**self.fields, **fields},
            _events=self.events,
            _calls=self.with_fields_calls,
        )

    def level_enabled(self, level: Level) -> bool:
        return level >= self.min_level

    @property
    def last_event(self) -> Optional[LogEvent]:
        return self.events[-1] if self.events else None
