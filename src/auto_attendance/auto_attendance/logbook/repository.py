from __future__ import annotations

from datetime import date
from typing import Any, Protocol

from ..attendance.model import LogEntry


class LogRecorder(Protocol):
    def record(self, entry: LogEntry) -> None:
        raise NotImplementedError

    def read_day(self, day: date) -> list[dict[str, Any]]:
        raise NotImplementedError
