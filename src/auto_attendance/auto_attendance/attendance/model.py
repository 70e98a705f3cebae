from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

from ..common.datetime_utils import to_iso_z
from ..core.enums import AttendanceAction, LogStatus

AttendanceId = Union[int, str]


@dataclass(frozen=True)
class AuthToken:
    """Bearer token cho một lần chạy (không lưu lại)."""

    value: str
    source: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    body: Any
    status_code: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class LogEntry:
    """Một dòng trong file log JSON hằng ngày."""

    timestamp: datetime
    action: AttendanceAction
    status: LogStatus
    payload: Any

    @classmethod
    def from_result(cls, action: AttendanceAction, result: SubmitResult, *, timestamp: datetime) -> "LogEntry":
        return cls(
            timestamp=timestamp,
            action=action,
            status=LogStatus.SUCCESS if result.ok else LogStatus.ERROR,
            payload=result.body,
        )

    def to_dict(self) -> dict[str, Any]:
        key = "response" if self.status is LogStatus.SUCCESS else "error"
        return {
            "timestamp": to_iso_z(self.timestamp),
            "type": self.action.value,
            "status": self.status.value,
            key: self.payload,
        }
