from __future__ import annotations

from enum import Enum

from .exceptions import InvalidArgumentError


class AttendanceAction(str, Enum):
    """Hành động chấm công được hỗ trợ (giá trị CLI)."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"

    @classmethod
    def parse(cls, value: str | None) -> "AttendanceAction":
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Invalid attendance type: {value!r}") from None

    @property
    def label(self) -> str:
        return "Checked In" if self is AttendanceAction.CHECK_IN else "Checked Out"


class LogStatus(str, Enum):
    """Kết quả ghi vào file log hằng ngày."""

    SUCCESS = "success"
    ERROR = "error"


class RunOutcome(str, Enum):
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"
