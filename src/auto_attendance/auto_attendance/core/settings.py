from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Optional

from . import constants
from .enums import AttendanceAction


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class GeoLocation:
    """Vị trí giả lập gửi kèm mỗi lần chấm công."""

    latitude: float
    longitude: float
    accuracy_meters: int
    address: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "accuracyMeters": self.accuracy_meters,
            "address": self.address,
        }


@dataclass(frozen=True)
class AppConfig:
    """Cấu hình bất biến cho một lần chạy (đọc một lần khi khởi động)."""

    credentials: Credentials
    organization_id: int
    employee_id: int
    base_url: str
    portal_origin: str
    location: GeoLocation
    medium: str = constants.DEFAULT_MEDIUM
    http_timeout: float = constants.DEFAULT_HTTP_TIMEOUT_SECONDS
    check_in_window: tuple[int, int] = constants.DEFAULT_CHECK_IN_WINDOW
    check_out_window: tuple[int, int] = constants.DEFAULT_CHECK_OUT_WINDOW
    log_dir: Path = Path(constants.DEFAULT_LOG_DIR)

    def window_for(self, action: AttendanceAction) -> tuple[int, int]:
        if action is AttendanceAction.CHECK_IN:
            return self.check_in_window
        return self.check_out_window

    @classmethod
    def from_settings(cls, settings: ModuleType) -> "AppConfig":
        """Build from a settings module (see ``config.get_settings_module``)."""
        location = dict(getattr(settings, "LOCATION"))
        return cls(
            credentials=Credentials(
                email=str(getattr(settings, "ATTENDANCE_EMAIL", "") or ""),
                password=str(getattr(settings, "ATTENDANCE_PASSWORD", "") or ""),
            ),
            organization_id=int(getattr(settings, "ORGANIZATION_ID")),
            employee_id=int(getattr(settings, "EMPLOYEE_ID")),
            base_url=str(getattr(settings, "API_BASE_URL")).rstrip("/"),
            portal_origin=str(getattr(settings, "PORTAL_ORIGIN")).rstrip("/"),
            location=GeoLocation(
                latitude=float(location["latitude"]),
                longitude=float(location["longitude"]),
                accuracy_meters=int(location["accuracy_meters"]),
                address=location.get("address"),
            ),
            medium=str(getattr(settings, "MEDIUM", constants.DEFAULT_MEDIUM)),
            http_timeout=float(getattr(settings, "HTTP_TIMEOUT", constants.DEFAULT_HTTP_TIMEOUT_SECONDS)),
            check_in_window=_window(getattr(settings, "CHECK_IN_WINDOW", constants.DEFAULT_CHECK_IN_WINDOW)),
            check_out_window=_window(getattr(settings, "CHECK_OUT_WINDOW", constants.DEFAULT_CHECK_OUT_WINDOW)),
            log_dir=Path(getattr(settings, "LOG_DIR", constants.DEFAULT_LOG_DIR)),
        )


def _window(value) -> tuple[int, int]:
    lo, hi = value
    return int(lo), int(hi)
