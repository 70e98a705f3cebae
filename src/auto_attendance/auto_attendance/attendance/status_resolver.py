from __future__ import annotations

import logging
from typing import Any, Optional

from ..api.connection import ApiConnection
from ..api.http_base import ApiRequestError, send_json
from ..common.extraction import Extracted, extract_first, rules
from ..common.json_utils import pretty
from ..common.validators import require_non_empty
from .model import AttendanceId, AuthToken

logger = logging.getLogger(__name__)

ATTENDANCE_ID_RULES = rules("data.id", "id", "attendanceId", "data.attendanceId")


def _coerce_id(value: Any) -> AttendanceId:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    return int(text) if text.isdigit() else text


def extract_attendance_id(body: Any) -> Optional[Extracted[AttendanceId]]:
    found = extract_first(body, ATTENDANCE_ID_RULES)
    if found is None:
        return None
    return Extracted(value=_coerce_id(found.value), rule=found.rule)


class StatusResolver:
    """Looks up the id of the currently open attendance record (check-out only)."""

    def __init__(self, conn: ApiConnection, *, organization_id: int, employee_id: int):
        self._conn = conn
        self._organization_id = int(organization_id)
        self._employee_id = int(employee_id)

    @property
    def status_path(self) -> str:
        return f"/api/organizations/{self._organization_id}/employee-self/{self._employee_id}/attendance/status"

    def resolve_open_attendance_id(self, token: AuthToken) -> Optional[Extracted[AttendanceId]]:
        """Return the open record id, or None when not found or the lookup fails."""
        require_non_empty(token.value, "token")

        logger.info("Fetching attendance status...")
        try:
            response = send_json(self._conn, "GET", self.status_path, token=token.value)
        except ApiRequestError as exc:
            logger.warning("Could not fetch attendance status:\n%s", exc.describe())
            return None

        found = extract_attendance_id(response.body)
        if found is None:
            logger.warning("No attendance ID found in status response")
            logger.warning("Response: %s", pretty(response.body))
            return None

        logger.info("Found attendance ID: %s (at %r)", found.value, found.source)
        return found
