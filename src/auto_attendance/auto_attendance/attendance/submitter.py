from __future__ import annotations

import logging
from typing import Optional

from ..api.connection import ApiConnection
from ..api.http_base import ApiRequestError, send_json
from ..common.json_utils import pretty
from ..common.validators import require_non_empty
from ..core.enums import AttendanceAction
from ..core.exceptions import ValidationError
from ..core.settings import GeoLocation
from .model import AttendanceId, AuthToken, SubmitResult

logger = logging.getLogger(__name__)


class AttendanceSubmitter:
    """Posts one check-in or check-out event. Never retries."""

    def __init__(
        self,
        conn: ApiConnection,
        *,
        organization_id: int,
        employee_id: int,
        location: GeoLocation,
        medium: str,
    ):
        self._conn = conn
        self._organization_id = int(organization_id)
        self._employee_id = int(employee_id)
        self._location = location
        self._medium = medium

    def path_for(self, action: AttendanceAction, attendance_id: Optional[AttendanceId] = None) -> str:
        base = f"/api/organizations/{self._organization_id}/attendance/employee/{self._employee_id}"
        if action is AttendanceAction.CHECK_IN:
            return f"{base}/check-in"
        if attendance_id is None or attendance_id == "":
            raise ValidationError("check-out requires an attendance id")
        return f"{base}/attendance/{attendance_id}/check-out"

    def body(self) -> dict:
        return {"location": self._location.to_payload(), "medium": self._medium}

    def submit(
        self,
        action: AttendanceAction,
        token: AuthToken,
        attendance_id: Optional[AttendanceId] = None,
    ) -> SubmitResult:
        require_non_empty(token.value, "token")
        path = self.path_for(action, attendance_id)

        logger.info("Sending %s request...", action.value)
        try:
            response = send_json(self._conn, "POST", path, token=token.value, payload=self.body())
        except ApiRequestError as exc:
            logger.error("%s request failed:\n%s", action.value, exc.describe())
            return SubmitResult(ok=False, body=exc.payload, status_code=exc.status_code, message=exc.message)

        logger.info("Successfully %s!", action.label)
        logger.info("Response: %s", pretty(response.body))
        return SubmitResult(ok=True, body=response.body, status_code=response.status_code)
