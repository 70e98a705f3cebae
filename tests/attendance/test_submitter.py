import pytest
import requests

from src.auto_attendance.auto_attendance.attendance.model import AuthToken
from src.auto_attendance.auto_attendance.attendance.submitter import AttendanceSubmitter
from src.auto_attendance.auto_attendance.core.enums import AttendanceAction
from src.auto_attendance.auto_attendance.core.exceptions import ValidationError
from src.auto_attendance.auto_attendance.core.settings import GeoLocation

CHECK_IN = "/api/organizations/2/attendance/employee/441/check-in"
CHECK_OUT = "/api/organizations/2/attendance/employee/441/attendance/77/check-out"
TOKEN = AuthToken(value="abc", source="token")


@pytest.fixture
def submitter(conn):
    return AttendanceSubmitter(
        conn,
        organization_id=2,
        employee_id=441,
        location=GeoLocation(latitude=28.0009, longitude=69.3169, accuracy_meters=76431),
        medium="WEBSITE",
    )


def test_check_in_posts_location_and_medium(submitter, session, respond):
    session.add("POST", CHECK_IN, respond(201, {"data": {"id": 77}}))

    result = submitter.submit(AttendanceAction.CHECK_IN, TOKEN)

    assert result.ok is True
    assert result.status_code == 201
    assert result.body == {"data": {"id": 77}}

    (call,) = session.calls
    assert call.headers["Authorization"] == "Bearer abc"
    assert call.json == {
        "location": {"latitude": 28.0009, "longitude": 69.3169, "accuracyMeters": 76431, "address": None},
        "medium": "WEBSITE",
    }


def test_check_out_embeds_attendance_id(submitter, session, respond):
    session.add("POST", CHECK_OUT, respond(200, {"ok": True}))

    result = submitter.submit(AttendanceAction.CHECK_OUT, TOKEN, 77)

    assert result.ok is True
    assert session.calls[0].path == CHECK_OUT


def test_http_error_is_captured_not_raised(submitter, session, respond):
    session.add("POST", CHECK_IN, respond(409, {"message": "Already checked in"}))

    result = submitter.submit(AttendanceAction.CHECK_IN, TOKEN)

    assert result.ok is False
    assert result.status_code == 409
    assert result.body == {"message": "Already checked in"}
    assert len(session.calls) == 1


def test_network_error_captures_message(submitter, session):
    session.add("POST", CHECK_IN, requests.ReadTimeout("read timed out"))

    result = submitter.submit(AttendanceAction.CHECK_IN, TOKEN)

    assert result.ok is False
    assert result.status_code is None
    assert "read timed out" in result.body


def test_check_out_without_id_is_a_programming_error(submitter, session):
    with pytest.raises(ValidationError):
        submitter.submit(AttendanceAction.CHECK_OUT, TOKEN)
    assert session.calls == []


def test_empty_token_is_rejected_before_any_request(submitter, session):
    with pytest.raises(ValidationError):
        submitter.submit(AttendanceAction.CHECK_IN, AuthToken(value="", source="token"))
    assert session.calls == []


@pytest.mark.parametrize("status", [300, 304, 305])
def test_non_2xx_without_error_status_is_still_a_failure(submitter, session, respond, status):
    session.add("POST", CHECK_IN, respond(status, None))

    result = submitter.submit(AttendanceAction.CHECK_IN, TOKEN)

    assert result.ok is False
    assert result.status_code == status
