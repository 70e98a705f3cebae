import pytest
import requests

from src.auto_attendance.auto_attendance.auth.service import AuthService, extract_token
from src.auto_attendance.auto_attendance.core.exceptions import AuthenticationError, TokenNotFoundError
from src.auto_attendance.auto_attendance.core.settings import Credentials

SIGNIN = "/api/auth/signin"


@pytest.mark.parametrize(
    "body, source",
    [
        ({"token": "t-1"}, "token"),
        ({"accessToken": "t-1"}, "accessToken"),
        ({"data": {"token": "t-1"}}, "data.token"),
        ({"data": {"accessToken": "t-1"}}, "data.accessToken"),
    ],
)
def test_token_found_at_each_supported_location(body, source):
    token = extract_token(body)

    assert token is not None
    assert token.value == "t-1"
    assert token.source == source


def test_token_lookup_order():
    token = extract_token({"accessToken": "second", "data": {"token": "third"}})
    assert token.value == "second"


def test_no_token_in_body():
    assert extract_token({"data": {"user": {"id": 1}}}) is None
    assert extract_token({"token": ""}) is None


def test_authenticate_posts_credentials(conn, session, respond):
    session.add("POST", SIGNIN, respond(200, {"data": {"accessToken": "abc"}}))

    token = AuthService(conn, Credentials(email="me@example.com", password="pw")).authenticate()

    assert token.value == "abc"
    (call,) = session.calls
    assert call.json == {"email": "me@example.com", "password": "pw"}
    assert call.timeout == 10
    assert "Authorization" not in call.headers
    assert call.headers["Origin"] == "http://portal.test"


def test_missing_token_is_reported_distinctly(conn, session, respond):
    session.add("POST", SIGNIN, respond(200, {"message": "welcome"}))

    with pytest.raises(TokenNotFoundError) as exc_info:
        AuthService(conn, Credentials(email="x", password="y")).authenticate()

    assert exc_info.value.body == {"message": "welcome"}


def test_http_error_is_authentication_error_not_missing_token(conn, session, respond):
    session.add("POST", SIGNIN, respond(401, {"message": "Invalid credentials"}))

    with pytest.raises(AuthenticationError) as exc_info:
        AuthService(conn, Credentials(email="x", password="y")).authenticate()

    assert not isinstance(exc_info.value, TokenNotFoundError)
    assert "401" in exc_info.value.detail
    assert "Invalid credentials" in exc_info.value.detail


def test_network_error_is_authentication_error(conn, session):
    session.add("POST", SIGNIN, requests.ConnectTimeout("timed out"))

    with pytest.raises(AuthenticationError) as exc_info:
        AuthService(conn, Credentials(email="x", password="y")).authenticate()

    assert not isinstance(exc_info.value, TokenNotFoundError)
    assert "No response received" in exc_info.value.detail


def test_token_location_holding_non_string_is_skipped():
    token = extract_token({"token": {"value": "x"}, "accessToken": "abc"})

    assert token is not None
    assert token.value == "abc"
    assert token.source == "accessToken"


def test_not_modified_signin_is_http_failure_not_missing_token(conn, session, respond):
    session.add("POST", SIGNIN, respond(304, None))

    with pytest.raises(AuthenticationError) as exc_info:
        AuthService(conn, Credentials(email="x", password="y")).authenticate()

    assert not isinstance(exc_info.value, TokenNotFoundError)
    assert "304" in exc_info.value.detail
