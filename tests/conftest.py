from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlsplit

import pytest
import requests

from src.auto_attendance.auto_attendance.api.connection import ApiConfig, ApiConnection
from src.auto_attendance.auto_attendance.core.settings import AppConfig, Credentials, GeoLocation


def make_response(status_code: int = 200, body: Any = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = str(body).encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    return response


@dataclass
class Call:
    method: str
    url: str
    headers: dict
    json: Any
    timeout: Optional[float]

    @property
    def path(self) -> str:
        return urlsplit(self.url).path


class FakeSession:
    """Stands in for requests.Session; routes by (method, path)."""

    def __init__(self):
        self._routes: dict[tuple[str, str], Any] = {}
        self.calls: list[Call] = []
        self.closed = False

    def add(self, method: str, path: str, outcome: Any) -> "FakeSession":
        self._routes[(method.upper(), path)] = outcome
        return self

    def request(self, method, url, headers=None, json=None, timeout=None):
        call = Call(method=method.upper(), url=url, headers=dict(headers or {}), json=json, timeout=timeout)
        self.calls.append(call)

        outcome = self._routes.get((call.method, call.path))
        if outcome is None:
            raise AssertionError(f"Unexpected request: {call.method} {url}")
        if isinstance(outcome, BaseException):
            raise outcome
        outcome.url = url
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        credentials=Credentials(email="a@example.com", password="pw"),
        organization_id=2,
        employee_id=441,
        base_url="http://api.test",
        portal_origin="http://portal.test",
        location=GeoLocation(latitude=28.0009, longitude=69.3169, accuracy_meters=76431, address=None),
        medium="WEBSITE",
        http_timeout=10,
        check_in_window=(0, 0),
        check_out_window=(0, 0),
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def conn(session: FakeSession) -> ApiConnection:
    return ApiConnection(ApiConfig(base_url="http://api.test", portal_origin="http://portal.test", timeout=10), session=session)


@pytest.fixture
def fixed_utc() -> datetime:
    return datetime(2026, 2, 4, 3, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def respond():
    return make_response
