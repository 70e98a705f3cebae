from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..common.json_utils import pretty
from .connection import ApiConnection
from .headers import build_headers


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Any


class ApiRequestError(Exception):
    """Transport-level failure: non-2xx status, timeout, or no response at all."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def has_response(self) -> bool:
        return self.status_code is not None

    @property
    def payload(self) -> Any:
        """Error body when the server answered, otherwise the message."""
        return self.body if self.has_response and self.body not in (None, "") else self.message

    def describe(self) -> str:
        if self.has_response:
            return f"Status: {self.status_code}\nData: {pretty(self.body)}"
        return f"No response received: {self.message}"


def decode_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def send_json(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    payload: Any = None,
) -> ApiResponse:
    url = conn.url(path)
    headers = build_headers(conn.config.portal_origin, token)
    try:
        response = conn.session.request(method, url, headers=headers, json=payload, timeout=conn.timeout)
        response.raise_for_status()
    except requests.HTTPError as exc:
        resp = exc.response
        status = resp.status_code if resp is not None else None
        body = decode_body(resp) if resp is not None else None
        raise ApiRequestError(str(exc), status_code=status, body=body) from exc
    except requests.RequestException as exc:
        raise ApiRequestError(str(exc) or exc.__class__.__name__) from exc

    body = decode_body(response)
    # raise_for_status() lets unfollowed 3xx through; only 2xx is success.
    if not 200 <= response.status_code < 300:
        raise ApiRequestError(
            f"Unexpected status {response.status_code} for url: {url}",
            status_code=response.status_code,
            body=body,
        )
    return ApiResponse(status_code=response.status_code, body=body)
