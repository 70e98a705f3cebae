from __future__ import annotations

import logging
from typing import Any, Optional

from ..api.connection import ApiConnection
from ..api.http_base import ApiRequestError, send_json
from ..attendance.model import AuthToken
from ..common.extraction import extract_first, rules
from ..common.json_utils import pretty
from ..core.exceptions import AuthenticationError, TokenNotFoundError
from ..core.settings import Credentials

logger = logging.getLogger(__name__)

SIGNIN_PATH = "/api/auth/signin"

TOKEN_RULES = rules("token", "accessToken", "data.token", "data.accessToken")


def extract_token(body: Any) -> Optional[AuthToken]:
    found = extract_first(body, TOKEN_RULES, accept=lambda value: isinstance(value, str))
    if found is None:
        return None
    return AuthToken(value=found.value, source=found.source)


class AuthService:
    """Use case: exchange credentials for a bearer token."""

    def __init__(self, conn: ApiConnection, credentials: Credentials):
        self._conn = conn
        self._credentials = credentials

    def authenticate(self) -> AuthToken:
        logger.info("Attempting to login...")
        try:
            response = send_json(
                self._conn,
                "POST",
                SIGNIN_PATH,
                payload={"email": self._credentials.email, "password": self._credentials.password},
            )
        except ApiRequestError as exc:
            logger.error("Login failed:\n%s", exc.describe())
            raise AuthenticationError("Login failed", detail=exc.describe()) from exc

        token = extract_token(response.body)
        if token is None:
            logger.error("Login response did not contain a token")
            logger.error("Response structure: %s", pretty(response.body))
            raise TokenNotFoundError("Login response did not contain a token", body=response.body)

        logger.info("Login successful (token found at %r)", token.source)
        return token
