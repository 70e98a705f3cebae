from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    portal_origin: str
    timeout: float = 10


class ApiConnection:
    """HTTP session factory bound to one API base URL.

    Note: One session per run; the caller closes it when the run is over.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> ApiConfig:
        return self._config

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def close(self) -> None:
        self._session.close()
