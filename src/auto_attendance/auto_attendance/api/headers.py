from __future__ import annotations

from typing import Optional

from ..core import constants


def build_headers(portal_origin: str, token: Optional[str] = None) -> dict[str, str]:
    """Headers the portal's web client sends; the API rejects requests without them."""
    origin = portal_origin.rstrip("/")
    headers = {
        "Accept": "application/json",
        "Accept-Language": constants.ACCEPT_LANGUAGE,
        "Connection": "keep-alive",
        "Content-Type": "application/json",
        "DNT": "1",
        "Origin": origin,
        "Referer": f"{origin}/",
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-site",
        "User-Agent": constants.USER_AGENT,
        "sec-ch-ua": constants.SEC_CH_UA,
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": constants.SEC_CH_UA_PLATFORM,
    }

    if token:
        headers["Authorization"] = f"Bearer {token}"

    return headers
