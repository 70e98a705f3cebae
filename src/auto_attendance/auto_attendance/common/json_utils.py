from __future__ import annotations

import json
from typing import Any


def pretty(value: Any) -> str:
    """Render a response body for console output."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)
