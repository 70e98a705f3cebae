from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_window(min_minutes: int, max_minutes: int) -> tuple[int, int]:
    if min_minutes < 0 or max_minutes < 0:
        raise ValidationError(f"Delay window must be non-negative, got ({min_minutes}, {max_minutes})")
    if min_minutes > max_minutes:
        raise ValidationError(f"Delay window is inverted: min={min_minutes} > max={max_minutes}")
    return int(min_minutes), int(max_minutes)
