from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidEvent


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidEvent(f"{field_name} must not be empty")
    return str(value).strip()


def require_coordinate(value: Any, field_name: str, limit: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidEvent(f"{field_name} must be a number") from None
    if not -limit <= number <= limit:
        raise InvalidEvent(f"{field_name} out of range")
    return number
