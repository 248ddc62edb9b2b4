from __future__ import annotations

from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_int(value: Any, message: str) -> int:
    # bool is an int subclass; JSON true/false must not pass as an id.
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(message)


def require_bool(value: Any, message: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(message)
    return value


def require_date(value: Any, message: str) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"invalid date: {value!r} (expected YYYY-MM-DD)")
