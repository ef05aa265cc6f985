from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")


def require_month(value: Any) -> int:
    month = require_int(value, "month")
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month} (expected 1-12)")
    return month


def require_year(value: Any) -> int:
    year = require_int(value, "year")
    if not 1900 <= year <= 9999:
        raise ValidationError(f"Invalid year: {year}")
    return year


def require_positive(value: Any, field_name: str) -> int:
    number = require_int(value, field_name)
    if number < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    return number
