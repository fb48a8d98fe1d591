from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive(value: int | float, field_name: str) -> int | float:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} must be > 0 (got {value!r})")
    return value
