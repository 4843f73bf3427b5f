from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if value is None or len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_decimal(value: Any, field_name: str) -> Decimal:
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValidationError(f"{field_name} is required")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return number


def require_places(number: Decimal, field_name: str, places: int) -> Decimal:
    if number != number.quantize(Decimal(1).scaleb(-places)):
        raise ValidationError(f"{field_name} must have at most {places} decimal places")
    return number


def require_between(value: Any, field_name: str, low, high, *, places: Optional[int] = None) -> Decimal:
    number = require_decimal(value, field_name)
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    if places is not None:
        require_places(number, field_name, places)
    return number


def require_not_future(value: date, field_name: str, today: date) -> date:
    if value > today:
        raise ValidationError(f"{field_name} cannot be in the future")
    return value
