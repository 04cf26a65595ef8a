"""Parsers for raw user input at the service boundary."""

import math

from fitness_tracker.domain.errors import ValidationError
from fitness_tracker.domain.meals import MealType


def parse_name(value: object, field: str = "name") -> str:
    """Return a stripped, non-empty name."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "must not be empty")
    return value.strip()


def _parse_int(value: object, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(field, "must be a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(field, "must be a whole number") from None
    raise ValidationError(field, "must be a whole number")


def _parse_float(value: object, field: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number")
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", "."))
        except ValueError:
            raise ValidationError(field, "must be a number") from None
    else:
        raise ValidationError(field, "must be a number")
    if not math.isfinite(number):
        raise ValidationError(field, "must be a finite number")
    return number


def parse_non_negative_int(value: object, field: str) -> int:
    """Parse an integer that is zero or greater."""
    number = _parse_int(value, field)
    if number < 0:
        raise ValidationError(field, "must not be negative")
    return number


def parse_positive_int(value: object, field: str) -> int:
    """Parse an integer that is strictly greater than zero."""
    number = _parse_int(value, field)
    if number <= 0:
        raise ValidationError(field, "must be positive")
    return number


def parse_non_negative_number(value: object, field: str) -> float:
    """Parse a number that is zero or greater."""
    number = _parse_float(value, field)
    if number < 0:
        raise ValidationError(field, "must not be negative")
    return number


def parse_positive_number(value: object, field: str) -> float:
    """Parse a number that is strictly greater than zero."""
    number = _parse_float(value, field)
    if number <= 0:
        raise ValidationError(field, "must be positive")
    return number


def parse_meal_type(value: object, field: str = "meal_type") -> MealType:
    """Parse a meal type by value or name, case-insensitively."""
    if isinstance(value, MealType):
        return value
    if isinstance(value, str):
        try:
            return MealType(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(item.value for item in MealType)
    raise ValidationError(field, f"must be one of: {allowed}")
