"""Parsers for raw configuration values.

Environment variables arrive as strings. Each parser returns the typed value,
``None`` for an absent optional value, or raises ``ValidationError`` naming
the offending field.
"""

from enum import Enum
from typing import Any, TypeVar

from vibequest.core.errors import ValidationError

E = TypeVar("E", bound=Enum)


def _is_missing(value: Any, field_name: str, required: bool) -> bool:
    if value is not None and value != "":
        return False
    if required:
        raise ValidationError(f"{field_name} is required", field=field_name)
    return True


def parse_string(value: Any, field_name: str, required: bool = False) -> str | None:
    """Parse a string, stripping surrounding whitespace."""
    if _is_missing(value, field_name, required):
        return None
    return str(value).strip()


def parse_integer(
    value: Any,
    field_name: str,
    required: bool = False,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int | None:
    """
    Parse an integer and check it against optional bounds.

    Raises:
        ValidationError: If the value is not an integer or is out of bounds
    """
    if _is_missing(value, field_name, required):
        return None

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer", field=field_name)

    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{field_name} must be an integer", field=field_name
        ) from e

    if min_value is not None and number < min_value:
        raise ValidationError(
            f"{field_name} must be at least {min_value}", field=field_name
        )
    if max_value is not None and number > max_value:
        raise ValidationError(
            f"{field_name} must be at most {max_value}", field=field_name
        )

    return number


def parse_enum(
    value: Any, enum_class: type[E], field_name: str, required: bool = False
) -> E | None:
    """Parse an enum member by value or by name, ignoring case."""
    if _is_missing(value, field_name, required):
        return None

    if isinstance(value, enum_class):
        return value

    wanted = str(value).strip().lower()
    for member in enum_class:
        if wanted in (str(member.value).lower(), member.name.lower()):
            return member

    choices = ", ".join(str(member.value) for member in enum_class)
    raise ValidationError(
        f"{field_name} must be one of: {choices}", field=field_name
    )
