# the_field/validation.py
from typing import List

from bson import ObjectId
from bson.errors import InvalidId as BsonInvalidId
from pydantic import EmailStr, TypeAdapter, ValidationError

from the_field.errors import InvalidId, ValidationFailed

_email = TypeAdapter(EmailStr)


def parse_object_id(raw: str) -> ObjectId:
    try:
        return ObjectId(raw)
    except (BsonInvalidId, TypeError) as e:
        raise InvalidId(str(e))


def is_string_empty(field: str, value: str) -> None:
    if value is None or not value.strip():
        raise ValidationFailed(field, f"{field} cannot be empty")


def normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def validate_email(field: str, value: str) -> None:
    """Non-empty first, then shape. Callers lower-case before calling."""
    is_string_empty(field, value)
    try:
        _email.validate_python(value)
    except ValidationError:
        raise ValidationFailed(field, f"{value} is not a valid email", f"{field} must be a valid email")


def check_range(field: str, value: int, low: int, high: int) -> None:
    # inclusive on both ends
    if value is None or value < low or value > high:
        raise ValidationFailed(
            field,
            f"{field} must be between {low} and {high}",
            f"{field} is out of range",
        )


def is_list_empty(field: str, values: List[str]) -> None:
    if not values:
        raise ValidationFailed(field, f"{field} list cannot be empty", f"At least one {field} is required")
