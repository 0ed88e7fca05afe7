"""Object identifiers.

Every stored document is keyed by a 24 character hexadecimal object id,
carried around as a plain string.
"""

from bson import ObjectId
from protean.exceptions import ValidationError


def new_object_id() -> str:
    return str(ObjectId())


def is_object_id(value) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def ensure_object_id(value, field: str = "id") -> str:
    """Return ``value`` unchanged, or raise a 400-class error when malformed."""
    if not is_object_id(value):
        raise ValidationError({field: [f"'{value}' is not a valid identifier"]})
    return value
