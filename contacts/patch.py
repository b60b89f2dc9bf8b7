"""
Merge-patch value type for contact updates.

Every field of a ContactPatch is one of:

    UNSET   the field was not sent; keep the stored value
    None    the field was sent as null; keep the stored value
    str     the field was sent with a value; overwrite the stored value

Strings are trimmed. An empty string clears an optional field to NULL and
is rejected for the required fields (first_name, email).
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from pydantic.alias_generators import to_camel

from utils.text import clean_text
from .exceptions import ValidationError
from .schemas import ContactUpdate

REQUIRED_FIELDS = ("first_name", "email")


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class ContactPatch:
    first_name: Any = UNSET
    last_name: Any = UNSET
    email: Any = UNSET
    phone: Any = UNSET
    company: Any = UNSET
    avatar_url: Any = UNSET
    notes: Any = UNSET

    @classmethod
    def from_update(cls, update: ContactUpdate) -> "ContactPatch":
        # Only fields present in the request body are carried over
        return cls(**{name: getattr(update, name) for name in update.model_fields_set})

    def changes(self) -> Dict[str, Any]:
        """Column -> new value for every field that overwrites the stored one."""
        result = {}

        for f in fields(self):
            value = getattr(self, f.name)

            if value is UNSET or value is None:
                continue

            cleaned = clean_text(value)

            if cleaned is None and f.name in REQUIRED_FIELDS:
                raise ValidationError(f"{to_camel(f.name)} cannot be empty")

            result[f.name] = cleaned

        return result
