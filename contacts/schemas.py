from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ContactBase(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    avatar_url: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        # camelCase on the wire, snake_case in Python
        alias_generator = to_camel
        populate_by_name = True


class ContactCreate(ContactBase):
    """Required fields are checked by the service so blanks map to a 400."""
    pass


class ContactUpdate(ContactBase):
    """Any subset of fields; see ContactPatch for the merge rules."""
    pass


class ContactRead(ContactBase):
    id: str
    first_name: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime] = None


def map_row(contact) -> dict:
    """Contact row -> camelCase dict, nullable fields kept as None."""
    return {
        "id": contact.id,
        "firstName": contact.first_name,
        "lastName": contact.last_name,
        "email": contact.email,
        "phone": contact.phone,
        "company": contact.company,
        "avatarUrl": contact.avatar_url,
        "notes": contact.notes,
        "createdAt": contact.created_at,
        "updatedAt": contact.updated_at,
    }
