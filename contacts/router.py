from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from .patch import ContactPatch
from .schemas import ContactCreate, ContactRead, ContactUpdate, map_row
from . import service

router = APIRouter(prefix="/api/contacts", tags=["Contacts"])


@router.get("", response_model=List[ContactRead])
def list_contacts(q: Optional[str] = None, db: Session = Depends(get_db)):
    """List contacts, optionally filtered by a search term"""
    return [ContactRead(**map_row(c)) for c in service.list_contacts(db, q)]


@router.get("/{contact_id}", response_model=ContactRead)
def get_contact(contact_id: str, db: Session = Depends(get_db)):
    """Get a single contact"""
    return ContactRead(**map_row(service.get_contact(db, contact_id)))


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def create_contact(contact_in: ContactCreate, db: Session = Depends(get_db)):
    """Create a new contact"""
    return ContactRead(**map_row(service.create_contact(db, contact_in)))


@router.put("/{contact_id}", response_model=ContactRead)
def update_contact(
    contact_id: str,
    contact_in: Optional[ContactUpdate] = Body(default=None),
    db: Session = Depends(get_db),
):
    """Update only the fields present in the body"""
    # No body is an empty patch
    if contact_in is None:
        contact_in = ContactUpdate()
    patch = ContactPatch.from_update(contact_in)
    return ContactRead(**map_row(service.update_contact(db, contact_id, patch)))


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: str, db: Session = Depends(get_db)):
    """Delete a contact"""
    service.delete_contact(db, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
