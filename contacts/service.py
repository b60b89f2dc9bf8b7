import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.contact import Contact, utcnow
from utils.ids import generate_id
from utils.text import clean_text
from .exceptions import DuplicateEmail, NotFound, ValidationError
from .patch import ContactPatch
from .schemas import ContactCreate

log = logging.getLogger(__name__)

SEARCH_COLUMNS = (
    Contact.first_name,
    Contact.last_name,
    Contact.email,
    Contact.phone,
    Contact.company,
)

# Attempts at drawing a free id before giving up
MAX_ID_ATTEMPTS = 3


def _email_taken(db: Session, email: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Contact.id).filter(func.lower(Contact.email) == func.lower(email))
    if exclude_id is not None:
        query = query.filter(Contact.id != exclude_id)
    return query.first() is not None


def _id_taken(db: Session, contact_id: str) -> bool:
    return db.query(Contact.id).filter(Contact.id == contact_id).first() is not None


# ============================================================
# LIST / SEARCH
# ============================================================

def list_contacts(db: Session, q: Optional[str] = None) -> List[Contact]:
    """
    All contacts, newest first.
    A non-blank q filters on a case-insensitive substring of
    first name, last name, email, phone or company.
    """
    query = db.query(Contact)

    term = q.strip() if q else ""
    if term:
        query = query.filter(or_(*(col.icontains(term, autoescape=True) for col in SEARCH_COLUMNS)))

    return query.order_by(Contact.created_at.desc()).all()


# ============================================================
# GET CONTACT BY ID
# ============================================================

def get_contact(db: Session, contact_id: str) -> Contact:
    contact = db.get(Contact, contact_id)
    if not contact:
        raise NotFound()
    return contact


# ============================================================
# CREATE CONTACT
# ============================================================

def create_contact(db: Session, contact_in: ContactCreate) -> Contact:
    first_name = clean_text(contact_in.first_name)
    email = clean_text(contact_in.email)

    if not first_name or not email:
        raise ValidationError("firstName and email are required")

    # Duplicate email
    if _email_taken(db, email):
        log.warning("Rejected duplicate email %s", email)
        raise DuplicateEmail()

    for _ in range(MAX_ID_ATTEMPTS):
        new_id = generate_id()
        contact = Contact(
            id=new_id,
            first_name=first_name,
            last_name=clean_text(contact_in.last_name),
            email=email,
            phone=clean_text(contact_in.phone),
            company=clean_text(contact_in.company),
            avatar_url=clean_text(contact_in.avatar_url),
            notes=clean_text(contact_in.notes),
            created_at=utcnow(),
        )
        db.add(contact)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # The generated id collided; draw another
            if _id_taken(db, new_id):
                continue
            # Otherwise a concurrent create won the email index
            log.warning("Rejected duplicate email %s", email)
            raise DuplicateEmail()

        db.refresh(contact)
        log.info("Created contact %s", contact.id)
        return contact

    raise RuntimeError("Could not generate a unique contact id")


# ============================================================
# UPDATE CONTACT (merge-patch)
# ============================================================

def update_contact(db: Session, contact_id: str, patch: ContactPatch) -> Contact:
    contact = get_contact(db, contact_id)
    changes = patch.changes()

    if "email" in changes and _email_taken(db, changes["email"], exclude_id=contact_id):
        log.warning("Rejected duplicate email %s for contact %s", changes["email"], contact_id)
        raise DuplicateEmail()

    for column, value in changes.items():
        setattr(contact, column, value)
    contact.updated_at = utcnow()

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        log.warning("Rejected duplicate email for contact %s", contact_id)
        raise DuplicateEmail()

    db.refresh(contact)
    log.info("Updated contact %s (%s)", contact_id, ", ".join(sorted(changes)) or "no fields")
    return contact


# ============================================================
# DELETE CONTACT
# ============================================================

def delete_contact(db: Session, contact_id: str) -> None:
    deleted = db.query(Contact).filter(Contact.id == contact_id).delete(synchronize_session=False)
    if not deleted:
        db.rollback()
        raise NotFound()

    db.commit()
    log.info("Deleted contact %s", contact_id)
