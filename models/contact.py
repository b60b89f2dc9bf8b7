from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, Index, func
from database import Base


def utcnow():
    return datetime.now(timezone.utc)


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String(12), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(190), nullable=False)
    phone = Column(String(50), nullable=True)
    company = Column(String(150), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        # Email uniqueness ignores case
        Index("uq_contacts_email", func.lower(email), unique=True),
        Index("idx_contacts_name", first_name, last_name),
        Index("idx_contacts_company", company),
    )

    def __repr__(self):
        return f"<Contact {self.id} {self.email}>"
