"""
User account model.

A user account may be linked to the current identity (sub id 1) of a
competitor through ``wca_id``. The account mirrors the competitor's name,
country (as an ISO code) and date of birth.
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date
import uuid

from rankings.models.base import Base


class User(Base):
    """
    Registry user account.

    Users with a ``delegate_status`` officiate competitions.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, index=True, nullable=False)

    # Link to the competitor identity
    wca_id = Column(String(10), unique=True, index=True, nullable=True)

    # Profile mirrored from the person record
    name = Column(String(255), nullable=True)
    country_iso2 = Column(String(2), nullable=True)
    dob = Column(Date, nullable=True)

    # Officiating
    delegate_status = Column(String(50), nullable=True)  # DelegateStatus value

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<User {self.id} ({self.name})>"
