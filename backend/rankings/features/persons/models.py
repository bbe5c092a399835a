"""
Person model.

A competitor is identified by ``wca_id``. Every correction that must not
rewrite the past leaves a snapshot row behind, so one ``wca_id`` maps to an
ordered history of rows:

- sub_id 1: the current identity (exactly one per wca_id)
- sub_id 2..n: retained historical identities
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Integer, ForeignKey, UniqueConstraint

from rankings.models.base import Base

CURRENT_SUB_ID = 1


class Person(Base):
    """One identity version of a competitor."""

    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)

    wca_id = Column(String(10), nullable=False, index=True)  # "2009ZEMD01"
    sub_id = Column(Integer, nullable=False, default=CURRENT_SUB_ID)

    name = Column(String(80), nullable=False)
    country_id = Column(String(50), ForeignKey("countries.id"), nullable=False)
    gender = Column(String(1), nullable=True)  # "m" / "f" / "o"
    dob = Column(Date, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("wca_id", "sub_id", name="uq_person_wca_id_sub_id"),
    )

    @property
    def is_current(self) -> bool:
        return self.sub_id == CURRENT_SUB_ID

    def __repr__(self):
        return f"<Person {self.wca_id}#{self.sub_id} ({self.name}, {self.country_id})>"
