"""
Competition models.

Models:
- Competition: A sanctioned competition
- Championship: Championship type held at a competition ("world", "_Europe", "US")
- CompetitionDelegate: Ordered competition -> delegate association
- CompetitionMedium: Report/article/multimedia link submitted for a competition
"""

from datetime import datetime
from sqlalchemy import (
    Column, String, DateTime, Date, Integer, Text, ForeignKey, UniqueConstraint,
)

from rankings.models.base import Base
from rankings.shared.constants import (
    MediumType,
    MediumStatus,
    MEDIUM_TYPE_LABELS,
    MEDIUM_STATUS_LABELS,
)


class Competition(Base):
    """A competition results are recorded at."""

    __tablename__ = "competitions"

    id = Column(String(32), primary_key=True)  # "WC2017"
    name = Column(String(50), nullable=False)
    country_id = Column(String(50), ForeignKey("countries.id"), nullable=True, index=True)

    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Competition {self.id} starts={self.start_date}>"


class Championship(Base):
    """
    Championship held at a competition.

    ``championship_type`` is "world", a continent id (e.g. "_Europe") or a
    country ISO code (e.g. "US") for national championships.
    """

    __tablename__ = "championships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    competition_id = Column(String(32), ForeignKey("competitions.id"), nullable=False, index=True)
    championship_type = Column(String(50), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("competition_id", "championship_type", name="uq_competition_championship_type"),
    )


class CompetitionDelegate(Base):
    """Delegate officiating a competition. Insertion order is listing order."""

    __tablename__ = "competition_delegates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    competition_id = Column(String(32), ForeignKey("competitions.id"), nullable=False, index=True)
    delegate_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("competition_id", "delegate_id", name="uq_competition_delegate"),
    )


class CompetitionMedium(Base):
    """
    Media item linked to a competition.

    Both ``type`` and ``status`` hold closed enum values; use the label
    properties for display.
    """

    __tablename__ = "competition_media"

    id = Column(Integer, primary_key=True, autoincrement=True)
    competition_id = Column(String(32), ForeignKey("competitions.id"), nullable=False, index=True)

    type = Column(String(15), nullable=False)  # MediumType value
    status = Column(String(10), nullable=False, default=MediumStatus.PENDING.value)

    text = Column(Text, nullable=False)
    uri = Column(Text, nullable=False)

    submitter_name = Column(String(255), nullable=True)
    submitter_email = Column(String(255), nullable=True)
    submitter_comment = Column(Text, nullable=True)

    submitted_at = Column(DateTime, default=datetime.utcnow)
    decided_at = Column(DateTime, nullable=True)

    @property
    def type_label(self) -> str:
        return MEDIUM_TYPE_LABELS[MediumType(self.type)]

    @property
    def status_label(self) -> str:
        return MEDIUM_STATUS_LABELS[MediumStatus(self.status)]

    def __repr__(self):
        return f"<CompetitionMedium {self.id} type={self.type} status={self.status}>"
