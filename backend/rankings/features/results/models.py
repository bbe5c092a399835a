"""
Result model.

One recorded performance of a competitor in one round of one event at one
competition. ``person_name`` and ``country_id`` are a snapshot of the
identity the result was recorded under.
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index

from rankings.models.base import Base
from rankings.shared.constants import SolveTime


class Result(Base):
    """Historical result row."""

    __tablename__ = "results"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Competitor (WCA ID, independent of sub id)
    person_id = Column(String(10), nullable=False, index=True)

    # Identity snapshot
    person_name = Column(String(80), nullable=False)
    country_id = Column(String(50), ForeignKey("countries.id"), nullable=False, index=True)

    competition_id = Column(String(32), ForeignKey("competitions.id"), nullable=False, index=True)
    event_id = Column(String(6), nullable=False)  # "333", "333oh", "555bf"
    round_type_id = Column(String(1), nullable=False, default="f")

    pos = Column(Integer, nullable=False)

    # Centiseconds, or a SolveTime sentinel
    best = Column(Integer, nullable=False, default=SolveTime.SKIPPED_VALUE)
    average = Column(Integer, nullable=False, default=SolveTime.SKIPPED_VALUE)

    __table_args__ = (
        Index("ix_results_competition_event", "competition_id", "event_id"),
    )

    def __repr__(self):
        return f"<Result {self.id} {self.person_id} {self.competition_id}/{self.event_id} pos={self.pos}>"
