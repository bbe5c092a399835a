"""
Person schemas.

Pydantic models for identity corrections and person aggregates.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import date


class PersonCorrectionRequest(BaseModel):
    """Raw form input for correct/split operations. Omitted fields keep their value."""

    name: Optional[str] = None
    country_id: Optional[str] = None
    dob: Optional[date] = None


class PersonResponse(BaseModel):
    """One identity row."""

    wca_id: str
    sub_id: int
    name: str
    country_id: str
    gender: Optional[str] = None
    dob: Optional[date] = None

    class Config:
        from_attributes = True


class PersonDetailResponse(BaseModel):
    """Current identity with its history."""

    person: PersonResponse
    history: list[PersonResponse] = []


class PodiumResponse(BaseModel):
    """Podium place, ``pos`` being the place among eligible competitors."""

    competition_id: str
    event_id: str
    pos: int
    best: int
    average: int

    class Config:
        from_attributes = True


class PodiumsResponse(BaseModel):
    """World Championship podiums plus champion titles per scope."""

    world_championship_podiums: list[PodiumResponse] = []
    championship_podiums: dict[str, list[PodiumResponse]] = {}
