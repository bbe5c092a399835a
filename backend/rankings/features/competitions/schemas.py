"""
Competition schemas.

Pydantic models for competition media.
"""

from pydantic import BaseModel


class MediumTypeOption(BaseModel):
    """One entry of the media type label table."""

    value: str
    label: str


class CompetitionMediumResponse(BaseModel):
    """Competition medium response."""

    id: int
    competition_id: str
    type: str
    type_label: str
    status: str
    text: str
    uri: str

    class Config:
        from_attributes = True
