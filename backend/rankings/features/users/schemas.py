"""
User schemas.

Pydantic models for user responses.
"""

from pydantic import BaseModel
from typing import Optional


class DelegateResponse(BaseModel):
    """Delegate (officiating user) response."""

    id: str
    name: Optional[str]
    email: str
    wca_id: Optional[str] = None
    delegate_status: Optional[str] = None

    class Config:
        from_attributes = True
