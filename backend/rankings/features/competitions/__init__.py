"""
Competitions module.

Usage:
    from rankings.features.competitions import Competition, CompetitionRepository

Models:
- Competition, Championship, CompetitionDelegate, CompetitionMedium
"""

from .models import Competition, Championship, CompetitionDelegate, CompetitionMedium
from .schemas import MediumTypeOption, CompetitionMediumResponse
from .repository import CompetitionRepository, CompetitionMediumRepository

__all__ = [
    # Models
    "Competition",
    "Championship",
    "CompetitionDelegate",
    "CompetitionMedium",
    # Schemas
    "MediumTypeOption",
    "CompetitionMediumResponse",
    # Repositories
    "CompetitionRepository",
    "CompetitionMediumRepository",
]
