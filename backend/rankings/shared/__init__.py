"""
Shared utilities (NOT business logic).

Usage:
    from rankings.shared import BaseRepository, ValidationError
    from rankings.shared.constants import SolveTime
"""
from .constants import (
    SolveTime,
    FINAL_ROUND_TYPE_IDS,
    PODIUM_POSITIONS,
    WORLD_CHAMPIONSHIP_TYPE,
    ChampionshipScope,
    DelegateStatus,
    MediumType,
    MediumStatus,
    MEDIUM_TYPE_LABELS,
    MEDIUM_STATUS_LABELS,
)
from .exceptions import (
    RegistryError,
    ValidationError,
    PersonNotFoundError,
    IdentityIntegrityError,
)
from .repository import BaseRepository

__all__ = [
    # constants
    "SolveTime",
    "FINAL_ROUND_TYPE_IDS",
    "PODIUM_POSITIONS",
    "WORLD_CHAMPIONSHIP_TYPE",
    "ChampionshipScope",
    "DelegateStatus",
    "MediumType",
    "MediumStatus",
    "MEDIUM_TYPE_LABELS",
    "MEDIUM_STATUS_LABELS",
    # exceptions
    "RegistryError",
    "ValidationError",
    "PersonNotFoundError",
    "IdentityIntegrityError",
    # repository
    "BaseRepository",
]
