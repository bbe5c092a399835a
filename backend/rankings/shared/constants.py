"""
Registry-wide constants and closed enumerations.

This module is the single source of truth for solve time sentinels,
round types, championship types and the status/type enums of auxiliary
records.
"""

from enum import Enum


# =============================================================================
# Solve times
# =============================================================================

class SolveTime:
    """Sentinel values stored in ``results.best`` / ``results.average``."""

    SKIPPED_VALUE = 0
    DNF_VALUE = -1
    DNS_VALUE = -2

    @staticmethod
    def succeeded(value: int | None) -> bool:
        """A time counts only when it is a positive centisecond value."""
        return value is not None and value > 0


# =============================================================================
# Rounds and championships
# =============================================================================

# "f" = final, "c" = combined final
FINAL_ROUND_TYPE_IDS: tuple[str, ...] = ("f", "c")

PODIUM_POSITIONS = range(1, 4)

WORLD_CHAMPIONSHIP_TYPE = "world"


class ChampionshipScope(str, Enum):
    """Scopes for which champion titles are computed."""
    WORLD = "world"
    CONTINENTAL = "continental"
    NATIONAL = "national"


# =============================================================================
# Users
# =============================================================================

class DelegateStatus(str, Enum):
    """Officiating status of a user account."""
    CANDIDATE_DELEGATE = "candidate_delegate"
    DELEGATE = "delegate"
    SENIOR_DELEGATE = "senior_delegate"


# =============================================================================
# Competition media
# =============================================================================

class MediumType(str, Enum):
    """Kind of media item attached to a competition."""
    REPORT = "report"
    ARTICLE = "article"
    MULTIMEDIA = "multimedia"


class MediumStatus(str, Enum):
    """Moderation status of a media item."""
    ACCEPTED = "accepted"
    PENDING = "pending"


# Human-readable labels for the admin UI
MEDIUM_TYPE_LABELS: dict[MediumType, str] = {
    MediumType.REPORT: "Report",
    MediumType.ARTICLE: "Article",
    MediumType.MULTIMEDIA: "Multimedia",
}

MEDIUM_STATUS_LABELS: dict[MediumStatus, str] = {
    MediumStatus.ACCEPTED: "Accepted",
    MediumStatus.PENDING: "Pending",
}
