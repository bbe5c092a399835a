"""
Competition Routes

Endpoints for competition media.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rankings.db.session import get_async_db
from rankings.features.competitions import (
    CompetitionMediumRepository,
    CompetitionMediumResponse,
    MediumTypeOption,
)
from rankings.shared.constants import MediumStatus, MEDIUM_TYPE_LABELS

router = APIRouter()


@router.get("/media-types", response_model=list[MediumTypeOption])
async def media_types():
    """Media type options for the submission form."""
    return [
        MediumTypeOption(value=medium_type.value, label=label)
        for medium_type, label in MEDIUM_TYPE_LABELS.items()
    ]


@router.get("/{competition_id}/media", response_model=list[CompetitionMediumResponse])
async def accepted_media(competition_id: str, db: AsyncSession = Depends(get_async_db)):
    """Accepted media of a competition."""
    repo = CompetitionMediumRepository(db)
    media = await repo.list_for_competition(competition_id, status=MediumStatus.ACCEPTED)
    return [CompetitionMediumResponse.model_validate(m) for m in media]
