"""
Person Routes

Admin endpoints for competitor identity corrections and aggregates.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from rankings.db.session import get_async_db
from rankings.features.persons import (
    PersonService,
    PersonCorrectionRequest,
    PersonResponse,
    PersonDetailResponse,
    PodiumResponse,
    PodiumsResponse,
)
from rankings.features.persons.models import Person
from rankings.features.users import DelegateResponse
from rankings.shared.exceptions import PersonNotFoundError

router = APIRouter()


async def _load_person(service: PersonService, wca_id: str) -> Person:
    try:
        return await service.get_person(wca_id)
    except PersonNotFoundError:
        raise HTTPException(status_code=404, detail="Person not found")


@router.get("/{wca_id}", response_model=PersonDetailResponse)
async def get_person(wca_id: str, db: AsyncSession = Depends(get_async_db)):
    """Get the current identity of a competitor and its history."""
    service = PersonService(db)
    person = await _load_person(service, wca_id)
    history = await service.history(person)
    return PersonDetailResponse(
        person=PersonResponse.model_validate(person),
        history=[PersonResponse.model_validate(p) for p in history],
    )


@router.patch("/{wca_id}", response_model=PersonResponse)
async def fix_person(
    wca_id: str,
    request: PersonCorrectionRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """
    Fix a data-entry mistake in the current identity.

    Results recorded under the current identity are updated too.
    """
    service = PersonService(db)
    person = await _load_person(service, wca_id)
    await service.correct_identity(
        person, name=request.name, country_id=request.country_id, dob=request.dob,
    )
    return PersonResponse.model_validate(person)


@router.post("/{wca_id}/sub-ids", response_model=PersonDetailResponse, status_code=201)
async def update_using_sub_id(
    wca_id: str,
    request: PersonCorrectionRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """
    Record a real-world name/country change.

    The previous identity is kept under a new sub id; results are untouched.
    """
    service = PersonService(db)
    person = await _load_person(service, wca_id)
    await service.split_identity(
        person, name=request.name, country_id=request.country_id, dob=request.dob,
    )
    history = await service.history(person)
    return PersonDetailResponse(
        person=PersonResponse.model_validate(person),
        history=[PersonResponse.model_validate(p) for p in history],
    )


@router.get("/{wca_id}/likely-delegates", response_model=list[DelegateResponse])
async def likely_delegates(wca_id: str, db: AsyncSession = Depends(get_async_db)):
    """Delegates of the competitor's competitions, oldest competition first."""
    service = PersonService(db)
    person = await _load_person(service, wca_id)
    delegates = await service.likely_officiants(person)
    return [DelegateResponse.model_validate(d) for d in delegates]


@router.get("/{wca_id}/podiums", response_model=PodiumsResponse)
async def podiums(wca_id: str, db: AsyncSession = Depends(get_async_db)):
    """World Championship podiums and champion titles per scope."""
    service = PersonService(db)
    person = await _load_person(service, wca_id)
    world = await service.world_championship_podiums(person)
    by_scope = await service.championship_podiums(person)
    return PodiumsResponse(
        world_championship_podiums=[PodiumResponse.model_validate(r) for r in world],
        championship_podiums={
            scope.value: [PodiumResponse.model_validate(p) for p in entries]
            for scope, entries in by_scope.items()
        },
    )
