"""
Person identity module.

Usage:
    from rankings.features.persons import PersonService

    service = PersonService(db)
    person = await service.get_person("2009ZEMD01")
    await service.split_identity(person, country_id="New Zealand")

Components:
- Person: Identity row (wca_id + sub_id)
- PersonRepository: Data access for identity rows
- PersonService: Corrections, splits and result-history aggregates
"""

from .models import Person, CURRENT_SUB_ID
from .schemas import (
    PersonCorrectionRequest,
    PersonResponse,
    PersonDetailResponse,
    PodiumResponse,
    PodiumsResponse,
)
from .repository import PersonRepository
from .podiums import PodiumResult, rerank_podiums
from .service import PersonService

__all__ = [
    # Models
    "Person",
    "CURRENT_SUB_ID",
    # Schemas
    "PersonCorrectionRequest",
    "PersonResponse",
    "PersonDetailResponse",
    "PodiumResponse",
    "PodiumsResponse",
    # Repository
    "PersonRepository",
    # Service
    "PersonService",
    "PodiumResult",
    "rerank_podiums",
]
