"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from rankings.api.v1.routes import persons, competitions

api_router = APIRouter()

api_router.include_router(persons.router, prefix="/persons", tags=["Persons"])
api_router.include_router(competitions.router, prefix="/competitions", tags=["Competitions"])
