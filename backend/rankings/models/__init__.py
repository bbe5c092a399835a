"""
Database Models

Feature models live in their feature packages and are imported lazily to
avoid circular imports. Call ``load_all_models()`` before touching
``Base.metadata`` as a whole (table creation, Alembic autogenerate).
"""

from rankings.models.base import Base


def load_all_models():
    """Import every feature model so that Base.metadata is complete."""
    from rankings.features.countries.models import Continent, Country  # noqa: F401
    from rankings.features.users.models import User  # noqa: F401
    from rankings.features.competitions.models import (  # noqa: F401
        Competition,
        Championship,
        CompetitionDelegate,
        CompetitionMedium,
    )
    from rankings.features.results.models import Result  # noqa: F401
    from rankings.features.persons.models import Person  # noqa: F401

    return Base.metadata


__all__ = [
    "Base",
    "load_all_models",
]
