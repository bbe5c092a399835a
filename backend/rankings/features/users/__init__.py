"""
User management module.

Usage:
    from rankings.features.users import User, UserRepository

Models:
- User: Account optionally linked to a competitor

Repositories:
- UserRepository: Data access for users
"""

from .models import User
from .schemas import DelegateResponse
from .repository import UserRepository

__all__ = [
    # Models
    "User",
    # Schemas
    "DelegateResponse",
    # Repositories
    "UserRepository",
]
