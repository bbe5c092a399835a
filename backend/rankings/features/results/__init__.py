"""
Results module.

Usage:
    from rankings.features.results import Result, ResultRepository
"""

from .models import Result
from .repository import ResultRepository

__all__ = [
    "Result",
    "ResultRepository",
]
