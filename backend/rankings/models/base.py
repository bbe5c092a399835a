"""
Declarative base shared by every registry table.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
