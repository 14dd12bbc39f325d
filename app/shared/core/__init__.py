"""
Core utilities package for Plant Share Application.
Provides the application exception hierarchy.
"""

from .exceptions import (
    PlantShareException,
    NotFoundError,
    UserNotFoundError,
    DatabaseError,
    RepositoryError,
)

__all__ = [
    "PlantShareException",
    "NotFoundError",
    "UserNotFoundError",
    "DatabaseError",
    "RepositoryError",
]
