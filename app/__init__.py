"""
App package - Application configuration and core utilities.
Contains settings and exceptions shared by every layer.
"""

from app.config import settings
from app.exceptions import (
    DailyDietError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
)

__all__ = [
    "settings",
    "DailyDietError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
]
