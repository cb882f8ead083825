"""
App package - Application configuration and core utilities.
Contains settings and exceptions shared by all layers.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    NotFoundError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "NotFoundError",
]
