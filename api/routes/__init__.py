"""API routes package"""

from . import health, recipes, weeks

__all__ = ["health", "recipes", "weeks"]
