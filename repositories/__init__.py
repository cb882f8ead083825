"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.recipe_repository import RecipeRepository
from repositories.week_day_repository import WeekDayRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "WeekDayRepository",
]
