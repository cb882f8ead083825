"""Pydantic schemas for the two-week planner view.

Field names follow the frontend contract (camelCase on the wire), the Python
attributes stay snake_case.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WeekData(BaseModel):
    """One day of the week view."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Localized weekday name")
    date: dt.date
    dish_selected: bool = Field(default=False, alias="dishSelected")
    # Shopping lists are not implemented yet
    shopping_list: bool = Field(default=False, alias="shoppingList")
    recipe_id: Optional[str] = Field(default=None, alias="recipeId")


class WeekRecipeBody(BaseModel):
    """Request body for linking a recipe to a day."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str = Field(..., min_length=1, alias="recipeId")


class WeekDayResponse(BaseModel):
    """Persisted calendar day."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    date: dt.date
    recipe_id: Optional[str] = Field(default=None, alias="recipeId")


class DeleteResult(BaseModel):
    """Number of calendar days removed by a delete."""

    affected: int = 0
