"""Pydantic schemas for recipes referenced by the week planner."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeCreate(BaseModel):
    """Recipe creation request."""

    name: str = Field(..., min_length=1, max_length=255)


class RecipeResponse(BaseModel):
    """Recipe as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: Optional[datetime] = None
