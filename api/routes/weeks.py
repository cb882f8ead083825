"""Two-week meal calendar routes"""

from datetime import date
from typing import List
import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_week_service
from domain.schemas.week_schemas import (
    DeleteResult,
    WeekData,
    WeekDayResponse,
    WeekRecipeBody,
)
from services import WeekService

router = APIRouter(prefix="/week", tags=["Week Planner"])
logger = logging.getLogger("weekplanner.api.weeks")


@router.get(
    "",
    response_model=List[List[WeekData]],
    response_model_exclude_none=True,
)
def get_weeks(service: WeekService = Depends(get_week_service)):
    """
    Get the current and the next week, Monday to Sunday.

    Each day carries its weekday name, the date, whether a dish is selected
    and the linked recipe id (omitted when no recipe is planned).
    """
    return service.get_weeks()


@router.post(
    "/{day}",
    response_model=WeekDayResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_recipe_to_week_day(
    day: date,
    body: WeekRecipeBody,
    service: WeekService = Depends(get_week_service),
):
    """
    Link an existing recipe to a calendar day.

    Replaces the recipe if the day already has one.

    Raises:
        404: If the recipe does not exist
    """
    logger.debug("Planning recipe %s on %s", body.recipe_id, day)
    week_day = service.add_recipe_to_week_day(day, body.recipe_id)
    return WeekDayResponse.model_validate(week_day)


@router.delete("/{day}/recipes/{recipe_id}", response_model=DeleteResult)
def remove_recipe_from_week_day(
    day: date,
    recipe_id: str,
    service: WeekService = Depends(get_week_service),
):
    """
    Unlink a recipe from a calendar day.

    Only a day holding exactly this recipe is removed; otherwise
    ``affected`` is 0.
    """
    logger.debug("Unplanning recipe %s from %s", recipe_id, day)
    return service.remove_recipe_from_week_day(day, recipe_id)
