"""
Recipe routes - the recipes that can be put on the calendar.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import List
import logging

from api.dependencies import get_recipe_service
from domain.schemas.recipe_schemas import RecipeCreate, RecipeResponse
from services import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("weekplanner.api.recipes")


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate, service: RecipeService = Depends(get_recipe_service)
):
    """Create a recipe."""
    logger.debug("Creating recipe %r", body.name)
    return service.create_recipe(body.name)


@router.get("", response_model=List[RecipeResponse])
def list_recipes(
    limit: int = Query(default=100, ge=1, le=500, description="Maximum results"),
    offset: int = Query(default=0, ge=0, description="Pagination offset"),
    service: RecipeService = Depends(get_recipe_service),
):
    """List recipes ordered by name."""
    return service.list_recipes(skip=offset, limit=limit)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: str, service: RecipeService = Depends(get_recipe_service)):
    """
    Get a single recipe by ID.

    Raises:
        404: If recipe not found
    """
    return service.get_recipe_by_id(recipe_id)
