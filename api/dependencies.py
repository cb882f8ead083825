"""
API dependencies for dependency injection
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from domain.models import get_db_session
from services import RecipeService, WeekService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(db)


def get_week_service(
    db: Session = Depends(get_db),
    recipe_service: RecipeService = Depends(get_recipe_service),
) -> WeekService:
    return WeekService(db, recipe_service=recipe_service)
