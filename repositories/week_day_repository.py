"""
Week Day Repository - Data access layer for calendar days of the planner
"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import WeekDay


class WeekDayRepository(BaseRepository[WeekDay]):
    """Repository for week day data access"""

    def __init__(self, db: Session):
        super().__init__(db, WeekDay)

    def find_by_date(self, day: date) -> Optional[WeekDay]:
        """Get the stored day for a calendar date, with its recipe loaded"""
        return (
            self.db.query(WeekDay)
            .options(joinedload(WeekDay.recipe))
            .filter(WeekDay.date == day)
            .first()
        )

    def build(self, **fields) -> WeekDay:
        """Create an in-memory WeekDay that is not attached to the session"""
        return WeekDay(**fields)

    def save(self, week_day: WeekDay, reload: bool = True) -> WeekDay:
        """
        Persist a new or modified week day.

        Args:
            week_day: Transient or persistent WeekDay
            reload: Re-read the row after commit so callers see stored state

        Returns:
            The persisted WeekDay
        """
        self.db.add(week_day)
        self.db.commit()
        if reload:
            self.db.refresh(week_day)
        return week_day

    def delete_by_date_and_recipe(self, day: date, recipe_id: str) -> int:
        """Delete the day matching both date and recipe; returns affected rows"""
        affected = (
            self.db.query(WeekDay)
            .filter(WeekDay.date == day, WeekDay.recipe_id == recipe_id)
            .delete(synchronize_session="fetch")
        )
        self.db.commit()
        return affected
