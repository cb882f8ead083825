from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ServiceValidationError
from app.weekdays import WEEKDAY_NAMES
from domain.models import WeekDay
from domain.schemas.week_schemas import DeleteResult, WeekData
from repositories import WeekDayRepository
from services.recipe_service import RecipeService


logger = logging.getLogger("weekplanner.week")

DateLike = Union[date, datetime, str]

DAYS_PER_WEEK = 7


def normalize_date(value: DateLike) -> date:
    """Drop the time of day: datetimes become dates, ISO strings are parsed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError as e:
            raise ServiceValidationError(
                f"Invalid date: {value!r}", details={"date": value}
            ) from e
    raise ServiceValidationError(f"Unsupported date value: {value!r}")


def compute_monday(value: DateLike) -> date:
    """Return the Monday of the ISO week containing ``value`` (a Sunday maps to the Monday six days earlier)."""
    day = normalize_date(value)
    return day - timedelta(days=day.isoweekday() - 1)


def weekday_name(day: date, locale: str = "de") -> str:
    return WEEKDAY_NAMES[locale][day.isoweekday() % 7]


class WeekService:
    """
    Two-week meal calendar:
    - builds the current and the next Monday-anchored week
    - shows stored days and fills gaps with unsaved placeholder days
    - links a recipe to a date (find-or-create) and unlinks it again
    """

    def __init__(
        self,
        db: Session,
        recipe_service: Optional[RecipeService] = None,
        locale: Optional[str] = None,
    ):
        self.db: Session = db
        self.week_days = WeekDayRepository(db)
        self.recipe_service = recipe_service or RecipeService(db)

        if locale is None:
            self.locale = settings.weekday_locale
        else:
            self.locale = locale.strip().lower()
            if self.locale not in WEEKDAY_NAMES:
                raise ServiceValidationError(
                    f"Unsupported weekday locale: {self.locale}",
                    details={"supported": sorted(WEEKDAY_NAMES)},
                )

    # ---------- read ----------

    def get_weeks(self, today: Optional[DateLike] = None) -> List[List[WeekData]]:
        """
        Return [current week, next week], seven days each, Monday first.

        Nothing is written: days without a stored row are shown as empty
        placeholders.
        """
        current_monday = compute_monday(today if today is not None else date.today())
        next_monday = current_monday + timedelta(days=DAYS_PER_WEEK)

        return [
            self.to_week_data(self.get_week_days(current_monday)),
            self.to_week_data(self.get_week_days(next_monday)),
        ]

    def get_week_days(self, monday: date) -> List[WeekDay]:
        days: List[WeekDay] = []
        for offset in range(DAYS_PER_WEEK):
            day = monday + timedelta(days=offset)
            week_day = self.week_days.find_by_date(day)
            if week_day is None:
                week_day = self.week_days.build(date=day)
            days.append(week_day)
        return days

    def to_week_data(self, week_days: List[WeekDay]) -> List[WeekData]:
        out: List[WeekData] = []
        for week_day in week_days:
            recipe_id = week_day.recipe_id
            out.append(
                WeekData(
                    name=weekday_name(week_day.date, self.locale),
                    date=week_day.date,
                    dish_selected=bool(recipe_id),
                    shopping_list=False,
                    recipe_id=recipe_id or None,
                )
            )
        return out

    # ---------- write ----------

    def add_recipe_to_week_day(self, day: DateLike, recipe_id: str) -> WeekDay:
        """
        Link an existing recipe to a calendar day.

        An already stored day is updated in place, otherwise a new day is
        created. The returned row is re-read after commit.

        Raises:
            NotFoundError: If the recipe does not exist (nothing is written)
        """
        day = normalize_date(day)
        recipe = self.recipe_service.get_recipe_by_id(recipe_id)

        week_day = self.week_days.find_by_date(day)
        if week_day is None:
            week_day = self.week_days.build(date=day)
            logger.debug("Creating week day %s", day)
        week_day.recipe_id = recipe.id

        try:
            saved = self.week_days.save(week_day, reload=True)
        except IntegrityError:
            # Another request inserted this date between our lookup and insert
            self.db.rollback()
            existing = self.week_days.find_by_date(day)
            if existing is None:
                raise
            logger.warning("Week day %s was created concurrently; updating it", day)
            existing.recipe_id = recipe.id
            saved = self.week_days.save(existing, reload=True)

        logger.info("Linked recipe %s to %s", recipe.id, day)
        return saved

    def remove_recipe_from_week_day(self, day: DateLike, recipe_id: str) -> DeleteResult:
        """
        Remove the day that has exactly this date and this recipe.

        A date without that recipe is left untouched and reported as 0 rows.

        Raises:
            NotFoundError: If the recipe does not exist
        """
        day = normalize_date(day)
        recipe = self.recipe_service.get_recipe_by_id(recipe_id)

        affected = self.week_days.delete_by_date_and_recipe(day, recipe.id)
        logger.info("Removed recipe %s from %s (%d rows)", recipe.id, day, affected)
        return DeleteResult(affected=affected)
