"""
Tests for WeekService, the two-week meal calendar.

Covers:
- Monday computation for every weekday, including Sunday
- Building the current and next week without writing anything
- Linking recipes to days (find-or-create) and unlinking them
- Projection of days into the week view
"""

import pytest
from datetime import date, datetime, timedelta
from unittest.mock import Mock, patch
from sqlalchemy.orm import Session

from test_fixtures import (
    MONDAY,
    REALISTIC_RECIPES,
    count_week_days,
    db_session,
    make_recipe,
    make_week_day,
)
from services.week_service import (
    WEEKDAY_NAMES,
    WeekService,
    compute_monday,
    normalize_date,
    weekday_name,
)
from services.recipe_service import RecipeService
from domain.models import WeekDay
from app.exceptions import NotFoundError, ServiceValidationError


GERMAN_WEEK = [
    "Montag",
    "Dienstag",
    "Mittwoch",
    "Donnerstag",
    "Freitag",
    "Samstag",
    "Sonntag",
]


# =============================================================================
# DATE HELPERS
# =============================================================================


def test_compute_monday_for_every_day_of_several_weeks():
    start = date(2023, 12, 20)
    for offset in range(45):
        day = start + timedelta(days=offset)
        monday = compute_monday(day)

        assert monday.weekday() == 0
        assert 0 <= (day - monday).days <= 6


def test_compute_monday_sunday_belongs_to_previous_monday():
    assert compute_monday(date(2024, 1, 7)) == date(2024, 1, 1)
    assert compute_monday(date(2024, 1, 1)) == date(2024, 1, 1)
    assert compute_monday(date(2024, 1, 8)) == date(2024, 1, 8)


def test_compute_monday_drops_time_and_keeps_input():
    moment = datetime(2024, 1, 4, 18, 45, 12)
    monday = compute_monday(moment)

    assert monday == date(2024, 1, 1)
    assert type(monday) is date
    assert moment == datetime(2024, 1, 4, 18, 45, 12)


def test_normalize_date_variants():
    assert normalize_date(date(2024, 3, 5)) == date(2024, 3, 5)
    assert normalize_date(datetime(2024, 3, 5, 23, 59)) == date(2024, 3, 5)
    assert normalize_date("2024-03-05") == date(2024, 3, 5)
    assert normalize_date("2024-03-05T10:30:00") == date(2024, 3, 5)

    with pytest.raises(ServiceValidationError):
        normalize_date("next tuesday")
    with pytest.raises(ServiceValidationError):
        normalize_date(42)


def test_weekday_name_uses_sunday_zero_table():
    assert WEEKDAY_NAMES["de"][0] == "Sonntag"
    assert weekday_name(date(2024, 1, 7)) == "Sonntag"
    assert weekday_name(date(2024, 1, 1)) == "Montag"
    assert weekday_name(date(2024, 1, 6), "en") == "Saturday"


def test_weekday_names_are_immutable():
    with pytest.raises(TypeError):
        WEEKDAY_NAMES["fr"] = ("Dimanche",) * 7
    with pytest.raises(TypeError):
        WEEKDAY_NAMES["de"][0] = "Sonnabend"


# =============================================================================
# GET WEEKS
# =============================================================================


def test_get_weeks_shape_and_dates(db_session: Session):
    service = WeekService(db_session)

    weeks = service.get_weeks(today=date(2024, 1, 3))

    assert len(weeks) == 2
    current, upcoming = weeks
    assert len(current) == 7
    assert len(upcoming) == 7

    for i in range(7):
        assert current[i].date == MONDAY + timedelta(days=i)
        assert upcoming[i].date == MONDAY + timedelta(days=7 + i)

    assert [d.name for d in current] == GERMAN_WEEK
    assert [d.name for d in upcoming] == GERMAN_WEEK
    assert current[0].name == "Montag" and current[0].date == date(2024, 1, 1)
    assert current[6].name == "Sonntag" and current[6].date == date(2024, 1, 7)


def test_get_weeks_on_sunday_shows_the_week_ending_today(db_session: Session):
    service = WeekService(db_session)

    current, upcoming = service.get_weeks(today=date(2024, 1, 7))

    assert current[0].date == date(2024, 1, 1)
    assert current[-1].date == date(2024, 1, 7)
    assert upcoming[0].date == date(2024, 1, 8)


def test_get_weeks_defaults_to_today(db_session: Session):
    service = WeekService(db_session)

    current, _ = service.get_weeks()

    today = date.today()
    assert current[0].date == today - timedelta(days=today.weekday())
    assert today in [d.date for d in current]


def test_get_weeks_does_not_persist_placeholder_days(db_session: Session):
    service = WeekService(db_session)

    service.get_weeks(today=MONDAY)

    assert count_week_days(db_session) == 0
    assert not db_session.new


def test_get_weeks_shows_linked_recipes(db_session: Session):
    recipe = make_recipe(db_session, REALISTIC_RECIPES[1])
    make_week_day(db_session, date(2024, 1, 3), recipe)
    make_week_day(db_session, date(2024, 1, 10), recipe)

    current, upcoming = WeekService(db_session).get_weeks(today=MONDAY)

    wednesday = current[2]
    assert wednesday.dish_selected is True
    assert wednesday.recipe_id == recipe.id
    assert wednesday.shopping_list is False
    assert upcoming[2].recipe_id == recipe.id

    others = [d for i, d in enumerate(current) if i != 2]
    assert all(d.dish_selected is False and d.recipe_id is None for d in others)


def test_get_weeks_english_locale(db_session: Session):
    current, _ = WeekService(db_session, locale="en").get_weeks(today=MONDAY)

    assert current[0].name == "Monday"
    assert current[6].name == "Sunday"


def test_unknown_locale_is_rejected(db_session: Session):
    with pytest.raises(ServiceValidationError):
        WeekService(db_session, locale="xx")


def test_default_locale_comes_from_settings(db_session: Session):
    with patch("services.week_service.settings.weekday_locale", "en"):
        service = WeekService(db_session)

    assert service.locale == "en"
    assert service.get_weeks(today=MONDAY)[0][0].name == "Monday"


# =============================================================================
# PROJECTION
# =============================================================================


def test_to_week_data_without_recipe(db_session: Session):
    service = WeekService(db_session)

    [entry] = service.to_week_data([WeekDay(date=date(2024, 1, 2))])

    assert entry.name == "Dienstag"
    assert entry.date == date(2024, 1, 2)
    assert entry.dish_selected is False
    assert entry.shopping_list is False
    assert entry.recipe_id is None


def test_to_week_data_preserves_order(db_session: Session):
    service = WeekService(db_session)
    days = [WeekDay(date=date(2024, 1, d)) for d in (5, 1, 3)]

    result = service.to_week_data(days)

    assert [e.date.day for e in result] == [5, 1, 3]
    assert [e.name for e in result] == ["Freitag", "Montag", "Mittwoch"]


# =============================================================================
# ADD RECIPE
# =============================================================================


def test_add_recipe_creates_week_day(db_session: Session):
    recipe = make_recipe(db_session)
    service = WeekService(db_session)

    week_day = service.add_recipe_to_week_day(date(2024, 1, 2), recipe.id)

    assert week_day.id is not None
    assert week_day.date == date(2024, 1, 2)
    assert week_day.recipe_id == recipe.id
    assert week_day.recipe.name == recipe.name
    assert count_week_days(db_session) == 1


def test_add_recipe_twice_same_day_keeps_one_row(db_session: Session):
    first = make_recipe(db_session, REALISTIC_RECIPES[0])
    second = make_recipe(db_session, REALISTIC_RECIPES[2])
    service = WeekService(db_session)

    created = service.add_recipe_to_week_day(date(2024, 1, 4), first.id)
    updated = service.add_recipe_to_week_day(date(2024, 1, 4), second.id)

    assert updated.id == created.id
    assert count_week_days(db_session, date(2024, 1, 4)) == 1
    stored = db_session.query(WeekDay).filter(WeekDay.date == date(2024, 1, 4)).one()
    assert stored.recipe_id == second.id


def test_add_recipe_ignores_time_of_day(db_session: Session):
    recipe = make_recipe(db_session)
    service = WeekService(db_session)

    service.add_recipe_to_week_day(datetime(2024, 1, 5, 8, 0), recipe.id)
    service.add_recipe_to_week_day(datetime(2024, 1, 5, 21, 30), recipe.id)

    assert count_week_days(db_session) == 1
    assert count_week_days(db_session, date(2024, 1, 5)) == 1


def test_add_unknown_recipe_raises_and_writes_nothing(db_session: Session):
    service = WeekService(db_session)

    with pytest.raises(NotFoundError):
        service.add_recipe_to_week_day(date(2024, 1, 2), "does-not-exist")

    assert count_week_days(db_session) == 0


def test_add_unknown_recipe_keeps_existing_assignment(db_session: Session):
    recipe = make_recipe(db_session)
    make_week_day(db_session, date(2024, 1, 2), recipe)
    service = WeekService(db_session)

    with pytest.raises(NotFoundError):
        service.add_recipe_to_week_day(date(2024, 1, 2), "does-not-exist")

    stored = db_session.query(WeekDay).filter(WeekDay.date == date(2024, 1, 2)).one()
    assert stored.recipe_id == recipe.id


def test_add_recipe_checks_recipe_before_touching_days():
    recipe_service = Mock(spec=RecipeService)
    recipe_service.get_recipe_by_id.side_effect = NotFoundError("Recipe x not found")
    db = Mock(spec=Session)
    service = WeekService(db, recipe_service=recipe_service)
    service.week_days = Mock()

    with pytest.raises(NotFoundError):
        service.add_recipe_to_week_day(date(2024, 1, 2), "x")

    service.week_days.find_by_date.assert_not_called()
    service.week_days.save.assert_not_called()


def test_add_recipe_updates_row_inserted_concurrently(db_session: Session):
    first = make_recipe(db_session, REALISTIC_RECIPES[0])
    second = make_recipe(db_session, REALISTIC_RECIPES[3])
    existing = make_week_day(db_session, date(2024, 1, 6), first)
    service = WeekService(db_session)

    # The first lookup misses the row, as if it was inserted right after it
    service.week_days.find_by_date = Mock(side_effect=[None, existing])

    saved = service.add_recipe_to_week_day(date(2024, 1, 6), second.id)

    assert saved.id == existing.id
    assert saved.recipe_id == second.id
    assert count_week_days(db_session, date(2024, 1, 6)) == 1


# =============================================================================
# REMOVE RECIPE
# =============================================================================


def test_remove_recipe_deletes_matching_day(db_session: Session):
    recipe = make_recipe(db_session)
    make_week_day(db_session, date(2024, 1, 3), recipe)
    service = WeekService(db_session)

    result = service.remove_recipe_from_week_day(date(2024, 1, 3), recipe.id)

    assert result.affected == 1
    assert count_week_days(db_session) == 0


def test_remove_recipe_with_other_recipe_deletes_nothing(db_session: Session):
    planned = make_recipe(db_session, REALISTIC_RECIPES[0])
    other = make_recipe(db_session, REALISTIC_RECIPES[1])
    make_week_day(db_session, date(2024, 1, 3), planned)
    service = WeekService(db_session)

    result = service.remove_recipe_from_week_day(date(2024, 1, 3), other.id)

    assert result.affected == 0
    assert count_week_days(db_session, date(2024, 1, 3)) == 1


def test_remove_recipe_on_other_date_deletes_nothing(db_session: Session):
    recipe = make_recipe(db_session)
    make_week_day(db_session, date(2024, 1, 3), recipe)
    service = WeekService(db_session)

    result = service.remove_recipe_from_week_day(date(2024, 1, 4), recipe.id)

    assert result.affected == 0
    assert count_week_days(db_session) == 1


def test_remove_unknown_recipe_raises(db_session: Session):
    recipe = make_recipe(db_session)
    make_week_day(db_session, date(2024, 1, 3), recipe)
    service = WeekService(db_session)

    with pytest.raises(NotFoundError):
        service.remove_recipe_from_week_day(date(2024, 1, 3), "does-not-exist")

    assert count_week_days(db_session) == 1


def test_day_is_free_again_after_removal(db_session: Session):
    recipe = make_recipe(db_session)
    service = WeekService(db_session)
    service.add_recipe_to_week_day(date(2024, 1, 2), recipe.id)

    service.remove_recipe_from_week_day(date(2024, 1, 2), recipe.id)
    current, _ = service.get_weeks(today=MONDAY)

    assert current[1].dish_selected is False
    assert current[1].recipe_id is None
