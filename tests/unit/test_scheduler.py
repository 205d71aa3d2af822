"""
Модульные тесты для Scheduler.

Покрываемые методы:
- weekday_of / local_date: день недели в локальной таймзоне
- workout_for, is_high_carb, is_*_rest_day: зависят только от дня недели
- meal_plan: слоты 1..5, нарушение контракта на 0 и 6
- total_target_calories: сумма первых опций + шейк + comfort food
- week_of, scheduled_tasks

Расчёт не зависит от БД.
"""

import pytest
from datetime import date, datetime, timedelta, timezone

from fittrack.core.schedule_table import default_schedule
from fittrack.schemas.schedule import CarbType, Weekday
from fittrack.services.scheduler import Scheduler
from tests.conftest import MONDAY, TUESDAY, WEDNESDAY, THURSDAY, SATURDAY, SUNDAY

pytestmark = pytest.mark.unit

ALL_WEEK = [MONDAY + timedelta(days=i) for i in range(7)]


# ---------------------------------------------------------------------------
# weekday_of
# ---------------------------------------------------------------------------

def test_weekday_of_known_dates(scheduler):
    """2024-01-01 - понедельник, 2024-01-07 - воскресенье."""
    assert scheduler.weekday_of(MONDAY) is Weekday.monday
    assert scheduler.weekday_of(SUNDAY) is Weekday.sunday


def test_weekday_of_aware_datetime_uses_local_timezone():
    """01:00 UTC понедельника в Нью-Йорке - ещё воскресенье."""
    ny = Scheduler(default_schedule, "America/New_York")
    moment = datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)
    assert ny.weekday_of(moment) is Weekday.sunday
    assert ny.local_date(moment) == date(2023, 12, 31)


def test_weekday_of_naive_datetime_is_taken_as_local():
    ny = Scheduler(default_schedule, "America/New_York")
    assert ny.weekday_of(datetime(2024, 1, 1, 1, 0)) is Weekday.monday


# ---------------------------------------------------------------------------
# Зависимость только от дня недели
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("weeks_ahead", [1, 13, 52, 260])
def test_schedule_depends_only_on_weekday(scheduler, weeks_ahead: int):
    """Одинаковый день недели в другом месяце/году даёт тот же результат."""
    for day in ALL_WEEK:
        later = day + timedelta(weeks=weeks_ahead)
        assert scheduler.workout_for(later) == scheduler.workout_for(day)
        assert scheduler.is_high_carb(later) == scheduler.is_high_carb(day)
        assert scheduler.total_target_calories(later) == scheduler.total_target_calories(day)


def test_wednesday_and_sunday_are_rest(scheduler):
    assert scheduler.workout_for(WEDNESDAY).name == "Rest"
    assert scheduler.workout_for(WEDNESDAY).exercises == ()
    assert scheduler.workout_for(SUNDAY).exercises == ()
    assert scheduler.workout_for(MONDAY).name == "Legs"
    assert scheduler.workout_for(THURSDAY).name == "Chest & Triceps"


def test_only_monday_is_high_carb(scheduler):
    high = [day for day in ALL_WEEK if scheduler.is_high_carb(day)]
    assert high == [MONDAY]
    assert scheduler.carb_type(TUESDAY) is CarbType.low


def test_rest_day_classification(scheduler):
    assert [d for d in ALL_WEEK if scheduler.is_full_rest_day(d)] == [SUNDAY]
    assert [d for d in ALL_WEEK if scheduler.is_cardio_only_day(d)] == [WEDNESDAY]
    assert [d for d in ALL_WEEK if scheduler.is_rest_day(d)] == [WEDNESDAY, SUNDAY]


def test_cardio_description(scheduler):
    assert scheduler.cardio_description(SUNDAY) == "Rest Day"
    assert scheduler.cardio_description(WEDNESDAY) == "30 min fasted cardio"


# ---------------------------------------------------------------------------
# meal_plan
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("slot", [1, 2, 3, 4, 5])
def test_meal_plan_has_two_options(scheduler, slot: int):
    for day in ALL_WEEK:
        assert len(scheduler.meal_plan(day, slot).options) == 2


@pytest.mark.parametrize("slot", [0, 6, -1])
def test_meal_plan_out_of_range_slot_fails_fast(scheduler, slot: int):
    with pytest.raises(ValueError):
        scheduler.meal_plan(MONDAY, slot)


def test_meal_plan_uses_carb_table(scheduler):
    """Ужин в high-carb день - чит-мил."""
    assert scheduler.meal_plan(MONDAY, 5).title == "Dinner (Cheat Meal)"
    assert scheduler.meal_plan(TUESDAY, 5).title == "Dinner"


def test_post_workout_shake_and_comfort_food(scheduler):
    assert scheduler.post_workout_shake(True).calories == 390
    assert scheduler.post_workout_shake(False).calories == 300
    assert scheduler.comfort_food().calories == 130


# ---------------------------------------------------------------------------
# total_target_calories
# ---------------------------------------------------------------------------

def test_total_target_calories_high_carb_day(scheduler):
    """463 + 150 + 480 + 450 + 850 + шейк 390 + 130 = 2913"""
    assert scheduler.total_target_calories(MONDAY) == 2913


def test_total_target_calories_low_carb_day(scheduler):
    """515 + 212 + 430 + 150 + 430 + шейк 300 + 130 = 2167"""
    assert scheduler.total_target_calories(TUESDAY) == 2167
    # в кардио-день шейк всё ещё считается
    assert scheduler.total_target_calories(WEDNESDAY) == 2167


def test_total_target_calories_full_rest_day_has_no_shake(scheduler):
    assert scheduler.total_target_calories(SUNDAY) == 2167 - 300


# ---------------------------------------------------------------------------
# week_of / scheduled_tasks
# ---------------------------------------------------------------------------

def test_week_of_starts_on_monday(scheduler):
    assert scheduler.week_of(SATURDAY) == ALL_WEEK
    assert scheduler.week_of(MONDAY) == ALL_WEEK


def test_scheduled_tasks(scheduler):
    assert scheduler.scheduled_tasks(MONDAY) == ["cardio", "lift", "meals", "supplements"]
    assert scheduler.scheduled_tasks(WEDNESDAY) == ["cardio", "meals", "supplements"]
    assert scheduler.scheduled_tasks(SUNDAY) == ["meals", "supplements"]
