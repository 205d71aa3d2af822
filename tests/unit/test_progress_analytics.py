"""
Модульные тесты для ProgressAnalytics.

Покрываемые методы:
- weight_trend_percent: неделя к неделе, защита от деления на 0
- average_run_time / best_run_time: нули исключаются, окно = первые N записей
- average_completion_rate
- consistency_streak: разрыв > 1 дня останавливает счёт
- weekly_completion_rate: процент запланированных задач за неделю
"""

import pytest
from datetime import datetime, timedelta

from fittrack.models.day_record import DayRecord
from fittrack.models.progress_entry import ProgressEntry
from fittrack.services.progress_analytics import ProgressAnalytics, TimeRange
from tests.conftest import MONDAY, WEDNESDAY, SUNDAY

pytestmark = pytest.mark.unit

D = datetime(2024, 3, 10, 8, 30)


def make_entry(days_ago: int = 0, weight: float = 0, run_time: int = 0, completion: float = 0) -> ProgressEntry:
    return ProgressEntry(
        entry_date=D - timedelta(days=days_ago),
        weight=weight,
        run_time_seconds=run_time,
        completion_rate=completion,
    )


def make_day(day, **flags) -> DayRecord:
    values = dict(cardio_done=False, lift_done=False, meals_completed=False, supplements_done=False, shake_done=False)
    values.update(flags)
    return DayRecord(date=day, **values)


# ---------------------------------------------------------------------------
# weight_trend_percent
# ---------------------------------------------------------------------------

def test_weight_trend_percent_drop():
    """(180 - 200) / 200 * 100 = -10"""
    entries = [make_entry(0, weight=180), make_entry(1, weight=200)]
    assert ProgressAnalytics.weight_trend_percent(entries) == pytest.approx(-10.0)


def test_weight_trend_percent_uses_only_two_latest():
    entries = [make_entry(0, weight=99), make_entry(7, weight=100), make_entry(14, weight=50)]
    assert ProgressAnalytics.weight_trend_percent(entries) == pytest.approx(-1.0)


@pytest.mark.parametrize("entries", [[], [make_entry(0, weight=80)]])
def test_weight_trend_percent_needs_two_entries(entries):
    assert ProgressAnalytics.weight_trend_percent(entries) == 0


def test_weight_trend_percent_previous_zero_returns_zero():
    entries = [make_entry(0, weight=80), make_entry(7, weight=0)]
    assert ProgressAnalytics.weight_trend_percent(entries) == 0


# ---------------------------------------------------------------------------
# run time
# ---------------------------------------------------------------------------

def test_average_run_time_excludes_unset():
    """[0, 300, 0, 420], окно 4 -> (300 + 420) / 2 = 360"""
    entries = [make_entry(i, run_time=t) for i, t in enumerate([0, 300, 0, 420])]
    assert ProgressAnalytics.average_run_time(entries, 4) == 360


def test_average_run_time_window_is_first_n_entries():
    """Окно считает записи, а не дни: старые записи попадают в 7-дневное окно."""
    entries = [make_entry(i * 14, run_time=t) for i, t in enumerate([300, 400, 500])]
    assert ProgressAnalytics.average_run_time(entries, 2) == 350
    assert ProgressAnalytics.average_run_time(entries, 7) == 400


def test_average_run_time_no_valid_entries():
    assert ProgressAnalytics.average_run_time([make_entry(0), make_entry(1)], 7) == 0
    assert ProgressAnalytics.average_run_time([], 7) == 0


def test_best_run_time_ignores_zero():
    entries = [make_entry(i, run_time=t) for i, t in enumerate([0, 310, 295, 0])]
    assert ProgressAnalytics.best_run_time(entries, 4) == 295


def test_best_run_time_respects_window():
    entries = [make_entry(i, run_time=t) for i, t in enumerate([330, 320, 250])]
    assert ProgressAnalytics.best_run_time(entries, 2) == 320


def test_best_run_time_all_unset_is_zero():
    assert ProgressAnalytics.best_run_time([make_entry(0), make_entry(1)], 7) == 0


# ---------------------------------------------------------------------------
# completion rate
# ---------------------------------------------------------------------------

def test_average_completion_rate_excludes_unset():
    entries = [make_entry(i, completion=c) for i, c in enumerate([80, 0, 60])]
    assert ProgressAnalytics.average_completion_rate(entries, 7) == 70


def test_average_completion_rate_empty():
    assert ProgressAnalytics.average_completion_rate([], 30) == 0


# ---------------------------------------------------------------------------
# consistency_streak
# ---------------------------------------------------------------------------

def test_consistency_streak_stops_at_gap():
    """D, D-1, D-2, D-5 -> 3 (между D-2 и D-5 разрыв в 3 дня)."""
    entries = [make_entry(days) for days in (0, 1, 2, 5)]
    assert ProgressAnalytics.consistency_streak(entries) == 3


def test_consistency_streak_same_day_entries_count():
    entries = [make_entry(0), make_entry(0), make_entry(1)]
    assert ProgressAnalytics.consistency_streak(entries) == 3


def test_consistency_streak_by_calendar_day():
    """Вечер и утро позавчера - это 2 календарных дня, разрыв."""
    entries = [
        ProgressEntry(entry_date=datetime(2024, 3, 10, 23, 0)),
        ProgressEntry(entry_date=datetime(2024, 3, 8, 23, 59)),
    ]
    assert ProgressAnalytics.consistency_streak(entries) == 1


@pytest.mark.parametrize("count", [0, 1])
def test_consistency_streak_empty_or_single(count: int):
    entries = [make_entry(0)] * count
    assert ProgressAnalytics.consistency_streak(entries) == min(count, 1)


# ---------------------------------------------------------------------------
# weekly_completion_rate
# ---------------------------------------------------------------------------

def test_weekly_completion_rate_no_records(scheduler):
    week = scheduler.week_of(MONDAY)
    assert ProgressAnalytics.weekly_completion_rate([], scheduler, week) == 0


def test_weekly_completion_rate_everything_done(scheduler):
    week = scheduler.week_of(MONDAY)
    records = [
        make_day(day, cardio_done=True, lift_done=True, meals_completed=True, supplements_done=True)
        for day in week
    ]
    assert ProgressAnalytics.weekly_completion_rate(records, scheduler, week) == 100


def test_weekly_completion_rate_counts_only_scheduled_tasks(scheduler):
    """Пн-Сб тренировки: 5*4 + ср 3 + вс 2 = 25 задач. Лифт в воскресенье не засчитывается."""
    week = scheduler.week_of(MONDAY)
    records = [
        make_day(MONDAY, cardio_done=True, lift_done=True, meals_completed=True, supplements_done=True),
        make_day(WEDNESDAY, cardio_done=True),
        make_day(SUNDAY, lift_done=True, meals_completed=True),
    ]
    assert ProgressAnalytics.weekly_completion_rate(records, scheduler, week) == pytest.approx(round(6 / 25 * 100, 1))


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def test_summarize_month_window():
    entries = [make_entry(i, weight=90 - i, run_time=300 + i) for i in range(40)]
    stats = ProgressAnalytics.summarize(entries, TimeRange.month)

    assert stats["window"] == 30
    assert stats["latest"] is entries[0]
    assert stats["best_run_time"] == 300
    assert stats["average_run_time"] == pytest.approx(314.5)
    assert stats["consistency_streak"] == 40
    assert stats["entries_count"] == 40
