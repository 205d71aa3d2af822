from fastapi import APIRouter, Depends
from datetime import date
import logging

from fittrack.core.dependencies import get_day_aggregator, get_record_store, get_scheduler
from fittrack.models.day_record import DayRecord
from fittrack.repositories.record_store import RecordStore
from fittrack.schemas.day import DayOverview, DayRecordRead, NoteUpdate, WeekDaySummary, WeekResponse
from fittrack.services.day_aggregator import DayAggregator, TaskField
from fittrack.services.progress_analytics import ProgressAnalytics
from fittrack.services.scheduler import Scheduler

router = APIRouter()
logger = logging.getLogger(__name__)


def day_label(scheduler: Scheduler, day: date) -> str:
    if scheduler.is_full_rest_day(day):
        return "Full Rest Day"
    if scheduler.is_cardio_only_day(day):
        return "Cardio Only"
    return scheduler.workout_for(day).name


def build_week_day(scheduler: Scheduler, day: date, record: DayRecord, today: date) -> WeekDaySummary:
    return WeekDaySummary(
        date=day,
        weekday=scheduler.weekday_of(day).title,
        is_today=day == today,
        label=day_label(scheduler, day),
        carb_type=scheduler.carb_type(day),
        show_cardio=not scheduler.is_full_rest_day(day),
        show_lift=not scheduler.is_rest_day(day),
        cardio_done=record.cardio_done,
        lift_done=record.lift_done,
        meals_completed=record.meals_completed,
    )


# ==========================
# ENDPOINTS
# ==========================

@router.get("/week/{day}", response_model=WeekResponse)
async def get_week(
    day: date,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    week = scheduler.week_of(day)
    # Как и в дневном виде, запись создаётся при первом обращении к дню
    records = [await store.get_or_create_day_record(d) for d in week]
    today = scheduler.today()

    return WeekResponse(
        start=week[0],
        end=week[-1],
        range_text=f"{week[0].strftime('%b')} {week[0].day} - {week[-1].strftime('%b')} {week[-1].day}",
        completion_rate=ProgressAnalytics.weekly_completion_rate(records, scheduler, week),
        days=[build_week_day(scheduler, d, r, today) for d, r in zip(week, records)],
    )


@router.get("/{day}", response_model=DayOverview)
async def get_day(
    day: date,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    record = await store.get_or_create_day_record(day)

    return DayOverview(
        date=day,
        weekday=scheduler.weekday_of(day).title,
        workout=scheduler.workout_for(day),
        carb_type=scheduler.carb_type(day),
        is_high_carb=scheduler.is_high_carb(day),
        is_full_rest_day=scheduler.is_full_rest_day(day),
        is_cardio_only_day=scheduler.is_cardio_only_day(day),
        is_rest_day=scheduler.is_rest_day(day),
        cardio_description=scheduler.cardio_description(day),
        total_target_calories=scheduler.total_target_calories(day),
        record=DayRecordRead.model_validate(record),
    )


@router.post("/{day}/tasks/{task}", response_model=DayRecordRead)
async def toggle_task(
    day: date,
    task: TaskField,
    aggregator: DayAggregator = Depends(get_day_aggregator),
):
    record = await aggregator.toggle_task(day, task)
    return DayRecordRead.model_validate(record)


@router.put("/{day}/note", response_model=DayRecordRead)
async def update_note(
    day: date,
    payload: NoteUpdate,
    store: RecordStore = Depends(get_record_store),
):
    record = await store.get_or_create_day_record(day)
    record.note = payload.note
    await store.save(record)
    return DayRecordRead.model_validate(record)
