from fastapi import APIRouter, Depends, Path
from datetime import date

from fittrack.core.dependencies import get_day_aggregator, get_record_store, get_scheduler
from fittrack.core.schedule_table import MEAL_SLOTS, SHAKE_TIME
from fittrack.repositories.record_store import RecordStore
from fittrack.schemas.day import DayRecordRead
from fittrack.schemas.meal import MealDayResponse, MealLogRead, MealSlot, MealUpdate, MealUpdateResponse
from fittrack.services.day_aggregator import DayAggregator
from fittrack.services.scheduler import Scheduler

router = APIRouter()


@router.get("/{day}", response_model=MealDayResponse)
async def get_meals(
    day: date,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    record = await store.get_or_create_day_record(day)
    logs = {log.slot: log for log in await store.list_meal_logs(day)}
    is_high_carb = scheduler.is_high_carb(day)

    meals = [
        MealSlot(
            slot=slot,
            plan=scheduler.meal_plan(day, slot),
            log=MealLogRead.model_validate(logs[slot]) if slot in logs else None,
        )
        for slot in MEAL_SLOTS
    ]

    return MealDayResponse(
        date=day,
        carb_type=scheduler.carb_type(day),
        meals=meals,
        shake=None if scheduler.is_rest_day(day) else scheduler.post_workout_shake(is_high_carb),
        shake_time=SHAKE_TIME,
        shake_done=record.shake_done,
        comfort_food=scheduler.comfort_food(),
        total_target_calories=scheduler.total_target_calories(day),
        meals_completed=record.meals_completed,
    )


@router.put("/{day}/{slot}", response_model=MealUpdateResponse)
async def update_meal(
    day: date,
    payload: MealUpdate,
    slot: int = Path(ge=1, le=5),
    aggregator: DayAggregator = Depends(get_day_aggregator),
):
    record, log = await aggregator.set_meal(day, slot, payload.completed, payload.selected_option)
    return MealUpdateResponse(
        record=DayRecordRead.model_validate(record),
        log=MealLogRead.model_validate(log),
    )


@router.post("/{day}/shake", response_model=DayRecordRead)
async def toggle_shake(
    day: date,
    aggregator: DayAggregator = Depends(get_day_aggregator),
):
    record = await aggregator.toggle_shake(day)
    return DayRecordRead.model_validate(record)
