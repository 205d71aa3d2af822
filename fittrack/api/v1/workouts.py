from fastapi import APIRouter, Depends, HTTPException
from datetime import date, timedelta
from typing import List, Optional
import logging

from fittrack.core.config import settings
from fittrack.core.dependencies import get_record_store, get_scheduler
from fittrack.core.units import from_kilograms, to_kilograms
from fittrack.models.workout_log import WorkoutLog
from fittrack.repositories.record_store import RecordStore
from fittrack.schemas.workout import ExerciseLog, WorkoutDayResponse, WorkoutLogRead, WorkoutLogUpdate
from fittrack.services.scheduler import Scheduler

router = APIRouter()
logger = logging.getLogger(__name__)


def display_weights(log: Optional[WorkoutLog]) -> List[float]:
    if log is None:
        return []
    unit = settings.DISPLAY_WEIGHT_UNIT
    return [round(from_kilograms(w, unit), 1) for w in (log.weights or [])]


@router.get("/{day}", response_model=WorkoutDayResponse)
async def get_workout(
    day: date,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    workout = scheduler.workout_for(day)
    last_week = day - timedelta(days=7)

    exercises = []
    for exercise in workout.exercises:
        log = await store.get_workout_log(day, exercise.name)
        previous = await store.get_workout_log(last_week, exercise.name)
        exercises.append(ExerciseLog(
            exercise=exercise,
            weights=display_weights(log),
            note=log.note if log else None,
            last_week_weights=display_weights(previous),
        ))

    return WorkoutDayResponse(
        date=day,
        name=workout.name,
        is_rest_day=workout.is_rest,
        weight_unit=settings.DISPLAY_WEIGHT_UNIT,
        exercises=exercises,
    )


@router.put("/{day}/{exercise_name}", response_model=WorkoutLogRead)
async def update_workout_log(
    day: date,
    exercise_name: str,
    payload: WorkoutLogUpdate,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    workout = scheduler.workout_for(day)
    exercise = workout.find_exercise(exercise_name)
    if exercise is None:
        raise HTTPException(
            status_code=404,
            detail=f"Exercise '{exercise_name}' is not scheduled on {day.isoformat()}",
        )

    weights = [to_kilograms(w, payload.unit) for w in payload.weights[:exercise.sets]]
    log = await store.get_or_create_workout_log(day, exercise.name)
    log = await store.update_workout_log(log, weights, payload.note)
    logger.info(f"{day}: {exercise.name} -> {len(weights)} sets saved")

    return WorkoutLogRead.model_validate(log)
