from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

from fittrack.schemas.schedule import CarbType, WorkoutDay


class DayRecordRead(BaseModel):
    date: date
    cardio_done: bool
    lift_done: bool
    meals_completed: bool
    supplements_done: bool
    shake_done: bool
    note: Optional[str] = None

    class Config:
        from_attributes = True


class DayOverview(BaseModel):
    date: date
    weekday: str
    workout: WorkoutDay
    carb_type: CarbType
    is_high_carb: bool
    is_full_rest_day: bool
    is_cardio_only_day: bool
    is_rest_day: bool
    cardio_description: str
    total_target_calories: int
    record: DayRecordRead


class WeekDaySummary(BaseModel):
    date: date
    weekday: str
    is_today: bool
    label: str  # "Full Rest Day" / "Cardio Only" / название тренировки
    carb_type: CarbType
    show_cardio: bool
    show_lift: bool
    cardio_done: bool
    lift_done: bool
    meals_completed: bool


class WeekResponse(BaseModel):
    start: date
    end: date
    range_text: str  # "Mar 4 - Mar 10"
    completion_rate: float
    days: List[WeekDaySummary]


class NoteUpdate(BaseModel):
    note: Optional[str] = Field(default=None, max_length=2000)
