from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date

from fittrack.core.units import WEIGHT_UNITS, parse_number
from fittrack.schemas.schedule import Exercise


class ExerciseLog(BaseModel):
    exercise: Exercise
    weights: List[float] = []
    note: Optional[str] = None
    last_week_weights: List[float] = []


class WorkoutDayResponse(BaseModel):
    date: date
    name: str
    is_rest_day: bool
    weight_unit: str
    exercises: List[ExerciseLog]


class WorkoutLogUpdate(BaseModel):
    weights: List[float] = Field(default_factory=list, max_length=20)
    unit: str = "kg"
    note: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("weights", mode="before")
    @classmethod
    def coerce_weights(cls, value):
        # Пустые и нечисловые поля подходов сохраняются как 0
        if not isinstance(value, list):
            return value
        return [parse_number(v) for v in value]

    @field_validator("unit")
    @classmethod
    def check_unit(cls, value: str) -> str:
        if value not in WEIGHT_UNITS:
            raise ValueError(f"unit must be one of: {', '.join(WEIGHT_UNITS)}")
        return value


class WorkoutLogRead(BaseModel):
    date: date
    exercise_name: str
    weights: List[float]
    note: Optional[str] = None

    class Config:
        from_attributes = True
