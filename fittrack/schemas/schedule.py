import enum
from typing import Tuple

from pydantic import BaseModel, Field


class Weekday(int, enum.Enum):
    """Совпадает с date.weekday(): понедельник = 0."""
    monday = 0
    tuesday = 1
    wednesday = 2
    thursday = 3
    friday = 4
    saturday = 5
    sunday = 6

    @property
    def title(self) -> str:
        return self.name.capitalize()


class CarbType(str, enum.Enum):
    high = "high"
    low = "low"


class Exercise(BaseModel):
    name: str
    sets: int = Field(ge=0)
    rep_range: str
    is_amrap: bool = False
    is_pyramid: bool = False

    class Config:
        frozen = True


class WorkoutDay(BaseModel):
    name: str
    exercises: Tuple[Exercise, ...] = ()

    class Config:
        frozen = True

    @property
    def is_rest(self) -> bool:
        return not self.exercises

    def find_exercise(self, name: str):
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None


class MealOption(BaseModel):
    description: str
    calories: int = Field(ge=0)

    class Config:
        frozen = True


class MealPlan(BaseModel):
    time: str
    title: str
    options: Tuple[MealOption, MealOption]

    class Config:
        frozen = True
