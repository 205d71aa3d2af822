from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

from fittrack.schemas.day import DayRecordRead
from fittrack.schemas.schedule import CarbType, MealOption, MealPlan


class MealLogRead(BaseModel):
    slot: int
    completed: bool
    selected_option: int
    calories: int

    class Config:
        from_attributes = True


class MealSlot(BaseModel):
    slot: int
    plan: MealPlan
    log: Optional[MealLogRead] = None


class MealDayResponse(BaseModel):
    date: date
    carb_type: CarbType
    meals: List[MealSlot]
    shake: Optional[MealOption] = None  # в дни отдыха шейка нет
    shake_time: str
    shake_done: bool
    comfort_food: MealOption
    total_target_calories: int
    meals_completed: bool


class MealUpdate(BaseModel):
    completed: bool
    selected_option: int = Field(default=0, ge=0, le=1)


class MealUpdateResponse(BaseModel):
    record: DayRecordRead
    log: MealLogRead
