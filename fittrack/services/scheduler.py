from datetime import date, datetime, timedelta
from typing import List, Union
from zoneinfo import ZoneInfo

from fittrack.core.schedule_table import MEAL_SLOTS, ScheduleTable
from fittrack.schemas.schedule import CarbType, MealOption, MealPlan, Weekday, WorkoutDay

DateLike = Union[date, datetime]


class Scheduler:
    """Отображение календарной даты на тренировку, тип углеводов и меню.

    Все методы - чистые функции от дня недели в локальной таймзоне пользователя.
    """

    def __init__(self, table: ScheduleTable, timezone: str = "UTC"):
        self.table = table
        self.tz = ZoneInfo(timezone)

    def local_date(self, value: DateLike) -> date:
        if isinstance(value, datetime):
            # naive datetime считаем уже локальным
            if value.tzinfo is not None:
                value = value.astimezone(self.tz)
            return value.date()
        return value

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def weekday_of(self, value: DateLike) -> Weekday:
        return Weekday(self.local_date(value).weekday())

    def workout_for(self, value: DateLike) -> WorkoutDay:
        return self.table.workouts[self.weekday_of(value)]

    def carb_type(self, value: DateLike) -> CarbType:
        return self.table.carbs[self.weekday_of(value)]

    def is_high_carb(self, value: DateLike) -> bool:
        return self.carb_type(value) is CarbType.high

    def is_full_rest_day(self, value: DateLike) -> bool:
        return self.weekday_of(value) is Weekday.sunday

    def is_cardio_only_day(self, value: DateLike) -> bool:
        return self.weekday_of(value) is Weekday.wednesday

    def is_rest_day(self, value: DateLike) -> bool:
        """День без силовой тренировки (кардио-день или полный отдых)."""
        return self.workout_for(value).is_rest

    def cardio_description(self, value: DateLike) -> str:
        return self.table.cardio[self.weekday_of(value)]

    def meal_plan(self, value: DateLike, slot: int) -> MealPlan:
        if slot not in MEAL_SLOTS:
            raise ValueError(f"Meal slot must be in 1..{MEAL_SLOTS[-1]}, got {slot}")
        return self.table.meals[self.carb_type(value)][slot - 1]

    def meal_plans(self, value: DateLike) -> List[MealPlan]:
        return [self.meal_plan(value, slot) for slot in MEAL_SLOTS]

    def post_workout_shake(self, is_high_carb: bool) -> MealOption:
        return self.table.shakes[CarbType.high if is_high_carb else CarbType.low]

    def comfort_food(self) -> MealOption:
        return self.table.comfort_food

    def total_target_calories(self, value: DateLike) -> int:
        total = sum(plan.options[0].calories for plan in self.meal_plans(value))
        if not self.is_full_rest_day(value):
            total += self.post_workout_shake(self.is_high_carb(value)).calories
        total += self.comfort_food().calories
        return total

    def week_of(self, value: DateLike) -> List[date]:
        """Дни недели (пн..вс), в которую попадает дата."""
        day = self.local_date(value)
        monday = day - timedelta(days=day.weekday())
        return [monday + timedelta(days=i) for i in range(7)]

    def scheduled_tasks(self, value: DateLike) -> List[str]:
        """Задачи дня, которые учитываются в проценте выполнения."""
        tasks = []
        if not self.is_full_rest_day(value):
            tasks.append("cardio")
        if not self.is_rest_day(value):
            tasks.append("lift")
        tasks.extend(["meals", "supplements"])
        return tasks
