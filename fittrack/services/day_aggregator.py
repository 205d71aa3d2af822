import enum
import logging
from datetime import date
from typing import Iterable, Tuple

from fittrack.core.schedule_table import MEAL_SLOTS
from fittrack.models.day_record import DayRecord
from fittrack.models.meal_log import MealLog
from fittrack.repositories.record_store import RecordStore
from fittrack.services.scheduler import Scheduler

logger = logging.getLogger(__name__)


class TaskField(str, enum.Enum):
    """Флаги дня, которые переключаются напрямую."""
    cardio = "cardio"
    lift = "lift"
    supplements = "supplements"

    @property
    def column(self) -> str:
        return f"{self.value}_done"


def recompute_meals_completed(
    meal_logs: Iterable[MealLog],
    shake_done: bool,
    is_rest_day: bool,
) -> bool:
    """Все 5 приёмов пищи отмечены И (день отдыха ИЛИ выпит шейк).

    Отсутствующий лог слота считается невыполненным. В день отдыха шейк не
    планируется, поэтому условие по нему выполнено автоматически.
    """
    completed_slots = {log.slot for log in meal_logs if log.completed}
    all_meals = all(slot in completed_slots for slot in MEAL_SLOTS)
    return all_meals and (is_rest_day or shake_done)


class DayAggregator:
    """Переключение задач дня с пересчётом составного поля meals_completed."""

    def __init__(self, store: RecordStore, scheduler: Scheduler):
        self.store = store
        self.scheduler = scheduler

    async def toggle_task(self, day: date, task: TaskField) -> DayRecord:
        record = await self.store.flip_day_field(day, task.column)
        logger.info(f"{day}: {task.column} -> {getattr(record, task.column)}")
        return record

    async def _refresh_meals_completed(self, day: date, record: DayRecord) -> None:
        logs = await self.store.list_meal_logs(day)
        record.meals_completed = recompute_meals_completed(
            logs,
            shake_done=record.shake_done,
            is_rest_day=self.scheduler.is_rest_day(day),
        )

    async def set_meal(
        self,
        day: date,
        slot: int,
        completed: bool,
        option: int = 0,
    ) -> Tuple[DayRecord, MealLog]:
        plan = self.scheduler.meal_plan(day, slot)
        if option not in range(len(plan.options)):
            raise ValueError(f"Meal option must be 0 or 1, got {option}")

        await self.store.get_or_create_day_record(day)
        log = await self.store.get_or_create_meal_log(day, slot)

        async with self.store.atomic("update meal"):
            record = await self.store.lock_day_record(day)
            log.completed = completed
            log.selected_option = option
            log.calories = plan.options[option].calories
            self.store.db.add(log)
            await self._refresh_meals_completed(day, record)

        logger.info(f"{day}: meal {slot} completed={completed}, meals_completed={record.meals_completed}")
        return record, log

    async def toggle_shake(self, day: date) -> DayRecord:
        await self.store.get_or_create_day_record(day)

        async with self.store.atomic("toggle shake"):
            record = await self.store.lock_day_record(day)
            record.shake_done = not record.shake_done
            await self._refresh_meals_completed(day, record)

        logger.info(f"{day}: shake_done -> {record.shake_done}, meals_completed={record.meals_completed}")
        return record
