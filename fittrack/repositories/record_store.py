import logging
from contextlib import asynccontextmanager
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Sequence

from sqlalchemy import select, update, not_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.exceptions import RecordStoreError
from fittrack.models.day_record import DayRecord
from fittrack.models.meal_log import MealLog
from fittrack.models.progress_entry import ProgressEntry
from fittrack.models.workout_log import WorkoutLog

logger = logging.getLogger(__name__)

# shake_done меняется только через DayAggregator.toggle_shake вместе с meals_completed
DAY_FLAGS = ("cardio_done", "lift_done", "supplements_done")


class RecordStore:
    """Хранилище записей трекера поверх одной AsyncSession.

    Любая ошибка SQLAlchemy откатывает сессию и превращается в RecordStoreError.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def atomic(self, action: str = "save"):
        """Одна транзакция: всё внутри блока коммитится вместе или не коммитится вовсе."""
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Ошибка хранилища ({action}): {e}")
            raise RecordStoreError() from e

    async def _get_or_create(self, model, defaults: dict, **key):
        async with self.atomic(f"get {model.__tablename__}"):
            result = await self.db.execute(select(model).filter_by(**key))
            obj = result.scalar_one_or_none()
        if obj is not None:
            return obj

        obj = model(**key, **defaults)
        self.db.add(obj)
        try:
            await self.db.commit()
        except IntegrityError:
            # Запись успели создать параллельно - берём существующую
            await self.db.rollback()
            async with self.atomic(f"get {model.__tablename__}"):
                result = await self.db.execute(select(model).filter_by(**key))
                return result.scalar_one()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Ошибка хранилища (create {model.__tablename__}): {e}")
            raise RecordStoreError() from e
        await self.db.refresh(obj)
        return obj

    # --- дни ---

    async def get_day_record(self, day: date) -> Optional[DayRecord]:
        async with self.atomic("get day record"):
            result = await self.db.execute(select(DayRecord).where(DayRecord.date == day))
            return result.scalar_one_or_none()

    async def get_or_create_day_record(self, day: date) -> DayRecord:
        return await self._get_or_create(
            DayRecord,
            defaults={
                "cardio_done": False,
                "lift_done": False,
                "meals_completed": False,
                "supplements_done": False,
                "shake_done": False,
            },
            date=day,
        )

    async def lock_day_record(self, day: date) -> DayRecord:
        """Перечитать запись дня с блокировкой строки. Вызывать внутри atomic()."""
        result = await self.db.execute(
            select(DayRecord)
            .where(DayRecord.date == day)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def flip_day_field(self, day: date, field: str) -> DayRecord:
        """Инвертировать флаг одним UPDATE, без чтения значения в Python."""
        if field not in DAY_FLAGS:
            raise ValueError(f"Unknown day record flag: {field}")
        await self.get_or_create_day_record(day)
        column = getattr(DayRecord, field)
        async with self.atomic(f"toggle {field}"):
            await self.db.execute(
                update(DayRecord)
                .where(DayRecord.date == day)
                .values({field: not_(column)})
                .execution_options(synchronize_session=False)
            )
        async with self.atomic("get day record"):
            result = await self.db.execute(
                select(DayRecord)
                .where(DayRecord.date == day)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one()

    async def save(self, obj) -> None:
        async with self.atomic(f"save {obj.__tablename__}"):
            self.db.add(obj)

    async def query_day_records(self, start: date, end: date) -> List[DayRecord]:
        async with self.atomic("query day records"):
            result = await self.db.execute(
                select(DayRecord)
                .where(DayRecord.date >= start, DayRecord.date <= end)
                .order_by(DayRecord.date.asc())
            )
            return list(result.scalars().all())

    # --- питание ---

    async def get_or_create_meal_log(self, day: date, slot: int) -> MealLog:
        return await self._get_or_create(
            MealLog,
            defaults={"completed": False, "selected_option": 0, "calories": 0},
            date=day,
            slot=slot,
        )

    async def list_meal_logs(self, day: date) -> List[MealLog]:
        result = await self.db.execute(
            select(MealLog).where(MealLog.date == day).order_by(MealLog.slot.asc())
        )
        return list(result.scalars().all())

    # --- тренировки ---

    async def get_workout_log(self, day: date, exercise_name: str) -> Optional[WorkoutLog]:
        async with self.atomic("get workout log"):
            result = await self.db.execute(
                select(WorkoutLog).where(
                    WorkoutLog.date == day,
                    WorkoutLog.exercise_name == exercise_name,
                )
            )
            return result.scalar_one_or_none()

    async def get_or_create_workout_log(self, day: date, exercise_name: str) -> WorkoutLog:
        return await self._get_or_create(
            WorkoutLog,
            defaults={"weights": []},
            date=day,
            exercise_name=exercise_name,
        )

    async def update_workout_log(
        self,
        log: WorkoutLog,
        weights: Sequence[float],
        note: Optional[str] = None,
    ) -> WorkoutLog:
        async with self.atomic("update workout log"):
            log.weights = [float(w) for w in weights]
            if note is not None:
                log.note = note
            self.db.add(log)
        return log

    # --- чек-ины ---

    async def create_progress_entry(self, **fields) -> ProgressEntry:
        entry = ProgressEntry(**fields)
        async with self.atomic("create progress entry"):
            self.db.add(entry)
        await self.db.refresh(entry)
        return entry

    async def get_progress_entry(self, entry_id: int) -> Optional[ProgressEntry]:
        async with self.atomic("get progress entry"):
            return await self.db.get(ProgressEntry, entry_id)

    async def delete_progress_entry(self, entry: ProgressEntry) -> None:
        async with self.atomic("delete progress entry"):
            await self.db.delete(entry)

    async def latest_progress_entry(self) -> Optional[ProgressEntry]:
        async with self.atomic("get latest progress entry"):
            result = await self.db.execute(
                select(ProgressEntry).order_by(ProgressEntry.entry_date.desc()).limit(1)
            )
            return result.scalar_one_or_none()

    async def query_progress_entries(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[ProgressEntry]:
        """Чек-ины в диапазоне дат (включительно), от новых к старым."""
        query = select(ProgressEntry)
        if start is not None:
            query = query.where(ProgressEntry.entry_date >= datetime.combine(start, time.min))
        if end is not None:
            query = query.where(ProgressEntry.entry_date < datetime.combine(end + timedelta(days=1), time.min))
        query = query.order_by(ProgressEntry.entry_date.desc(), ProgressEntry.id.desc())

        async with self.atomic("query progress entries"):
            result = await self.db.execute(query)
            return list(result.scalars().all())
