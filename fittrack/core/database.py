import logging

from fittrack.core.config import settings
from fittrack.core.base import Base
from fittrack.core.db import engine

# Импортируем ВСЕ модели, чтобы они попали в Base.metadata
from fittrack.models.day_record import DayRecord
from fittrack.models.meal_log import MealLog
from fittrack.models.workout_log import WorkoutLog
from fittrack.models.progress_entry import ProgressEntry

logger = logging.getLogger(__name__)


async def init_database():
    """Инициализация базы данных"""
    async with engine.begin() as conn:
        # Удаляем все таблицы если RESET_DATABASE=true
        if settings.RESET_DATABASE:
            logger.warning("RESET_DATABASE=true - пересоздаем БД")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы БД созданы/проверены")
