from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.db import get_db
from fittrack.repositories.record_store import RecordStore
from fittrack.services.day_aggregator import DayAggregator
from fittrack.services.scheduler import Scheduler


def get_scheduler(request: Request) -> Scheduler:
    """Scheduler создаётся один раз в create_app() и лежит в app.state."""
    return request.app.state.scheduler


def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """Фабрика хранилища — инжектируется в эндпоинты через Depends."""
    return RecordStore(db)


def get_day_aggregator(
        store: RecordStore = Depends(get_record_store),
        scheduler: Scheduler = Depends(get_scheduler),
) -> DayAggregator:
    return DayAggregator(store, scheduler)
