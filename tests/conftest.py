"""
Общие фикстуры для всех тестов FitTrack backend.

Стратегия:
- Вместо PostgreSQL используется in-memory SQLite (aiosqlite) с StaticPool:
  все сессии одного теста видят одну и ту же БД, каждый тест получает чистую.
- Тестовое FastAPI-приложение создаётся без lifespan (нет подключения к БД/MinIO).
- Зависимость get_db заменяется на сессию тестовой БД.
- Даты: 2024-01-01 - понедельник, 2024-01-07 - воскресенье.
"""

import pytest
from datetime import date
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import fittrack.models  # noqa: F401  регистрирует таблицы в Base.metadata
from fittrack.core.base import Base
from fittrack.core.db import get_db
from fittrack.core.schedule_table import default_schedule
from fittrack.main import create_app
from fittrack.repositories.record_store import RecordStore
from fittrack.services.day_aggregator import DayAggregator
from fittrack.services.scheduler import Scheduler

TEST_DATABASE_URL = "sqlite+aiosqlite://"

MONDAY = date(2024, 1, 1)
TUESDAY = date(2024, 1, 2)
WEDNESDAY = date(2024, 1, 3)
THURSDAY = date(2024, 1, 4)
FRIDAY = date(2024, 1, 5)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)


# ---------------------------------------------------------------------------
# БД
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Сервисы
# ---------------------------------------------------------------------------

@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler(default_schedule, "UTC")


@pytest.fixture
def store(db) -> RecordStore:
    return RecordStore(db)


@pytest.fixture
def aggregator(store, scheduler) -> DayAggregator:
    return DayAggregator(store, scheduler)


# ---------------------------------------------------------------------------
# HTTP-клиент
# ---------------------------------------------------------------------------

def create_test_app(scheduler: Scheduler) -> FastAPI:
    """Тестовое FastAPI-приложение без lifespan."""
    return create_app(scheduler=scheduler, use_lifespan=False)


@pytest.fixture
def test_app(scheduler, session_factory) -> FastAPI:
    app = create_test_app(scheduler)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
