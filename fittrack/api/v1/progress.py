from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form, Query
from datetime import date, datetime
from typing import List, Optional
import logging

from fittrack.core.config import settings
from fittrack.core.dependencies import get_record_store, get_scheduler
from fittrack.core.units import format_run_time, to_kilograms
from fittrack.repositories.record_store import RecordStore
from fittrack.schemas.progress import (
    PhotoUploadResponse, PhotoUrlResponse, ProgressEntryCreate, ProgressEntryRead, ProgressStats
)
from fittrack.services import photo_storage
from fittrack.services.progress_analytics import ProgressAnalytics, TimeRange
from fittrack.services.scheduler import Scheduler

router = APIRouter()
logger = logging.getLogger(__name__)


def to_local_naive(value: datetime, scheduler: Scheduler) -> datetime:
    """Даты чек-инов хранятся в локальном времени пользователя без tzinfo."""
    if value.tzinfo is not None:
        value = value.astimezone(scheduler.tz).replace(tzinfo=None)
    return value


@router.post("/entries", response_model=ProgressEntryRead, status_code=201)
async def create_entry(
    payload: ProgressEntryCreate,
    store: RecordStore = Depends(get_record_store),
    scheduler: Scheduler = Depends(get_scheduler),
):
    if payload.entry_date is not None:
        entry_date = to_local_naive(payload.entry_date, scheduler)
    else:
        entry_date = datetime.now(scheduler.tz).replace(tzinfo=None)

    completion_rate = payload.completion_rate
    if not completion_rate:
        week = scheduler.week_of(entry_date)
        records = await store.query_day_records(week[0], week[-1])
        completion_rate = ProgressAnalytics.weekly_completion_rate(records, scheduler, week)

    entry = await store.create_progress_entry(
        entry_date=entry_date,
        weight=to_kilograms(payload.weight, payload.weight_unit),
        run_time_seconds=payload.run_time,
        completion_rate=completion_rate,
        notes=payload.notes,
        front_photo=payload.front_photo,
        back_photo=payload.back_photo,
        side_photo=payload.side_photo,
    )
    logger.info(f"Чек-ин сохранён: id={entry.id}, {entry.entry_date.isoformat()}")

    return ProgressEntryRead.from_entry(entry, settings.DISPLAY_WEIGHT_UNIT)


@router.get("/entries", response_model=List[ProgressEntryRead])
async def list_entries(
    start: Optional[date] = None,
    end: Optional[date] = None,
    store: RecordStore = Depends(get_record_store),
):
    entries = await store.query_progress_entries(start, end)
    return [ProgressEntryRead.from_entry(e, settings.DISPLAY_WEIGHT_UNIT) for e in entries]


@router.delete("/entries/{entry_id}", status_code=204)
async def delete_entry(
    entry_id: int,
    store: RecordStore = Depends(get_record_store),
):
    entry = await store.get_progress_entry(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Progress entry not found")

    photo_keys = entry.photo_keys
    await store.delete_progress_entry(entry)
    await photo_storage.delete_photos(photo_keys)


@router.get("/stats", response_model=ProgressStats)
async def get_stats(
    time_range: TimeRange = Query(TimeRange.week, alias="range"),
    store: RecordStore = Depends(get_record_store),
):
    entries = await store.query_progress_entries()
    stats = ProgressAnalytics.summarize(entries, time_range)
    latest = stats.pop("latest")

    return ProgressStats(
        **stats,
        latest=ProgressEntryRead.from_entry(latest, settings.DISPLAY_WEIGHT_UNIT) if latest else None,
        average_run_time_display=format_run_time(int(round(stats["average_run_time"]))),
        best_run_time_display=format_run_time(stats["best_run_time"]),
    )


@router.post("/photos", response_model=PhotoUploadResponse, status_code=201)
async def upload_photo(
    file: UploadFile = File(...),
    view: str = Form(...),
):
    """Загрузить фото (front/back/side). Ключ из ответа кладётся в форму чек-ина."""
    s3_key, content_type, size = await photo_storage.upload_photo(file, view)
    return PhotoUploadResponse(key=s3_key, view=view, content_type=content_type, size=size)


@router.get("/photos/{s3_key:path}/url", response_model=PhotoUrlResponse)
async def get_photo_url(s3_key: str):
    url = await photo_storage.generate_presigned_url(s3_key, expires=settings.PHOTO_URL_EXPIRES)
    return PhotoUrlResponse(url=url, expires_in=settings.PHOTO_URL_EXPIRES)
