from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from fittrack.core.units import (
    WEIGHT_UNITS, format_percent, format_run_time, format_weight, parse_number, parse_run_time
)
from fittrack.services.progress_analytics import TimeRange


class ProgressEntryCreate(BaseModel):
    """Форма чек-ина. Кривой числовой ввод не отклоняется, а превращается в 0."""
    weight: float = 0
    weight_unit: str = "kg"
    run_time: int = 0  # секунды; принимает и строку "m:ss"
    completion_rate: float = 0  # 0 = посчитать по неделе
    notes: Optional[str] = Field(default=None, max_length=5000)
    front_photo: Optional[str] = None
    back_photo: Optional[str] = None
    side_photo: Optional[str] = None
    entry_date: Optional[datetime] = None

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, value):
        return parse_number(value)

    @field_validator("run_time", mode="before")
    @classmethod
    def coerce_run_time(cls, value):
        return parse_run_time(value)

    @field_validator("completion_rate", mode="before")
    @classmethod
    def coerce_completion_rate(cls, value):
        return min(parse_number(value), 100.0)

    @field_validator("weight_unit")
    @classmethod
    def check_unit(cls, value: str) -> str:
        if value not in WEIGHT_UNITS:
            raise ValueError(f"weight_unit must be one of: {', '.join(WEIGHT_UNITS)}")
        return value

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class ProgressEntryRead(BaseModel):
    id: int
    entry_date: datetime
    weight: float  # кг
    run_time_seconds: int
    completion_rate: float
    notes: Optional[str] = None
    front_photo: Optional[str] = None
    back_photo: Optional[str] = None
    side_photo: Optional[str] = None
    weight_display: str
    run_time_display: str
    completion_display: str

    @classmethod
    def from_entry(cls, entry, unit: str = "kg") -> "ProgressEntryRead":
        return cls(
            id=entry.id,
            entry_date=entry.entry_date,
            weight=entry.weight,
            run_time_seconds=entry.run_time_seconds,
            completion_rate=entry.completion_rate,
            notes=entry.notes,
            front_photo=entry.front_photo,
            back_photo=entry.back_photo,
            side_photo=entry.side_photo,
            weight_display=format_weight(entry.weight, unit),
            run_time_display=format_run_time(entry.run_time_seconds),
            completion_display=format_percent(entry.completion_rate),
        )


class ProgressStats(BaseModel):
    time_range: TimeRange
    window: int
    entries_count: int
    latest: Optional[ProgressEntryRead] = None
    weight_trend_percent: float
    average_run_time: float
    average_run_time_display: str
    best_run_time: int
    best_run_time_display: str
    average_completion_rate: float
    consistency_streak: int


class PhotoUploadResponse(BaseModel):
    key: str
    view: str
    content_type: str
    size: int


class PhotoUrlResponse(BaseModel):
    url: str
    expires_in: int
