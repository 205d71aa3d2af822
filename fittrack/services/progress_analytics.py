import enum
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence

from fittrack.models.day_record import DayRecord
from fittrack.models.progress_entry import ProgressEntry
from fittrack.services.scheduler import Scheduler


class TimeRange(str, enum.Enum):
    week = "week"
    month = "month"
    quarter = "quarter"

    @property
    def window(self) -> int:
        return {"week": 7, "month": 30, "quarter": 90}[self.value]


def _day(value) -> date:
    return value.date() if isinstance(value, datetime) else value


class ProgressAnalytics:
    """Статистика по чек-инам.

    Все методы принимают записи, отсортированные по дате по убыванию.
    Окно - это первые N записей, а не записи за последние N дней.
    Нулевые значения означают "не задано" и в средних/лучших не участвуют.
    """

    @classmethod
    def weight_trend_percent(cls, entries: Sequence[ProgressEntry]) -> float:
        if len(entries) < 2:
            return 0.0
        current, previous = entries[0].weight or 0, entries[1].weight or 0
        if previous == 0:
            return 0.0
        return (current - previous) / previous * 100

    @classmethod
    def _run_times(cls, entries: Sequence[ProgressEntry], window: int) -> List[int]:
        return [e.run_time_seconds for e in entries[:window] if (e.run_time_seconds or 0) > 0]

    @classmethod
    def average_run_time(cls, entries: Sequence[ProgressEntry], window: int) -> float:
        times = cls._run_times(entries, window)
        if not times:
            return 0.0
        return sum(times) / len(times)

    @classmethod
    def best_run_time(cls, entries: Sequence[ProgressEntry], window: int) -> int:
        times = cls._run_times(entries, window)
        return min(times) if times else 0

    @classmethod
    def average_completion_rate(cls, entries: Sequence[ProgressEntry], window: int) -> float:
        rates = [e.completion_rate for e in entries[:window] if (e.completion_rate or 0) > 0]
        if not rates:
            return 0.0
        return sum(rates) / len(rates)

    @classmethod
    def consistency_streak(cls, entries: Sequence[ProgressEntry]) -> int:
        if not entries:
            return 0

        streak = 1
        previous = _day(entries[0].entry_date)
        for entry in entries[1:]:
            current = _day(entry.entry_date)
            if (previous - current).days > 1:
                break
            streak += 1
            previous = current
        return streak

    @classmethod
    def weekly_completion_rate(
        cls,
        records: Iterable[DayRecord],
        scheduler: Scheduler,
        week: Sequence[date],
    ) -> float:
        """Процент выполненных запланированных задач за неделю (0-100).

        Дни без записи считаются полностью невыполненными.
        """
        by_date: Dict[date, DayRecord] = {r.date: r for r in records}
        flags = {
            "cardio": "cardio_done",
            "lift": "lift_done",
            "meals": "meals_completed",
            "supplements": "supplements_done",
        }

        planned = done = 0
        for day in week:
            record = by_date.get(day)
            for task in scheduler.scheduled_tasks(day):
                planned += 1
                if record is not None and getattr(record, flags[task]):
                    done += 1

        if planned == 0:
            return 0.0
        return round(done / planned * 100, 1)

    @classmethod
    def summarize(cls, entries: Sequence[ProgressEntry], time_range: TimeRange) -> dict:
        window = time_range.window
        latest: Optional[ProgressEntry] = entries[0] if entries else None
        return {
            "time_range": time_range.value,
            "window": window,
            "entries_count": len(entries),
            "latest": latest,
            "weight_trend_percent": round(cls.weight_trend_percent(entries), 2),
            "average_run_time": round(cls.average_run_time(entries, window), 1),
            "best_run_time": cls.best_run_time(entries, window),
            "average_completion_rate": round(cls.average_completion_rate(entries, window), 1),
            "consistency_streak": cls.consistency_streak(entries),
        }
