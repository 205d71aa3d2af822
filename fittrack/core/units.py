"""Единицы измерения и разбор пользовательского ввода.

Вес хранится в килограммах. Перевод в фунты делается только при вводе
(если пользователь ввёл lb) и при отображении.
"""
import math
from typing import Optional, Union

KG_PER_LB = 0.45359237

WEIGHT_UNITS = ("kg", "lb")

MAX_RUN_TIME_SECONDS = 24 * 60 * 60


def to_kilograms(value: float, unit: str = "kg") -> float:
    if unit not in WEIGHT_UNITS:
        raise ValueError(f"Unknown weight unit: {unit}")
    if unit == "lb":
        return value * KG_PER_LB
    return value


def from_kilograms(value: float, unit: str = "kg") -> float:
    if unit not in WEIGHT_UNITS:
        raise ValueError(f"Unknown weight unit: {unit}")
    if unit == "lb":
        return value / KG_PER_LB
    return value


def _finite_or_zero(value: float) -> float:
    # nan/inf и отрицательные значения тоже мусор
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value


def parse_number(raw: Union[str, int, float, None]) -> float:
    """Нечисловой или пустой ввод считается нулём (= "не задано")."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            return _finite_or_zero(float(raw))
        except OverflowError:
            # целое из JSON может не влезть во float
            return 0.0
    text = raw.strip().replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return _finite_or_zero(value)


def parse_run_time(raw: Union[str, int, float, None]) -> int:
    """ "m:ss" -> секунды. Целое число трактуется как секунды, всё остальное как 0.

    Время больше суток тоже считается мусором.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and (math.isnan(raw) or math.isinf(raw)):
            return 0
        seconds = int(raw)
    else:
        seconds = _parse_run_time_text(raw.strip())
    if not 0 < seconds <= MAX_RUN_TIME_SECONDS:
        return 0
    return seconds


def _parse_run_time_text(text: str) -> int:
    parts = text.split(":")
    if len(parts) == 2:
        minutes, seconds = parts
        if minutes.isdecimal() and seconds.isdecimal() and int(seconds) < 60:
            return int(minutes) * 60 + int(seconds)
        return 0
    if text.isdecimal():
        return int(text)
    return 0


def format_run_time(seconds: int) -> str:
    if seconds <= 0:
        return "N/A"
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_weight(value_kg: Optional[float], unit: str = "kg") -> str:
    if not value_kg:
        return "N/A"
    return f"{from_kilograms(value_kg, unit):.1f} {unit}"


def format_percent(value: Optional[float]) -> str:
    if not value:
        return "N/A"
    return f"{value:.0f}%"
