from fittrack.models.day_record import DayRecord
from fittrack.models.meal_log import MealLog
from fittrack.models.workout_log import WorkoutLog
from fittrack.models.progress_entry import ProgressEntry

__all__ = [
    "DayRecord",
    "MealLog",
    "WorkoutLog",
    "ProgressEntry",
]
