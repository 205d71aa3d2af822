from sqlalchemy import Column, Integer, String, Date, JSON, UniqueConstraint
from fittrack.core.base import Base

class WorkoutLog(Base):
    __tablename__ = "workout_logs"
    __table_args__ = (UniqueConstraint("date", "exercise_name", name="uq_workout_logs_date_exercise"),)

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    exercise_name = Column(String, nullable=False)
    weights = Column(JSON, default=list, nullable=False)  # кг, по одному на подход
    note = Column(String, nullable=True)
