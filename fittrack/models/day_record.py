from sqlalchemy import Column, Integer, Boolean, Date, String
from fittrack.core.base import Base

class DayRecord(Base):
    __tablename__ = "day_records"

    id = Column(Integer, primary_key=True)
    # Одна запись на календарный день
    date = Column(Date, unique=True, nullable=False, index=True)
    cardio_done = Column(Boolean, default=False, nullable=False)
    lift_done = Column(Boolean, default=False, nullable=False)
    # Производное поле: пишется только через DayAggregator
    meals_completed = Column(Boolean, default=False, nullable=False)
    supplements_done = Column(Boolean, default=False, nullable=False)
    shake_done = Column(Boolean, default=False, nullable=False)
    note = Column(String, nullable=True)
