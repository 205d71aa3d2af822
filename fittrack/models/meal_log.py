from sqlalchemy import Column, Integer, Boolean, Date, UniqueConstraint
from fittrack.core.base import Base

class MealLog(Base):
    __tablename__ = "meal_logs"
    __table_args__ = (UniqueConstraint("date", "slot", name="uq_meal_logs_date_slot"),)

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    slot = Column(Integer, nullable=False)  # 1..5
    completed = Column(Boolean, default=False, nullable=False)
    selected_option = Column(Integer, default=0, nullable=False)
    calories = Column(Integer, default=0, nullable=False)
