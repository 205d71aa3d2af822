from sqlalchemy import Column, Integer, Float, String, DateTime
from fittrack.core.base import Base

class ProgressEntry(Base):
    __tablename__ = "progress_entries"

    id = Column(Integer, primary_key=True)
    # Локальное время пользователя без tzinfo
    entry_date = Column(DateTime, nullable=False, index=True)
    weight = Column(Float, default=0, nullable=False)  # кг, 0 = не задан
    run_time_seconds = Column(Integer, default=0, nullable=False)
    completion_rate = Column(Float, default=0, nullable=False)  # 0-100
    notes = Column(String, nullable=True)
    # Ключи объектов в S3 (MinIO)
    front_photo = Column(String(512), nullable=True)
    back_photo = Column(String(512), nullable=True)
    side_photo = Column(String(512), nullable=True)

    @property
    def photo_keys(self):
        return [key for key in (self.front_photo, self.back_photo, self.side_photo) if key]
