from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://fittrack_user:fittrack_password@db:5432/fittrack_db"
    # Пересоздавать БД на каждом старте стоит только в разработке
    RESET_DATABASE: bool = False
    SQL_ECHO: bool = False

    # Локальная таймзона пользователя: по ней дата превращается в день недели
    TIMEZONE: str = "UTC"
    # Вес в БД всегда хранится в кг, здесь только единица для отображения
    DISPLAY_WEIGHT_UNIT: str = "kg"

    MINIO_ENDPOINT: str = "minio:9000"
    MINIO_ACCESS_KEY: str = "minioadmin"
    MINIO_SECRET_KEY: str = "minioadmin"
    MINIO_BUCKET: str = "progress-photos"
    PHOTO_URL_EXPIRES: int = 3600

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
