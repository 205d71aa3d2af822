import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittrack.api.router import api_router
from fittrack.core.config import settings
from fittrack.core.database import init_database
from fittrack.core.exceptions import RecordStoreError
from fittrack.core.schedule_table import default_schedule
from fittrack.services.photo_storage import ensure_bucket_exists
from fittrack.services.scheduler import Scheduler

logger = logging.getLogger(__name__)


async def record_store_error_handler(request: Request, exc: RecordStoreError):
    # Не роняем клиента: он покажет сообщение и сохранит форму для повтора
    return JSONResponse(status_code=503, content={"detail": exc.message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_database()
    try:
        await ensure_bucket_exists()
    except Exception as e:
        logger.warning(f"Хранилище фото недоступно: {e}")
    logger.info("Приложение запущено!")
    yield


def create_app(scheduler: Scheduler = None, use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="FitTrack - weekly split & diet tracker",
        lifespan=lifespan if use_lifespan else None,
    )
    app.state.scheduler = scheduler or Scheduler(default_schedule, settings.TIMEZONE)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RecordStoreError, record_store_error_handler)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {
            "app": "FitTrack",
            "links": {
                "Today": "/api/v1/days/{date}",
                "Week": "/api/v1/days/week/{date}",
                "Meals": "/api/v1/meals/{date}",
                "Workout": "/api/v1/workouts/{date}",
                "Progress": "/api/v1/progress/stats",
                "Docs": "/docs",
            }
        }

    return app


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()
