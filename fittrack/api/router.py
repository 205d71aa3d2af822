from fastapi import APIRouter
from fittrack.api.v1.days import router as days_router
from fittrack.api.v1.meals import router as meals_router
from fittrack.api.v1.workouts import router as workouts_router
from fittrack.api.v1.progress import router as progress_router

api_router = APIRouter()

api_router.include_router(days_router, prefix="/days", tags=["days"])
api_router.include_router(meals_router, prefix="/meals", tags=["meals"])
api_router.include_router(workouts_router, prefix="/workouts", tags=["workouts"])
api_router.include_router(progress_router, prefix="/progress", tags=["progress"])
