"""API router aggregation."""

from fastapi import APIRouter

from app.api.endpoints import equipment, muscle_groups, nutrition, recovery, workouts

api_router = APIRouter()

api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(muscle_groups.router, prefix="/musclegroups", tags=["musclegroups"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["nutrition"])
api_router.include_router(recovery.router, prefix="/recovery", tags=["recovery"])
api_router.include_router(equipment.router, prefix="/equipment", tags=["equipment"])
