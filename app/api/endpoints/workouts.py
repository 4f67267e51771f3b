"""Workout endpoints: list/filter, aggregates, get, save (create or update), delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_manager
from app.api.responses import ERROR_RESPONSES, delete_outcome, not_found, save_failed
from app.schemas.common import SaveResponse
from app.schemas.workout import CaloriesBurnedTotal, WorkoutRead, WorkoutSave
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    manager: RecordManager = Depends(get_manager),
    date: str | None = Query(None, description="Only workouts on this day (YYYY-MM-DD)"),
    muscle_group_id: int | None = None,
):
    """List workouts, newest first, optionally filtered by date and/or muscle group."""
    if date is not None:
        workouts = await manager.get_workouts_by_date(date)
        if muscle_group_id is not None:
            workouts = [w for w in workouts if w.muscle_group_id == muscle_group_id]
    elif muscle_group_id is not None:
        workouts = await manager.get_workouts_by_muscle_group(muscle_group_id)
    else:
        workouts = await manager.get_all_workouts()
    return [WorkoutRead.model_validate(w) for w in workouts]


@router.get("/high-intensity", response_model=list[WorkoutRead])
async def list_high_intensity_workouts(manager: RecordManager = Depends(get_manager)):
    """Workouts with RPE >= 8."""
    return [WorkoutRead.model_validate(w) for w in await manager.get_high_intensity_workouts()]


@router.get("/calories", response_model=CaloriesBurnedTotal)
async def total_calories_burned(
    start: str = Query(..., description="First day, inclusive (YYYY-MM-DD)"),
    end: str = Query(..., description="Last day, inclusive (YYYY-MM-DD)"),
    manager: RecordManager = Depends(get_manager),
):
    total = await manager.get_total_calories_burned(start, end)
    return CaloriesBurnedTotal(start=start, end=end, total_calories_burned=total)


@router.get("/{workout_id}", response_model=WorkoutRead, responses=ERROR_RESPONSES)
async def get_workout(workout_id: int, manager: RecordManager = Depends(get_manager)):
    workout = await manager.get_workout(workout_id)
    if workout is None:
        return not_found("Workout")
    return WorkoutRead.model_validate(workout)


@router.post("", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def save_workout(payload: WorkoutSave, manager: RecordManager = Depends(get_manager)):
    """Create (workout_id 0 or omitted) or update a workout. Responds with its id."""
    workout = payload.to_entity()
    if not await manager.save_workout(workout):
        return save_failed("workout", manager.last_error)
    return SaveResponse(message="Workout saved", id=workout.workout_id)


@router.delete("/{workout_id}", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def delete_workout(workout_id: int, manager: RecordManager = Depends(get_manager)):
    deleted = await manager.delete_workout(workout_id)
    return delete_outcome("Workout", "workout", workout_id, deleted, manager.last_error)
