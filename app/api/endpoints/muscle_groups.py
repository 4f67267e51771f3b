"""Muscle group endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_manager
from app.api.responses import ERROR_RESPONSES, delete_outcome, not_found, save_failed
from app.schemas.common import SaveResponse
from app.schemas.muscle_group import MuscleGroupRead, MuscleGroupSave
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("", response_model=list[MuscleGroupRead])
async def list_muscle_groups(
    manager: RecordManager = Depends(get_manager),
    name: str | None = None,
):
    """List all muscle groups by name, or the one matching ?name=."""
    if name is not None:
        muscle_group = await manager.get_muscle_group_by_name(name)
        return [MuscleGroupRead.model_validate(muscle_group)] if muscle_group else []
    return [MuscleGroupRead.model_validate(mg) for mg in await manager.get_all_muscle_groups()]


@router.get("/{muscle_group_id}", response_model=MuscleGroupRead, responses=ERROR_RESPONSES)
async def get_muscle_group(muscle_group_id: int, manager: RecordManager = Depends(get_manager)):
    muscle_group = await manager.get_muscle_group(muscle_group_id)
    if muscle_group is None:
        return not_found("MuscleGroup")
    return MuscleGroupRead.model_validate(muscle_group)


@router.post("", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def save_muscle_group(payload: MuscleGroupSave, manager: RecordManager = Depends(get_manager)):
    """Create or update a muscle group. Names are unique: a duplicate name fails with 500."""
    muscle_group = payload.to_entity()
    if not await manager.save_muscle_group(muscle_group):
        return save_failed("muscle group", manager.last_error)
    return SaveResponse(message="MuscleGroup saved", id=muscle_group.muscle_group_id)


@router.delete("/{muscle_group_id}", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def delete_muscle_group(muscle_group_id: int, manager: RecordManager = Depends(get_manager)):
    deleted = await manager.delete_muscle_group(muscle_group_id)
    return delete_outcome("MuscleGroup", "muscle group", muscle_group_id, deleted, manager.last_error)
