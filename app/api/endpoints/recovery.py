"""Recovery session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_manager
from app.api.responses import ERROR_RESPONSES, delete_outcome, not_found, save_failed
from app.schemas.common import SaveResponse
from app.schemas.recovery import RecoveryRead, RecoverySave, RecoveryTimeTotal
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("", response_model=list[RecoveryRead])
async def list_recovery(
    manager: RecordManager = Depends(get_manager),
    date: str | None = Query(None, description="Only sessions on this day (YYYY-MM-DD)"),
    type: str | None = Query(None, description="Exact session type, e.g. Yoga"),
):
    if date is not None:
        sessions = await manager.get_recovery_by_date(date)
        if type is not None:
            sessions = [r for r in sessions if r.type == type]
    elif type is not None:
        sessions = await manager.get_recovery_by_type(type)
    else:
        sessions = await manager.get_all_recovery()
    return [RecoveryRead.model_validate(r) for r in sessions]


@router.get("/total-time", response_model=RecoveryTimeTotal)
async def total_recovery_time(
    start: str = Query(..., description="First day, inclusive (YYYY-MM-DD)"),
    end: str = Query(..., description="Last day, inclusive (YYYY-MM-DD)"),
    manager: RecordManager = Depends(get_manager),
):
    total = await manager.get_total_recovery_time(start, end)
    return RecoveryTimeTotal(start=start, end=end, total_minutes=total)


@router.get("/{recovery_id}", response_model=RecoveryRead, responses=ERROR_RESPONSES)
async def get_recovery(recovery_id: int, manager: RecordManager = Depends(get_manager)):
    recovery = await manager.get_recovery(recovery_id)
    if recovery is None:
        return not_found("Recovery")
    return RecoveryRead.model_validate(recovery)


@router.post("", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def save_recovery(payload: RecoverySave, manager: RecordManager = Depends(get_manager)):
    recovery = payload.to_entity()
    if not await manager.save_recovery(recovery):
        return save_failed("recovery", manager.last_error)
    return SaveResponse(message="Recovery saved", id=recovery.recovery_id)


@router.delete("/{recovery_id}", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def delete_recovery(recovery_id: int, manager: RecordManager = Depends(get_manager)):
    deleted = await manager.delete_recovery(recovery_id)
    return delete_outcome("Recovery", "recovery", recovery_id, deleted, manager.last_error)
