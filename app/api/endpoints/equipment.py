"""Equipment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_manager
from app.api.responses import ERROR_RESPONSES, delete_outcome, not_found, save_failed
from app.schemas.common import SaveResponse
from app.schemas.equipment import EquipmentRead, EquipmentSave
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("", response_model=list[EquipmentRead])
async def list_equipment(
    manager: RecordManager = Depends(get_manager),
    category: str | None = None,
    name: str | None = None,
):
    """List equipment by name; ?category= filters exactly, ?name= returns the single match."""
    if name is not None:
        equipment = await manager.get_equipment_by_name(name)
        items = [equipment] if equipment else []
        if category is not None:
            items = [e for e in items if e.category == category]
    elif category is not None:
        items = await manager.get_equipment_by_category(category)
    else:
        items = await manager.get_all_equipment()
    return [EquipmentRead.model_validate(e) for e in items]


@router.get("/cardio", response_model=list[EquipmentRead])
async def list_cardio_equipment(manager: RecordManager = Depends(get_manager)):
    """Equipment whose category mentions cardio (any case)."""
    return [EquipmentRead.model_validate(e) for e in await manager.get_cardio_equipment()]


@router.get("/{equipment_id}", response_model=EquipmentRead, responses=ERROR_RESPONSES)
async def get_equipment(equipment_id: int, manager: RecordManager = Depends(get_manager)):
    equipment = await manager.get_equipment(equipment_id)
    if equipment is None:
        return not_found("Equipment")
    return EquipmentRead.model_validate(equipment)


@router.post("", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def save_equipment(payload: EquipmentSave, manager: RecordManager = Depends(get_manager)):
    equipment = payload.to_entity()
    if not await manager.save_equipment(equipment):
        return save_failed("equipment", manager.last_error)
    return SaveResponse(message="Equipment saved", id=equipment.equipment_id)


@router.delete("/{equipment_id}", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def delete_equipment(equipment_id: int, manager: RecordManager = Depends(get_manager)):
    deleted = await manager.delete_equipment(equipment_id)
    return delete_outcome("Equipment", "equipment", equipment_id, deleted, manager.last_error)
