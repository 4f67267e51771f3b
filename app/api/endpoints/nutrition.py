"""Nutrition endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_manager
from app.api.responses import ERROR_RESPONSES, delete_outcome, not_found, save_failed
from app.schemas.common import SaveResponse
from app.schemas.nutrition import DailyNutritionTotals, NutritionRead, NutritionSave
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("", response_model=list[NutritionRead])
async def list_nutrition(
    manager: RecordManager = Depends(get_manager),
    date: str | None = Query(None, description="Only entries for this meal date (YYYY-MM-DD)"),
    family: str | None = Query(None, description="Mixed, Fruit, Meat, Vegetable or Dairy"),
):
    if date is not None:
        entries = await manager.get_nutrition_by_date(date)
        if family is not None:
            entries = [n for n in entries if n.family_name.lower() == family.lower()]
    elif family is not None:
        entries = await manager.get_nutrition_by_family(family)
    else:
        entries = await manager.get_all_nutrition()
    return [NutritionRead.from_entity(n) for n in entries]


@router.get("/totals", response_model=DailyNutritionTotals)
async def daily_totals(
    date: str = Query(..., description="Meal date (YYYY-MM-DD)"),
    manager: RecordManager = Depends(get_manager),
):
    """Total calories and protein eaten on one day."""
    return DailyNutritionTotals(
        date=date,
        total_calories=await manager.get_total_calories_for_date(date),
        total_protein=await manager.get_total_protein_for_date(date),
    )


@router.get("/{nutrition_id}", response_model=NutritionRead, responses=ERROR_RESPONSES)
async def get_nutrition(nutrition_id: int, manager: RecordManager = Depends(get_manager)):
    nutrition = await manager.get_nutrition(nutrition_id)
    if nutrition is None:
        return not_found("Nutrition")
    return NutritionRead.from_entity(nutrition)


@router.post("", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def save_nutrition(payload: NutritionSave, manager: RecordManager = Depends(get_manager)):
    nutrition = payload.to_entity()
    if not await manager.save_nutrition(nutrition):
        return save_failed("nutrition", manager.last_error)
    return SaveResponse(message="Nutrition saved", id=nutrition.nutrition_id)


@router.delete("/{nutrition_id}", response_model=SaveResponse, responses=ERROR_RESPONSES)
async def delete_nutrition(nutrition_id: int, manager: RecordManager = Depends(get_manager)):
    deleted = await manager.delete_nutrition(nutrition_id)
    return delete_outcome("Nutrition", "nutrition", nutrition_id, deleted, manager.last_error)
