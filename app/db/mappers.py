"""Row <-> entity mapping, one pair per table.

Every gateway query goes through these, so column order and nullability live
in exactly one place. `*_from_row` builds a fresh, session-independent entity;
`*_to_values` produces the column values for INSERT/UPDATE (without the
primary key and timestamps, which the gateway handles).
"""

from __future__ import annotations

from typing import Any

from app.core.enums import FoodFamily
from app.domain import Equipment, MuscleGroup, Nutrition, Recovery, Workout
from app.models import EquipmentRow, MuscleGroupRow, NutritionRow, RecoveryRow, WorkoutRow


def _text(value: str | None) -> str:
    return value if value is not None else ""


# ── Workout ──────────────────────────────────────────────────────────────

def workout_from_row(row: WorkoutRow) -> Workout:
    return Workout(
        workout_id=row.workout_id,
        workout_date=_text(row.workout_date),
        workout_time=_text(row.workout_time),
        duration=row.duration or 0,
        type_description=_text(row.type_description),
        calories_burned=float(row.calories_burned or 0.0),
        rate_perceived_exhaustion=row.rate_perceived_exhaustion or 0,
        muscle_group_id=row.muscle_group_id or 0,  # NULL -> unassigned
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def workout_to_values(workout: Workout) -> dict[str, Any]:
    return {
        "workout_date": workout.workout_date,
        "workout_time": workout.workout_time,
        "duration": workout.duration,
        "type_description": workout.type_description,
        "calories_burned": workout.calories_burned,
        "rate_perceived_exhaustion": workout.rate_perceived_exhaustion,
        # 0 / missing means unassigned -> NULL
        "muscle_group_id": workout.muscle_group_id if workout.muscle_group_id and workout.muscle_group_id > 0 else None,
    }


# ── MuscleGroup ──────────────────────────────────────────────────────────

def muscle_group_from_row(row: MuscleGroupRow) -> MuscleGroup:
    return MuscleGroup(
        muscle_group_id=row.muscle_group_id,
        name=row.name,
        description=_text(row.description),
        days_per_week=row.days_per_week or 0,
        sets=row.sets or 0,
        reps=row.reps or 0,
        weight_amount=float(row.weight_amount or 0.0),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def muscle_group_to_values(muscle_group: MuscleGroup) -> dict[str, Any]:
    return {
        "name": muscle_group.name,
        "description": muscle_group.description,
        "days_per_week": muscle_group.days_per_week,
        "sets": muscle_group.sets,
        "reps": muscle_group.reps,
        "weight_amount": muscle_group.weight_amount,
    }


# ── Nutrition ────────────────────────────────────────────────────────────

def nutrition_from_row(row: NutritionRow) -> Nutrition:
    return Nutrition(
        nutrition_id=row.nutrition_id,
        family=row.family if isinstance(row.family, FoodFamily) else FoodFamily.from_name(row.family),
        water=float(row.water or 0.0),
        carbs=float(row.carbs or 0.0),
        fat=float(row.fat or 0.0),
        protein=float(row.protein or 0.0),
        sugar=float(row.sugar or 0.0),
        meal_date=_text(row.meal_date),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def nutrition_to_values(nutrition: Nutrition) -> dict[str, Any]:
    return {
        "family": nutrition.family,
        "water": nutrition.water,
        "carbs": nutrition.carbs,
        "fat": nutrition.fat,
        "protein": nutrition.protein,
        "sugar": nutrition.sugar,
        "meal_date": nutrition.meal_date,
    }


# ── Recovery ─────────────────────────────────────────────────────────────

def recovery_from_row(row: RecoveryRow) -> Recovery:
    return Recovery(
        recovery_id=row.recovery_id,
        recovery_date=_text(row.recovery_date),
        duration=row.duration or 0,
        type=_text(row.type),
        helpers=_text(row.helpers),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def recovery_to_values(recovery: Recovery) -> dict[str, Any]:
    return {
        "recovery_date": recovery.recovery_date,
        "duration": recovery.duration,
        "type": recovery.type,
        "helpers": recovery.helpers,
    }


# ── Equipment ────────────────────────────────────────────────────────────

def equipment_from_row(row: EquipmentRow) -> Equipment:
    return Equipment(
        equipment_id=row.equipment_id,
        name=row.name,
        description=_text(row.description),
        category=_text(row.category),
        target=_text(row.target),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def equipment_to_values(equipment: Equipment) -> dict[str, Any]:
    return {
        "name": equipment.name,
        "description": equipment.description,
        "category": equipment.category,
        "target": equipment.target,
    }
