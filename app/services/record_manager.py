"""Record manager: upsert routing, operation logging and aggregate queries.

Sits on top of PersistenceGateway. Every write goes through a `save_*`
method, which decides between create and update from the entity's identity
(0 = not persisted yet). Reads are pass-throughs; aggregates read the whole
candidate set and reduce it in memory.

Entities returned here are fresh dataclasses with no link to the session:
mutate them freely, nothing is persisted until `save_*` is called again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from app.core.constants import UNSAVED_ID
from app.core.enums import FoodFamily
from app.db.gateway import PersistenceGateway
from app.domain import Equipment, MuscleGroup, Nutrition, Recovery, Workout
from app.domain.base import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Create:
    """Entity has no identity yet: insert it."""


@dataclass(frozen=True)
class Update:
    """Entity already has an identity: overwrite that row."""

    existing_id: int


Intent = Union[Create, Update]


def resolve_intent(identity: int) -> Intent:
    if identity == UNSAVED_ID:
        return Create()
    return Update(existing_id=identity)


def _in_range(value: str, start_date: str, end_date: str) -> bool:
    # Lexicographic comparison; valid because dates are zero-padded YYYY-MM-DD
    return start_date <= value <= end_date


class RecordManager:
    """Business operations for workouts, muscle groups, nutrition, recovery and equipment."""

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    @property
    def last_error(self) -> str | None:
        """Diagnostic from the last failed gateway write, if any."""
        return self.gateway.last_error

    async def test_connection(self) -> bool:
        return await self.gateway.test_connection()

    @staticmethod
    def _log_operation(operation: str, success: bool) -> None:
        if success:
            logger.info("[SUCCESS] %s", operation)
        else:
            logger.warning("[FAILED] %s", operation)

    async def _save(
        self,
        label: str,
        entity,
        id_field: str,
        create: Callable[..., Awaitable[bool]],
        update: Callable[..., Awaitable[bool]],
    ) -> bool:
        intent = resolve_intent(getattr(entity, id_field))
        if isinstance(intent, Create):
            result = await create(entity)
            if result:
                setattr(entity, id_field, self.gateway.last_insert_id)
                self._log_operation(f"Created {label} ID: {self.gateway.last_insert_id}", True)
            else:
                self._log_operation(f"Create {label}", False)
            return result

        entity.updated_at = utc_now()
        result = await update(entity)
        self._log_operation(f"Updated {label} ID: {intent.existing_id}", result)
        return result

    async def _get(self, label: str, entity_id: int, read: Callable[[int], Awaitable]):
        entity = await read(entity_id)
        if entity is not None:
            self._log_operation(f"Retrieved {label} ID: {entity_id}", True)
        else:
            self._log_operation(f"Retrieve {label} ID: {entity_id}", False)
        return entity

    async def _delete(self, label: str, entity_id: int, delete: Callable[[int], Awaitable[bool]]) -> bool:
        result = await delete(entity_id)
        self._log_operation(f"Deleted {label} ID: {entity_id}", result)
        return result

    # ── Workout ──────────────────────────────────────────────────────────

    async def save_workout(self, workout: Workout) -> bool:
        return await self._save(
            "Workout", workout, "workout_id", self.gateway.create_workout, self.gateway.update_workout
        )

    async def get_workout(self, workout_id: int) -> Workout | None:
        return await self._get("Workout", workout_id, self.gateway.read_workout)

    async def get_all_workouts(self) -> list[Workout]:
        workouts = await self.gateway.read_all_workouts()
        logger.info("[INFO] Retrieved %d workouts", len(workouts))
        return workouts

    async def get_workouts_by_date(self, workout_date: str) -> list[Workout]:
        workouts = await self.gateway.read_workouts_by_date(workout_date)
        logger.info("[INFO] Found %d workouts on %s", len(workouts), workout_date)
        return workouts

    async def get_workouts_by_muscle_group(self, muscle_group_id: int) -> list[Workout]:
        workouts = await self.gateway.read_workouts_by_muscle_group(muscle_group_id)
        logger.info("[INFO] Found %d workouts for muscle group %s", len(workouts), muscle_group_id)
        return workouts

    async def delete_workout(self, workout_id: int) -> bool:
        return await self._delete("Workout", workout_id, self.gateway.delete_workout)

    async def get_high_intensity_workouts(self) -> list[Workout]:
        """Workouts with RPE >= 8."""
        workouts = [w for w in await self.gateway.read_all_workouts() if w.is_high_intensity()]
        logger.info("[INFO] Found %d high intensity workouts", len(workouts))
        return workouts

    async def get_total_calories_burned(self, start_date: str, end_date: str) -> float:
        """Sum of calories_burned for workouts dated within [start_date, end_date]."""
        total = sum(
            w.calories_burned
            for w in await self.gateway.read_all_workouts()
            if _in_range(w.workout_date, start_date, end_date)
        )
        logger.info("[INFO] Total calories burned from %s to %s: %s", start_date, end_date, total)
        return float(total)

    # ── MuscleGroup ──────────────────────────────────────────────────────

    async def save_muscle_group(self, muscle_group: MuscleGroup) -> bool:
        return await self._save(
            "MuscleGroup",
            muscle_group,
            "muscle_group_id",
            self.gateway.create_muscle_group,
            self.gateway.update_muscle_group,
        )

    async def get_muscle_group(self, muscle_group_id: int) -> MuscleGroup | None:
        return await self._get("MuscleGroup", muscle_group_id, self.gateway.read_muscle_group)

    async def get_all_muscle_groups(self) -> list[MuscleGroup]:
        groups = await self.gateway.read_all_muscle_groups()
        logger.info("[INFO] Retrieved %d muscle groups", len(groups))
        return groups

    async def get_muscle_group_by_name(self, name: str) -> MuscleGroup | None:
        muscle_group = await self.gateway.read_muscle_group_by_name(name)
        self._log_operation(f"Retrieve MuscleGroup by name: {name}", muscle_group is not None)
        return muscle_group

    async def delete_muscle_group(self, muscle_group_id: int) -> bool:
        return await self._delete("MuscleGroup", muscle_group_id, self.gateway.delete_muscle_group)

    # ── Nutrition ────────────────────────────────────────────────────────

    async def save_nutrition(self, nutrition: Nutrition) -> bool:
        return await self._save(
            "Nutrition", nutrition, "nutrition_id", self.gateway.create_nutrition, self.gateway.update_nutrition
        )

    async def get_nutrition(self, nutrition_id: int) -> Nutrition | None:
        return await self._get("Nutrition", nutrition_id, self.gateway.read_nutrition)

    async def get_all_nutrition(self) -> list[Nutrition]:
        entries = await self.gateway.read_all_nutrition()
        logger.info("[INFO] Retrieved %d nutrition entries", len(entries))
        return entries

    async def get_nutrition_by_date(self, meal_date: str) -> list[Nutrition]:
        entries = await self.gateway.read_nutrition_by_date(meal_date)
        logger.info("[INFO] Found %d nutrition entries on %s", len(entries), meal_date)
        return entries

    async def get_nutrition_by_family(self, family: FoodFamily | str) -> list[Nutrition]:
        entries = await self.gateway.read_nutrition_by_family(family)
        logger.info("[INFO] Found %d nutrition entries for family %s", len(entries), getattr(family, "value", family))
        return entries

    async def delete_nutrition(self, nutrition_id: int) -> bool:
        return await self._delete("Nutrition", nutrition_id, self.gateway.delete_nutrition)

    async def get_total_calories_for_date(self, meal_date: str) -> float:
        total = sum(n.total_calories() for n in await self.gateway.read_nutrition_by_date(meal_date))
        logger.info("[INFO] Total calories on %s: %s", meal_date, total)
        return float(total)

    async def get_total_protein_for_date(self, meal_date: str) -> float:
        total = sum(n.protein for n in await self.gateway.read_nutrition_by_date(meal_date))
        logger.info("[INFO] Total protein on %s: %sg", meal_date, total)
        return float(total)

    # ── Recovery ─────────────────────────────────────────────────────────

    async def save_recovery(self, recovery: Recovery) -> bool:
        return await self._save(
            "Recovery", recovery, "recovery_id", self.gateway.create_recovery, self.gateway.update_recovery
        )

    async def get_recovery(self, recovery_id: int) -> Recovery | None:
        return await self._get("Recovery", recovery_id, self.gateway.read_recovery)

    async def get_all_recovery(self) -> list[Recovery]:
        sessions = await self.gateway.read_all_recovery()
        logger.info("[INFO] Retrieved %d recovery sessions", len(sessions))
        return sessions

    async def get_recovery_by_date(self, recovery_date: str) -> list[Recovery]:
        sessions = await self.gateway.read_recovery_by_date(recovery_date)
        logger.info("[INFO] Found %d recovery sessions on %s", len(sessions), recovery_date)
        return sessions

    async def get_recovery_by_type(self, recovery_type: str) -> list[Recovery]:
        sessions = await self.gateway.read_recovery_by_type(recovery_type)
        logger.info("[INFO] Found %d %s sessions", len(sessions), recovery_type)
        return sessions

    async def delete_recovery(self, recovery_id: int) -> bool:
        return await self._delete("Recovery", recovery_id, self.gateway.delete_recovery)

    async def get_total_recovery_time(self, start_date: str, end_date: str) -> int:
        """Minutes of recovery dated within [start_date, end_date]."""
        total = sum(
            r.duration
            for r in await self.gateway.read_all_recovery()
            if _in_range(r.recovery_date, start_date, end_date)
        )
        logger.info("[INFO] Total recovery time from %s to %s: %d minutes", start_date, end_date, total)
        return total

    # ── Equipment ────────────────────────────────────────────────────────

    async def save_equipment(self, equipment: Equipment) -> bool:
        return await self._save(
            "Equipment", equipment, "equipment_id", self.gateway.create_equipment, self.gateway.update_equipment
        )

    async def get_equipment(self, equipment_id: int) -> Equipment | None:
        return await self._get("Equipment", equipment_id, self.gateway.read_equipment)

    async def get_all_equipment(self) -> list[Equipment]:
        items = await self.gateway.read_all_equipment()
        logger.info("[INFO] Retrieved %d equipment items", len(items))
        return items

    async def get_equipment_by_category(self, category: str) -> list[Equipment]:
        items = await self.gateway.read_equipment_by_category(category)
        logger.info("[INFO] Found %d equipment items in category %s", len(items), category)
        return items

    async def get_equipment_by_name(self, name: str) -> Equipment | None:
        equipment = await self.gateway.read_equipment_by_name(name)
        self._log_operation(f"Retrieve Equipment by name: {name}", equipment is not None)
        return equipment

    async def delete_equipment(self, equipment_id: int) -> bool:
        return await self._delete("Equipment", equipment_id, self.gateway.delete_equipment)

    async def get_cardio_equipment(self) -> list[Equipment]:
        items = [e for e in await self.gateway.read_all_equipment() if e.is_cardio_equipment()]
        logger.info("[INFO] Found %d cardio equipment items", len(items))
        return items
