"""Persistence gateway: entity CRUD against the relational tables.

One gateway wraps one AsyncSession, i.e. one connection for the lifetime of
a request. No business rules live here: each public method maps an entity
operation to a single parameterized statement and maps rows back through
app.db.mappers.

Failure reporting:
- writes return False and leave a diagnostic in `last_error`, including when
  the store is unreachable (update/delete of a missing row returns False with
  `last_error` None);
- reads return None / [] when nothing matches, raise StoreUnavailableError
  when the store cannot be reached and StoreError for any other failed query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import FoodFamily
from app.core.exceptions import StoreError, StoreUnavailableError
from app.db import mappers
from app.domain import Equipment, MuscleGroup, Nutrition, Recovery, Workout
from app.models import EquipmentRow, MuscleGroupRow, NutritionRow, RecoveryRow, WorkoutRow

logger = logging.getLogger(__name__)

# OverflowError: driver rejected an integer outside the column range (SQLite INTEGER)
_DB_ERRORS = (SQLAlchemyError, OSError, OverflowError)


@dataclass(frozen=True)
class _Table:
    """How one entity type maps onto its table."""

    label: str
    row: type
    pk: Any
    order_by: tuple
    from_row: Callable[[Any], Any]
    to_values: Callable[[Any], dict[str, Any]]
    id_of: Callable[[Any], int]


WORKOUTS = _Table(
    label="Workout",
    row=WorkoutRow,
    pk=WorkoutRow.workout_id,
    order_by=(WorkoutRow.workout_date.desc(), WorkoutRow.workout_time.desc()),
    from_row=mappers.workout_from_row,
    to_values=mappers.workout_to_values,
    id_of=lambda e: e.workout_id,
)
MUSCLE_GROUPS = _Table(
    label="MuscleGroup",
    row=MuscleGroupRow,
    pk=MuscleGroupRow.muscle_group_id,
    order_by=(MuscleGroupRow.name.asc(),),
    from_row=mappers.muscle_group_from_row,
    to_values=mappers.muscle_group_to_values,
    id_of=lambda e: e.muscle_group_id,
)
NUTRITION = _Table(
    label="Nutrition",
    row=NutritionRow,
    pk=NutritionRow.nutrition_id,
    order_by=(NutritionRow.meal_date.desc(),),
    from_row=mappers.nutrition_from_row,
    to_values=mappers.nutrition_to_values,
    id_of=lambda e: e.nutrition_id,
)
RECOVERY = _Table(
    label="Recovery",
    row=RecoveryRow,
    pk=RecoveryRow.recovery_id,
    order_by=(RecoveryRow.recovery_date.desc(),),
    from_row=mappers.recovery_from_row,
    to_values=mappers.recovery_to_values,
    id_of=lambda e: e.recovery_id,
)
EQUIPMENT = _Table(
    label="Equipment",
    row=EquipmentRow,
    pk=EquipmentRow.equipment_id,
    order_by=(EquipmentRow.name.asc(),),
    from_row=mappers.equipment_from_row,
    to_values=mappers.equipment_to_values,
    id_of=lambda e: e.equipment_id,
)


def _is_unavailable(exc: Exception) -> bool:
    """True when the error means the store itself is unreachable."""
    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class PersistenceGateway:
    """CRUD operations for all five entity tables over one session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.last_insert_id: int = 0
        self.last_error: str | None = None

    # ── Utility ──────────────────────────────────────────────────────────

    async def test_connection(self) -> bool:
        """Round-trip a trivial query; False (never an exception) when the store is unreachable."""
        try:
            await self.session.execute(text("SELECT 1"))
        except _DB_ERRORS as e:
            await self._rollback()
            self.last_error = str(e)
            logger.error("Database connection failed: %s", e)
            return False
        logger.info("Database connection successful")
        return True

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except _DB_ERRORS:
            logger.exception("Rollback failed")

    async def _write_failed(self, operation: str, exc: Exception) -> bool:
        await self._rollback()
        detail = str(getattr(exc, "orig", None) or exc)
        if _is_unavailable(exc):
            self.last_error = f"store unavailable: {detail}"
        else:
            self.last_error = detail
        logger.error("%s error: %s", operation, self.last_error)
        return False

    async def _query(self, operation: str, stmt):
        try:
            return await self.session.execute(stmt.execution_options(populate_existing=True))
        except _DB_ERRORS as e:
            await self._rollback()
            logger.error("%s error: %s", operation, e)
            if _is_unavailable(e):
                raise StoreUnavailableError(operation, str(e)) from e
            raise StoreError(operation, str(e)) from e

    # ── Generic CRUD ─────────────────────────────────────────────────────

    async def _create(self, table: _Table, entity) -> bool:
        self.last_error = None
        row = table.row(
            **table.to_values(entity),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        operation = f"Create {table.label}"
        try:
            self.session.add(row)
            # flush runs the INSERT and fetches the generated key on this same connection
            await self.session.flush()
            new_id = getattr(row, table.pk.key)
            await self.session.commit()
        except _DB_ERRORS as e:
            return await self._write_failed(operation, e)
        self.session.expunge(row)
        self.last_insert_id = new_id
        logger.info("%s created successfully with ID: %s", table.label, new_id)
        return True

    async def _read_one(self, table: _Table, operation: str, *criteria):
        result = await self._query(operation, select(table.row).where(*criteria).order_by(table.pk).limit(1))
        row = result.scalars().first()
        return table.from_row(row) if row is not None else None

    async def _read_many(self, table: _Table, operation: str, *criteria) -> list:
        stmt = select(table.row).where(*criteria).order_by(*table.order_by, table.pk)
        result = await self._query(operation, stmt)
        return [table.from_row(row) for row in result.scalars().all()]

    async def _update(self, table: _Table, entity) -> bool:
        self.last_error = None
        entity_id = table.id_of(entity)
        operation = f"Update {table.label}"
        stmt = (
            update(table.row)
            .where(table.pk == entity_id)
            .values(**table.to_values(entity), updated_at=entity.updated_at)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except _DB_ERRORS as e:
            return await self._write_failed(operation, e)
        if result.rowcount == 0:
            logger.warning("%s: no row with ID %s", operation, entity_id)
            return False
        logger.info("%s updated successfully!", table.label)
        return True

    async def _delete(self, table: _Table, entity_id: int) -> bool:
        self.last_error = None
        operation = f"Delete {table.label}"
        stmt = delete(table.row).where(table.pk == entity_id).execution_options(synchronize_session=False)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except _DB_ERRORS as e:
            return await self._write_failed(operation, e)
        if result.rowcount == 0:
            logger.warning("%s: no row with ID %s", operation, entity_id)
            return False
        logger.info("%s deleted successfully!", table.label)
        return True

    # ── Workout ──────────────────────────────────────────────────────────

    async def create_workout(self, workout: Workout) -> bool:
        return await self._create(WORKOUTS, workout)

    async def read_workout(self, workout_id: int) -> Workout | None:
        return await self._read_one(WORKOUTS, "Read Workout", WorkoutRow.workout_id == workout_id)

    async def read_all_workouts(self) -> list[Workout]:
        return await self._read_many(WORKOUTS, "Read All Workouts")

    async def read_workouts_by_date(self, workout_date: str) -> list[Workout]:
        return await self._read_many(WORKOUTS, "Read Workouts By Date", WorkoutRow.workout_date == workout_date)

    async def read_workouts_by_muscle_group(self, muscle_group_id: int) -> list[Workout]:
        return await self._read_many(
            WORKOUTS, "Read Workouts By MuscleGroup", WorkoutRow.muscle_group_id == muscle_group_id
        )

    async def update_workout(self, workout: Workout) -> bool:
        return await self._update(WORKOUTS, workout)

    async def delete_workout(self, workout_id: int) -> bool:
        return await self._delete(WORKOUTS, workout_id)

    # ── MuscleGroup ──────────────────────────────────────────────────────

    async def create_muscle_group(self, muscle_group: MuscleGroup) -> bool:
        return await self._create(MUSCLE_GROUPS, muscle_group)

    async def read_muscle_group(self, muscle_group_id: int) -> MuscleGroup | None:
        return await self._read_one(
            MUSCLE_GROUPS, "Read MuscleGroup", MuscleGroupRow.muscle_group_id == muscle_group_id
        )

    async def read_all_muscle_groups(self) -> list[MuscleGroup]:
        return await self._read_many(MUSCLE_GROUPS, "Read All MuscleGroups")

    async def read_muscle_group_by_name(self, name: str) -> MuscleGroup | None:
        return await self._read_one(MUSCLE_GROUPS, "Read MuscleGroup By Name", MuscleGroupRow.name == name)

    async def update_muscle_group(self, muscle_group: MuscleGroup) -> bool:
        return await self._update(MUSCLE_GROUPS, muscle_group)

    async def delete_muscle_group(self, muscle_group_id: int) -> bool:
        return await self._delete(MUSCLE_GROUPS, muscle_group_id)

    # ── Nutrition ────────────────────────────────────────────────────────

    async def create_nutrition(self, nutrition: Nutrition) -> bool:
        return await self._create(NUTRITION, nutrition)

    async def read_nutrition(self, nutrition_id: int) -> Nutrition | None:
        return await self._read_one(NUTRITION, "Read Nutrition", NutritionRow.nutrition_id == nutrition_id)

    async def read_all_nutrition(self) -> list[Nutrition]:
        return await self._read_many(NUTRITION, "Read All Nutrition")

    async def read_nutrition_by_date(self, meal_date: str) -> list[Nutrition]:
        return await self._read_many(NUTRITION, "Read Nutrition By Date", NutritionRow.meal_date == meal_date)

    async def read_nutrition_by_family(self, family: FoodFamily | str) -> list[Nutrition]:
        if not isinstance(family, FoodFamily):
            family = FoodFamily.lookup(family)
            if family is None:
                return []
        return await self._read_many(NUTRITION, "Read Nutrition By Family", NutritionRow.family == family)

    async def update_nutrition(self, nutrition: Nutrition) -> bool:
        return await self._update(NUTRITION, nutrition)

    async def delete_nutrition(self, nutrition_id: int) -> bool:
        return await self._delete(NUTRITION, nutrition_id)

    # ── Recovery ─────────────────────────────────────────────────────────

    async def create_recovery(self, recovery: Recovery) -> bool:
        return await self._create(RECOVERY, recovery)

    async def read_recovery(self, recovery_id: int) -> Recovery | None:
        return await self._read_one(RECOVERY, "Read Recovery", RecoveryRow.recovery_id == recovery_id)

    async def read_all_recovery(self) -> list[Recovery]:
        return await self._read_many(RECOVERY, "Read All Recovery")

    async def read_recovery_by_date(self, recovery_date: str) -> list[Recovery]:
        return await self._read_many(RECOVERY, "Read Recovery By Date", RecoveryRow.recovery_date == recovery_date)

    async def read_recovery_by_type(self, recovery_type: str) -> list[Recovery]:
        return await self._read_many(RECOVERY, "Read Recovery By Type", RecoveryRow.type == recovery_type)

    async def update_recovery(self, recovery: Recovery) -> bool:
        return await self._update(RECOVERY, recovery)

    async def delete_recovery(self, recovery_id: int) -> bool:
        return await self._delete(RECOVERY, recovery_id)

    # ── Equipment ────────────────────────────────────────────────────────

    async def create_equipment(self, equipment: Equipment) -> bool:
        return await self._create(EQUIPMENT, equipment)

    async def read_equipment(self, equipment_id: int) -> Equipment | None:
        return await self._read_one(EQUIPMENT, "Read Equipment", EquipmentRow.equipment_id == equipment_id)

    async def read_all_equipment(self) -> list[Equipment]:
        return await self._read_many(EQUIPMENT, "Read All Equipment")

    async def read_equipment_by_category(self, category: str) -> list[Equipment]:
        return await self._read_many(EQUIPMENT, "Read Equipment By Category", EquipmentRow.category == category)

    async def read_equipment_by_name(self, name: str) -> Equipment | None:
        return await self._read_one(EQUIPMENT, "Read Equipment By Name", EquipmentRow.name == name)

    async def update_equipment(self, equipment: Equipment) -> bool:
        return await self._update(EQUIPMENT, equipment)

    async def delete_equipment(self, equipment_id: int) -> bool:
        return await self._delete(EQUIPMENT, equipment_id)
