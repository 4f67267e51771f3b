"""
Tests for PersistenceGateway against an in-memory SQLite database.

Covers identity assignment, ordering, soft muscle-group references and the
bool/last_error failure contract for writes.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.enums import FoodFamily
from app.core.exceptions import StoreError, StoreUnavailableError
from app.db.gateway import PersistenceGateway
from app.db.session import drop_tables
from app.domain import Equipment, MuscleGroup, Nutrition, Recovery, Workout


def _workout(**overrides) -> Workout:
    values = dict(
        workout_date="2026-02-28",
        workout_time="07:30:00",
        duration=45,
        type_description="Cardio",
        calories_burned=400.0,
        rate_perceived_exhaustion=9,
    )
    values.update(overrides)
    return Workout(**values)


class TestConnection:
    async def test_connection_ok(self, gateway):
        assert await gateway.test_connection() is True

    async def test_unreachable_store(self, tmp_path):
        missing = tmp_path / "no-such-dir" / "fitness.db"
        engine = create_async_engine(f"sqlite+aiosqlite:///{missing}")
        maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        try:
            async with maker() as session:
                gateway = PersistenceGateway(session)
                assert await gateway.test_connection() is False
                assert gateway.last_error

                with pytest.raises(StoreUnavailableError):
                    await gateway.read_all_workouts()

                assert await gateway.create_workout(_workout()) is False
                assert gateway.last_error.startswith("store unavailable")
        finally:
            await engine.dispose()


class TestCreateAndRead:
    async def test_create_sets_last_insert_id(self, gateway):
        assert await gateway.create_workout(_workout()) is True
        first_id = gateway.last_insert_id
        assert first_id > 0
        assert gateway.last_error is None

        assert await gateway.create_workout(_workout(workout_date="2026-03-01")) is True
        assert gateway.last_insert_id != first_id

    async def test_read_missing_returns_none(self, gateway):
        assert await gateway.read_workout(999) is None
        assert await gateway.read_equipment_by_name("Nothing") is None

    async def test_read_back_matches(self, gateway):
        workout = _workout()
        await gateway.create_workout(workout)
        workout.workout_id = gateway.last_insert_id

        assert await gateway.read_workout(workout.workout_id) == workout

    async def test_no_muscle_group_is_stored_as_null_and_read_as_zero(self, gateway):
        await gateway.create_workout(_workout(muscle_group_id=0))
        stored = await gateway.read_workout(gateway.last_insert_id)
        assert stored.muscle_group_id == 0
        assert await gateway.read_workouts_by_muscle_group(0) == []

    async def test_unknown_muscle_group_is_accepted(self, gateway):
        # Soft reference: no row in muscle_groups is required
        assert await gateway.create_workout(_workout(muscle_group_id=42)) is True
        found = await gateway.read_workouts_by_muscle_group(42)
        assert [w.workout_id for w in found] == [gateway.last_insert_id]

    async def test_nutrition_round_trip_keeps_family(self, gateway):
        nutrition = Nutrition(family=FoodFamily.DAIRY, carbs=12, protein=8, fat=5, meal_date="2026-01-02")
        await gateway.create_nutrition(nutrition)
        stored = await gateway.read_nutrition(gateway.last_insert_id)
        assert stored.family is FoodFamily.DAIRY
        assert stored.total_calories() == pytest.approx(125.0)


class TestOrdering:
    async def test_workouts_newest_first(self, gateway):
        await gateway.create_workout(_workout(workout_date="2026-01-01", workout_time="09:00:00"))
        await gateway.create_workout(_workout(workout_date="2026-01-03", workout_time="08:00:00"))
        await gateway.create_workout(_workout(workout_date="2026-01-03", workout_time="18:00:00"))

        workouts = await gateway.read_all_workouts()
        assert [(w.workout_date, w.workout_time) for w in workouts] == [
            ("2026-01-03", "18:00:00"),
            ("2026-01-03", "08:00:00"),
            ("2026-01-01", "09:00:00"),
        ]

    async def test_muscle_groups_by_name(self, gateway):
        for name in ("Legs", "Back", "Chest"):
            await gateway.create_muscle_group(MuscleGroup(name=name))
        names = [mg.name for mg in await gateway.read_all_muscle_groups()]
        assert names == ["Back", "Chest", "Legs"]

    async def test_recovery_by_date_and_type(self, gateway):
        await gateway.create_recovery(Recovery(recovery_date="2026-01-01", duration=20, type="Yoga"))
        await gateway.create_recovery(Recovery(recovery_date="2026-01-05", duration=30, type="Sauna"))
        await gateway.create_recovery(Recovery(recovery_date="2026-01-05", duration=15, type="Yoga"))

        assert [r.duration for r in await gateway.read_recovery_by_date("2026-01-05")] == [30, 15]
        yoga = await gateway.read_recovery_by_type("Yoga")
        assert [r.recovery_date for r in yoga] == ["2026-01-05", "2026-01-01"]


class TestFilters:
    async def test_nutrition_by_family(self, gateway):
        await gateway.create_nutrition(Nutrition(family=FoodFamily.FRUIT, carbs=20))
        await gateway.create_nutrition(Nutrition(family=FoodFamily.MEAT, protein=30))

        assert [n.family for n in await gateway.read_nutrition_by_family(FoodFamily.FRUIT)] == [FoodFamily.FRUIT]
        assert [n.family for n in await gateway.read_nutrition_by_family("meat")] == [FoodFamily.MEAT]
        assert await gateway.read_nutrition_by_family("Candy") == []

    async def test_equipment_by_category_is_exact(self, gateway):
        await gateway.create_equipment(Equipment(name="Treadmill", category="Cardio"))
        await gateway.create_equipment(Equipment(name="Bench", category="Free Weights"))

        assert [e.name for e in await gateway.read_equipment_by_category("Cardio")] == ["Treadmill"]
        assert await gateway.read_equipment_by_category("cardio") == []


class TestWriteFailures:
    async def test_duplicate_muscle_group_name(self, gateway):
        assert await gateway.create_muscle_group(MuscleGroup(name="Chest")) is True
        assert await gateway.create_muscle_group(MuscleGroup(name="Chest")) is False
        assert gateway.last_error
        assert not gateway.last_error.startswith("store unavailable")

        # The session is usable again after the rollback
        assert await gateway.create_muscle_group(MuscleGroup(name="Back")) is True
        assert len(await gateway.read_all_muscle_groups()) == 2

    async def test_update_missing_row(self, gateway):
        assert await gateway.update_recovery(Recovery(recovery_id=77, duration=10)) is False
        assert gateway.last_error is None

    async def test_delete_twice(self, gateway):
        await gateway.create_equipment(Equipment(name="Rower", category="Cardio"))
        equipment_id = gateway.last_insert_id

        assert await gateway.delete_equipment(equipment_id) is True
        assert await gateway.read_equipment(equipment_id) is None
        assert await gateway.delete_equipment(equipment_id) is False
        assert gateway.last_error is None

    async def test_failed_read_raises_store_error(self, engine, gateway):
        await drop_tables(engine)
        with pytest.raises(StoreError):
            await gateway.read_all_nutrition()
        assert await gateway.create_nutrition(Nutrition()) is False
        assert gateway.last_error

    async def test_out_of_range_id_is_contained(self, gateway):
        huge_id = 99999999999999999999
        with pytest.raises(StoreError):
            await gateway.read_workout(huge_id)

        assert await gateway.delete_workout(huge_id) is False
        assert gateway.last_error
        assert await gateway.update_workout(_workout(workout_id=huge_id)) is False
        assert gateway.last_error

        # Session still usable after the rollback
        assert await gateway.create_workout(_workout()) is True

    async def test_empty_meal_date_is_matched_by_date(self, gateway):
        await gateway.create_nutrition(Nutrition(carbs=10))
        found = await gateway.read_nutrition_by_date("")
        assert [n.meal_date for n in found] == [""]
