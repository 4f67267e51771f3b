"""Tests for RecordManager: upsert routing, finality of deletes and aggregates."""

from datetime import datetime, timezone

import pytest

from app.core.enums import FoodFamily
from app.domain import Equipment, MuscleGroup, Nutrition, Recovery, Workout
from app.services.record_manager import Create, Update, resolve_intent


class TestResolveIntent:
    def test_zero_creates(self):
        assert resolve_intent(0) == Create()

    @pytest.mark.parametrize("identity", [1, 42, -3])
    def test_anything_else_updates(self, identity):
        assert resolve_intent(identity) == Update(existing_id=identity)


class TestSave:
    async def test_create_assigns_identity(self, manager):
        workout = Workout(workout_date="2026-02-28", duration=45, rate_perceived_exhaustion=9)
        assert await manager.save_workout(workout) is True
        assert workout.workout_id > 0
        assert await manager.get_workout(workout.workout_id) == workout

    async def test_second_save_updates_in_place(self, manager):
        group = MuscleGroup(name="Chest", sets=3, reps=10)
        await manager.save_muscle_group(group)
        group_id = group.muscle_group_id

        group.sets = 5
        group.weight_amount = 135.0
        assert await manager.save_muscle_group(group) is True
        assert group.muscle_group_id == group_id

        stored = await manager.get_muscle_group(group_id)
        assert stored.sets == 5
        assert stored.weight_amount == 135.0
        assert len(await manager.get_all_muscle_groups()) == 1

    async def test_update_refreshes_updated_at(self, manager):
        recovery = Recovery(recovery_date="2026-01-01", duration=20, type="Yoga")
        await manager.save_recovery(recovery)

        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
        recovery.updated_at = stale
        recovery.duration = 25
        await manager.save_recovery(recovery)
        assert recovery.updated_at > stale

    async def test_update_of_missing_id_fails(self, manager):
        assert await manager.save_equipment(Equipment(equipment_id=500, name="Ghost")) is False
        assert await manager.get_equipment(500) is None

    async def test_failed_create_keeps_identity_unsaved(self, manager):
        await manager.save_equipment(Equipment(name="Bench"))
        duplicate = Equipment(name="Bench")
        assert await manager.save_equipment(duplicate) is False
        assert duplicate.equipment_id == 0
        assert manager.last_error

    async def test_returned_entities_are_detached(self, manager):
        workout = Workout(workout_date="2026-01-01", duration=30)
        await manager.save_workout(workout)

        fetched = await manager.get_workout(workout.workout_id)
        fetched.duration = 999
        assert (await manager.get_workout(workout.workout_id)).duration == 30


class TestDelete:
    async def test_delete_is_final(self, manager):
        nutrition = Nutrition(family=FoodFamily.FRUIT, carbs=25, meal_date="2026-01-01")
        await manager.save_nutrition(nutrition)

        assert await manager.delete_nutrition(nutrition.nutrition_id) is True
        assert await manager.get_nutrition(nutrition.nutrition_id) is None
        assert await manager.delete_nutrition(nutrition.nutrition_id) is False


class TestAggregates:
    async def test_total_calories_burned_in_range(self, manager):
        for day, calories in (("2026-01-01", 300.0), ("2026-01-15", 400.0), ("2026-02-01", 250.0)):
            await manager.save_workout(Workout(workout_date=day, calories_burned=calories))

        assert await manager.get_total_calories_burned("2026-01-01", "2026-01-31") == pytest.approx(700.0)
        assert await manager.get_total_calories_burned("2026-01-15", "2026-01-15") == pytest.approx(400.0)
        assert await manager.get_total_calories_burned("2027-01-01", "2027-12-31") == 0.0

    async def test_high_intensity_workouts(self, manager):
        for rpe in (6, 8, 10):
            await manager.save_workout(Workout(workout_date="2026-01-01", rate_perceived_exhaustion=rpe))
        found = await manager.get_high_intensity_workouts()
        assert sorted(w.rate_perceived_exhaustion for w in found) == [8, 10]

    async def test_total_recovery_time(self, manager):
        await manager.save_recovery(Recovery(recovery_date="2026-03-01", duration=30, type="Stretching"))
        await manager.save_recovery(Recovery(recovery_date="2026-03-02", duration=90, type="Massage"))
        await manager.save_recovery(Recovery(recovery_date="2026-04-01", duration=15, type="Sauna"))

        total = await manager.get_total_recovery_time("2026-03-01", "2026-03-31")
        assert total == 120
        assert isinstance(total, int)

    async def test_daily_nutrition_totals(self, manager):
        await manager.save_nutrition(Nutrition(carbs=50, protein=30, fat=10, meal_date="2026-01-02"))
        await manager.save_nutrition(Nutrition(protein=20, meal_date="2026-01-02"))
        await manager.save_nutrition(Nutrition(carbs=100, meal_date="2026-01-03"))

        assert await manager.get_total_calories_for_date("2026-01-02") == pytest.approx(490.0)
        assert await manager.get_total_protein_for_date("2026-01-02") == pytest.approx(50.0)
        assert await manager.get_total_calories_for_date("2026-01-04") == 0.0

    async def test_daily_totals_for_undated_entries(self, manager):
        await manager.save_nutrition(Nutrition(carbs=10))
        assert await manager.get_total_calories_for_date("") == pytest.approx(40.0)

    async def test_cardio_equipment(self, manager):
        await manager.save_equipment(Equipment(name="Treadmill", category="Cardio"))
        await manager.save_equipment(Equipment(name="Bike", category="CARDIO Machines"))
        await manager.save_equipment(Equipment(name="Barbell", category="Free Weights"))

        names = sorted(e.name for e in await manager.get_cardio_equipment())
        assert names == ["Bike", "Treadmill"]

    async def test_lookups_by_name(self, manager):
        await manager.save_muscle_group(MuscleGroup(name="Legs"))
        await manager.save_equipment(Equipment(name="Rower"))

        assert (await manager.get_muscle_group_by_name("Legs")).name == "Legs"
        assert await manager.get_muscle_group_by_name("Arms") is None
        assert (await manager.get_equipment_by_name("Rower")).name == "Rower"
