"""ORM models - import all so Base.metadata is complete for create_all."""

from app.models.equipment import EquipmentRow
from app.models.muscle_group import MuscleGroupRow
from app.models.nutrition import NutritionRow
from app.models.recovery import RecoveryRow
from app.models.workout import WorkoutRow

__all__ = [
    "EquipmentRow",
    "MuscleGroupRow",
    "NutritionRow",
    "RecoveryRow",
    "WorkoutRow",
]
