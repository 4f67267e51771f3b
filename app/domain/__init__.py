"""Entity dataclasses - plain records, no persistence concerns."""

from app.domain.equipment import Equipment
from app.domain.muscle_group import MuscleGroup
from app.domain.nutrition import Nutrition
from app.domain.recovery import Recovery
from app.domain.workout import Workout

__all__ = [
    "Equipment",
    "MuscleGroup",
    "Nutrition",
    "Recovery",
    "Workout",
]
