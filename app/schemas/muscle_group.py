"""Muscle group schemas."""

from pydantic import BaseModel, ConfigDict

from app.domain import MuscleGroup


class MuscleGroupFields(BaseModel):
    muscle_group_id: int = 0
    name: str = ""
    description: str = ""
    days_per_week: int = 0
    sets: int = 0
    reps: int = 0
    weight_amount: float = 0.0


class MuscleGroupSave(MuscleGroupFields):
    def to_entity(self) -> MuscleGroup:
        return MuscleGroup(**self.model_dump())


class MuscleGroupRead(MuscleGroupFields):
    model_config = ConfigDict(from_attributes=True)
