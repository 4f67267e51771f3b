"""Workout schemas."""

from pydantic import BaseModel, ConfigDict

from app.domain import Workout


class WorkoutFields(BaseModel):
    workout_id: int = 0
    workout_date: str = ""
    workout_time: str = ""
    duration: int = 0
    type_description: str = ""
    calories_burned: float = 0.0
    rate_perceived_exhaustion: int = 0
    muscle_group_id: int | None = 0


class WorkoutSave(WorkoutFields):
    """POST body. workout_id 0 (or omitted) creates, any other id updates that workout."""

    def to_entity(self) -> Workout:
        data = self.model_dump()
        data["muscle_group_id"] = data["muscle_group_id"] or 0
        return Workout(**data)


class WorkoutRead(WorkoutFields):
    model_config = ConfigDict(from_attributes=True)


class CaloriesBurnedTotal(BaseModel):
    start: str
    end: str
    total_calories_burned: float
