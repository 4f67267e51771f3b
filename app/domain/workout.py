"""Workout entity - one training session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from app.core.constants import HIGH_INTENSITY_RPE, UNSAVED_ID
from app.domain.base import utc_now


@dataclass
class Workout:
    """A logged workout. muscle_group_id 0 means no muscle group assigned."""

    workout_id: int = UNSAVED_ID
    workout_date: str = ""  # YYYY-MM-DD
    workout_time: str = ""  # HH:MM:SS
    duration: int = 0  # minutes
    type_description: str = ""
    calories_burned: float = 0.0
    rate_perceived_exhaustion: int = 0  # 1-10
    muscle_group_id: int = 0
    created_at: datetime = field(default_factory=utc_now, compare=False)
    updated_at: datetime = field(default_factory=utc_now, compare=False)

    def is_high_intensity(self) -> bool:
        return self.rate_perceived_exhaustion >= HIGH_INTENSITY_RPE

    def display_info(self, stream: TextIO | None = None) -> None:
        print("=== Workout Information ===", file=stream)
        print(f"ID: {self.workout_id}", file=stream)
        print(f"Date: {self.workout_date}", file=stream)
        print(f"Time: {self.workout_time}", file=stream)
        print(f"Duration: {self.duration} minutes", file=stream)
        print(f"Type: {self.type_description}", file=stream)
        print(f"Calories Burned: {self.calories_burned}", file=stream)
        print(f"RPE: {self.rate_perceived_exhaustion}/10", file=stream)
        print(f"Muscle Group ID: {self.muscle_group_id}", file=stream)

    def __str__(self) -> str:
        return (
            f"Workout[ID={self.workout_id}, Date={self.workout_date}, "
            f"Duration={self.duration}min, Type={self.type_description}, "
            f"Calories={self.calories_burned}, RPE={self.rate_perceived_exhaustion}]"
        )
