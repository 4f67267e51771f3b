"""MuscleGroup entity - a training target with its weekly programme."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from app.core.constants import UNSAVED_ID
from app.domain.base import utc_now


@dataclass
class MuscleGroup:
    muscle_group_id: int = UNSAVED_ID
    name: str = ""
    description: str = ""
    days_per_week: int = 0
    sets: int = 0
    reps: int = 0
    weight_amount: float = 0.0  # lbs
    created_at: datetime = field(default_factory=utc_now, compare=False)
    updated_at: datetime = field(default_factory=utc_now, compare=False)

    def display_info(self, stream: TextIO | None = None) -> None:
        print("=== Muscle Group Information ===", file=stream)
        print(f"ID: {self.muscle_group_id}", file=stream)
        print(f"Name: {self.name}", file=stream)
        print(f"Description: {self.description}", file=stream)
        print(f"Days per Week: {self.days_per_week}", file=stream)
        print(f"Sets: {self.sets}", file=stream)
        print(f"Reps: {self.reps}", file=stream)
        print(f"Weight: {self.weight_amount} lbs", file=stream)

    def __str__(self) -> str:
        return (
            f"MuscleGroup[ID={self.muscle_group_id}, Name={self.name}, "
            f"Days/Week={self.days_per_week}, Sets={self.sets}, Reps={self.reps}, "
            f"Weight={self.weight_amount}]"
        )
