"""Equipment entity - machines and accessories available for training."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from app.core.constants import UNSAVED_ID
from app.domain.base import utc_now


@dataclass
class Equipment:
    equipment_id: int = UNSAVED_ID
    name: str = ""
    description: str = ""
    category: str = ""
    target: str = ""
    created_at: datetime = field(default_factory=utc_now, compare=False)
    updated_at: datetime = field(default_factory=utc_now, compare=False)

    def is_cardio_equipment(self) -> bool:
        return "cardio" in self.category.lower()

    def display_info(self, stream: TextIO | None = None) -> None:
        print("=== Equipment Information ===", file=stream)
        print(f"ID: {self.equipment_id}", file=stream)
        print(f"Name: {self.name}", file=stream)
        print(f"Description: {self.description}", file=stream)
        print(f"Category: {self.category}", file=stream)
        print(f"Target: {self.target}", file=stream)

    def __str__(self) -> str:
        return (
            f"Equipment[ID={self.equipment_id}, Name={self.name}, "
            f"Category={self.category}, Target={self.target}]"
        )
