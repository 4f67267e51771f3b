"""Recovery entity - stretching, massage, sauna and similar sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from app.core.constants import LONG_RECOVERY_MINUTES, UNSAVED_ID
from app.domain.base import utc_now


@dataclass
class Recovery:
    recovery_id: int = UNSAVED_ID
    recovery_date: str = ""  # YYYY-MM-DD
    duration: int = 0  # minutes
    type: str = ""
    helpers: str = ""  # free text: aids used (foam roller, bands, ...)
    created_at: datetime = field(default_factory=utc_now, compare=False)
    updated_at: datetime = field(default_factory=utc_now, compare=False)

    def is_long_recovery(self) -> bool:
        return self.duration > LONG_RECOVERY_MINUTES

    def display_info(self, stream: TextIO | None = None) -> None:
        print("=== Recovery Information ===", file=stream)
        print(f"ID: {self.recovery_id}", file=stream)
        print(f"Date: {self.recovery_date}", file=stream)
        print(f"Duration: {self.duration} minutes", file=stream)
        print(f"Type: {self.type}", file=stream)
        print(f"Helpers/Aids: {self.helpers}", file=stream)

    def __str__(self) -> str:
        return (
            f"Recovery[ID={self.recovery_id}, Date={self.recovery_date}, "
            f"Duration={self.duration}min, Type={self.type}]"
        )
