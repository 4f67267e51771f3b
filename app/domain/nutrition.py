"""Nutrition entity - one meal or food entry with its macros."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from app.core.constants import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    UNSAVED_ID,
)
from app.core.enums import FoodFamily
from app.domain.base import utc_now


@dataclass
class Nutrition:
    """Macros are grams, water is millilitres."""

    nutrition_id: int = UNSAVED_ID
    family: FoodFamily = FoodFamily.MIXED
    water: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    protein: float = 0.0
    sugar: float = 0.0
    meal_date: str = ""  # YYYY-MM-DD
    created_at: datetime = field(default_factory=utc_now, compare=False)
    updated_at: datetime = field(default_factory=utc_now, compare=False)

    @property
    def family_name(self) -> str:
        return self.family.value

    def set_family_from_name(self, name: str) -> None:
        self.family = FoodFamily.from_name(name)

    def total_calories(self) -> float:
        return (
            self.carbs * KCAL_PER_GRAM_CARBS
            + self.protein * KCAL_PER_GRAM_PROTEIN
            + self.fat * KCAL_PER_GRAM_FAT
        )

    def macro_ratio(self, macro: str) -> float:
        """
        Percentage of total calories coming from `macro` (carbs, protein or fat).
        Returns 0 for unknown macros and when there are no calories at all.
        """
        total = self.total_calories()
        if total == 0.0:
            return 0.0
        macro_kcal = {
            "carbs": self.carbs * KCAL_PER_GRAM_CARBS,
            "protein": self.protein * KCAL_PER_GRAM_PROTEIN,
            "fat": self.fat * KCAL_PER_GRAM_FAT,
        }.get(macro.strip().lower())
        if macro_kcal is None:
            return 0.0
        return macro_kcal / total * 100.0

    def display_info(self, stream: TextIO | None = None) -> None:
        print("=== Nutrition Information ===", file=stream)
        print(f"ID: {self.nutrition_id}", file=stream)
        print(f"Family: {self.family_name}", file=stream)
        print(f"Date: {self.meal_date}", file=stream)
        print(f"Water: {self.water} ml", file=stream)
        print(f"Carbs: {self.carbs} g", file=stream)
        print(f"Fat: {self.fat} g", file=stream)
        print(f"Protein: {self.protein} g", file=stream)
        print(f"Sugar: {self.sugar} g", file=stream)
        print(f"Total Calories: {self.total_calories()}", file=stream)

    def __str__(self) -> str:
        return (
            f"Nutrition[ID={self.nutrition_id}, Family={self.family_name}, "
            f"Date={self.meal_date}, Calories={self.total_calories()}]"
        )
