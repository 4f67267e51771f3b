"""Shared enums for entities, models and API."""

from __future__ import annotations

from enum import Enum


class FoodFamily(str, Enum):
    """Food family of a nutrition entry. Values are the stored/rendered names."""

    MIXED = "Mixed"
    FRUIT = "Fruit"
    MEAT = "Meat"
    VEGETABLE = "Vegetable"
    DAIRY = "Dairy"

    @classmethod
    def lookup(cls, name: str | None) -> FoodFamily | None:
        """Case-insensitive lookup by name; None when nothing matches."""
        lowered = (name or "").strip().lower()
        for family in cls:
            if family.value.lower() == lowered:
                return family
        return None

    @classmethod
    def from_name(cls, name: str | None) -> FoodFamily:
        """Like lookup(), but unknown or empty names fall back to Mixed."""
        return cls.lookup(name) or cls.MIXED
