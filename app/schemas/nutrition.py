"""Nutrition schemas. family travels as its name ("Mixed", "Fruit", ...)."""

from pydantic import BaseModel

from app.core.enums import FoodFamily
from app.domain import Nutrition


class NutritionFields(BaseModel):
    nutrition_id: int = 0
    family: str = FoodFamily.MIXED.value
    water: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    protein: float = 0.0
    sugar: float = 0.0
    meal_date: str = ""


class NutritionSave(NutritionFields):
    """Unknown family names are stored as Mixed."""

    def to_entity(self) -> Nutrition:
        data = self.model_dump()
        data["family"] = FoodFamily.from_name(data["family"])
        return Nutrition(**data)


class NutritionRead(NutritionFields):
    total_calories: float = 0.0  # derived, read-only

    @classmethod
    def from_entity(cls, nutrition: Nutrition) -> "NutritionRead":
        return cls(
            nutrition_id=nutrition.nutrition_id,
            family=nutrition.family_name,
            water=nutrition.water,
            carbs=nutrition.carbs,
            fat=nutrition.fat,
            protein=nutrition.protein,
            sugar=nutrition.sugar,
            meal_date=nutrition.meal_date,
            total_calories=nutrition.total_calories(),
        )


class DailyNutritionTotals(BaseModel):
    date: str
    total_calories: float
    total_protein: float
