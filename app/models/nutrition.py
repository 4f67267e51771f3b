"""Nutrition table."""

from __future__ import annotations

from sqlalchemy import Enum, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import FoodFamily
from app.db.base import Base
from app.models._mixins import TimestampMixin


class NutritionRow(TimestampMixin, Base):
    """One meal/food entry. Macros in grams, water in ml. meal_date is "" when unknown."""

    __tablename__ = "nutrition"
    __table_args__ = (Index("ix_nutrition_meal_date", "meal_date"),)

    nutrition_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Stored by value ("Mixed", "Fruit", ...) so the column matches the API
    family: Mapped[FoodFamily] = mapped_column(
        Enum(FoodFamily, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False,
        default=FoodFamily.MIXED,
    )
    water: Mapped[float | None] = mapped_column(Float, nullable=True)
    carbs: Mapped[float | None] = mapped_column(Float, nullable=True)
    fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    protein: Mapped[float | None] = mapped_column(Float, nullable=True)
    sugar: Mapped[float | None] = mapped_column(Float, nullable=True)
    meal_date: Mapped[str] = mapped_column(String(10), nullable=False, default="")  # YYYY-MM-DD
