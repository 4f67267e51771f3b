"""Muscle group table."""

from __future__ import annotations

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models._mixins import TimestampMixin


class MuscleGroupRow(TimestampMixin, Base):
    """Muscle group (e.g. Chest, Quads) with its weekly programme. Workouts link via muscle_group_id."""

    __tablename__ = "muscle_groups"

    muscle_group_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    days_per_week: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight_amount: Mapped[float | None] = mapped_column(Float, nullable=True)  # lbs
