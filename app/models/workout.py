"""Workout table."""

from __future__ import annotations

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models._mixins import TimestampMixin


class WorkoutRow(TimestampMixin, Base):
    """A logged workout session.

    muscle_group_id is a soft reference to muscle_groups: NULL when unassigned,
    not enforced by the database so deleting a group leaves its workouts alone.
    """

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_date_time", "workout_date", "workout_time"),)

    workout_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    workout_time: Mapped[str] = mapped_column(String(8), nullable=False, default="")  # HH:MM:SS
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # minutes
    type_description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    calories_burned: Mapped[float | None] = mapped_column(Float, nullable=True)
    rate_perceived_exhaustion: Mapped[int | None] = mapped_column(Integer, nullable=True)
    muscle_group_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
