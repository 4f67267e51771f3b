"""Recovery table."""

from __future__ import annotations

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models._mixins import TimestampMixin


class RecoveryRow(TimestampMixin, Base):
    __tablename__ = "recovery"
    __table_args__ = (Index("ix_recovery_recovery_date", "recovery_date"),)

    recovery_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recovery_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # minutes
    type: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    helpers: Mapped[str | None] = mapped_column(Text, nullable=True)
