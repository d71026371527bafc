"""Spatial annotations attached to rooms."""

from datetime import UTC, datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from uuid6 import uuid7

from src.app.core.db.database import Base


class Annotation(Base):
    """A titled note pinned to a position inside a room."""

    __tablename__ = "annotations"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid7()))

    room_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    position: Mapped[Any] = mapped_column(JSON, nullable=False)  # e.g. {"x": 1.0, "y": 0.5, "z": -2.0}
    created_by: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"Annotation(id={self.id!r}, room_id={self.room_id!r}, title={self.title!r})"
