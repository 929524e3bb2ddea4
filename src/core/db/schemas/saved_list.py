"""SQLAlchemy ORM model for the saved_list table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base, utcnow

if TYPE_CHECKING:
    from core.db.schemas.trip import TripRecord
    from core.db.schemas.user import UserRecord


class SavedListRecord(Base):
    __tablename__ = "saved_list"

    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    trip_id: Mapped[str] = mapped_column(String(64), ForeignKey("trips.id", ondelete="CASCADE"), primary_key=True)
    created_at = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    user: Mapped["UserRecord"] = relationship(back_populates="entries")
    trip: Mapped["TripRecord"] = relationship(back_populates="entries")
