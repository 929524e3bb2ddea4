"""SQLAlchemy ORM model for the trips table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base

if TYPE_CHECKING:
    from core.db.schemas.saved_list import SavedListRecord


class TripRecord(Base):
    __tablename__ = "trips"

    # Provider-assigned identifier, kept as-is.
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    origin: Mapped[str] = mapped_column(String(3), nullable=False)
    destination: Mapped[str] = mapped_column(String(3), nullable=False)
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)

    entries: Mapped[list["SavedListRecord"]] = relationship(back_populates="trip")

    __table_args__ = (Index("idx_trips_route", "origin", "destination"),)
