"""SQLAlchemy ORM model for the users table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base, utcnow

if TYPE_CHECKING:
    from core.db.schemas.saved_list import SavedListRecord


class UserRecord(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_at = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    entries: Mapped[list["SavedListRecord"]] = relationship(back_populates="user", cascade="all, delete-orphan")
