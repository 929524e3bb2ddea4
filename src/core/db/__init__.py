"""
Database ORM models and the trip store for Wayfarer.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.interface import NOT_FOUND, Found, Lookup, NotFound, TripStore
from core.db.schemas.base import Base
from core.db.schemas.saved_list import SavedListRecord
from core.db.schemas.trip import TripRecord
from core.db.schemas.user import UserRecord
from core.db.store import SqlAlchemyTripStore, build_database_url, build_engine

__all__ = [
    "NOT_FOUND",
    "Base",
    "Found",
    "Lookup",
    "NotFound",
    "SavedListRecord",
    "SqlAlchemyTripStore",
    "TripRecord",
    "TripStore",
    "UserRecord",
    "build_database_url",
    "build_engine",
]
