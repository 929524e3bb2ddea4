"""SQLAlchemy-backed trip store — PostgreSQL in deployment, any SQLAlchemy dialect in tests."""

import json
import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import boto3
from sqlalchemy import Engine, create_engine, delete, select, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.config import Config
from core.db.interface import NOT_FOUND, Found, Lookup, TripStore
from core.db.schemas.saved_list import SavedListRecord
from core.db.schemas.trip import TripRecord
from core.db.schemas.user import UserRecord
from core.errors import StoreError
from core.models import SavedListEntry, Trip, User

logger = logging.getLogger(__name__)


def build_database_url(config: Config) -> URL:
    """SQLAlchemy URL for the database, read from Secrets Manager when an ARN is configured."""
    if not config.database_secret_arn:
        return config.database_url

    client = boto3.client("secretsmanager", region_name=config.aws_region)
    secret = json.loads(client.get_secret_value(SecretId=config.database_secret_arn)["SecretString"])
    return URL.create(
        "postgresql+psycopg",
        username=secret.get("username", secret.get("user", config.database_user)),
        password=secret.get("password", config.database_password),
        host=secret.get("host", config.database_host),
        port=int(secret.get("port", config.database_port)),
        database=secret.get("dbname", config.database_name),
    )


def build_engine(config: Config) -> Engine:
    return create_engine(build_database_url(config), pool_pre_ping=True)


class SqlAlchemyTripStore(TripStore):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            raise StoreError(f"Store operation failed: {e}") from e

    def find_user(self, user_id: int) -> Lookup[User]:
        with self._session() as session:
            row = session.get(UserRecord, user_id)
            if row is None:
                return NOT_FOUND
            return Found(User(id=row.id, username=row.username))

    def find_trip(self, trip_id: str) -> Lookup[Trip]:
        with self._session() as session:
            row = session.get(TripRecord, trip_id)
            if row is None:
                return NOT_FOUND
            return Found(Trip.model_validate(row, from_attributes=True))

    def find_trips(self, trip_ids: Iterable[str]) -> list[Trip]:
        ids = list(trip_ids)
        if not ids:
            return []
        with self._session() as session:
            rows = session.scalars(select(TripRecord).where(TripRecord.id.in_(ids))).all()
            return [Trip.model_validate(row, from_attributes=True) for row in rows]

    def create_trip(self, trip: Trip) -> Trip | None:
        with self._session() as session:
            row = TripRecord(**trip.model_dump())
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.info("Stored trip %s", row.id)
            return Trip.model_validate(row, from_attributes=True)

    def list_entries(self, user_id: int) -> list[SavedListEntry]:
        stmt = (
            select(SavedListRecord.created_at, SavedListRecord.trip_id)
            .where(SavedListRecord.user_id == user_id)
            .order_by(SavedListRecord.created_at)
        )
        with self._session() as session:
            return [
                SavedListEntry(user_id=user_id, trip_id=trip_id, created_at=created_at)
                for created_at, trip_id in session.execute(stmt)
            ]

    def find_entry(self, user_id: int, trip_id: str) -> Lookup[SavedListEntry]:
        with self._session() as session:
            row = session.get(SavedListRecord, (user_id, trip_id))
            if row is None:
                return NOT_FOUND
            return Found(SavedListEntry(user_id=row.user_id, trip_id=row.trip_id, created_at=row.created_at))

    def create_entry(self, user_id: int, trip_id: str) -> SavedListEntry | None:
        with self._session() as session:
            row = session.get(SavedListRecord, (user_id, trip_id))
            if row is None:
                row = SavedListRecord(user_id=user_id, trip_id=trip_id)
                session.add(row)
                session.commit()
                session.refresh(row)
                logger.info("Saved trip %s for user %s", trip_id, user_id)
            return SavedListEntry(user_id=row.user_id, trip_id=row.trip_id, created_at=row.created_at)

    def delete_entry(self, user_id: int, trip_id: str) -> None:
        with self._session() as session:
            session.execute(
                delete(SavedListRecord).where(
                    SavedListRecord.user_id == user_id,
                    SavedListRecord.trip_id == trip_id,
                )
            )
            session.commit()

    def health_check(self) -> bool:
        try:
            with self._session_factory() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception:
            return False
