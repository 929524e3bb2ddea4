"""Integration tests for the SQLAlchemy store against a local PostgreSQL."""

import pytest

from core.db import NOT_FOUND, Found, SqlAlchemyTripStore, UserRecord
from core.models import Trip

TRIP = Trip(
    id="0b7f2c1e-4d5a-4e6b-8c9d-1a2b3c4d5e6f",
    origin="CAN",
    destination="BOM",
    cost=812,
    duration=13,
    type="train",
    display_name="from CAN to BOM by train",
)


@pytest.fixture
def pg_store(pg_session_factory):
    with pg_session_factory() as session:
        user = UserRecord(username="wayfarer-test")
        session.add(user)
        session.commit()
        user_id = user.id
    return SqlAlchemyTripStore(pg_session_factory), user_id


@pytest.mark.integration
def test_saved_list_roundtrip(pg_store):
    store, user_id = pg_store

    assert isinstance(store.find_user(user_id), Found)
    assert store.create_trip(TRIP) == TRIP

    entry = store.create_entry(user_id, TRIP.id)
    assert entry.created_at.tzinfo is not None
    assert store.create_entry(user_id, TRIP.id) == entry

    assert [e.trip_id for e in store.list_entries(user_id)] == [TRIP.id]
    assert store.find_trips([TRIP.id]) == [TRIP]

    store.delete_entry(user_id, TRIP.id)
    assert store.find_entry(user_id, TRIP.id) is NOT_FOUND
    assert isinstance(store.find_trip(TRIP.id), Found)


@pytest.mark.integration
def test_health_check(pg_store):
    store, _ = pg_store
    assert store.health_check() is True
