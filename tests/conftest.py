"""Shared test fixtures for Wayfarer."""

import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (no AWS access needed)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.cache import KeyValueCache  # noqa: E402
from core.db import TripStore  # noqa: E402
from core.models import SavedListEntry, Trip  # noqa: E402
from core.provider import ProviderResponse, TripProviderClient  # noqa: E402


# Trip fixtures
@pytest.fixture
def can_bom_trips():
    """Three CAN→BOM trips with distinct cost and duration."""
    return [
        Trip(id="1", origin="CAN", destination="BOM", cost=812, duration=13, type="train", display_name="from CAN to BOM by train"),
        Trip(id="2", origin="CAN", destination="BOM", cost=3882, duration=46, type="car", display_name="from CAN to BOM by car"),
        Trip(id="3", origin="CAN", destination="BOM", cost=4231, duration=28, type="train", display_name="from CAN to BOM by train"),
    ]


@pytest.fixture
def saved_entries():
    """Entries for user 1 referencing trips 1..3."""
    return [
        SavedListEntry(user_id=1, trip_id="1", created_at=datetime(2024, 11, 24, 10, 18, 52)),
        SavedListEntry(user_id=1, trip_id="2", created_at=datetime(2024, 11, 23, 12, 58, 45)),
        SavedListEntry(user_id=1, trip_id="3", created_at=datetime(2024, 11, 24, 11, 55, 49)),
    ]


# Collaborator fakes
@pytest.fixture
def mock_cache():
    cache = MagicMock(spec=KeyValueCache)
    cache.get.return_value = None
    return cache


@pytest.fixture
def mock_store():
    return MagicMock(spec=TripStore)


@pytest.fixture
def mock_provider():
    provider = MagicMock(spec=TripProviderClient)
    provider.search_trips.return_value = ProviderResponse(payload=[], status_code=200)
    return provider


# PostgreSQL fixtures
@pytest.fixture
def pg_session_factory():
    """Provide a session factory bound to the local PostgreSQL for integration tests."""
    from sqlalchemy.orm import sessionmaker

    from core.config import get_config
    from core.db import Base, build_engine

    engine = build_engine(get_config())
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)

    # Cleanup: drop rows created during the test
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    engine.dispose()


# Redis fixtures
@pytest.fixture
def redis_client():
    """Provide a Redis client for integration tests."""
    import redis

    from core.config import get_config

    config = get_config()
    client = redis.Redis(host=config.redis_host, port=config.redis_port, password=config.redis_password or None)
    yield client

    # Cleanup: remove keys written by tests
    for key in client.scan_iter("wayfarer-test:*"):
        client.delete(key)
    client.close()
