"""create_trip_tables

Revision ID: 4b7e21c9a0d5
Revises: 
Create Date: 2026-10-19 09:12:44.108213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e21c9a0d5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE users (
            id SERIAL PRIMARY KEY,
            username VARCHAR(255) NOT NULL UNIQUE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE TABLE trips (
            id VARCHAR(64) PRIMARY KEY,
            origin VARCHAR(3) NOT NULL,
            destination VARCHAR(3) NOT NULL,
            cost DOUBLE PRECISION NOT NULL,
            duration INTEGER NOT NULL,
            type VARCHAR(20) NOT NULL,
            display_name VARCHAR(255) NOT NULL
        )
    """)

    op.execute("""
        CREATE INDEX idx_trips_route
        ON trips (origin, destination)
    """)

    # One row per (user, trip); deleting a user or trip drops its entries
    op.execute("""
        CREATE TABLE saved_list (
            user_id INTEGER NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            trip_id VARCHAR(64) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            PRIMARY KEY (user_id, trip_id)
        )
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TABLE IF EXISTS saved_list")
    op.execute("DROP INDEX IF EXISTS idx_trips_route")
    op.execute("DROP TABLE IF EXISTS trips")
    op.execute("DROP TABLE IF EXISTS users")
