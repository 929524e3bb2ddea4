#!/usr/bin/env python3
"""Create the Wayfarer tables on a local PostgreSQL and seed a demo user.

For local development only; deployed environments run the Alembic
migrations instead.

Usage:
    python scripts/create_local_tables.py [username]
"""

import sys
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import Base, UserRecord, build_engine


def create_tables(engine):
    """Create users, trips and saved_list tables if missing."""
    Base.metadata.create_all(engine)
    print(f"✓ Tables ready: {', '.join(sorted(Base.metadata.tables))}")


def seed_user(engine, username):
    """Create the demo user unless it already exists."""
    with Session(engine) as session:
        existing = session.scalar(select(UserRecord).where(UserRecord.username == username))
        if existing is not None:
            print(f"✓ User {username!r} already exists (id={existing.id})")
            return
        user = UserRecord(username=username)
        session.add(user)
        session.commit()
        print(f"✓ Created user {username!r} (id={user.id})")


def main():
    username = sys.argv[1] if len(sys.argv) > 1 else "demo"
    config = get_config()
    print(f"Using database {config.database_host}:{config.database_port}/{config.database_name}")

    engine = build_engine(config)
    try:
        create_tables(engine)
        seed_user(engine, username)
    except OperationalError as e:
        print(f"✗ Could not reach the database: {e}")
        sys.exit(1)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
