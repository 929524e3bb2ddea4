"""Programmatic Alembic upgrades for the migrate Lambda."""

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from alembic.config import Config

from alembic import command

logger = logging.getLogger(__name__)


@contextmanager
def _captured_alembic_output() -> Iterator[io.StringIO]:
    buf = io.StringIO()
    stream_handler = logging.StreamHandler(buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)
    try:
        yield buf
    finally:
        alembic_logger.removeHandler(stream_handler)


def run_migrations(
    ini_path: str = "/var/task/alembic.ini",
    script_location: str = "/var/task/alembic",
    revision: str = "head",
) -> dict[str, str]:
    """Upgrade the schema to ``revision``.

    The connection URL is built in alembic/env.py by ``build_database_url``,
    the same path the store engine uses, so a configured DATABASE_SECRET_ARN
    applies here too.
    """
    cfg = Config(ini_path)
    cfg.set_main_option("script_location", script_location)

    with _captured_alembic_output() as buf:
        try:
            command.upgrade(cfg, revision)
        except Exception:
            logger.exception("Migration to %s failed", revision)
            raise

    output = buf.getvalue()
    logger.info("Migrated to %s: %s", revision, output)
    return {"status": "success", "revision": revision, "output": output}
