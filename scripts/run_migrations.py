#!/usr/bin/env python3
"""Apply Alembic migrations to the Folio database with Logfire error tracking."""

import sys
from urllib.parse import urlparse

import logfire
from alembic import command
from alembic.config import Config

from folio.config import Settings
from folio.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision`` and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    # Never log credentials, only where we are migrating
    target = urlparse(settings.database.url)

    try:
        logfire.info(
            "Starting database migrations",
            revision=revision,
            host=target.hostname,
            database=target.path.lstrip("/"),
        )

        # env.py reads the database URL from Settings
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy fails instead of serving a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
