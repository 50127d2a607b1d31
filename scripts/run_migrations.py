#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from snip.config import Settings
from snip.util.logging import setup_logging
from snip.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade the comments schema to the latest revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a stale schema
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
