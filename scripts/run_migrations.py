#!/usr/bin/env python3
"""Apply database migrations up to head, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from social.config import Settings
from social.util.logging import setup_logging
from social.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy stops before serving on a broken schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
