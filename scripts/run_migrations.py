#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade (or downgrade) to revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from cradle.config import Settings
from cradle.util.logging import setup_logging
from cradle.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the schema to the requested revision."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    try:
        with logfire.span("run_migrations", target=target):
            if target == "base" or target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
