#!/usr/bin/env python3
"""Bring the Local Hunt schema up to date.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f9c1a7d2b64
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from hunt.config import Settings
from hunt.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the given revision (head by default)."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Migration to {revision} failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

        logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
