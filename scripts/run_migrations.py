#!/usr/bin/env python3
"""Apply or roll back Alembic migrations for the votes schema.

Usage:
    run_migrations.py                    # upgrade to head
    run_migrations.py upgrade <rev>
    run_migrations.py downgrade <rev>
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from guess.config import Settings
from guess.util.logging import setup_logging
from guess.util.observability import configure_logfire

DIRECTIONS = {"upgrade": command.upgrade, "downgrade": command.downgrade}


def main(argv: list[str]) -> int:
    direction = argv[0] if argv else "upgrade"
    revision = argv[1] if len(argv) > 1 else "head"
    if direction not in DIRECTIONS:
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations", direction=direction, revision=revision):
        try:
            DIRECTIONS[direction](Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrations finished", direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
