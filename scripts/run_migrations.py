#!/usr/bin/env python3
"""Apply or roll back database migrations, reporting to Logfire.

Usage:
    python scripts/run_migrations.py                 # upgrade to head
    python scripts/run_migrations.py --revision base --downgrade
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from social.config import Settings
from social.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Alembic migrations")
    parser.add_argument("--revision", default="head", help="Target revision")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Downgrade to the target revision instead of upgrading",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Migrate the configured database and log any errors to Logfire."""
    args = parse_args(argv)
    settings = Settings()
    configure_logfire(settings)

    # Same database the app connects to; password never logged
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option(
        "sqlalchemy.url",
        make_url(settings.database_url)
        .render_as_string(hide_password=False)
        .replace("%", "%%"),
    )
    target = make_url(settings.database_url).render_as_string(hide_password=True)

    direction = "downgrade" if args.downgrade else "upgrade"
    try:
        with logfire.span(
            "migrations.run", direction=direction, revision=args.revision, database=target
        ):
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)

        logfire.info("Migrations applied", direction=direction, revision=args.revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The deployment must not start on a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
