"""Wilaya Store database management CLI.

Usage:
    python src/manage.py setup-db         # Create all tables, seed wilayas, bootstrap the admin
    python src/manage.py drop-db          # Drop all tables
    python src/manage.py seed             # Seed the 58 wilayas into an empty table
    python src/manage.py sweep-sessions   # Delete expired admin sessions
"""

import argparse
import sys

from bootstrap import prepare_database
from delivery.registry import DeliveryZoneRegistry
from identity.session.store import SessionStore
from shared.config import Settings
from shared.database import Database
from shared.logging import configure_logging


def _open(settings: Settings) -> Database:
    configure_logging(settings.environment, settings.log_level, settings.log_dir)
    return Database(settings.database_url)


def setup_database(settings: Settings) -> None:
    """Create the schema and run the same preparation the server does at startup."""
    database = _open(settings)
    print(f"Creating schema on {database.engine.url.render_as_string(hide_password=True)}...")
    prepare_database(database, settings)
    database.dispose()
    print("Done.")


def drop_database(settings: Settings) -> None:
    database = _open(settings)
    print("Dropping schema...")
    database.drop_all()
    database.dispose()
    print("Done.")


def seed_wilayas(settings: Settings) -> None:
    database = _open(settings)
    database.create_all()
    with database.session() as session:
        seeded = DeliveryZoneRegistry(session).seed()
    database.dispose()

    if seeded:
        print(f"Seeded {seeded} wilayas.")
    else:
        print("Wilayas already present, nothing seeded.")


def sweep_sessions(settings: Settings) -> None:
    database = _open(settings)
    with database.session() as session:
        removed = SessionStore(session, settings.session_ttl_seconds).sweep()
    database.dispose()
    print(f"Removed {removed} expired session(s).")


COMMANDS = {
    "setup-db": setup_database,
    "drop-db": drop_database,
    "seed": seed_wilayas,
    "sweep-sessions": sweep_sessions,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Wilaya Store database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all tables, seed wilayas and bootstrap the admin")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Seed the wilaya reference data")
    subparsers.add_parser("sweep-sessions", help="Delete expired admin sessions")

    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    command(Settings.from_env())


if __name__ == "__main__":
    main()
