"""Database preparation shared by the server's startup and ``manage.py setup-db``."""

from delivery.registry import DeliveryZoneRegistry
from identity.admin.authentication import AdminSessionAuthority
from shared.config import Settings
from shared.database import Database


def prepare_database(database: Database, settings: Settings) -> None:
    """Create tables, seed the wilayas, bootstrap the first admin and drop stale sessions."""
    database.create_all()

    with database.session() as session:
        if settings.seed_wilayas:
            DeliveryZoneRegistry(session).seed()

        authority = AdminSessionAuthority(
            session,
            ttl_seconds=settings.session_ttl_seconds,
            bcrypt_rounds=settings.bcrypt_rounds,
        )
        authority.bootstrap(settings.admin_email, settings.admin_password)
        authority.sessions.sweep()
