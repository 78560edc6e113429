"""Database lifecycle: engine, session factory and schema management.

A ``Database`` is built by the application factory (or ``manage.py``), kept on
``app.state`` for the life of the process and disposed at shutdown. Request
handlers receive a fresh ``Session`` per request through
``shared.api.get_session``.
"""

import importlib
import uuid
from datetime import UTC, datetime

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shared.logging import get_logger

logger = get_logger(__name__)

# Every module that declares mapped classes; imported before create_all/drop_all
MODEL_MODULES = (
    "delivery.wilaya",
    "catalogue.product.product",
    "ordering.order.order",
    "identity.admin.admin",
    "identity.session.session",
)


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite drops tzinfo so every column stays naive."""
    return datetime.now(UTC).replace(tzinfo=None)


def import_models() -> None:
    for module in MODEL_MODULES:
        importlib.import_module(module)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and hands out sessions."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: Engine = self._build_engine(url, echo)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @staticmethod
    def _build_engine(url: str, echo: bool) -> Engine:
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
                options["poolclass"] = StaticPool
            engine = create_engine(url, echo=echo, **options)
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        return create_engine(url, echo=echo, pool_pre_ping=True)

    def session(self) -> Session:
        return self._session_factory()

    def create_all(self) -> None:
        import_models()
        Base.metadata.create_all(self.engine)
        logger.info("database_schema_ready", tables=sorted(Base.metadata.tables))

    def drop_all(self) -> None:
        import_models()
        Base.metadata.drop_all(self.engine)
        logger.info("database_schema_dropped")

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()
