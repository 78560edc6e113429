"""Session store — a key-value store with TTL on top of the ``sessions`` table."""

import secrets
from datetime import timedelta

from sqlalchemy import delete
from sqlalchemy.orm import Session

from identity.session.session import AdminSession
from shared.config import DEFAULT_SESSION_TTL_SECONDS
from shared.database import utcnow
from shared.logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    def __init__(self, session: Session, ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS):
        self.session = session
        self.ttl = timedelta(seconds=ttl_seconds)

    def create(self, admin_id: str) -> AdminSession:
        now = utcnow()
        record = AdminSession(
            sid=secrets.token_urlsafe(32),
            admin_id=admin_id,
            expire=now + self.ttl,
            created_at=now,
        )
        self.session.add(record)
        self.session.commit()
        return record

    def get(self, sid: str | None) -> AdminSession | None:
        """Return the live session for ``sid``; expired records are removed on sight."""
        if not sid:
            return None

        record = self.session.get(AdminSession, sid)
        if record is None:
            return None

        if record.is_expired():
            self.session.delete(record)
            self.session.commit()
            logger.info("session_expired", admin_id=record.admin_id)
            return None

        return record

    def destroy(self, sid: str | None) -> bool:
        if not sid:
            return False

        record = self.session.get(AdminSession, sid)
        if record is None:
            return False

        self.session.delete(record)
        self.session.commit()
        return True

    def sweep(self) -> int:
        """Delete every expired session and return how many were removed."""
        result = self.session.execute(delete(AdminSession).where(AdminSession.expire <= utcnow()))
        self.session.commit()
        if result.rowcount:
            logger.info("sessions_swept", count=result.rowcount)
        return result.rowcount or 0
