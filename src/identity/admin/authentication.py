"""Admin Session Authority — login, logout, session resolution and bootstrap."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from identity.admin.admin import AdminAccount, normalize_email, placeholder_hash, verify_password
from identity.session.session import AdminSession
from identity.session.store import SessionStore
from shared.config import DEFAULT_SESSION_TTL_SECONDS
from shared.exceptions import AuthenticationError
from shared.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
UNAUTHORIZED = "Unauthorized"


class AdminSessionAuthority:
    def __init__(
        self,
        session: Session,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        bcrypt_rounds: int = 12,
    ):
        self.session = session
        self.sessions = SessionStore(session, ttl_seconds)
        self.bcrypt_rounds = bcrypt_rounds

    def find_by_email(self, email: str) -> AdminAccount | None:
        return self.session.scalar(select(AdminAccount).where(AdminAccount.email == normalize_email(email)))

    def login(self, email: str, password: str) -> tuple[AdminAccount, AdminSession]:
        """Authenticate and open a session.

        Unknown email and wrong password fail identically.
        """
        admin = self.find_by_email(email)
        if admin is None:
            verify_password(password, placeholder_hash(self.bcrypt_rounds))
            logger.info("admin_login_failed", reason="unknown_email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not admin.check_password(password):
            logger.info("admin_login_failed", reason="bad_password", admin_id=admin.id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        self.sessions.sweep()
        record = self.sessions.create(admin.id)
        logger.info("admin_logged_in", admin_id=admin.id)
        return admin, record

    def logout(self, sid: str | None) -> None:
        if self.sessions.destroy(sid):
            logger.info("admin_logged_out")

    def current_admin(self, sid: str | None) -> AdminAccount:
        record = self.sessions.get(sid)
        if record is None:
            raise AuthenticationError(UNAUTHORIZED)

        admin = self.session.get(AdminAccount, record.admin_id)
        if admin is None:
            raise AuthenticationError(UNAUTHORIZED)
        return admin

    def bootstrap(self, email: str, password: str) -> AdminAccount | None:
        """Create the first admin account when none exists."""
        existing = self.session.scalar(select(func.count()).select_from(AdminAccount))
        if existing:
            return None

        admin = AdminAccount.register(email, password, self.bcrypt_rounds)
        self.session.add(admin)
        self.session.commit()
        logger.info("admin_bootstrapped", email=admin.email)
        return admin
