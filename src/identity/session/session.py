"""Server-side admin session record, keyed by the opaque cookie value."""

from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from shared.database import Base, utcnow


class AdminSession(Base):
    __tablename__ = "sessions"

    sid: Mapped[str] = mapped_column(String(64), primary_key=True)
    admin_id: Mapped[str] = mapped_column(String(36), ForeignKey("admins.id", ondelete="CASCADE"), nullable=False)
    expire: Mapped[datetime] = mapped_column(nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expire <= (now or utcnow())
