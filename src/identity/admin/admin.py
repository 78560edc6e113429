"""AdminAccount — the only kind of user; passwords are stored as bcrypt hashes."""

from datetime import datetime
from functools import lru_cache

import bcrypt
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.database import Base, new_id, utcnow
from shared.exceptions import ValidationError

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))


@lru_cache(maxsize=8)
def placeholder_hash(rounds: int) -> str:
    """A hash to check against when the email is unknown, so both failures cost the same."""
    return hash_password("placeholder-password", rounds)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AdminAccount(Base):
    __tablename__ = "admins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)

    @classmethod
    def register(cls, email: str, password: str, rounds: int = 12) -> "AdminAccount":
        email = normalize_email(email)
        if not email or "@" not in email:
            raise ValidationError({"email": ["A valid email address is required"]})
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        now = utcnow()
        return cls(
            id=new_id(),
            email=email,
            password=hash_password(password, rounds),
            created_at=now,
            updated_at=now,
        )

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password)

    def __repr__(self) -> str:
        return f"<AdminAccount {self.email}>"
