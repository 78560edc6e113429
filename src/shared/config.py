"""Runtime settings read from the environment (and an optional ``.env`` file)."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./wilaya_store.db"
DEFAULT_SESSION_TTL_SECONDS = 7 * 24 * 60 * 60


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    environment: str = "development"
    admin_email: str = "admin@wilaya-store.dz"
    admin_password: str = "change-me-admin"
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    session_cookie_name: str = "sid"
    bcrypt_rounds: int = 12
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str | None = None
    log_dir: str | None = "logs"
    seed_wilayas: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            environment=(os.getenv("ENVIRONMENT") or os.getenv("ENV") or "development").lower(),
            admin_email=os.getenv("ADMIN_EMAIL", "admin@wilaya-store.dz"),
            admin_password=os.getenv("ADMIN_PASSWORD", "change-me-admin"),
            session_ttl_seconds=int(os.getenv("SESSION_TTL_SECONDS", str(DEFAULT_SESSION_TTL_SECONDS))),
            session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "sid"),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL"),
            log_dir=os.getenv("LOG_DIR", "logs") or None,
            seed_wilayas=os.getenv("SEED_WILAYAS", "true").lower() in ("1", "true", "yes"),
        )
