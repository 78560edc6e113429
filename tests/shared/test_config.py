"""Tests for settings loaded from the environment."""

from shared.config import DEFAULT_DATABASE_URL, DEFAULT_SESSION_TTL_SECONDS, Settings


class TestSettingsFromEnv:
    def test_defaults(self, monkeypatch):
        for name in (
            "DATABASE_URL",
            "ENVIRONMENT",
            "ENV",
            "SESSION_TTL_SECONDS",
            "BCRYPT_ROUNDS",
            "CORS_ORIGINS",
            "LOG_LEVEL",
            "SEED_WILAYAS",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("shared.config.load_dotenv", lambda: None)

        settings = Settings.from_env()
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.environment == "development"
        assert settings.session_ttl_seconds == DEFAULT_SESSION_TTL_SECONDS == 604800
        assert settings.bcrypt_rounds == 12
        assert settings.cors_origins == ["*"]
        assert settings.seed_wilayas is True
        assert settings.is_production is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setattr("shared.config.load_dotenv", lambda: None)
        monkeypatch.setenv("DATABASE_URL", "postgresql://store:store@db/store")
        monkeypatch.setenv("ENVIRONMENT", "Production")
        monkeypatch.setenv("SESSION_TTL_SECONDS", "3600")
        monkeypatch.setenv("CORS_ORIGINS", "https://wilaya-store.dz, https://admin.wilaya-store.dz")
        monkeypatch.setenv("SEED_WILAYAS", "false")
        monkeypatch.setenv("LOG_DIR", "")

        settings = Settings.from_env()
        assert settings.database_url == "postgresql://store:store@db/store"
        assert settings.is_production is True
        assert settings.session_ttl_seconds == 3600
        assert settings.cors_origins == ["https://wilaya-store.dz", "https://admin.wilaya-store.dz"]
        assert settings.seed_wilayas is False
        assert settings.log_dir is None
