"""Tests for the database management CLI."""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from sqlalchemy import inspect

import manage
from delivery.registry import DeliveryZoneRegistry
from shared.database import Database


@pytest.fixture()
def database_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'store.db'}"
    monkeypatch.setattr("shared.config.load_dotenv", lambda: None)
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_DIR", "")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    return url


class TestManageCommands:
    def test_setup_db_creates_schema_and_seeds(self, database_url, capsys):
        manage.main(["setup-db"])

        database = Database(database_url)
        try:
            tables = set(inspect(database.engine).get_table_names())
            assert {"products", "wilayas", "orders", "order_items", "admins", "sessions"} <= tables
            with database.session() as session:
                assert len(DeliveryZoneRegistry(session).list()) == 58
        finally:
            database.dispose()
        assert "Done." in capsys.readouterr().out

    def test_seed_is_idempotent(self, database_url, capsys):
        manage.main(["seed"])
        manage.main(["seed"])

        out = capsys.readouterr().out
        assert "Seeded 58 wilayas." in out
        assert "nothing seeded" in out

    def test_sweep_sessions(self, database_url, capsys):
        manage.main(["setup-db"])
        manage.main(["sweep-sessions"])
        assert "Removed 0 expired session(s)." in capsys.readouterr().out

    def test_drop_db(self, database_url):
        manage.main(["setup-db"])
        manage.main(["drop-db"])

        database = Database(database_url)
        try:
            assert inspect(database.engine).get_table_names() == []
        finally:
            database.dispose()

    def test_unknown_command_exits(self, database_url):
        with pytest.raises(SystemExit):
            manage.main(["migrate"])

    def test_cli_does_not_build_the_web_app(self):
        src = Path(manage.__file__).parent
        env = {**os.environ, "PYTHONPATH": str(src)}
        code = "import sys, manage; manage.setup_database; sys.exit('app' in sys.modules)"

        result = subprocess.run([sys.executable, "-c", code], env=env, cwd=src, capture_output=True)
        assert result.returncode == 0, result.stderr.decode()
