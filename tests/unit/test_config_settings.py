"""Unit tests for application settings and engine configuration."""

from pathlib import Path

from carrental.config import Settings
from carrental.infrastructure.database.session import _connect_args, _get_async_url


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://rent:secret@db:5432/rentals")
    monkeypatch.setenv("DB_STATEMENT_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.database_url == "postgresql://rent:secret@db:5432/rentals"
    assert settings.db_statement_timeout == 2.5


def test_sync_urls_are_mapped_to_async_drivers():
    assert _get_async_url("sqlite:///ledger.db") == "sqlite+aiosqlite:///ledger.db"
    assert (
        _get_async_url("postgresql://u:p@localhost/rentals")
        == "postgresql+asyncpg://u:p@localhost/rentals"
    )
    assert _get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


def test_statement_timeout_is_passed_to_the_driver():
    assert _connect_args("sqlite+aiosqlite:///x.db", 3.0) == {"timeout": 3.0}
    assert _connect_args("postgresql+asyncpg://h/db", 3.0) == {"command_timeout": 3.0}
    assert _connect_args("mysql+aiomysql://h/db", 3.0) == {}


def test_settings_cover_store_and_logging_only():
    assert set(Settings.model_fields) == {
        "database_url",
        "sql_echo",
        "db_statement_timeout",
        "log_level",
        "log_level_sql",
        "log_level_rentals",
    }
