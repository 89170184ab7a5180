"""
Unit Tests — Settings and runtime guardrails.
"""

import pytest

from core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestGuardrails:
    def test_debug_refused_in_production(self, monkeypatch):
        """A production process never runs with debug on."""
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("DEBUG", "true")

        with pytest.raises(ValueError, match="debug=true"):
            get_settings()

    def test_sql_echo_refused_in_staging(self, monkeypatch):
        """SQL echo would log row data outside local environments."""
        monkeypatch.setenv("APP_ENV", "staging")
        monkeypatch.setenv("DEBUG", "false")
        monkeypatch.setenv("DATABASE_ECHO", "true")

        with pytest.raises(ValueError, match="database_echo=true"):
            get_settings()

    def test_both_flags_reported_together(self, monkeypatch):
        """Every unsafe flag is named in one error."""
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("DATABASE_ECHO", "true")

        with pytest.raises(ValueError, match="debug=true, database_echo=true"):
            get_settings()

    def test_zero_id_attempts_refused_everywhere(self, monkeypatch):
        """The collision retry budget needs at least one attempt."""
        monkeypatch.setenv("APP_ENV", "local")
        monkeypatch.setenv("ID_MAX_ATTEMPTS", "0")

        with pytest.raises(ValueError, match="id_max_attempts"):
            get_settings()


class TestLocalSettings:
    def test_dev_flags_allowed_locally(self, monkeypatch):
        """Local development may turn on debug and override the retry budget."""
        monkeypatch.setenv("APP_ENV", "local")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("ID_MAX_ATTEMPTS", "3")

        settings = get_settings()
        assert settings.debug is True
        assert settings.id_max_attempts == 3
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_is_local_ignores_case_and_padding(self):
        """Environment names are compared case-insensitively."""
        assert Settings(app_env=" Dev ").is_local
        assert not Settings(app_env="production").is_local

    def test_settings_are_cached(self, monkeypatch):
        """Repeated reads return the same instance until the cache is cleared."""
        monkeypatch.setenv("APP_ENV", "test")
        assert get_settings() is get_settings()
