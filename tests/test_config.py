"""
Tests for application settings.
"""

from fincalc.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.currency_symbol == "$"
        assert settings.max_years == 100
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_YEARS", "50")
        monkeypatch.setenv("CURRENCY_SYMBOL", "€")
        settings = Settings()
        assert settings.max_years == 50
        assert settings.currency_symbol == "€"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
