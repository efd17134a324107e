"""Tests for environment-driven settings."""

import pydantic
import pytest

from ordertrack.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("SUPABASE_URL", "SUPABASE_KEY", "TIMEZONE", "COUNTRY_CODE"):
            monkeypatch.delenv(f"ORDERTRACK_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.timezone == "Asia/Kolkata"
        assert settings.country_code == "91"
        assert settings.tz.zone == "Asia/Kolkata"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ORDERTRACK_SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("ORDERTRACK_TIMEZONE", "Asia/Dubai")
        monkeypatch.setenv("ORDERTRACK_COUNTRY_CODE", "+971")
        settings = Settings(_env_file=None)
        assert settings.supabase_url == "https://example.supabase.co"
        assert settings.tz.zone == "Asia/Dubai"
        assert settings.country_code == "971"

    def test_unknown_timezone(self):
        with pytest.raises(pydantic.ValidationError, match="Unknown timezone"):
            Settings(_env_file=None, timezone="Mars/Olympus")

    def test_country_code_digits(self):
        with pytest.raises(pydantic.ValidationError, match="digits"):
            Settings(_env_file=None, country_code="in")
