"""Tests for settings loading."""

import pytest

from talent_booking.config import Settings, parse_base_url


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
    monkeypatch.setenv("ADMIN_ACCEPT_ENABLED", "true")
    monkeypatch.setenv("BOOKING_LEAD_DAYS", "14")
    monkeypatch.delenv("SITE_URL", raising=False)
    monkeypatch.delenv("NOTIFICATIONS_ENABLED", raising=False)

    settings = Settings()

    assert settings.supabase_url == "https://project.supabase.co"
    assert settings.admin_accept_enabled is True
    assert settings.booking_lead_days == 14
    assert settings.notifications_enabled is True
    assert settings.site_url == "http://localhost:3000"


def test_parse_base_url_strips_trailing_slash() -> None:
    assert parse_base_url(" https://talent.example.com/ ") == (
        "https://talent.example.com"
    )
