"""Tests for settings resolution."""
import logging

import pytest

from konnect_mcp.core.config import KonnectSettings, get_config


def test_config_yaml_is_loaded():
    cfg = get_config()
    assert cfg["default_region"] == "us"
    assert cfg["api_version"] == "/v2"


class TestResolve:
    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("KONNECT_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("KONNECT_REGION", "eu")
        settings = KonnectSettings.resolve(api_key="explicit", region="au")
        assert settings.api_key == "explicit"
        assert settings.region == "au"
        assert settings.base_url == "https://au.api.konghq.com/v2"

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("KONNECT_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("KONNECT_REGION", "eu")
        settings = KonnectSettings.resolve()
        assert settings.api_key == "env-token"
        assert settings.base_url == "https://eu.api.konghq.com/v2"

    def test_defaults(self):
        settings = KonnectSettings.resolve()
        assert settings.region == "us"
        assert settings.base_url == "https://us.api.konghq.com/v2"
        assert settings.timeout == 30.0

    def test_missing_credential_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="konnect_mcp.core.config"):
            settings = KonnectSettings.resolve()
        assert settings.api_key == ""
        assert not settings.has_credentials
        assert "KONNECT_ACCESS_TOKEN not set" in caplog.text

    def test_unknown_region_is_passed_through(self, caplog):
        with caplog.at_level(logging.WARNING, logger="konnect_mcp.core.config"):
            settings = KonnectSettings.resolve(api_key="t", region="ap")
        assert settings.base_url == "https://ap.api.konghq.com/v2"
        assert "Unknown Konnect region" in caplog.text


def test_settings_are_immutable():
    settings = KonnectSettings.resolve(api_key="t")
    with pytest.raises(AttributeError):
        settings.api_key = "other"
