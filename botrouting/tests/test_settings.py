"""Tests for environment-sourced settings."""

from __future__ import annotations

import pytest

from botrouting.config.settings import Settings, cfg, reset_cfg


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.app_id == ""
        assert s.app_password == ""
        assert s.app_tenant_id == ""
        assert s.send_timeout == 0.0
        assert not s.has_credentials

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOT_APP_ID", " app ")
        monkeypatch.setenv("BOT_APP_PASSWORD", "secret")
        monkeypatch.setenv("BOTROUTING_SEND_TIMEOUT", "2.5")
        s = Settings()
        assert s.app_id == "app"
        assert s.has_credentials
        assert s.send_timeout == 2.5

    def test_invalid_timeout_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("BOTROUTING_SEND_TIMEOUT", "soon")
        s = Settings()
        assert s.send_timeout == Settings.DEFAULT_SEND_TIMEOUT
        assert "Invalid BOTROUTING_SEND_TIMEOUT" in caplog.text

    def test_reset_reloads_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOT_APP_ID", "reloaded")
        reset_cfg()
        assert cfg.app_id == "reloaded"
