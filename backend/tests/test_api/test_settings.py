"""Tests for environment-driven settings."""

from __future__ import annotations

from radial_gauge.config import Settings
from radial_gauge.dependencies import get_text_measurer


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("RADIAL_GAUGE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TEXT_CHAR_WIDTH_RATIO", "0.5")
    settings = Settings(_env_file=None)
    assert settings.radial_gauge_log_level == "debug"
    assert settings.text_char_width_ratio == 0.5


def test_every_setting_is_consumed():
    # log level -> main, CORS -> main, text ratios -> measurer dependency
    assert set(Settings.model_fields) == {
        "radial_gauge_log_level",
        "cors_origins",
        "text_char_width_ratio",
        "text_height_ratio",
    }


def test_measurer_uses_configured_ratios():
    measurer = get_text_measurer(Settings(_env_file=None, text_char_width_ratio=1.0, text_height_ratio=1.5))
    extent = measurer.measure("abcd", 10)
    assert extent.width == 40
    assert extent.height == 15
