"""Tests for environment settings."""

import pytest

from analemma.config import ConfigError, load_settings

_VARS = (
    "ANALEMMA_LATITUDE",
    "ANALEMMA_LONGITUDE",
    "ANALEMMA_HOUR",
    "ANALEMMA_SHOW_BELOW_HORIZON",
    "ANALEMMA_SHOW_TODAY_PATH",
    "ANALEMMA_MARGIN_FRACTION",
    "ANALEMMA_HIT_FRACTION",
    "ANALEMMA_WORKERS",
    "ANALEMMA_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        s = load_settings()
        assert s.location.latitude == pytest.approx(59.3293)
        assert s.location.longitude == pytest.approx(18.0686)
        assert s.hour == "12:00"
        assert s.show_below_horizon is False
        assert s.show_today_path is False
        assert s.margin_fraction == pytest.approx(0.08)
        assert s.hit_fraction == pytest.approx(0.05)
        assert s.workers == 0
        assert s.log_level == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ANALEMMA_LATITUDE", "0")
        monkeypatch.setenv("ANALEMMA_LONGITUDE", "-74.006")
        monkeypatch.setenv("ANALEMMA_HOUR", "6:00")
        monkeypatch.setenv("ANALEMMA_SHOW_TODAY_PATH", "yes")
        monkeypatch.setenv("ANALEMMA_WORKERS", "4")
        monkeypatch.setenv("ANALEMMA_LOG_LEVEL", "debug")
        s = load_settings()
        assert s.location.longitude == pytest.approx(-74.006)
        assert s.hour == "06:00"
        assert s.show_today_path is True
        assert s.workers == 4
        assert s.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("ANALEMMA_LATITUDE", "north"),
            ("ANALEMMA_LATITUDE", "95"),
            ("ANALEMMA_HOUR", "noon"),
            ("ANALEMMA_SHOW_BELOW_HORIZON", "maybe"),
            ("ANALEMMA_HIT_FRACTION", "0.9"),
            ("ANALEMMA_WORKERS", "-1"),
            ("ANALEMMA_WORKERS", "two"),
        ],
    )
    def test_malformed(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigError):
            load_settings()
