"""Tests for environment-driven configuration."""

import logging

import pytest
from pydantic import ValidationError

from city_metro.config import (
    AppConfig,
    ObservabilityConfig,
    configure_logging,
    get_config,
    reset_config,
)


def test_defaults():
    config = AppConfig()

    assert config.graph.load_seed is True
    assert config.display.distance_unit == "km"
    assert config.display.fare_unit == "Rs"
    assert config.observability.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CM_GRAPH_LOAD_SEED", "false")
    monkeypatch.setenv("CM_DISPLAY_FARE_UNIT", "EUR")
    reset_config()

    config = get_config()

    assert config.graph.load_seed is False
    assert config.display.fare_unit == "EUR"


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_log_level_is_normalised():
    assert ObservabilityConfig(level=" debug ").level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="LOUD")


def test_configure_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(ObservabilityConfig(level="INFO"))

    assert calls["level"] == "INFO"
    assert "%(message)s" in calls["format"]
