"""Configuration selection tests."""

from __future__ import annotations

import pytest

from storefront.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_int,
    get_config,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("production", ProductionConfig), ("Testing", TestingConfig), ("bogus", DevelopmentConfig)],
)
def test_get_config_reads_app_env(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)

    assert get_config() is expected


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_config() is DevelopmentConfig


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("FLAG", raw)

    assert env_bool("FLAG") is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("FLAG", raising=False)

    assert env_bool("FLAG", True) is True


@pytest.mark.parametrize(("raw", "expected"), [("7", 7), ("", 3), ("seven", 3)])
def test_env_int(monkeypatch, raw, expected):
    monkeypatch.setenv("ATTEMPTS", raw)

    assert env_int("ATTEMPTS", 3) == expected
