"""
Tests for config.py.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameSettings, load_settings

ENV_VARS = [
    "SNAKE_GRID_SIZE",
    "SNAKE_BASE_SPEED",
    "SNAKE_SPEED_STEP",
    "SNAKE_MAX_SPEED",
    "SNAKE_ITEM_TARGET",
    "SNAKE_WRAP",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings == GameSettings()
    assert settings.grid_size == 20
    assert settings.base_speed == 6
    assert settings.speed_step == 0.25
    assert settings.max_speed == 18
    assert settings.item_target == 3
    assert settings.wrap is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SNAKE_GRID_SIZE", "14")
    monkeypatch.setenv("SNAKE_BASE_SPEED", "8")
    monkeypatch.setenv("SNAKE_ITEM_TARGET", "5")
    monkeypatch.setenv("SNAKE_WRAP", "yes")

    settings = load_settings()

    assert settings.grid_size == 14
    assert settings.base_speed == 8.0
    assert settings.item_target == 5
    assert settings.wrap is True


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SNAKE_GRID_SIZE", " ")
    assert load_settings().grid_size == 20


def test_malformed_value_raises(monkeypatch):
    monkeypatch.setenv("SNAKE_GRID_SIZE", "big")
    with pytest.raises(ValueError, match="SNAKE_GRID_SIZE"):
        load_settings()


@pytest.mark.parametrize("overrides", [
    dict(grid_size=3),
    dict(base_speed=0),
    dict(base_speed=10, max_speed=5),
    dict(speed_step=-1),
    dict(item_target=-1),
    dict(grid_size=4, initial_length=4),
])
def test_invalid_settings_rejected(overrides):
    with pytest.raises(ValueError):
        GameSettings(**overrides).validate()


def test_with_grid_size():
    settings = GameSettings()
    assert settings.with_grid_size(None) is settings
    assert settings.with_grid_size(12).grid_size == 12
    with pytest.raises(ValueError):
        settings.with_grid_size(2)
