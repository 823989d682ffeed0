"""Tests for environment-driven StoreSettings."""
import pytest
from pydantic import ValidationError

from fridgestore.config import StoreSettings, get_settings
from fridgestore.domain.beverages import Water
from fridgestore.domain.dispensers import Refrigerator


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for var in ("FRIDGE_CAPACITY", "DEFAULT_BEVERAGE", "LOG_LEVEL", "LOG_RING_SIZE"):
        monkeypatch.delenv(var, raising=False)
    settings = StoreSettings(_env_file=None)
    assert settings.default_capacity == 10
    assert settings.default_beverage_name == "Water"
    assert settings.log_level == "INFO"
    assert settings.log_ring_size == 200


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FRIDGE_CAPACITY", "4")
    monkeypatch.setenv("DEFAULT_BEVERAGE", "Lemonade")
    settings = StoreSettings(_env_file=None)
    assert settings.default_capacity == 4
    assert settings.default_beverage_name == "Lemonade"


def test_populate_by_name():
    settings = StoreSettings(_env_file=None, default_capacity=2)
    assert settings.default_capacity == 2


def test_negative_capacity_is_invalid(monkeypatch):
    monkeypatch.setenv("FRIDGE_CAPACITY", "-1")
    with pytest.raises(ValidationError):
        StoreSettings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_refrigerator_and_water_follow_settings(monkeypatch):
    monkeypatch.setenv("FRIDGE_CAPACITY", "3")
    monkeypatch.setenv("DEFAULT_BEVERAGE", "Lemonade")
    get_settings.cache_clear()

    assert Refrigerator().capacity == 3
    assert Water().name == "Lemonade"


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert StoreSettings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_a_settings_error(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        StoreSettings(_env_file=None)
