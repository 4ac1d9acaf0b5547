import pytest
from pydantic import ValidationError

from src.tripoptions.config import Settings


def test_mode_fares_from_pairs():
    settings = Settings(mode_fares="bus=1.5, rail=3")

    assert settings.mode_fares == {"BUS": 1.5, "RAIL": 3.0}


def test_mode_fares_from_json():
    settings = Settings(mode_fares='{"ferry": 4.25}')

    assert settings.mode_fares == {"FERRY": 4.25}


def test_mode_fares_from_environment(monkeypatch):
    monkeypatch.setenv("TRIPOPT_MODE_FARES", "TRAM=1.25")
    monkeypatch.setenv("TRIPOPT_FARE_CURRENCY", "eur")

    settings = Settings()

    assert settings.mode_fares == {"TRAM": 1.25}
    assert settings.fare_currency == "EUR"


def test_invalid_mode_fare_entry_rejected():
    with pytest.raises(ValidationError):
        Settings(mode_fares="BUS")


def test_invalid_sort_order_rejected():
    with pytest.raises(ValidationError):
        Settings(default_sort_order="median")


def test_sort_order_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("TRIPOPT_DEFAULT_SORT_ORDER", "MIN")

    assert Settings().default_sort_order == "min"
    assert Settings(default_sort_order=" Max ").default_sort_order == "max"
