"""Tests for country coordinate lookup."""
import logging
import pytest
from country_coordinates import COUNTRY_COORDINATES, DEFAULT_COUNTRY, resolve_coordinates
from weather_data import Coordinates


def test_supported_countries():
    assert set(COUNTRY_COORDINATES) == {
        "JP", "CN", "IN", "SG", "HK", "KR", "TH", "ID", "MY", "PH", "VN", "TW",
    }


def test_resolve_known_country():
    assert resolve_coordinates("ID") == Coordinates(lat=-6.2088, lon=106.8456)


def test_resolve_unknown_country_falls_back(caplog):
    """Test that unknown codes resolve to the default country and log it."""
    with caplog.at_level(logging.WARNING):
        coords = resolve_coordinates("FR")

    assert DEFAULT_COUNTRY == "JP"
    assert coords == COUNTRY_COORDINATES["JP"]
    assert "FR" in caplog.text


def test_resolve_is_case_sensitive():
    assert resolve_coordinates("cn") == COUNTRY_COORDINATES[DEFAULT_COUNTRY]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COUNTRY_COORDINATES["US"] = Coordinates(lat=38.9, lon=-77.0)
