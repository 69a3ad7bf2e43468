"""Tests for WMO weather code descriptions."""
import pytest
from weather_codes import UNKNOWN_WEATHER, WEATHER_CODE_DESCRIPTIONS, describe_weather_code


@pytest.mark.parametrize("code,description", [
    (0, "Clear sky"),
    (3, "Overcast"),
    (48, "Depositing rime fog"),
    (65, "Heavy rain"),
    (82, "Violent rain showers"),
    (95, "Thunderstorm"),
    (96, "Thunderstorm with slight hail"),
])
def test_known_codes(code, description):
    assert describe_weather_code(code) == description


@pytest.mark.parametrize("code", [9999, -1, 4, 100])
def test_unknown_codes(code):
    assert describe_weather_code(code) == UNKNOWN_WEATHER == "Unknown"


def test_table_size():
    assert len(WEATHER_CODE_DESCRIPTIONS) == 24


def test_table_is_read_only():
    with pytest.raises(TypeError):
        WEATHER_CODE_DESCRIPTIONS[4] = "Haze"
