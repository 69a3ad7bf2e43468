"""Representative coordinates (capital or main city) for supported countries."""
import logging
from types import MappingProxyType
from weather_data import Coordinates


DEFAULT_COUNTRY = "JP"

COUNTRY_COORDINATES = MappingProxyType({
    "JP": Coordinates(lat=35.6762, lon=139.6503),  # Tokyo
    "CN": Coordinates(lat=39.9042, lon=116.4074),  # Beijing
    "IN": Coordinates(lat=28.6139, lon=77.2090),   # New Delhi
    "SG": Coordinates(lat=1.3521, lon=103.8198),   # Singapore
    "HK": Coordinates(lat=22.3193, lon=114.1694),  # Hong Kong
    "KR": Coordinates(lat=37.5665, lon=126.9780),  # Seoul
    "TH": Coordinates(lat=13.7563, lon=100.5018),  # Bangkok
    "ID": Coordinates(lat=-6.2088, lon=106.8456),  # Jakarta
    "MY": Coordinates(lat=3.1390, lon=101.6869),   # Kuala Lumpur
    "PH": Coordinates(lat=14.5995, lon=120.9842),  # Manila
    "VN": Coordinates(lat=21.0285, lon=105.8542),  # Hanoi
    "TW": Coordinates(lat=25.0330, lon=121.5654),  # Taipei
})


def resolve_coordinates(country_code: str) -> Coordinates:
    """
    Look up coordinates for a country code.

    Unknown codes never fail: they resolve to DEFAULT_COUNTRY's coordinates.
    The lookup is exact, so lowercase codes fall back as well.
    """
    coords = COUNTRY_COORDINATES.get(country_code)
    if coords is None:
        logging.warning(f"Unsupported country code {country_code!r}, using {DEFAULT_COUNTRY}")
        coords = COUNTRY_COORDINATES[DEFAULT_COUNTRY]
    return coords
