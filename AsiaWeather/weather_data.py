"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class WeatherData:
    """Current conditions for a country, independent of any specific API."""
    summary: str  # e.g., "Clear sky", "Slight rain"
    temperature_c: float
    feels_like_c: float

    def to_dict(self) -> Dict[str, Union[str, float]]:
        """Serialize using the JSON field names exposed to clients."""
        return {
            "summary": self.summary,
            "temperatureC": self.temperature_c,
            "feelsLikeC": self.feels_like_c,
        }
