"""Weather provider base class and the errors providers raise."""
from abc import ABC, abstractmethod
from weather_data import WeatherData


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, country_code: str) -> WeatherData:
        """
        Fetch current weather for a country.

        Args:
            country_code: ISO 3166-1 alpha-2 code, e.g. "JP"

        Returns:
            WeatherData: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class NetworkError(WeatherProviderError):
    """The request never produced a response (connection error, timeout)."""
    pass


class UpstreamStatusError(WeatherProviderError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(f"Weather API returned status {status_code}")
        self.status_code = status_code


class DecodeError(WeatherProviderError):
    """The response body was not the JSON document we expected."""
    pass
