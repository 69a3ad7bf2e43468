"""Open-Meteo current weather provider for supported Asian countries."""
import logging
import requests
from weather_provider import (
    WeatherProviderBase,
    NetworkError,
    UpstreamStatusError,
    DecodeError,
)
from weather_data import WeatherData
from country_coordinates import resolve_coordinates
from weather_codes import describe_weather_code


DEFAULT_TIMEOUT = 10


class OpenMeteoProvider(WeatherProviderBase):
    """
    Weather provider using the Open-Meteo forecast API.

    Only the "current" block is requested: air temperature, apparent
    temperature and the WMO weather code. Open-Meteo needs no API key.
    Every call makes exactly one request; nothing is cached or retried.
    """

    BASE_URL = "https://api.open-meteo.com/v1/forecast"
    CURRENT_FIELDS = "temperature_2m,apparent_temperature,weather_code"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize Open-Meteo provider.

        Args:
            timeout: HTTP request timeout in seconds
        """
        self.timeout = timeout

    def build_url(self, country_code: str) -> str:
        coords = resolve_coordinates(country_code)
        return (
            f"{self.BASE_URL}?latitude={coords.lat:.4f}&longitude={coords.lon:.4f}"
            f"&current={self.CURRENT_FIELDS}"
        )

    def get_current(self, country_code: str) -> WeatherData:
        """
        Fetch current weather for a country from Open-Meteo.

        Unsupported country codes fall back to the default country.

        Returns:
            WeatherData: Current weather information

        Raises:
            NetworkError: If the request could not be completed
            UpstreamStatusError: If the API answered with a status other than 200
            DecodeError: If the body is not the expected JSON document
        """
        url = self.build_url(country_code)

        try:
            logging.info(f"Making Open-Meteo API request: {url}")
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise NetworkError(f"Weather API call failed: {e}") from e

        try:
            logging.info(f"API response status: {response.status_code}")
            if response.status_code != requests.codes.ok:
                logging.error(f"API request failed with status {response.status_code}")
                raise UpstreamStatusError(response.status_code)

            try:
                data = response.json()
            except ValueError as e:
                logging.error(f"Failed to decode API response: {e}")
                raise DecodeError(f"Failed to parse weather response: {e}") from e
            logging.debug(f"API response (truncated): {str(data)[:500]}")

            return self._parse_current(data)
        finally:
            response.close()

    def _parse_current(self, data) -> WeatherData:
        """Map the decoded response body to WeatherData."""
        try:
            current = data["current"]
            temperature = _as_float(current["temperature_2m"])
            feels_like = _as_float(current["apparent_temperature"])
            weather_code = _as_int(current["weather_code"])
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logging.error(f"Unexpected API response shape: {e!r}", exc_info=True)
            raise DecodeError(f"Failed to parse weather response: {e!r}") from e

        weather_data = WeatherData(
            summary=describe_weather_code(weather_code),
            temperature_c=temperature,
            feels_like_c=feels_like,
        )
        logging.info(f"Successfully parsed weather data: {weather_data.temperature_c}°C, {weather_data.summary}")
        return weather_data


def _as_float(value) -> float:
    # bool is an int subclass; JSON true/false is not a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _as_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def fetch_weather(country_code: str, timeout: float = DEFAULT_TIMEOUT) -> WeatherData:
    """Fetch current weather for a country with a one-off provider."""
    return OpenMeteoProvider(timeout=timeout).get_current(country_code)
