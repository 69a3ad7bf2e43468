"""Command line entry point: print current weather for an Asian country."""
import argparse
import json
import logging
import math
import os
import sys
from typing import Optional, Sequence, Tuple

from dotenv import load_dotenv

from country_coordinates import DEFAULT_COUNTRY
from openmeteo_provider import OpenMeteoProvider, DEFAULT_TIMEOUT
from weather_data import WeatherData
from weather_provider import WeatherProviderError


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Current weather for an Asian country")
    parser.add_argument("--country", default=None, help="ISO country code, e.g. JP")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    # stdout carries the result only
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config(args: argparse.Namespace) -> Tuple[str, float]:
    """Resolve country and timeout from flags, then environment, then defaults."""
    load_dotenv()
    country = args.country or os.getenv("WEATHER_COUNTRY", DEFAULT_COUNTRY)

    if args.timeout is not None:
        timeout = args.timeout
    else:
        raw_timeout = os.getenv("WEATHER_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else float(DEFAULT_TIMEOUT)
        except ValueError as exc:
            raise SystemExit(f"Invalid WEATHER_TIMEOUT: {exc}") from exc

    if not math.isfinite(timeout) or timeout <= 0:
        raise SystemExit(f"Timeout must be positive, got {timeout}")

    logging.info("Configuration loaded: country=%s timeout=%s", country, timeout)
    return country, timeout


def format_weather(country: str, weather: WeatherData) -> str:
    return (
        f"{country}: {weather.summary}, {weather.temperature_c:.1f}°C "
        f"(feels like {weather.feels_like_c:.1f}°C)"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    country, timeout = load_config(args)

    provider = OpenMeteoProvider(timeout=timeout)
    try:
        weather = provider.get_current(country)
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        return 1

    if args.json:
        print(json.dumps(weather.to_dict()))
    else:
        print(format_weather(country, weather))
    return 0


if __name__ == "__main__":
    sys.exit(main())
