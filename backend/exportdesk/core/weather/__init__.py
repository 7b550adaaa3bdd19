from .client import OpenWeatherClient, WeatherAPIError, parse_observation

__all__ = ["OpenWeatherClient", "WeatherAPIError", "parse_observation"]
