from .efactor import EFactorAggregator, WeatherDataUnavailableError

__all__ = ["EFactorAggregator", "WeatherDataUnavailableError"]
