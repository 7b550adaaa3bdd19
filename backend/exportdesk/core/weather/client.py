import asyncio
import logging
import math
from typing import Any

import httpx

from exportdesk.config import settings
from exportdesk.core.rounding import round_half_up
from exportdesk.data.reference_tables import MONITORED_PORTS
from exportdesk.schemas.shipment import PortWeatherSample

logger = logging.getLogger(__name__)

MS_TO_KNOTS = 1.944
DEFAULT_VISIBILITY_METERS = 10000
DEFAULT_TEMPERATURE_C = 20.0


class WeatherAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"OpenWeather API error {status_code}: {message}")


def is_storm_condition(weather_id: int) -> bool:
    """Thunderstorm (2xx), heavy rain (502-599) or extreme conditions (762-799)."""
    return (
        200 <= weather_id < 300
        or 502 <= weather_id < 600
        or 762 <= weather_id < 800
    )


def _number(value: Any, field: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"non-numeric {field} in weather payload: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"non-finite {field} in weather payload: {value!r}")
    return number


def _section(payload: dict[str, Any], key: str) -> dict[str, Any]:
    section = payload.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"malformed '{key}' section in weather payload")
    return section


def parse_observation(port_id: str, payload: dict[str, Any], port_name: str | None = None) -> PortWeatherSample:
    """Turn an OpenWeather current-conditions payload into a sample.

    Raises ValueError when the payload is not an object or a reading is
    not numeric, so the port is skipped like any failed request.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"weather payload for {port_id} is not an object")

    wind_ms = _number(_section(payload, "wind").get("speed") or 0, "wind speed")
    wind_knots = round_half_up(wind_ms * MS_TO_KNOTS, 1)

    visibility = payload.get("visibility")
    if visibility is None:
        visibility = DEFAULT_VISIBILITY_METERS
    visibility = _number(visibility, "visibility")

    conditions = payload.get("weather") or [{}]
    if not isinstance(conditions, list) or not isinstance(conditions[0], dict):
        raise ValueError(f"malformed 'weather' section in payload for {port_id}")
    conditions = conditions[0]
    weather_id = int(_number(conditions.get("id", 800), "weather id"))

    temperature = _section(payload, "main").get("temp")
    temperature = DEFAULT_TEMPERATURE_C if temperature is None else _number(temperature, "temperature")

    return PortWeatherSample(
        port_id=port_id,
        port_name=port_name,
        wind_speed_knots=wind_knots,
        visibility_meters=visibility,
        has_storm_alert=is_storm_condition(weather_id),
        temperature_celsius=temperature,
        weather_description=str(conditions.get("description", "clear")),
    )


class OpenWeatherClient:
    """Concurrency-limited client for OpenWeather current conditions.

    Fetches every monitored port in parallel. A port whose request fails
    is logged and left out; whether an incomplete set is acceptable is
    the caller's decision (an empty set is a hard failure downstream).
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.OPENWEATHER_API_KEY if api_key is None else api_key
        self.base_url = base_url or settings.OPENWEATHER_BASE_URL
        self.timeout = settings.WEATHER_REQUEST_TIMEOUT
        self.semaphore = asyncio.Semaphore(settings.WEATHER_MAX_CONCURRENT_REQUESTS)
        self.transport = transport

    async def fetch_port(self, port_id: str, port: dict) -> PortWeatherSample:
        """Fetch current conditions for a single port."""
        if not self.api_key:
            raise WeatherAPIError(0, "OPENWEATHER_API_KEY is not configured")

        async with self.semaphore:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    f"{self.base_url}/weather",
                    params={
                        "lat": port["lat"],
                        "lon": port["lon"],
                        "appid": self.api_key,
                        "units": "metric",
                    },
                )

        if response.status_code != 200:
            raise WeatherAPIError(response.status_code, response.text)

        return parse_observation(port_id, response.json(), port.get("name"))

    async def fetch_all(self, ports: dict[str, dict] | None = None) -> list[PortWeatherSample]:
        """Fetch samples for all ports, skipping ports that fail."""
        if not self.api_key:
            raise WeatherAPIError(0, "OPENWEATHER_API_KEY is not configured")

        ports = MONITORED_PORTS if ports is None else ports
        port_ids = list(ports)

        results = await asyncio.gather(
            *(self.fetch_port(pid, ports[pid]) for pid in port_ids),
            return_exceptions=True,
        )

        samples = []
        for port_id, result in zip(port_ids, results):
            if isinstance(result, (WeatherAPIError, httpx.HTTPError, ValueError)):
                logger.warning(f"Weather fetch for {port_id} failed: {result}")
                continue
            if isinstance(result, BaseException):
                raise result
            samples.append(result)

        logger.info(f"Weather fetch complete: {len(samples)}/{len(port_ids)} ports")
        return samples
