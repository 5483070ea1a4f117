from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional, Protocol

import requests
import structlog
from pydantic import ValidationError

from ..schemas.upstream import WeatherApiCurrentResponse
from .errors import UpstreamError, UpstreamSchemaError

logger = structlog.get_logger()


class TemperatureResolver(Protocol):
    def get_temperature(self, location: str, api_key: str) -> Optional[float]:
        """Current temperature in Celsius for ``location``.

        Returns None when the upstream has no data for the location (any
        non-2xx reply). Raises ``UpstreamError`` on transport or decoding
        failure, and ``UpstreamSchemaError`` when a 2xx body lacks a numeric
        ``current.temp_c``.
        """
        ...


@dataclass
class WeatherApiClient:
    """WeatherAPI (weatherapi.com) implementation of `TemperatureResolver`.

    The credential travels in the ``key`` header, the location in ``q``.
    """

    base_url: str = "https://api.weatherapi.com/v1/current.json"
    timeout_connect: float = 5.0
    timeout_read: float = 10.0
    session: Optional[requests.Session] = None

    def _session(self):
        if self.session is not None:
            return nullcontext(self.session)
        return requests.Session()

    def get_temperature(self, location: str, api_key: str) -> Optional[float]:
        headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
            "key": api_key,
        }
        timeout = (self.timeout_connect, self.timeout_read)

        logger.debug("weather_lookup", location=location)
        try:
            with self._session() as s:
                resp = s.get(self.base_url, params={"q": location}, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"weather lookup failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "weather_upstream_status",
                location=location,
                status=resp.status_code,
                body=resp.text[:500],
            )
            return None

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamError(f"weather lookup returned invalid JSON: {e}") from e

        try:
            data = WeatherApiCurrentResponse.model_validate(payload)
        except ValidationError as e:
            raise UpstreamSchemaError(f"weather lookup returned unexpected body: {e}") from e

        return float(data.current.temp_c)
