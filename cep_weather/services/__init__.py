from .errors import UpstreamError, UpstreamSchemaError
from .location_service import LocationResolver, ViaCepClient
from .weather_service import TemperatureResolver, WeatherApiClient

__all__ = [
    "LocationResolver",
    "TemperatureResolver",
    "UpstreamError",
    "UpstreamSchemaError",
    "ViaCepClient",
    "WeatherApiClient",
]
