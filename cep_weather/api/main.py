from typing import Optional

import sys
import time
from fastapi import FastAPI

import structlog
from ..config import AppSettings, ConfigError, load_settings
from ..logging import init_logging
from .middleware import RequestIDMiddleware
from .routes import health, temperature
from ..services.location_service import LocationResolver, ViaCepClient
from ..services.weather_service import TemperatureResolver, WeatherApiClient


def create_app(
    settings: Optional[AppSettings] = None,
    location_client: Optional[LocationResolver] = None,
    weather_client: Optional[TemperatureResolver] = None,
) -> FastAPI:
    """Build the application.

    Settings are loaded once here (raising ``ConfigError`` when invalid) and
    shared read-only by every request. Clients default to the real upstreams
    and can be swapped for fakes in tests.
    """
    settings = settings or load_settings()
    init_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service health and uptime"},
            {"name": "temperature", "description": "Current temperature by CEP"},
        ],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(temperature.router, tags=["temperature"])

    app.add_middleware(RequestIDMiddleware)

    app.state.settings = settings
    app.state.start_time = time.time()
    app.state.location_client = location_client or ViaCepClient(
        base_url=settings.viacep_url,
        timeout_connect=settings.connect_timeout_s,
        timeout_read=settings.read_timeout_s,
    )
    app.state.weather_client = weather_client or WeatherApiClient(
        base_url=settings.weatherapi_url,
        timeout_connect=settings.connect_timeout_s,
        timeout_read=settings.read_timeout_s,
    )

    return app


def main() -> None:
    try:
        s = load_settings()
    except ConfigError as e:
        init_logging("INFO").error("config_load_failed", error=str(e))
        sys.exit(1)

    import uvicorn

    app = create_app(s)
    structlog.get_logger().info("server_starting", host=s.host, port=s.port, env=s.app_env)
    uvicorn.run(app, host=s.host, port=s.port)


if __name__ == "__main__":
    main()
