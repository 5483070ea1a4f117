import time
from urllib.parse import urlsplit

from fastapi import APIRouter, Request

import structlog
from ...schemas.health import HealthResponse, UpstreamInfo

router = APIRouter()
logger = structlog.get_logger()


def _upstreams(settings) -> list:
    """Where the service is configured to look things up. Never contacts them."""
    return [
        UpstreamInfo(
            name=name,
            host=urlsplit(url).netloc,
            connect_timeout_s=settings.connect_timeout_s,
            read_timeout_s=settings.read_timeout_s,
        )
        for name, url in (("viacep", settings.viacep_url), ("weatherapi", settings.weatherapi_url))
    ]


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health status and upstream configuration",
    responses={200: {"description": "Service is up; upstreams are not contacted"}},
)
def health(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    started = float(getattr(request.app.state, "start_time", time.time()))
    logger.debug("health_check", env=settings.app_env)
    return HealthResponse(
        status="ok",
        uptime_s=max(0.0, time.time() - started),
        version=settings.app_version,
        env=settings.app_env,
        upstreams=_upstreams(settings),
    )
