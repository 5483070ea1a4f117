from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

import structlog
from ...schemas.temperature import TemperatureResponse
from ...services.conversion import from_celsius
from ...services.errors import UpstreamError

router = APIRouter()
logger = structlog.get_logger()

CEP_LENGTH = 8


def invalid_zipcode() -> PlainTextResponse:
    return PlainTextResponse("invalid zipcode", status_code=422)


def zipcode_not_found() -> PlainTextResponse:
    return PlainTextResponse("cannot find zipcode", status_code=404)


def temperature_not_found() -> PlainTextResponse:
    return PlainTextResponse("cannot find temperature", status_code=404)


def upstream_failure(exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=500)


@router.get(
    "/temp",
    response_model=TemperatureResponse,
    summary="Current temperature for a CEP",
    responses={
        200: {
            "description": "Temperature in Celsius, Kelvin and Fahrenheit",
            "content": {
                "application/json": {
                    "example": {"temp_C": 25.0, "temp_K": 298.15, "temp_F": 77.0}
                }
            },
        },
        404: {
            "description": "cannot find zipcode (no locality for the code) or "
            "cannot find temperature (weather service has no data for the locality)",
            "content": {"text/plain": {}},
        },
        422: {"description": "invalid zipcode", "content": {"text/plain": {}}},
        500: {"description": "Upstream failure", "content": {"text/plain": {}}},
    },
)
def get_temperature(
    request: Request,
    cep: Optional[str] = Query(None, description="8-character Brazilian postal code"),
):
    if not cep or len(cep) != CEP_LENGTH:
        return invalid_zipcode()

    settings = request.app.state.settings
    location_client = request.app.state.location_client
    weather_client = request.app.state.weather_client

    try:
        location = location_client.get_location(cep)
    except UpstreamError as e:
        logger.error("upstream_failed", stage="location", cep=cep, error=str(e))
        return upstream_failure(e)

    if not location:
        return zipcode_not_found()

    try:
        temp_c = weather_client.get_temperature(location, settings.weather_api_key.get_secret_value())
    except UpstreamError as e:
        logger.error("upstream_failed", stage="weather", location=location, error=str(e))
        return upstream_failure(e)

    if temp_c is None:
        return temperature_not_found()

    reading = from_celsius(temp_c)
    logger.info("temperature_served", cep=cep, location=location, temp_c=reading.temp_C)
    return reading
