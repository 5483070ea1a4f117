from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from cep_weather.api.main import create_app
from cep_weather.config import AppSettings


def fake_response(payload=None, status_code: int = 200, text: str = "") -> Mock:
    m = Mock()
    m.status_code = status_code
    m.text = text
    if isinstance(payload, Exception):
        m.json.side_effect = payload
    else:
        m.json.return_value = payload
    return m


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(weather_api_key="test-key", _env_file=None)


@pytest.fixture
def location_client() -> Mock:
    return Mock()


@pytest.fixture
def weather_client() -> Mock:
    return Mock()


@pytest.fixture
def client(settings, location_client, weather_client) -> TestClient:
    app = create_app(settings, location_client=location_client, weather_client=weather_client)
    return TestClient(app)
