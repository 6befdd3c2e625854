"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from openweathermap_lib.app import app
from openweathermap_lib.models.location import Location


@pytest.fixture
def location_payload():
    """Postal code lookup body as returned by OpenWeatherMap."""
    return {
        "zip": "N7L",
        "name": "Chatham",
        "lat": 43.6532,
        "lon": -79.3832,
        "country": "CA",
    }


@pytest.fixture
def location(location_payload):
    return Location(**location_payload)


@pytest.fixture
def weather_payload():
    """Current conditions body as returned by OpenWeatherMap (metric)."""
    return {
        "coord": {"lon": -79.3832, "lat": 43.6532},
        "weather": [
            {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
            {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
        ],
        "base": "stations",
        "main": {
            "temp": 20.0,
            "feels_like": 19.6,
            "temp_min": 18.9,
            "temp_max": 21.2,
            "pressure": 1016,
            "humidity": 64,
            "sea_level": 1016,
            "grnd_level": 990,
        },
        "visibility": 10000,
        "wind": {"speed": 4.12, "deg": 250, "gust": 7.2},
        "clouds": {"all": 75},
        "rain": {"1h": 0.2},
        "dt": 1760800000,
        "sys": {
            "type": 2,
            "id": 2099289,
            "country": "CA",
            "sunrise": 1760786000,
            "sunset": 1760825000,
        },
        "timezone": -14400,
        "id": 5920450,
        "name": "Chatham",
        "cod": 200,
    }


@pytest.fixture(scope="function")
def client():
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client
