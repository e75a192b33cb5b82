"""
Pytest configuration and shared fixtures for the dashboard tests.
"""

import pytest

from aq_dashboard.models import Station


def make_station(station_id, aqi = None, pm25 = None, pm10 = None, **extra):
    """Build a Station the way the API sends it (camelCase keys)."""
    payload = {
        "id" : station_id,
        "sensorId" : f"sensor-{station_id}",
        "name" : f"Station {station_id}",
        "lat" : -1.28,
        "lng" : 36.82,
        "aqi" : aqi,
        "pm25" : pm25,
        "pm10" : pm10,
    }
    payload.update(extra)
    return Station.model_validate(payload)


@pytest.fixture
def scenario_stations():
    """A(aqi=30), B(aqi=95), C(aqi=160), D(no aqi reading)."""
    return [
        make_station("A", aqi = 30, pm25 = 8.2),
        make_station("B", aqi = 95, pm25 = 30.1),
        make_station("C", aqi = 160, pm25 = 70.0),
        make_station("D", pm25 = 12.0),
    ]


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
