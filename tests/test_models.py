"""Tests for parsing API payloads and form payloads."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from aq_dashboard.models import AlertSubscription, Feedback, HistoricalDataPoint, POLLUTANTS, Station


def test_station_from_api_payload():
    station = Station.model_validate({
        "id" : 12,
        "sensorId" : "abc-1",
        "name" : "Westlands",
        "aqi" : 42,
        "pm25" : 10.23456,
        "pm10" : 20.0,
        "lat" : -1.2676,
        "lng" : 36.8108,
        "sensorType" : "PMS5003",
        "timeStamp" : "2025-03-01T08:30:00Z",
    })

    assert station.id == "12"
    assert station.sensor_id == "abc-1"
    assert station.lon == 36.8108
    assert station.pm25 == 10.23
    assert station.sensor_type == "PMS5003"
    assert station.timestamp == datetime(2025, 3, 1, 8, 30, tzinfo = timezone.utc)


def test_station_accepts_legacy_time_key():
    station = Station.model_validate({"id" : "1", "sensorId" : "s", "name" : "n", "lat" : 0, "lng" : 0,
                                      "time" : "2025-03-01T08:30:00Z"})
    assert station.timestamp.hour == 8


def test_missing_readings_stay_none():
    station = Station.model_validate({"id" : "1", "sensorId" : "s", "name" : "n", "lat" : 0, "lng" : 0,
                                      "pm25" : None})
    assert station.aqi is None
    assert station.pm25 is None
    assert station.pm10 is None


def test_zero_reading_stays_zero():
    station = Station.model_validate({"id" : "1", "sensorId" : "s", "name" : "n", "lat" : 0, "lng" : 0,
                                      "pm10" : 0})
    assert station.pm10 == 0
    assert station.reading("pm10") == 0


def test_negative_reading_rejected():
    with pytest.raises(ValidationError):
        Station.model_validate({"id" : "1", "sensorId" : "s", "name" : "n", "lat" : 0, "lng" : 0, "aqi" : -3})


def test_reading_by_kind():
    station = Station(id = "1", sensor_id = "s", name = "n", lat = 0, lon = 0, aqi = 70, pm25 = 20, pm10 = 44)
    assert station.reading("aqi") == 70
    assert station.reading("pm25") == 20
    assert station.reading("pm10") == 44
    assert station.reading("no2") == 70


def test_pollutant_options():
    assert list(POLLUTANTS) == ["aqi", "pm25", "pm10"]
    assert POLLUTANTS["aqi"].unit == ""
    assert POLLUTANTS["pm25"].unit == "μg/m³"
    assert POLLUTANTS["pm10"].label == "PM 10"


def test_history_prefers_averages():
    point = HistoricalDataPoint.model_validate({"date" : "2025-03-01", "aqi" : 40, "avg_aqi" : 55.5, "pm25" : 9})
    assert point.value("aqi") == 55.5
    assert point.value("pm25") == 9
    assert point.value("pm10") is None


def test_history_accepts_timestamp_key():
    point = HistoricalDataPoint.model_validate({"timeStamp" : "2025-03-01T10:00:00Z", "avg_pm10" : 31})
    assert point.timestamp.day == 1
    assert point.value("pm10") == 31


class TestContactForms:

    def test_valid_feedback(self):
        feedback = Feedback(name = " Jane ", email = "jane@example.com", message = "Great map", rating = 4)
        assert feedback.name == "Jane"
        assert feedback.model_dump() == {"name" : "Jane", "email" : "jane@example.com", "message" : "Great map",
                                         "rating" : 4}

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            Feedback(name = "Jane", email = "jane@example.com", message = "ok", rating = rating)

    @pytest.mark.parametrize("email", ["", "jane", "jane@example", "ja ne@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError):
            AlertSubscription(name = "Jane", email = email, sensors = ["s1"])

    def test_subscription_requires_sensors(self):
        with pytest.raises(ValidationError):
            AlertSubscription(name = "Jane", email = "jane@example.com", sensors = [])

    def test_subscription_deduplicates_sensors(self):
        subscription = AlertSubscription(name = "Jane", email = "jane@example.com", sensors = ["b", "a", "b"])
        assert subscription.sensors == ["b", "a"]
