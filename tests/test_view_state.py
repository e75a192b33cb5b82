"""Tests for the dashboard view state."""

import pytest
from pydantic import ValidationError

from aq_dashboard.view_state import STATE_KEY, DashboardState, get_state


def test_defaults():
    state = DashboardState()
    assert state.pollutant == "aqi"
    assert state.trend_duration == 30
    assert state.selected_station_id is None
    assert state.last_known_stations == []


def test_rejects_unknown_pollutant_and_duration():
    with pytest.raises(ValidationError):
        DashboardState(pollutant = "o3")
    with pytest.raises(ValidationError):
        DashboardState(trend_duration = 10)


def test_get_state_creates_once():
    session = {}
    state = get_state(session)
    state.pollutant = "pm10"

    assert session[STATE_KEY] is state
    assert get_state(session).pollutant == "pm10"


def test_select_and_clear_station():
    state = DashboardState(search_term = "kib")
    state.select_station("A")
    assert state.selected_station_id == "A"
    assert state.search_term == ""

    state.clear_selection()
    assert state.selected_station_id is None


def test_remember_stations_keeps_last_known_good(scenario_stations):
    state = DashboardState()

    shown, stale = state.remember_stations(scenario_stations)
    assert shown == scenario_stations
    assert stale is False
    assert state.trends_station_id == "A"

    shown, stale = state.remember_stations([])
    assert [station.id for station in shown] == ["A", "B", "C", "D"]
    assert stale is True


def test_remember_stations_without_history():
    shown, stale = DashboardState().remember_stations([])
    assert shown == []
    assert stale is False


def test_find_station(scenario_stations):
    state = DashboardState()
    state.remember_stations(scenario_stations)
    assert state.find("C").aqi == 160
    assert state.find("missing") is None
    assert state.find(None) is None


def test_state_is_serializable(scenario_stations):
    state = DashboardState(pollutant = "pm25")
    state.remember_stations(scenario_stations)

    restored = DashboardState.model_validate_json(state.model_dump_json())
    assert restored.pollutant == "pm25"
    assert restored.find("B").name == "Station B"
