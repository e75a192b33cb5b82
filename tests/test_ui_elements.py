"""Tests for leaderboard rows shown by the dashboard."""

from aq_dashboard.ranking import most_polluted
from aq_dashboard.ui_elements import ranking_frame


def test_ranking_frame_columns_and_positions(scenario_stations):
    frame = ranking_frame(most_polluted(scenario_stations, "pm25", 3), "pm25")

    assert list(frame.columns) == ["#", "Station", "PM 2.5"]
    assert list(frame["#"]) == [1, 2, 3]
    assert list(frame["Station"]) == ["Station C", "Station B", "Station D"]
    assert frame.loc[0, "PM 2.5"] == "70 μg/m³"


def test_ranking_frame_empty():
    frame = ranking_frame([], "aqi")
    assert frame.empty
    assert list(frame.columns) == ["#", "Station", "AQI"]
