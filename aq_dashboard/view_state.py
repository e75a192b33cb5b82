#file: aq_dashboard/view_state.py

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from aq_dashboard.models import POLLUTANTS, Station

TREND_DURATIONS = [7, 14, 30]
STATE_KEY = "dashboard_state"


class DashboardState(BaseModel):
    """Everything the dashboard remembers between Streamlit reruns."""

    pollutant: str = "aqi"
    selected_station_id: Optional[str] = None
    trends_station_id: Optional[str] = None
    search_term: str = ""
    trend_duration: int = 30
    last_known_stations: List[Station] = Field(default_factory = list)

    @field_validator("pollutant")
    @classmethod
    def _known_pollutant(cls, value: str) -> str:
        if value not in POLLUTANTS :
            raise ValueError(f"Unknown pollutant: {value}")
        return value

    @field_validator("trend_duration")
    @classmethod
    def _known_duration(cls, value: int) -> int:
        if value not in TREND_DURATIONS :
            raise ValueError(f"Trend duration must be one of {TREND_DURATIONS}")
        return value

    def select_station(self, station_id: str) -> None:
        self.selected_station_id = station_id
        self.search_term = ""

    def clear_selection(self) -> None:
        self.selected_station_id = None

    def remember_stations(self, fresh: List[Station]) -> tuple[List[Station], bool]:
        """
        Keep the latest non-empty station list. Returns the list to display and
        whether it is stale (the refresh came back empty but older data exists).
        """
        if fresh :
            self.last_known_stations = list(fresh)
            if self.trends_station_id is None :
                self.trends_station_id = fresh[0].id
            return fresh, False
        return self.last_known_stations, bool(self.last_known_stations)

    def find(self, station_id: Optional[str]) -> Optional[Station]:
        return next((s for s in self.last_known_stations if s.id == station_id), None)


def get_state(session_state) -> DashboardState:
    """Fetch the dashboard state from a Streamlit session, creating it on first run."""
    if STATE_KEY not in session_state :
        session_state[STATE_KEY] = DashboardState()
    return session_state[STATE_KEY]
