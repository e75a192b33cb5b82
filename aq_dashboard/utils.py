#file: aq_dashboard/utils.py

from typing import List, Optional

import pandas as pd
import pytz

from aq_dashboard.classifier import NO_DATA_LABEL, classify_reading
from aq_dashboard.models import POLLUTANTS, HistoricalDataPoint, Station


def stations_to_frame(stations: List[Station], kind: str) -> pd.DataFrame:
    """One row per station with its reading, category and marker color for ``kind``."""
    rows = []
    for station in stations :
        value = station.reading(kind)
        category = classify_reading(value, kind)
        rows.append({"id" : station.id, "name" : station.name, "lat" : station.lat, "lon" : station.lon,
                     "value" : value, "label" : category.label, "color" : category.color,
                     "reading" : format_reading(value, kind)})
    return pd.DataFrame(rows, columns = ["id", "name", "lat", "lon", "value", "label", "color", "reading"])


def history_to_frame(points: List[HistoricalDataPoint], kind: str) -> pd.DataFrame:
    """Convert history into a chart-ready DataFrame, dropping points without a value."""
    data_frame = pd.DataFrame(
        [{"timestamp" : point.timestamp, "value" : point.value(kind)} for point in points],
        columns = ["timestamp", "value"]
    )
    data_frame["timestamp"] = pd.to_datetime(data_frame["timestamp"])
    return data_frame.dropna(subset = ["value"]).reset_index(drop = True)


def trim_history(points: List[HistoricalDataPoint], days: int) -> List[HistoricalDataPoint]:
    """Keep the most recent ``days`` points of a daily series."""
    return points[-days :] if days > 0 else []


def search_stations(stations: List[Station], term: str) -> List[Station]:
    term = term.strip().lower()
    if not term :
        return []
    return [station for station in stations if term in station.name.lower()]


def latest_update(stations: List[Station], timezone: str) -> Optional[str]:
    """Most recent observation time across stations, formatted in local time."""
    timestamps = [station.timestamp for station in stations if station.timestamp is not None]
    if not timestamps :
        return None

    # naive timestamps from the API are UTC
    aware = [ts if ts.tzinfo else pytz.utc.localize(ts) for ts in timestamps]
    latest = max(aware).astimezone(pytz.timezone(timezone))
    return latest.strftime("%d %b %Y, %H:%M")


def load_uncached_if_empty(cached_loader, *args):
    """
    Call a ``st.cache_data`` loader and drop its cache when the result is empty,
    so a failed fetch is retried on the next rerun instead of served until the TTL.
    """
    result = cached_loader(*args)
    if not result :
        cached_loader.clear()
    return result


def format_reading(value: Optional[float], kind: str) -> str:
    if value is None :
        return NO_DATA_LABEL
    unit = POLLUTANTS[kind].unit if kind in POLLUTANTS else ""
    text = f"{value:g}"
    return f"{text} {unit}" if unit else text
