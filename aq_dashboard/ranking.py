#file: aq_dashboard/ranking.py

from typing import Iterable, List, Optional

from aq_dashboard.models import Station

DIRECTIONS = ("asc", "desc")


def rank_stations(stations: Iterable[Station], kind: str, direction: str = "asc",
                  limit: Optional[int] = 5) -> List[Station]:
    """
    Order stations by their reading for ``kind``.

    ``asc`` puts the cleanest first, ``desc`` the most polluted. Stations
    without a reading for ``kind`` are left out. The sort is stable in both
    directions and runs on a new list, the input is never reordered.
    """
    if direction not in DIRECTIONS :
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    if limit is not None and limit < 0 :
        raise ValueError(f"limit must be non-negative or None, got {limit}")

    measured = [station for station in stations if station.reading(kind) is not None]
    ranked = sorted(measured, key = lambda station : station.reading(kind), reverse = direction == "desc")
    return ranked if limit is None else ranked[:limit]


def cleanest(stations: Iterable[Station], kind: str, limit: Optional[int] = 5) -> List[Station]:
    return rank_stations(stations, kind, "asc", limit)


def most_polluted(stations: Iterable[Station], kind: str, limit: Optional[int] = 5) -> List[Station]:
    return rank_stations(stations, kind, "desc", limit)
