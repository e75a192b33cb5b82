#file: aq_dashboard/breakpoints.py

import json
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

GOOD = "Good"
MODERATE = "Moderate"
SENSITIVE = "Unhealthy for Sensitive Groups"
UNHEALTHY = "Unhealthy"
VERY_UNHEALTHY = "Very Unhealthy"
HAZARDOUS = "Hazardous"

CATEGORIES = [GOOD, MODERATE, SENSITIVE, UNHEALTHY, VERY_UNHEALTHY, HAZARDOUS]

# green -> yellow -> orange -> red -> purple -> maroon
PALETTE = {
    GOOD : "#00e400",
    MODERATE : "#ffff00",
    SENSITIVE : "#ff7e00",
    UNHEALTHY : "#ff0000",
    VERY_UNHEALTHY : "#8f3f97",
    HAZARDOUS : "#7e0023",
}


@dataclass(frozen = True)
class BreakpointTable:
    """Ascending upper bounds per category, followed by a terminal catch-all."""
    bands: Tuple[Tuple[float, str], ...]
    terminal: str = HAZARDOUS

    def lookup(self, value: float) -> str:
        for upper, category in self.bands:
            if value <= upper:
                return category
        return self.terminal


DEFAULT_TABLES: Dict[str, BreakpointTable] = {
    "aqi" : BreakpointTable(((50, GOOD), (100, MODERATE), (150, SENSITIVE), (200, UNHEALTHY),
                             (300, VERY_UNHEALTHY))),
    "pm25" : BreakpointTable(((12, GOOD), (35.4, MODERATE), (55.4, SENSITIVE), (150.4, UNHEALTHY),
                              (250.4, VERY_UNHEALTHY))),
    "pm10" : BreakpointTable(((54, GOOD), (154, MODERATE), (254, SENSITIVE), (354, UNHEALTHY),
                              (424, VERY_UNHEALTHY))),
}


def parse_table(entries: List[List]) -> BreakpointTable:
    """Build a table from ``[[upper, category], ..., [null, category]]``."""
    if len(entries) < 2 :
        raise ValueError("A breakpoint table needs at least one band and a terminal category")

    *bands, terminal = entries
    if terminal[0] is not None :
        raise ValueError("The last breakpoint entry must be the catch-all (null bound)")

    parsed = []
    previous: Optional[float] = None
    for upper, category in bands :
        if upper is None :
            raise ValueError("Only the last breakpoint entry may omit its bound")
        if category not in PALETTE or terminal[1] not in PALETTE :
            raise ValueError(f"Unknown category in breakpoint table: {category}")
        upper = float(upper)
        if previous is not None and upper <= previous :
            raise ValueError(f"Breakpoints must be strictly ascending, got {upper} after {previous}")
        parsed.append((upper, category))
        previous = upper

    return BreakpointTable(tuple(parsed), terminal[1])


def load_breakpoint_tables(path: str) -> Dict[str, BreakpointTable]:
    """Load replacement tables for every pollutant kind from a JSON file."""
    with open(path, "r", encoding = "utf-8") as f :
        raw = json.load(f)

    missing = [kind for kind in DEFAULT_TABLES if kind not in raw]
    if missing :
        raise ValueError(f"Breakpoint file {path} is missing tables for: {', '.join(missing)}")

    return {kind : parse_table(raw[kind]) for kind in DEFAULT_TABLES}
