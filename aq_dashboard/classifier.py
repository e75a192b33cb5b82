#file: aq_dashboard/classifier.py

from typing import Dict, NamedTuple, Optional

from aq_dashboard import config
from aq_dashboard.breakpoints import (BreakpointTable, CATEGORIES, GOOD, HAZARDOUS, MODERATE, PALETTE, SENSITIVE,
                                      UNHEALTHY, VERY_UNHEALTHY)

NO_DATA_LABEL = "No data"
NO_DATA_COLOR = "#b0b0b0"
DARK_TEXT = "#101828"
LIGHT_TEXT = "#ffffff"

HEALTH_ADVICE = {
    GOOD : "Air quality is satisfactory. No health risks.",
    MODERATE : "Sensitive individuals should limit outdoor exertion.",
    SENSITIVE : "Children, elderly, and those with respiratory issues should avoid prolonged outdoor exposure.",
    UNHEALTHY : "Everyone may experience health effects; limit outdoor activity.",
    VERY_UNHEALTHY : "Health alert: everyone should avoid outdoor activity.",
    HAZARDOUS : "Emergency conditions, stay indoors.",
}


class Classification(NamedTuple):
    color: str
    label: str
    rank: int
    text_color: str


def _classification(label: str) -> Classification:
    rank = CATEGORIES.index(label)
    # red and darker bands carry white text
    text_color = LIGHT_TEXT if rank >= CATEGORIES.index(UNHEALTHY) else DARK_TEXT
    return Classification(PALETTE[label], label, rank, text_color)


NO_DATA = Classification(NO_DATA_COLOR, NO_DATA_LABEL, -1, DARK_TEXT)


def classify(value: float, kind: str, tables: Optional[Dict[str, BreakpointTable]] = None) -> Classification:
    """
    Map a pollutant reading to its health category and display color.

    Breakpoints are inclusive upper bounds, so a value sitting on a boundary
    belongs to the lower band. Anything above the last breakpoint is
    Hazardous. An unknown pollutant kind falls back to Good.

    The caller must filter out absent readings first; use
    ``classify_reading`` when the value may be ``None``.
    """
    table = (tables if tables is not None else config.BREAKPOINT_TABLES).get(kind)
    if table is None :
        return _classification(GOOD)
    return _classification(table.lookup(value))


def classify_reading(value: Optional[float], kind: str,
                     tables: Optional[Dict[str, BreakpointTable]] = None) -> Classification:
    """Like ``classify`` but returns ``NO_DATA`` for a missing reading."""
    if value is None :
        return NO_DATA
    return classify(value, kind, tables)


def health_advice(label: str) -> str:
    return HEALTH_ADVICE.get(label, "No current reading for this station.")
