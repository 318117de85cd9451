"""Static lookup tables used to enrich the rendered report.

Both tables are closed and read-only. Lookups never fail: keys outside
the table resolve to a fallback value.
"""

from types import MappingProxyType
from typing import Any, Mapping

UNKNOWN_WIND_ARROW = "❓"
UNKNOWN_AQI_LABEL = "Unknown"

# 16-point compass abbreviation -> arrow glyph
WIND_ARROWS: Mapping[str, str] = MappingProxyType(
    {
        "N": "⬆",
        "NNE": "↗",
        "NE": "↗",
        "ENE": "➡",
        "E": "➡",
        "ESE": "↘",
        "SE": "↘",
        "SSE": "⬇",
        "S": "⬇",
        "SSW": "↙",
        "SW": "↙",
        "WSW": "⬅",
        "W": "⬅",
        "WNW": "↖",
        "NW": "↖",
        "NNW": "⬆",
    }
)

# US EPA index (1-6) -> severity label. The UK DEFRA index has no table.
US_EPA_LABELS: Mapping[int, str] = MappingProxyType(
    {
        1: "Good",
        2: "Moderate",
        3: "Unhealthy for sensitive group",
        4: "Unhealthy",
        5: "Very Unhealthy",
        6: "Hazardous",
    }
)


def wind_arrow(direction: Any) -> str:
    """Return the arrow glyph for a compass abbreviation such as ``"NNE"``.

    Args:
        direction: Wind direction abbreviation from the payload

    Returns:
        Arrow glyph, or ``UNKNOWN_WIND_ARROW`` when the value is not one
        of the 16 compass points
    """
    if not isinstance(direction, str):
        return UNKNOWN_WIND_ARROW
    return WIND_ARROWS.get(direction, UNKNOWN_WIND_ARROW)


def aqi_label(index: Any) -> str:
    """Return the severity label for a US EPA air quality index.

    Args:
        index: US EPA index value from the payload

    Returns:
        Label such as ``"Moderate"``, or ``UNKNOWN_AQI_LABEL`` for anything
        outside 1-6
    """
    # bool is an int subclass; True must not read as "Good"
    if isinstance(index, bool) or not isinstance(index, int):
        return UNKNOWN_AQI_LABEL
    return US_EPA_LABELS.get(index, UNKNOWN_AQI_LABEL)
