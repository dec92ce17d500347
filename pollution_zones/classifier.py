"""
AQI classification and level colours.

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Map a raw AQI reading to one of six severity levels and each
level to its display colour.

Level bands are half-open [lower, upper); the last band is unbounded:

    excellent   [0, 50)
    good        [50, 100)
    moderate    [100, 150)
    poor        [150, 200)
    severe      [200, 300)
    hazardous   [300, inf)

Both functions are pure. Invalid input raises, it is never clamped.

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .errors import InvalidLevel, InvalidReading
from .models import Level
from .viz_config_types import DEFAULT_LEVEL_COLORS

# ═══════════════════════════════════════════════════════════════════════════════
# 🔧 CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

# (level, inclusive lower bound) in ascending order
LEVEL_THRESHOLDS: Tuple[Tuple[Level, int], ...] = (
    (Level.EXCELLENT, 0),
    (Level.GOOD, 50),
    (Level.MODERATE, 100),
    (Level.POOR, 150),
    (Level.SEVERE, 200),
    (Level.HAZARDOUS, 300),
)

_LOWER_BOUNDS: List[int] = [lower for _, lower in LEVEL_THRESHOLDS]


# ═══════════════════════════════════════════════════════════════════════════════
# 🏷️ CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════


def classify(aqi: int) -> Level:
    """Classify an AQI reading into a severity level.

    Args:
        aqi: Non-negative integer AQI

    Returns:
        The Level whose band contains aqi

    Raises:
        InvalidReading: If aqi is negative or not an integer
    """
    if isinstance(aqi, bool) or not isinstance(aqi, int) or aqi < 0:
        raise InvalidReading(aqi)
    return LEVEL_THRESHOLDS[bisect_right(_LOWER_BOUNDS, aqi) - 1][0]


def level_bounds(level: Level) -> Tuple[int, Optional[int]]:
    """Return (lower, upper) for a level; upper is None for the last band."""
    for idx, (lv, lower) in enumerate(LEVEL_THRESHOLDS):
        if lv is level:
            upper = (
                LEVEL_THRESHOLDS[idx + 1][1]
                if idx + 1 < len(LEVEL_THRESHOLDS)
                else None
            )
            return lower, upper
    raise InvalidLevel(level)


# ═══════════════════════════════════════════════════════════════════════════════
# 🌈 COLOURS
# ═══════════════════════════════════════════════════════════════════════════════


def color_of(
    level: Union[Level, str], colors: Optional[Mapping[str, str]] = None
) -> str:
    """Return the colour token for a level.

    Args:
        level: Level member or its string value
        colors: Level value -> colour table (default: configured colours)

    Raises:
        InvalidLevel: If level is unknown or missing from the table
    """
    table = DEFAULT_LEVEL_COLORS if colors is None else colors
    if isinstance(level, Level):
        key = level.value
    elif isinstance(level, str):
        key = Level.from_string(level).value
    else:
        raise InvalidLevel(level)
    try:
        return table[key]
    except KeyError:
        raise InvalidLevel(level) from None


# ═══════════════════════════════════════════════════════════════════════════════
# 📖 LEGEND
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class LegendEntry:
    """One row of the AQI scale legend."""

    level: Level
    lower: int
    upper: Optional[int]
    color: str

    @property
    def range_label(self) -> str:
        if self.upper is None:
            return f"{self.lower}+"
        return f"{self.lower}-{self.upper - 1}"

    def to_dict(self) -> Dict[str, object]:
        return {
            "level": self.level.value,
            "label": self.level.label,
            "range": self.range_label,
            "lower": self.lower,
            "upper": self.upper,
            "color": self.color,
        }


def legend_entries(colors: Optional[Mapping[str, str]] = None) -> List[LegendEntry]:
    """Legend rows for all six levels, ascending."""
    entries = []
    for level, _ in LEVEL_THRESHOLDS:
        lower, upper = level_bounds(level)
        entries.append(LegendEntry(level, lower, upper, color_of(level, colors)))
    return entries
