"""
Typed data models for pollution monitoring zones.

Architectural Overview:
=======================
Immutable dataclasses for the records supplied by the zone data source.
Records are never mutated by the engine: everything visual (level, colour,
marker size, heatmap rings) is derived on read from these values.

Key Interactions:
-----------------
- Input: ZoneRegistry builds Zone instances via Zone.from_dict()
- Output: as_dict() gives the plain-dict form for JSON export
- Navigation: Use VS Code outline (Ctrl+Shift+O) for quick navigation

Why level is a property:
------------------------
A Zone has no stored level. `zone.level` always calls the classifier on the
current AQI, so a record can never carry a stale severity. Input records that
still include a "level" key are accepted, but the key is ignored (and logged by
the registry when it disagrees with the computed level).

MODIFICATION POINT: Add new violator types to ViolatorType AND _VIOLATOR_ICONS
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


# ═══════════════════════════════════════════════════════════════════════════
# 🏷️ ENUMS SECTION
# ═══════════════════════════════════════════════════════════════════════════


class Level(Enum):
    """Severity level derived from an AQI reading, in ascending order."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"
    SEVERE = "severe"
    HAZARDOUS = "hazardous"

    @property
    def rank(self) -> int:
        """0 for EXCELLENT up to 5 for HAZARDOUS."""
        return list(Level).index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_string(cls, s: str) -> "Level":
        """Convert string to Level.

        Unlike most enum parsers there is NO fallback: an unknown level name
        raises InvalidLevel, since substituting a default would silently
        paint a zone with the wrong colour.
        """
        from .errors import InvalidLevel

        for member in cls:
            if member.value == s:
                return member
        raise InvalidLevel(s)


class ViolatorType(Enum):
    """Closed set of pollution source categories.

    Every member MUST have an entry in _VIOLATOR_ICONS.
    """

    VEHICLE = "vehicle"
    INDUSTRY = "industry"
    CONSTRUCTION = "construction"
    BURNING = "burning"

    @property
    def icon(self) -> str:
        """Icon name used by the rendering surface for this source type."""
        return _VIOLATOR_ICONS[self]

    @classmethod
    def from_string(cls, s: str) -> "ViolatorType":
        """Convert string to ViolatorType.

        Raises:
            ValueError: If s is not a known source type
        """
        for member in cls:
            if member.value == s:
                return member
        raise ValueError(
            f"Unknown violator type {s!r}; expected one of "
            f"{[m.value for m in cls]}"
        )


_VIOLATOR_ICONS: Dict[ViolatorType, str] = {
    ViolatorType.VEHICLE: "car",
    ViolatorType.INDUSTRY: "factory",
    ViolatorType.CONSTRUCTION: "hammer",
    ViolatorType.BURNING: "flame",
}


# ═══════════════════════════════════════════════════════════════════════════
# 🏭 CONTRIBUTION DATACLASS SECTION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Contribution:
    """One attributed pollution source and its percentage share of a zone.

    Attributes:
        type: Source category (carries the display icon)
        name: Free-text description, non-empty
        contribution: Percentage share in [0, 100]
    """

    type: ViolatorType
    name: str
    contribution: float

    def __post_init__(self):
        if not isinstance(self.type, ViolatorType):
            raise ValueError(f"type must be a ViolatorType, got {self.type!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Contribution name must be a non-empty string")
        share = self.contribution
        if isinstance(share, bool) or not isinstance(share, (int, float)):
            raise ValueError(f"contribution must be a number, got {share!r}")
        if math.isnan(share) or not 0 <= share <= 100:
            raise ValueError(f"contribution must be within [0, 100], got {share}")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "icon": self.type.icon,
            "name": self.name,
            "contribution": self.contribution,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Contribution":
        """Create Contribution from a data-source dict.

        Raises:
            KeyError: If type, name or contribution are missing
            ValueError: If any field is invalid
        """
        return cls(
            type=ViolatorType.from_string(d["type"]),
            name=d["name"],
            contribution=d["contribution"],
        )


# ═══════════════════════════════════════════════════════════════════════════
# 📍 ZONE DATACLASS SECTION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Zone:
    """Immutable monitored location.

    The AQI is stored as supplied. It is deliberately NOT validated here:
    a negative reading is a classifier error that must only knock out this
    zone's rendering, so it is reported when the level is derived.

    Usage Examples:
    ---------------
    ```python
    zone = Zone.from_dict({
        "id": "2", "name": "ISBT Dehradun",
        "coordinates": [30.3255, 78.0422], "aqi": 156,
        "violators": [{"type": "vehicle", "name": "Bus Terminal", "contribution": 65}],
    })
    zone.level        # Level.POOR, computed on every access
    ```
    """

    id: str
    name: str
    coordinates: Tuple[float, float]
    aqi: int
    violators: Tuple[Contribution, ...] = ()

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Zone id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Zone {self.id}: name must be a non-empty string")
        lat, lon = self.coordinates
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"Zone {self.id}: latitude {lat} outside [-90, 90]")
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"Zone {self.id}: longitude {lon} outside [-180, 180]")
        # Normalise containers so callers may pass lists
        object.__setattr__(self, "coordinates", (float(lat), float(lon)))
        object.__setattr__(self, "violators", tuple(self.violators))

    @property
    def level(self) -> Level:
        """Severity level, always recomputed from aqi.

        Raises:
            InvalidReading: If aqi is negative or not an integer
        """
        from .classifier import classify

        return classify(self.aqi)

    @property
    def latitude(self) -> float:
        return self.coordinates[0]

    @property
    def longitude(self) -> float:
        return self.coordinates[1]

    def as_dict(self) -> Dict[str, Any]:
        """Convert to the plain record form (without derived fields)."""
        return {
            "id": self.id,
            "name": self.name,
            "coordinates": [self.coordinates[0], self.coordinates[1]],
            "aqi": self.aqi,
            "violators": [v.as_dict() for v in self.violators],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Zone":
        """Create Zone from a data-source record.

        A "level" key, if present, is ignored; see stored_level().

        Raises:
            KeyError: If id, name, coordinates or aqi are missing
            ValueError: If any field is invalid
        """
        coords: Sequence[float] = d["coordinates"]
        if len(coords) != 2:
            raise ValueError(f"coordinates must be a (lat, lon) pair, got {coords!r}")
        return cls(
            id=str(d["id"]),
            name=d["name"],
            coordinates=(float(coords[0]), float(coords[1])),
            aqi=_coerce_aqi(d["aqi"]),
            violators=tuple(
                Contribution.from_dict(v) for v in d.get("violators") or ()
            ),
        )


def stored_level(record: Dict[str, Any]) -> Optional[str]:
    """Return the level string a raw record claims to have, if any."""
    level = record.get("level")
    return str(level) if level is not None else None


def _coerce_aqi(value: Any) -> Any:
    """Turn integral floats (e.g. 156.0 from JSON) into ints.

    Anything else is passed through unchanged so the classifier can reject it.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# ═══════════════════════════════════════════════════════════════════════════
# ⚠️ DATA QUALITY ADVISORY
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class DataQualityWarning:
    """Advisory attached to an AggregateReport when shares do not sum to ~100.

    Never raised and never blocks rendering.
    """

    total_percent: float
    lower: float
    upper: float

    @property
    def message(self) -> str:
        return (
            f"Violator contributions sum to {self.total_percent:g}% "
            f"(expected {self.lower:g}-{self.upper:g}%)"
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_percent": self.total_percent,
            "lower": self.lower,
            "upper": self.upper,
            "message": self.message,
        }
