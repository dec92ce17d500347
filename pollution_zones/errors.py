"""
Error taxonomy for the zone engine.

InvalidReading and InvalidLevel are raised by the classifier (and surface
through the visual deriver). Both are local to one zone: the dashboard
builder catches them per zone and renders that zone as "data unavailable".

Data-quality problems with contribution totals are NOT exceptions; see
models.DataQualityWarning.
"""


class ZoneEngineError(Exception):
    """Base class for all zone engine errors."""


class InvalidReading(ZoneEngineError, ValueError):
    """AQI reading outside the valid domain (negative or not an integer)."""

    def __init__(self, aqi):
        self.aqi = aqi
        super().__init__(f"Invalid AQI reading: {aqi!r} (must be a non-negative integer)")


class InvalidLevel(ZoneEngineError, LookupError):
    """Level not present in the colour table.

    Raised when a level value cannot be mapped to a colour, which means the
    classifier and the colour table are out of sync.
    """

    def __init__(self, level):
        self.level = level
        super().__init__(f"Unrecognised severity level: {level!r}")
