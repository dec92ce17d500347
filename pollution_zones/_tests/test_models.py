#!/usr/bin/env python3
"""
Tests for Zone and Contribution records.

Run with: python -m pytest pollution_zones/_tests/test_models.py -v
"""

import pytest

from pollution_zones.errors import InvalidLevel, InvalidReading
from pollution_zones.models import Contribution, Level, ViolatorType, Zone


@pytest.fixture
def clock_tower_record():
    return {
        "id": "1",
        "name": "Clock Tower",
        "coordinates": [30.3165, 78.0322],
        "aqi": 98,
        "level": "moderate",
        "violators": [
            {"type": "vehicle", "name": "Heavy Traffic", "contribution": 55},
            {"type": "construction", "name": "Smart City Development", "contribution": 25},
            {"type": "industry", "name": "Commercial Generators", "contribution": 20},
        ],
    }


class TestViolatorType:
    """Tests for the closed violator type set."""

    def test_every_type_has_icon(self):
        icons = {t: t.icon for t in ViolatorType}
        assert icons == {
            ViolatorType.VEHICLE: "car",
            ViolatorType.INDUSTRY: "factory",
            ViolatorType.CONSTRUCTION: "hammer",
            ViolatorType.BURNING: "flame",
        }

    def test_unknown_type_rejected(self):
        """No generic fallback icon for unknown sources."""
        with pytest.raises(ValueError):
            ViolatorType.from_string("agriculture")


class TestLevel:
    """Tests for the Level enum."""

    def test_rank_order(self):
        assert [lv.rank for lv in Level] == list(range(6))

    def test_from_string_no_fallback(self):
        with pytest.raises(InvalidLevel):
            Level.from_string("unknown")


class TestContribution:
    """Tests for Contribution validation."""

    @pytest.mark.parametrize("share", [0, 0.5, 100])
    def test_valid_shares(self, share):
        c = Contribution(ViolatorType.BURNING, "Waste Burning", share)
        assert c.contribution == share

    @pytest.mark.parametrize("share", [-1, 100.1, float("nan"), "10", True])
    def test_invalid_shares(self, share):
        with pytest.raises(ValueError):
            Contribution(ViolatorType.BURNING, "Waste Burning", share)

    def test_empty_name(self):
        with pytest.raises(ValueError):
            Contribution(ViolatorType.VEHICLE, "  ", 10)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            Contribution.from_dict({"type": "vehicle", "name": "Traffic"})


class TestZone:
    """Tests for Zone records."""

    def test_from_dict(self, clock_tower_record):
        zone = Zone.from_dict(clock_tower_record)
        assert zone.id == "1"
        assert zone.coordinates == (30.3165, 78.0322)
        assert [v.type for v in zone.violators] == [
            ViolatorType.VEHICLE,
            ViolatorType.CONSTRUCTION,
            ViolatorType.INDUSTRY,
        ]

    def test_stored_level_ignored(self, clock_tower_record):
        """AQI 98 is good, whatever the record claims."""
        zone = Zone.from_dict(clock_tower_record)
        assert zone.level is Level.GOOD

    def test_level_has_no_setter(self, clock_tower_record):
        zone = Zone.from_dict(clock_tower_record)
        with pytest.raises(AttributeError):
            zone.level = Level.POOR

    def test_integral_float_aqi(self, clock_tower_record):
        clock_tower_record["aqi"] = 156.0
        zone = Zone.from_dict(clock_tower_record)
        assert zone.aqi == 156
        assert zone.level is Level.POOR

    def test_negative_aqi_deferred(self, clock_tower_record):
        """The record loads; only deriving its level fails."""
        clock_tower_record["aqi"] = -5
        zone = Zone.from_dict(clock_tower_record)
        with pytest.raises(InvalidReading):
            zone.level

    @pytest.mark.parametrize("coords", [[91.0, 0.0], [0.0, -180.5], [10.0]])
    def test_bad_coordinates(self, clock_tower_record, coords):
        clock_tower_record["coordinates"] = coords
        with pytest.raises(ValueError):
            Zone.from_dict(clock_tower_record)

    def test_empty_name(self, clock_tower_record):
        clock_tower_record["name"] = ""
        with pytest.raises(ValueError):
            Zone.from_dict(clock_tower_record)

    def test_no_violators(self, clock_tower_record):
        del clock_tower_record["violators"]
        assert Zone.from_dict(clock_tower_record).violators == ()

    def test_as_dict_round_trip(self, clock_tower_record):
        zone = Zone.from_dict(clock_tower_record)
        d = zone.as_dict()
        assert "level" not in d
        assert Zone.from_dict(d) == zone


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
