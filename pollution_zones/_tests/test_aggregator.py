#!/usr/bin/env python3
"""
Tests for violator contribution aggregation.

Run with: python -m pytest pollution_zones/_tests/test_aggregator.py -v
"""

import logging

import pytest

from pollution_zones.aggregator import aggregate, top_contributor
from pollution_zones.models import Contribution, DataQualityWarning, ViolatorType


def _c(share, name=None, kind=ViolatorType.VEHICLE):
    return Contribution(type=kind, name=name or f"Source {share}", contribution=share)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def isbt_violators():
    """ISBT Dehradun sources, summing to 100%."""
    return [
        _c(65, "Interstate Bus Terminal"),
        _c(25, "Diesel Generators", ViolatorType.INDUSTRY),
        _c(10, "Waste Burning", ViolatorType.BURNING),
    ]


# ============================================================================
# AGGREGATE TESTS
# ============================================================================


class TestAggregate:
    """Tests for aggregate()."""

    def test_total_and_no_warning_at_100(self, isbt_violators):
        report = aggregate(isbt_violators)
        assert report.total_percent == 100
        assert report.warning is None

    def test_empty_list(self):
        """No sources yet is valid and not a data-quality problem."""
        report = aggregate([])
        assert report.total_percent == 0
        assert report.ranked_by_share_desc == ()
        assert report.warning is None
        assert report.top is None

    def test_over_100_warns(self):
        report = aggregate([_c(80), _c(50), _c(20)])
        assert report.total_percent == 150
        assert isinstance(report.warning, DataQualityWarning)
        assert report.warning.total_percent == 150
        assert "150%" in report.warning.message

    def test_warning_logged_at_warning_level(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pollution_zones.aggregator"):
            aggregate([_c(80), _c(50), _c(20)])
        assert "150%" in caplog.text

    def test_balanced_total_logs_nothing(self, isbt_violators, caplog):
        with caplog.at_level(logging.WARNING, logger="pollution_zones.aggregator"):
            aggregate(isbt_violators)
        assert caplog.records == []

    def test_under_band_warns(self):
        report = aggregate([_c(40), _c(30)])
        assert report.warning is not None

    @pytest.mark.parametrize("total", [95, 105])
    def test_band_edges_inclusive(self, total):
        report = aggregate([_c(total - 5), _c(5)])
        assert report.warning is None

    def test_totals_not_rescaled(self):
        """Shares are reported as supplied, even when the total is off."""
        violators = [_c(80), _c(50)]
        report = aggregate(violators)
        assert [c.contribution for c in report.ranked_by_share_desc] == [80, 50]

    def test_custom_tolerance_band(self):
        report = aggregate([_c(90)], tolerance_band=(90.0, 110.0))
        assert report.warning is None

    def test_ranking_descending_and_stable(self):
        """Equal shares keep their input order."""
        a, b, c, d = _c(20, "A"), _c(40, "B"), _c(20, "C"), _c(20, "D")
        report = aggregate([a, b, c, d])
        assert report.ranked_by_share_desc == (b, a, c, d)

    def test_ranking_is_permutation(self, isbt_violators):
        shuffled = [isbt_violators[2], isbt_violators[0], isbt_violators[1]]
        ranked = aggregate(shuffled).ranked_by_share_desc
        assert sorted(ranked, key=id) == sorted(shuffled, key=id)
        shares = [c.contribution for c in ranked]
        assert shares == sorted(shares, reverse=True)

    def test_input_not_mutated(self, isbt_violators):
        original = list(isbt_violators)
        aggregate(list(reversed(isbt_violators)))
        assert isbt_violators == original

    def test_to_dict(self, isbt_violators):
        d = aggregate(isbt_violators).to_dict()
        assert d["total_percent"] == 100
        assert d["ranked_by_share_desc"][0]["icon"] == "car"
        assert d["warning"] is None


# ============================================================================
# TOP CONTRIBUTOR TESTS
# ============================================================================


class TestTopContributor:
    """Tests for top_contributor()."""

    def test_highest_share(self, isbt_violators):
        assert top_contributor(isbt_violators).name == "Interstate Bus Terminal"

    def test_empty(self):
        assert top_contributor([]) is None

    def test_tie_first_occurrence(self):
        first, second = _c(50, "First"), _c(50, "Second")
        assert top_contributor([_c(10), first, second]) is first

    def test_matches_report_top(self, isbt_violators):
        assert aggregate(isbt_violators).top is top_contributor(isbt_violators)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
