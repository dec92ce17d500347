#!/usr/bin/env python3
"""
Tests for marker and heatmap parameter derivation.

Run with: python -m pytest pollution_zones/_tests/test_visual_params.py -v
"""

import pytest

from pollution_zones.errors import InvalidReading
from pollution_zones.models import Level, Zone
from pollution_zones.visual_params import (
    derive_visual,
    heatmap_base_radius,
    heatmap_layers,
    marker_radius,
)
from pollution_zones.viz_config_types import (
    HeatmapConfig,
    MarkerConfig,
    VIZ_CONFIG,
    MAX_OUTER_OPACITY,
    ZoneVizConfig,
)


def _zone(aqi, zone_id="z1"):
    return Zone(id=zone_id, name=f"Zone {zone_id}", coordinates=(30.3, 78.0), aqi=aqi)


# ============================================================================
# MARKER TESTS
# ============================================================================


class TestMarkerRadius:
    """Tests for marker sizing."""

    def test_monotone_between_levels(self):
        """A hazardous zone is never drawn smaller than a good one."""
        assert (
            derive_visual(_zone(300), False).marker_radius
            >= derive_visual(_zone(50), False).marker_radius
        )

    def test_monotone_over_range(self):
        radii = [marker_radius(aqi, VIZ_CONFIG.marker) for aqi in range(0, 1000, 7)]
        assert radii == sorted(radii)

    def test_lower_clamp(self):
        """Clean-air zones stay visible."""
        assert marker_radius(0, VIZ_CONFIG.marker) == VIZ_CONFIG.marker.min_radius_px

    def test_upper_clamp(self):
        """Extreme readings do not swamp neighbouring zones."""
        assert marker_radius(5000, VIZ_CONFIG.marker) == VIZ_CONFIG.marker.max_radius_px

    def test_scales_between_clamps(self):
        marker = MarkerConfig(min_radius_px=5, max_radius_px=50, aqi_per_px=10)
        assert marker_radius(200, marker) == 20.0

    @pytest.mark.parametrize(
        "aqi, emphasis", [(0, False), (149, False), (150, True), (400, True)]
    )
    def test_emphasis_threshold(self, aqi, emphasis):
        visual = derive_visual(_zone(aqi), False)
        assert visual.marker_emphasis is emphasis

    def test_emphasis_thickens_outline(self):
        calm = derive_visual(_zone(40), False)
        loud = derive_visual(_zone(250), False)
        assert calm.outline_weight == VIZ_CONFIG.marker.outline_weight
        assert loud.outline_weight == VIZ_CONFIG.marker.emphasis_outline_weight


# ============================================================================
# HEATMAP TESTS
# ============================================================================


class TestHeatmapLayers:
    """Tests for concentric heatmap rings."""

    def test_no_layers_when_disabled(self):
        assert derive_visual(_zone(156), False).heatmap_layers == ()

    @pytest.mark.parametrize("aqi", [0, 42, 156, 287, 600])
    def test_layer_ordering(self, aqi):
        """Radii shrink and opacities grow from the outermost ring inwards."""
        layers = derive_visual(_zone(aqi), True).heatmap_layers
        assert len(layers) >= 2
        for outer, inner in zip(layers, layers[1:]):
            assert inner.radius_m < outer.radius_m
            assert inner.opacity > outer.opacity

    def test_outer_layer_is_faint(self):
        layers = derive_visual(_zone(400), True).heatmap_layers
        assert layers[0].opacity <= MAX_OUTER_OPACITY

    def test_base_radius_monotone(self):
        heat = VIZ_CONFIG.heatmap
        bases = [heatmap_base_radius(aqi, heat) for aqi in range(0, 600, 5)]
        assert bases == sorted(bases)
        assert bases[0] == heat.min_base_radius_m

    def test_outermost_ring_is_base(self):
        heat = HeatmapConfig(radius_m_per_aqi=50.0, min_base_radius_m=100.0)
        layers = heatmap_layers(156, heat)
        assert layers[0].radius_m == pytest.approx(7800.0)

    def test_layer_count_follows_config(self):
        heat = HeatmapConfig(layer_count=5)
        assert len(heatmap_layers(120, heat)) == 5


# ============================================================================
# DERIVATION TESTS
# ============================================================================


class TestDeriveVisual:
    """Tests for derive_visual()."""

    def test_level_and_color(self):
        visual = derive_visual(_zone(156), True)
        assert visual.level is Level.POOR
        assert visual.color == "#ff0000"
        assert visual.zone_id == "z1"

    def test_deterministic(self):
        zone = _zone(210)
        assert derive_visual(zone, True) == derive_visual(zone, True)

    def test_invalid_reading_propagates(self):
        with pytest.raises(InvalidReading):
            derive_visual(_zone(-3), True)

    def test_custom_config(self):
        colors = dict(VIZ_CONFIG.level_colors, poor="#123456")
        cfg = ZoneVizConfig(level_colors=colors)
        assert derive_visual(_zone(160), False, cfg).color == "#123456"

    def test_to_dict(self):
        d = derive_visual(_zone(98), True).to_dict()
        assert d["level"] == "good"
        assert len(d["heatmap_layers"]) == VIZ_CONFIG.heatmap.layer_count
        assert set(d["heatmap_layers"][0]) == {"radius_m", "opacity"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
