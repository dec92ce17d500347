#!/usr/bin/env python3
"""
Tests for typed visualization configuration.

Run with: python -m pytest pollution_zones/_tests/test_viz_config_types.py -v
"""

import pytest

from pollution_zones.visual_params import heatmap_layers
from pollution_zones.viz_config import VIZ_CONFIG_DATA
from pollution_zones.viz_config_types import (
    ContributionConfig,
    HeatmapConfig,
    MAX_HEATMAP_LAYERS,
    MapConfig,
    MarkerConfig,
    VIZ_CONFIG,
    ZoneVizConfig,
)


class TestLoading:
    """Tests for building configs from VIZ_CONFIG_DATA."""

    def test_module_instance_matches_data(self):
        assert VIZ_CONFIG.to_dict() == ZoneVizConfig.from_dict(VIZ_CONFIG_DATA).to_dict()
        assert VIZ_CONFIG.marker.emphasis_threshold == 150
        assert VIZ_CONFIG.tolerance_band == (95.0, 105.0)

    def test_empty_dict_uses_defaults(self):
        cfg = ZoneVizConfig.from_dict({})
        assert cfg.marker == MarkerConfig()
        assert cfg.heatmap == HeatmapConfig()
        assert cfg.map == MapConfig()

    def test_partial_dict_fills_defaults(self):
        marker = MarkerConfig.from_dict({"max_radius_px": 30.0})
        assert marker.max_radius_px == 30.0
        assert marker.min_radius_px == 8.0

    def test_map_center_list(self):
        cfg = MapConfig.from_dict({"center": [28.6, 77.2], "zoom": 11})
        assert (cfg.center_lat, cfg.center_lon, cfg.zoom) == (28.6, 77.2, 11)
        assert cfg.to_dict()["center"] == [28.6, 77.2]


class TestValidation:
    """Invalid settings fail at construction."""

    def test_single_heatmap_layer(self):
        with pytest.raises(ValueError):
            HeatmapConfig(layer_count=1)

    def test_opacities_not_increasing(self):
        with pytest.raises(ValueError):
            HeatmapConfig(outer_opacity=0.3, inner_opacity=0.2)

    def test_outer_opacity_too_strong(self):
        with pytest.raises(ValueError):
            HeatmapConfig(outer_opacity=0.5, inner_opacity=0.8)

    def test_too_many_heatmap_layers(self):
        with pytest.raises(ValueError):
            HeatmapConfig(layer_count=MAX_HEATMAP_LAYERS + 1)

    def test_max_layers_keep_strict_opacity(self):
        """Closely spaced opacities at the layer cap still strictly increase."""
        heat = HeatmapConfig(
            layer_count=MAX_HEATMAP_LAYERS, outer_opacity=0.1, inner_opacity=0.1001
        )
        opacities = [layer.opacity for layer in heatmap_layers(100, heat)]
        assert all(b > a for a, b in zip(opacities, opacities[1:]))

    def test_inverted_base_radius_clamp(self):
        with pytest.raises(ValueError):
            HeatmapConfig(min_base_radius_m=5000.0, max_base_radius_m=1000.0)

    def test_inner_ratio_out_of_range(self):
        with pytest.raises(ValueError):
            HeatmapConfig(inner_radius_ratio=1.0)

    def test_inverted_marker_clamp(self):
        with pytest.raises(ValueError):
            MarkerConfig(min_radius_px=30.0, max_radius_px=10.0)

    def test_inverted_tolerance_band(self):
        with pytest.raises(ValueError):
            ContributionConfig(tolerance_lower_pct=110.0, tolerance_upper_pct=90.0)

    def test_colour_table_must_be_total(self):
        colors = dict(VIZ_CONFIG_DATA["level_colors"])
        del colors["hazardous"]
        with pytest.raises(ValueError):
            ZoneVizConfig(level_colors=colors)

    def test_colour_table_must_be_distinct(self):
        colors = dict(VIZ_CONFIG_DATA["level_colors"], severe="#ff0000")
        with pytest.raises(ValueError):
            ZoneVizConfig(level_colors=colors)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
