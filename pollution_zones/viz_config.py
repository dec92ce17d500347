#!/usr/bin/env python3
"""
Pollution Zone Visualization - Configuration

ARCHITECTURAL OVERVIEW:
=======================
Responsibility: Configuration dictionary for zone marker and heatmap styling.
This is the user-facing configuration file - edit values here.

Pattern:
- viz_config.py defines the VIZ_CONFIG_DATA dictionary (edit this)
- viz_config_types.py defines typed dataclasses and loads from VIZ_CONFIG_DATA

For Navigation: Use VS Code outline (Ctrl+Shift+O)
"""

from typing import Dict, Any

# ═══════════════════════════════════════════════════════════════════════════
# 🎨 POLLUTION ZONE VISUALIZATION CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════

VIZ_CONFIG_DATA: Dict[str, Any] = {
    # ═══════════════════════════════════════════════════════════════════════
    # 🌈 LEVEL COLOURS (must cover all six levels, no duplicates)
    # ═══════════════════════════════════════════════════════════════════════
    "level_colors": {
        "excellent": "#00e400",  # Green
        "good": "#ffff00",  # Yellow
        "moderate": "#ff7e00",  # Orange
        "poor": "#ff0000",  # Red
        "severe": "#8f3f97",  # Purple
        "hazardous": "#7e0023",  # Maroon
    },
    # ═══════════════════════════════════════════════════════════════════════
    # 📍 ZONE MARKER SETTINGS
    # ═══════════════════════════════════════════════════════════════════════
    "marker": {
        # radius = clamp(min_radius_px, max_radius_px, aqi / aqi_per_px)
        "min_radius_px": 8.0,  # Keeps clean-air zones visible
        "max_radius_px": 24.0,  # Keeps hazardous zones from covering neighbours
        "aqi_per_px": 20.0,
        "outline_color": "#ffffff",
        "outline_weight": 2,
        "emphasis_outline_weight": 4,  # Used when aqi >= emphasis_threshold
        "fill_opacity": 0.9,
        "emphasis_threshold": 150,
    },
    # ═══════════════════════════════════════════════════════════════════════
    # 🔥 HEATMAP RING SETTINGS
    # ═══════════════════════════════════════════════════════════════════════
    "heatmap": {
        # base radius = clamp(min_base_radius_m, max_base_radius_m, aqi * radius_m_per_aqi)
        "radius_m_per_aqi": 50.0,
        "min_base_radius_m": 1000.0,
        "max_base_radius_m": 50000.0,
        "layer_count": 3,
        "inner_radius_ratio": 0.35,  # Innermost ring = base * ratio
        "outer_opacity": 0.1,  # Outermost ring (faintest)
        "inner_opacity": 0.3,  # Innermost ring (densest)
    },
    # ═══════════════════════════════════════════════════════════════════════
    # 📊 VIOLATOR CONTRIBUTION CHECKS
    # ═══════════════════════════════════════════════════════════════════════
    "contributions": {
        "tolerance_lower_pct": 95.0,
        "tolerance_upper_pct": 105.0,
    },
    # ═══════════════════════════════════════════════════════════════════════
    # 🗺️ MAP SETTINGS
    # ═══════════════════════════════════════════════════════════════════════
    "map": {
        "center": [30.3165, 78.0322],  # [lat, lon] - Dehradun Clock Tower
        "zoom": 12,
    },
}
