#!/usr/bin/env python3
"""
Pollution Zone Visualization - Configuration Types

ARCHITECTURAL OVERVIEW:
=======================
Responsibility: Centralized, typed configuration for zone visualization
using frozen dataclasses for immutability and type safety.

This follows the Typed Configuration Architecture pattern:
- viz_config.py defines VIZ_CONFIG_DATA dictionary (user edits this)
- viz_config_types.py defines frozen dataclasses (this file)
- VIZ_CONFIG module-level instance for default access
- Derivation functions receive a ZoneVizConfig, never the raw dict

Settings are validated in __post_init__ so a bad edit to viz_config.py fails
at import time instead of producing broken marker geometry later.

For Navigation: Use VS Code outline (Ctrl+Shift+O)
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple

from .models import Level
from .viz_config import VIZ_CONFIG_DATA

# Outermost heatmap ring must stay faint so neighbouring zones remain readable
MAX_OUTER_OPACITY = 0.25

# Upper bound on concentric rings per zone
MAX_HEATMAP_LAYERS = 10

DEFAULT_LEVEL_COLORS: Dict[str, str] = dict(VIZ_CONFIG_DATA["level_colors"])

# ═══════════════════════════════════════════════════════════════════════════
# 📍 MARKER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class MarkerConfig:
    """Configuration for zone marker appearance."""

    min_radius_px: float = 8.0
    max_radius_px: float = 24.0
    aqi_per_px: float = 20.0
    outline_color: str = "#ffffff"
    outline_weight: int = 2
    emphasis_outline_weight: int = 4
    fill_opacity: float = 0.9
    emphasis_threshold: int = 150

    def __post_init__(self):
        if self.min_radius_px <= 0:
            raise ValueError("marker.min_radius_px must be positive")
        if self.min_radius_px > self.max_radius_px:
            raise ValueError(
                f"marker.min_radius_px ({self.min_radius_px}) exceeds "
                f"max_radius_px ({self.max_radius_px})"
            )
        if self.aqi_per_px <= 0:
            raise ValueError("marker.aqi_per_px must be positive")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MarkerConfig":
        """Create from dictionary."""
        return cls(
            min_radius_px=d.get("min_radius_px", 8.0),
            max_radius_px=d.get("max_radius_px", 24.0),
            aqi_per_px=d.get("aqi_per_px", 20.0),
            outline_color=d.get("outline_color", "#ffffff"),
            outline_weight=d.get("outline_weight", 2),
            emphasis_outline_weight=d.get("emphasis_outline_weight", 4),
            fill_opacity=d.get("fill_opacity", 0.9),
            emphasis_threshold=d.get("emphasis_threshold", 150),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "min_radius_px": self.min_radius_px,
            "max_radius_px": self.max_radius_px,
            "aqi_per_px": self.aqi_per_px,
            "outline_color": self.outline_color,
            "outline_weight": self.outline_weight,
            "emphasis_outline_weight": self.emphasis_outline_weight,
            "fill_opacity": self.fill_opacity,
            "emphasis_threshold": self.emphasis_threshold,
        }


# ═══════════════════════════════════════════════════════════════════════════
# 🔥 HEATMAP CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class HeatmapConfig:
    """Configuration for the concentric heatmap rings drawn around a zone."""

    radius_m_per_aqi: float = 50.0
    min_base_radius_m: float = 1000.0
    max_base_radius_m: float = 50000.0
    layer_count: int = 3
    inner_radius_ratio: float = 0.35
    outer_opacity: float = 0.1
    inner_opacity: float = 0.3

    def __post_init__(self):
        if not 2 <= self.layer_count <= MAX_HEATMAP_LAYERS:
            raise ValueError(
                f"heatmap.layer_count must be within [2, {MAX_HEATMAP_LAYERS}]"
            )
        if self.min_base_radius_m <= 0 or self.radius_m_per_aqi < 0:
            raise ValueError("heatmap radii must be positive")
        if self.min_base_radius_m > self.max_base_radius_m:
            raise ValueError(
                f"heatmap.min_base_radius_m ({self.min_base_radius_m}) exceeds "
                f"max_base_radius_m ({self.max_base_radius_m})"
            )
        if not 0 < self.inner_radius_ratio < 1:
            raise ValueError("heatmap.inner_radius_ratio must be within (0, 1)")
        if not 0 < self.outer_opacity < self.inner_opacity <= 1:
            raise ValueError(
                "heatmap opacities must satisfy 0 < outer_opacity < inner_opacity <= 1"
            )
        if self.outer_opacity > MAX_OUTER_OPACITY:
            raise ValueError(
                f"heatmap.outer_opacity must not exceed {MAX_OUTER_OPACITY}"
            )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HeatmapConfig":
        """Create from dictionary."""
        return cls(
            radius_m_per_aqi=d.get("radius_m_per_aqi", 50.0),
            min_base_radius_m=d.get("min_base_radius_m", 1000.0),
            max_base_radius_m=d.get("max_base_radius_m", 50000.0),
            layer_count=d.get("layer_count", 3),
            inner_radius_ratio=d.get("inner_radius_ratio", 0.35),
            outer_opacity=d.get("outer_opacity", 0.1),
            inner_opacity=d.get("inner_opacity", 0.3),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "radius_m_per_aqi": self.radius_m_per_aqi,
            "min_base_radius_m": self.min_base_radius_m,
            "max_base_radius_m": self.max_base_radius_m,
            "layer_count": self.layer_count,
            "inner_radius_ratio": self.inner_radius_ratio,
            "outer_opacity": self.outer_opacity,
            "inner_opacity": self.inner_opacity,
        }


# ═══════════════════════════════════════════════════════════════════════════
# 📊 CONTRIBUTION CHECK CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ContributionConfig:
    """Tolerance band for the sum of violator shares in one zone."""

    tolerance_lower_pct: float = 95.0
    tolerance_upper_pct: float = 105.0

    def __post_init__(self):
        if self.tolerance_lower_pct > self.tolerance_upper_pct:
            raise ValueError("contributions tolerance band is inverted")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ContributionConfig":
        """Create from dictionary."""
        return cls(
            tolerance_lower_pct=d.get("tolerance_lower_pct", 95.0),
            tolerance_upper_pct=d.get("tolerance_upper_pct", 105.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "tolerance_lower_pct": self.tolerance_lower_pct,
            "tolerance_upper_pct": self.tolerance_upper_pct,
        }


# ═══════════════════════════════════════════════════════════════════════════
# 🗺️ MAP CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class MapConfig:
    """Configuration for map display settings."""

    center_lat: float = 30.3165
    center_lon: float = 78.0322
    zoom: int = 12

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MapConfig":
        """Create from dictionary."""
        center = d.get("center", [30.3165, 78.0322])
        return cls(
            center_lat=(
                center[0] if isinstance(center, list) else d.get("center_lat", 30.3165)
            ),
            center_lon=(
                center[1] if isinstance(center, list) else d.get("center_lon", 78.0322)
            ),
            zoom=d.get("zoom", 12),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "center": [self.center_lat, self.center_lon],
            "zoom": self.zoom,
        }


# ═══════════════════════════════════════════════════════════════════════════
# 📦 MASTER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ZoneVizConfig:
    """Complete zone visualization configuration.

    Attributes:
        level_colors: Level value -> colour token; must be total and distinct
        marker: Marker sizing and outline settings
        heatmap: Heatmap ring settings
        contributions: Violator share tolerance band
        map: Default map view
    """

    level_colors: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_LEVEL_COLORS)
    )
    marker: MarkerConfig = field(default_factory=MarkerConfig)
    heatmap: HeatmapConfig = field(default_factory=HeatmapConfig)
    contributions: ContributionConfig = field(default_factory=ContributionConfig)
    map: MapConfig = field(default_factory=MapConfig)

    def __post_init__(self):
        missing = [lv.value for lv in Level if lv.value not in self.level_colors]
        if missing:
            raise ValueError(f"level_colors is missing levels: {missing}")
        colors = [self.level_colors[lv.value] for lv in Level]
        if len(set(colors)) != len(colors):
            raise ValueError("level_colors must assign a distinct colour to every level")

    @property
    def tolerance_band(self) -> Tuple[float, float]:
        return (
            self.contributions.tolerance_lower_pct,
            self.contributions.tolerance_upper_pct,
        )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ZoneVizConfig":
        """Create from VIZ_CONFIG_DATA-shaped dictionary."""
        return cls(
            level_colors=dict(d.get("level_colors", DEFAULT_LEVEL_COLORS)),
            marker=MarkerConfig.from_dict(d.get("marker", {})),
            heatmap=HeatmapConfig.from_dict(d.get("heatmap", {})),
            contributions=ContributionConfig.from_dict(d.get("contributions", {})),
            map=MapConfig.from_dict(d.get("map", {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "level_colors": dict(self.level_colors),
            "marker": self.marker.to_dict(),
            "heatmap": self.heatmap.to_dict(),
            "contributions": self.contributions.to_dict(),
            "map": self.map.to_dict(),
        }


# ═══════════════════════════════════════════════════════════════════════════
# 🌐 MODULE-LEVEL INSTANCE
# ═══════════════════════════════════════════════════════════════════════════

VIZ_CONFIG = ZoneVizConfig.from_dict(VIZ_CONFIG_DATA)
