"""
Visual parameter derivation for zone markers and heatmap rings.

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Turn a Zone into the geometric/styling numbers the map
surface needs. Nothing here draws; the output is plain data.

Marker:
    radius = clip(aqi / aqi_per_px, min_radius_px, max_radius_px)
    emphasis = aqi >= emphasis_threshold (thicker outline on the map)

Heatmap rings (only when the heatmap is enabled):
    base = clamp(min_base_radius_m, max_base_radius_m, aqi * radius_m_per_aqi)
    ring i radius  = base * linspace(1, inner_radius_ratio)[i]   (shrinking)
    ring i opacity = linspace(outer_opacity, inner_opacity)[i]   (growing)

Stacking faint wide rings under denser narrow ones approximates a density
falloff without real heatmap interpolation.

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .classifier import classify, color_of
from .models import Level, Zone
from .viz_config_types import HeatmapConfig, MarkerConfig, VIZ_CONFIG, ZoneVizConfig

# ═══════════════════════════════════════════════════════════════════════════════
# 📦 DATA CONTAINERS
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class HeatmapLayer:
    """One concentric heatmap ring.

    Attributes:
        radius_m: Ring radius in metres (ground distance, scales with zoom)
        opacity: Fill opacity in (0, 1]
    """

    radius_m: float
    opacity: float

    def to_dict(self) -> Dict[str, float]:
        return {"radius_m": self.radius_m, "opacity": self.opacity}


@dataclass(frozen=True)
class VisualParams:
    """Everything the map needs to draw one zone.

    Layers are ordered outermost first.
    """

    zone_id: str
    level: Level
    color: str
    marker_radius: float
    marker_emphasis: bool
    outline_color: str
    outline_weight: int
    fill_opacity: float
    heatmap_layers: Tuple[HeatmapLayer, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "zone_id": self.zone_id,
            "level": self.level.value,
            "color": self.color,
            "marker_radius": self.marker_radius,
            "marker_emphasis": self.marker_emphasis,
            "outline_color": self.outline_color,
            "outline_weight": self.outline_weight,
            "fill_opacity": self.fill_opacity,
            "heatmap_layers": [layer.to_dict() for layer in self.heatmap_layers],
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 📐 GEOMETRY HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def marker_radius(aqi: int, marker: MarkerConfig) -> float:
    """Clamped, monotone non-decreasing marker radius in pixels.

    The clamp is checked on the integer reading before dividing, so readings
    too large for a float still land on max_radius_px.
    """
    if aqi >= marker.max_radius_px * marker.aqi_per_px:
        return float(marker.max_radius_px)
    raw = aqi / marker.aqi_per_px
    return float(np.clip(raw, marker.min_radius_px, marker.max_radius_px))


def heatmap_base_radius(aqi: int, heatmap: HeatmapConfig) -> float:
    """Outermost ring radius in metres; grows with aqi between the two bounds.

    Like marker_radius, the upper clamp is decided before any float maths.
    """
    if heatmap.radius_m_per_aqi == 0:
        return float(heatmap.min_base_radius_m)
    if aqi >= heatmap.max_base_radius_m / heatmap.radius_m_per_aqi:
        return float(heatmap.max_base_radius_m)
    return max(heatmap.min_base_radius_m, aqi * heatmap.radius_m_per_aqi)


def heatmap_layers(aqi: int, heatmap: HeatmapConfig) -> Tuple[HeatmapLayer, ...]:
    """Concentric rings, outermost first.

    Radii strictly decrease and opacities strictly increase with the layer
    index. HeatmapConfig validation guarantees 0 < inner_radius_ratio < 1,
    outer_opacity < inner_opacity and at most MAX_HEATMAP_LAYERS rings; values
    are left unrounded so neighbouring rings never collapse onto each other.
    """
    base = heatmap_base_radius(aqi, heatmap)
    ratios = np.linspace(1.0, heatmap.inner_radius_ratio, heatmap.layer_count)
    opacities = np.linspace(
        heatmap.outer_opacity, heatmap.inner_opacity, heatmap.layer_count
    )
    return tuple(
        HeatmapLayer(radius_m=float(base * r), opacity=float(o))
        for r, o in zip(ratios, opacities)
    )


# ═══════════════════════════════════════════════════════════════════════════════
# 🎨 DERIVATION
# ═══════════════════════════════════════════════════════════════════════════════


def derive_visual(
    zone: Zone,
    heatmap_enabled: bool,
    config: Optional[ZoneVizConfig] = None,
) -> VisualParams:
    """Derive marker and heatmap parameters for one zone.

    Pure function of (zone, heatmap_enabled, config); it never reads
    selection state.

    Args:
        zone: Zone record
        heatmap_enabled: Emit heatmap rings when True, none when False
        config: Visualization settings (default: VIZ_CONFIG)

    Returns:
        VisualParams for the zone

    Raises:
        InvalidReading: If the zone's aqi is invalid
        InvalidLevel: If the colour table lacks the zone's level
    """
    cfg = config or VIZ_CONFIG
    level = classify(zone.aqi)
    emphasis = zone.aqi >= cfg.marker.emphasis_threshold

    return VisualParams(
        zone_id=zone.id,
        level=level,
        color=color_of(level, cfg.level_colors),
        marker_radius=marker_radius(zone.aqi, cfg.marker),
        marker_emphasis=emphasis,
        outline_color=cfg.marker.outline_color,
        outline_weight=(
            cfg.marker.emphasis_outline_weight if emphasis else cfg.marker.outline_weight
        ),
        fill_opacity=cfg.marker.fill_opacity,
        heatmap_layers=heatmap_layers(zone.aqi, cfg.heatmap) if heatmap_enabled else (),
    )
