"""
Dashboard snapshot assembly.

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Combine the registry, the selection machine and the pure
per-zone derivations into one snapshot the rendering surface can draw.

Failure isolation:
    Each zone is rendered on its own. InvalidReading / InvalidLevel for one
    zone produce a ZoneRender with available=False ("data unavailable") and a
    logged warning; every other zone still renders. Data-quality warnings from
    the aggregator are collected but never block anything.

Detail panel statuses:
    hidden       fullscreen is on (selection kept)
    empty        nothing selected
    not_found    selected id no longer resolves to a zone
    unavailable  selected zone's reading is invalid
    ok           zone found and derived

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .aggregator import AggregateReport, aggregate
from .classifier import LegendEntry, legend_entries
from .errors import InvalidLevel, InvalidReading
from .models import Contribution, Level, Zone
from .registry import ZoneRegistry
from .selection import SelectionState, ZoneSelection
from .visual_params import VisualParams, derive_visual
from .viz_config_types import VIZ_CONFIG, ZoneVizConfig

logger = logging.getLogger(__name__)

DATA_UNAVAILABLE = "data unavailable"
EMPTY_PANEL_HINT = (
    "Click on any zone marker to view responsible parties and violation details"
)

# ═══════════════════════════════════════════════════════════════════════════════
# 📦 DATA CONTAINERS
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ZoneRender:
    """Render result for one zone.

    Attributes:
        zone: Source record
        visual: Derived marker/heatmap parameters, None when unavailable
        report: Violator aggregate (always available, it does not need the AQI)
        error: Reason the zone could not be derived, None when available
    """

    zone: Zone
    visual: Optional[VisualParams]
    report: AggregateReport
    error: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.visual is not None

    @property
    def status_text(self) -> str:
        if self.visual is None:
            return DATA_UNAVAILABLE
        return f"AQI: {self.zone.aqi} ({self.visual.level.value.upper()})"

    def popup_payload(self) -> Dict[str, Any]:
        """Content for the marker popup (name, AQI badge, violator lines)."""
        return {
            "title": self.zone.name,
            "badge": self.status_text,
            "color": self.visual.color if self.visual else None,
            "violators": [
                f"{v.name}: {v.contribution:g}%" for v in self.zone.violators
            ],
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zone": self.zone.as_dict(),
            "available": self.available,
            "status": self.status_text,
            "visual": self.visual.to_dict() if self.visual else None,
            "report": self.report.to_dict(),
            "error": self.error,
            "popup": self.popup_payload(),
        }


@dataclass(frozen=True)
class DetailPanel:
    """What the zone detail panel should show."""

    status: str
    zone_id: Optional[str] = None
    render: Optional[ZoneRender] = None
    message: Optional[str] = None

    @property
    def top_contributor(self) -> Optional[Contribution]:
        return self.render.report.top if self.render else None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "status": self.status,
            "zone_id": self.zone_id,
            "message": self.message,
        }
        if self.render is not None:
            zone = self.render.zone
            warning = self.render.report.warning
            top = self.top_contributor
            d.update(
                {
                    "name": zone.name,
                    "aqi": zone.aqi,
                    "level": (
                        self.render.visual.level.value if self.render.visual else None
                    ),
                    "color": self.render.visual.color if self.render.visual else None,
                    # Input order, not share order
                    "violators": [v.as_dict() for v in zone.violators],
                    "top_contributor": top.as_dict() if top else None,
                    "warning": warning.message if warning else None,
                }
            )
        return d


@dataclass(frozen=True)
class MapView:
    """Initial map view: center (lat, lon), bounds and zoom."""

    center: Tuple[float, float]
    # (min_lat, min_lon, max_lat, max_lon)
    bounds: Optional[Tuple[float, float, float, float]]
    zoom: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "center": list(self.center),
            "bounds": list(self.bounds) if self.bounds else None,
            "zoom": self.zoom,
        }


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything needed to draw the dashboard for one selection state."""

    renders: Tuple[ZoneRender, ...]
    selection: SelectionState
    detail: DetailPanel
    map_view: MapView
    legend: Tuple[LegendEntry, ...]
    level_counts: Dict[str, int] = field(default_factory=dict)
    warnings: Tuple[str, ...] = ()

    @property
    def available_count(self) -> int:
        return sum(1 for r in self.renders if r.available)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zones": [r.to_dict() for r in self.renders],
            "selection": self.selection.to_dict(),
            "detail": self.detail.to_dict(),
            "map": self.map_view.to_dict(),
            "legend": [e.to_dict() for e in self.legend],
            "level_counts": dict(self.level_counts),
            "warnings": list(self.warnings),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 🎨 PER-ZONE RENDERING
# ═══════════════════════════════════════════════════════════════════════════════


def render_zone(
    zone: Zone, heatmap_enabled: bool, config: Optional[ZoneVizConfig] = None
) -> ZoneRender:
    """Derive one zone, converting classifier errors into an unavailable render."""
    cfg = config or VIZ_CONFIG
    report = aggregate(zone.violators, cfg.tolerance_band)
    try:
        visual = derive_visual(zone, heatmap_enabled, cfg)
    except (InvalidReading, InvalidLevel) as e:
        logger.warning(
            f"⚠️ Zone {zone.id} ({zone.name}) rendered as {DATA_UNAVAILABLE}: {e}"
        )
        return ZoneRender(zone=zone, visual=None, report=report, error=str(e))
    return ZoneRender(zone=zone, visual=visual, report=report)


def resolve_detail(
    selection: SelectionState,
    registry: ZoneRegistry,
    heatmap_enabled: bool = False,
    config: Optional[ZoneVizConfig] = None,
) -> DetailPanel:
    """Resolve the selection against the registry for the detail panel."""
    zone_id = selection.selected_zone_id
    if not selection.detail_panel_active:
        return DetailPanel(status="hidden", zone_id=zone_id)
    if zone_id is None:
        return DetailPanel(status="empty", message=EMPTY_PANEL_HINT)

    zone = registry.get(zone_id)
    if zone is None:
        return DetailPanel(
            status="not_found", zone_id=zone_id, message=f"Zone {zone_id} not found"
        )

    render = render_zone(zone, heatmap_enabled, config)
    if not render.available:
        return DetailPanel(
            status="unavailable",
            zone_id=zone_id,
            render=render,
            message=DATA_UNAVAILABLE,
        )
    return DetailPanel(status="ok", zone_id=zone_id, render=render)


# ═══════════════════════════════════════════════════════════════════════════════
# 🗺️ MAP VIEW
# ═══════════════════════════════════════════════════════════════════════════════


def compute_map_view(
    zones: Tuple[Zone, ...], config: Optional[ZoneVizConfig] = None
) -> MapView:
    """Center on the zones' bounding box, or the configured default when empty."""
    cfg = config or VIZ_CONFIG
    if not zones:
        return MapView(
            center=(cfg.map.center_lat, cfg.map.center_lon),
            bounds=None,
            zoom=cfg.map.zoom,
        )

    coords = np.array([z.coordinates for z in zones], dtype=float)
    min_lat, min_lon = coords.min(axis=0)
    max_lat, max_lon = coords.max(axis=0)
    return MapView(
        center=(float(min_lat + max_lat) / 2.0, float(min_lon + max_lon) / 2.0),
        bounds=(float(min_lat), float(min_lon), float(max_lat), float(max_lon)),
        zoom=cfg.map.zoom,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# 🚀 SNAPSHOT
# ═══════════════════════════════════════════════════════════════════════════════


def build_dashboard(
    registry: ZoneRegistry,
    selection: ZoneSelection,
    config: Optional[ZoneVizConfig] = None,
) -> DashboardSnapshot:
    """Render every zone and resolve the detail panel for the current state."""
    cfg = config or VIZ_CONFIG
    state = selection.state

    renders = tuple(render_zone(z, state.heatmap_visible, cfg) for z in registry)

    counts = Counter(r.visual.level.value for r in renders if r.visual is not None)
    level_counts = {lv.value: counts.get(lv.value, 0) for lv in Level}

    warnings: List[str] = []
    for r in renders:
        if r.report.warning is not None:
            warnings.append(f"{r.zone.name}: {r.report.warning.message}")
        if r.error is not None:
            warnings.append(f"{r.zone.name}: {DATA_UNAVAILABLE}")

    detail = resolve_detail(state, registry, state.heatmap_visible, cfg)

    return DashboardSnapshot(
        renders=renders,
        selection=state,
        detail=detail,
        map_view=compute_map_view(registry.zones, cfg),
        legend=tuple(legend_entries(cfg.level_colors)),
        level_counts=level_counts,
        warnings=tuple(warnings),
    )
