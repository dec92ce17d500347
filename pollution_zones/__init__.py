"""
Pollution Zone Classification & Visualization Engine

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Turn air-quality zone records into map-ready parameters:
severity level and colour per zone, ranked violator contributions, marker
size/emphasis, concentric heatmap rings, and the selection state that drives
the zone detail panel.

Key Features:
- Six-level AQI classification with exact half-open bands
- Advisory (never fatal) checks on violator contribution totals
- Clamped marker radius and monotone heatmap rings
- Per-zone failure isolation ("data unavailable" instead of a crash)

Usage:
    from pollution_zones import ZoneRegistry, ZoneSelection, build_dashboard

    registry = ZoneRegistry.from_records(records)
    selection = ZoneSelection()
    selection.select_zone("2")
    snapshot = build_dashboard(registry, selection)

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

from .errors import ZoneEngineError, InvalidReading, InvalidLevel
from .models import Contribution, DataQualityWarning, Level, ViolatorType, Zone
from .classifier import classify, color_of, legend_entries
from .aggregator import AggregateReport, aggregate, top_contributor
from .visual_params import HeatmapLayer, VisualParams, derive_visual
from .selection import SelectionState, ZoneSelection
from .registry import ZoneRegistry
from .dashboard import (
    DashboardSnapshot,
    DetailPanel,
    ZoneRender,
    build_dashboard,
    render_zone,
    resolve_detail,
)
from .viz_config_types import VIZ_CONFIG, ZoneVizConfig

__all__ = [
    # Errors
    "ZoneEngineError",
    "InvalidReading",
    "InvalidLevel",
    # Models
    "Contribution",
    "DataQualityWarning",
    "Level",
    "ViolatorType",
    "Zone",
    # Engine
    "classify",
    "color_of",
    "legend_entries",
    "AggregateReport",
    "aggregate",
    "top_contributor",
    "HeatmapLayer",
    "VisualParams",
    "derive_visual",
    "SelectionState",
    "ZoneSelection",
    "ZoneRegistry",
    # Dashboard
    "DashboardSnapshot",
    "DetailPanel",
    "ZoneRender",
    "build_dashboard",
    "render_zone",
    "resolve_detail",
    # Config
    "VIZ_CONFIG",
    "ZoneVizConfig",
]
