#!/usr/bin/env python3
"""
Pollution Zone Data Exporter

Exports a dashboard snapshot as GeoJSON (zones as points with their derived
marker, heatmap and violator properties) plus the map view, legend and
selection state, so a map front end can draw it without importing Python.

Usage:
    from pollution_zones.export_data import export_dashboard_json

    export_dashboard_json(snapshot, output_dir=Path("Output"))
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging

import geopandas as gpd
from shapely.geometry import Point, mapping

from .dashboard import DashboardSnapshot, ZoneRender

# ═══════════════════════════════════════════════════════════════════════════
# 🔧 CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════

CRS_WGS84 = "EPSG:4326"

OUTPUT_FILENAME = "pollution_zones.json"

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════
# 🗺️ GEOJSON CONVERSION
# ═══════════════════════════════════════════════════════════════════════════


def _zone_point(render: ZoneRender) -> Point:
    # GeoJSON order is (lon, lat)
    return Point(render.zone.longitude, render.zone.latitude)


def _zone_properties(render: ZoneRender) -> Dict[str, Any]:
    props = render.to_dict()
    zone = props.pop("zone")
    props.update(
        {
            "id": zone["id"],
            "name": zone["name"],
            "aqi": zone["aqi"],
            "violators": zone["violators"],
        }
    )
    return props


def zones_to_geojson(snapshot: DashboardSnapshot) -> Dict[str, Any]:
    """Convert rendered zones to a GeoJSON FeatureCollection."""
    features = [
        {
            "type": "Feature",
            "geometry": mapping(_zone_point(render)),
            "properties": _zone_properties(render),
        }
        for render in snapshot.renders
    ]
    return {"type": "FeatureCollection", "features": features}


def zones_to_geodataframe(snapshot: DashboardSnapshot) -> gpd.GeoDataFrame:
    """Flat GeoDataFrame of zones (one row per zone) for analysis or shapefiles."""
    rows = []
    for render in snapshot.renders:
        visual = render.visual
        rows.append(
            {
                "zone_id": render.zone.id,
                "name": render.zone.name,
                "aqi": render.zone.aqi,
                "level": visual.level.value if visual else None,
                "color": visual.color if visual else None,
                "marker_radius": visual.marker_radius if visual else None,
                "emphasis": visual.marker_emphasis if visual else None,
                "total_pct": render.report.total_percent,
                "available": render.available,
                "geometry": _zone_point(render),
            }
        )
    return gpd.GeoDataFrame(rows, geometry="geometry", crs=CRS_WGS84)


# ═══════════════════════════════════════════════════════════════════════════
# 📤 EXPORT FUNCTION
# ═══════════════════════════════════════════════════════════════════════════


def export_dashboard_json(
    snapshot: DashboardSnapshot,
    output_dir: Path,
    log: Optional[logging.Logger] = None,
) -> Path:
    """
    Write a dashboard snapshot to a standalone JSON file.

    Args:
        snapshot: Output of build_dashboard()
        output_dir: Directory to write the output file
        log: Optional logger

    Returns:
        Path to the created JSON file.

    Output Format:
        {
            "crs": "EPSG:4326",
            "map": {"center": [lat, lon], "bounds": [...], "zoom": 12},
            "legend": [{"level": "excellent", "range": "0-49", ...}],
            "selection": {"selected_zone_id": "2", ...},
            "detail": {"status": "ok", ...},
            "level_counts": {"excellent": 1, ...},
            "warnings": [...],
            "zones": {"type": "FeatureCollection", "features": [...]}
        }
    """
    log = log or logger

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    data = snapshot.to_dict()
    output_data = {
        "crs": CRS_WGS84,
        "map": data["map"],
        "legend": data["legend"],
        "selection": data["selection"],
        "detail": data["detail"],
        "level_counts": data["level_counts"],
        "warnings": data["warnings"],
        "zones": zones_to_geojson(snapshot),
    }

    output_path = output_dir / OUTPUT_FILENAME
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    log.info(f"📄 Exported pollution zone data: {output_path}")
    log.info(
        f"   {len(snapshot.renders)} zones, {snapshot.available_count} available, "
        f"{len(snapshot.warnings)} warnings"
    )

    return output_path
