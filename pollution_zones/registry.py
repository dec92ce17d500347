"""
In-memory zone registry.

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Hold the ordered collection of Zone records for one dashboard
session. The registry is filled from whatever data source the host uses
(plain dict records or a GeoDataFrame of points) and is always replaced
wholesale on refresh, never patched zone by zone.

Key Features:
- Malformed records are logged and skipped (kept in `rejected`), so one bad
  record never aborts a refresh
- Duplicate ids: first record wins, later ones are rejected
- Stored "level" values on input records are ignored; a disagreement with the
  computed level is logged as a data-quality problem

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import geopandas as gpd
import numpy as np

from .errors import InvalidReading
from .models import Zone, stored_level

logger = logging.getLogger(__name__)

CRS_WGS84 = "EPSG:4326"


@dataclass(frozen=True)
class RejectedRecord:
    """A record the registry could not load, with the reason."""

    record: Dict[str, Any]
    reason: str


class ZoneRegistry:
    """Ordered, id-indexed collection of zones.

    Usage:
        registry = ZoneRegistry.from_records(records)
        zone = registry.get("2")
        registry.refresh(new_records)   # wholesale replace
    """

    def __init__(self, zones: Iterable[Zone] = ()):
        self._zones: Tuple[Zone, ...] = ()
        self._by_id: Dict[str, Zone] = {}
        self._rejected: Tuple[RejectedRecord, ...] = ()
        self._generation = 0
        initial = list(zones)
        if initial:
            self._install(initial, [])

    def __len__(self) -> int:
        return len(self._zones)

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones)

    def __contains__(self, zone_id: object) -> bool:
        return zone_id in self._by_id

    def __repr__(self):
        return f"<ZoneRegistry zones={len(self._zones)} generation={self._generation}>"

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return self._zones

    @property
    def rejected(self) -> Tuple[RejectedRecord, ...]:
        """Records dropped by the most recent load/refresh."""
        return self._rejected

    @property
    def generation(self) -> int:
        """Incremented on every wholesale replacement."""
        return self._generation

    def get(self, zone_id: Optional[str]) -> Optional[Zone]:
        if zone_id is None:
            return None
        return self._by_id.get(zone_id)

    # === LOADING ===

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "ZoneRegistry":
        registry = cls()
        registry.refresh(records)
        return registry

    @classmethod
    def from_geodataframe(
        cls,
        gdf: gpd.GeoDataFrame,
        id_field: str = "id",
        name_field: str = "name",
        aqi_field: str = "aqi",
        violators_field: str = "violators",
    ) -> "ZoneRegistry":
        """Build a registry from a GeoDataFrame of zone points.

        Geometries are reprojected to WGS84 when the frame carries another CRS.
        """
        registry = cls()
        registry.refresh(
            _records_from_geodataframe(
                gdf, id_field, name_field, aqi_field, violators_field
            )
        )
        return registry

    def refresh(self, records: Iterable[Dict[str, Any]]) -> int:
        """Replace all zones with the given records.

        Returns:
            The new generation number
        """
        zones: List[Zone] = []
        rejected: List[RejectedRecord] = []
        for record in records:
            try:
                zone = Zone.from_dict(record)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                reason = f"missing field {e}" if isinstance(e, KeyError) else str(e)
                record_id = record.get("id") if isinstance(record, dict) else None
                logger.warning(f"⚠️ Skipping zone record {record_id!r}: {reason}")
                rejected.append(
                    RejectedRecord(
                        record=record if isinstance(record, dict) else {"raw": record},
                        reason=reason,
                    )
                )
                continue
            _check_stored_level(zone, record)
            zones.append(zone)

        self._install(zones, rejected)
        logger.info(
            f"📍 Loaded {len(self._zones)} zones "
            f"(generation {self._generation}, {len(self._rejected)} rejected)"
        )
        return self._generation

    def _install(self, zones: List[Zone], rejected: List[RejectedRecord]) -> None:
        by_id: Dict[str, Zone] = {}
        kept: List[Zone] = []
        for zone in zones:
            if zone.id in by_id:
                logger.warning(f"⚠️ Duplicate zone id {zone.id!r}, keeping the first")
                rejected.append(
                    RejectedRecord(record=zone.as_dict(), reason="duplicate id")
                )
                continue
            by_id[zone.id] = zone
            kept.append(zone)

        # Swap references in one step so readers never see a half-built registry
        self._zones, self._by_id, self._rejected = tuple(kept), by_id, tuple(rejected)
        self._generation += 1


# ═══════════════════════════════════════════════════════════════════════════════
# 🔧 HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def _check_stored_level(zone: Zone, record: Dict[str, Any]) -> None:
    claimed = stored_level(record)
    if claimed is None:
        return
    try:
        actual = zone.level.value
    except InvalidReading:
        return
    if claimed != actual:
        logger.warning(
            f"⚠️ Zone {zone.id} ({zone.name}): stored level {claimed!r} does not "
            f"match AQI {zone.aqi} -> {actual!r}; using {actual!r}"
        )


def _records_from_geodataframe(
    gdf: gpd.GeoDataFrame,
    id_field: str,
    name_field: str,
    aqi_field: str,
    violators_field: str,
) -> List[Dict[str, Any]]:
    if gdf.crs is not None and gdf.crs.to_epsg() != 4326:
        logger.info(f"🔄 Reprojecting zones from {gdf.crs} to WGS84 ({CRS_WGS84})")
        gdf = gdf.to_crs(CRS_WGS84)

    records = []
    for idx, row in gdf.iterrows():
        geom = row.geometry
        violators = row.get(violators_field)
        records.append(
            {
                "id": str(row.get(id_field, idx)),
                "name": row.get(name_field),
                # GeoJSON points are (lon, lat); zones store (lat, lon)
                "coordinates": [geom.y, geom.x],
                "aqi": _to_python_int(row.get(aqi_field)),
                "violators": _violators_list(row.get(id_field, idx), violators),
            }
        )
    return records


def _violators_list(zone_id: Any, value: Any) -> List[Any]:
    """Normalise a violators cell; file readers often hand back numpy arrays."""
    if isinstance(value, (list, tuple, np.ndarray)):
        return list(value)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return []
    logger.warning(
        f"⚠️ Zone {zone_id}: ignoring violators value of type {type(value).__name__}"
    )
    return []


def _to_python_int(value: Any) -> Any:
    # pandas hands back numpy scalars; the classifier expects builtin ints
    if hasattr(value, "item"):
        return value.item()
    return value
