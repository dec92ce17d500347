#!/usr/bin/env python3
"""
Pollution Zone Dashboard Entry Point

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Load a sample city into a ZoneRegistry, apply a selection,
build the dashboard snapshot and export it as JSON for a map front end.

Usage:
    python -m pollution_zones.main
    python -m pollution_zones.main new_delhi 2

Output:
    Output/pollution_zones.json

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Fix Windows console encoding for emoji support
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from .dashboard import build_dashboard
from .export_data import export_dashboard_json
from .registry import ZoneRegistry
from .sample_zones import SAMPLE_CITIES
from .selection import ZoneSelection

DEFAULT_CITY = "dehradun"

# ═══════════════════════════════════════════════════════════════════════════════
# 📋 LOGGING SETUP
# ═══════════════════════════════════════════════════════════════════════════════


def setup_logging() -> logging.Logger:
    """Configure console logging for the package.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("pollution_zones")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)

    return logger


# ═══════════════════════════════════════════════════════════════════════════════
# 🚀 MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pollution zone dashboard export."""
    args = sys.argv[1:] if argv is None else argv
    city = args[0] if args else DEFAULT_CITY
    selected = args[1] if len(args) > 1 else None

    logger = setup_logging()

    logger.info("=" * 60)
    logger.info("🚀 POLLUTION ZONE DASHBOARD")
    logger.info("=" * 60)
    logger.info(f"⏰ Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    if city not in SAMPLE_CITIES:
        logger.error(f"❌ Unknown city {city!r}; choose from {sorted(SAMPLE_CITIES)}")
        return 1

    registry = ZoneRegistry.from_records(SAMPLE_CITIES[city])
    selection = ZoneSelection()
    if selected is not None:
        selection.select_zone(selected)

    snapshot = build_dashboard(registry, selection)

    for render in snapshot.renders:
        marker = "🔴" if render.visual and render.visual.marker_emphasis else "📍"
        logger.info(f"   {marker} {render.zone.name}: {render.status_text}")
    for warning in snapshot.warnings:
        logger.info(f"   ⚠️ {warning}")

    output_dir = Path.cwd() / "Output"
    output_path = export_dashboard_json(snapshot, output_dir, log=logger)

    logger.info("=" * 60)
    logger.info("✅ DASHBOARD EXPORT COMPLETE")
    logger.info(f"   📍 Zones: {len(snapshot.renders)}")
    logger.info(f"   🔎 Detail panel: {snapshot.detail.status}")
    logger.info(f"   📄 Output: {output_path.absolute()}")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
