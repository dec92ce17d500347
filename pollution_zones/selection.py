"""
Zone selection state machine.

Holds the dashboard's UI state: which zone (if any) is selected, whether the
heatmap is shown, and whether the map is fullscreen. Selection and the two
toggles are independent of each other.

Transitions fire one at a time from the UI event loop, so there is no locking.
The machine never checks that a selected id exists; resolving it against the
registry is the detail panel's job (see dashboard.resolve_detail).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """Read-only snapshot of the selection machine."""

    selected_zone_id: Optional[str] = None
    heatmap_visible: bool = True
    fullscreen: bool = False

    @property
    def is_selected(self) -> bool:
        return self.selected_zone_id is not None

    @property
    def detail_panel_active(self) -> bool:
        return not self.fullscreen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected_zone_id": self.selected_zone_id,
            "heatmap_visible": self.heatmap_visible,
            "fullscreen": self.fullscreen,
        }


class ZoneSelection:
    """Mutable selection machine for one dashboard session.

    States: unselected | selected(zone_id), crossed with the heatmap_visible
    and fullscreen toggles. Initial state: unselected, heatmap visible,
    not fullscreen.
    """

    def __init__(self):
        self._selected_zone_id: Optional[str] = None
        self._heatmap_visible = True
        self._fullscreen = False

    def __repr__(self):
        return (
            f"<ZoneSelection selected={self._selected_zone_id!r} "
            f"heatmap={self._heatmap_visible} fullscreen={self._fullscreen}>"
        )

    # === READ ACCESSORS ===

    @property
    def selected_zone_id(self) -> Optional[str]:
        return self._selected_zone_id

    @property
    def heatmap_visible(self) -> bool:
        return self._heatmap_visible

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @property
    def detail_panel_active(self) -> bool:
        """The detail panel is hidden (not cleared) while fullscreen."""
        return not self._fullscreen

    @property
    def state(self) -> SelectionState:
        return SelectionState(
            selected_zone_id=self._selected_zone_id,
            heatmap_visible=self._heatmap_visible,
            fullscreen=self._fullscreen,
        )

    # === TRANSITIONS ===

    def select_zone(self, zone_id: str) -> SelectionState:
        """Select a zone, or deselect it if it is already selected."""
        if self._selected_zone_id == zone_id:
            self._selected_zone_id = None
            logger.debug(f"Deselected zone {zone_id}")
        else:
            self._selected_zone_id = zone_id
            logger.debug(f"Selected zone {zone_id}")
        return self.state

    def toggle_heatmap(self) -> SelectionState:
        self._heatmap_visible = not self._heatmap_visible
        logger.debug(f"Heatmap visible: {self._heatmap_visible}")
        return self.state

    def enter_fullscreen(self) -> SelectionState:
        self._fullscreen = True
        logger.debug("Entered fullscreen")
        return self.state

    def exit_fullscreen(self) -> SelectionState:
        self._fullscreen = False
        logger.debug("Exited fullscreen")
        return self.state

    def toggle_fullscreen(self) -> SelectionState:
        """Single-button variant of enter/exit fullscreen."""
        if self._fullscreen:
            return self.exit_fullscreen()
        return self.enter_fullscreen()
