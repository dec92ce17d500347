"""
Violator contribution aggregation.

Sums and ranks the pollution sources attributed to a zone. Totals that stray
from 100% produce an advisory DataQualityWarning; they are never rejected or
rescaled, because upstream data routinely carries rounding and partial
attributions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .models import Contribution, DataQualityWarning

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_BAND: Tuple[float, float] = (95.0, 105.0)


@dataclass(frozen=True)
class AggregateReport:
    """Aggregate view of one zone's violators.

    Attributes:
        total_percent: Sum of all contribution shares
        ranked_by_share_desc: Same entries, highest share first, ties in input order
        warning: Set when total_percent is outside the tolerance band
    """

    total_percent: float
    ranked_by_share_desc: Tuple[Contribution, ...]
    warning: Optional[DataQualityWarning] = None

    @property
    def top(self) -> Optional[Contribution]:
        return self.ranked_by_share_desc[0] if self.ranked_by_share_desc else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_percent": self.total_percent,
            "ranked_by_share_desc": [c.as_dict() for c in self.ranked_by_share_desc],
            "warning": self.warning.as_dict() if self.warning else None,
        }


def aggregate(
    violators: Sequence[Contribution],
    tolerance_band: Tuple[float, float] = DEFAULT_TOLERANCE_BAND,
) -> AggregateReport:
    """Sum and rank a zone's violator contributions.

    An empty list is valid: total 0, no ranking, no warning.

    Args:
        violators: Contributions in input order
        tolerance_band: (lower, upper) inclusive band for an acceptable total

    Returns:
        AggregateReport
    """
    entries = tuple(violators)
    total = sum(c.contribution for c in entries)
    # sorted() is stable, so equal shares keep their input order
    ranked = tuple(sorted(entries, key=lambda c: c.contribution, reverse=True))

    warning = None
    lower, upper = tolerance_band
    if entries and not lower <= total <= upper:
        warning = DataQualityWarning(total_percent=total, lower=lower, upper=upper)
        logger.warning(f"⚠️ {warning.message}")

    return AggregateReport(
        total_percent=total, ranked_by_share_desc=ranked, warning=warning
    )


def top_contributor(violators: Sequence[Contribution]) -> Optional[Contribution]:
    """Highest-share contribution, first occurrence on ties, None if empty."""
    best = None
    for c in violators:
        if best is None or c.contribution > best.contribution:
            best = c
    return best
