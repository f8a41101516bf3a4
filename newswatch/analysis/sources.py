"""
Source classification - maps a publisher name to a reliability/ideology tier.
"""

from newswatch.analysis.config import SOURCE_TYPES, SourceTypes
from newswatch.analysis.types import SourceTier

# Fixed lookup priority; the first tier whose list matches wins.
TIER_PRIORITY: tuple[str, ...] = (
    "institutional",
    "mainstream",
    "fringe",
    "alternative",
    "aggregator",
)

FRINGE_TIERS = frozenset({"fringe", "alternative"})
MAINSTREAM_TIERS = frozenset({"mainstream", "institutional"})


class SourceClassifier:
    """Case-insensitive substring lookup against the configured tier lists."""

    def __init__(self, source_types: SourceTypes | None = None):
        self.source_types = source_types or SOURCE_TYPES

    def classify(
        self, source: str | None, include_aggregator: bool = False
    ) -> SourceTier:
        if not source:
            return "unknown"

        lower_source = source.lower()
        for tier in TIER_PRIORITY:
            if tier == "aggregator" and not include_aggregator:
                break
            if any(name in lower_source for name in getattr(self.source_types, tier)):
                return tier  # type: ignore[return-value]
        return "unknown"
