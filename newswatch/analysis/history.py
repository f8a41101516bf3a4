"""
Rolling history stores.

Each analyzer owns exactly one store instance. Stores are plain in-process
state with no locking: callers serialize calls against one analyzer, and
parallel analyzers need independent stores.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from loguru import logger


@dataclass
class CountSample:
    timestamp: datetime
    count: int


@dataclass
class TierSnapshot:
    timestamp: datetime
    tiers: tuple[str, ...]


@dataclass
class TopicPeak:
    count: int
    timestamp: datetime


class MinuteBucketHistory:
    """
    Per-minute snapshots: {minute: {detector_id: value}}.

    One snapshot per bucket. A second write to a bucket that is already
    populated is ignored, so repeated calls inside the same minute never
    double count.
    """

    def __init__(self, retention_minutes: int = 60):
        self.retention_minutes = retention_minutes
        self._buckets: dict[int, dict[str, int]] = {}

    def __contains__(self, minute: int) -> bool:
        return minute in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def record(self, minute: int, snapshot: dict[str, int]) -> bool:
        """Store snapshot for minute unless present. Returns True if written."""
        if minute in self._buckets:
            return False
        self._buckets[minute] = dict(snapshot)
        self.prune(minute)
        return True

    def get(self, minute: int) -> dict[str, int]:
        return dict(self._buckets.get(minute, {}))

    def find_oldest(
        self, key: str, minute: int, lookback_minutes: int
    ) -> tuple[int, int] | None:
        """
        Oldest (minute, value) holding key within lookback_minutes before minute.

        The current bucket itself is never considered.
        """
        for offset in range(lookback_minutes, 0, -1):
            bucket = self._buckets.get(minute - offset)
            if bucket is not None and key in bucket:
                return minute - offset, bucket[key]
        return None

    def prune(self, minute: int) -> int:
        cutoff = minute - self.retention_minutes
        stale = [k for k in self._buckets if k < cutoff]
        for key in stale:
            del self._buckets[key]
        if stale:
            logger.debug(f"Pruned {len(stale)} history buckets older than {cutoff}")
        return len(stale)

    def clear(self) -> None:
        self._buckets.clear()


class SampleHistory:
    """Time-ordered (timestamp, count) samples per key."""

    def __init__(self, retention: timedelta = timedelta(minutes=30)):
        self.retention = retention
        self._samples: dict[str, list[CountSample]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def append(self, key: str, timestamp: datetime, count: int) -> list[CountSample]:
        samples = self._samples.setdefault(key, [])
        samples.append(CountSample(timestamp=timestamp, count=count))
        if len(samples) > 1 and samples[-2].timestamp > timestamp:
            samples.sort(key=lambda s: s.timestamp)

        cutoff = timestamp - self.retention
        samples[:] = [s for s in samples if s.timestamp > cutoff]
        return list(samples)

    def samples(self, key: str) -> list[CountSample]:
        return list(self._samples.get(key, []))

    def prune(self, now: datetime) -> int:
        """Drop samples older than retention and keys left without samples."""
        cutoff = now - self.retention
        removed = 0
        for key in list(self._samples):
            kept = [s for s in self._samples[key] if s.timestamp > cutoff]
            if kept:
                self._samples[key] = kept
            else:
                del self._samples[key]
                removed += 1
        if removed:
            logger.debug(f"Pruned {removed} idle sample histories")
        return removed

    def clear(self) -> None:
        self._samples.clear()


class CorrelationHistory:
    """Count and delta snapshots per minute plus all-time topic peaks."""

    def __init__(self, retention_minutes: int = 60):
        self.counts = MinuteBucketHistory(retention_minutes)
        self.deltas = MinuteBucketHistory(retention_minutes)
        self.peaks: dict[str, TopicPeak] = {}

    def update_peak(self, topic_id: str, count: int, timestamp: datetime) -> TopicPeak:
        peak = self.peaks.get(topic_id)
        if peak is None or count > peak.count:
            peak = TopicPeak(count=count, timestamp=timestamp)
            self.peaks[topic_id] = peak
        return peak

    def clear(self) -> None:
        self.counts.clear()
        self.deltas.clear()
        self.peaks.clear()


@dataclass
class NarrativeHistoryEntry:
    first_seen: datetime
    sources: set[str] = field(default_factory=set)
    source_types_over_time: list[TierSnapshot] = field(default_factory=list)
    count_history: list[CountSample] = field(default_factory=list)
    fringe_to_mainstream_time: datetime | None = None

    @property
    def last_seen(self) -> datetime:
        if self.count_history:
            return self.count_history[-1].timestamp
        return self.first_seen


class NarrativeHistory:
    """Per-narrative lifecycle history keyed by narrative id."""

    def __init__(self, retention_minutes: int = 120):
        self.retention = timedelta(minutes=retention_minutes)
        self._entries: dict[str, NarrativeHistoryEntry] = {}

    def __contains__(self, narrative_id: str) -> bool:
        return narrative_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, narrative_id: str) -> NarrativeHistoryEntry | None:
        return self._entries.get(narrative_id)

    def record(
        self,
        narrative_id: str,
        now: datetime,
        sources: list[str],
        tiers: list[str],
        count: int,
        has_mainstream: bool,
    ) -> NarrativeHistoryEntry:
        """Append one observation and prune the entry's series by age."""
        entry = self._entries.get(narrative_id)
        if entry is None:
            entry = NarrativeHistoryEntry(first_seen=now)
            self._entries[narrative_id] = entry

        entry.sources.update(sources)

        cutoff = now - self.retention
        entry.source_types_over_time.append(
            TierSnapshot(timestamp=now, tiers=tuple(tiers))
        )
        entry.source_types_over_time = [
            s for s in entry.source_types_over_time if s.timestamp > cutoff
        ]
        entry.count_history.append(CountSample(timestamp=now, count=count))
        entry.count_history = [s for s in entry.count_history if s.timestamp > cutoff]

        if has_mainstream and entry.fringe_to_mainstream_time is None:
            entry.fringe_to_mainstream_time = now
        return entry

    def prune(self, now: datetime) -> int:
        """Forget narratives that have not been observed within retention."""
        cutoff = now - self.retention
        stale = [k for k, e in self._entries.items() if e.last_seen <= cutoff]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Pruned {len(stale)} dormant narratives")
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
