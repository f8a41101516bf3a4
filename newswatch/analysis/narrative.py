"""
Narrative tracker - follows narratives as they move between source tiers.

Tracks:
- Emerging fringe narratives (fringe/alternative coverage only)
- Fringe-to-mainstream crossovers (both tiers covering the same narrative)
- Disinformation signals (high amplification, little fact-checking)
- Narrative watch (everything else that is active)
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Literal

from loguru import logger

from newswatch.analysis.config import DEFAULT_CONFIG, DetectorConfig, NarrativePattern
from newswatch.analysis.history import NarrativeHistory, NarrativeHistoryEntry
from newswatch.analysis.matching import contains_any, find_phrases
from newswatch.analysis.sources import FRINGE_TIERS, MAINSTREAM_TIERS, SourceClassifier
from newswatch.analysis.types import (
    DisinfoSignal,
    EmergingFringe,
    FringeToMainstream,
    HeadlineMatch,
    NarrativeData,
    NarrativeResults,
    NarrativeStage,
    NarrativeSummary,
    NewsItem,
    coerce_news_items,
)
from newswatch.settings import Settings, global_settings
from newswatch.utils import (
    format_display_name,
    minutes_between,
    round_half_up,
    to_epoch_seconds,
)

BREAKDOWN_TIERS = (
    "fringe",
    "alternative",
    "mainstream",
    "institutional",
    "aggregator",
    "unknown",
)

RISK_ORDER = {"high": 3, "medium": 2, "low": 1}
THREAT_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}


class NarrativeTracker:
    """
    Detects narratives in headlines and classifies how they propagate.

    First-seen times, tier snapshots and count samples per narrative live in
    the injected NarrativeHistory.
    """

    DEBUNKED_THRESHOLD = 60
    DISPUTED_THRESHOLD = 30
    CROSSOVER_SETTLE_MINUTES = 30
    COORDINATED_MAX_GAP_SECONDS = 120
    MAX_COUNTERMEASURES = 3

    def __init__(
        self,
        config: DetectorConfig | None = None,
        history: NarrativeHistory | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or global_settings
        self.config = config or DEFAULT_CONFIG
        self.history = history or NarrativeHistory(
            self.settings.narrative_history_minutes
        )
        self.classifier = SourceClassifier(self.config.source_types)

    @property
    def narratives(self) -> tuple[NarrativePattern, ...]:
        return self.config.narratives

    def _match_headlines(
        self, narrative: NarrativePattern, items: list[NewsItem]
    ) -> list[HeadlineMatch]:
        seen_links: set[str] = set()
        matches: list[HeadlineMatch] = []

        for item in items:
            keywords = find_phrases(item.title, narrative.keywords)
            if not keywords:
                continue
            if item.link:
                if item.link in seen_links:
                    continue
                seen_links.add(item.link)

            matches.append(
                HeadlineMatch(
                    title=item.title,
                    link=item.link,
                    source=item.source,
                    source_type=self.classifier.classify(
                        item.source, include_aggregator=True
                    ),
                    timestamp=item.timestamp,
                    has_amplification=contains_any(
                        item.title, narrative.amplification_phrases
                    ),
                    has_debunk=contains_any(item.title, narrative.debunk_indicators),
                    matched_keywords=keywords,
                )
            )
        return matches

    @staticmethod
    def amplification_score(headlines: list[HeadlineMatch]) -> int:
        if not headlines:
            return 0
        amplified = [h for h in headlines if h.has_amplification]
        mainstream_amplified = sum(
            1 for h in amplified if h.source_type in MAINSTREAM_TIERS
        )
        score = len(amplified) / len(headlines) * 50 + mainstream_amplified * 15
        return min(100, round_half_up(score))

    @staticmethod
    def debunk_score(headlines: list[HeadlineMatch]) -> int:
        if not headlines:
            return 0
        debunked = [h for h in headlines if h.has_debunk]
        mainstream_debunked = sum(
            1 for h in debunked if h.source_type in MAINSTREAM_TIERS
        )
        score = len(debunked) / len(headlines) * 40 + mainstream_debunked * 20
        return min(100, round_half_up(score))

    def _velocity(self, entry: NarrativeHistoryEntry, count: int, now: datetime) -> int:
        """Mentions per hour over the velocity window."""
        if len(entry.count_history) < 2:
            return 0
        window = self.settings.narrative_velocity_window
        recent = [
            s for s in entry.count_history if minutes_between(s.timestamp, now) < window
        ]
        if len(recent) < 2:
            return 0
        oldest = recent[0]
        minutes = minutes_between(oldest.timestamp, now)
        if minutes <= 0:
            return 0
        return round_half_up((count - oldest.count) / minutes * 60)

    def _stage(
        self,
        entry: NarrativeHistoryEntry,
        fringe: int,
        mainstream: int,
        debunk_score: int,
        now: datetime,
    ) -> NarrativeStage:
        if debunk_score >= self.DEBUNKED_THRESHOLD:
            return "debunked"
        if fringe + mainstream == 0:
            return "nascent"

        crossed_at = entry.fringe_to_mainstream_time
        if (
            crossed_at is not None
            and minutes_between(crossed_at, now) > self.CROSSOVER_SETTLE_MINUTES
            and mainstream > fringe
        ):
            return "mainstream"
        if fringe > 0 and mainstream > 0:
            return "crossing"
        if mainstream > fringe:
            return "mainstream"
        if fringe >= 3:
            return "spreading"
        if fringe >= 1:
            return "emerging"
        return "nascent"

    @staticmethod
    def _predict_crossover(
        velocity: int, fringe: int, mainstream: int, amplification: int
    ) -> bool:
        if mainstream > 0:
            return False
        return (
            (velocity >= 5 and fringe >= 3)
            or (amplification >= 50 and fringe >= 2)
            or fringe >= 5
        )

    @staticmethod
    def _spread_rate(
        velocity: int, count: int
    ) -> Literal["slow", "moderate", "fast", "explosive"]:
        if velocity >= 20 or count >= 10:
            return "explosive"
        if velocity >= 10 or count >= 7:
            return "fast"
        if velocity >= 5 or count >= 4:
            return "moderate"
        return "slow"

    @staticmethod
    def _crossover_direction(
        entry: NarrativeHistoryEntry,
    ) -> Literal["fringe-to-mainstream", "mainstream-to-fringe", "simultaneous"]:
        if not entry.source_types_over_time:
            return "simultaneous"
        first = set(entry.source_types_over_time[0].tiers)
        had_fringe = bool(first & FRINGE_TIERS)
        had_mainstream = bool(first & MAINSTREAM_TIERS)
        if had_fringe and not had_mainstream:
            return "fringe-to-mainstream"
        if had_mainstream and not had_fringe:
            return "mainstream-to-fringe"
        return "simultaneous"

    def _validation_status(
        self, data: NarrativeData
    ) -> Literal["unverified", "partially-verified", "verified", "disputed", "debunked"]:
        if data.debunk_score >= self.DEBUNKED_THRESHOLD:
            return "debunked"
        if data.debunk_score >= self.DISPUTED_THRESHOLD:
            return "disputed"
        if (
            data.institutional_count > 0
            and data.mainstream_count > 0
            and data.fringe_count == 0
        ):
            return "verified"
        if data.mainstream_count > 0 and data.fringe_count == 0:
            return "partially-verified"
        return "unverified"

    @staticmethod
    def _threat_level(
        amplification: int, mainstream: int
    ) -> Literal["low", "medium", "high", "critical"]:
        if amplification >= 70 and mainstream > 0:
            return "critical"
        if amplification >= 50:
            return "high"
        if amplification >= 30:
            return "medium"
        return "low"

    def _spread_pattern(
        self, headlines: list[HeadlineMatch], velocity: int
    ) -> Literal["organic", "coordinated"]:
        """Coordinated when many headlines land in a tight burst."""
        timestamps = sorted(
            to_epoch_seconds(h.timestamp) for h in headlines if h.timestamp is not None
        )
        if len(timestamps) < 3 or velocity < 15:
            return "organic"
        gaps = [later - earlier for earlier, later in zip(timestamps, timestamps[1:])]
        if sum(gaps) / len(gaps) < self.COORDINATED_MAX_GAP_SECONDS:
            return "coordinated"
        return "organic"

    @staticmethod
    def _fringe_status(count: int) -> Literal["nascent", "emerging", "spreading", "viral"]:
        if count >= 8:
            return "viral"
        if count >= 5:
            return "spreading"
        if count >= 2:
            return "emerging"
        return "nascent"

    @staticmethod
    def _disinfo_indicators(data: NarrativeData, fringe: int) -> list[str]:
        indicators = []
        if data.amplification_score >= 50:
            indicators.append("High amplification")
        if data.velocity >= 10:
            indicators.append("Rapid spread")
        if fringe >= 3:
            indicators.append("Multi-source fringe presence")
        if data.debunk_score < 20 and data.count >= 3:
            indicators.append("Limited fact-checking")
        return indicators

    def _build_data(
        self,
        narrative: NarrativePattern,
        headlines: list[HeadlineMatch],
        entry: NarrativeHistoryEntry,
        now: datetime,
    ) -> NarrativeData:
        breakdown: dict[str, list[str]] = {tier: [] for tier in BREAKDOWN_TIERS}
        sources: list[str] = []
        matched_keywords: list[str] = []

        for h in headlines:
            if h.source not in breakdown[h.source_type]:
                breakdown[h.source_type].append(h.source)
            if h.source not in sources:
                sources.append(h.source)
            for keyword in h.matched_keywords:
                if keyword not in matched_keywords:
                    matched_keywords.append(keyword)

        fringe = len(breakdown["fringe"]) + len(breakdown["alternative"])
        mainstream = len(breakdown["mainstream"]) + len(breakdown["institutional"])
        debunk = self.debunk_score(headlines)

        return NarrativeData(
            id=narrative.id,
            name=format_display_name(narrative.id),
            category=narrative.category,
            severity=narrative.severity,
            count=len(headlines),
            fringe_count=len(breakdown["fringe"]),
            alternative_count=len(breakdown["alternative"]),
            mainstream_count=len(breakdown["mainstream"]),
            institutional_count=len(breakdown["institutional"]),
            sources=sources[: self.settings.narrative_max_sources],
            source_breakdown=breakdown,
            headlines=headlines[: self.settings.narrative_max_headlines],
            keywords=list(narrative.keywords),
            matched_keywords=matched_keywords,
            amplification_score=self.amplification_score(headlines),
            debunk_score=debunk,
            stage=self._stage(entry, fringe, mainstream, debunk, now),
            velocity=self._velocity(entry, len(headlines), now),
            first_seen=entry.first_seen,
            time_since_first_seen=round_half_up(minutes_between(entry.first_seen, now)),
        )

    def analyze(
        self,
        news_items: Iterable[NewsItem | dict[str, Any]] | None,
        now: datetime | None = None,
    ) -> NarrativeResults | None:
        """
        Analyze news items for narrative propagation.

        Args:
            news_items: NewsItem models or dicts with 'title', 'link', 'source'
                and optional 'timestamp'
            now: Clock override; defaults to the current time

        Returns:
            NarrativeResults or None if no items
        """
        items = coerce_news_items(news_items)
        if not items:
            return None

        now = now or datetime.now()
        self.history.prune(now)

        results = NarrativeResults()
        category_totals: dict[str, int] = {}

        for narrative in self.narratives:
            headlines = self._match_headlines(narrative, items)
            if not headlines:
                continue

            results.active_narratives += 1
            category_totals[narrative.category] = (
                category_totals.get(narrative.category, 0) + len(headlines)
            )

            tiers = [h.source_type for h in headlines]
            entry = self.history.record(
                narrative.id,
                now,
                sources=[h.source for h in headlines],
                tiers=tiers,
                count=len(headlines),
                has_mainstream=any(t in MAINSTREAM_TIERS for t in tiers),
            )
            data = self._build_data(narrative, headlines, entry, now)
            fringe = data.fringe_count + data.alternative_count
            mainstream = data.mainstream_count + data.institutional_count
            fields = data.model_dump()

            if fringe > 0 and mainstream > 0:
                results.crossing_narratives += 1
                crossover_level = round_half_up(mainstream / (mainstream + fringe) * 100)
                time_to_mainstream = None
                if entry.fringe_to_mainstream_time is not None:
                    time_to_mainstream = round_half_up(
                        minutes_between(entry.first_seen, entry.fringe_to_mainstream_time)
                    )
                results.fringe_to_mainstream.append(
                    FringeToMainstream(
                        **fields,
                        status="crossed" if crossover_level >= 50 else "crossing",
                        crossover_level=crossover_level,
                        crossover_direction=self._crossover_direction(entry),
                        time_to_mainstream=time_to_mainstream,
                        validation_status=self._validation_status(data),
                    )
                )
            elif narrative.severity == "disinfo" or (
                data.amplification_score >= 50
                and data.debunk_score < self.DISPUTED_THRESHOLD
            ):
                threat = self._threat_level(data.amplification_score, mainstream)
                if threat in ("high", "critical"):
                    results.high_risk_count += 1
                results.disinfo_signals.append(
                    DisinfoSignal(
                        **fields,
                        threat_level=threat,
                        indicators=self._disinfo_indicators(data, fringe),
                        countermeasures=[
                            h.title for h in headlines if h.has_debunk
                        ][: self.MAX_COUNTERMEASURES],
                        spread_pattern=self._spread_pattern(headlines, data.velocity),
                    )
                )
            elif fringe > 0:
                predicted = self._predict_crossover(
                    data.velocity, fringe, mainstream, data.amplification_score
                )
                if predicted and data.amplification_score >= 40:
                    risk = "high"
                elif data.amplification_score >= 30 or data.velocity >= 10:
                    risk = "medium"
                else:
                    risk = "low"
                if risk == "high":
                    results.high_risk_count += 1
                results.emerging_fringe.append(
                    EmergingFringe(
                        **fields,
                        status=self._fringe_status(data.count),
                        spread_rate=self._spread_rate(data.velocity, data.count),
                        predicted_crossover=predicted,
                        risk_level=risk,
                    )
                )
            else:
                results.narrative_watch.append(data)

        critical_disinfo = any(
            d.threat_level == "critical" for d in results.disinfo_signals
        )
        if results.high_risk_count >= 3 or critical_disinfo:
            results.overall_threat_level = "critical"
        elif results.high_risk_count >= 2 or results.crossing_narratives >= 3:
            results.overall_threat_level = "high"
        elif results.high_risk_count >= 1 or results.crossing_narratives >= 1:
            results.overall_threat_level = "elevated"

        if category_totals:
            results.dominant_category = max(
                category_totals.items(), key=lambda x: x[1]
            )[0]

        results.emerging_fringe.sort(
            key=lambda x: (RISK_ORDER[x.risk_level], x.count), reverse=True
        )
        results.fringe_to_mainstream.sort(key=lambda x: x.crossover_level, reverse=True)
        results.narrative_watch.sort(key=lambda x: x.count, reverse=True)
        results.disinfo_signals.sort(
            key=lambda x: THREAT_ORDER[x.threat_level], reverse=True
        )

        logger.info(
            f"Narratives: {results.active_narratives} active, "
            f"{len(results.emerging_fringe)} fringe, "
            f"{results.crossing_narratives} crossing, "
            f"{len(results.disinfo_signals)} disinfo "
            f"[{results.overall_threat_level}]"
        )
        return results

    def get_summary(self, results: NarrativeResults | None) -> NarrativeSummary:
        if results is None:
            return NarrativeSummary(total=0, status="NO DATA")

        if results.overall_threat_level == "critical":
            status = "CRITICAL"
        elif results.high_risk_count > 0:
            status = f"{results.high_risk_count} HIGH RISK"
        elif results.crossing_narratives > 0:
            status = f"{results.crossing_narratives} CROSSING"
        elif results.active_narratives > 0:
            status = f"{results.active_narratives} ACTIVE"
        else:
            status = "MONITORING"

        return NarrativeSummary(
            total=results.total,
            status=status,
            threat_level=results.overall_threat_level,
            crossing_count=results.crossing_narratives,
        )

    def clear_history(self) -> None:
        self.history.clear()
