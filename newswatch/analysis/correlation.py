"""
Correlation engine - analyzes patterns across news items.

Detects:
- Emerging patterns (topics with 3+ mentions, weighted by topic importance)
- Momentum signals (rising/falling topic trends with acceleration)
- Cross-source correlations (same topic across source tiers, with consensus)
- Predictive signals (combined score-based predictions)
- Topic clusters (active topics sharing a category)
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from loguru import logger

from newswatch.analysis.config import DEFAULT_CONFIG, CorrelationTopic, DetectorConfig
from newswatch.analysis.history import CorrelationHistory
from newswatch.analysis.matching import find_phrases, matches_any
from newswatch.analysis.predictions import generate_prediction
from newswatch.analysis.sources import SourceClassifier
from newswatch.analysis.types import (
    CorrelationResults,
    CorrelationSummary,
    CrossSourceCorrelation,
    EmergingPattern,
    HeadlineRef,
    MomentumSignal,
    NewsItem,
    PredictiveSignal,
    SourceBreakdown,
    TopicCluster,
    coerce_news_items,
)
from newswatch.settings import Settings, global_settings
from newswatch.utils import format_display_name, round_half_up

TRACKED_TIERS = ("mainstream", "fringe", "alternative", "institutional")

MOMENTUM_ORDER = {"surging": 4, "rising": 3, "stable": 2, "declining": 1}


@dataclass
class TopicAggregate:
    """Per-topic tallies for one batch."""

    count: int = 0
    sources: dict[str, None] = field(default_factory=dict)
    tier_sources: dict[str, dict[str, None]] = field(
        default_factory=lambda: {tier: {} for tier in TRACKED_TIERS}
    )
    headlines: list[HeadlineRef] = field(default_factory=list)
    indicators: dict[str, None] = field(default_factory=dict)

    def breakdown(self) -> SourceBreakdown:
        return SourceBreakdown(
            **{tier: list(names) for tier, names in self.tier_sources.items()}
        )


class CorrelationEngine:
    """
    Analyzes patterns across news items to detect signals and trends.

    History (per-minute counts and deltas, plus topic peaks) lives in the
    injected CorrelationHistory and is the only state kept between calls.
    """

    EMERGING_THRESHOLD = 3
    CROSS_SOURCE_THRESHOLD = 3
    PREDICTIVE_SCORE_THRESHOLD = 15
    CLUSTER_MIN_COUNT = 2
    MAX_CLUSTERS = 5
    MAX_RELATED_TOPICS = 3

    def __init__(
        self,
        config: DetectorConfig | None = None,
        history: CorrelationHistory | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or global_settings
        self.config = config or DEFAULT_CONFIG
        self.history = history or CorrelationHistory(
            self.settings.correlation_history_minutes
        )
        self.classifier = SourceClassifier(self.config.source_types)

    @property
    def topics(self) -> tuple[CorrelationTopic, ...]:
        return self.config.topics

    @staticmethod
    def _current_minute(now: datetime) -> int:
        return int(now.timestamp() // 60)

    @staticmethod
    def _get_level(
        weighted_score: int,
    ) -> Literal["critical", "high", "elevated", "emerging"]:
        if weighted_score >= 20:
            return "critical"
        elif weighted_score >= 12:
            return "high"
        elif weighted_score >= 8:
            return "elevated"
        return "emerging"

    @staticmethod
    def _get_momentum(delta: int) -> Literal["surging", "rising", "stable", "declining"]:
        if delta >= 5:
            return "surging"
        elif delta >= 2:
            return "rising"
        elif delta < 0:
            return "declining"
        return "stable"

    @staticmethod
    def _get_prediction_level(
        confidence: int,
    ) -> Literal["critical", "high", "medium", "low"]:
        if confidence >= 80:
            return "critical"
        elif confidence >= 60:
            return "high"
        elif confidence >= 40:
            return "medium"
        return "low"

    @staticmethod
    def _get_activity_level(
        signal_count: int,
    ) -> Literal["critical", "high", "elevated", "normal", "low"]:
        if signal_count >= 10:
            return "critical"
        elif signal_count >= 6:
            return "high"
        elif signal_count >= 3:
            return "elevated"
        elif signal_count >= 1:
            return "normal"
        return "low"

    @staticmethod
    def _delta_percent(delta: int, old_count: int) -> int:
        if old_count > 0:
            return round_half_up(delta / old_count * 100)
        return 100 if delta > 0 else 0

    @staticmethod
    def consensus_score(breakdown: SourceBreakdown) -> int:
        """0-100 agreement score from the spread of source tiers covering a topic."""
        tiers_present = sum(
            1
            for names in (
                breakdown.mainstream,
                breakdown.fringe,
                breakdown.alternative,
                breakdown.institutional,
            )
            if names
        )
        score = tiers_present * 20
        if breakdown.mainstream and breakdown.institutional:
            score += 20
        if breakdown.mainstream and breakdown.fringe:
            score += 10
        return min(100, score)

    def _aggregate(self, items: list[NewsItem]) -> dict[str, TopicAggregate]:
        aggregates: dict[str, TopicAggregate] = {}
        max_headlines = self.settings.correlation_max_headlines

        for item in items:
            title = item.title
            source = item.source or "Unknown"
            tier = self.classifier.classify(source)

            for topic in self.topics:
                if not matches_any(topic.patterns, title):
                    continue

                agg = aggregates.setdefault(topic.id, TopicAggregate())
                agg.count += 1
                agg.sources[source] = None
                if tier in agg.tier_sources:
                    agg.tier_sources[tier][source] = None

                indicators = find_phrases(title, topic.predictive_indicators)
                for indicator in indicators:
                    agg.indicators[indicator] = None

                if len(agg.headlines) < max_headlines:
                    agg.headlines.append(
                        HeadlineRef(
                            title=title,
                            link=item.link,
                            source=source,
                            timestamp=item.timestamp,
                            has_predictive_indicator=bool(indicators),
                        )
                    )
        return aggregates

    def _velocity(self, topic_id: str, count: int, current_minute: int) -> int:
        """Mentions per hour since the oldest sample in the velocity window."""
        oldest = self.history.counts.find_oldest(
            topic_id, current_minute, self.settings.correlation_velocity_window
        )
        if oldest is None:
            return 0
        oldest_minute, oldest_count = oldest
        minutes_passed = current_minute - oldest_minute
        if minutes_passed <= 0:
            return 0
        return round_half_up((count - oldest_count) / minutes_passed * 60)

    def _acceleration(
        self, topic_id: str, delta: int, current_minute: int
    ) -> Literal["accelerating", "steady", "decelerating"]:
        old_deltas = self.history.deltas.get(
            current_minute - self.settings.correlation_momentum_window
        )
        diff = delta - old_deltas.get(topic_id, 0)
        if diff > 1:
            return "accelerating"
        if diff < -1:
            return "decelerating"
        return "steady"

    def _related_topics(
        self, topic_id: str, items: list[NewsItem], headlines: list[HeadlineRef]
    ) -> list[str]:
        """Other topics that co-occur in this topic's sampled headlines."""
        titles = {h.title for h in headlines}
        co_occurrence: dict[str, int] = {}

        for topic in self.topics:
            if topic.id == topic_id:
                continue
            for item in items:
                if item.title in titles and matches_any(topic.patterns, item.title):
                    co_occurrence[topic.id] = co_occurrence.get(topic.id, 0) + 1

        ranked = sorted(
            ((tid, n) for tid, n in co_occurrence.items() if n >= 2),
            key=lambda x: x[1],
            reverse=True,
        )
        return [format_display_name(tid) for tid, _ in ranked[: self.MAX_RELATED_TOPICS]]

    def _detect_clusters(self, counts: dict[str, int]) -> list[TopicCluster]:
        groups: dict[str, list[str]] = defaultdict(list)
        totals: dict[str, int] = defaultdict(int)

        for topic in self.topics:
            count = counts.get(topic.id, 0)
            if count < self.CLUSTER_MIN_COUNT:
                continue
            groups[topic.category].append(topic.id)
            totals[topic.category] += count

        clusters = [
            TopicCluster(
                id=f"cluster-{category.lower()}",
                name=f"{category} Cluster",
                topics=[format_display_name(t) for t in topic_ids],
                total_mentions=totals[category],
                dominant_category=category,
            )
            for category, topic_ids in groups.items()
            if len(topic_ids) >= 2
        ]
        clusters.sort(key=lambda c: c.total_mentions, reverse=True)
        return clusters[: self.MAX_CLUSTERS]

    def analyze(
        self,
        news_items: Iterable[NewsItem | dict[str, Any]] | None,
        now: datetime | None = None,
    ) -> CorrelationResults | None:
        """
        Analyze news items for patterns and signals.

        Args:
            news_items: NewsItem models or dicts with 'title', 'link', 'source'
                and optional 'timestamp'
            now: Clock override; defaults to the current time

        Returns:
            CorrelationResults or None if no items
        """
        items = coerce_news_items(news_items)
        if not items:
            return None

        now = now or datetime.now()
        current_minute = self._current_minute(now)

        aggregates = self._aggregate(items)
        counts = {topic_id: agg.count for topic_id, agg in aggregates.items()}

        # Momentum tracking: one snapshot per minute bucket
        self.history.counts.record(current_minute, counts)
        old_counts = self.history.counts.get(
            current_minute - self.settings.correlation_momentum_window
        )
        deltas = {
            topic_id: count - old_counts.get(topic_id, 0)
            for topic_id, count in counts.items()
        }
        self.history.deltas.record(current_minute, deltas)

        results = CorrelationResults()
        category_totals: dict[str, int] = {}

        for topic in self.topics:
            agg = aggregates.get(topic.id)
            if agg is None:
                continue

            count = agg.count
            results.total_topics_detected += 1
            category_totals[topic.category] = (
                category_totals.get(topic.category, 0) + count
            )

            name = format_display_name(topic.id)
            sources = list(agg.sources)
            headlines = agg.headlines
            old_count = old_counts.get(topic.id, 0)
            delta = deltas[topic.id]
            weighted_score = count * topic.weight
            breakdown = agg.breakdown()
            consensus = self.consensus_score(breakdown)
            peak = self.history.update_peak(topic.id, count, now)

            if count >= self.EMERGING_THRESHOLD:
                results.emerging_patterns.append(
                    EmergingPattern(
                        id=topic.id,
                        name=name,
                        category=topic.category,
                        count=count,
                        weighted_score=weighted_score,
                        level=self._get_level(weighted_score),
                        sources=sources,
                        source_types=breakdown.counts(),
                        headlines=headlines,
                        related_topics=self._related_topics(topic.id, items, headlines),
                        velocity=self._velocity(topic.id, count, current_minute),
                    )
                )

            delta_percent = self._delta_percent(delta, old_count)
            if delta >= 2 or (count >= 3 and delta >= 1) or delta_percent >= 50:
                results.momentum_signals.append(
                    MomentumSignal(
                        id=topic.id,
                        name=name,
                        category=topic.category,
                        current=count,
                        previous=old_count,
                        delta=delta,
                        delta_percent=delta_percent,
                        momentum=self._get_momentum(delta),
                        acceleration=self._acceleration(
                            topic.id, delta, current_minute
                        ),
                        headlines=headlines,
                        peak_time=peak.timestamp,
                    )
                )

            if len(sources) >= self.CROSS_SOURCE_THRESHOLD:
                if len(sources) >= 6 or consensus >= 60:
                    level = "high"
                elif len(sources) >= 4:
                    level = "elevated"
                else:
                    level = "emerging"
                results.cross_source_correlations.append(
                    CrossSourceCorrelation(
                        id=topic.id,
                        name=name,
                        category=topic.category,
                        source_count=len(sources),
                        sources=sources,
                        source_breakdown=breakdown,
                        level=level,
                        consensus_score=consensus,
                        headlines=headlines,
                    )
                )

            indicators = list(agg.indicators)
            score = (
                count * topic.weight
                + len(sources) * 3
                + delta * 5
                + len(indicators) * 10
                + consensus / 5
            )
            if score >= self.PREDICTIVE_SCORE_THRESHOLD or (indicators and count >= 2):
                confidence = min(95, round_half_up(score * 1.2))
                prediction = generate_prediction(topic, count, delta, indicators)
                results.predictive_signals.append(
                    PredictiveSignal(
                        id=topic.id,
                        name=name,
                        category=topic.category,
                        score=score,
                        confidence=confidence,
                        prediction=prediction.prediction,
                        predictive_indicators=indicators,
                        level=self._get_prediction_level(confidence),
                        timeframe=prediction.timeframe,
                        headlines=headlines,
                        supporting_factors=prediction.factors,
                    )
                )

        results.topic_clusters = self._detect_clusters(counts)

        signal_count = (
            len(results.emerging_patterns)
            + sum(1 for m in results.momentum_signals if m.momentum == "surging")
            + sum(
                1 for p in results.predictive_signals if p.level in ("critical", "high")
            )
        )
        results.overall_activity_level = self._get_activity_level(signal_count)

        if category_totals:
            results.dominant_category = max(
                category_totals.items(), key=lambda x: x[1]
            )[0]

        results.emerging_patterns.sort(key=lambda x: x.weighted_score, reverse=True)
        results.momentum_signals.sort(
            key=lambda x: (MOMENTUM_ORDER[x.momentum], x.delta), reverse=True
        )
        results.cross_source_correlations.sort(
            key=lambda x: x.consensus_score, reverse=True
        )
        results.predictive_signals.sort(key=lambda x: x.confidence, reverse=True)

        logger.info(
            f"Correlation: {len(results.emerging_patterns)} patterns, "
            f"{len(results.momentum_signals)} momentum, "
            f"{len(results.cross_source_correlations)} cross-source, "
            f"{len(results.predictive_signals)} predictive "
            f"[{results.overall_activity_level}]"
        )
        return results

    def get_summary(self, results: CorrelationResults | None) -> CorrelationSummary:
        if results is None:
            return CorrelationSummary(total_signals=0, status="NO DATA")
        return CorrelationSummary(
            total_signals=results.total_signals,
            status=results.status,
            activity_level=results.overall_activity_level,
            dominant_category=results.dominant_category,
            top_patterns=[p.name for p in results.emerging_patterns[:3]],
            top_momentum=[m.name for m in results.momentum_signals[:3]],
        )

    def clear_history(self) -> None:
        self.history.clear()
