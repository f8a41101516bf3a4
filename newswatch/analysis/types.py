"""
Analysis input and result types using Pydantic models.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

SourceTier = Literal[
    "mainstream", "fringe", "alternative", "institutional", "aggregator", "unknown"
]
Sentiment = Literal["positive", "negative", "neutral", "mixed"]
Trend = Literal["rising", "stable", "falling"]


class NewsItem(BaseModel):
    """A headline supplied by the caller for one analysis cycle."""

    title: str = ""
    link: str = ""
    source: str = ""
    timestamp: datetime | None = None

    model_config = {"extra": "ignore"}

    @field_validator("title", "link", "source", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


def coerce_news_items(
    news_items: Iterable[NewsItem | dict[str, Any]] | None,
) -> list[NewsItem]:
    """
    Normalize caller input to NewsItem models.

    Entries that are neither a NewsItem nor a mapping, or that fail
    validation, are skipped with a warning.
    """
    if not news_items:
        return []

    items: list[NewsItem] = []
    skipped = 0
    for raw in news_items:
        if isinstance(raw, NewsItem):
            items.append(raw)
            continue
        if not isinstance(raw, dict):
            skipped += 1
            continue
        try:
            items.append(NewsItem.model_validate(raw))
        except ValidationError as e:
            skipped += 1
            logger.debug(f"Invalid news item {raw!r}: {e}")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed news items")
    return items


# ============================================================================
# Correlation
# ============================================================================


class HeadlineRef(BaseModel):
    """Reference to a news headline."""

    title: str
    link: str
    source: str
    timestamp: datetime | None = None
    has_predictive_indicator: bool = False


class SourceTypeCounts(BaseModel):
    mainstream: int = 0
    fringe: int = 0
    alternative: int = 0
    institutional: int = 0


class SourceBreakdown(BaseModel):
    mainstream: list[str] = Field(default_factory=list)
    fringe: list[str] = Field(default_factory=list)
    alternative: list[str] = Field(default_factory=list)
    institutional: list[str] = Field(default_factory=list)

    def counts(self) -> SourceTypeCounts:
        return SourceTypeCounts(
            mainstream=len(self.mainstream),
            fringe=len(self.fringe),
            alternative=len(self.alternative),
            institutional=len(self.institutional),
        )


class EmergingPattern(BaseModel):
    """Detected emerging pattern across news items."""

    id: str
    name: str
    category: str
    count: int
    weighted_score: int
    level: Literal["critical", "high", "elevated", "emerging"]
    sources: list[str]
    source_types: SourceTypeCounts = Field(default_factory=SourceTypeCounts)
    headlines: list[HeadlineRef] = Field(default_factory=list)
    related_topics: list[str] = Field(default_factory=list)
    velocity: int = 0


class MomentumSignal(BaseModel):
    """Topic momentum signal (rising/falling trends)."""

    id: str
    name: str
    category: str
    current: int
    previous: int
    delta: int
    delta_percent: int
    momentum: Literal["surging", "rising", "stable", "declining"]
    acceleration: Literal["accelerating", "steady", "decelerating"]
    headlines: list[HeadlineRef] = Field(default_factory=list)
    peak_time: datetime | None = None


class CrossSourceCorrelation(BaseModel):
    """Cross-source correlation (same topic across multiple sources)."""

    id: str
    name: str
    category: str
    source_count: int
    sources: list[str]
    source_breakdown: SourceBreakdown = Field(default_factory=SourceBreakdown)
    level: Literal["high", "elevated", "emerging"]
    consensus_score: int
    headlines: list[HeadlineRef] = Field(default_factory=list)


class PredictiveSignal(BaseModel):
    """Predictive signal based on combined metrics."""

    id: str
    name: str
    category: str
    score: float
    confidence: int
    prediction: str
    predictive_indicators: list[str] = Field(default_factory=list)
    level: Literal["critical", "high", "medium", "low"]
    timeframe: str
    headlines: list[HeadlineRef] = Field(default_factory=list)
    supporting_factors: list[str] = Field(default_factory=list)


class TopicCluster(BaseModel):
    """Topics of one category that are active together."""

    id: str
    name: str
    topics: list[str]
    total_mentions: int
    dominant_category: str


class HighPrioritySignals(BaseModel):
    patterns: list[EmergingPattern] = Field(default_factory=list)
    momentum: list[MomentumSignal] = Field(default_factory=list)
    predictions: list[PredictiveSignal] = Field(default_factory=list)


class CorrelationResults(BaseModel):
    """Complete correlation analysis results."""

    emerging_patterns: list[EmergingPattern] = Field(default_factory=list)
    momentum_signals: list[MomentumSignal] = Field(default_factory=list)
    cross_source_correlations: list[CrossSourceCorrelation] = Field(
        default_factory=list
    )
    predictive_signals: list[PredictiveSignal] = Field(default_factory=list)
    topic_clusters: list[TopicCluster] = Field(default_factory=list)
    overall_activity_level: Literal["critical", "high", "elevated", "normal", "low"] = (
        "low"
    )
    dominant_category: str = "None"
    total_topics_detected: int = 0

    @property
    def total_signals(self) -> int:
        return (
            len(self.emerging_patterns)
            + len(self.momentum_signals)
            + len(self.predictive_signals)
        )

    @property
    def status(self) -> str:
        critical = sum(
            1 for p in self.predictive_signals if p.level in ("critical", "high")
        )
        surging = sum(1 for m in self.momentum_signals if m.momentum == "surging")
        if critical:
            return f"{critical} CRITICAL"
        if surging:
            return f"{surging} SURGING"
        if self.total_signals:
            return f"{self.total_signals} SIGNALS"
        return "MONITORING"

    def high_priority(self) -> HighPrioritySignals:
        return HighPrioritySignals(
            patterns=[
                p for p in self.emerging_patterns if p.level in ("critical", "high")
            ],
            momentum=[
                m
                for m in self.momentum_signals
                if m.momentum == "surging" or m.acceleration == "accelerating"
            ],
            predictions=[
                p for p in self.predictive_signals if p.level in ("critical", "high")
            ],
        )

    def by_category(self, category: str) -> list[EmergingPattern]:
        return [p for p in self.emerging_patterns if p.category == category]

    def validated_topics(self, min_consensus: int = 60) -> list[CrossSourceCorrelation]:
        """Cross-source topics with strong agreement between source tiers."""
        return [
            c for c in self.cross_source_correlations if c.consensus_score >= min_consensus
        ]


class CorrelationSummary(BaseModel):
    """Summary of correlation analysis."""

    total_signals: int
    status: str
    activity_level: str = "low"
    dominant_category: str = "None"
    top_patterns: list[str] = Field(default_factory=list)
    top_momentum: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


# ============================================================================
# Narratives
# ============================================================================

NarrativeStage = Literal[
    "nascent", "emerging", "spreading", "crossing", "mainstream", "debunked"
]


class HeadlineMatch(BaseModel):
    """A headline that matched a narrative, with its tier and flags."""

    title: str
    link: str
    source: str
    source_type: SourceTier
    timestamp: datetime | None = None
    has_amplification: bool = False
    has_debunk: bool = False
    matched_keywords: list[str] = Field(default_factory=list)


class NarrativeData(BaseModel):
    id: str
    name: str
    category: str
    severity: Literal["watch", "emerging", "spreading", "disinfo"]
    count: int
    fringe_count: int
    alternative_count: int
    mainstream_count: int
    institutional_count: int
    sources: list[str]
    source_breakdown: dict[str, list[str]]
    headlines: list[HeadlineMatch]
    keywords: list[str]
    matched_keywords: list[str]
    amplification_score: int
    debunk_score: int
    stage: NarrativeStage
    velocity: int
    first_seen: datetime | None = None
    time_since_first_seen: int | None = None


class EmergingFringe(NarrativeData):
    status: Literal["nascent", "emerging", "spreading", "viral"]
    spread_rate: Literal["slow", "moderate", "fast", "explosive"]
    predicted_crossover: bool
    risk_level: Literal["low", "medium", "high"]


class FringeToMainstream(NarrativeData):
    status: Literal["crossing", "crossed"]
    crossover_level: int
    crossover_direction: Literal[
        "fringe-to-mainstream", "mainstream-to-fringe", "simultaneous"
    ]
    time_to_mainstream: int | None = None
    validation_status: Literal[
        "unverified", "partially-verified", "verified", "disputed", "debunked"
    ]


class DisinfoSignal(NarrativeData):
    threat_level: Literal["low", "medium", "high", "critical"]
    indicators: list[str] = Field(default_factory=list)
    countermeasures: list[str] = Field(default_factory=list)
    spread_pattern: Literal["organic", "coordinated"]


class HighRiskNarratives(BaseModel):
    emerging_fringe: list[EmergingFringe] = Field(default_factory=list)
    disinfo: list[DisinfoSignal] = Field(default_factory=list)


class NarrativeResults(BaseModel):
    """Complete narrative propagation results."""

    emerging_fringe: list[EmergingFringe] = Field(default_factory=list)
    fringe_to_mainstream: list[FringeToMainstream] = Field(default_factory=list)
    narrative_watch: list[NarrativeData] = Field(default_factory=list)
    disinfo_signals: list[DisinfoSignal] = Field(default_factory=list)
    active_narratives: int = 0
    crossing_narratives: int = 0
    high_risk_count: int = 0
    overall_threat_level: Literal["low", "elevated", "high", "critical"] = "low"
    dominant_category: str = "None"

    @property
    def total(self) -> int:
        return (
            len(self.emerging_fringe)
            + len(self.fringe_to_mainstream)
            + len(self.narrative_watch)
            + len(self.disinfo_signals)
        )

    def all_narratives(self) -> list[NarrativeData]:
        return [
            *self.emerging_fringe,
            *self.fringe_to_mainstream,
            *self.narrative_watch,
            *self.disinfo_signals,
        ]

    def find(self, narrative_id: str) -> NarrativeData | None:
        for narrative in self.all_narratives():
            if narrative.id == narrative_id:
                return narrative
        return None

    def high_risk(self) -> HighRiskNarratives:
        return HighRiskNarratives(
            emerging_fringe=[n for n in self.emerging_fringe if n.risk_level == "high"],
            disinfo=[
                d for d in self.disinfo_signals if d.threat_level in ("high", "critical")
            ],
        )

    def by_category(self, category: str) -> list[NarrativeData]:
        return [n for n in self.all_narratives() if n.category == category]

    def crossing(self) -> list[FringeToMainstream]:
        return [n for n in self.fringe_to_mainstream if n.status == "crossing"]


class NarrativeSummary(BaseModel):
    total: int
    status: str
    threat_level: str = "low"
    crossing_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


# ============================================================================
# Main character (entity prominence)
# ============================================================================


class SentimentBreakdown(BaseModel):
    positive: int = 0
    negative: int = 0
    neutral: int = 0


class SourceMention(BaseModel):
    source: str
    title: str
    link: str
    sentiment: Sentiment
    timestamp: datetime | None = None


class MainCharacterEntry(BaseModel):
    name: str
    count: int
    rank: int = 0
    role: str | None = None
    sentiment: Sentiment = "neutral"
    sentiment_breakdown: SentimentBreakdown = Field(default_factory=SentimentBreakdown)
    sentiment_score: int = 0
    sources: list[str] = Field(default_factory=list)
    source_count: int = 0
    recent_mentions: list[SourceMention] = Field(default_factory=list)
    momentum: Trend = "stable"
    dominance_score: int = 0
    co_mentions: list[str] = Field(default_factory=list)


class MainCharacterResults(BaseModel):
    characters: list[MainCharacterEntry] = Field(default_factory=list)
    top_character: MainCharacterEntry | None = None
    total_mentions: int = 0
    role_breakdown: dict[str, int] = Field(default_factory=dict)
    overall_sentiment: Sentiment = "neutral"

    def by_role(self, role: str) -> list[MainCharacterEntry]:
        return [c for c in self.characters if c.role == role]

    def by_sentiment(self, sentiment: str) -> list[MainCharacterEntry]:
        return [c for c in self.characters if c.sentiment == sentiment]

    def trending(self) -> list[MainCharacterEntry]:
        return [c for c in self.characters if c.momentum == "rising"]

    def cross_source(self, min_sources: int = 3) -> list[MainCharacterEntry]:
        return [c for c in self.characters if c.source_count >= min_sources]


class MainCharacterSummary(BaseModel):
    name: str
    count: int
    status: str
    sentiment: Sentiment = "neutral"
    momentum: Trend = "stable"

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
