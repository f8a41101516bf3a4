"""
Detector table loading.

A detector table is a JSON document:

    {
        "version": "2024-06",
        "topics": [{"id": "tariffs", "patterns": ["tariff"], "category": "Economy",
                    "weight": 3, "predictive_indicators": ["retaliat"]}],
        "narratives": [{"id": "...", "keywords": [...], "category": "...",
                        "severity": "watch"}],
        "people": [{"name": "...", "pattern": "...", "role": "political"}],
        "source_types": {"fringe": [...], "mainstream": [...]},
        "sentiment": {"positive": [...], "negative": [...]}
    }

Sections missing from the document keep the built-in tables.
"""

import re
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from newswatch.analysis.config import (
    DEFAULT_CONFIG,
    CorrelationTopic,
    DetectorConfig,
    NarrativePattern,
    NarrativeSeverity,
    PersonPattern,
    PersonRole,
    SentimentIndicators,
    SourceTypes,
)
from newswatch.errors import DetectorConfigError
from newswatch.settings import Settings, global_settings


class TopicSchema(BaseModel):
    id: str
    patterns: list[str] = Field(min_length=1)
    category: str
    weight: int = 1
    predictive_indicators: list[str] = Field(default_factory=list)


class NarrativeSchema(BaseModel):
    id: str
    keywords: list[str] = Field(min_length=1)
    category: str
    severity: NarrativeSeverity
    amplification_phrases: list[str] = Field(default_factory=list)
    debunk_indicators: list[str] = Field(default_factory=list)


class PersonSchema(BaseModel):
    name: str
    pattern: str
    role: PersonRole = "other"
    aliases: list[str] = Field(default_factory=list)
    titles: list[str] = Field(default_factory=list)


class SourceTypesSchema(BaseModel):
    fringe: list[str] = Field(default_factory=list)
    alternative: list[str] = Field(default_factory=list)
    mainstream: list[str] = Field(default_factory=list)
    institutional: list[str] = Field(default_factory=list)
    aggregator: list[str] = Field(default_factory=list)


class SentimentSchema(BaseModel):
    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)
    neutral: list[str] = Field(default_factory=list)


class DetectorConfigSchema(BaseModel):
    version: str = "custom"
    topics: list[TopicSchema] | None = None
    narratives: list[NarrativeSchema] | None = None
    people: list[PersonSchema] | None = None
    source_types: SourceTypesSchema | None = None
    sentiment: SentimentSchema | None = None


def _compile(pattern: str, detector_id: str) -> re.Pattern:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise DetectorConfigError(
            f"invalid pattern {pattern!r}: {e}", detector_id=detector_id
        ) from e


def _lowered(values: list[str]) -> tuple[str, ...]:
    return tuple(v.lower() for v in values)


def build_detector_config(schema: DetectorConfigSchema) -> DetectorConfig:
    """Compile a validated schema into an immutable DetectorConfig."""
    topics = DEFAULT_CONFIG.topics
    if schema.topics is not None:
        topics = tuple(
            CorrelationTopic(
                id=t.id,
                patterns=tuple(_compile(p, t.id) for p in t.patterns),
                category=t.category,
                weight=t.weight,
                predictive_indicators=tuple(t.predictive_indicators),
            )
            for t in schema.topics
        )

    narratives = DEFAULT_CONFIG.narratives
    if schema.narratives is not None:
        narratives = tuple(
            NarrativePattern(
                id=n.id,
                keywords=tuple(n.keywords),
                category=n.category,
                severity=n.severity,
                amplification_phrases=tuple(n.amplification_phrases),
                debunk_indicators=tuple(n.debunk_indicators),
            )
            for n in schema.narratives
        )

    people = DEFAULT_CONFIG.people
    if schema.people is not None:
        people = tuple(
            PersonPattern(
                name=p.name,
                pattern=_compile(p.pattern, p.name),
                role=p.role,
                aliases=tuple(p.aliases),
                titles=tuple(p.titles),
            )
            for p in schema.people
        )

    source_types = DEFAULT_CONFIG.source_types
    if schema.source_types is not None:
        st = schema.source_types
        source_types = SourceTypes(
            fringe=_lowered(st.fringe),
            alternative=_lowered(st.alternative),
            mainstream=_lowered(st.mainstream),
            institutional=_lowered(st.institutional),
            aggregator=_lowered(st.aggregator),
        )

    sentiment = DEFAULT_CONFIG.sentiment
    if schema.sentiment is not None:
        sentiment = SentimentIndicators(
            positive=tuple(schema.sentiment.positive),
            negative=tuple(schema.sentiment.negative),
            neutral=tuple(schema.sentiment.neutral),
        )

    for kind, ids in (
        ("topic", [t.id for t in topics]),
        ("narrative", [n.id for n in narratives]),
        ("person", [p.name for p in people]),
    ):
        seen: set[str] = set()
        for detector_id in ids:
            if detector_id in seen:
                raise DetectorConfigError(
                    f"duplicate {kind} definition", detector_id=detector_id
                )
            seen.add(detector_id)

    return DetectorConfig(
        topics=topics,
        narratives=narratives,
        people=people,
        source_types=source_types,
        sentiment=sentiment,
        version=schema.version,
    )


def load_detector_config(path: str | Path) -> DetectorConfig:
    """Load and compile a detector table from a JSON file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DetectorConfigError(f"Cannot read detector config {path}: {e}") from e

    try:
        schema = DetectorConfigSchema.model_validate_json(raw)
    except ValidationError as e:
        raise DetectorConfigError(f"Invalid detector config {path}: {e}") from e

    config = build_detector_config(schema)
    logger.info(
        f"Loaded detector config {config.version} from {path}: "
        f"{len(config.topics)} topics, {len(config.narratives)} narratives, "
        f"{len(config.people)} people"
    )
    return config


def get_detector_config(settings: Settings | None = None) -> DetectorConfig:
    """The configured detector table, or the built-in one when none is set."""
    settings = settings or global_settings
    if settings.detector_config_path:
        return load_detector_config(settings.detector_config_path)
    return DEFAULT_CONFIG
