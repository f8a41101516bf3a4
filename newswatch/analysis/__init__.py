"""
Headline analysis: topic correlation, narrative propagation and entity prominence.
"""

from newswatch.analysis.types import (
    CorrelationResults,
    CorrelationSummary,
    EmergingPattern,
    MomentumSignal,
    CrossSourceCorrelation,
    PredictiveSignal,
    HeadlineRef,
    NarrativeResults,
    NarrativeSummary,
    EmergingFringe,
    FringeToMainstream,
    DisinfoSignal,
    MainCharacterEntry,
    MainCharacterResults,
    MainCharacterSummary,
    NewsItem,
)
from newswatch.analysis.correlation import CorrelationEngine
from newswatch.analysis.narrative import NarrativeTracker
from newswatch.analysis.entities import EntityRanker, calculate_dominance
from newswatch.analysis.sources import SourceClassifier
from newswatch.analysis.config import (
    CORRELATION_TOPICS,
    NARRATIVE_PATTERNS,
    PERSON_PATTERNS,
    SOURCE_TYPES,
    DEFAULT_CONFIG,
    DetectorConfig,
)
from newswatch.analysis.loader import get_detector_config, load_detector_config

__all__ = [
    # Types
    "CorrelationResults",
    "CorrelationSummary",
    "EmergingPattern",
    "MomentumSignal",
    "CrossSourceCorrelation",
    "PredictiveSignal",
    "HeadlineRef",
    "NarrativeResults",
    "NarrativeSummary",
    "EmergingFringe",
    "FringeToMainstream",
    "DisinfoSignal",
    "MainCharacterEntry",
    "MainCharacterResults",
    "MainCharacterSummary",
    "NewsItem",
    # Analyzers
    "CorrelationEngine",
    "NarrativeTracker",
    "EntityRanker",
    "calculate_dominance",
    "SourceClassifier",
    # Config
    "CORRELATION_TOPICS",
    "NARRATIVE_PATTERNS",
    "PERSON_PATTERNS",
    "SOURCE_TYPES",
    "DEFAULT_CONFIG",
    "DetectorConfig",
    "get_detector_config",
    "load_detector_config",
]
