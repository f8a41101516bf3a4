"""
Tests for source tier classification and the pattern helpers.
"""

import re

import pytest

from newswatch.analysis.config import SourceTypes
from newswatch.analysis.matching import (
    contains_any,
    count_occurrences,
    find_phrases,
    matches_any,
)
from newswatch.analysis.sources import SourceClassifier


class TestSourceClassifier:
    """Tier lookup against the built-in source lists."""

    @pytest.mark.parametrize(
        "source,tier",
        [
            ("Reuters", "mainstream"),
            ("BBC World", "mainstream"),
            ("ZeroHedge", "fringe"),
            ("Infowars", "fringe"),
            ("Someone's Substack", "alternative"),
            ("White House", "institutional"),
            ("Federal Reserve Board", "institutional"),
        ],
    )
    def test_known_sources(self, source, tier):
        assert SourceClassifier().classify(source) == tier

    def test_unknown_and_empty(self):
        classifier = SourceClassifier()
        assert classifier.classify("Test") == "unknown"
        assert classifier.classify("") == "unknown"
        assert classifier.classify(None) == "unknown"

    def test_aggregator_only_when_requested(self):
        classifier = SourceClassifier()
        assert classifier.classify("Google News") == "unknown"
        assert classifier.classify("Google News", include_aggregator=True) == "aggregator"

    def test_institutional_wins_over_mainstream(self):
        types = SourceTypes(mainstream=("daily",), institutional=("daily gov",))
        assert SourceClassifier(types).classify("Daily Gov Bulletin") == "institutional"

    def test_case_insensitive(self):
        assert SourceClassifier().classify("REUTERS") == "mainstream"


class TestMatching:
    """Pure helpers used by all three analyzers."""

    def test_matches_any(self):
        patterns = (re.compile("tariff", re.I), re.compile("trade war", re.I))
        assert matches_any(patterns, "New TARIFF on steel")
        assert not matches_any(patterns, "Weather is fine")

    def test_count_occurrences(self):
        pattern = re.compile(r"\btrump\b", re.I)
        assert count_occurrences(pattern, "trump says trump will win") == 2
        assert count_occurrences(pattern, "nothing here") == 0

    def test_find_phrases_keeps_order_and_dedups(self):
        found = find_phrases("Expected surge, EXPECTED again", ["surge", "expected", "surge"])
        assert found == ["surge", "expected"]

    def test_contains_any(self):
        assert contains_any("Claim debunked by experts", ["debunked"])
        assert not contains_any("Claim repeated", ["debunked", ""])
        assert not contains_any("anything", [])
