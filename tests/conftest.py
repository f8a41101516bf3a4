"""
Shared fixtures for the analyzer tests.
"""

from datetime import datetime, timezone

import pytest

from newswatch.analysis import CorrelationEngine, EntityRanker, NarrativeTracker
from newswatch.settings import Settings

NOW = datetime(2024, 6, 1, 12, 0, 30, tzinfo=timezone.utc)


def make_item(title, source="Test", link=None, timestamp=None, **extra):
    """Build a news item dict the way feed callers hand them in."""
    item = {
        "title": title,
        "source": source,
        "link": link if link is not None else f"https://example.com/{abs(hash((title, source)))}",
        "timestamp": timestamp or NOW,
    }
    item.update(extra)
    return item


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def engine(settings):
    return CorrelationEngine(settings=settings)


@pytest.fixture
def tracker(settings):
    return NarrativeTracker(settings=settings)


@pytest.fixture
def ranker(settings):
    return EntityRanker(settings=settings)
