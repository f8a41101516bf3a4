"""
Tests for the entity ranker (main character of the news cycle).
"""

import re
from datetime import timedelta

from conftest import make_item

from newswatch.analysis import EntityRanker, calculate_dominance
from newswatch.analysis.config import (
    DEFAULT_CONFIG,
    PERSON_ROLES,
    DetectorConfig,
    PersonPattern,
)
from newswatch.analysis.entities import analyze_sentiment, determine_sentiment
from newswatch.analysis.types import (
    MainCharacterEntry,
    MainCharacterResults,
    SentimentBreakdown,
)


def find(results, name):
    return next((c for c in results.characters if c.name == name), None)


def results_with_counts(*counts):
    return MainCharacterResults(
        characters=[
            MainCharacterEntry(name=f"Person {i}", count=c) for i, c in enumerate(counts)
        ]
    )


class TestRanking:
    def test_empty_batch(self, ranker):
        results = ranker.analyze([])
        assert results.characters == []
        assert results.top_character is None
        assert results.total_mentions == 0
        assert results.role_breakdown == {role: 0 for role in PERSON_ROLES}
        assert results.overall_sentiment == "neutral"
        assert ranker.get_summary(results).status == "NO DATA"

    def test_most_mentioned_ranks_first(self, ranker, now):
        items = [
            make_item("Trump holds rally in Ohio", source="A"),
            make_item("Trump announces new plan", source="B"),
            make_item("Trump visits border", source="C"),
            make_item("Biden gives speech", source="D"),
        ]
        results = ranker.analyze(items, now=now)

        assert results.top_character.name == "Donald Trump"
        assert results.top_character.rank == 1
        assert results.top_character.count == 3
        assert results.top_character.source_count == 3
        assert results.top_character.dominance_score == 75
        assert find(results, "Joe Biden").rank == 2
        assert results.total_mentions == 4
        assert results.role_breakdown["political"] == 4

    def test_full_name_counts_once(self, ranker, now):
        results = ranker.analyze([make_item("Donald Trump speaks")], now=now)
        assert results.top_character.count == 1

    def test_tech_leader(self, ranker, now):
        items = [
            make_item("Elon Musk unveils new rocket"),
            make_item("Musk responds to critics"),
            make_item("Elon tweets again"),
        ]
        results = ranker.analyze(items, now=now)
        musk = results.top_character
        assert musk.name == "Elon Musk"
        assert musk.count == 3
        assert musk.role == "tech"
        assert results.role_breakdown["tech"] == 3

    def test_world_leaders(self, ranker, now):
        items = [
            make_item("Milei pushes reforms in Argentina"),
            make_item("Lula meets trade partners"),
            make_item("Ishiba calls snap vote"),
        ]
        results = ranker.analyze(items, now=now)
        names = {c.name for c in results.characters}
        assert {"Javier Milei", "Luiz Inacio Lula da Silva", "Shigeru Ishiba"} <= names

    def test_central_bankers(self, ranker, now):
        items = [
            make_item("Powell holds steady"),
            make_item("Lagarde warns on growth"),
        ]
        results = ranker.analyze(items, now=now)
        assert find(results, "Jerome Powell").role == "central_bank"
        assert find(results, "Christine Lagarde").role == "central_bank"
        assert results.role_breakdown["central_bank"] == 2
        assert results.by_role("central_bank") == results.characters

    def test_source_diversity_breaks_close_counts(self, ranker, now):
        items = [
            make_item("Biden statement", source="A"),
            make_item("Biden again", source="A"),
            make_item("Harris tour", source="A"),
            make_item("Harris rally", source="B"),
        ]
        results = ranker.analyze(items, now=now)
        assert [c.name for c in results.characters] == ["Kamala Harris", "Joe Biden"]
        assert results.cross_source(min_sources=2) == [results.characters[0]]

    def test_top_fifteen(self, settings, now):
        people = tuple(
            PersonPattern(
                name=f"Person {i}",
                pattern=re.compile(rf"\bperson{i}\b", re.IGNORECASE),
                role="other",
            )
            for i in range(20)
        )
        config = DetectorConfig(people=people)
        ranker = EntityRanker(config=config, settings=settings)
        results = ranker.analyze([make_item(f"person{i} news") for i in range(20)], now=now)

        assert len(results.characters) == 15
        assert [c.rank for c in results.characters] == list(range(1, 16))
        assert results.total_mentions == 20
        assert results.role_breakdown["other"] == 20

    def test_co_mentions(self, ranker, now):
        items = [
            make_item("Trump and Biden debate"),
            make_item("Trump and Biden spar again"),
            make_item("Trump meets Putin"),
        ]
        results = ranker.analyze(items, now=now)
        assert find(results, "Donald Trump").co_mentions == [
            "Joe Biden",
            "Vladimir Putin",
        ]
        assert find(results, "Vladimir Putin").co_mentions == ["Donald Trump"]


class TestSentiment:
    def test_headline_sentiment(self):
        indicators = DEFAULT_CONFIG.sentiment
        assert analyze_sentiment("Senator praised for bill", indicators) == ("positive", 100)
        assert analyze_sentiment("Senator slammed over bill", indicators) == (
            "negative",
            -100,
        )
        assert analyze_sentiment("Senator praised and criticized", indicators) == (
            "mixed",
            0,
        )
        assert analyze_sentiment("Senator speaks", indicators) == ("neutral", 0)

    def test_determine_sentiment(self):
        assert determine_sentiment(SentimentBreakdown()) == "neutral"
        assert determine_sentiment(SentimentBreakdown(positive=3, neutral=1)) == "positive"
        assert determine_sentiment(SentimentBreakdown(negative=2, neutral=1)) == "negative"
        assert (
            determine_sentiment(SentimentBreakdown(positive=1, negative=1, neutral=1))
            == "mixed"
        )
        assert (
            determine_sentiment(SentimentBreakdown(positive=1, negative=1, neutral=8))
            == "neutral"
        )

    def test_person_sentiment(self, ranker, now):
        items = [
            make_item("Trump praised for deal"),
            make_item("Trump slammed over remarks"),
            make_item("Trump praised and criticized"),
        ]
        results = ranker.analyze(items, now=now)
        trump = results.top_character

        assert trump.sentiment_breakdown == SentimentBreakdown(
            positive=1, negative=1, neutral=1
        )
        assert trump.sentiment == "mixed"
        assert trump.sentiment_score == 0
        assert [m.sentiment for m in trump.recent_mentions] == [
            "positive",
            "negative",
            "mixed",
        ]
        assert ranker.get_summary(results).status == "Donald Trump (3~)"


class TestMomentum:
    def test_rising(self, ranker, now):
        ranker.analyze([make_item("Trump visits Ohio")], now=now)
        later = now + timedelta(minutes=5)
        items = [make_item(f"Trump visits state {i}") for i in range(4)]
        results = ranker.analyze(items, now=later)

        assert results.top_character.momentum == "rising"
        assert results.trending() == [results.top_character]
        assert ranker.get_summary(results).status == "Donald Trump (4^)"

    def test_falling(self, ranker, now):
        ranker.analyze([make_item(f"Trump visits state {i}") for i in range(4)], now=now)
        later = now + timedelta(minutes=5)
        results = ranker.analyze([make_item("Trump visits Ohio")], now=later)
        assert results.top_character.momentum == "falling"

    def test_single_sample_is_stable(self, ranker, now):
        results = ranker.analyze([make_item("Trump visits Ohio")], now=now)
        assert results.top_character.momentum == "stable"

    def test_old_samples_expire(self, ranker, now):
        ranker.analyze([make_item("Trump visits Ohio")], now=now)
        later = now + timedelta(minutes=40)
        items = [make_item(f"Trump visits state {i}") for i in range(4)]
        results = ranker.analyze(items, now=later)
        assert results.top_character.momentum == "stable"

    def test_clear_history(self, ranker, now):
        ranker.analyze([make_item("Trump visits Ohio")], now=now)
        ranker.clear_history()
        items = [make_item(f"Trump visits state {i}") for i in range(4)]
        results = ranker.analyze(items, now=now + timedelta(minutes=5))
        assert results.top_character.momentum == "stable"


class TestDominance:
    def test_single_character(self):
        assert calculate_dominance(results_with_counts(5)) == 100
        assert calculate_dominance(MainCharacterResults()) == 100

    def test_ratio(self):
        assert calculate_dominance(results_with_counts(6, 5)) == 20
        assert calculate_dominance(results_with_counts(10, 5)) == 100
        assert calculate_dominance(results_with_counts(30, 5)) == 100

    def test_zero_counts(self):
        assert calculate_dominance(results_with_counts(0, 0)) == 0
        assert calculate_dominance(results_with_counts(3, 0)) == 100

    def test_lower_count_first_is_clamped(self):
        assert calculate_dominance(results_with_counts(4, 5)) == 0
