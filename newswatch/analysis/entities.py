"""
Entity ranker - finds the "main character" of the news cycle.

Counts person mentions across headlines, attaches sentiment, source
diversity and momentum, and ranks the most prominent people.
"""

import functools
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from loguru import logger

from newswatch.analysis.config import (
    DEFAULT_CONFIG,
    PERSON_ROLES,
    DetectorConfig,
    PersonPattern,
    SentimentIndicators,
)
from newswatch.analysis.history import SampleHistory
from newswatch.analysis.matching import count_occurrences, find_phrases
from newswatch.analysis.types import (
    MainCharacterEntry,
    MainCharacterResults,
    MainCharacterSummary,
    NewsItem,
    Sentiment,
    SentimentBreakdown,
    SourceMention,
    Trend,
    coerce_news_items,
)
from newswatch.settings import Settings, global_settings
from newswatch.utils import round_half_up

MOMENTUM_RANK = {"rising": 2, "stable": 1, "falling": 0}
SENTIMENT_MARK = {"positive": "+", "negative": "-", "mixed": "~"}
MOMENTUM_MARK = {"rising": "^", "falling": "v"}


def analyze_sentiment(text: str, indicators: SentimentIndicators) -> tuple[Sentiment, int]:
    """
    Headline sentiment and a -100..100 score from indicator phrases.

    A headline with both positive and negative phrases is mixed.
    """
    positive = len(find_phrases(text, indicators.positive))
    negative = len(find_phrases(text, indicators.negative))
    total = positive + negative
    if total == 0:
        return "neutral", 0

    score = round_half_up((positive - negative) / total * 100)
    if positive > 0 and negative > 0:
        return "mixed", score
    if positive > negative:
        return "positive", score
    return "negative", score


def determine_sentiment(breakdown: SentimentBreakdown) -> Sentiment:
    total = breakdown.positive + breakdown.negative + breakdown.neutral
    if total == 0:
        return "neutral"

    positive, negative, neutral = (
        breakdown.positive,
        breakdown.negative,
        breakdown.neutral,
    )
    if positive > 0 and negative > 0 and min(positive, negative) / total > 0.2:
        return "mixed"
    if positive > negative and positive > neutral:
        return "positive"
    if negative > positive and negative > neutral:
        return "negative"
    return "neutral"


def compare_entries(a: MainCharacterEntry, b: MainCharacterEntry) -> int:
    """Count first (when the gap is over 2), then source diversity, then momentum."""
    count_diff = b.count - a.count
    if abs(count_diff) > 2:
        return count_diff
    source_diff = b.source_count - a.source_count
    if source_diff != 0:
        return source_diff
    return MOMENTUM_RANK[b.momentum] - MOMENTUM_RANK[a.momentum]


def calculate_dominance(results: MainCharacterResults) -> int:
    """How far the top character leads the runner-up, 0-100."""
    if len(results.characters) < 2:
        return 100

    top, second = results.characters[0], results.characters[1]
    if top.count == 0:
        return 0
    if second.count == 0:
        return 100

    ratio = top.count / second.count
    return max(0, min(100, round_half_up((ratio - 1) * 100)))


@dataclass
class PersonTally:
    person: PersonPattern
    count: int = 0
    breakdown: SentimentBreakdown = field(default_factory=SentimentBreakdown)
    scores: list[int] = field(default_factory=list)
    sources: dict[str, None] = field(default_factory=dict)
    mentions: list[SourceMention] = field(default_factory=list)


class EntityRanker:
    """
    Ranks people by headline prominence.

    Per-person (timestamp, count) samples for momentum live in the injected
    SampleHistory.
    """

    RISING_RATIO = 1.3
    FALLING_RATIO = 0.7
    CO_MENTION_CHARACTERS = 5
    MAX_CO_MENTIONS = 3

    def __init__(
        self,
        config: DetectorConfig | None = None,
        history: SampleHistory | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or global_settings
        self.config = config or DEFAULT_CONFIG
        self.history = history or SampleHistory(
            timedelta(minutes=self.settings.mention_history_minutes)
        )

    @property
    def people(self) -> tuple[PersonPattern, ...]:
        return self.config.people

    @staticmethod
    def _empty_role_breakdown() -> dict[str, int]:
        return {role: 0 for role in PERSON_ROLES}

    def _tally(self, items: list[NewsItem]) -> dict[str, PersonTally]:
        tallies: dict[str, PersonTally] = {}
        max_samples = self.settings.mention_max_samples

        for item in items:
            text = item.title.lower()
            source = item.source or "Unknown"

            for person in self.people:
                occurrences = count_occurrences(person.pattern, text)
                if not occurrences:
                    continue

                tally = tallies.setdefault(person.name, PersonTally(person=person))
                tally.count += occurrences
                tally.sources[source] = None

                sentiment, score = analyze_sentiment(item.title, self.config.sentiment)
                bucket = "neutral" if sentiment == "mixed" else sentiment
                setattr(tally.breakdown, bucket, getattr(tally.breakdown, bucket) + 1)
                tally.scores.append(score)

                if len(tally.mentions) < max_samples:
                    tally.mentions.append(
                        SourceMention(
                            source=source,
                            title=item.title,
                            link=item.link,
                            sentiment=sentiment,
                            timestamp=item.timestamp,
                        )
                    )
        return tallies

    def _momentum(self, name: str, count: int, now: datetime) -> Trend:
        samples = self.history.append(name, now, count)
        if len(samples) < 2:
            return "stable"
        average = sum(s.count for s in samples) / len(samples)
        ratio = count / average
        if ratio > self.RISING_RATIO:
            return "rising"
        if ratio < self.FALLING_RATIO:
            return "falling"
        return "stable"

    def _co_mentions(self, person: PersonPattern, items: list[NewsItem]) -> list[str]:
        """Other people most often named in the same headlines."""
        counts: dict[str, int] = {}
        for item in items:
            text = item.title.lower()
            if not person.pattern.search(text):
                continue
            for other in self.people:
                if other.name != person.name and other.pattern.search(text):
                    counts[other.name] = counts.get(other.name, 0) + 1

        ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
        return [name for name, _ in ranked[: self.MAX_CO_MENTIONS]]

    def analyze(
        self,
        news_items: Iterable[NewsItem | dict[str, Any]] | None,
        now: datetime | None = None,
    ) -> MainCharacterResults:
        """
        Rank the people mentioned in a batch of headlines.

        Args:
            news_items: NewsItem models or dicts with 'title', 'link', 'source'
                and optional 'timestamp'
            now: Clock override; defaults to the current time

        Returns:
            MainCharacterResults, empty when there are no items
        """
        items = coerce_news_items(news_items)
        if not items:
            return MainCharacterResults(role_breakdown=self._empty_role_breakdown())

        now = now or datetime.now()
        self.history.prune(now)

        tallies = self._tally(items)
        total_mentions = sum(t.count for t in tallies.values())
        role_breakdown = self._empty_role_breakdown()

        entries: list[MainCharacterEntry] = []
        for name, tally in tallies.items():
            role_breakdown[tally.person.role] = (
                role_breakdown.get(tally.person.role, 0) + tally.count
            )
            sentiment_score = (
                round_half_up(sum(tally.scores) / len(tally.scores)) if tally.scores else 0
            )
            entries.append(
                MainCharacterEntry(
                    name=name,
                    count=tally.count,
                    role=tally.person.role,
                    sentiment=determine_sentiment(tally.breakdown),
                    sentiment_breakdown=tally.breakdown,
                    sentiment_score=sentiment_score,
                    sources=list(tally.sources),
                    source_count=len(tally.sources),
                    recent_mentions=tally.mentions,
                    momentum=self._momentum(name, tally.count, now),
                    dominance_score=(
                        round_half_up(tally.count / total_mentions * 100)
                        if total_mentions
                        else 0
                    ),
                )
            )

        entries.sort(key=functools.cmp_to_key(compare_entries))
        characters = entries[: self.settings.max_characters]
        for index, character in enumerate(characters):
            character.rank = index + 1

        for character in characters[: self.CO_MENTION_CHARACTERS]:
            character.co_mentions = self._co_mentions(
                tallies[character.name].person, items
            )

        overall = SentimentBreakdown(
            positive=sum(t.breakdown.positive for t in tallies.values()),
            negative=sum(t.breakdown.negative for t in tallies.values()),
            neutral=sum(t.breakdown.neutral for t in tallies.values()),
        )

        results = MainCharacterResults(
            characters=characters,
            top_character=characters[0] if characters else None,
            total_mentions=total_mentions,
            role_breakdown=role_breakdown,
            overall_sentiment=determine_sentiment(overall),
        )

        top = results.top_character
        logger.info(
            f"Main character: {len(characters)} people, {total_mentions} mentions, "
            f"top={top.name if top else 'none'}"
        )
        return results

    def get_summary(self, results: MainCharacterResults | None) -> MainCharacterSummary:
        if results is None or results.top_character is None:
            return MainCharacterSummary(name="", count=0, status="NO DATA")

        top = results.top_character
        marks = SENTIMENT_MARK.get(top.sentiment, "") + MOMENTUM_MARK.get(top.momentum, "")
        return MainCharacterSummary(
            name=top.name,
            count=top.count,
            status=f"{top.name} ({top.count}{marks})",
            sentiment=top.sentiment,
            momentum=top.momentum,
        )

    def clear_history(self) -> None:
        self.history.clear()
