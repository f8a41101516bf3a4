"""
Prediction rules for predictive signals.

Rules are evaluated top to bottom and the first one that applies to a topic
wins; DEFAULT_RULE covers everything else.
"""

from dataclasses import dataclass

from newswatch.analysis.config import CorrelationTopic


@dataclass(frozen=True)
class PredictionRule:
    prediction: str
    timeframe: str
    categories: tuple[str, ...] = ()
    topic_ids: tuple[str, ...] = ()
    id_fragments: tuple[str, ...] = ()
    min_count: int = 0
    min_delta: int | None = None
    factor: str | None = None

    def applies(self, topic: CorrelationTopic, count: int, delta: int) -> bool:
        if self.categories and topic.category not in self.categories:
            return False
        if self.topic_ids or self.id_fragments:
            by_id = topic.id in self.topic_ids
            by_fragment = any(f in topic.id for f in self.id_fragments)
            if not (by_id or by_fragment):
                return False
        if count < self.min_count:
            return False
        if self.min_delta is not None and delta < self.min_delta:
            return False
        return True


@dataclass(frozen=True)
class Prediction:
    prediction: str
    timeframe: str
    factors: list[str]


ECONOMY = ("Economy", "Finance")
GEOPOLITICS = ("Conflict", "Geopolitics")

PREDICTION_RULES: tuple[PredictionRule, ...] = (
    PredictionRule(
        categories=ECONOMY,
        topic_ids=("tariffs",),
        min_count=4,
        prediction="Market volatility expected as trade tensions escalate",
        timeframe="Next 24-48 hours",
        factor="Trade policy typically impacts markets within 1-2 days",
    ),
    PredictionRule(
        categories=ECONOMY,
        topic_ids=("fed-rates",),
        prediction="Financial sector will see increased activity and coverage",
        timeframe="Next 1-7 days",
        factor="Fed decisions drive extended market coverage",
    ),
    PredictionRule(
        categories=ECONOMY,
        topic_ids=("bank-crisis",),
        prediction="Watch for contagion effects and regulatory responses",
        timeframe="Next 24-72 hours",
        factor="Bank crises tend to cascade quickly",
    ),
    PredictionRule(
        categories=ECONOMY,
        topic_ids=("recession", "inflation"),
        prediction="Economic narrative likely to dominate news cycle",
        timeframe="Next 1-3 days",
    ),
    PredictionRule(
        categories=GEOPOLITICS,
        id_fragments=("russia", "ukraine"),
        prediction="Expect breaking developments and diplomatic activity",
        timeframe="Next 12-48 hours",
        factor="Active conflict zone with rapid developments",
    ),
    PredictionRule(
        categories=GEOPOLITICS,
        id_fragments=("china", "taiwan"),
        prediction="Geopolitical tensions may escalate or trigger market reactions",
        timeframe="Next 24-72 hours",
        factor="US-China dynamics have broad implications",
    ),
    PredictionRule(
        categories=GEOPOLITICS,
        id_fragments=("israel", "iran"),
        prediction="Regional escalation possible, watch for military activity",
        timeframe="Next 12-24 hours",
        factor="Middle East conflicts can escalate rapidly",
    ),
    PredictionRule(
        categories=("Tech",),
        id_fragments=("ai",),
        prediction="AI narrative will continue building momentum",
        timeframe="Next 1-5 days",
        factor="AI topics have sustained media attention",
    ),
    PredictionRule(
        categories=("Tech",),
        topic_ids=("cyber-attack",),
        prediction="Potential for broader impact disclosure or attribution",
        timeframe="Next 24-72 hours",
        factor="Cyber incidents often reveal more details over time",
    ),
    PredictionRule(
        categories=("Health",),
        topic_ids=("pandemic",),
        prediction="Health authorities may issue statements or guidance",
        timeframe="Next 24-48 hours",
        factor="Pandemic coverage triggers official responses",
    ),
    PredictionRule(
        categories=("Politics",),
        topic_ids=("election",),
        prediction="Polling and campaign coverage will intensify",
        timeframe="Next 1-7 days",
    ),
)

DEFAULT_RULE = PredictionRule(
    prediction="Topic gaining mainstream traction, expect continued coverage",
    timeframe="Next 24-48 hours",
)


def base_factors(count: int, delta: int, indicators: list[str]) -> list[str]:
    factors = []
    if count >= 5:
        factors.append("High mention volume")
    if delta >= 3:
        factors.append("Rapidly increasing coverage")
    if indicators:
        factors.append(f"Predictive language detected: {', '.join(indicators)}")
    return factors


def generate_prediction(
    topic: CorrelationTopic,
    count: int,
    delta: int,
    indicators: list[str],
    rules: tuple[PredictionRule, ...] = PREDICTION_RULES,
) -> Prediction:
    rule = next((r for r in rules if r.applies(topic, count, delta)), DEFAULT_RULE)
    factors = base_factors(count, delta, indicators)
    if rule.factor:
        factors.append(rule.factor)
    return Prediction(
        prediction=rule.prediction, timeframe=rule.timeframe, factors=factors
    )
