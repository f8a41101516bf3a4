"""
Tests for prediction rules.
"""

from newswatch.analysis.config import DEFAULT_CONFIG, CorrelationTopic
from newswatch.analysis.predictions import DEFAULT_RULE, generate_prediction


def topic(topic_id):
    return DEFAULT_CONFIG.get_topic(topic_id)


class TestGeneratePrediction:
    def test_tariffs_need_volume(self):
        low = generate_prediction(topic("tariffs"), 3, 0, [])
        assert low.prediction == DEFAULT_RULE.prediction

        high = generate_prediction(topic("tariffs"), 4, 0, [])
        assert high.prediction == "Market volatility expected as trade tensions escalate"
        assert high.timeframe == "Next 24-48 hours"
        assert "Trade policy typically impacts markets within 1-2 days" in high.factors

    def test_conflict_rule_matches_on_id_fragment(self):
        result = generate_prediction(topic("russia-ukraine"), 2, 0, [])
        assert result.timeframe == "Next 12-48 hours"
        assert result.factors == ["Active conflict zone with rapid developments"]

    def test_ai_topics(self):
        result = generate_prediction(topic("ai-regulation"), 2, 0, [])
        assert result.prediction == "AI narrative will continue building momentum"

    def test_base_factors(self):
        result = generate_prediction(topic("election"), 5, 3, ["projected", "leads"])
        assert result.factors == [
            "High mention volume",
            "Rapidly increasing coverage",
            "Predictive language detected: projected, leads",
        ]
        assert result.timeframe == "Next 1-7 days"

    def test_unmatched_topic_uses_default(self):
        custom = CorrelationTopic(id="weather", patterns=(), category="Misc")
        result = generate_prediction(custom, 1, 0, [])
        assert result.prediction == DEFAULT_RULE.prediction
        assert result.factors == []
