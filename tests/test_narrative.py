"""
Tests for the narrative tracker.
"""

from datetime import timedelta

from conftest import make_item

from newswatch.analysis import NarrativeTracker


def lab_leak(title_suffix, source, **kwargs):
    return make_item(f"Lab leak {title_suffix}", source=source, **kwargs)


class TestNarrativeDetection:
    def test_empty_batch_returns_none(self, tracker):
        assert tracker.analyze([]) is None
        assert tracker.analyze(None) is None

    def test_detects_keywords(self, tracker, now):
        items = [
            make_item("Deep state allegations surface", source="Test"),
            make_item("Shadow government concerns", source="Test2"),
        ]
        results = tracker.analyze(items, now=now)
        deep_state = results.find("deep-state")

        assert deep_state is not None
        assert deep_state.count == 2
        assert deep_state.name == "Deep State"
        assert deep_state.matched_keywords == ["deep state", "shadow government"]
        assert deep_state in results.narrative_watch

    def test_mainstream_only_goes_to_watch(self, tracker, now):
        items = [
            make_item("Birth rate decline continues in major economies", source="Reuters")
        ]
        results = tracker.analyze(items, now=now)
        narrative = results.find("population-crisis")

        assert narrative in results.narrative_watch
        assert narrative.mainstream_count == 1
        assert narrative.stage == "mainstream"
        assert results.crossing_narratives == 0

    def test_source_breakdown_covers_all_tiers(self, tracker, now):
        results = tracker.analyze([lab_leak("story", "ZeroHedge")], now=now)
        breakdown = results.find("bio-weapon").source_breakdown
        assert set(breakdown) == {
            "fringe",
            "alternative",
            "mainstream",
            "institutional",
            "aggregator",
            "unknown",
        }
        assert breakdown["fringe"] == ["ZeroHedge"]

    def test_sources_and_headlines_are_capped(self, tracker, now):
        items = [lab_leak(f"story {i}", f"Source{i}") for i in range(7)]
        results = tracker.analyze(items, now=now)
        narrative = results.find("bio-weapon")

        assert narrative.count == 7
        assert len(narrative.sources) == 5
        assert len(narrative.headlines) == 5
        assert len(narrative.source_breakdown["unknown"]) == 7


class TestDeduplication:
    def test_same_link_counts_once(self, tracker, now):
        items = [
            lab_leak("story", "ZeroHedge", link="https://example.com/1"),
            lab_leak("story again", "Infowars", link="https://example.com/1"),
            lab_leak("story once more", "Breitbart", link="https://example.com/1"),
            lab_leak("other story", "Breitbart", link="https://example.com/2"),
        ]
        results = tracker.analyze(items, now=now)
        narrative = results.find("bio-weapon")
        assert narrative.count == 2
        assert narrative.sources == ["ZeroHedge", "Breitbart"]

    def test_items_without_link_count_individually(self, tracker, now):
        items = [
            lab_leak("story", "ZeroHedge", link=""),
            lab_leak("story", "ZeroHedge", link=""),
        ]
        results = tracker.analyze(items, now=now)
        assert results.find("bio-weapon").count == 2


class TestEmergingFringe:
    def test_fringe_only_narrative(self, tracker, now):
        items = [
            lab_leak("story one", "ZeroHedge"),
            lab_leak("story two", "Infowars"),
            lab_leak("story three", "Breitbart"),
            lab_leak("story four", "Gateway Pundit"),
        ]
        results = tracker.analyze(items, now=now)
        fringe = results.emerging_fringe[0]

        assert fringe.id == "bio-weapon"
        assert fringe.fringe_count == 4
        assert fringe.stage == "spreading"
        assert fringe.status == "emerging"
        assert fringe.spread_rate == "moderate"
        assert fringe.predicted_crossover is False
        assert fringe.risk_level == "low"
        assert results.overall_threat_level == "low"
        assert tracker.get_summary(results).status == "1 ACTIVE"

    def test_high_risk_fringe(self, tracker, now):
        sources = ["ZeroHedge", "Infowars", "Breitbart", "Gateway Pundit"]
        items = [lab_leak(f"evidence {i}", source) for i, source in enumerate(sources)]
        items.append(lab_leak("story", "NaturalNews"))
        results = tracker.analyze(items, now=now)
        fringe = results.find("bio-weapon")

        assert fringe in results.emerging_fringe
        assert fringe.fringe_count == 5
        assert fringe.amplification_score == 40
        assert fringe.predicted_crossover is True
        assert fringe.risk_level == "high"
        assert fringe.status == "spreading"
        assert results.high_risk_count == 1
        assert results.overall_threat_level == "elevated"
        assert results.high_risk().emerging_fringe == [fringe]
        assert tracker.get_summary(results).status == "1 HIGH RISK"

    def test_repeated_fringe_source_counts_once(self, tracker, now):
        items = [lab_leak(f"story {i}", "ZeroHedge") for i in range(3)]
        results = tracker.analyze(items, now=now)
        fringe = results.find("bio-weapon")

        assert fringe.count == 3
        assert fringe.fringe_count == 1
        assert fringe.source_breakdown["fringe"] == ["ZeroHedge"]
        assert fringe.stage == "emerging"
        assert fringe.status == "emerging"
        assert fringe.predicted_crossover is False

    def test_missing_source_is_kept_empty(self, tracker, now):
        results = tracker.analyze([lab_leak("story", None)], now=now)
        narrative = results.find("bio-weapon")

        assert narrative.headlines[0].source == ""
        assert narrative.headlines[0].source_type == "unknown"
        assert narrative.sources == [""]
        assert narrative.source_breakdown["unknown"] == [""]


class TestCrossover:
    def test_fringe_and_mainstream_together(self, tracker, now):
        items = [
            lab_leak("evidence mounts", "ZeroHedge"),
            lab_leak("story revisited", "BBC"),
            lab_leak("story widens", "CNN"),
        ]
        results = tracker.analyze(items, now=now)
        crossing = results.fringe_to_mainstream[0]

        assert crossing.id == "bio-weapon"
        assert crossing.crossover_level == 67
        assert crossing.status == "crossed"
        assert crossing.crossover_direction == "simultaneous"
        assert crossing.stage == "crossing"
        assert crossing.validation_status == "unverified"
        assert crossing.amplification_score == 17
        assert crossing.time_to_mainstream == 0
        assert results.crossing_narratives == 1
        assert results.overall_threat_level == "elevated"
        assert tracker.get_summary(results).status == "1 CROSSING"

    def test_fringe_first_then_mainstream(self, tracker, now):
        tracker.analyze([lab_leak("story one", "ZeroHedge")], now=now)

        later = now + timedelta(minutes=40)
        items = [
            lab_leak("story one", "ZeroHedge"),
            lab_leak("story two", "BBC"),
            lab_leak("story three", "CNN"),
        ]
        results = tracker.analyze(items, now=later)
        crossing = results.fringe_to_mainstream[0]
        assert crossing.crossover_direction == "fringe-to-mainstream"
        assert crossing.time_to_mainstream == 40
        assert crossing.time_since_first_seen == 40
        assert crossing.first_seen == now
        assert crossing.stage == "crossing"

        results = tracker.analyze(items, now=later + timedelta(minutes=40))
        assert results.fringe_to_mainstream[0].stage == "mainstream"

    def test_crossover_level_uses_unique_sources(self, tracker, now):
        items = [lab_leak(f"story {i}", "ZeroHedge") for i in range(3)]
        items.append(lab_leak("story revisited", "BBC"))
        results = tracker.analyze(items, now=now)
        crossing = results.fringe_to_mainstream[0]

        assert crossing.fringe_count == 1
        assert crossing.mainstream_count == 1
        assert crossing.crossover_level == 50
        assert crossing.status == "crossed"
        assert crossing.stage == "crossing"

    def test_alternative_sources_do_not_block_validation(self, tracker, now):
        items = [
            lab_leak("story revisited", "BBC"),
            lab_leak("story shared", "Substack"),
        ]
        results = tracker.analyze(items, now=now)
        crossing = results.fringe_to_mainstream[0]
        assert crossing.alternative_count == 1
        assert crossing.validation_status == "partially-verified"

        tracker.clear_history()
        items.append(lab_leak("story briefing", "White House"))
        results = tracker.analyze(items, now=now)
        crossing = results.fringe_to_mainstream[0]
        assert crossing.institutional_count == 1
        assert crossing.crossover_level == 67
        assert crossing.validation_status == "verified"

    def test_fringe_source_leaves_crossing_unverified(self, tracker, now):
        items = [
            lab_leak("story revisited", "BBC"),
            lab_leak("story shared", "ZeroHedge"),
        ]
        results = tracker.analyze(items, now=now)
        assert results.fringe_to_mainstream[0].validation_status == "unverified"


class TestDisinfo:
    def test_amplified_fringe_is_disinfo(self, tracker, now):
        items = [
            lab_leak("evidence buried", "ZeroHedge"),
            lab_leak("investigation stalled", "Infowars"),
        ]
        results = tracker.analyze(items, now=now)
        signal = results.disinfo_signals[0]

        assert signal.id == "bio-weapon"
        assert signal.amplification_score == 50
        assert signal.threat_level == "high"
        assert signal.indicators == ["High amplification"]
        assert signal.spread_pattern == "organic"
        assert results.high_risk_count == 1

    def test_countermeasures(self, tracker, now):
        items = [lab_leak(f"evidence {i}", "ZeroHedge") for i in range(3)]
        items.append(lab_leak("evidence called speculation", "Infowars"))
        results = tracker.analyze(items, now=now)
        signal = results.disinfo_signals[0]

        assert signal.debunk_score == 10
        assert signal.countermeasures == ["Lab leak evidence called speculation"]
        assert "Limited fact-checking" in signal.indicators

    def test_coordinated_burst(self, tracker, now):
        tracker.analyze(
            [lab_leak(f"evidence {i}", "ZeroHedge") for i in range(3)], now=now
        )

        later = now + timedelta(minutes=5)
        sources = ["ZeroHedge", "Infowars", "Breitbart"]
        items = [
            lab_leak(
                f"evidence {i}",
                sources[i % 3],
                timestamp=later - timedelta(seconds=30 * i),
            )
            for i in range(6)
        ]
        results = tracker.analyze(items, now=later)
        signal = results.disinfo_signals[0]

        assert signal.velocity == 36
        assert signal.spread_pattern == "coordinated"
        assert signal.indicators == [
            "High amplification",
            "Rapid spread",
            "Multi-source fringe presence",
            "Limited fact-checking",
        ]

    def test_single_fringe_source_is_not_multi_source(self, tracker, now):
        items = [lab_leak(f"evidence {i}", "ZeroHedge") for i in range(4)]
        results = tracker.analyze(items, now=now)
        signal = results.disinfo_signals[0]

        assert signal.fringe_count == 1
        assert signal.indicators == ["High amplification", "Limited fact-checking"]

    def test_mixed_timestamp_offsets(self, tracker, now):
        items = [
            lab_leak("evidence a", "ZeroHedge", timestamp=now),
            lab_leak("evidence b", "Infowars", timestamp="2024-06-01T12:00:00"),
            lab_leak("evidence c", "Breitbart", timestamp="2024-06-01T12:00:10Z"),
        ]
        results = tracker.analyze(items, now=now)
        signal = results.disinfo_signals[0]

        assert signal.count == 3
        assert signal.spread_pattern == "organic"

    def test_mainstream_amplification_is_critical(self, tracker, now):
        items = [
            lab_leak("evidence reviewed", "BBC"),
            lab_leak("investigation opens", "Reuters"),
        ]
        results = tracker.analyze(items, now=now)
        signal = results.disinfo_signals[0]

        assert signal.amplification_score == 80
        assert signal.threat_level == "critical"
        assert results.overall_threat_level == "critical"
        assert tracker.get_summary(results).status == "CRITICAL"


class TestLifecycle:
    def test_mainstream_debunk(self, tracker, now):
        items = [
            lab_leak("speculation fades", "Reuters"),
            lab_leak("speculation cools", "BBC"),
        ]
        results = tracker.analyze(items, now=now)
        narrative = results.find("bio-weapon")
        assert narrative.debunk_score == 80
        assert narrative.stage == "debunked"
        assert narrative in results.narrative_watch

    def test_velocity_from_history(self, tracker, now):
        tracker.analyze([lab_leak(f"story {i}", f"Src{i}") for i in range(2)], now=now)
        later = now + timedelta(minutes=10)
        results = tracker.analyze(
            [lab_leak(f"story {i}", f"Src{i}") for i in range(6)], now=later
        )
        assert results.find("bio-weapon").velocity == 24

    def test_dormant_narrative_is_forgotten(self, tracker, now):
        tracker.analyze([lab_leak("story", "ZeroHedge")], now=now)
        later = now + timedelta(minutes=130)
        results = tracker.analyze([lab_leak("story", "ZeroHedge")], now=later)
        narrative = results.find("bio-weapon")
        assert narrative.first_seen == later
        assert narrative.time_since_first_seen == 0

    def test_clear_history(self, tracker, now):
        tracker.analyze([lab_leak("story", "ZeroHedge")], now=now)
        tracker.clear_history()
        later = now + timedelta(minutes=10)
        results = tracker.analyze([lab_leak("story", "ZeroHedge")], now=later)
        assert results.find("bio-weapon").first_seen == later

    def test_no_data_summary(self, tracker):
        summary = tracker.get_summary(None)
        assert summary.status == "NO DATA"
        assert summary.total == 0

    def test_independent_trackers(self, now):
        first = NarrativeTracker()
        second = NarrativeTracker()
        first.analyze([lab_leak("story", "ZeroHedge")], now=now)
        later = now + timedelta(minutes=10)
        results = second.analyze([lab_leak("story", "ZeroHedge")], now=later)
        assert results.find("bio-weapon").first_seen == later
