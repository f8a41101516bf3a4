"""
Tests for the rolling history stores.
"""

from datetime import timedelta

from conftest import NOW

from newswatch.analysis.history import (
    CorrelationHistory,
    MinuteBucketHistory,
    NarrativeHistory,
    SampleHistory,
)


class TestMinuteBucketHistory:
    def test_record_skips_existing_bucket(self):
        history = MinuteBucketHistory(retention_minutes=60)
        assert history.record(100, {"tariffs": 2})
        assert not history.record(100, {"tariffs": 9})
        assert history.get(100) == {"tariffs": 2}

    def test_get_returns_copy(self):
        history = MinuteBucketHistory()
        history.record(5, {"a": 1})
        history.get(5)["a"] = 99
        assert history.get(5) == {"a": 1}
        assert history.get(6) == {}

    def test_prunes_old_buckets_on_write(self):
        history = MinuteBucketHistory(retention_minutes=60)
        history.record(0, {"a": 1})
        history.record(30, {"a": 2})
        history.record(61, {"a": 3})
        assert 0 not in history
        assert 30 in history
        assert len(history) == 2

    def test_find_oldest_within_lookback(self):
        history = MinuteBucketHistory()
        history.record(80, {"a": 1})
        history.record(90, {"a": 4})
        history.record(95, {"b": 2})
        history.record(100, {"a": 7})

        assert history.find_oldest("a", 100, 15) == (90, 4)
        assert history.find_oldest("b", 100, 15) == (95, 2)
        assert history.find_oldest("c", 100, 15) is None
        # The current bucket is never a candidate
        assert history.find_oldest("a", 100, 0) is None

    def test_clear(self):
        history = MinuteBucketHistory()
        history.record(1, {"a": 1})
        history.clear()
        assert len(history) == 0


class TestSampleHistory:
    def test_append_prunes_by_age(self):
        history = SampleHistory(timedelta(minutes=30))
        history.append("x", NOW, 1)
        history.append("x", NOW + timedelta(minutes=10), 2)
        samples = history.append("x", NOW + timedelta(minutes=35), 3)
        assert [s.count for s in samples] == [2, 3]

    def test_out_of_order_samples_are_sorted(self):
        history = SampleHistory(timedelta(minutes=30))
        history.append("x", NOW + timedelta(minutes=5), 2)
        history.append("x", NOW, 1)
        assert [s.count for s in history.samples("x")] == [1, 2]

    def test_prune_drops_idle_keys(self):
        history = SampleHistory(timedelta(minutes=30))
        history.append("x", NOW, 1)
        history.append("y", NOW + timedelta(minutes=20), 1)
        assert history.prune(NOW + timedelta(minutes=31)) == 1
        assert "x" not in history
        assert "y" in history


class TestCorrelationHistory:
    def test_peak_only_moves_up(self):
        history = CorrelationHistory()
        history.update_peak("tariffs", 3, NOW)
        later = NOW + timedelta(minutes=5)
        assert history.update_peak("tariffs", 2, later).timestamp == NOW
        assert history.update_peak("tariffs", 5, later).timestamp == later

    def test_clear_resets_everything(self):
        history = CorrelationHistory()
        history.counts.record(1, {"a": 1})
        history.deltas.record(1, {"a": 1})
        history.update_peak("a", 1, NOW)
        history.clear()
        assert len(history.counts) == 0
        assert len(history.deltas) == 0
        assert history.peaks == {}


class TestNarrativeHistory:
    def test_record_tracks_first_seen_and_crossover(self):
        history = NarrativeHistory(retention_minutes=120)
        entry = history.record("lab", NOW, ["ZeroHedge"], ["fringe"], 1, False)
        assert entry.first_seen == NOW
        assert entry.fringe_to_mainstream_time is None

        later = NOW + timedelta(minutes=20)
        entry = history.record("lab", later, ["BBC"], ["fringe", "mainstream"], 2, True)
        assert entry.first_seen == NOW
        assert entry.fringe_to_mainstream_time == later
        assert entry.sources == {"ZeroHedge", "BBC"}
        assert [s.count for s in entry.count_history] == [1, 2]

    def test_crossover_time_is_set_once(self):
        history = NarrativeHistory()
        history.record("lab", NOW, [], ["mainstream"], 1, True)
        entry = history.record(
            "lab", NOW + timedelta(minutes=5), [], ["mainstream"], 1, True
        )
        assert entry.fringe_to_mainstream_time == NOW

    def test_prune_forgets_dormant_narratives(self):
        history = NarrativeHistory(retention_minutes=120)
        history.record("old", NOW, [], [], 1, False)
        history.record("fresh", NOW + timedelta(minutes=100), [], [], 1, False)
        assert history.prune(NOW + timedelta(minutes=121)) == 1
        assert "old" not in history
        assert "fresh" in history
