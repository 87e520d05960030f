"""
Unit tests for the in-process metrics collector.
"""

from swatchbook.utils.metrics import MAX_TIMING_SAMPLES, MetricsCollector


class TestMetricsCollector:
    """Test counters and timing statistics."""

    def test_counters(self):
        metrics = MetricsCollector()
        metrics.increment_request_count()
        metrics.increment_search_mode("hex")
        metrics.increment_catalog_mutation("bulk", 3)

        counters = metrics.get_counters()
        assert counters["http_requests_total"] == 1
        assert counters["search_mode_total_hex"] == 1
        assert counters["catalog_bulk_total"] == 3

    def test_timing_stats(self):
        metrics = MetricsCollector()
        for duration in (10.0, 20.0, 30.0):
            metrics.record_timing("search", duration)

        stats = metrics.get_timing_stats()["search_duration_ms"]
        assert stats["count"] == 3
        assert stats["min"] == 10.0
        assert stats["max"] == 30.0
        assert stats["p50"] == 20.0

    def test_timings_keep_only_recent_samples(self):
        metrics = MetricsCollector()
        for duration in range(MAX_TIMING_SAMPLES + 50):
            metrics.record_timing("request", float(duration))

        stats = metrics.get_timing_stats()["request_duration_ms"]
        assert stats["count"] == MAX_TIMING_SAMPLES
        assert stats["min"] == 50.0
        assert stats["max"] == float(MAX_TIMING_SAMPLES + 49)

    def test_reset(self):
        metrics = MetricsCollector()
        metrics.increment_request_count()
        metrics.record_timing("request", 5.0)
        metrics.reset()

        assert metrics.get_counters() == {}
        assert metrics.get_timing_stats() == {}
