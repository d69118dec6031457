"""
Unit tests for stats.py - totals, truncating averages and upper medians.
"""
import pytest
from umbral_creation.stats import percentile, summarize, upper_median
from umbral_creation.tiers import Tier
from umbral_creation.trial import Trial


def make_trials(clusters, dream_matter=None, attempts=None):
    dream_matter = dream_matter or [1] * len(clusters)
    attempts = attempts or [3] * len(clusters)
    return [
        Trial(tier=Tier.MASTER, clusters_spent=c, dream_matters_spent=d, attempts=a)
        for c, d, a in zip(clusters, dream_matter, attempts)
    ]


class TestSummarize:
    """Tests for summarize()."""

    def test_odd_count(self):
        """N=5: total 150, average 30, median is the exact middle."""
        summary = summarize(make_trials([10, 20, 30, 40, 50]))
        assert summary.count == 5
        assert summary.total_clusters == 150
        assert summary.avg_clusters == 30
        assert summary.median_clusters == 30

    def test_even_count_uses_upper_median(self):
        """N=4: index 2 is taken, not the average of the two middle values."""
        summary = summarize(make_trials([10, 20, 30, 40]))
        assert summary.median_clusters == 30
        assert summary.avg_clusters == 25

    def test_average_truncates(self):
        summary = summarize(make_trials([1, 2], dream_matter=[1, 4]))
        assert summary.avg_clusters == 1
        assert summary.avg_dream_matter == 2

    def test_unsorted_input(self):
        summary = summarize(make_trials([50, 10, 40, 20, 30]))
        assert summary.median_clusters == 30

    def test_counters_sorted_independently(self):
        """The dream matter median comes from its own ordering."""
        trials = make_trials([10, 20, 30], dream_matter=[9, 1, 5])
        summary = summarize(trials)
        assert summary.median_clusters == 20
        assert summary.median_dream_matter == 5
        assert summary.total_dream_matter == 15
        assert summary.avg_dream_matter == 5

    def test_input_not_modified(self):
        trials = make_trials([40, 10, 30])
        before = [t.clusters_spent for t in trials]
        summarize(trials)
        assert [t.clusters_spent for t in trials] == before

    def test_tail_statistics(self):
        summary = summarize(make_trials(list(range(1, 101))))
        assert summary.max_clusters == 100
        assert summary.p95_clusters == 96  # sorted index int(100 * 0.95) = 95

    def test_average_attempts(self):
        summary = summarize(make_trials([245, 245], attempts=[3, 8]))
        assert summary.avg_attempts == 5

    def test_single_trial(self):
        summary = summarize(make_trials([245]))
        assert summary.avg_clusters == 245
        assert summary.median_clusters == 245
        assert summary.p95_clusters == 245

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            summarize([])


class TestHelpers:
    """Tests for upper_median() and percentile()."""

    def test_upper_median(self):
        assert upper_median([3, 1, 2]) == 2
        assert upper_median([4, 1, 3, 2]) == 3

    def test_upper_median_empty(self):
        with pytest.raises(ValueError):
            upper_median([])

    def test_percentile_clamps_to_last(self):
        assert percentile([1, 2, 3], 1.0) == 3

    def test_percentile_zero(self):
        assert percentile([5, 6, 7], 0.0) == 5

    def test_percentile_empty(self):
        with pytest.raises(ValueError):
            percentile([], 0.5)
