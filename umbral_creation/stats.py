"""
Statistics Aggregator
=====================
Totals, averages and medians over a finished set of trials.

Averages use integer (truncating) division and medians take the sorted
element at index ``N // 2``, which is the upper median when N is even.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .trial import Trial


@dataclass(frozen=True)
class SimulationSummary:
    """Aggregate resource usage across all trials of a run."""
    count: int
    total_clusters: int
    total_dream_matter: int
    avg_clusters: int
    avg_dream_matter: int
    median_clusters: int
    median_dream_matter: int
    p95_clusters: int
    max_clusters: int
    avg_attempts: int


def percentile(sorted_values: Sequence[int], fraction: float) -> int:
    """Element at ``int(len * fraction)`` of an ascending sequence, clamped to the last index."""
    if not sorted_values:
        raise ValueError("percentile of an empty sequence")
    index = min(int(len(sorted_values) * fraction), len(sorted_values) - 1)
    return sorted_values[index]


def upper_median(values: Sequence[int]) -> int:
    """Sort a copy of ``values`` and take the element at ``len // 2``."""
    if not values:
        raise ValueError("median of an empty sequence")
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def summarize(trials: Sequence[Trial]) -> SimulationSummary:
    """
    Aggregate a completed run. ``trials`` is only read.

    Raises:
        ValueError: if ``trials`` is empty.
    """
    n = len(trials)
    if n == 0:
        raise ValueError("cannot summarize an empty run")

    clusters: List[int] = sorted(t.clusters_spent for t in trials)
    dream_matter: List[int] = sorted(t.dream_matters_spent for t in trials)
    total_clusters = sum(clusters)
    total_dream_matter = sum(dream_matter)

    return SimulationSummary(
        count=n,
        total_clusters=total_clusters,
        total_dream_matter=total_dream_matter,
        avg_clusters=total_clusters // n,
        avg_dream_matter=total_dream_matter // n,
        median_clusters=clusters[n // 2],
        median_dream_matter=dream_matter[n // 2],
        p95_clusters=percentile(clusters, 0.95),
        max_clusters=clusters[-1],
        avg_attempts=sum(t.attempts for t in trials) // n,
    )
