"""
Cost Table
==========
Unit prices (in gp) for the two resources and conversion of simulated
resource counts into gp.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import CostTableError
from .stats import SimulationSummary

MISSING_CLUSTER_COST = "Please provide the cluster of solace cost."
MISSING_DREAM_MATTER_COST = "Please provide the dream matter cost."
# Both prices report the same parse failure
UNPARSEABLE_COST = "Failed to parse the cluster cost."

_PRICE_PATTERN = re.compile(r"\+?[0-9]+")
# Prices are unsigned 64-bit values
MAX_PRICE = 2 ** 64 - 1


@dataclass(frozen=True)
class CostTable:
    """Price per cluster of solace and per dream matter."""
    cluster_cost: int
    dream_matter_cost: int


def _parse_price(raw: str) -> int:
    if not _PRICE_PATTERN.fullmatch(raw):
        raise CostTableError(UNPARSEABLE_COST)
    value = int(raw)
    if value > MAX_PRICE:
        raise CostTableError(UNPARSEABLE_COST)
    return value


def parse_cost_table(cluster_arg: Optional[str], dream_matter_arg: Optional[str]) -> CostTable:
    """
    Build a cost table from the two raw price arguments.

    Both arguments are checked for presence before either is parsed. Prices
    must be non-negative integers.

    Raises:
        CostTableError: with the user-facing message for the first problem.
    """
    if cluster_arg is None:
        raise CostTableError(MISSING_CLUSTER_COST)
    if dream_matter_arg is None:
        raise CostTableError(MISSING_DREAM_MATTER_COST)

    return CostTable(
        cluster_cost=_parse_price(cluster_arg),
        dream_matter_cost=_parse_price(dream_matter_arg),
    )


def total_cost(summary: SimulationSummary, table: CostTable) -> int:
    """gp spent across every trial of the run."""
    return (summary.total_clusters * table.cluster_cost
            + summary.total_dream_matter * table.dream_matter_cost)


def average_cost(summary: SimulationSummary, table: CostTable) -> int:
    """Average gp per umbral creation, priced from totals then truncated."""
    return total_cost(summary, table) // summary.count


def trial_cost(clusters: int, dream_matter: int, table: CostTable) -> int:
    """gp cost of a single trial."""
    return clusters * table.cluster_cost + dream_matter * table.dream_matter_cost
