"""
Exact Expected Cost Analysis
============================
Solves the tier Markov chain for the expected resources spent until MASTER.

Used to check the Monte Carlo results: with enough trials the simulated
averages should land on these values.

For each non-terminal tier X with outcomes o (probability p_o, delta r_o,
next tier n_o) the expected total from X satisfies

    E[X] = sum_o p_o * (r_o + E[n_o]),    E[MASTER] = 0

Outcomes that stay at X are folded into the denominator:

    E[X] = (sum_o p_o * r_o + sum_{n_o != X} p_o * E[n_o]) / (1 - p_stay)

and the system is iterated until no value moves by more than the tolerance.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .constants import MARKOV_MAX_SWEEPS, MARKOV_TOLERANCE
from .costs import CostTable
from .tiers import TRANSITION_TABLE, Tier, TierRule, TransitionOutcome, outcome_probabilities


@dataclass
class MarkovResult:
    """Expected values from each tier until the terminal tier is reached."""
    expected_clusters: Dict[Tier, float]  # E[clusters] from tier to MASTER
    expected_dream_matter: Dict[Tier, float]
    expected_attempts: Dict[Tier, float]
    sweeps: int  # Iterations needed to converge


def _solve(
    table: Dict[Tier, TierRule],
    reward: Callable[[TransitionOutcome], float],
) -> Tuple[Dict[Tier, float], int]:
    transient = [tier for tier in Tier if not tier.is_terminal]
    E = {tier: 0.0 for tier in Tier}

    for sweep in range(1, MARKOV_MAX_SWEEPS + 1):
        max_change = 0.0

        for tier in reversed(transient):
            stay = 0.0
            numerator = 0.0
            for p, outcome in outcome_probabilities(tier, table):
                numerator += p * reward(outcome)
                if outcome.next_tier is tier:
                    stay += p
                else:
                    numerator += p * E[outcome.next_tier]

            if stay >= 1.0:
                new_E = float('inf')
            else:
                new_E = numerator / (1 - stay)

            max_change = max(max_change, abs(new_E - E[tier]))
            E[tier] = new_E

        if max_change < MARKOV_TOLERANCE:
            return E, sweep

    return E, MARKOV_MAX_SWEEPS


def solve_expected_costs(table: Dict[Tier, TierRule] = TRANSITION_TABLE) -> MarkovResult:
    """Expected clusters, dream matter and attempts from every tier."""
    clusters, sweeps_c = _solve(table, lambda o: o.clusters)
    dream_matter, sweeps_d = _solve(table, lambda o: o.dream_matter)
    attempts, sweeps_a = _solve(table, lambda o: 1.0)

    return MarkovResult(
        expected_clusters=clusters,
        expected_dream_matter=dream_matter,
        expected_attempts=attempts,
        sweeps=max(sweeps_c, sweeps_d, sweeps_a),
    )


def expected_cost(
    cost_table: CostTable,
    table: Dict[Tier, TierRule] = TRANSITION_TABLE,
    start: Tier = Tier.NONE,
) -> float:
    """Expected gp to take one item from ``start`` to MASTER."""
    result = solve_expected_costs(table)
    return (result.expected_clusters[start] * cost_table.cluster_cost
            + result.expected_dream_matter[start] * cost_table.dream_matter_cost)
