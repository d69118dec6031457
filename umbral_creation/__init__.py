"""
Umbral Creation Cost Simulator
==============================
Monte Carlo estimate of what it costs to craft a master umbral creation.

An attempt at each tier can advance, repeat or regress the item, so the cost
is a random walk. Many independent trials run in parallel worker threads and
their resource counts are summarized and priced in gp.
"""

from .constants import (
    SIMULATION_COUNT,
    NUM_CORES,
    WORKER_COUNT,
    TRIAL_STEP_LIMIT,
)

from .errors import (
    UmbralCreationError,
    CostTableError,
    TerminalTierError,
    TrialStepLimitExceeded,
    SimulationAborted,
)

from .tiers import (
    Tier,
    TierRule,
    Transition,
    TransitionOutcome,
    TRANSITION_TABLE,
    transition,
    tries_for,
    validate_transition_table,
)

from .rng import RandomVariateSource, spawn_sources
from .trial import Trial, run_trial
from .engine import ResultCollection, simulate
from .stats import SimulationSummary, summarize
from .costs import CostTable, parse_cost_table, average_cost
from .markov import MarkovResult, solve_expected_costs, expected_cost

__all__ = [
    # Configuration
    'SIMULATION_COUNT',
    'NUM_CORES',
    'WORKER_COUNT',
    'TRIAL_STEP_LIMIT',
    # Errors
    'UmbralCreationError',
    'CostTableError',
    'TerminalTierError',
    'TrialStepLimitExceeded',
    'SimulationAborted',
    # Transition model
    'Tier',
    'TierRule',
    'Transition',
    'TransitionOutcome',
    'TRANSITION_TABLE',
    'transition',
    'tries_for',
    'validate_transition_table',
    # Simulation
    'RandomVariateSource',
    'spawn_sources',
    'Trial',
    'run_trial',
    'ResultCollection',
    'simulate',
    # Aggregation and pricing
    'SimulationSummary',
    'summarize',
    'CostTable',
    'parse_cost_table',
    'average_cost',
    'MarkovResult',
    'solve_expected_costs',
    'expected_cost',
]
