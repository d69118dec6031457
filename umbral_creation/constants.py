"""
Umbral Creation - Run Configuration
====================================
Fixed settings for a simulation run. The CLI and the web page can override
the trial and worker counts per run; nothing here changes while a run is
in progress.
"""

# =============================================================================
# SIMULATION SIZE
# =============================================================================

SIMULATION_COUNT = 1_000_000  # Trials per run

# One core coordinates (spawns, joins, aggregates), the rest simulate
NUM_CORES = 8
WORKER_COUNT = NUM_CORES - 1

# A single trial averages ~54 attempts; hitting this means the table is broken
TRIAL_STEP_LIMIT = 1_000_000


# =============================================================================
# MARKOV ANALYSIS
# =============================================================================

MARKOV_TOLERANCE = 1e-10
MARKOV_MAX_SWEEPS = 100_000
