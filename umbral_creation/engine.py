"""
Simulation Engine
=================
Runs a fixed number of trials across a pool of worker threads.

Each worker repeatedly runs a trial with its own random source and tries to
commit it into a shared, bounded result collection. The length check and the
append happen under one lock acquisition, so the collection ends up with
exactly ``target_count`` trials no matter how many workers race for the last
slot. Trials that lose that race are discarded and the worker exits.

Worker failures come back to the coordinator as future exceptions. The first
one closes the collection so the remaining workers stop early, and once every
worker has been joined the run is aborted with ``SimulationAborted``.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional

from .constants import SIMULATION_COUNT, TRIAL_STEP_LIMIT, WORKER_COUNT
from .errors import SimulationAborted
from .rng import RandomVariateSource, spawn_sources
from .trial import Trial, run_trial

logger = logging.getLogger(__name__)

SourceFactory = Callable[[int], RandomVariateSource]


class ResultCollection:
    """Append-only list of finished trials, capped at ``target_count``."""

    def __init__(self, target_count: int):
        self.target_count = target_count
        self._trials: List[Trial] = []
        self._closed = False
        self._lock = threading.Lock()

    def try_commit(self, trial: Trial) -> bool:
        """Append ``trial`` if there is still room. Returns False once full or closed."""
        with self._lock:
            if self._closed or len(self._trials) >= self.target_count:
                return False
            self._trials.append(trial)
            return True

    def close(self) -> None:
        """Refuse all further commits."""
        with self._lock:
            self._closed = True

    def __len__(self) -> int:
        with self._lock:
            return len(self._trials)

    def take(self) -> List[Trial]:
        """Hand over the collected trials. Only call after every worker has exited."""
        with self._lock:
            trials, self._trials = self._trials, []
            self._closed = True
        return trials


def _worker_loop(
    results: ResultCollection,
    source: RandomVariateSource,
    step_limit: int,
) -> int:
    committed = 0
    while True:
        trial = run_trial(source, step_limit)
        if not results.try_commit(trial):
            return committed
        committed += 1


def simulate(
    target_count: int = SIMULATION_COUNT,
    worker_count: int = WORKER_COUNT,
    seed: Optional[int] = None,
    source_factory: Optional[SourceFactory] = None,
    step_limit: int = TRIAL_STEP_LIMIT,
) -> List[Trial]:
    """
    Run ``target_count`` trials on ``worker_count`` threads and return them all.

    Blocks until every worker has exited. The order of the returned trials is
    the order they were committed in, which varies between runs.

    Args:
        target_count: Number of finished trials to collect
        worker_count: Number of worker threads
        seed: Seed for deriving per-worker random sources
        source_factory: Builds the random source for worker ``i``; overrides ``seed``
        step_limit: Attempts allowed per trial before it counts as stuck

    Raises:
        ValueError: for a negative ``target_count`` or a ``worker_count`` below 1.
        SimulationAborted: if any worker failed. No partial results are returned.
    """
    if target_count < 0:
        raise ValueError(f"target_count must be >= 0, got {target_count}")
    if worker_count < 1:
        raise ValueError(f"worker_count must be >= 1, got {worker_count}")

    if source_factory is not None:
        sources = [source_factory(i) for i in range(worker_count)]
    else:
        sources = spawn_sources(worker_count, seed)

    results = ResultCollection(target_count)
    failures: List[BaseException] = []

    logger.info("Simulating %d trials on %d workers", target_count, worker_count)
    started = time.perf_counter()

    with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="uc-worker") as executor:
        future_to_worker = {
            executor.submit(_worker_loop, results, source, step_limit): index
            for index, source in enumerate(sources)
        }

        for future in as_completed(future_to_worker):
            worker = future_to_worker[future]
            error = future.exception()
            if error is not None:
                if not failures:
                    results.close()
                logger.error("Worker %d failed: %s: %s", worker, type(error).__name__, error)
                failures.append(error)
            else:
                logger.debug("Worker %d committed %d trials", worker, future.result())

    if failures:
        raise SimulationAborted(
            f"{len(failures)} of {worker_count} workers failed"
        ) from failures[0]

    trials = results.take()
    logger.info("Collected %d trials in %.2fs", len(trials), time.perf_counter() - started)
    return trials
