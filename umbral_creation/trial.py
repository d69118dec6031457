"""
Trial Runner
============
One simulated umbral creation, walked from ``NONE`` to ``MASTER``.
"""

from dataclasses import dataclass

from .constants import TRIAL_STEP_LIMIT
from .errors import TerminalTierError, TrialStepLimitExceeded
from .rng import RandomVariateSource
from .tiers import Tier, Transition, tries_for, transition


@dataclass
class Trial:
    """A single run of the process and the resources it has consumed so far."""
    tier: Tier = Tier.NONE
    clusters_spent: int = 0
    dream_matters_spent: int = 0
    attempts: int = 0

    @property
    def is_done(self) -> bool:
        return self.tier.is_terminal

    def apply(self, step: Transition) -> None:
        """Add a transition's costs and move to its tier."""
        if self.is_done:
            raise TerminalTierError("cannot apply a transition to a finished trial")
        self.clusters_spent += step.clusters
        self.dream_matters_spent += step.dream_matter
        self.tier = step.next_tier
        self.attempts += 1


def run_trial(source: RandomVariateSource, step_limit: int = TRIAL_STEP_LIMIT) -> Trial:
    """
    Run a fresh trial to completion using draws from ``source``.

    Raises:
        TrialStepLimitExceeded: if the trial is still unfinished after
            ``step_limit`` attempts.
    """
    trial = Trial()
    while not trial.is_done:
        if trial.attempts >= step_limit:
            raise TrialStepLimitExceeded(
                f"trial stuck at {trial.tier.name} after {trial.attempts} attempts"
            )
        draw = source.next_in_range(1, tries_for(trial.tier))
        trial.apply(transition(trial.tier, draw))
    return trial
