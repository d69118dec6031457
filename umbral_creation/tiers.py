"""
Umbral Creation - Tier Transition Model
========================================
Quality tiers and the probabilities of moving between them.

Every attempt at a non-terminal tier rolls a draw in ``[1, tries]`` and the
draw picks exactly one outcome range. Outcomes can advance, repeat or regress
the tier and each one adds a fixed number of clusters of solace and dream
matter to the running total.

    NONE     191 tries   1-121 -> CRUDE (+20 clusters, +1 dream matter)
                       122-191 -> NONE  (+20 clusters)
    CRUDE    248 tries    1-96 -> REGULAR (+75)
                        97-174 -> CRUDE   (+75)
                       175-248 -> NONE    (+0, the item is lost)
    REGULAR  131 tries    1-14 -> MASTER  (+150)
                         15-68 -> CRUDE   (+75)
                        69-131 -> NONE    (+0, the item is lost)
    MASTER   terminal
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .errors import TerminalTierError


# =============================================================================
# ENUMS
# =============================================================================

class Tier(Enum):
    """Umbral creation quality tier from lowest to highest."""
    NONE = "none"
    CRUDE = "crude"
    REGULAR = "regular"
    MASTER = "master"

    @property
    def is_terminal(self) -> bool:
        return self is Tier.MASTER


# =============================================================================
# TABLE TYPES
# =============================================================================

@dataclass(frozen=True)
class TransitionOutcome:
    """One inclusive draw range of a tier and what landing in it does."""
    low: int
    high: int
    next_tier: Tier
    clusters: int
    dream_matter: int = 0

    def covers(self, draw: int) -> bool:
        return self.low <= draw <= self.high

    @property
    def width(self) -> int:
        return self.high - self.low + 1


@dataclass(frozen=True)
class TierRule:
    """Sampling range and outcome ranges for a single non-terminal tier."""
    tries: int
    outcomes: Tuple[TransitionOutcome, ...]


@dataclass(frozen=True)
class Transition:
    """Result of one attempt: the tier to move to and the resources it cost."""
    next_tier: Tier
    clusters: int
    dream_matter: int


# =============================================================================
# TRANSITION TABLE
# =============================================================================

TRANSITION_TABLE: Dict[Tier, TierRule] = {
    Tier.NONE: TierRule(191, (
        TransitionOutcome(1, 121, Tier.CRUDE, 20, 1),
        TransitionOutcome(122, 191, Tier.NONE, 20),
    )),
    Tier.CRUDE: TierRule(248, (
        TransitionOutcome(1, 96, Tier.REGULAR, 75),
        TransitionOutcome(97, 174, Tier.CRUDE, 75),
        TransitionOutcome(175, 248, Tier.NONE, 0),
    )),
    Tier.REGULAR: TierRule(131, (
        TransitionOutcome(1, 14, Tier.MASTER, 150),
        TransitionOutcome(15, 68, Tier.CRUDE, 75),
        TransitionOutcome(69, 131, Tier.NONE, 0),
    )),
}


def validate_transition_table(table: Dict[Tier, TierRule]) -> None:
    """
    Check that a transition table is well formed.

    Every non-terminal tier needs a rule, the terminal tier must not have one,
    and each rule's outcome ranges must tile ``[1, tries]`` in order with no
    gaps or overlaps. Resource deltas cannot be negative.

    Raises:
        ValueError: describing the first problem found.
    """
    for tier in Tier:
        if tier.is_terminal:
            if tier in table:
                raise ValueError(f"terminal tier {tier.name} must not have a rule")
            continue
        if tier not in table:
            raise ValueError(f"no rule for tier {tier.name}")

        rule = table[tier]
        if rule.tries < 1:
            raise ValueError(f"{tier.name}: tries must be positive, got {rule.tries}")
        if not rule.outcomes:
            raise ValueError(f"{tier.name}: no outcomes")

        expected_low = 1
        for outcome in rule.outcomes:
            if outcome.low != expected_low or outcome.high < outcome.low:
                raise ValueError(
                    f"{tier.name}: range [{outcome.low}, {outcome.high}] "
                    f"should start at {expected_low}"
                )
            if outcome.clusters < 0 or outcome.dream_matter < 0:
                raise ValueError(f"{tier.name}: negative resource delta")
            expected_low = outcome.high + 1

        if expected_low - 1 != rule.tries:
            raise ValueError(
                f"{tier.name}: ranges end at {expected_low - 1}, expected {rule.tries}"
            )


validate_transition_table(TRANSITION_TABLE)


# =============================================================================
# TRANSITIONS
# =============================================================================

def _rule_for(tier: Tier, table: Dict[Tier, TierRule]) -> TierRule:
    if tier.is_terminal:
        raise TerminalTierError(f"{tier.name} is terminal and has no transitions")
    return table[tier]


def tries_for(tier: Tier, table: Dict[Tier, TierRule] = TRANSITION_TABLE) -> int:
    """Upper bound of the draw range used at ``tier``."""
    return _rule_for(tier, table).tries


def transition(
    tier: Tier,
    draw: int,
    table: Dict[Tier, TierRule] = TRANSITION_TABLE,
) -> Transition:
    """
    Map a tier and a draw to the next tier and the resources spent.

    Pure function; the caller owns all mutation.

    Raises:
        TerminalTierError: if ``tier`` is terminal.
        ValueError: if ``draw`` falls outside ``[1, tries]``.
    """
    rule = _rule_for(tier, table)
    for outcome in rule.outcomes:
        if outcome.covers(draw):
            return Transition(outcome.next_tier, outcome.clusters, outcome.dream_matter)
    raise ValueError(f"draw {draw} outside [1, {rule.tries}] for {tier.name}")


def outcome_probabilities(
    tier: Tier,
    table: Dict[Tier, TierRule] = TRANSITION_TABLE,
) -> List[Tuple[float, TransitionOutcome]]:
    """Probability of each outcome at ``tier`` alongside the outcome itself."""
    rule = _rule_for(tier, table)
    return [(outcome.width / rule.tries, outcome) for outcome in rule.outcomes]
