"""Exception types raised by the umbral creation simulator."""


class UmbralCreationError(Exception):
    """Base class for all simulator errors."""


class CostTableError(UmbralCreationError):
    """A unit price argument is missing or cannot be parsed.

    The message is user facing and is printed as-is by the CLI.
    """


class TerminalTierError(UmbralCreationError):
    """A transition was requested from the terminal tier."""


class TrialStepLimitExceeded(UmbralCreationError):
    """A trial ran past the step limit without reaching the terminal tier."""


class SimulationAborted(UmbralCreationError):
    """A worker failed, so the whole run was abandoned without results."""
