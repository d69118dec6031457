"""
Text report for a finished simulation run.
"""

from typing import List

from .costs import CostTable, average_cost
from .stats import SimulationSummary


def format_report(summary: SimulationSummary, cost_table: CostTable) -> List[str]:
    """The five report lines, values printed as plain integers."""
    return [
        f"Average umbral creation cost: {average_cost(summary, cost_table)} gp",
        f"Average cluster count per UC: {summary.avg_clusters}",
        f"Average dream matter count per UC: {summary.avg_dream_matter}",
        f"Median dream matter count per UC: {summary.median_dream_matter}",
        f"Median cluster count per UC: {summary.median_clusters}",
    ]


def print_report(summary: SimulationSummary, cost_table: CostTable) -> None:
    for line in format_report(summary, cost_table):
        print(line)
