"""
Cost Distribution Chart
=======================
Plotly histogram of the gp cost of every simulated umbral creation.

The distribution has a long right tail (an unlucky trial can fall back to
NONE many times), so the mean, median and p95 are marked to show how far
apart they sit.
"""

import plotly.graph_objects as go
from typing import Optional, Sequence

from .costs import CostTable, trial_cost
from .stats import percentile
from .trial import Trial


def create_cost_distribution_chart(
    trials: Sequence[Trial],
    cost_table: CostTable,
    bins: int = 60,
    height: int = 350,
    expected_cost: Optional[float] = None,
) -> go.Figure:
    """
    Create a histogram of per-trial gp cost.

    Args:
        trials: Finished trials from ``simulate()``
        cost_table: Unit prices used to convert each trial into gp
        bins: Number of histogram bins
        height: Figure height in pixels
        expected_cost: Exact expected cost to mark alongside the simulated values

    Returns:
        Plotly Figure object ready for display with st.plotly_chart()
    """
    if not trials:
        raise ValueError("no trials to chart")

    costs = sorted(trial_cost(t.clusters_spent, t.dream_matters_spent, cost_table) for t in trials)
    mean_cost = sum(costs) // len(costs)
    median_cost = costs[len(costs) // 2]
    p95_cost = percentile(costs, 0.95)

    fig = go.Figure()
    fig.add_trace(go.Histogram(
        x=costs,
        nbinsx=bins,
        marker=dict(color='rgba(0, 212, 255, 0.6)', line=dict(color='rgba(0, 212, 255, 0.9)', width=1)),
        hovertemplate='Cost: %{x:,} gp<br>Trials: %{y:,}<extra></extra>',
        name='Trials',
        showlegend=False,
    ))

    markers = [
        ("Median", median_cost, "#7bed9f"),
        ("Mean", mean_cost, "#ffd700"),
        ("P95", p95_cost, "#ff6b6b"),
    ]
    if expected_cost is not None:
        markers.append(("Expected", expected_cost, "#9370db"))

    for label, value, color in markers:
        fig.add_vline(
            x=value,
            line_dash="dash",
            line_color=color,
            line_width=2,
            annotation_text=f"{label}: {value:,.0f}",
            annotation_position="top",
            annotation_font_color=color,
            annotation_font_size=11,
        )

    fig.update_layout(
        title=dict(
            text=f"Cost per Umbral Creation ({len(costs):,} trials)",
            font=dict(size=14),
        ),
        xaxis=dict(
            title="Cost (gp)",
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        yaxis=dict(
            title="Trials",
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        height=height,
        margin=dict(l=50, r=20, t=50, b=40),
        plot_bgcolor='rgba(0, 0, 0, 0)',
        paper_bgcolor='rgba(0, 0, 0, 0)',
        bargap=0.05,
    )

    return fig
