"""
Umbral Creation Cost Calculator - Streamlit Web App
Run the Monte Carlo simulation from the browser and compare it with the exact
Markov chain expectation.

    streamlit run umbral_creation/streamlit_app/app.py
"""
import os
import sys

import streamlit as st

# Add repository root to path so the package imports work from a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from umbral_creation.charts import create_cost_distribution_chart
from umbral_creation.constants import WORKER_COUNT
from umbral_creation.costs import CostTable, average_cost
from umbral_creation.engine import simulate
from umbral_creation.markov import solve_expected_costs
from umbral_creation.stats import summarize
from umbral_creation.tiers import TRANSITION_TABLE, Tier, outcome_probabilities

st.set_page_config(page_title="Umbral Creation Calculator", page_icon="🔮", layout="wide")

st.markdown("""
<style>
    .block-container { padding-top: 1rem; }
    .section-header {
        font-size: 16px;
        font-weight: bold;
        color: #ffd700;
        margin-bottom: 8px;
        padding: 8px;
        background: #2a2a4e;
        border-radius: 4px;
    }
</style>
""", unsafe_allow_html=True)

# Smaller default than the CLI so the page stays responsive
DEFAULT_SIMULATIONS = 100_000


# ============================================================================
# PAGE LAYOUT
# ============================================================================

st.title("🔮 Umbral Creation Calculator")
st.markdown("Estimate the gp cost of taking an umbral creation from nothing to Master.")

col_calc, col_ref = st.columns([1.5, 1])

with col_ref:
    st.markdown("<div class='section-header'>TIER ODDS</div>", unsafe_allow_html=True)
    for tier, rule in TRANSITION_TABLE.items():
        st.markdown(f"**{tier.name.title()}** ({rule.tries} tries)")
        for p, outcome in outcome_probabilities(tier):
            extra = f", +{outcome.dream_matter} dream matter" if outcome.dream_matter else ""
            st.caption(
                f"{outcome.low}-{outcome.high} ({p * 100:.1f}%) -> "
                f"{outcome.next_tier.name.title()}: +{outcome.clusters} clusters{extra}"
            )

with col_calc:
    st.markdown("<div class='section-header'>PRICES</div>", unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        cluster_cost = st.number_input("Cluster of solace (gp)", min_value=0, value=5, step=1)
    with col2:
        dream_matter_cost = st.number_input("Dream matter (gp)", min_value=0, value=1000, step=1)

    col1, col2 = st.columns(2)
    with col1:
        simulations = st.number_input("Simulations", min_value=1, value=DEFAULT_SIMULATIONS, step=10_000)
    with col2:
        workers = st.number_input("Worker threads", min_value=1, max_value=64, value=WORKER_COUNT, step=1)

    cost_table = CostTable(int(cluster_cost), int(dream_matter_cost))
    markov = solve_expected_costs()
    exact_clusters = markov.expected_clusters[Tier.NONE]
    exact_dream_matter = markov.expected_dream_matter[Tier.NONE]
    exact_cost = (exact_clusters * cost_table.cluster_cost
                  + exact_dream_matter * cost_table.dream_matter_cost)

    st.markdown("<div class='section-header'>EXACT EXPECTATION</div>", unsafe_allow_html=True)
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Expected Cost", f"{exact_cost:,.0f} gp")
    with col2:
        st.metric("Expected Clusters", f"{exact_clusters:,.1f}")
    with col3:
        st.metric("Expected Dream Matter", f"{exact_dream_matter:,.2f}")
    with col4:
        st.metric("Expected Attempts", f"{markov.expected_attempts[Tier.NONE]:,.1f}")

    if st.button(f"Simulate ({int(simulations):,}x)", type="primary", use_container_width=True):
        with st.spinner("Running simulation..."):
            trials = simulate(int(simulations), int(workers))
            summary = summarize(trials)

        st.markdown("<div class='section-header'>SIMULATION RESULTS</div>", unsafe_allow_html=True)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Average Cost", f"{average_cost(summary, cost_table):,} gp")
        with col2:
            st.metric("Average Clusters", f"{summary.avg_clusters:,}")
        with col3:
            st.metric("Average Dream Matter", f"{summary.avg_dream_matter:,}")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Median Clusters", f"{summary.median_clusters:,}")
        with col2:
            st.metric("Median Dream Matter", f"{summary.median_dream_matter:,}")
        with col3:
            st.metric("P95 Clusters", f"{summary.p95_clusters:,}")

        fig = create_cost_distribution_chart(trials, cost_table, expected_cost=exact_cost)
        st.plotly_chart(fig, use_container_width=True)
