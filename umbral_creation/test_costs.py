"""
Unit tests for costs.py - price parsing and gp conversion.
"""
import pytest
from umbral_creation.costs import (
    CostTable,
    MISSING_CLUSTER_COST,
    MISSING_DREAM_MATTER_COST,
    MAX_PRICE,
    UNPARSEABLE_COST,
    average_cost,
    parse_cost_table,
    total_cost,
    trial_cost,
)
from umbral_creation.errors import CostTableError
from umbral_creation.stats import summarize
from umbral_creation.tiers import Tier
from umbral_creation.trial import Trial


class TestParseCostTable:
    """Tests for parse_cost_table()."""

    def test_valid_prices(self):
        assert parse_cost_table("5", "1000") == CostTable(5, 1000)

    def test_zero_prices(self):
        assert parse_cost_table("0", "0") == CostTable(0, 0)

    def test_leading_plus(self):
        assert parse_cost_table("+5", "+7") == CostTable(5, 7)

    def test_missing_both(self):
        with pytest.raises(CostTableError) as excinfo:
            parse_cost_table(None, None)
        assert str(excinfo.value) == "Please provide the cluster of solace cost."

    def test_missing_dream_matter(self):
        with pytest.raises(CostTableError) as excinfo:
            parse_cost_table("5", None)
        assert str(excinfo.value) == "Please provide the dream matter cost."

    def test_presence_checked_before_parsing(self):
        """A bad cluster price with no dream matter price reports the missing one."""
        with pytest.raises(CostTableError, match=MISSING_DREAM_MATTER_COST):
            parse_cost_table("abc", None)

    def test_bad_cluster_price(self):
        with pytest.raises(CostTableError) as excinfo:
            parse_cost_table("abc", "1000")
        assert str(excinfo.value) == "Failed to parse the cluster cost."

    def test_bad_dream_matter_price_shares_message(self):
        with pytest.raises(CostTableError) as excinfo:
            parse_cost_table("5", "lots")
        assert str(excinfo.value) == UNPARSEABLE_COST

    @pytest.mark.parametrize("raw", ["-5", "5.0", " 5", "5 ", "1_000", "", "1e3", "0x10"])
    def test_rejected_syntax(self, raw):
        with pytest.raises(CostTableError, match=UNPARSEABLE_COST):
            parse_cost_table(raw, "1")

    def test_largest_price(self):
        assert parse_cost_table(str(2 ** 64 - 1), "1").cluster_cost == MAX_PRICE

    def test_price_above_64_bits(self):
        with pytest.raises(CostTableError, match=UNPARSEABLE_COST):
            parse_cost_table("5", str(2 ** 64))

    def test_messages(self):
        assert MISSING_CLUSTER_COST == "Please provide the cluster of solace cost."


class TestConversion:
    """Tests for the gp conversion helpers."""

    def test_trial_cost(self):
        assert trial_cost(245, 1, CostTable(5, 1000)) == 2225

    def test_average_prices_totals_before_dividing(self):
        """Totals are priced first, so the result is not avg_clusters * price."""
        trials = [
            Trial(tier=Tier.MASTER, clusters_spent=3, dream_matters_spent=1),
            Trial(tier=Tier.MASTER, clusters_spent=4, dream_matters_spent=0),
        ]
        summary = summarize(trials)
        table = CostTable(3, 10)
        assert total_cost(summary, table) == 31
        assert average_cost(summary, table) == 15

    def test_average_cost_truncates(self):
        trials = [Trial(tier=Tier.MASTER, clusters_spent=c, dream_matters_spent=1) for c in (245, 320, 400)]
        summary = summarize(trials)
        assert average_cost(summary, CostTable(5, 1000)) == (965 * 5 + 3 * 1000) // 3
