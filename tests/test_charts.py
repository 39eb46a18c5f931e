"""Tests for chart generation."""

from decimal import Decimal

import pytest

from income_fund_sim.charts import plot_cashflow, plot_mc_fan, plot_trajectory
from income_fund_sim.monte_carlo import MonteCarloConfig, MonteCarloResult, run_monte_carlo
from income_fund_sim.params import SimulationParams
from income_fund_sim.simulation import ProjectionResult, simulate_projection


class TestCharts:
    def setup_method(self):
        self.result = simulate_projection(SimulationParams(years=3), annual_returns=[Decimal("0.08")])

    def test_trajectory_png(self, tmp_path):
        path = plot_trajectory(self.result, tmp_path)
        assert path == tmp_path / "trajectory.png"
        assert path.stat().st_size > 0

    def test_cashflow_png_with_name(self, tmp_path):
        path = plot_cashflow(self.result, tmp_path / "out", name="30")
        assert path == tmp_path / "out" / "cashflow-30.png"
        assert path.exists()

    def test_empty_result_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="No monthly reports"):
            plot_trajectory(ProjectionResult(), tmp_path)

    def test_mc_fan(self, tmp_path):
        mc = run_monte_carlo(
            SimulationParams(years=3), MonteCarloConfig(n_simulations=10), quiet=True, collect_yearly=True,
        )
        path = plot_mc_fan(mc, tmp_path)
        assert path.name == "mc_fan.png"
        assert path.exists()

    def test_mc_fan_requires_yearly(self, tmp_path):
        with pytest.raises(ValueError, match="yearly_balance_percentiles"):
            plot_mc_fan(MonteCarloResult(n_simulations=1), tmp_path)
