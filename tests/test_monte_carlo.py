"""Tests for Monte Carlo simulation."""

from decimal import Decimal

import pytest

from income_fund_sim.monte_carlo import (
    MC_PERCENTILES,
    MonteCarloConfig,
    run_monte_carlo,
    _percentile_from_sorted,
)
from income_fund_sim.params import SimulationParams
from income_fund_sim.simulation import simulate_projection


def _params(**overrides) -> SimulationParams:
    base = dict(years=5)
    base.update(overrides)
    return SimulationParams(**base)


class TestReproducibility:
    """Same seed should produce identical results."""

    def test_same_seed_same_result(self):
        config = MonteCarloConfig(n_simulations=20, seed=42)
        r1 = run_monte_carlo(_params(), config, quiet=True)
        r2 = run_monte_carlo(_params(), config, quiet=True)
        assert r1.final_balances == r2.final_balances

    def test_different_seed_differs(self):
        r1 = run_monte_carlo(_params(), MonteCarloConfig(n_simulations=20, seed=1), quiet=True)
        r2 = run_monte_carlo(_params(), MonteCarloConfig(n_simulations=20, seed=2), quiet=True)
        assert r1.final_balances != r2.final_balances


class TestReturnBand:
    """Every run lies between the all-7% and all-10% projections."""

    def test_final_balances_bounded(self):
        params = _params()
        low = float(simulate_projection(params, annual_returns=[Decimal("0.07")]).final_balance)
        high = float(simulate_projection(params, annual_returns=[Decimal("0.10")]).final_balance)
        result = run_monte_carlo(params, MonteCarloConfig(n_simulations=50, seed=7), quiet=True)
        assert all(low - 1e-6 <= b <= high + 1e-6 for b in result.final_balances)

    def test_runs_vary(self):
        result = run_monte_carlo(_params(), MonteCarloConfig(n_simulations=50, seed=7), quiet=True)
        assert len(set(result.final_balances)) > 1


class TestStatistics:
    def setup_method(self):
        self.result = run_monte_carlo(
            _params(), MonteCarloConfig(n_simulations=100, seed=42), quiet=True, collect_yearly=True,
        )

    def test_sorted(self):
        assert self.result.final_balances == sorted(self.result.final_balances)

    def test_percentiles_ordered(self):
        values = [self.result.percentiles[p] for p in MC_PERCENTILES]
        assert values == sorted(values)

    def test_mean_within_range(self):
        assert self.result.final_balances[0] <= self.result.mean <= self.result.final_balances[-1]

    def test_yearly_percentiles_per_age(self):
        pdata = self.result.yearly_balance_percentiles
        assert sorted(pdata) == [25, 26, 27, 28, 29]
        assert set(pdata[29]) == set(MC_PERCENTILES)

    def test_no_yearly_by_default(self):
        result = run_monte_carlo(_params(), MonteCarloConfig(n_simulations=5), quiet=True)
        assert result.yearly_balance_percentiles is None


class TestShortfall:
    def test_expenses_above_income(self):
        params = _params(monthly_income=Decimal(1000), monthly_expenses=Decimal(2000))
        result = run_monte_carlo(params, MonteCarloConfig(n_simulations=10), quiet=True)
        assert result.shortfall_probability == 1.0
        assert result.shortfall_count == 10

    def test_default_params_no_shortfall(self):
        result = run_monte_carlo(_params(), MonteCarloConfig(n_simulations=10), quiet=True)
        assert result.shortfall_probability == 0.0


class TestConfigValidation:
    def test_zero_runs(self):
        with pytest.raises(ValueError, match="n_simulations"):
            run_monte_carlo(_params(), MonteCarloConfig(n_simulations=0), quiet=True)


class TestProgressOutput:
    def test_progress_on_stderr(self, capsys):
        run_monte_carlo(_params(years=1), MonteCarloConfig(n_simulations=100, seed=3))
        captured = capsys.readouterr()
        assert "100/100" in captured.err
        assert captured.out == ""


class TestPercentileFromSorted:
    def test_bounds(self):
        vals = [1.0, 2.0, 3.0, 4.0]
        assert _percentile_from_sorted(vals, 0) == 1.0
        assert _percentile_from_sorted(vals, 50) == 3.0
        assert _percentile_from_sorted(vals, 100) == 4.0
