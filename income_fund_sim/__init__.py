"""Income Fund Wealth Projection Package."""

from income_fund_sim.params import (
    SimulationParams,
    validate_params,
    MONTHS_PER_YEAR,
    RETURN_FLOOR_PERCENT,
    RETURN_SPREAD_PERCENT,
)
from income_fund_sim.money import to_decimal, quantize_money, format_money
from income_fund_sim.simulation import (
    YearState,
    AccountState,
    MonthOutcome,
    MonthlyReport,
    ProjectionResult,
    simulate_month,
    simulate_projection,
    inflate_monthly_baseline,
    draw_annual_return,
    monthly_rate,
)
from income_fund_sim.export import ExportError, render_csv, write_csv, CSV_COLUMNS
from income_fund_sim.monte_carlo import MonteCarloConfig, MonteCarloResult, run_monte_carlo

__all__ = [
    "SimulationParams",
    "validate_params",
    "MONTHS_PER_YEAR",
    "RETURN_FLOOR_PERCENT",
    "RETURN_SPREAD_PERCENT",
    "to_decimal",
    "quantize_money",
    "format_money",
    "YearState",
    "AccountState",
    "MonthOutcome",
    "MonthlyReport",
    "ProjectionResult",
    "simulate_month",
    "simulate_projection",
    "inflate_monthly_baseline",
    "draw_annual_return",
    "monthly_rate",
    "ExportError",
    "render_csv",
    "write_csv",
    "CSV_COLUMNS",
    "MonteCarloConfig",
    "MonteCarloResult",
    "run_monte_carlo",
]
