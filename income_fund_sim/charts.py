"""Chart generation for projection results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from income_fund_sim.monte_carlo import MonteCarloResult
from income_fund_sim.params import MONTHS_PER_YEAR
from income_fund_sim.simulation import ProjectionResult

CASHFLOW_COLORS = {
    "salary_income": "#1f77b4",   # blue
    "expenses": "#d62728",        # red
    "dividends": "#2ca02c",       # green
    "free_spending": "#ff7f0e",   # orange
    "investment": "#9467bd",      # purple
}

CASHFLOW_LABELS = {
    "salary_income": "Salary income",
    "expenses": "Expenses",
    "dividends": "Dividends",
    "free_spending": "Free spending",
    "investment": "Investment",
}

BALANCE_COLOR = "#1f77b4"


def _format_money_axis(ax: plt.Axes):
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x:,.0f}")
    )


def _fractional_ages(result: ProjectionResult) -> list[float]:
    return [r.age + (r.month - 1) / MONTHS_PER_YEAR for r in result.reports]


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filepath


def plot_trajectory(result: ProjectionResult, output_path: Path, name: str = "") -> Path:
    """Generate a line chart of the income fund balance over age.

    Args:
        result: simulate_projection() result.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "30" → "trajectory-30.png").

    Returns:
        Path to the generated PNG file.
    """
    if not result.reports:
        raise ValueError("No monthly reports for trajectory chart")

    fig, ax = plt.subplots(figsize=(14, 8))
    ages = _fractional_ages(result)
    balances = [float(r.income_funds_balance) for r in result.reports]
    ax.plot(ages, balances, color=BALANCE_COLOR, linewidth=2, label="Income fund balance")

    ax.set_xlabel("Age")
    ax.set_ylabel("Balance")
    ax.set_title("Income fund balance")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_money_axis(ax)
    return _save(fig, output_path, "trajectory", name)


def plot_cashflow(result: ProjectionResult, output_path: Path, name: str = "") -> Path:
    """Generate monthly cashflow lines (income, expenses, dividends, spending, investment)."""
    if not result.reports:
        raise ValueError("No monthly reports for cashflow chart")

    fig, ax = plt.subplots(figsize=(14, 8))
    ages = _fractional_ages(result)
    for attr, color in CASHFLOW_COLORS.items():
        values = [float(getattr(r, attr)) for r in result.reports]
        linestyle = "--" if attr == "investment" else "-"
        ax.plot(ages, values, color=color, linewidth=1.8, linestyle=linestyle, label=CASHFLOW_LABELS[attr])

    ax.axhline(0, color="black", linewidth=1.0, zorder=5)
    ax.set_xlabel("Age")
    ax.set_ylabel("Monthly cashflow")
    ax.set_title("Monthly cashflow")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3)
    _format_money_axis(ax)
    return _save(fig, output_path, "cashflow", name)


def plot_mc_fan(mc_result: MonteCarloResult, output_path: Path, name: str = "") -> Path:
    """Generate a fan chart (P5-P95 bands) of year-end balances."""
    pdata = mc_result.yearly_balance_percentiles
    if not pdata:
        raise ValueError("MonteCarloResult has no yearly_balance_percentiles")

    fig, ax = plt.subplots(figsize=(14, 8))
    ages = sorted(pdata.keys())
    p5 = [pdata[a][5] for a in ages]
    p25 = [pdata[a][25] for a in ages]
    p50 = [pdata[a][50] for a in ages]
    p75 = [pdata[a][75] for a in ages]
    p95 = [pdata[a][95] for a in ages]

    ax.fill_between(ages, p5, p95, alpha=0.15, color=BALANCE_COLOR, label="P5–P95")
    ax.fill_between(ages, p25, p75, alpha=0.3, color=BALANCE_COLOR, label="P25–P75")
    ax.plot(ages, p50, color=BALANCE_COLOR, linewidth=2, label="P50 (median)")

    ax.set_title(f"Monte Carlo fan chart (N={mc_result.n_simulations:,})")
    ax.set_xlabel("Age")
    ax.set_ylabel("Year-end balance")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3)
    _format_money_axis(ax)
    return _save(fig, output_path, "mc_fan", name)
