"""CLI entry point for a single projection with CSV export."""

import sys
from pathlib import Path
from random import Random

from income_fund_sim.config import parse_args, positive_int
from income_fund_sim.export import DEFAULT_OUTPUT_PATH, ExportError, write_csv
from income_fund_sim.money import format_money
from income_fund_sim.params import MONTHS_PER_YEAR, SimulationParams
from income_fund_sim.simulation import ProjectionResult, simulate_projection


def _add_args(parser):
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT_PATH,
        help=f"CSV output path (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="random seed for the annual return draw (default: unseeded)",
    )
    parser.add_argument(
        "--log-every", type=positive_int, default=5,
        help="print every Nth year in the yearly log (default: 5)",
    )


def _print_header(params: SimulationParams):
    end_age = params.starting_age + params.years - 1
    print("=" * 80)
    print(f"Income fund projection (age {params.starting_age}-{end_age}, {params.years} years)")
    print(
        f"  Income: {params.monthly_income}/month (+{params.annual_income_inflation}%/year)"
        f" / Expenses: {params.monthly_expenses}/month (+{params.annual_expense_inflation}%/year)"
    )
    print(f"  Free spending: {params.free_spending_percent}% of monthly profit")
    print("=" * 80)
    print()


def _print_yearly_log(result: ProjectionResult, every: int):
    year_end = result.year_end_balances()
    print("[Yearly log]")
    print("-" * 100)
    print(
        f"{'Age':<5} {'Return':>8} {'Income':>12} {'Expenses':>12} {'Dividends':>12}"
        f" {'Spending':>12} {'Investment':>12} {'Balance(end)':>15}"
    )
    print("-" * 100)
    # Month 12 row per year; dividends/spending/investment are that month's values
    year_rows = [r for r in result.reports if r.month == MONTHS_PER_YEAR]
    for i, row in enumerate(year_rows):
        if i % every == 0 or i == len(year_rows) - 1:
            print(
                f"{row.age:<5} "
                f"{float(result.annual_returns[i]):>8.2%} "
                f"{format_money(row.salary_income):>12} "
                f"{format_money(row.expenses):>12} "
                f"{format_money(row.dividends):>12} "
                f"{format_money(row.free_spending):>12} "
                f"{format_money(row.investment):>12} "
                f"{format_money(year_end[row.age]):>15}"
            )
    print("-" * 100)


def _print_summary(result: ProjectionResult):
    print("\n[Summary]")
    print(f"  Final balance:       {format_money(result.final_balance):>15}")
    print(f"  Total salary income: {format_money(result.total('salary_income')):>15}")
    print(f"  Total expenses:      {format_money(result.total('expenses')):>15}")
    print(f"  Total dividends:     {format_money(result.total('dividends')):>15}")
    print(f"  Total free spending: {format_money(result.total('free_spending')):>15}")
    shortfall_months = sum(1 for r in result.reports if r.investment < 0)
    if shortfall_months:
        print(f"  Shortfall months:    {shortfall_months:>15} (expenses exceeded income + dividends)")


def main():
    """Run one projection, print the ledger summary and export it as CSV."""
    params, args = parse_args("Income fund wealth projection", _add_args)
    rng = Random(args.seed)
    result = simulate_projection(params, uniform=rng.random)

    _print_header(params)
    _print_yearly_log(result, args.log_every)
    _print_summary(result)

    try:
        path = write_csv(result.reports, args.output)
    except ExportError as e:
        print(f"\n{e}", file=sys.stderr)
        raise SystemExit(1)
    print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
