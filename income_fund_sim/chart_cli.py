"""CLI entry point for chart generation."""

import sys
from pathlib import Path
from random import Random

from income_fund_sim.charts import plot_cashflow, plot_mc_fan, plot_trajectory
from income_fund_sim.config import parse_args, positive_int
from income_fund_sim.monte_carlo import MonteCarloConfig, run_monte_carlo
from income_fund_sim.simulation import simulate_projection


def _add_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--no-mc", action="store_true",
        help="skip the Monte Carlo fan chart",
    )
    parser.add_argument(
        "--mc-runs", type=positive_int, default=1000,
        help="Monte Carlo simulation count (default: 1000)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="random seed (default: 42)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output filename suffix (e.g. 30 → trajectory-30.png)",
    )


def main():
    params, args = parse_args("Income fund projection charts", _add_args)
    output_dir = args.output

    print(f"Projection (age {params.starting_age}, {params.years} years)...", file=sys.stderr)
    result = simulate_projection(params, uniform=Random(args.seed).random)

    path = plot_trajectory(result, output_dir, name=args.name)
    print(f"  → {path}", file=sys.stderr)
    path = plot_cashflow(result, output_dir, name=args.name)
    print(f"  → {path}", file=sys.stderr)

    if not args.no_mc:
        print(f"Monte Carlo (N={args.mc_runs:,})...", file=sys.stderr)
        mc_config = MonteCarloConfig(n_simulations=args.mc_runs, seed=args.seed)
        mc_result = run_monte_carlo(params, mc_config, collect_yearly=True)
        path = plot_mc_fan(mc_result, output_dir, name=args.name)
        print(f"  → {path}", file=sys.stderr)

    print("Done", file=sys.stderr)


if __name__ == "__main__":
    main()
