"""CLI entry point for Monte Carlo simulation."""

from income_fund_sim.config import parse_args, positive_int
from income_fund_sim.monte_carlo import MC_PERCENTILES, MonteCarloConfig, MonteCarloResult, run_monte_carlo
from income_fund_sim.params import SimulationParams


def _add_args(parser):
    parser.add_argument(
        "--mc-runs", type=positive_int, default=1000,
        help="number of simulations (default: 1000)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="random seed (default: 42)",
    )


def _print_results(result: MonteCarloResult, params: SimulationParams, seed: int):
    end_age = params.starting_age + params.years - 1
    print()
    print(f"[Monte Carlo final balance at age {end_age} (N={result.n_simulations:,}, seed={seed})]")
    print("─" * 80)
    header = "".join(f"{f'P{p}':>14}" for p in MC_PERCENTILES)
    print(f"{header}{'Shortfall':>12}")
    print("─" * 80)
    row = "".join(f"{result.percentiles[p]:>14,.0f}" for p in MC_PERCENTILES)
    print(f"{row}{result.shortfall_probability:>11.1%}")
    print("─" * 80)
    print(f"  Mean: {result.mean:,.0f} / Std: {result.std:,.0f}")


def main():
    params, args = parse_args("Income fund projection Monte Carlo", _add_args)
    config = MonteCarloConfig(n_simulations=args.mc_runs, seed=args.seed)
    result = run_monte_carlo(params, config)
    _print_results(result, params, args.seed)


if __name__ == "__main__":
    main()
