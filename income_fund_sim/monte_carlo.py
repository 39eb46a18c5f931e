"""Monte Carlo simulation engine."""

import math
import sys
from collections import defaultdict
from dataclasses import dataclass, field
from random import Random

from income_fund_sim.params import SimulationParams
from income_fund_sim.simulation import simulate_projection


MC_PERCENTILES = (5, 25, 50, 75, 95)


@dataclass
class MonteCarloConfig:
    """Configuration for Monte Carlo simulation."""

    n_simulations: int = 1000
    seed: int | None = 42


@dataclass
class MonteCarloResult:
    """Distribution of final balances over independent projection runs."""

    n_simulations: int
    final_balances: list[float] = field(default_factory=list)
    shortfall_count: int = 0
    percentiles: dict[int, float] = field(default_factory=dict)
    shortfall_probability: float = 0.0
    mean: float = 0.0
    std: float = 0.0
    # age → {5: val, 25: val, 50: val, 75: val, 95: val}
    yearly_balance_percentiles: dict[int, dict[int, float]] | None = None


def _percentile_from_sorted(sorted_vals: list[float], p: int) -> float:
    """Calculate percentile from a pre-sorted list."""
    n = len(sorted_vals)
    idx = max(0, min(int(p / 100 * n), n - 1))
    return sorted_vals[idx]


def run_monte_carlo(
    params: SimulationParams,
    config: MonteCarloConfig,
    quiet: bool = False,
    collect_yearly: bool = False,
) -> MonteCarloResult:
    """Run N independent projections.

    Each run gets its own Random seeded from a master generator, so runs
    share no state and the batch is reproducible for a fixed seed.
    collect_yearly: if True, compute year-end balance percentiles per age.
    """
    if config.n_simulations < 1:
        raise ValueError(f"n_simulations must be positive: {config.n_simulations}")

    master = Random(config.seed)
    results_list: list[float] = []
    shortfall_count = 0
    yearly_balances: dict[int, list[float]] = defaultdict(list)

    for i in range(config.n_simulations):
        run_rng = Random(master.getrandbits(64))
        result = simulate_projection(params, uniform=run_rng.random)

        final = float(result.final_balance)
        results_list.append(final)
        if final < 0:
            shortfall_count += 1

        if collect_yearly:
            for age, balance in result.year_end_balances().items():
                yearly_balances[age].append(float(balance))

        if not quiet and (i + 1) % 100 == 0:
            print(f"\r  Monte Carlo: {i + 1}/{config.n_simulations}", end="", file=sys.stderr)

    if not quiet and config.n_simulations >= 100:
        print(file=sys.stderr)

    results_list.sort()
    n = len(results_list)

    percentiles = {p: _percentile_from_sorted(results_list, p) for p in MC_PERCENTILES}
    mean = sum(results_list) / n
    variance = sum((x - mean) ** 2 for x in results_list) / n
    std = math.sqrt(variance)

    yearly_balance_percentiles = None
    if collect_yearly and yearly_balances:
        yearly_balance_percentiles = {
            age: {p: _percentile_from_sorted(sorted(vals), p) for p in MC_PERCENTILES}
            for age, vals in yearly_balances.items()
        }

    return MonteCarloResult(
        n_simulations=config.n_simulations,
        final_balances=results_list,
        shortfall_count=shortfall_count,
        percentiles=percentiles,
        shortfall_probability=shortfall_count / config.n_simulations,
        mean=mean,
        std=std,
        yearly_balance_percentiles=yearly_balance_percentiles,
    )
