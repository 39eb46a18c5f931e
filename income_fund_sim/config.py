"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Callable

from income_fund_sim.money import to_decimal
from income_fund_sim.params import SimulationParams, validate_params

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "years": 40,
    "monthly_income": 3000,
    "annual_income_inflation": 20,
    "monthly_expenses": 2500,
    "annual_expense_inflation": 15,
    "free_spending_percent": 30,
    "starting_age": 25,
}

# Option names used by earlier versions of the tool (camelCase)
_LEGACY_KEYS = {
    "monthlyIncome": "monthly_income",
    "annualIncomeInflation": "annual_income_inflation",
    "monthlyExpenses": "monthly_expenses",
    "annualExpenseInflation": "annual_expense_inflation",
    "freeSpendingPercent": "free_spending_percent",
    "startingAge": "starting_age",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Normalize camelCase / dashed keys; snake_case wins when both are present
    for key in list(raw):
        target = _LEGACY_KEYS.get(key, key.replace("-", "_"))
        if target != key:
            value = raw.pop(key)
            raw.setdefault(target, value)
    return raw


def _decimal_arg(value: str):
    try:
        return to_decimal(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file path (default: config.toml)")
    parser.add_argument("-y", "--years", type=int, default=None, help=f"number of years to simulate (default: {d['years']})")
    parser.add_argument("-i", "--monthly-income", type=_decimal_arg, default=None, help=f"monthly take-home income after tax (default: {d['monthly_income']})")
    parser.add_argument("--annual-income-inflation", type=_decimal_arg, default=None, help=f"annual income inflation in percent (default: {d['annual_income_inflation']})")
    parser.add_argument("-e", "--monthly-expenses", type=_decimal_arg, default=None, help=f"monthly expenses (default: {d['monthly_expenses']})")
    parser.add_argument("--annual-expense-inflation", type=_decimal_arg, default=None, help=f"annual expense inflation in percent (default: {d['annual_expense_inflation']})")
    parser.add_argument("-f", "--free-spending-percent", type=_decimal_arg, default=None, help=f"share of monthly profit spent instead of invested, percent (default: {d['free_spending_percent']})")
    parser.add_argument("--starting-age", type=int, default=None, help=f"age you start investing from (default: {d['starting_age']})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_params(r: dict) -> SimulationParams:
    """Build SimulationParams from resolved config dict.

    Raises ValueError listing every invalid value.
    """
    errors = []
    values = {}
    for key in ("years", "starting_age"):
        v = r[key]
        if isinstance(v, bool) or not isinstance(v, int):
            errors.append(f"{key} must be an integer: {v!r}")
        values[key] = v
    for key in (
        "monthly_income",
        "annual_income_inflation",
        "monthly_expenses",
        "annual_expense_inflation",
        "free_spending_percent",
    ):
        try:
            values[key] = to_decimal(r[key])
        except ValueError as e:
            errors.append(f"{key}: {e}")
    if errors:
        raise ValueError("; ".join(errors))

    params = SimulationParams(**values)
    errors = validate_params(params)
    if errors:
        raise ValueError("; ".join(errors))
    return params


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[SimulationParams, argparse.Namespace]:
    """Parse CLI args, load config, resolve and validate values.

    Returns (params, namespace). Invalid values exit through parser.error.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    r = resolve(args, config)
    try:
        params = build_params(r)
    except ValueError as e:
        parser.error(str(e))
    return params, args
