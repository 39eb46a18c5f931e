"""Simulation parameters."""

from dataclasses import dataclass
from decimal import Decimal

MONTHS_PER_YEAR = 12

# Monthly income fund annual return band: uniform in [7%, 10%)
RETURN_FLOOR_PERCENT = Decimal(7)
RETURN_SPREAD_PERCENT = Decimal(3)


@dataclass(frozen=True)
class SimulationParams:

    years: int = 40
    starting_age: int = 25

    # Income / expense baselines (per month, year 1)
    monthly_income: Decimal = Decimal(3000)
    monthly_expenses: Decimal = Decimal(2500)

    # Annual inflation in percent (20 = 20%/year)
    annual_income_inflation: Decimal = Decimal(20)
    annual_expense_inflation: Decimal = Decimal(15)

    # Share of monthly profit spent instead of invested (percent, 0-100)
    free_spending_percent: Decimal = Decimal(30)

    @property
    def free_spending_split(self) -> Decimal:
        return self.free_spending_percent / 100

    @property
    def total_months(self) -> int:
        return self.years * MONTHS_PER_YEAR


def validate_params(params: SimulationParams) -> list[str]:
    """Return validation error messages (empty when params are usable)."""
    errors = []
    if isinstance(params.years, bool) or not isinstance(params.years, int) or params.years < 1:
        errors.append(f"years must be a positive integer: {params.years}")
    if (
        isinstance(params.starting_age, bool)
        or not isinstance(params.starting_age, int)
        or params.starting_age < 0
    ):
        errors.append(f"starting_age must be a non-negative integer: {params.starting_age}")

    finite = {}
    for name in (
        "monthly_income",
        "monthly_expenses",
        "annual_income_inflation",
        "annual_expense_inflation",
        "free_spending_percent",
    ):
        value = getattr(params, name)
        if isinstance(value, Decimal) and value.is_finite():
            finite[name] = value
        else:
            errors.append(f"{name} must be a finite decimal: {value!r}")

    for name in ("monthly_income", "monthly_expenses"):
        if name in finite and finite[name] < 0:
            errors.append(f"{name} must not be negative: {finite[name]}")
    split = finite.get("free_spending_percent")
    if split is not None and not 0 <= split <= 100:
        errors.append(f"free_spending_percent must be between 0 and 100: {split}")
    return errors
