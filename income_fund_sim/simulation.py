"""Core simulation engine: monthly transition and yearly projection loop."""

from dataclasses import dataclass, field
from decimal import Decimal
from random import Random
from typing import Callable

from income_fund_sim.money import ZERO, format_money, to_decimal
from income_fund_sim.params import (
    MONTHS_PER_YEAR,
    RETURN_FLOOR_PERCENT,
    RETURN_SPREAD_PERCENT,
    SimulationParams,
)

# CSV column name → MonthlyReport attribute
REPORT_FIELDS = (
    ("age", "age"),
    ("month", "month"),
    ("salaryIncome", "salary_income"),
    ("expenses", "expenses"),
    ("dividends", "dividends"),
    ("freeSpending", "free_spending"),
    ("investment", "investment"),
    ("incomeFundsBalance", "income_funds_balance"),
)
MONEY_FIELDS = tuple(attr for _, attr in REPORT_FIELDS[2:])


@dataclass
class YearState:
    """Income/expense baselines for the active year."""

    monthly_income: Decimal
    monthly_expenses: Decimal

    def apply_inflation(self, params: SimulationParams) -> None:
        self.monthly_income = inflate_monthly_baseline(
            self.monthly_income, params.annual_income_inflation,
        )
        self.monthly_expenses = inflate_monthly_baseline(
            self.monthly_expenses, params.annual_expense_inflation,
        )


@dataclass
class AccountState:
    income_funds_balance: Decimal = ZERO

    def invest(self, amount: Decimal) -> None:
        # amount may be negative (shortfall month)
        self.income_funds_balance += amount


@dataclass(frozen=True)
class MonthOutcome:
    dividends: Decimal
    free_spending: Decimal
    investment: Decimal


@dataclass(frozen=True)
class MonthlyReport:
    """One ledger row. income_funds_balance is the balance before this month's investment."""

    age: int
    month: int
    salary_income: Decimal
    expenses: Decimal
    dividends: Decimal
    free_spending: Decimal
    investment: Decimal
    income_funds_balance: Decimal

    @property
    def profit(self) -> Decimal:
        return self.salary_income + self.dividends - self.expenses

    def formatted(self) -> dict[str, str | int]:
        """CSV-ready row: monetary values as fixed 2-decimal strings."""
        row: dict[str, str | int] = {}
        for column, attr in REPORT_FIELDS:
            value = getattr(self, attr)
            row[column] = format_money(value) if attr in MONEY_FIELDS else value
        return row


@dataclass
class ProjectionResult:
    reports: list[MonthlyReport] = field(default_factory=list)
    annual_returns: list[Decimal] = field(default_factory=list)
    final_balance: Decimal = ZERO

    def year_end_balances(self) -> dict[int, Decimal]:
        """age → balance after month 12 of that year"""
        balances = {}
        for r in self.reports:
            if r.month == MONTHS_PER_YEAR:
                balances[r.age] = r.income_funds_balance + r.investment
        return balances

    def total(self, attr: str) -> Decimal:
        return sum((getattr(r, attr) for r in self.reports), ZERO)


def simulate_month(
    balance: Decimal,
    salary_income: Decimal,
    expenses: Decimal,
    free_spending_split: Decimal,
    monthly_return: Decimal,
) -> MonthOutcome:
    """Split one month's profit into free spending and investment.

    Pure function of its inputs. Profit may be negative, in which case
    both free spending and investment are negative too.
    """
    dividends = balance * monthly_return
    profit = salary_income + dividends - expenses
    free_spending = profit * free_spending_split
    investment = profit - free_spending
    return MonthOutcome(dividends=dividends, free_spending=free_spending, investment=investment)


def inflate_monthly_baseline(amount: Decimal, annual_percent: Decimal) -> Decimal:
    """Apply one year of inflation as a single step at the monthly-scaled rate.

    annual_percent / 12 is applied once, not compounded 12 times.
    """
    monthly_rate = annual_percent / MONTHS_PER_YEAR / 100
    return amount + amount * monthly_rate


def draw_annual_return(uniform: Callable[[], float]) -> Decimal:
    """Draw an annual income fund return (fraction) uniformly in [7%, 10%)."""
    u = to_decimal(uniform())
    return (RETURN_FLOOR_PERCENT + u * RETURN_SPREAD_PERCENT) / 100


def monthly_rate(annual_return: Decimal) -> Decimal:
    return annual_return / MONTHS_PER_YEAR


def _annual_return_for_year(
    year_idx: int,
    uniform: Callable[[], float],
    annual_returns: list[Decimal] | None,
) -> Decimal:
    if annual_returns is None:
        return draw_annual_return(uniform)
    # Beyond the given sequence: repeat the last rate
    idx = min(year_idx, len(annual_returns) - 1)
    return to_decimal(annual_returns[idx])


def simulate_projection(
    params: SimulationParams,
    uniform: Callable[[], float] | None = None,
    annual_returns: list[Decimal] | None = None,
) -> ProjectionResult:
    """Run the month-by-month projection over params.years.

    uniform: source of randomness returning floats in [0, 1); one call per year.
        Defaults to an unseeded Random.
    annual_returns: explicit per-year returns (fractions) that replace the draw.
    """
    if uniform is None:
        uniform = Random().random
    if annual_returns is not None and not annual_returns:
        raise ValueError("annual_returns must not be empty")

    year_state = YearState(params.monthly_income, params.monthly_expenses)
    account = AccountState()
    split = params.free_spending_split
    result = ProjectionResult()

    for year in range(1, params.years + 1):
        annual_return = _annual_return_for_year(year - 1, uniform, annual_returns)
        result.annual_returns.append(annual_return)
        fund_monthly_return = monthly_rate(annual_return)

        if year > 1:
            year_state.apply_inflation(params)

        age = params.starting_age + year - 1
        for month in range(1, MONTHS_PER_YEAR + 1):
            outcome = simulate_month(
                account.income_funds_balance,
                year_state.monthly_income,
                year_state.monthly_expenses,
                split,
                fund_monthly_return,
            )
            result.reports.append(MonthlyReport(
                age=age,
                month=month,
                salary_income=year_state.monthly_income,
                expenses=year_state.monthly_expenses,
                dividends=outcome.dividends,
                free_spending=outcome.free_spending,
                investment=outcome.investment,
                income_funds_balance=account.income_funds_balance,
            ))
            account.invest(outcome.investment)

    result.final_balance = account.income_funds_balance
    return result
