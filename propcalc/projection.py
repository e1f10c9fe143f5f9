"""Year-by-year investment projection over the loan term.

Each year:
  - 12 monthly repayments reduce the loan balance
  - holding costs (five components) and rent are charged at their current
    inflated level
  - net cashflow = rental income - (repayments + holding costs)
  - the cash position starts at minus the deposit (fees are capitalized)
    and accumulates each year's net cashflow
  - equity = property value - balance; total net position = equity + cash
  - costs and rent then inflate, and the property value grows

The projection is a fold over the year indices: an immutable
ProjectionState is carried from one year to the next and each year emits a
YearRecord. With projections disabled, growth and inflation are zero but
the loop still runs.
"""

import logging
from dataclasses import dataclass

from propcalc.amortization import amortize_year, monthly_rate
from propcalc.costs import LoanResult
from propcalc.params import HoldingCosts, InvestmentInputs

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52


@dataclass(frozen=True)
class ProjectionState:
    """Values carried into the next projection year."""

    balance: float
    holding: HoldingCosts
    weekly_rent: float
    property_value: float
    cumulative_cash: float
    cumulative_principal: float = 0.0
    cumulative_interest: float = 0.0


@dataclass(frozen=True)
class YearRecord:
    """Snapshot for one projection year."""

    year: int
    principal_paid: float  # this year
    interest_paid: float  # this year
    principal_paid_cumulative: float
    interest_paid_cumulative: float
    remaining_balance: float
    property_value: float  # value in effect during the year
    equity: float
    holding_costs: float
    rental_income: float
    net_cashflow: float
    total_outgoings: float  # repayments + holding costs
    cumulative_cash_position: float
    total_net_position: float  # equity + cumulative cash
    real_net_position: float  # discounted by inflation
    holding_breakdown: HoldingCosts

    @property
    def repayments(self) -> float:
        return self.principal_paid + self.interest_paid


@dataclass(frozen=True)
class ProjectionResult:
    records: list[YearRecord]
    total_repayments: float
    total_interest: float
    total_holding_costs: float
    total_rental_income: float
    net_cashflow_total: float
    break_even_year: int | None

    @property
    def total_outgoings(self) -> float:
        return self.total_repayments + self.total_holding_costs


def projection_years(loan: LoanResult, investment: InvestmentInputs) -> int:
    """Number of years to project: the loan term unless a shorter horizon is set."""
    term = loan.inputs.loan_term_years
    if investment.horizon_years is None:
        return term
    return max(1, min(investment.horizon_years, term))


def initial_state(loan: LoanResult, investment: InvestmentInputs) -> ProjectionState:
    return ProjectionState(
        balance=loan.total_loan,
        holding=investment.holding_costs(),
        weekly_rent=investment.target_weekly_rent,
        property_value=loan.inputs.property_value,
        cumulative_cash=-loan.deposit_amount,
    )


def advance_year(
    state: ProjectionState,
    year: int,
    rate: float,
    payment: float,
    inflation: float,
    growth: float,
) -> tuple[YearRecord, ProjectionState]:
    """Run one projection year.

    ``rate`` is the monthly loan rate; ``inflation`` and ``growth`` are
    annual fractions. Returns the year's record and the next state.
    """
    amort = amortize_year(state.balance, rate, payment)

    holding = state.holding.total
    rental_income = state.weekly_rent * WEEKS_PER_YEAR
    outgoings = amort.repayments + holding
    net_cashflow = rental_income - outgoings
    cumulative_cash = state.cumulative_cash + net_cashflow

    equity = state.property_value - amort.balance
    total_position = equity + cumulative_cash
    deflator = (1 + inflation) ** year
    # -100% inflation wipes out the price level; no real value to report
    real_position = total_position / deflator if deflator != 0 else 0.0

    cumulative_principal = state.cumulative_principal + amort.principal
    cumulative_interest = state.cumulative_interest + amort.interest

    record = YearRecord(
        year=year,
        principal_paid=amort.principal,
        interest_paid=amort.interest,
        principal_paid_cumulative=cumulative_principal,
        interest_paid_cumulative=cumulative_interest,
        remaining_balance=amort.balance,
        property_value=state.property_value,
        equity=equity,
        holding_costs=holding,
        rental_income=rental_income,
        net_cashflow=net_cashflow,
        total_outgoings=outgoings,
        cumulative_cash_position=cumulative_cash,
        total_net_position=total_position,
        real_net_position=real_position,
        holding_breakdown=state.holding,
    )

    next_state = ProjectionState(
        balance=amort.balance,
        holding=state.holding.inflated(inflation),
        weekly_rent=state.weekly_rent * (1 + inflation),
        property_value=state.property_value * (1 + growth),
        cumulative_cash=cumulative_cash,
        cumulative_principal=cumulative_principal,
        cumulative_interest=cumulative_interest,
    )
    return record, next_state


def break_even_year(records: list[YearRecord]) -> int | None:
    """First year with positive net cashflow, or None."""
    for r in records:
        if r.net_cashflow > 0:
            return r.year
    return None


def compute_projection(
    loan: LoanResult, investment: InvestmentInputs
) -> ProjectionResult:
    """Project cashflow, equity and net position for each year of the term."""
    rate = monthly_rate(loan.inputs.interest_rate_pct)
    inflation = investment.inflation_rate
    growth = investment.growth_rate
    years = projection_years(loan, investment)
    if 1 + inflation == 0:
        logger.warning("Inflation of -100%; real net position reported as 0")

    state = initial_state(loan, investment)
    records = []
    for year in range(1, years + 1):
        record, state = advance_year(
            state, year, rate, loan.monthly_payment, inflation, growth
        )
        records.append(record)

    total_repayments = 0.0
    total_interest = 0.0
    total_holding = 0.0
    total_rent = 0.0
    for r in records:
        total_repayments += r.repayments
        total_interest += r.interest_paid
        total_holding += r.holding_costs
        total_rent += r.rental_income

    result = ProjectionResult(
        records=records,
        total_repayments=total_repayments,
        total_interest=total_interest,
        total_holding_costs=total_holding,
        total_rental_income=total_rent,
        net_cashflow_total=total_rent - (total_repayments + total_holding),
        break_even_year=break_even_year(records),
    )
    logger.debug(
        "Projected %d years: net cashflow %.2f, break-even %s",
        years, result.net_cashflow_total, result.break_even_year,
    )
    return result
