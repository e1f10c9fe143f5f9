"""Level-payment (PMT) maths and monthly balance stepping."""

from dataclasses import dataclass

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class PeriodStep:
    """Result of one monthly repayment."""

    interest: float
    principal: float
    balance: float


@dataclass(frozen=True)
class YearAmortization:
    """Twelve monthly repayments rolled up."""

    principal: float
    interest: float
    balance: float

    @property
    def repayments(self) -> float:
        return self.principal + self.interest


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / MONTHS_PER_YEAR / 100


def monthly_payment(annual_rate_pct: float, term_years: int, principal: float) -> float:
    """Calculate the level monthly repayment that clears ``principal``.

    A zero rate falls back to straight-line repayment so the compounding
    formula never divides by zero.
    """
    n = term_years * MONTHS_PER_YEAR
    if annual_rate_pct == 0:
        return principal / n
    r = monthly_rate(annual_rate_pct)
    x = (1 + r) ** n
    return principal * r * x / (x - 1)


def step_one_period(balance: float, rate: float, payment: float) -> PeriodStep:
    """Apply one monthly payment at periodic ``rate``.

    The balance is clamped at zero; the principal portion is not, so an
    overshooting final payment is still counted in full.
    """
    interest = balance * rate
    principal = payment - interest
    return PeriodStep(
        interest=interest,
        principal=principal,
        balance=max(0.0, balance - principal),
    )


def amortize_year(balance: float, rate: float, payment: float) -> YearAmortization:
    """Simulate 12 months of repayments from ``balance``."""
    total_principal = 0.0
    total_interest = 0.0
    for _ in range(MONTHS_PER_YEAR):
        step = step_one_period(balance, rate, payment)
        total_interest += step.interest
        total_principal += step.principal
        balance = step.balance
    return YearAmortization(
        principal=total_principal, interest=total_interest, balance=balance
    )


def amortization_schedule(
    principal: float, annual_rate_pct: float, term_years: int
) -> list[PeriodStep]:
    """Full month-by-month schedule for a fixed-rate loan."""
    rate = monthly_rate(annual_rate_pct)
    payment = monthly_payment(annual_rate_pct, term_years, principal)
    schedule = []
    balance = principal
    for _ in range(term_years * MONTHS_PER_YEAR):
        step = step_one_period(balance, rate, payment)
        schedule.append(step)
        balance = step.balance
    return schedule
