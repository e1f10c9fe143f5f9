"""Upfront loan costs: stamp duty, LMI, fees, and the derived loan.

Fees and stamp duty are capitalized into the loan rather than paid as cash
at settlement, so the deposit is the only upfront outlay the projection
counts.
"""

import logging
from dataclasses import dataclass

from propcalc.amortization import monthly_payment
from propcalc.params import LoanInputs
from propcalc.rates import (
    FEES,
    STAMP_DUTY_CEILING,
    STAMP_DUTY_FLAT_RATE_PCT,
    FeeSchedule,
    lmi_column,
    lmi_row,
    stamp_duty_bracket_for,
)

logger = logging.getLogger(__name__)

# LVR (percent) above which a loan is flagged as high risk.
LVR_RISK_THRESHOLD = 95.0


def stamp_duty(property_value: float) -> float:
    """Transfer duty payable on ``property_value``.

    At exactly the ceiling the bracket formula applies; strictly above it
    the whole value is charged at the flat rate.
    """
    if property_value > STAMP_DUTY_CEILING:
        return property_value * STAMP_DUTY_FLAT_RATE_PCT / 100
    bracket = stamp_duty_bracket_for(property_value)
    return bracket.base + (property_value - bracket.threshold) * bracket.rate_pct / 100


def lmi(lvr_pct: float, loan_amount: float) -> float:
    """Lenders mortgage insurance premium in dollars. Zero at or below 80% LVR."""
    row = lmi_row(lvr_pct)
    if row is None:
        return 0.0
    return row.rates[lmi_column(loan_amount)] * loan_amount


def total_fees(duty: float, fees: FeeSchedule = FEES) -> float:
    return duty + fees.registration + fees.transfer + fees.other


def base_loan(property_value: float, deposit_pct: float, fees_total: float) -> float:
    """Loan before LMI: purchase price less deposit, plus capitalized fees."""
    return (property_value - property_value * deposit_pct / 100) + fees_total


def lvr(loan_amount: float, property_value: float) -> float:
    """Loan-to-value ratio in percent.

    A zero property value has no meaningful ratio and is reported as 0.0.
    """
    if property_value == 0:
        logger.warning("LVR undefined for zero property value; reporting 0")
        return 0.0
    return loan_amount / property_value * 100


@dataclass(frozen=True)
class LoanResult:
    """Everything derived from a set of LoanInputs."""

    inputs: LoanInputs
    deposit_amount: float
    stamp_duty: float
    total_fees: float
    base_loan: float
    lvr_pct: float
    lmi_cost: float
    total_loan: float
    monthly_payment: float

    @property
    def weekly_payment(self) -> float:
        return self.monthly_payment * 12 / 52

    @property
    def annual_payment(self) -> float:
        return self.monthly_payment * 12

    @property
    def other_fees(self) -> float:
        """Fixed fees excluding stamp duty."""
        return self.total_fees - self.stamp_duty

    @property
    def high_lvr(self) -> bool:
        return self.lvr_pct > LVR_RISK_THRESHOLD


def compute_loan(inputs: LoanInputs, fees: FeeSchedule = FEES) -> LoanResult:
    """Derive upfront costs, the total loan and the level monthly repayment."""
    value = inputs.property_value
    deposit = value * inputs.deposit_pct / 100
    duty = stamp_duty(value)
    fees_total = total_fees(duty, fees)
    loan = base_loan(value, inputs.deposit_pct, fees_total)
    ratio = lvr(loan, value)
    premium = lmi(ratio, loan)
    total = loan + premium
    payment = monthly_payment(inputs.interest_rate_pct, inputs.loan_term_years, total)

    logger.debug(
        "Loan for %.2f: duty=%.2f fees=%.2f base=%.2f lvr=%.2f lmi=%.2f pmt=%.2f",
        value, duty, fees_total, loan, ratio, premium, payment,
    )

    return LoanResult(
        inputs=inputs,
        deposit_amount=deposit,
        stamp_duty=duty,
        total_fees=fees_total,
        base_loan=loan,
        lvr_pct=ratio,
        lmi_cost=premium,
        total_loan=total,
        monthly_payment=payment,
    )
