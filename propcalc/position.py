"""Current rental position: what the property costs and earns right now."""

from dataclasses import dataclass

from propcalc.costs import LoanResult
from propcalc.params import InvestmentInputs


@dataclass(frozen=True)
class RentalPosition:
    annual_holding_costs: float
    monthly_holding_costs: float
    weekly_holding_costs: float
    total_monthly_costs: float  # repayment + holding costs
    total_weekly_costs: float
    monthly_rent_income: float
    net_monthly_position: float
    net_weekly_position: float
    break_even_weekly_rent: float

    @property
    def is_positive(self) -> bool:
        return self.net_monthly_position >= 0


def compute_rental_position(
    loan: LoanResult, investment: InvestmentInputs
) -> RentalPosition:
    """Year-one cost and income picture at today's (un-inflated) figures."""
    annual_holding = investment.holding_costs().total
    monthly_holding = annual_holding / 12
    weekly_holding = annual_holding / 52
    total_monthly = loan.monthly_payment + monthly_holding
    total_weekly = loan.weekly_payment + weekly_holding
    rent = investment.target_weekly_rent
    monthly_rent = rent * 52 / 12

    return RentalPosition(
        annual_holding_costs=annual_holding,
        monthly_holding_costs=monthly_holding,
        weekly_holding_costs=weekly_holding,
        total_monthly_costs=total_monthly,
        total_weekly_costs=total_weekly,
        monthly_rent_income=monthly_rent,
        net_monthly_position=monthly_rent - total_monthly,
        net_weekly_position=rent - total_weekly,
        break_even_weekly_rent=total_monthly * 12 / 52,
    )
