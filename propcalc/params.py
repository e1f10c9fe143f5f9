"""Input parameters for the loan and investment calculations.

Values are expected to be range-checked already (see ``propcalc.config``).
Rates are in percent, as entered on the form (6.0 means 6% p.a.).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoanInputs:
    """Purchase and loan structure."""

    property_value: float = 800_000
    deposit_pct: float = 20.0
    interest_rate_pct: float = 6.0
    loan_term_years: int = 30


@dataclass(frozen=True)
class HoldingCosts:
    """Annual holding-cost components for an investment property."""

    council_rates: float = 0.0
    strata_fees: float = 0.0
    land_tax: float = 0.0
    sinking_fund: float = 0.0
    other: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.council_rates
            + self.strata_fees
            + self.land_tax
            + self.sinking_fund
            + self.other
        )

    def inflated(self, rate: float) -> "HoldingCosts":
        """Each component grown by one year at ``rate`` (a fraction)."""
        factor = 1 + rate
        return HoldingCosts(
            council_rates=self.council_rates * factor,
            strata_fees=self.strata_fees * factor,
            land_tax=self.land_tax * factor,
            sinking_fund=self.sinking_fund * factor,
            other=self.other * factor,
        )


@dataclass(frozen=True)
class InvestmentInputs:
    """Rental and holding-cost assumptions for the term projection."""

    council_rates: float = 2_000
    strata_fees: float = 0
    land_tax: float = 0
    sinking_fund: float = 0
    other_costs: float = 0
    target_weekly_rent: float = 600
    capital_growth_pct: float = 3.0
    inflation_pct: float = 2.5
    projection_enabled: bool = True

    # Years to project. None projects the whole loan term.
    horizon_years: int | None = field(default=None)

    def holding_costs(self) -> HoldingCosts:
        return HoldingCosts(
            council_rates=self.council_rates,
            strata_fees=self.strata_fees,
            land_tax=self.land_tax,
            sinking_fund=self.sinking_fund,
            other=self.other_costs,
        )

    @property
    def growth_rate(self) -> float:
        """Capital growth as a fraction; 0 when projections are off."""
        if not self.projection_enabled:
            return 0.0
        return self.capital_growth_pct / 100

    @property
    def inflation_rate(self) -> float:
        """Inflation as a fraction; 0 when projections are off."""
        if not self.projection_enabled:
            return 0.0
        return self.inflation_pct / 100
