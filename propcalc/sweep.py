"""Rent sensitivity: net monthly position across a band of weekly rents."""

import math
from dataclasses import dataclass

from propcalc.output import fmt

RENT_SPREAD = 150
RENT_STEP = 50


@dataclass(frozen=True)
class RentScenario:
    weekly_rent: float
    net_monthly_position: float

    @property
    def is_positive(self) -> bool:
        return self.net_monthly_position >= 0


def rent_range(
    target_weekly_rent: float, spread: float = RENT_SPREAD, step: float = RENT_STEP
) -> list[float]:
    """Weekly rents from just below ``target - spread`` up to ``target + spread``.

    The start is rounded down to a multiple of ``step`` and never negative.
    """
    start = max(0, math.floor((target_weekly_rent - spread) / step) * step)
    rents = []
    rent = start
    while rent <= target_weekly_rent + spread:
        rents.append(rent)
        rent += step
    return rents


def compute_rent_sweep(
    target_weekly_rent: float,
    total_monthly_costs: float,
    spread: float = RENT_SPREAD,
    step: float = RENT_STEP,
) -> list[RentScenario]:
    """Net monthly position for each rent in the band around the target."""
    return [
        RentScenario(
            weekly_rent=rent,
            net_monthly_position=rent * 52 / 12 - total_monthly_costs,
        )
        for rent in rent_range(target_weekly_rent, spread, step)
    ]


def format_sweep(results: list[RentScenario], total_monthly_costs: float) -> str:
    """Format sweep results as a table."""
    header = f"{'Rent/wk':>10} | {'Income/mo':>12} | {'Net/mo':>12} | {'Cashflow':>9}"
    sep = "-" * len(header)
    lines = [
        f"Rent sensitivity (monthly costs {fmt(total_monthly_costs)})",
        header,
        sep,
    ]
    for r in results:
        income = r.weekly_rent * 52 / 12
        label = "Positive" if r.is_positive else "Negative"
        lines.append(
            f"{fmt(r.weekly_rent):>10} | {fmt(income):>12} | "
            f"{fmt(r.net_monthly_position):>12} | {label:>9}"
        )
    return "\n".join(lines)
