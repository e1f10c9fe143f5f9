"""Output formatting for loan and projection results."""

import csv
import io

from propcalc.amortization import MONTHS_PER_YEAR, PeriodStep
from propcalc.costs import LVR_RISK_THRESHOLD, LoanResult
from propcalc.position import RentalPosition
from propcalc.projection import ProjectionResult, YearRecord

# Divisors that turn an annual figure into a per-period one.
VIEW_FACTORS = {"annual": 1, "monthly": 12, "weekly": 52}


def fmt(value: float) -> str:
    """Format a dollar amount."""
    if abs(value) >= 1_000_000:
        return f"${value / 1_000_000:,.2f}M"
    return f"${value:,.0f}"


def view_factor(view: str) -> int:
    try:
        return VIEW_FACTORS[view]
    except KeyError:
        raise ValueError(
            f"Unknown view '{view}'. Supported: {list(VIEW_FACTORS.keys())}"
        ) from None


def per_view(value: float, view: str) -> float:
    """Convert an annual amount to the given view (annual, monthly, weekly)."""
    return value / view_factor(view)


def cost_breakdown(loan: LoanResult, projection: ProjectionResult) -> dict[str, float]:
    """Split of the total cost of holding the property over the projection."""
    return {
        "Interest": projection.total_interest,
        "Stamp Duty": loan.stamp_duty,
        "LMI": loan.lmi_cost,
        "Holding Costs": projection.total_holding_costs,
        "Other Fees": loan.other_fees,
    }


def loan_summary(loan: LoanResult) -> str:
    """Upfront costs and repayments for a loan."""
    inputs = loan.inputs
    lvr_note = "  (high risk)" if loan.high_lvr else ""
    lines = [
        "Property Investment Calculator - Loan Summary",
        "=" * 70,
        "",
        f"  Property value:   {fmt(inputs.property_value)}",
        f"  Deposit:          {inputs.deposit_pct:.1f}% ({fmt(loan.deposit_amount)})",
        f"  Stamp duty:       {fmt(loan.stamp_duty)}",
        f"  Other fees:       {fmt(loan.other_fees)}",
        f"  Base loan:        {fmt(loan.base_loan)}",
        f"  LVR:              {loan.lvr_pct:.2f}%{lvr_note}",
        f"  LMI:              {fmt(loan.lmi_cost)}",
        f"  Total loan:       {fmt(loan.total_loan)}",
        f"  Interest rate:    {inputs.interest_rate_pct:.2f}% p.a. ({inputs.loan_term_years}yr)",
        "",
        f"  Repayments:       {fmt(loan.monthly_payment)}/mo, "
        f"{fmt(loan.weekly_payment)}/wk, {fmt(loan.annual_payment)}/yr",
        "",
    ]
    if loan.high_lvr:
        lines.append(f"  Warning: LVR above {LVR_RISK_THRESHOLD:.0f}%.")
        lines.append("")
    return "\n".join(lines)


def position_summary(position: RentalPosition) -> str:
    """Current weekly and monthly rental position."""
    label = "Positive Cashflow" if position.is_positive else "Out of Pocket"
    lines = [
        "Rental position (today's figures):",
        f"  Total costs:      {fmt(position.total_monthly_costs)}/mo, "
        f"{fmt(position.total_weekly_costs)}/wk",
        f"  Rent income:      {fmt(position.monthly_rent_income)}/mo",
        f"  Net position:     {fmt(position.net_monthly_position)}/mo, "
        f"{fmt(position.net_weekly_position)}/wk ({label})",
        f"  Break-even rent:  {fmt(position.break_even_weekly_rent)}/wk",
        "",
    ]
    return "\n".join(lines)


def projection_summary(projection: ProjectionResult) -> str:
    """Term totals and break-even year."""
    be = projection.break_even_year
    lines = [
        f"Term totals ({len(projection.records)} years):",
        f"  Total repayments: {fmt(projection.total_repayments)}",
        f"  Total interest:   {fmt(projection.total_interest)}",
        f"  Holding costs:    {fmt(projection.total_holding_costs)}",
        f"  Rental income:    {fmt(projection.total_rental_income)}",
        f"  Net cashflow:     {fmt(projection.net_cashflow_total)}",
        f"  Break-even:       {f'Year {be}' if be else 'Never'}",
    ]
    return "\n".join(lines)


def projection_table(records: list[YearRecord], view: str = "annual") -> str:
    """Year-by-year breakdown. Flow columns are shown per ``view`` period."""
    factor = view_factor(view)
    header = (
        f"{'Yr':>3} | {'Prop Value':>12} | {'Balance':>12} | {'Equity':>12} | "
        f"{'Rent':>10} | {'Outgoings':>10} | {'Net CF':>10} | "
        f"{'Cash Pos':>12} | {'Net Pos':>12} | {'Real Pos':>12}"
    )
    sep = "-" * len(header)
    lines = [f"Flows shown {view}", header, sep]

    for r in records:
        lines.append(
            f"{r.year:>3} | {fmt(r.property_value):>12} | {fmt(r.remaining_balance):>12} | "
            f"{fmt(r.equity):>12} | "
            f"{fmt(r.rental_income / factor):>10} | {fmt(r.total_outgoings / factor):>10} | "
            f"{fmt(r.net_cashflow / factor):>10} | "
            f"{fmt(r.cumulative_cash_position):>12} | {fmt(r.total_net_position):>12} | "
            f"{fmt(r.real_net_position):>12}"
        )

    return "\n".join(lines)


def schedule_table(steps: list[PeriodStep]) -> str:
    """Month-by-month repayment schedule."""
    header = (
        f"{'Month':>5} | {'Yr':>3} | {'Payment':>10} | {'Interest':>10} | "
        f"{'Principal':>10} | {'Balance':>12}"
    )
    lines = [header, "-" * len(header)]
    for month, s in enumerate(steps, start=1):
        year = (month - 1) // MONTHS_PER_YEAR + 1
        lines.append(
            f"{month:>5} | {year:>3} | {fmt(s.interest + s.principal):>10} | "
            f"{fmt(s.interest):>10} | {fmt(s.principal):>10} | {fmt(s.balance):>12}"
        )
    return "\n".join(lines)


def to_csv(records: list[YearRecord]) -> str:
    """Export projection records to CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "year", "principal_paid", "interest_paid",
        "principal_paid_cumulative", "interest_paid_cumulative",
        "remaining_balance", "property_value", "equity",
        "council_rates", "strata_fees", "land_tax", "sinking_fund", "other_costs",
        "holding_costs", "rental_income", "net_cashflow", "total_outgoings",
        "cumulative_cash_position", "total_net_position", "real_net_position",
    ])
    for r in records:
        h = r.holding_breakdown
        writer.writerow([
            r.year, f"{r.principal_paid:.2f}", f"{r.interest_paid:.2f}",
            f"{r.principal_paid_cumulative:.2f}", f"{r.interest_paid_cumulative:.2f}",
            f"{r.remaining_balance:.2f}", f"{r.property_value:.2f}", f"{r.equity:.2f}",
            f"{h.council_rates:.2f}", f"{h.strata_fees:.2f}", f"{h.land_tax:.2f}",
            f"{h.sinking_fund:.2f}", f"{h.other:.2f}",
            f"{r.holding_costs:.2f}", f"{r.rental_income:.2f}",
            f"{r.net_cashflow:.2f}", f"{r.total_outgoings:.2f}",
            f"{r.cumulative_cash_position:.2f}", f"{r.total_net_position:.2f}",
            f"{r.real_net_position:.2f}",
        ])
    return output.getvalue()


def full_report(
    loan: LoanResult, position: RentalPosition, projection: ProjectionResult
) -> str:
    """Generate a complete summary report."""
    parts = [
        loan_summary(loan),
        position_summary(position),
        projection_summary(projection),
        "",
        "Term cost breakdown:",
    ]
    for label, amount in cost_breakdown(loan, projection).items():
        parts.append(f"  {label + ':':<18}{fmt(amount)}")
    return "\n".join(parts)
