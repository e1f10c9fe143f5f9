"""DataFrame formatters for the dashboard data tables."""

import pandas as pd

from propcalc.costs import LoanResult
from propcalc.output import per_view
from propcalc.projection import YearRecord


def records_dataframe(records: list[YearRecord], view: str = "annual") -> pd.DataFrame:
    """Projection records as a plain DataFrame; flow columns per ``view``."""
    rows = []
    for r in records:
        rows.append(
            {
                "Year": r.year,
                "Property Value": r.property_value,
                "Balance": r.remaining_balance,
                "Equity": r.equity,
                "Principal (cumul.)": r.principal_paid_cumulative,
                "Interest (cumul.)": r.interest_paid_cumulative,
                "Rental Income": per_view(r.rental_income, view),
                "Holding Costs": per_view(r.holding_costs, view),
                "Outgoings": per_view(r.total_outgoings, view),
                "Net Cashflow": per_view(r.net_cashflow, view),
                "Cash Position": r.cumulative_cash_position,
                "Net Position": r.total_net_position,
                "Net Pos. (real)": r.real_net_position,
            }
        )
    return pd.DataFrame(rows)


def records_table(records: list[YearRecord], view: str = "annual"):
    """Display-ready (styled) projection table."""
    df = records_dataframe(records, view)
    return df.style.format({col: "${:,.0f}" for col in df.columns if col != "Year"})


def loan_dataframe(loan: LoanResult) -> pd.DataFrame:
    """Upfront cost line items."""
    rows = [
        ("Deposit", loan.deposit_amount),
        ("Stamp Duty", loan.stamp_duty),
        ("Other Fees", loan.other_fees),
        ("Base Loan", loan.base_loan),
        ("LMI", loan.lmi_cost),
        ("Total Loan", loan.total_loan),
        ("Monthly Repayment", loan.monthly_payment),
        ("Weekly Repayment", loan.weekly_payment),
        ("Annual Repayment", loan.annual_payment),
    ]
    return pd.DataFrame(rows, columns=["Item", "Amount"])
