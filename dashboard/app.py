"""Streamlit dashboard for the mortgage and property investment calculator."""

import streamlit as st

st.set_page_config(
    page_title="Property Investment Calculator",
    page_icon=":house:",
    layout="wide",
)

from propcalc.config import Scenario
from propcalc.costs import LVR_RISK_THRESHOLD, compute_loan
from propcalc.output import VIEW_FACTORS, cost_breakdown, to_csv
from propcalc.position import compute_rental_position
from propcalc.projection import compute_projection
from propcalc.sweep import compute_rent_sweep

from dashboard.charts import (
    amortization_chart,
    cashflow_comparison_chart,
    cost_breakdown_chart,
    equity_chart,
    holding_breakdown_chart,
    holding_costs_chart,
    income_vs_outgoings_chart,
    net_cashflow_chart,
    net_position_chart,
    rent_sweep_chart,
    rental_income_chart,
)
from dashboard.formatters import loan_dataframe, records_table
from dashboard.sidebar import render_sidebar


# --- Computation ---


def calculate(scenario: Scenario):
    loan = compute_loan(scenario.loan)
    position = compute_rental_position(loan, scenario.investment)
    projection = compute_projection(loan, scenario.investment)
    sweep = compute_rent_sweep(
        scenario.investment.target_weekly_rent, position.total_monthly_costs
    )
    return loan, position, projection, sweep


# --- Layout ---

scenario = render_sidebar()
loan, position, projection, sweep = calculate(scenario)

st.header("Mortgage & Investment Calculator")

# Row 1: repayments and loan
m1, m2, m3, m4 = st.columns(4)
m1.metric("Monthly Repayment", f"${loan.monthly_payment:,.2f}")
m2.metric("Weekly Repayment", f"${loan.weekly_payment:,.2f}")
m3.metric("Total Loan", f"${loan.total_loan:,.0f}")
m4.metric("LVR", f"{loan.lvr_pct:.2f}%")
if loan.high_lvr:
    st.error(f"LVR is above {LVR_RISK_THRESHOLD:.0f}%: most lenders will decline this loan.")

# Row 2: upfront costs
m5, m6, m7, m8 = st.columns(4)
m5.metric("Deposit", f"${loan.deposit_amount:,.0f}")
m6.metric("Stamp Duty", f"${loan.stamp_duty:,.0f}")
m7.metric("Other Fees", f"${loan.other_fees:,.0f}")
m8.metric("LMI", f"${loan.lmi_cost:,.0f}")
st.caption(
    "Stamp duty and fees are added to the loan rather than paid at settlement, "
    "so the deposit is the only upfront cash."
)

st.divider()

# Row 3: rental position
r1, r2, r3, r4 = st.columns(4)
r1.metric("Total Monthly Costs", f"${position.total_monthly_costs:,.0f}")
r2.metric(
    "Net Monthly Position",
    f"${position.net_monthly_position:,.0f}",
    delta="Positive Cashflow" if position.is_positive else "Out of Pocket",
    delta_color="normal" if position.is_positive else "inverse",
)
r3.metric("Net Weekly Position", f"${position.net_weekly_position:,.0f}")
r4.metric("Break-even Rent", f"${position.break_even_weekly_rent:,.0f}/wk")

be = projection.break_even_year
t1, t2, t3, t4, t5 = st.columns(5)
t1.metric("Total Repayments", f"${projection.total_repayments:,.0f}")
t2.metric("Total Interest", f"${projection.total_interest:,.0f}")
t3.metric("Total Holding Costs", f"${projection.total_holding_costs:,.0f}")
t4.metric("Total Rental Income", f"${projection.total_rental_income:,.0f}")
t5.metric(
    "Net Term Cashflow",
    f"${projection.net_cashflow_total:,.0f}",
    delta=f"Break-even: Year {be}" if be else "Break-even: Never",
)

st.divider()

tab_rent, tab_term, tab_detail, tab_data = st.tabs([
    ":material/tune: Rent Analysis",
    ":material/payments: Term Analysis",
    ":material/trending_up: Projections",
    ":material/table_chart: Data",
])

with tab_rent:
    st.plotly_chart(rent_sweep_chart(sweep), use_container_width=True)
    st.caption(
        "Net monthly position at weekly rents either side of the target, in $50 steps."
    )

with tab_term:
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(
            cost_breakdown_chart(cost_breakdown(loan, projection)),
            use_container_width=True,
        )
    with c2:
        st.plotly_chart(income_vs_outgoings_chart(projection), use_container_width=True)
    st.plotly_chart(amortization_chart(projection.records), use_container_width=True)
    st.plotly_chart(equity_chart(projection.records), use_container_width=True)

with tab_detail:
    if not scenario.investment.projection_enabled:
        st.info("Enable growth & inflation in the sidebar to see inflated projections.")
    view = st.radio(
        "View",
        list(VIEW_FACTORS),
        horizontal=True,
        format_func=str.capitalize,
        key="view_selector",
    )
    records = projection.records
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(holding_costs_chart(records, view), use_container_width=True)
        st.plotly_chart(rental_income_chart(records, view), use_container_width=True)
    with c2:
        st.plotly_chart(holding_breakdown_chart(records, view), use_container_width=True)
        st.plotly_chart(cashflow_comparison_chart(records, view), use_container_width=True)
    st.plotly_chart(
        net_cashflow_chart(records, view, projection.break_even_year),
        use_container_width=True,
    )
    st.plotly_chart(net_position_chart(records), use_container_width=True)
    st.caption(
        "Cash position starts at minus the deposit and accumulates each year's net "
        "cashflow. Total net position adds equity; the real figure discounts it by "
        "inflation."
    )

with tab_data:
    st.dataframe(loan_dataframe(loan), hide_index=True)
    data_view = st.radio(
        "Flows",
        list(VIEW_FACTORS),
        horizontal=True,
        format_func=str.capitalize,
        key="data_view_selector",
    )
    st.dataframe(records_table(projection.records, data_view), hide_index=True)
    st.download_button(
        "Download CSV",
        data=to_csv(projection.records),
        file_name="projection.csv",
        mime="text/csv",
    )
