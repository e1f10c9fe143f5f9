"""Plotly chart builders for the calculator dashboard."""

import plotly.graph_objects as go

from propcalc.output import per_view
from propcalc.projection import ProjectionResult, YearRecord
from propcalc.sweep import RentScenario

GREEN = "#10b981"
RED = "#ef4444"
BLUE = "#3b82f6"
PURPLE = "#8b5cf6"
AMBER = "#f59e0b"

_LEGEND = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)


def _sign_colors(values: list[float]) -> list[str]:
    return [RED if v < 0 else GREEN for v in values]


def rent_sweep_chart(scenarios: list[RentScenario]) -> go.Figure:
    """Net monthly position for each weekly rent in the sweep."""
    labels = [f"${s.weekly_rent:,.0f}/wk" for s in scenarios]
    values = [s.net_monthly_position for s in scenarios]

    fig = go.Figure(
        go.Bar(
            x=labels,
            y=values,
            marker_color=_sign_colors(values),
            hovertemplate="%{x}<br>Net: $%{y:,.0f}/mo<extra></extra>",
        )
    )
    fig.update_layout(
        title="Net Monthly Position by Weekly Rent",
        xaxis_title="Weekly Rent",
        yaxis_title="Net Monthly Position ($)",
        yaxis_tickformat="$,.0f",
        margin=dict(t=60, b=40),
    )
    return fig


def cost_breakdown_chart(breakdown: dict[str, float]) -> go.Figure:
    """Doughnut of term costs: interest, duty, LMI, holding costs, fees."""
    fig = go.Figure(
        go.Pie(
            labels=list(breakdown.keys()),
            values=list(breakdown.values()),
            hole=0.5,
            marker=dict(colors=[RED, BLUE, AMBER, PURPLE, GREEN]),
            hovertemplate="%{label}: $%{value:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(title="Total Cost Breakdown", margin=dict(t=60, b=40))
    return fig


def income_vs_outgoings_chart(projection: ProjectionResult) -> go.Figure:
    """Total rental income against total outgoings over the term."""
    fig = go.Figure(
        go.Bar(
            x=["Total Income", "Total Outgoings"],
            y=[projection.total_rental_income, projection.total_outgoings],
            marker_color=[GREEN, RED],
            hovertemplate="%{x}: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Income vs Outgoings (Total Term)",
        yaxis_title="Amount ($)",
        yaxis_tickformat="$,.0f",
        margin=dict(t=60, b=40),
    )
    return fig


def amortization_chart(records: list[YearRecord]) -> go.Figure:
    """Cumulative principal and interest paid."""
    years = [r.year for r in records]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.principal_paid_cumulative for r in records],
            name="Cumulative Principal Paid",
            line=dict(color=BLUE, width=2.5),
            hovertemplate="Year %{x}<br>Principal: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.interest_paid_cumulative for r in records],
            name="Cumulative Interest Paid",
            line=dict(color=RED, width=2.5),
            hovertemplate="Year %{x}<br>Interest: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Loan Amortization",
        xaxis_title="Year",
        yaxis_title="Amount ($)",
        yaxis_tickformat="$,.0f",
        hovermode="x unified",
        legend=_LEGEND,
        margin=dict(t=60, b=40),
    )
    return fig


def equity_chart(records: list[YearRecord]) -> go.Figure:
    """Property value, remaining debt and equity."""
    years = [r.year for r in records]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.property_value for r in records],
            name="Property Value",
            line=dict(color=BLUE, dash="dash", width=2),
            hovertemplate="Year %{x}<br>Property: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.remaining_balance for r in records],
            name="Remaining Debt",
            line=dict(color=RED, width=2),
            hovertemplate="Year %{x}<br>Debt: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.equity for r in records],
            name="Equity",
            fill="tozeroy",
            line=dict(color=GREEN),
            fillcolor="rgba(16,185,129,0.2)",
            hovertemplate="Year %{x}<br>Equity: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Equity & Debt",
        xaxis_title="Year",
        yaxis_title="Value ($)",
        yaxis_tickformat="$,.0f",
        hovermode="x unified",
        legend=_LEGEND,
        margin=dict(t=60, b=40),
    )
    return fig


def holding_costs_chart(records: list[YearRecord], view: str = "annual") -> go.Figure:
    """Total holding costs per period."""
    label = view.capitalize()
    fig = go.Figure(
        go.Scatter(
            x=[r.year for r in records],
            y=[per_view(r.holding_costs, view) for r in records],
            name=f"Total {label} Holding Costs",
            line=dict(color=PURPLE, width=2.5),
            hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=f"{label} Holding Costs",
        xaxis_title="Year",
        yaxis_title=label,
        yaxis_tickformat="$,.0f",
        margin=dict(t=60, b=40),
    )
    return fig


def holding_breakdown_chart(records: list[YearRecord], view: str = "annual") -> go.Figure:
    """Stacked bar of the five holding-cost components."""
    years = [r.year for r in records]
    components = [
        ("Council Rates", "council_rates", BLUE),
        ("Strata Fees", "strata_fees", PURPLE),
        ("Land Tax", "land_tax", RED),
        ("Sinking Fund", "sinking_fund", GREEN),
        ("Other Costs", "other", AMBER),
    ]
    fig = go.Figure()
    for name, attr, color in components:
        fig.add_trace(
            go.Bar(
                x=years,
                y=[per_view(getattr(r.holding_breakdown, attr), view) for r in records],
                name=name,
                marker_color=color,
                hovertemplate=f"Year %{{x}}<br>{name}: $%{{y:,.0f}}<extra></extra>",
            )
        )
    label = view.capitalize()
    fig.update_layout(
        barmode="stack",
        title=f"{label} Holding Costs Breakdown",
        xaxis_title="Year",
        yaxis_title=label,
        yaxis_tickformat="$,.0f",
        legend=_LEGEND,
        margin=dict(t=80, b=40),
    )
    return fig


def rental_income_chart(records: list[YearRecord], view: str = "annual") -> go.Figure:
    """Inflated rental income per period."""
    label = view.capitalize()
    fig = go.Figure(
        go.Scatter(
            x=[r.year for r in records],
            y=[per_view(r.rental_income, view) for r in records],
            name=f"{label} Rental Income (Inflated)",
            line=dict(color=GREEN, width=2.5),
            hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=f"{label} Rental Income",
        xaxis_title="Year",
        yaxis_title=label,
        yaxis_tickformat="$,.0f",
        margin=dict(t=60, b=40),
    )
    return fig


def cashflow_comparison_chart(records: list[YearRecord], view: str = "annual") -> go.Figure:
    """Income against total outgoings per period."""
    years = [r.year for r in records]
    label = view.capitalize()
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[per_view(r.rental_income, view) for r in records],
            name=f"{label} Income",
            line=dict(color=GREEN, width=2.5),
            hovertemplate="Year %{x}<br>Income: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[per_view(r.total_outgoings, view) for r in records],
            name=f"{label} Outgoings",
            line=dict(color=RED, width=2.5),
            hovertemplate="Year %{x}<br>Outgoings: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=f"{label} Income vs Outgoings",
        xaxis_title="Year",
        yaxis_title=label,
        yaxis_tickformat="$,.0f",
        hovermode="x unified",
        legend=_LEGEND,
        margin=dict(t=60, b=40),
    )
    return fig


def net_cashflow_chart(
    records: list[YearRecord], view: str = "annual", break_even: int | None = None
) -> go.Figure:
    """Net cashflow per period with the break-even year marked."""
    values = [r.net_cashflow for r in records]
    label = view.capitalize()
    fig = go.Figure(
        go.Bar(
            x=[r.year for r in records],
            y=[per_view(v, view) for v in values],
            name=f"{label} Net Cashflow",
            marker_color=_sign_colors(values),
            hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
        )
    )
    if break_even is not None:
        fig.add_vline(
            x=break_even,
            line_dash="dash",
            line_color="gray",
            annotation_text=f"Break-even: Year {break_even}",
            annotation_position="top left",
        )
    fig.update_layout(
        title=f"{label} Net Cashflow",
        xaxis_title="Year",
        yaxis_title=label,
        yaxis_tickformat="$,.0f",
        margin=dict(t=60, b=40),
    )
    return fig


def net_position_chart(records: list[YearRecord]) -> go.Figure:
    """Cash position, total net position and its inflation-adjusted value."""
    years = [r.year for r in records]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.cumulative_cash_position for r in records],
            name="Cash Position (Liquidity)",
            line=dict(color=AMBER, width=2.5),
            hovertemplate="Year %{x}<br>Cash: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.total_net_position for r in records],
            name="Total Net Position (Wealth)",
            line=dict(color=BLUE, width=2.5),
            hovertemplate="Year %{x}<br>Net: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=[r.real_net_position for r in records],
            name="Real Total Position (Inflation Adjusted)",
            line=dict(color=PURPLE, dash="dash", width=2),
            hovertemplate="Year %{x}<br>Real: $%{y:,.0f}<extra></extra>",
        )
    )
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    fig.update_layout(
        title="Cash & Net Position",
        xaxis_title="Year",
        yaxis_title="Net Position ($)",
        yaxis_tickformat="$,.0f",
        hovermode="x unified",
        legend=_LEGEND,
        margin=dict(t=80, b=40),
    )
    return fig
