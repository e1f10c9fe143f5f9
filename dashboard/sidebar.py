"""Sidebar controls for the calculator dashboard."""

import streamlit as st

from configs import DIR as CONFIGS_DIR
from propcalc.config import Scenario, dict_to_scenario, load_config

PRESETS = {
    "Default": None,
    "Inner-city Unit": "inner_city_unit.yaml",
    "Low Deposit (LMI)": "low_deposit.yaml",
    "Prestige Home": "prestige_home.yaml",
}

# Widget key -> (config section, field). Values are shown as entered on the form.
_FIELDS = {
    "property_value": ("loan", "property_value"),
    "deposit_pct": ("loan", "deposit_pct"),
    "interest_rate_pct": ("loan", "interest_rate_pct"),
    "loan_term_years": ("loan", "loan_term_years"),
    "council_rates": ("investment", "council_rates"),
    "strata_fees": ("investment", "strata_fees"),
    "land_tax": ("investment", "land_tax"),
    "sinking_fund": ("investment", "sinking_fund"),
    "other_costs": ("investment", "other_costs"),
    "target_weekly_rent": ("investment", "target_weekly_rent"),
    "capital_growth_pct": ("investment", "capital_growth_pct"),
    "inflation_pct": ("investment", "inflation_pct"),
    "projection_enabled": ("investment", "projection_enabled"),
}


def _scenario_values(scenario: Scenario) -> dict:
    sections = {"loan": scenario.loan, "investment": scenario.investment}
    values = {}
    for key, (section, name) in _FIELDS.items():
        val = getattr(sections[section], name)
        values[key] = val if isinstance(val, bool) else float(val)
    values["loan_term_years"] = int(scenario.loan.loan_term_years)
    return values


def _init_defaults():
    """Set default session state values on first run only."""
    for key, val in _scenario_values(Scenario()).items():
        if key not in st.session_state:
            st.session_state[key] = val


def _apply_preset():
    """Callback: load preset values into session state."""
    filename = PRESETS.get(st.session_state.preset_selector)
    scenario = Scenario() if filename is None else load_config(CONFIGS_DIR / filename)
    for key, val in _scenario_values(scenario).items():
        st.session_state[key] = val


def render_sidebar() -> Scenario:
    """Render all sidebar controls and return the validated Scenario."""
    _init_defaults()

    st.sidebar.title("Property Calculator")
    st.sidebar.selectbox(
        "Load Preset",
        options=list(PRESETS.keys()),
        key="preset_selector",
        on_change=_apply_preset,
    )

    # --- Loan ---
    with st.sidebar.expander("Loan", expanded=True):
        st.number_input(
            "Property Value ($)",
            min_value=0.0,
            max_value=1_000_000_000.0,
            step=10_000.0,
            key="property_value",
        )
        st.number_input(
            "Deposit (%)",
            min_value=0.0,
            max_value=100.0,
            step=1.0,
            key="deposit_pct",
            help="Below 20% the loan usually attracts lenders mortgage insurance.",
        )
        st.number_input(
            "Interest Rate (% p.a.)",
            min_value=0.0,
            max_value=100.0,
            step=0.05,
            key="interest_rate_pct",
        )
        st.number_input(
            "Loan Term (years)",
            min_value=1,
            max_value=100,
            step=1,
            key="loan_term_years",
        )

    # --- Holding costs ---
    with st.sidebar.expander("Holding Costs ($/yr)", expanded=True):
        for key, label in [
            ("council_rates", "Council Rates"),
            ("strata_fees", "Strata Fees"),
            ("land_tax", "Land Tax"),
            ("sinking_fund", "Sinking Fund"),
            ("other_costs", "Other Costs"),
        ]:
            st.number_input(
                label, min_value=0.0, max_value=1_000_000.0, step=100.0, key=key
            )

    # --- Rent ---
    with st.sidebar.expander("Rent", expanded=True):
        st.number_input(
            "Target Weekly Rent ($)",
            min_value=0.0,
            max_value=50_000.0,
            step=10.0,
            key="target_weekly_rent",
        )

    # --- Projections ---
    with st.sidebar.expander("Projections", expanded=True):
        enabled = st.toggle(
            "Enable growth & inflation",
            key="projection_enabled",
            help="When off, property value, rent and costs stay flat for the whole term.",
        )
        if enabled:
            st.number_input(
                "Capital Growth (% p.a.)",
                min_value=-100.0,
                max_value=100.0,
                step=0.5,
                key="capital_growth_pct",
            )
            st.number_input(
                "Inflation (% p.a.)",
                min_value=-100.0,
                max_value=100.0,
                step=0.5,
                key="inflation_pct",
            )

    data = {"loan": {}, "investment": {}}
    for key, (section, name) in _FIELDS.items():
        data[section][name] = st.session_state.get(key)
    return dict_to_scenario(data)
