"""Tests for input validation and scenario files."""

import json

import pytest
import yaml

from configs import DIR as CONFIGS_DIR
from propcalc.config import (
    Scenario,
    dict_to_scenario,
    load_config,
    parse_config_text,
    safe_value,
    scenario_to_dict,
)
from propcalc.params import InvestmentInputs, LoanInputs


class TestSafeValue:
    def test_in_range(self):
        assert safe_value(42, 0, 100, 5) == 42

    def test_clamped(self):
        assert safe_value(150, 0, 100, 5) == 100
        assert safe_value(-3, 0, 100, 5) == 0

    def test_numeric_string(self):
        assert safe_value("6.25", 0, 100, 5) == 6.25

    def test_invalid_uses_default(self):
        assert safe_value("abc", 0, 100, 5) == 5
        assert safe_value(None, 0, 100, 5) == 5
        assert safe_value(float("nan"), 0, 100, 5) == 5
        assert safe_value(True, 0, 100, 5) == 5

    def test_trailing_text_rejected(self):
        assert safe_value("600abc", 0, 1_000, 5) == 5
        assert safe_value(" 600 ", 0, 1_000, 5) == 600


class TestDictToScenario:
    def test_empty_gives_defaults(self):
        assert dict_to_scenario({}) == Scenario()
        assert dict_to_scenario(None) == Scenario()

    def test_values_clamped(self):
        s = dict_to_scenario({"loan": {"deposit_pct": 150, "loan_term_years": 500}})
        assert s.loan.deposit_pct == 100
        assert s.loan.loan_term_years == 100

    def test_invalid_value_falls_back_to_default(self):
        s = dict_to_scenario({"loan": {"loan_term_years": "thirty"}})
        assert s.loan.loan_term_years == LoanInputs().loan_term_years

    def test_term_rounded_to_whole_years(self):
        s = dict_to_scenario({"loan": {"loan_term_years": 25.7}})
        assert s.loan.loan_term_years == 26
        s = dict_to_scenario({"loan": {"loan_term_years": 25.2}})
        assert s.loan.loan_term_years == 25

    def test_rates_may_be_negative(self):
        s = dict_to_scenario({"investment": {"capital_growth_pct": -5}})
        assert s.investment.capital_growth_pct == -5

    def test_bool_parsing(self):
        s = dict_to_scenario({"investment": {"projection_enabled": "no"}})
        assert s.investment.projection_enabled is False

    def test_horizon(self):
        assert dict_to_scenario({"investment": {"horizon_years": None}}).investment.horizon_years is None
        assert dict_to_scenario({"investment": {"horizon_years": 12}}).investment.horizon_years == 12

    def test_unknown_fields_ignored(self):
        s = dict_to_scenario({"loan": {"colour": "blue"}})
        assert s.loan == LoanInputs()

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown config section"):
            dict_to_scenario({"tax": {}})

    def test_round_trip(self):
        scenario = Scenario(
            loan=LoanInputs(650_000, 10, 6.4, 25),
            investment=InvestmentInputs(strata_fees=4_000, horizon_years=15),
        )
        assert dict_to_scenario(scenario_to_dict(scenario)) == scenario


class TestLoading:
    def test_yaml_text(self):
        text = "loan:\n  property_value: 550000\n  deposit_pct: 10\n"
        s = parse_config_text(text)
        assert s.loan.property_value == 550_000
        assert s.loan.deposit_pct == 10

    def test_json_file(self, tmp_path):
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps({"investment": {"target_weekly_rent": 720}}))
        assert load_config(path).investment.target_weekly_rent == 720

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "scenario.yaml"
        path.write_text(yaml.safe_dump({"loan": {"interest_rate_pct": 5.5}}))
        assert load_config(path).loan.interest_rate_pct == 5.5

    def test_non_mapping(self):
        with pytest.raises(ValueError):
            parse_config_text("- 1\n- 2\n")

    @pytest.mark.parametrize("name", sorted(p.name for p in CONFIGS_DIR.glob("*.yaml")))
    def test_presets_load(self, name):
        scenario = load_config(CONFIGS_DIR / name)
        assert scenario.loan.property_value > 0
