"""Tests for stamp duty, LMI and loan derivation."""

import math

import pytest
from propcalc.amortization import monthly_payment
from propcalc.costs import (
    base_loan,
    compute_loan,
    lmi,
    lvr,
    stamp_duty,
    total_fees,
)
from propcalc.params import LoanInputs
from propcalc.rates import STAMP_DUTY_BRACKETS, STAMP_DUTY_CEILING


class TestStampDuty:
    def test_800k(self):
        # 22,200 + (800,000 - 750,001) * 5.9%
        assert stamp_duty(800_000) == pytest.approx(25_149.941)

    def test_zero_value(self):
        assert stamp_duty(0) == 0.0

    def test_first_bracket(self):
        assert stamp_duty(100_000) == pytest.approx(1_200)

    def test_at_ceiling_uses_brackets(self):
        assert stamp_duty(STAMP_DUTY_CEILING) == pytest.approx(36_950 + 454_999 * 0.064)

    def test_above_ceiling_flat_rate(self):
        assert stamp_duty(2_000_000) == pytest.approx(2_000_000 * 0.0454)

    def test_ceiling_discontinuity(self):
        # The flat rule just above the ceiling is lower than the bracket figure at it
        assert stamp_duty(STAMP_DUTY_CEILING + 1) < stamp_duty(STAMP_DUTY_CEILING)

    def test_non_decreasing_at_bracket_boundaries(self):
        for bracket in STAMP_DUTY_BRACKETS[1:]:
            t = bracket.threshold
            assert stamp_duty(t - 1) <= stamp_duty(t) + 1e-9
            assert stamp_duty(t) <= stamp_duty(t + 1)

    def test_non_decreasing_up_to_ceiling(self):
        values = [stamp_duty(v) for v in range(0, STAMP_DUTY_CEILING + 1, 5_000)]
        for prev, curr in zip(values, values[1:]):
            assert curr >= prev


class TestLmi:
    def test_zero_at_or_below_80(self):
        for ratio in (0, 50, 79.99, 80):
            assert lmi(ratio, 550_000) == 0.0

    def test_zero_in_gap_below_first_row(self):
        assert lmi(80.005, 550_000) == 0.0

    def test_85_row_600k_tier(self):
        assert lmi(85.5, 550_000) == pytest.approx(550_000 * 0.01258)
        assert lmi(85.5, 550_000) == pytest.approx(6_919.00)

    def test_exactly_85_uses_row_below(self):
        assert lmi(85, 550_000) == pytest.approx(550_000 * 0.01165)

    def test_over_cap_loan_uses_last_column(self):
        assert lmi(90.5, 1_200_000) == pytest.approx(1_200_000 * 0.03820)

    def test_lvr_above_table_uses_last_row(self):
        assert lmi(99, 400_000) == pytest.approx(400_000 * 0.03345)


class TestLoanStructure:
    def test_total_fees(self):
        assert total_fees(10_000) == 10_000 + 172 + 463 + 1_500

    def test_fees_capitalized(self):
        assert base_loan(800_000, 20, 5_000) == 645_000

    def test_lvr(self):
        assert lvr(400_000, 500_000) == pytest.approx(80)

    def test_lvr_zero_property_value(self):
        assert lvr(2_135, 0) == 0.0


class TestComputeLoan:
    def test_800k_scenario(self):
        result = compute_loan(LoanInputs(800_000, 20, 6, 30))
        assert result.deposit_amount == pytest.approx(160_000)
        assert result.stamp_duty == pytest.approx(25_149.941)
        assert result.total_fees == pytest.approx(27_284.941)
        assert result.base_loan == pytest.approx(667_284.941)
        assert result.lvr_pct == pytest.approx(667_284.941 / 8_000)

    def test_lmi_charged_on_base_loan(self):
        result = compute_loan(LoanInputs(800_000, 20, 6, 30))
        # LVR ~83.4% -> 83.01 row, loan under 750k -> fourth column
        assert result.lmi_cost == pytest.approx(result.base_loan * 0.01090)
        assert result.total_loan == pytest.approx(result.base_loan + result.lmi_cost)

    def test_monthly_payment_on_total_loan(self):
        result = compute_loan(LoanInputs(800_000, 20, 6, 30))
        assert result.monthly_payment == pytest.approx(
            monthly_payment(6, 30, result.total_loan)
        )
        assert 4_000 < result.monthly_payment < 4_100

    def test_no_lmi_with_large_deposit(self):
        result = compute_loan(LoanInputs(800_000, 40, 6, 30))
        assert result.lmi_cost == 0.0
        assert result.total_loan == result.base_loan

    def test_derived_payments(self):
        result = compute_loan(LoanInputs())
        assert result.weekly_payment == pytest.approx(result.monthly_payment * 12 / 52)
        assert result.annual_payment == pytest.approx(result.monthly_payment * 12)
        assert result.other_fees == pytest.approx(2_135)

    def test_high_lvr_flag(self):
        result = compute_loan(LoanInputs(500_000, 0, 6, 30))
        assert result.lvr_pct > 95
        assert result.high_lvr
        assert not compute_loan(LoanInputs()).high_lvr

    def test_zero_property_value_is_finite(self):
        result = compute_loan(LoanInputs(0, 20, 6, 30))
        assert result.lvr_pct == 0.0
        assert result.lmi_cost == 0.0
        assert result.base_loan == pytest.approx(2_135)
        assert math.isfinite(result.monthly_payment)

    def test_zero_interest(self):
        result = compute_loan(LoanInputs(800_000, 20, 0, 30))
        assert result.monthly_payment == result.total_loan / 360
