"""Tests for repayment maths."""

import pytest
from propcalc.amortization import (
    amortization_schedule,
    amortize_year,
    monthly_payment,
    monthly_rate,
    step_one_period,
)


class TestMonthlyPayment:
    def test_known_value(self):
        # $640,000 at 6.2% over 30 years is ~$3,920/month
        pmt = monthly_payment(6.2, 30, 640_000)
        assert 3_900 < pmt < 3_950

    def test_zero_rate_is_straight_line(self):
        assert monthly_payment(0, 30, 360_000) == 1_000
        assert monthly_payment(0, 25, 100_000) == 100_000 / 300

    def test_higher_rate_means_higher_payment(self):
        assert monthly_payment(8, 30, 500_000) > monthly_payment(4, 30, 500_000)

    def test_shorter_term_means_higher_payment(self):
        assert monthly_payment(6, 15, 500_000) > monthly_payment(6, 30, 500_000)


class TestStepOnePeriod:
    def test_split(self):
        step = step_one_period(1_000, 0.01, 50)
        assert step.interest == pytest.approx(10)
        assert step.principal == pytest.approx(40)
        assert step.balance == pytest.approx(960)

    def test_balance_clamped_at_zero(self):
        step = step_one_period(30, 0.01, 50)
        assert step.balance == 0.0
        # principal is the full payment less interest even when it overshoots
        assert step.principal == pytest.approx(49.7)


class TestAmortizeYear:
    def test_principal_plus_interest_equals_payments(self):
        rate = monthly_rate(6.2)
        pmt = monthly_payment(6.2, 30, 640_000)
        year = amortize_year(640_000, rate, pmt)
        assert year.principal + year.interest == pytest.approx(pmt * 12)
        assert year.balance == pytest.approx(640_000 - year.principal)

    def test_balance_decreases(self):
        rate = monthly_rate(6.2)
        pmt = monthly_payment(6.2, 30, 640_000)
        assert amortize_year(640_000, rate, pmt).balance < 640_000


class TestSchedule:
    def test_full_amortization(self):
        schedule = amortization_schedule(640_000, 6.2, 30)
        assert len(schedule) == 360
        assert schedule[-1].balance == pytest.approx(0, abs=0.01)

    def test_balance_non_increasing(self):
        schedule = amortization_schedule(400_000, 5.5, 25)
        balances = [s.balance for s in schedule]
        for prev, curr in zip(balances, balances[1:]):
            assert curr <= prev
        assert min(balances) >= 0

    def test_zero_rate_schedule(self):
        schedule = amortization_schedule(120_000, 0, 10)
        assert all(s.interest == 0 for s in schedule)
        assert schedule[-1].balance == pytest.approx(0, abs=1e-6)
