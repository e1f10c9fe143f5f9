"""Tests for report formatting, the CLI and chart builders."""

import csv
import io

import pytest
import yaml

from dashboard.charts import (
    cost_breakdown_chart,
    holding_breakdown_chart,
    net_cashflow_chart,
    net_position_chart,
    rent_sweep_chart,
)
from dashboard.formatters import loan_dataframe, records_dataframe
from propcalc.amortization import amortization_schedule
from propcalc.cli import main
from propcalc.config import Scenario, dict_to_scenario
from propcalc.costs import compute_loan
from propcalc.output import (
    cost_breakdown,
    fmt,
    full_report,
    per_view,
    projection_table,
    schedule_table,
    to_csv,
    view_factor,
)
from propcalc.params import InvestmentInputs, LoanInputs
from propcalc.position import compute_rental_position
from propcalc.projection import compute_projection
from propcalc.sweep import compute_rent_sweep


@pytest.fixture
def results():
    loan = compute_loan(LoanInputs())
    inv = InvestmentInputs(horizon_years=10)
    return loan, compute_rental_position(loan, inv), compute_projection(loan, inv)


class TestFormatting:
    def test_fmt(self):
        assert fmt(25_149.94) == "$25,150"
        assert fmt(1_250_000) == "$1.25M"

    def test_view_factor(self):
        assert view_factor("annual") == 1
        assert view_factor("monthly") == 12
        assert view_factor("weekly") == 52

    def test_unknown_view(self):
        with pytest.raises(ValueError, match="Unknown view"):
            view_factor("daily")

    def test_per_view(self):
        assert per_view(5_200, "weekly") == 100

    def test_cost_breakdown(self, results):
        loan, _, projection = results
        breakdown = cost_breakdown(loan, projection)
        assert list(breakdown) == ["Interest", "Stamp Duty", "LMI", "Holding Costs", "Other Fees"]
        assert breakdown["Interest"] == projection.total_interest
        assert breakdown["Other Fees"] == pytest.approx(2_135)

    def test_csv(self, results):
        _, _, projection = results
        rows = list(csv.reader(io.StringIO(to_csv(projection.records))))
        assert rows[0][0] == "year"
        assert len(rows) == 11
        assert rows[1][0] == "1"

    def test_report(self, results):
        text = full_report(*results)
        assert "Loan Summary" in text
        assert "Break-even" in text
        assert "Stamp Duty" in text

    def test_schedule_table(self):
        steps = amortization_schedule(120_000, 0, 2)
        lines = schedule_table(steps).splitlines()
        assert len(lines) == 2 + 24
        first = [c.strip() for c in lines[2].split("|")]
        assert first[:3] == ["1", "1", "$5,000"]
        assert lines[-1].split("|")[1].strip() == "2"

    def test_table_views(self, results):
        _, _, projection = results
        monthly = projection_table(projection.records, view="monthly")
        assert monthly.startswith("Flows shown monthly")
        assert len(monthly.splitlines()) == 3 + 10


class TestCli:
    def test_run(self, capsys):
        main(["run"])
        assert "Loan Summary" in capsys.readouterr().out

    def test_run_detailed(self, capsys):
        main(["run", "--detailed", "--view", "weekly"])
        assert "Flows shown weekly" in capsys.readouterr().out

    def test_run_schedule(self, capsys):
        main(["run", "--schedule"])
        out = capsys.readouterr().out
        assert "Principal" in out
        last = out.rstrip().splitlines()[-1]
        assert [c.strip() for c in last.split("|")][:2] == ["360", "30"]

    def test_run_csv(self, capsys):
        main(["run", "--csv"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 31

    def test_sweep(self, capsys):
        main(["sweep", "--rent", "600"])
        out = capsys.readouterr().out
        assert "$450" in out and "$750" in out

    def test_defaults_round_trip(self, capsys):
        main(["defaults"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert dict_to_scenario(data) == Scenario()

    def test_missing_config(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["run", str(tmp_path / "missing.yaml")])
        assert exc.value.code == 1


class TestDashboard:
    def test_rent_sweep_colours(self):
        fig = rent_sweep_chart(compute_rent_sweep(600, 2_600))
        colours = list(fig.data[0].marker.color)
        assert colours[0] == "#ef4444"
        assert colours[-1] == "#10b981"

    def test_cost_breakdown_chart(self, results):
        loan, _, projection = results
        fig = cost_breakdown_chart(cost_breakdown(loan, projection))
        assert len(fig.data[0].values) == 5

    def test_holding_breakdown_stacked(self, results):
        _, _, projection = results
        fig = holding_breakdown_chart(projection.records, view="monthly")
        assert len(fig.data) == 5
        assert fig.data[0].y[0] == pytest.approx(2_000 / 12)

    def test_net_cashflow_chart(self, results):
        _, _, projection = results
        fig = net_cashflow_chart(projection.records, break_even=None)
        assert len(fig.data[0].y) == 10

    def test_net_position_chart(self, results):
        _, _, projection = results
        assert len(net_position_chart(projection.records).data) == 3

    def test_dataframes(self, results):
        loan, _, projection = results
        df = records_dataframe(projection.records, view="weekly")
        assert len(df) == 10
        assert df["Rental Income"].iloc[0] == pytest.approx(600)
        assert "Total Loan" in set(loan_dataframe(loan)["Item"])
