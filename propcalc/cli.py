"""CLI entry point for the property investment calculator."""

import argparse
import logging
import sys

import yaml

from propcalc.amortization import amortization_schedule
from propcalc.config import INVESTMENT_BOUNDS, Scenario, load_config, safe_value, scenario_to_dict
from propcalc.costs import compute_loan
from propcalc.output import VIEW_FACTORS, full_report, projection_table, schedule_table, to_csv
from propcalc.position import compute_rental_position
from propcalc.projection import compute_projection
from propcalc.sweep import compute_rent_sweep, format_sweep


def _load(path: str | None) -> Scenario:
    if not path:
        return Scenario()
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: could not load {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def cmd_run(args: argparse.Namespace) -> None:
    """Compute the loan and term projection for a scenario."""
    scenario = _load(args.config)
    loan = compute_loan(scenario.loan)
    projection = compute_projection(loan, scenario.investment)

    if args.csv:
        print(to_csv(projection.records), end="")
        return

    position = compute_rental_position(loan, scenario.investment)
    print(full_report(loan, position, projection))
    if args.detailed:
        print()
        print(projection_table(projection.records, view=args.view))
    if args.schedule:
        inputs = scenario.loan
        steps = amortization_schedule(
            loan.total_loan, inputs.interest_rate_pct, inputs.loan_term_years
        )
        print()
        print(schedule_table(steps))


def cmd_sweep(args: argparse.Namespace) -> None:
    """Show net monthly position across a band of weekly rents."""
    scenario = _load(args.config)
    loan = compute_loan(scenario.loan)
    position = compute_rental_position(loan, scenario.investment)
    lo, hi = INVESTMENT_BOUNDS["target_weekly_rent"]
    target = safe_value(args.rent, lo, hi, scenario.investment.target_weekly_rent)
    results = compute_rent_sweep(target, position.total_monthly_costs)
    print(format_sweep(results, position.total_monthly_costs))


def cmd_defaults(args: argparse.Namespace) -> None:
    """Print default parameters as YAML."""
    d = scenario_to_dict(Scenario())
    print(yaml.safe_dump(d, default_flow_style=False, sort_keys=False), end="")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Mortgage and property investment calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  propcalc run                           # Run with defaults
  propcalc run config.yaml               # Run with custom config
  propcalc run config.yaml --detailed    # Year-by-year breakdown
  propcalc run config.yaml --detailed --view monthly
  propcalc run config.yaml --csv         # CSV output for charting
  propcalc run config.yaml --schedule    # Monthly repayment schedule
  propcalc sweep config.yaml --rent 650  # Rent sensitivity
  propcalc defaults                      # Print default config
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # run
    run_parser = subparsers.add_parser("run", help="Compute loan costs and term projection")
    run_parser.add_argument("config", nargs="?", help="YAML/JSON config file")
    run_parser.add_argument("--detailed", action="store_true", help="Show year-by-year breakdown")
    run_parser.add_argument("--csv", action="store_true", help="Output as CSV")
    run_parser.add_argument(
        "--schedule", action="store_true", help="Show the month-by-month repayment schedule"
    )
    run_parser.add_argument(
        "--view",
        choices=list(VIEW_FACTORS),
        default="annual",
        help="Period for cashflow columns in the detailed table",
    )

    # sweep
    sweep_parser = subparsers.add_parser("sweep", help="Rent sensitivity analysis")
    sweep_parser.add_argument("config", nargs="?", help="YAML/JSON config file")
    sweep_parser.add_argument("--rent", type=float, help="Target weekly rent (overrides config)")

    # defaults
    subparsers.add_parser("defaults", help="Print default parameters")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        cmd_run(args)
    elif args.command == "sweep":
        cmd_sweep(args)
    elif args.command == "defaults":
        cmd_defaults(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
