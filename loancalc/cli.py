"""Terminal report for a single loan.

Usage:
    python -m loancalc.cli 300000 6 30
    python -m loancalc.cli 300000 6 30 --extra 200 --schedule
    python -m loancalc.cli 250000 5.5 10 --structure balloon --balloon 100000 --frequency biweekly
"""

import argparse
import sys

from loancalc.engine.loan import calculate_loan
from loancalc.engine.schedule import yearly_schedule_summary
from loancalc.engine.validation import parse_loan_form
from loancalc.models.loan import LoanInputs, PaymentFrequency, PaymentStructure
from loancalc.models.results import LoanResult


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(inputs: LoanInputs, result: LoanResult) -> None:
    s = result.loan_summary
    _header("Loan Summary")
    print(f"  Loan amount:      {_dollar(s.original_loan_amount)}")
    print(f"  Rate / term:      {inputs.annual_rate}% / {inputs.loan_term_years}y {inputs.loan_term_months}m")
    print(f"  Structure:        {inputs.payment_structure.value} ({inputs.payment_frequency.label})")
    print(f"  Regular payment:  {_dollar(s.monthly_payment)}")
    print(f"  Total paid:       {_dollar(s.total_payments)}")
    print(f"  Total interest:   {_dollar(s.total_interest)}")
    if s.total_extra_payments:
        print(f"  Extra payments:   {_dollar(s.total_extra_payments)}")
        print(f"  Interest saved:   {_dollar(s.interest_saved)}")
        print(f"  Time saved:       {s.time_saved}")
    print(f"  Payments:         {len(result.amortization_schedule)}")
    print(f"  Payoff date:      {s.payoff_date.isoformat()}")


def print_yearly_schedule(result: LoanResult) -> None:
    _header("Yearly Schedule")
    print(f"  {'Year':>6} {'Principal':>14} {'Interest':>14} {'Extra':>12} {'Balance':>16}")
    for y in yearly_schedule_summary(result.amortization_schedule):
        print(
            f"  {y.year:>6} {_dollar(y.principal):>14} {_dollar(y.interest):>14}"
            f" {_dollar(y.extra):>12} {_dollar(y.ending_balance):>16}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan amortization report")
    parser.add_argument("amount", help="Loan amount")
    parser.add_argument("rate", help="Annual interest rate in percent")
    parser.add_argument("years", help="Term in years")
    parser.add_argument("--months", default="", help="Additional term months")
    parser.add_argument(
        "--frequency", choices=[f.value for f in PaymentFrequency], default="monthly"
    )
    parser.add_argument(
        "--structure", choices=[s.value for s in PaymentStructure], default="standard"
    )
    parser.add_argument("--extra", default="0", help="Extra payment per period")
    parser.add_argument("--start", default="", help="First payment date (YYYY-MM-DD), default today")
    parser.add_argument("--balloon", default="", help="Balloon amount")
    parser.add_argument("--io-months", default="", help="Interest-only period in months")
    parser.add_argument("--graduation-years", default="", help="Years between payment increases")
    parser.add_argument("--increase-rate", default="", help="Payment increase per step, percent")
    parser.add_argument("--schedule", action="store_true", help="Print the yearly schedule")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    form = {
        "loan_amount": args.amount,
        "annual_rate": args.rate,
        "loan_term_years": args.years,
        "loan_term_months": args.months,
        "payment_frequency": args.frequency,
        "extra_payment": args.extra,
        "start_date": args.start,
        "payment_structure": args.structure,
        "balloon_amount": args.balloon,
        "interest_only_period_months": args.io_months,
        "graduation_period_years": args.graduation_years,
        "payment_increase_rate": args.increase_rate,
    }

    try:
        inputs = parse_loan_form(form)
        result = calculate_loan(inputs)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(inputs, result)
    if args.schedule:
        print_yearly_schedule(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
