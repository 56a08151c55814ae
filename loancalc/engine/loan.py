"""Loan analysis: schedule totals, savings versus a no-extra-payment baseline, scenario comparison.

Pure computation. No I/O. LoanInputs in, LoanResult out.
"""

import calendar
import logging
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal

from loancalc.engine.payments import calculate_payment_amount
from loancalc.engine.schedule import generate_schedule
from loancalc.models.loan import LoanInputs
from loancalc.models.results import AmortizationEntry, LoanComparison, LoanResult, LoanSummary

logger = logging.getLogger(__name__)


class ScheduleGenerationError(ValueError):
    """No amortization schedule could be produced for the inputs."""


@dataclass(frozen=True)
class _ScheduleTotals:
    total_payments: Decimal
    total_interest: Decimal
    total_extra_payments: Decimal
    payoff_date: date


def _totals(schedule: list[AmortizationEntry]) -> _ScheduleTotals:
    return _ScheduleTotals(
        total_payments=sum((e.payment_amount for e in schedule), Decimal("0")),
        total_interest=sum((e.interest_payment for e in schedule), Decimal("0")),
        total_extra_payments=sum((e.extra_payment for e in schedule), Decimal("0")),
        payoff_date=schedule[-1].payment_date,
    )


def _is_month_end(d: date) -> bool:
    return d.day == calendar.monthrange(d.year, d.month)[1]


def months_between(earlier: date, later: date) -> int:
    """Whole calendar months from ``earlier`` to ``later``. Negative if reversed.

    Payment dates are clamped to the end of short months, so a month-end
    date counts as reaching any later day-of-month: Jan 31 to Feb 28 is one
    month.
    """
    months = (later.year - earlier.year) * 12 + later.month - earlier.month
    if months > 0 and later.day < earlier.day and not _is_month_end(later):
        months -= 1
    elif months < 0 and later.day > earlier.day and not _is_month_end(earlier):
        months += 1
    return months


def format_time_saved(months: int) -> str:
    if months <= 0:
        return "0 months"
    return f"{months // 12} years, {months % 12} months"


def calculate_loan(inputs: LoanInputs) -> LoanResult:
    """Run a full loan analysis.

    The baseline used for ``interest_saved`` and ``time_saved`` is the same
    loan with ``extra_payment`` forced to zero.

    Raises:
        ScheduleGenerationError: if the inputs produce no payments.
    """
    schedule = generate_schedule(inputs)
    if not schedule:
        raise ScheduleGenerationError("Unable to generate amortization schedule")

    monthly_payment = calculate_payment_amount(
        inputs.loan_amount,
        inputs.annual_rate,
        inputs.loan_term_years,
        inputs.loan_term_months,
        inputs.payment_frequency,
        inputs.payment_structure,
        balloon_amount=inputs.balloon_amount,
        interest_only_period_months=inputs.interest_only_period_months,
        graduation_period_years=inputs.graduation_period_years,
        payment_increase_rate=inputs.payment_increase_rate,
    )
    actual = _totals(schedule)

    if inputs.extra_payment:
        baseline = _totals(generate_schedule(replace(inputs, extra_payment=Decimal("0"))))
    else:
        baseline = actual

    interest_saved = baseline.total_interest - actual.total_interest
    months_saved = months_between(actual.payoff_date, baseline.payoff_date)

    summary = LoanSummary(
        original_loan_amount=inputs.loan_amount,
        monthly_payment=monthly_payment,
        total_payments=actual.total_payments,
        total_interest=actual.total_interest,
        total_extra_payments=actual.total_extra_payments,
        interest_saved=interest_saved,
        time_saved=format_time_saved(months_saved),
        payoff_date=actual.payoff_date,
    )
    logger.debug(
        "Loan of %s paid off %s after %d payments",
        inputs.loan_amount, actual.payoff_date, len(schedule),
    )

    return LoanResult(
        monthly_payment=monthly_payment,
        total_payments=actual.total_payments,
        total_interest=actual.total_interest,
        total_amount=actual.total_payments,
        payoff_date=actual.payoff_date,
        amortization_schedule=schedule,
        loan_summary=summary,
    )


def compare_loan_scenarios(scenarios: list[LoanInputs]) -> list[LoanResult]:
    return [calculate_loan(scenario) for scenario in scenarios]


def comparison_row(label: str, result: LoanResult) -> LoanComparison:
    return LoanComparison(
        scenario=label,
        monthly_payment=result.monthly_payment,
        total_interest=result.total_interest,
        total_amount=result.total_amount,
        payoff_date=result.payoff_date,
    )


def comparison_rows(labels: list[str], results: list[LoanResult]) -> list[LoanComparison]:
    """One headline row per labelled result, in input order."""
    if len(labels) != len(results):
        raise ValueError("Every scenario needs exactly one label")
    return [comparison_row(label, result) for label, result in zip(labels, results)]
