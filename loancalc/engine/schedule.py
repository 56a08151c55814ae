"""Amortization schedule generation.

Pure functions: dataclass in, list of dataclasses out. No I/O.
"""

import calendar
import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable

from loancalc.config import settings
from loancalc.engine.payments import annuity_payment, calculate_payment_amount, coerce_structure
from loancalc.models.loan import LoanInputs, PaymentFrequency, PaymentStructure
from loancalc.models.results import AmortizationEntry, YearlyScheduleSummary

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

_DAYS_PER_PERIOD = {
    PaymentFrequency.WEEKLY: 7,
    PaymentFrequency.BIWEEKLY: 14,
}

_MONTHS_PER_PERIOD = {
    PaymentFrequency.MONTHLY: 1,
    PaymentFrequency.QUARTERLY: 3,
    PaymentFrequency.ANNUALLY: 12,
}


def add_months(dt: date, months: int) -> date:
    """Shift ``dt`` by whole months, clamping the day to the end of the target month."""
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def next_payment_date(start: date, frequency: PaymentFrequency, periods: int) -> date:
    """Date of the payment ``periods`` periods after ``start``.

    Month-based frequencies are measured from ``start`` so a 31st start date
    returns to the 31st whenever the month has one.
    """
    if frequency in _DAYS_PER_PERIOD:
        return start + timedelta(days=_DAYS_PER_PERIOD[frequency] * periods)
    return add_months(start, _MONTHS_PER_PERIOD[frequency] * periods)


@dataclass(frozen=True)
class _ScheduleContext:
    inputs: LoanInputs
    regular_payment: Decimal
    total_payments: Decimal  # Nominal, may be fractional
    scheduled_periods: int  # Nominal count rounded up; the last regular payment


# Each rule returns (interest, principal) for one period before extra payments.
PeriodRule = Callable[[_ScheduleContext, int, Decimal, Decimal], tuple[Decimal, Decimal]]


def _standard_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    return interest, ctx.regular_payment - interest


def _interest_only_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    if number >= ctx.scheduled_periods:
        # Last scheduled payment retires the loan even if the window covers the term
        return interest, balance

    months = ctx.inputs.interest_only_period_months or 0
    window = Decimal(months) * ctx.inputs.payments_per_year / 12
    if number <= window:
        return interest, ZERO

    # Re-amortize what is left over the remaining scheduled periods
    remaining = ctx.scheduled_periods - number + 1
    payment = annuity_payment(balance, ctx.inputs.period_rate, remaining)
    return interest, payment - interest


def _principal_only_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    return ZERO, ctx.regular_payment


def _balloon_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    if ctx.inputs.balloon_amount and number >= ctx.scheduled_periods:
        # Final scheduled payment carries the balloon
        return interest, balance
    return interest, ctx.regular_payment - interest


def _graduated_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    inputs = ctx.inputs
    payment = ctx.regular_payment
    if inputs.graduation_period_years and inputs.payment_increase_rate:
        step = Decimal(inputs.graduation_period_years) * inputs.payments_per_year
        steps_taken = int((number - 1) // step)
        payment = payment * (1 + inputs.payment_increase_rate / 100) ** steps_taken
    return interest, payment - interest


def _interest_first_split(ctx: _ScheduleContext, number: int, balance: Decimal, interest: Decimal):
    if number <= ctx.total_payments / 2:
        return ctx.regular_payment, ZERO
    return ZERO, ctx.regular_payment


PERIOD_RULES: dict[PaymentStructure, PeriodRule] = {
    PaymentStructure.STANDARD: _standard_split,
    PaymentStructure.INTEREST_ONLY: _interest_only_split,
    PaymentStructure.PRINCIPAL_ONLY: _principal_only_split,
    PaymentStructure.BALLOON: _balloon_split,
    PaymentStructure.GRADUATED: _graduated_split,
    PaymentStructure.INTEREST_FIRST: _interest_first_split,
}


def generate_schedule(inputs: LoanInputs) -> list[AmortizationEntry]:
    """Generate the period-by-period amortization schedule.

    Runs until the balance is paid off or the iteration cap
    (``schedule_cap_multiplier`` times the nominal payment count) is reached.
    Interest-first and graduated loans are not guaranteed to amortize within
    the nominal term, so the cap can leave a balance outstanding.

    Returns an empty list when the term has no payments.
    """
    total_payments = inputs.total_payments
    if total_payments <= 0:
        logger.debug("No payments for a %d-month term", inputs.total_months)
        return []

    structure = coerce_structure(inputs.payment_structure)
    regular_payment = calculate_payment_amount(
        inputs.loan_amount,
        inputs.annual_rate,
        inputs.loan_term_years,
        inputs.loan_term_months,
        inputs.payment_frequency,
        structure,
        balloon_amount=inputs.balloon_amount,
        interest_only_period_months=inputs.interest_only_period_months,
        graduation_period_years=inputs.graduation_period_years,
        payment_increase_rate=inputs.payment_increase_rate,
    )
    ctx = _ScheduleContext(
        inputs=inputs,
        regular_payment=regular_payment,
        total_payments=total_payments,
        scheduled_periods=math.ceil(total_payments),
    )
    rule = PERIOD_RULES[structure]
    cap = total_payments * settings.schedule_cap_multiplier
    tolerance = settings.payoff_tolerance
    period_rate = inputs.period_rate

    schedule: list[AmortizationEntry] = []
    balance = inputs.loan_amount
    number = 1

    while balance > tolerance and number <= cap:
        interest, principal = rule(ctx, number, balance, balance * period_rate)
        # A payment short of the interest due is raised to cover it; balances never grow
        principal = max(principal, ZERO)

        extra = inputs.extra_payment
        if principal + extra > balance:
            extra = max(ZERO, balance - principal)
            principal = balance - extra

        balance -= principal + extra
        if ZERO < balance <= tolerance:
            # Sweep sub-cent dust into this payment
            principal += balance
            balance = ZERO

        schedule.append(AmortizationEntry(
            payment_number=number,
            payment_date=next_payment_date(inputs.start_date, inputs.payment_frequency, number - 1),
            payment_amount=principal + interest + extra,
            principal_payment=principal,
            interest_payment=interest,
            extra_payment=extra,
            remaining_balance=max(balance, ZERO),
        ))
        number += 1

    if balance > tolerance:
        logger.warning(
            "%s schedule hit the %s-payment cap with %s outstanding",
            structure.value, cap, balance.quantize(settings.display_places),
        )
    else:
        logger.debug("%s schedule paid off in %d payments", structure.value, len(schedule))

    return schedule


def yearly_schedule_summary(schedule: list[AmortizationEntry]) -> list[YearlyScheduleSummary]:
    """Aggregate a schedule by calendar year of the payment dates."""
    yearly: list[YearlyScheduleSummary] = []
    if not schedule:
        return yearly

    year = schedule[0].payment_date.year
    principal = interest = extra = payments = ZERO
    ending_balance = schedule[0].remaining_balance

    for entry in schedule:
        if entry.payment_date.year != year:
            yearly.append(YearlyScheduleSummary(year, principal, interest, extra, payments, ending_balance))
            year = entry.payment_date.year
            principal = interest = extra = payments = ZERO

        principal += entry.principal_payment
        interest += entry.interest_payment
        extra += entry.extra_payment
        payments += entry.payment_amount
        ending_balance = entry.remaining_balance

    yearly.append(YearlyScheduleSummary(year, principal, interest, extra, payments, ending_balance))
    return yearly
