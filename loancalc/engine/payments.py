"""Regular payment computation for every supported payment structure.

Pure functions: Decimal in, Decimal out. No I/O.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable

from loancalc.models.loan import PaymentFrequency, PaymentStructure

logger = logging.getLogger(__name__)

GRADUATED_START_FACTOR = Decimal("0.7")  # Graduated loans open at 70% of the standard payment


def coerce_frequency(frequency: PaymentFrequency | str | None) -> PaymentFrequency:
    if isinstance(frequency, PaymentFrequency):
        return frequency
    try:
        return PaymentFrequency(frequency)
    except ValueError:
        logger.debug("Unknown payment frequency %r, using monthly", frequency)
        return PaymentFrequency.MONTHLY


def get_payments_per_year(frequency: PaymentFrequency | str) -> int:
    """Payments per year for a frequency. Unknown values are treated as monthly."""
    return coerce_frequency(frequency).payments_per_year


def coerce_structure(structure: PaymentStructure | str | None) -> PaymentStructure:
    if isinstance(structure, PaymentStructure):
        return structure
    try:
        return PaymentStructure(structure or PaymentStructure.STANDARD.value)
    except ValueError:
        logger.debug("Unknown payment structure %r, using standard", structure)
        return PaymentStructure.STANDARD


def annuity_payment(principal: Decimal, period_rate: Decimal, periods: Decimal | int) -> Decimal:
    """Level payment that retires ``principal`` over ``periods`` at ``period_rate``."""
    if periods <= 0:
        raise ValueError("Number of payments must be positive")
    if period_rate == 0:
        return principal / Decimal(periods)

    # PMT = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + period_rate) ** Decimal(periods)
    return principal * (period_rate * factor) / (factor - 1)


def calculate_monthly_payment(
    principal: Decimal, annual_rate: Decimal, total_payments: Decimal | int
) -> Decimal:
    """Standard amortizing payment on the monthly rate.

    Args:
        principal: Loan amount
        annual_rate: Annual nominal rate in percent (e.g. 6 for 6%)
        total_payments: Number of payments
    """
    if annual_rate == 0:
        if total_payments <= 0:
            raise ValueError("Number of payments must be positive")
        return principal / Decimal(total_payments)
    return annuity_payment(principal, annual_rate / 100 / 12, total_payments)


@dataclass(frozen=True)
class _PaymentTerms:
    principal: Decimal
    annual_rate: Decimal
    total_months: int
    frequency: PaymentFrequency
    balloon_amount: Decimal | None = None
    interest_only_period_months: int | None = None

    @property
    def payments_per_year(self) -> int:
        return self.frequency.payments_per_year

    @property
    def total_payments(self) -> Decimal:
        return Decimal(self.total_months) / 12 * self.payments_per_year


def _standard_payment(terms: _PaymentTerms) -> Decimal:
    if terms.frequency is PaymentFrequency.MONTHLY:
        return calculate_monthly_payment(terms.principal, terms.annual_rate, terms.total_payments)
    # Non-monthly: monthly figure over the term, rescaled to the payment frequency
    monthly = calculate_monthly_payment(terms.principal, terms.annual_rate, terms.total_months)
    return monthly * 12 / terms.payments_per_year


def _interest_only_payment(terms: _PaymentTerms) -> Decimal:
    if terms.interest_only_period_months:
        return terms.principal * terms.annual_rate / 100 / 12
    # The schedule re-amortizes after the window, so only the no-window case needs a full payment
    return calculate_monthly_payment(terms.principal, terms.annual_rate, terms.total_months)


def _principal_only_payment(terms: _PaymentTerms) -> Decimal:
    return terms.principal / terms.total_payments


def _balloon_payment(terms: _PaymentTerms) -> Decimal:
    if not terms.balloon_amount:
        return _standard_payment(terms)
    return _standard_payment(replace(terms, principal=terms.principal - terms.balloon_amount))


def _graduated_payment(terms: _PaymentTerms) -> Decimal:
    return _standard_payment(terms) * GRADUATED_START_FACTOR


def _interest_first_payment(terms: _PaymentTerms) -> Decimal:
    # Interest the standard loan would carry, spread over the first half of the term
    total_interest = _standard_payment(terms) * terms.total_payments - terms.principal
    return total_interest / (terms.total_payments / 2)


REGULAR_PAYMENT_RULES: dict[PaymentStructure, Callable[[_PaymentTerms], Decimal]] = {
    PaymentStructure.STANDARD: _standard_payment,
    PaymentStructure.INTEREST_ONLY: _interest_only_payment,
    PaymentStructure.PRINCIPAL_ONLY: _principal_only_payment,
    PaymentStructure.BALLOON: _balloon_payment,
    PaymentStructure.GRADUATED: _graduated_payment,
    PaymentStructure.INTEREST_FIRST: _interest_first_payment,
}


def calculate_payment_amount(
    principal: Decimal,
    annual_rate: Decimal,
    loan_term_years: int,
    loan_term_months: int,
    payment_frequency: PaymentFrequency | str,
    payment_structure: PaymentStructure | str = PaymentStructure.STANDARD,
    balloon_amount: Decimal | None = None,
    interest_only_period_months: int | None = None,
    graduation_period_years: Decimal | None = None,
    payment_increase_rate: Decimal | None = None,
) -> Decimal:
    """Nominal recurring payment for a loan, before extra payments.

    Graduated loans return the opening payment; the step-ups driven by
    ``graduation_period_years`` and ``payment_increase_rate`` are applied
    period by period in the schedule.
    """
    total_months = loan_term_years * 12 + loan_term_months
    if total_months <= 0:
        raise ValueError("Loan term must be positive")

    terms = _PaymentTerms(
        principal=principal,
        annual_rate=annual_rate,
        total_months=total_months,
        frequency=coerce_frequency(payment_frequency),
        balloon_amount=balloon_amount,
        interest_only_period_months=interest_only_period_months,
    )
    rule = REGULAR_PAYMENT_RULES.get(coerce_structure(payment_structure), _standard_payment)
    return rule(terms)
