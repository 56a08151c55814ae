"""Parse and validate raw loan-calculator form fields into LoanInputs.

Form values arrive as strings. Blank optional fields mean "not set";
messages on LoanInputError are meant to be shown to the user as-is.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation

from loancalc.models.loan import LoanInputs, PaymentFrequency, PaymentStructure


class LoanInputError(ValueError):
    """A form field failed validation."""


def parse_decimal(value: str | None) -> Decimal | None:
    """Parse a numeric form string, ignoring thousands separators.

    Returns None for blank or unparseable input.
    """
    if value is None:
        return None
    cleaned = str(value).replace(",", "").strip()
    if not cleaned:
        return None
    try:
        parsed = Decimal(cleaned)
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def _optional_non_negative(form: Mapping[str, str], field: str, label: str) -> Decimal | None:
    raw = form.get(field)
    if raw is None or not str(raw).strip():
        return None
    value = parse_decimal(raw)
    if value is None or value < 0:
        raise LoanInputError(f"Please enter a valid {label}")
    return value


def parse_loan_form(form: Mapping[str, str], today: date | None = None) -> LoanInputs:
    """Build LoanInputs from calculator form fields.

    Raises:
        LoanInputError: on the first invalid field.
    """
    loan_amount = parse_decimal(form.get("loan_amount"))
    annual_rate = parse_decimal(form.get("annual_rate"))
    term_years = parse_decimal(form.get("loan_term_years"))
    term_months = parse_decimal(form.get("loan_term_months"))
    extra_payment = parse_decimal(form.get("extra_payment") or "0")

    if loan_amount is None or loan_amount <= 0:
        raise LoanInputError("Please enter a valid loan amount greater than 0")

    if annual_rate is None or annual_rate < 0:
        raise LoanInputError("Please enter a valid annual interest rate")

    years_ok = term_years is not None and term_years >= 0
    months_ok = term_months is not None and term_months > 0
    if not years_ok and not months_ok:
        raise LoanInputError("Please enter a valid loan term")

    # Fractional years fold into months; the combined term must be whole months
    total_months = (term_years if years_ok else 0) * 12 + (term_months if months_ok else 0)
    if total_months <= 0 or total_months != total_months.to_integral_value():
        raise LoanInputError("Please enter a valid loan term")
    years, months = divmod(int(total_months), 12)

    if extra_payment is None or extra_payment < 0:
        raise LoanInputError("Please enter a valid extra payment amount")

    try:
        frequency = PaymentFrequency(form.get("payment_frequency") or "monthly")
    except ValueError:
        raise LoanInputError("Please select a valid payment frequency")

    try:
        structure = PaymentStructure(form.get("payment_structure") or "standard")
    except ValueError:
        raise LoanInputError("Please select a valid payment structure")

    raw_start = (form.get("start_date") or "").strip()
    if raw_start:
        try:
            start_date = date.fromisoformat(raw_start)
        except ValueError:
            raise LoanInputError("Please enter a valid start date")
    else:
        start_date = today or date.today()

    balloon_amount = _optional_non_negative(form, "balloon_amount", "balloon amount")
    if balloon_amount is not None and balloon_amount >= loan_amount:
        raise LoanInputError("Balloon amount must be less than the loan amount")

    io_months = _optional_non_negative(form, "interest_only_period_months", "interest-only period")
    if io_months is not None and io_months != io_months.to_integral_value():
        raise LoanInputError("Please enter a valid interest-only period")
    if structure is PaymentStructure.INTEREST_ONLY and io_months is not None and io_months >= total_months:
        raise LoanInputError("Interest-only period must be shorter than the loan term")

    return LoanInputs(
        loan_amount=loan_amount,
        annual_rate=annual_rate,
        loan_term_years=years,
        loan_term_months=months,
        payment_frequency=frequency,
        extra_payment=extra_payment,
        start_date=start_date,
        payment_structure=structure,
        balloon_amount=balloon_amount,
        interest_only_period_months=int(io_months) if io_months is not None else None,
        graduation_period_years=_optional_non_negative(
            form, "graduation_period_years", "graduation period"
        ),
        payment_increase_rate=_optional_non_negative(
            form, "payment_increase_rate", "payment increase rate"
        ),
    )
