"""Refinance comparison: payment change, break-even and interest cost delta."""

from decimal import Decimal

from loancalc.engine.payments import calculate_monthly_payment
from loancalc.models.results import RefinanceResult


def calculate_refinance_savings(
    current_balance: Decimal,
    current_rate: Decimal,
    current_remaining_term_months: int,
    new_rate: Decimal,
    new_term_months: int,
    closing_costs: Decimal = Decimal("0"),
) -> RefinanceResult:
    """Compare keeping the current loan against refinancing the balance.

    Rates are annual percentages. ``break_even_months`` is
    ``Decimal("Infinity")`` when the new payment saves nothing.
    """
    current_payment = calculate_monthly_payment(
        current_balance, current_rate, current_remaining_term_months
    )
    new_payment = calculate_monthly_payment(current_balance, new_rate, new_term_months)

    monthly_savings = current_payment - new_payment
    total_savings = monthly_savings * new_term_months - closing_costs
    if monthly_savings > 0:
        break_even = closing_costs / monthly_savings
    else:
        break_even = Decimal("Infinity")

    current_interest = current_payment * current_remaining_term_months - current_balance
    # Closing costs count as cost of borrowing on the new loan
    new_interest = new_payment * new_term_months - current_balance + closing_costs

    return RefinanceResult(
        current_payment=current_payment,
        new_payment=new_payment,
        monthly_savings=monthly_savings,
        total_savings=total_savings,
        break_even_months=break_even,
        total_interest_savings=current_interest - new_interest,
    )
