"""Maximum affordable loan from income, existing debts and a debt-to-income ceiling.

Pure functions. No I/O.
"""

from decimal import Decimal

from loancalc.models.loan import AffordabilityInputs
from loancalc.models.results import AffordabilityResult

ZERO = Decimal("0")


def max_principal(payment: Decimal, annual_rate: Decimal, total_months: int) -> Decimal:
    """Invert the annuity formula: the principal a monthly ``payment`` can carry."""
    if total_months <= 0:
        return ZERO
    r = annual_rate / 100 / 12
    if r == 0:
        return payment * total_months

    # P = PMT * [(1+r)^n - 1] / [r(1+r)^n]
    factor = (1 + r) ** total_months
    return payment * (factor - 1) / (r * factor)


def calculate_loan_affordability(inputs: AffordabilityInputs) -> AffordabilityResult:
    """Largest loan and home price that keep total obligations within the DTI ceiling.

    When existing debts and fixed housing costs already use up the ceiling,
    returns a zeroed result (``max_loan_amount == 0``) carrying the current
    debt-to-income diagnostics.
    """
    income = inputs.monthly_income
    if income <= 0:
        raise ValueError("Monthly income must be greater than 0")

    max_total_obligations = income * inputs.debt_to_income_ratio / 100
    max_housing_payment = max_total_obligations - inputs.monthly_debts
    max_loan_payment = max_housing_payment - inputs.fixed_housing_costs
    current_dti = inputs.monthly_debts / income * 100

    if max_loan_payment <= 0:
        return AffordabilityResult(
            max_loan_amount=ZERO,
            max_home_price=inputs.down_payment,
            monthly_payment=ZERO,
            total_monthly_expenses=inputs.monthly_debts + inputs.fixed_housing_costs,
            remaining_income=income - max_total_obligations,
            debt_to_income_ratio=current_dti,
            front_end_ratio=ZERO,
            back_end_ratio=current_dti,
        )

    max_loan = max_principal(max_loan_payment, inputs.annual_rate, inputs.loan_term_years * 12)
    housing_total = max_loan_payment + inputs.fixed_housing_costs
    total_expenses = inputs.monthly_debts + housing_total

    return AffordabilityResult(
        max_loan_amount=max_loan,
        max_home_price=max_loan + inputs.down_payment,
        monthly_payment=max_loan_payment,
        total_monthly_expenses=total_expenses,
        remaining_income=income - total_expenses,
        debt_to_income_ratio=current_dti,
        front_end_ratio=housing_total / income * 100,
        back_end_ratio=total_expenses / income * 100,
    )
