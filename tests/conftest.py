"""Canonical test fixtures used across engine and API tests.

Fixture: $300K loan, 6% annual rate, 30-year term, monthly payments,
first payment Jan 1 2025.
"""

from datetime import date
from decimal import Decimal

import pytest

from loancalc.models.loan import AffordabilityInputs, LoanInputs


@pytest.fixture
def standard_loan() -> LoanInputs:
    """$300K 30-year fixed, no extra payments."""
    return LoanInputs(
        loan_amount=Decimal("300000"),
        annual_rate=Decimal("6"),
        loan_term_years=30,
        loan_term_months=0,
        start_date=date(2025, 1, 1),
    )


@pytest.fixture
def loan_form() -> dict[str, str]:
    """Calculator form fields as the browser submits them."""
    return {
        "loan_amount": "300,000",
        "annual_rate": "6",
        "loan_term_years": "30",
        "loan_term_months": "",
        "payment_frequency": "monthly",
        "extra_payment": "0",
        "start_date": "2025-01-01",
        "payment_structure": "standard",
        "balloon_amount": "",
        "interest_only_period_months": "",
        "graduation_period_years": "",
        "payment_increase_rate": "",
    }


@pytest.fixture
def household() -> AffordabilityInputs:
    """$10K/month income, $500 other debts, 36% DTI ceiling."""
    return AffordabilityInputs(
        monthly_income=Decimal("10000"),
        monthly_debts=Decimal("500"),
        down_payment=Decimal("60000"),
        annual_rate=Decimal("6"),
        loan_term_years=30,
        property_tax=Decimal("300"),
        insurance=Decimal("100"),
        debt_to_income_ratio=Decimal("36"),
    )
