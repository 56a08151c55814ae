from dataclasses import replace
from decimal import Decimal

import pytest

from loancalc.engine.affordability import calculate_loan_affordability, max_principal
from loancalc.engine.payments import calculate_monthly_payment

TOLERANCE = Decimal("0.000001")


class TestMaxPrincipal:
    def test_inverts_annuity(self):
        principal = max_principal(Decimal("2700"), Decimal("6"), 360)
        payment = calculate_monthly_payment(principal, Decimal("6"), 360)
        assert abs(payment - Decimal("2700")) < TOLERANCE

    def test_zero_rate(self):
        assert max_principal(Decimal("1000"), Decimal("0"), 360) == Decimal("360000")

    def test_zero_term(self):
        assert max_principal(Decimal("1000"), Decimal("6"), 0) == 0


class TestAffordability:
    def test_payment_capacity(self, household):
        result = calculate_loan_affordability(household)
        # 36% of 10000 = 3600, less 500 debts, less 400 tax + insurance
        assert result.monthly_payment == Decimal("2700")
        assert result.max_loan_amount.quantize(Decimal("1")) == Decimal("450337")
        assert result.max_home_price == result.max_loan_amount + Decimal("60000")

    def test_ratios(self, household):
        result = calculate_loan_affordability(household)
        assert result.debt_to_income_ratio == Decimal("5")
        assert result.front_end_ratio == Decimal("31")
        assert result.back_end_ratio == Decimal("36")
        assert result.total_monthly_expenses == Decimal("3600")
        assert result.remaining_income == Decimal("6400")

    def test_over_ratio_returns_zeroed_result(self, household):
        result = calculate_loan_affordability(replace(household, monthly_debts=Decimal("4000")))
        assert result.max_loan_amount == 0
        assert result.monthly_payment == 0
        assert result.max_home_price == Decimal("60000")
        assert result.front_end_ratio == 0
        assert result.debt_to_income_ratio == Decimal("40")
        assert result.back_end_ratio == Decimal("40")
        assert result.total_monthly_expenses == Decimal("4400")
        assert result.remaining_income == Decimal("6400")

    def test_fixed_costs_alone_exhaust_capacity(self, household):
        result = calculate_loan_affordability(replace(household, hoa_fees=Decimal("2700")))
        assert result.max_loan_amount == 0

    def test_higher_rate_lowers_max_loan(self, household):
        low = calculate_loan_affordability(household)
        high = calculate_loan_affordability(replace(household, annual_rate=Decimal("8")))
        assert high.max_loan_amount < low.max_loan_amount

    def test_zero_income_rejected(self, household):
        with pytest.raises(ValueError, match="income"):
            calculate_loan_affordability(replace(household, monthly_income=Decimal("0")))
