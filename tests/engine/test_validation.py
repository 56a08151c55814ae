from datetime import date
from decimal import Decimal

import pytest

from loancalc.engine.validation import LoanInputError, parse_decimal, parse_loan_form
from loancalc.models.loan import PaymentFrequency, PaymentStructure


class TestParseDecimal:
    def test_thousands_separator(self):
        assert parse_decimal("300,000") == Decimal("300000")

    def test_blank_and_garbage(self):
        assert parse_decimal("") is None
        assert parse_decimal("   ") is None
        assert parse_decimal(None) is None
        assert parse_decimal("abc") is None
        assert parse_decimal("NaN") is None


class TestParseLoanForm:
    def test_valid_form(self, loan_form):
        inputs = parse_loan_form(loan_form)
        assert inputs.loan_amount == Decimal("300000")
        assert inputs.annual_rate == Decimal("6")
        assert inputs.loan_term_years == 30
        assert inputs.loan_term_months == 0
        assert inputs.payment_frequency is PaymentFrequency.MONTHLY
        assert inputs.payment_structure is PaymentStructure.STANDARD
        assert inputs.start_date == date(2025, 1, 1)
        assert inputs.balloon_amount is None
        assert inputs.interest_only_period_months is None

    def test_fractional_years_fold_into_months(self, loan_form):
        inputs = parse_loan_form({**loan_form, "loan_term_years": "2.5"})
        assert inputs.loan_term_years == 2
        assert inputs.loan_term_months == 6

    def test_months_only_term(self, loan_form):
        inputs = parse_loan_form({**loan_form, "loan_term_years": "", "loan_term_months": "18"})
        assert inputs.total_months == 18

    def test_blank_start_date_uses_today(self, loan_form):
        inputs = parse_loan_form({**loan_form, "start_date": ""}, today=date(2026, 3, 1))
        assert inputs.start_date == date(2026, 3, 1)

    def test_structure_options(self, loan_form):
        inputs = parse_loan_form({
            **loan_form,
            "payment_structure": "graduated",
            "graduation_period_years": "5",
            "payment_increase_rate": "7.5",
        })
        assert inputs.payment_structure is PaymentStructure.GRADUATED
        assert inputs.graduation_period_years == Decimal("5")
        assert inputs.payment_increase_rate == Decimal("7.5")

    @pytest.mark.parametrize("field,value,message", [
        ("loan_amount", "0", "valid loan amount greater than 0"),
        ("loan_amount", "", "valid loan amount greater than 0"),
        ("annual_rate", "-1", "valid annual interest rate"),
        ("annual_rate", "six", "valid annual interest rate"),
        ("extra_payment", "-5", "valid extra payment amount"),
        ("payment_frequency", "fortnightly", "valid payment frequency"),
        ("payment_structure", "mystery", "valid payment structure"),
        ("start_date", "01/02/2025", "valid start date"),
        ("balloon_amount", "-1", "valid balloon amount"),
        ("interest_only_period_months", "1.5", "valid interest-only period"),
    ])
    def test_invalid_fields(self, loan_form, field, value, message):
        with pytest.raises(LoanInputError, match=message):
            parse_loan_form({**loan_form, field: value})

    def test_missing_term(self, loan_form):
        with pytest.raises(LoanInputError, match="valid loan term"):
            parse_loan_form({**loan_form, "loan_term_years": "", "loan_term_months": ""})

    def test_zero_term(self, loan_form):
        with pytest.raises(LoanInputError, match="valid loan term"):
            parse_loan_form({**loan_form, "loan_term_years": "0", "loan_term_months": "0"})

    def test_balloon_must_be_below_loan(self, loan_form):
        with pytest.raises(LoanInputError, match="less than the loan amount"):
            parse_loan_form({**loan_form, "balloon_amount": "300000"})

    def test_input_error_is_value_error(self, loan_form):
        with pytest.raises(ValueError):
            parse_loan_form({**loan_form, "loan_amount": "-10"})

    def test_interest_only_period_must_be_shorter_than_term(self, loan_form):
        form = {**loan_form, "loan_term_years": "5", "payment_structure": "interest_only"}
        with pytest.raises(LoanInputError, match="shorter than the loan term"):
            parse_loan_form({**form, "interest_only_period_months": "60"})
        inputs = parse_loan_form({**form, "interest_only_period_months": "59"})
        assert inputs.interest_only_period_months == 59

    def test_interest_only_period_ignored_for_other_structures(self, loan_form):
        inputs = parse_loan_form({**loan_form, "loan_term_years": "5", "interest_only_period_months": "120"})
        assert inputs.payment_structure is PaymentStructure.STANDARD
