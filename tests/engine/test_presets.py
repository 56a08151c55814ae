from datetime import date
from decimal import Decimal

from loancalc.engine.loan import calculate_loan
from loancalc.models.loan import PaymentStructure
from loancalc.models.presets import (
    LOAN_TYPE_OPTIONS,
    PAYMENT_STRUCTURE_OPTIONS,
    PRESET_LOANS,
    LoanType,
    preset_inputs,
)


class TestReferenceData:
    def test_every_loan_type_described(self):
        assert set(LOAN_TYPE_OPTIONS) == set(LoanType)

    def test_every_structure_described(self):
        assert set(PAYMENT_STRUCTURE_OPTIONS) == set(PaymentStructure)
        assert PAYMENT_STRUCTURE_OPTIONS[PaymentStructure.BALLOON].requires_balloon_amount
        assert PAYMENT_STRUCTURE_OPTIONS[PaymentStructure.GRADUATED].requires_graduation


class TestPresets:
    def test_preset_inputs(self):
        mortgage = PRESET_LOANS[0]
        inputs = preset_inputs(mortgage, date(2025, 1, 1))
        assert inputs.loan_amount == Decimal("300000")
        assert inputs.annual_rate == Decimal("6.5")
        assert inputs.total_months == 360
        assert inputs.extra_payment == 0

    def test_every_preset_calculates(self):
        for preset in PRESET_LOANS:
            result = calculate_loan(preset_inputs(preset, date(2025, 1, 1)))
            assert len(result.amortization_schedule) == preset.years * 12 + preset.months
