"""Static reference data for the loan calculator: loan types, payment structures, presets."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from loancalc.models.loan import LoanInputs, PaymentStructure


class LoanType(Enum):
    MORTGAGE = "mortgage"
    AUTO = "auto"
    PERSONAL = "personal"
    STUDENT = "student"
    BUSINESS = "business"


@dataclass(frozen=True)
class LoanTypeOption:
    loan_type: LoanType
    label: str
    description: str
    typical_rate: Decimal  # Percent
    typical_term_years: int


@dataclass(frozen=True)
class PaymentStructureOption:
    structure: PaymentStructure
    label: str
    description: str
    requires_balloon_amount: bool = False
    requires_interest_only_period: bool = False
    requires_graduation: bool = False


@dataclass(frozen=True)
class PresetLoan:
    label: str
    amount: Decimal
    rate: Decimal
    years: int
    months: int
    loan_type: LoanType


LOAN_TYPE_OPTIONS: dict[LoanType, LoanTypeOption] = {
    LoanType.MORTGAGE: LoanTypeOption(
        LoanType.MORTGAGE, "Mortgage", "Home loan with long-term repayment", Decimal("6.5"), 30
    ),
    LoanType.AUTO: LoanTypeOption(
        LoanType.AUTO, "Auto Loan", "Vehicle financing with moderate terms", Decimal("7.0"), 5
    ),
    LoanType.PERSONAL: LoanTypeOption(
        LoanType.PERSONAL, "Personal Loan", "Unsecured loan for various purposes", Decimal("12.0"), 3
    ),
    LoanType.STUDENT: LoanTypeOption(
        LoanType.STUDENT, "Student Loan", "Education financing with flexible terms", Decimal("5.5"), 10
    ),
    LoanType.BUSINESS: LoanTypeOption(
        LoanType.BUSINESS, "Business Loan", "Commercial financing for business needs", Decimal("8.0"), 7
    ),
}

PAYMENT_STRUCTURE_OPTIONS: dict[PaymentStructure, PaymentStructureOption] = {
    PaymentStructure.STANDARD: PaymentStructureOption(
        PaymentStructure.STANDARD,
        "Standard (Principal + Interest)",
        "Regular payments with principal and interest",
    ),
    PaymentStructure.INTEREST_ONLY: PaymentStructureOption(
        PaymentStructure.INTEREST_ONLY,
        "Interest Only",
        "Pay only interest for a specified period, then principal + interest",
        requires_interest_only_period=True,
    ),
    PaymentStructure.PRINCIPAL_ONLY: PaymentStructureOption(
        PaymentStructure.PRINCIPAL_ONLY,
        "Principal Only",
        "Pay only principal (0% interest rate scenarios)",
    ),
    PaymentStructure.BALLOON: PaymentStructureOption(
        PaymentStructure.BALLOON,
        "Balloon Payment",
        "Lower payments with large final payment",
        requires_balloon_amount=True,
    ),
    PaymentStructure.GRADUATED: PaymentStructureOption(
        PaymentStructure.GRADUATED,
        "Graduated Payment",
        "Payments start low and increase over time",
        requires_graduation=True,
    ),
    PaymentStructure.INTEREST_FIRST: PaymentStructureOption(
        PaymentStructure.INTEREST_FIRST,
        "Interest First, Then Principal",
        "Pay all interest first, then all principal",
    ),
}

PRESET_LOANS: list[PresetLoan] = [
    PresetLoan("30-Year Mortgage", Decimal("300000"), Decimal("6.5"), 30, 0, LoanType.MORTGAGE),
    PresetLoan("15-Year Mortgage", Decimal("300000"), Decimal("6.0"), 15, 0, LoanType.MORTGAGE),
    PresetLoan("Auto Loan", Decimal("35000"), Decimal("5.5"), 5, 0, LoanType.AUTO),
    PresetLoan("Personal Loan", Decimal("15000"), Decimal("8.5"), 3, 0, LoanType.PERSONAL),
]


def preset_inputs(preset: PresetLoan, start_date: date) -> LoanInputs:
    """Monthly, standard-structure inputs with no extra payment."""
    return LoanInputs(
        loan_amount=preset.amount,
        annual_rate=preset.rate,
        loan_term_years=preset.years,
        loan_term_months=preset.months,
        start_date=start_date,
    )
