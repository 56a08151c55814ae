from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentFrequency(Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @property
    def payments_per_year(self) -> int:
        return _PAYMENTS_PER_YEAR[self]

    @property
    def label(self) -> str:
        return _FREQUENCY_LABELS[self]


_PAYMENTS_PER_YEAR = {
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.BIWEEKLY: 26,
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.ANNUALLY: 1,
}

_FREQUENCY_LABELS = {
    PaymentFrequency.WEEKLY: "Weekly",
    PaymentFrequency.BIWEEKLY: "Bi-weekly",
    PaymentFrequency.MONTHLY: "Monthly",
    PaymentFrequency.QUARTERLY: "Quarterly",
    PaymentFrequency.ANNUALLY: "Annually",
}


class PaymentStructure(Enum):
    STANDARD = "standard"
    INTEREST_ONLY = "interest_only"
    PRINCIPAL_ONLY = "principal_only"
    BALLOON = "balloon"
    GRADUATED = "graduated"
    INTEREST_FIRST = "interest_first"


@dataclass(frozen=True)
class LoanInputs:
    loan_amount: Decimal
    annual_rate: Decimal  # Percent, e.g. Decimal("6") for 6%
    loan_term_years: int
    loan_term_months: int = 0
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    extra_payment: Decimal = Decimal("0")  # Added to every period
    start_date: date = field(default_factory=date.today)
    payment_structure: PaymentStructure = PaymentStructure.STANDARD

    # Structure-specific
    balloon_amount: Decimal | None = None
    interest_only_period_months: int | None = None
    graduation_period_years: Decimal | None = None
    payment_increase_rate: Decimal | None = None  # Percent per graduation step

    @property
    def total_months(self) -> int:
        return self.loan_term_years * 12 + self.loan_term_months

    @property
    def payments_per_year(self) -> int:
        return self.payment_frequency.payments_per_year

    @property
    def total_payments(self) -> Decimal:
        """Nominal number of payments over the term. Fractional for odd terms."""
        return Decimal(self.total_months) / 12 * self.payments_per_year

    @property
    def period_rate(self) -> Decimal:
        return self.annual_rate / 100 / self.payments_per_year


@dataclass(frozen=True)
class AffordabilityInputs:
    monthly_income: Decimal  # Gross
    monthly_debts: Decimal  # Non-housing obligations
    down_payment: Decimal
    annual_rate: Decimal  # Percent
    loan_term_years: int
    property_tax: Decimal = Decimal("0")  # Monthly
    insurance: Decimal = Decimal("0")  # Monthly
    pmi: Decimal = Decimal("0")  # Monthly
    hoa_fees: Decimal = Decimal("0")  # Monthly
    debt_to_income_ratio: Decimal = Decimal("36")  # Percent ceiling

    @property
    def fixed_housing_costs(self) -> Decimal:
        return self.property_tax + self.insurance + self.pmi + self.hoa_fees
