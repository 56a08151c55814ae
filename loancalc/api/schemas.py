"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from loancalc.models.loan import PaymentFrequency, PaymentStructure


# ---- Request schemas ----

class LoanRequest(BaseModel):
    loan_amount: Decimal = Field(..., gt=0, description="Principal borrowed")
    annual_rate: Decimal = Field(..., ge=0, description="Annual nominal rate in percent")
    loan_term_years: int = Field(..., ge=0)
    loan_term_months: int = Field(0, ge=0, lt=12)
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    extra_payment: Decimal = Field(Decimal("0"), ge=0, description="Added to every payment")
    start_date: date | None = Field(None, description="First payment date; defaults to today")
    payment_structure: PaymentStructure = PaymentStructure.STANDARD

    # Structure-specific
    balloon_amount: Decimal | None = Field(None, ge=0)
    interest_only_period_months: int | None = Field(None, ge=0)
    graduation_period_years: Decimal | None = Field(None, gt=0)
    payment_increase_rate: Decimal | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _interest_only_window_within_term(self):
        if (
            self.payment_structure is PaymentStructure.INTEREST_ONLY
            and self.interest_only_period_months is not None
            and self.interest_only_period_months >= self.loan_term_years * 12 + self.loan_term_months
        ):
            raise ValueError("Interest-only period must be shorter than the loan term")
        return self


class ScenarioRequest(BaseModel):
    label: str
    loan: LoanRequest


class CompareRequest(BaseModel):
    scenarios: list[ScenarioRequest] = Field(..., min_length=1)


class AffordabilityRequest(BaseModel):
    monthly_income: Decimal = Field(..., gt=0)
    monthly_debts: Decimal = Field(Decimal("0"), ge=0)
    down_payment: Decimal = Field(Decimal("0"), ge=0)
    annual_rate: Decimal = Field(..., ge=0)
    loan_term_years: int = Field(30, gt=0)
    property_tax: Decimal = Field(Decimal("0"), ge=0)
    insurance: Decimal = Field(Decimal("0"), ge=0)
    pmi: Decimal = Field(Decimal("0"), ge=0)
    hoa_fees: Decimal = Field(Decimal("0"), ge=0)
    debt_to_income_ratio: Decimal = Field(Decimal("36"), gt=0, le=100)


class RefinanceRequest(BaseModel):
    current_balance: Decimal = Field(..., gt=0)
    current_rate: Decimal = Field(..., ge=0)
    current_remaining_term_months: int = Field(..., gt=0)
    new_rate: Decimal = Field(..., ge=0)
    new_term_months: int = Field(..., gt=0)
    closing_costs: Decimal = Field(Decimal("0"), ge=0)


# ---- Response schemas ----

class AmortizationEntryResponse(BaseModel):
    payment_number: int
    payment_date: date
    payment_amount: Decimal
    principal_payment: Decimal
    interest_payment: Decimal
    extra_payment: Decimal
    remaining_balance: Decimal


class LoanSummaryResponse(BaseModel):
    original_loan_amount: Decimal
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    total_extra_payments: Decimal
    interest_saved: Decimal
    time_saved: str
    payoff_date: date


class LoanResultResponse(BaseModel):
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    total_amount: Decimal
    payoff_date: date
    amortization_schedule: list[AmortizationEntryResponse]
    loan_summary: LoanSummaryResponse


class YearlyScheduleResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    extra: Decimal
    payments: Decimal
    ending_balance: Decimal


class LoanComparisonResponse(BaseModel):
    scenario: str
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount: Decimal
    payoff_date: date


class CompareResponse(BaseModel):
    results: list[LoanResultResponse]
    comparison: list[LoanComparisonResponse]


class AffordabilityResponse(BaseModel):
    max_loan_amount: Decimal
    max_home_price: Decimal
    monthly_payment: Decimal
    total_monthly_expenses: Decimal
    remaining_income: Decimal
    debt_to_income_ratio: Decimal
    front_end_ratio: Decimal
    back_end_ratio: Decimal


class RefinanceResponse(BaseModel):
    current_payment: Decimal
    new_payment: Decimal
    monthly_savings: Decimal
    total_savings: Decimal
    break_even_months: Decimal | None = Field(None, description="Null when the refinance never breaks even")
    total_interest_savings: Decimal


class PresetLoanResponse(BaseModel):
    label: str
    amount: Decimal
    rate: Decimal
    years: int
    months: int
    loan_type: str


class LoanTypeResponse(BaseModel):
    value: str
    label: str
    description: str
    typical_rate: Decimal
    typical_term_years: int


class PaymentStructureResponse(BaseModel):
    value: str
    label: str
    description: str
    requires_balloon_amount: bool = False
    requires_interest_only_period: bool = False
    requires_graduation: bool = False


class PaymentFrequencyResponse(BaseModel):
    value: str
    label: str
    payments_per_year: int


class PresetsResponse(BaseModel):
    presets: list[PresetLoanResponse]
    loan_types: list[LoanTypeResponse]
    payment_structures: list[PaymentStructureResponse]
    payment_frequencies: list[PaymentFrequencyResponse]
