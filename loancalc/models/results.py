from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AmortizationEntry:
    payment_number: int  # 1-based
    payment_date: date
    payment_amount: Decimal  # principal + interest + extra
    principal_payment: Decimal
    interest_payment: Decimal
    extra_payment: Decimal
    remaining_balance: Decimal  # Never negative


@dataclass(frozen=True)
class LoanSummary:
    original_loan_amount: Decimal
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    total_extra_payments: Decimal
    interest_saved: Decimal  # Versus no extra payments; may be negative
    time_saved: str  # "X years, Y months"
    payoff_date: date


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: Decimal  # Regular payment per period, before extras
    total_payments: Decimal
    total_interest: Decimal
    total_amount: Decimal
    payoff_date: date
    amortization_schedule: list[AmortizationEntry] = field(default_factory=list)
    loan_summary: LoanSummary | None = None


@dataclass(frozen=True)
class YearlyScheduleSummary:
    year: int  # Calendar year of the payment dates
    principal: Decimal
    interest: Decimal
    extra: Decimal
    payments: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class LoanComparison:
    scenario: str
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount: Decimal
    payoff_date: date


@dataclass(frozen=True)
class AffordabilityResult:
    max_loan_amount: Decimal
    max_home_price: Decimal
    monthly_payment: Decimal  # Maximum principal + interest
    total_monthly_expenses: Decimal
    remaining_income: Decimal
    debt_to_income_ratio: Decimal  # Existing debts / income, percent
    front_end_ratio: Decimal  # Housing / income, percent
    back_end_ratio: Decimal  # All obligations / income, percent


@dataclass(frozen=True)
class RefinanceResult:
    current_payment: Decimal
    new_payment: Decimal
    monthly_savings: Decimal
    total_savings: Decimal  # Net of closing costs
    break_even_months: Decimal  # Decimal("Infinity") when there are no savings
    total_interest_savings: Decimal

    @property
    def breaks_even(self) -> bool:
        return self.break_even_months.is_finite()
