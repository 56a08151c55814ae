"""Loan calculation routes: schedule, yearly breakdown, scenario comparison, presets."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, HTTPException

from loancalc.api.schemas import (
    AmortizationEntryResponse,
    CompareRequest,
    CompareResponse,
    LoanComparisonResponse,
    LoanRequest,
    LoanResultResponse,
    LoanSummaryResponse,
    LoanTypeResponse,
    PaymentFrequencyResponse,
    PaymentStructureResponse,
    PresetLoanResponse,
    PresetsResponse,
    YearlyScheduleResponse,
)
from loancalc.config import settings
from loancalc.engine.loan import calculate_loan, compare_loan_scenarios, comparison_rows
from loancalc.engine.schedule import generate_schedule, yearly_schedule_summary
from loancalc.models.loan import LoanInputs, PaymentFrequency
from loancalc.models.presets import LOAN_TYPE_OPTIONS, PAYMENT_STRUCTURE_OPTIONS, PRESET_LOANS
from loancalc.models.results import LoanResult

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def money(value: Decimal) -> Decimal:
    return value.quantize(settings.display_places, ROUND_HALF_UP)


def build_inputs(req: LoanRequest) -> LoanInputs:
    return LoanInputs(
        loan_amount=req.loan_amount,
        annual_rate=req.annual_rate,
        loan_term_years=req.loan_term_years,
        loan_term_months=req.loan_term_months,
        payment_frequency=req.payment_frequency,
        extra_payment=req.extra_payment,
        start_date=req.start_date or date.today(),
        payment_structure=req.payment_structure,
        balloon_amount=req.balloon_amount,
        interest_only_period_months=req.interest_only_period_months,
        graduation_period_years=req.graduation_period_years,
        payment_increase_rate=req.payment_increase_rate,
    )


def _result_to_response(result: LoanResult) -> LoanResultResponse:
    """Convert engine LoanResult to API response, rounded for display."""
    schedule = [
        AmortizationEntryResponse(
            payment_number=e.payment_number,
            payment_date=e.payment_date,
            payment_amount=money(e.payment_amount),
            principal_payment=money(e.principal_payment),
            interest_payment=money(e.interest_payment),
            extra_payment=money(e.extra_payment),
            remaining_balance=money(e.remaining_balance),
        )
        for e in result.amortization_schedule
    ]
    s = result.loan_summary
    summary = LoanSummaryResponse(
        original_loan_amount=money(s.original_loan_amount),
        monthly_payment=money(s.monthly_payment),
        total_payments=money(s.total_payments),
        total_interest=money(s.total_interest),
        total_extra_payments=money(s.total_extra_payments),
        interest_saved=money(s.interest_saved),
        time_saved=s.time_saved,
        payoff_date=s.payoff_date,
    )
    return LoanResultResponse(
        monthly_payment=money(result.monthly_payment),
        total_payments=money(result.total_payments),
        total_interest=money(result.total_interest),
        total_amount=money(result.total_amount),
        payoff_date=result.payoff_date,
        amortization_schedule=schedule,
        loan_summary=summary,
    )


@router.post("/calculate", response_model=LoanResultResponse)
async def calculate(req: LoanRequest):
    """Full amortization schedule and summary for one loan."""
    try:
        result = calculate_loan(build_inputs(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _result_to_response(result)


@router.post("/schedule/yearly", response_model=list[YearlyScheduleResponse])
async def yearly_schedule(req: LoanRequest):
    """Schedule aggregated by calendar year."""
    try:
        schedule = generate_schedule(build_inputs(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not schedule:
        raise HTTPException(status_code=400, detail="Unable to generate amortization schedule")

    return [
        YearlyScheduleResponse(
            year=y.year,
            principal=money(y.principal),
            interest=money(y.interest),
            extra=money(y.extra),
            payments=money(y.payments),
            ending_balance=money(y.ending_balance),
        )
        for y in yearly_schedule_summary(schedule)
    ]


@router.post("/compare", response_model=CompareResponse)
async def compare(req: CompareRequest):
    """Side-by-side results for several loan scenarios."""
    try:
        results = compare_loan_scenarios([build_inputs(s.loan) for s in req.scenarios])
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    rows = comparison_rows([s.label for s in req.scenarios], results)

    return CompareResponse(
        results=[_result_to_response(r) for r in results],
        comparison=[
            LoanComparisonResponse(
                scenario=row.scenario,
                monthly_payment=money(row.monthly_payment),
                total_interest=money(row.total_interest),
                total_amount=money(row.total_amount),
                payoff_date=row.payoff_date,
            )
            for row in rows
        ],
    )


@router.get("/presets", response_model=PresetsResponse)
async def presets():
    """Quick-fill loans and the option lists the calculator form offers."""
    return PresetsResponse(
        presets=[
            PresetLoanResponse(
                label=p.label,
                amount=p.amount,
                rate=p.rate,
                years=p.years,
                months=p.months,
                loan_type=p.loan_type.value,
            )
            for p in PRESET_LOANS
        ],
        loan_types=[
            LoanTypeResponse(
                value=o.loan_type.value,
                label=o.label,
                description=o.description,
                typical_rate=o.typical_rate,
                typical_term_years=o.typical_term_years,
            )
            for o in LOAN_TYPE_OPTIONS.values()
        ],
        payment_structures=[
            PaymentStructureResponse(
                value=o.structure.value,
                label=o.label,
                description=o.description,
                requires_balloon_amount=o.requires_balloon_amount,
                requires_interest_only_period=o.requires_interest_only_period,
                requires_graduation=o.requires_graduation,
            )
            for o in PAYMENT_STRUCTURE_OPTIONS.values()
        ],
        payment_frequencies=[
            PaymentFrequencyResponse(value=f.value, label=f.label, payments_per_year=f.payments_per_year)
            for f in PaymentFrequency
        ],
    )
