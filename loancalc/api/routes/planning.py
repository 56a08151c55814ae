"""Affordability and refinance routes."""

from decimal import Decimal

from fastapi import APIRouter, HTTPException

from loancalc.api.routes.loans import money
from loancalc.api.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    RefinanceRequest,
    RefinanceResponse,
)
from loancalc.engine.affordability import calculate_loan_affordability
from loancalc.engine.refinance import calculate_refinance_savings
from loancalc.models.loan import AffordabilityInputs

router = APIRouter(prefix="/api/v1/loans", tags=["planning"])


@router.post("/affordability", response_model=AffordabilityResponse)
async def affordability(req: AffordabilityRequest):
    """Maximum loan and home price within a debt-to-income ceiling."""
    inputs = AffordabilityInputs(**req.model_dump())
    try:
        result = calculate_loan_affordability(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AffordabilityResponse(
        max_loan_amount=money(result.max_loan_amount),
        max_home_price=money(result.max_home_price),
        monthly_payment=money(result.monthly_payment),
        total_monthly_expenses=money(result.total_monthly_expenses),
        remaining_income=money(result.remaining_income),
        debt_to_income_ratio=money(result.debt_to_income_ratio),
        front_end_ratio=money(result.front_end_ratio),
        back_end_ratio=money(result.back_end_ratio),
    )


@router.post("/refinance", response_model=RefinanceResponse)
async def refinance(req: RefinanceRequest):
    """Current loan versus a refinance of the same balance."""
    try:
        result = calculate_refinance_savings(
            current_balance=req.current_balance,
            current_rate=req.current_rate,
            current_remaining_term_months=req.current_remaining_term_months,
            new_rate=req.new_rate,
            new_term_months=req.new_term_months,
            closing_costs=req.closing_costs,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    break_even: Decimal | None = None
    if result.breaks_even:
        break_even = result.break_even_months.quantize(Decimal("0.1"))

    return RefinanceResponse(
        current_payment=money(result.current_payment),
        new_payment=money(result.new_payment),
        monthly_savings=money(result.monthly_savings),
        total_savings=money(result.total_savings),
        break_even_months=break_even,
        total_interest_savings=money(result.total_interest_savings),
    )
