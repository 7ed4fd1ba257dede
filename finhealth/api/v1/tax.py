"""POST /v1/tax/* - Income tax regime endpoints"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from finhealth.api.dependencies import get_request_id
from finhealth.api.v1.schemas import RegimeBreakdownSchema, TaxComparisonResponse, TaxRequest
from finhealth.domain.exceptions import NonFiniteInputError
from finhealth.domain.models import TaxInput
from finhealth.domain.tax import calculate_new_regime_tax, calculate_old_regime_tax, compare_tax_regimes
from finhealth.infrastructure.observability.logging import log_tax_comparison
from finhealth.infrastructure.observability.metrics import record_tax_recommendation

router = APIRouter()


def _to_domain(body: TaxRequest) -> TaxInput:
    return TaxInput(
        annual_income=body.annual_income,
        section_80_deductions=body.section_80_deductions,
        is_salaried=body.is_salaried,
    )


@router.post("/tax/compare", response_model=TaxComparisonResponse)
def compare_regimes(request_body: TaxRequest, request: Request):
    """
    Compare old and new regime liability and recommend the cheaper one.

    Ties favor the old regime.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = compare_tax_regimes(_to_domain(request_body))
    except NonFiniteInputError as e:
        logging.warning(f"Rejected tax input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_tax_recommendation(result.recommended_regime)
    log_tax_comparison(request_id, result.recommended_regime, result.savings, duration_ms)

    return TaxComparisonResponse.model_validate(result)


@router.post("/tax/old-regime", response_model=RegimeBreakdownSchema)
def old_regime(request_body: TaxRequest):
    """Old regime breakdown (standard + section 80 deductions)"""
    try:
        return RegimeBreakdownSchema.model_validate(calculate_old_regime_tax(_to_domain(request_body)))
    except NonFiniteInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/tax/new-regime", response_model=RegimeBreakdownSchema)
def new_regime(request_body: TaxRequest):
    """New regime breakdown (standard deduction only)"""
    try:
        return RegimeBreakdownSchema.model_validate(calculate_new_regime_tax(_to_domain(request_body)))
    except NonFiniteInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
