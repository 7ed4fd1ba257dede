"""POST /v1/score - Financial health score endpoint"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from finhealth.api.dependencies import get_request_id
from finhealth.api.v1.schemas import ScoreRequest, ScoreResponse
from finhealth.domain.exceptions import NonFiniteInputError
from finhealth.domain.models import ScoringInput
from finhealth.domain.scoring import calculate_financial_score
from finhealth.infrastructure.observability.logging import log_score
from finhealth.infrastructure.observability.metrics import record_score

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def create_score(request_body: ScoreRequest, request: Request):
    """
    Score monthly finances from 0 to 100 and classify risk.

    Returns:
        Score, risk tier, ordered improvement suggestions and sub-score breakdown
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_financial_score(
            ScoringInput(
                monthly_income=request_body.monthly_income,
                total_expenses=request_body.total_expenses,
                savings=request_body.savings,
                emergency_fund=request_body.emergency_fund,
                debt=request_body.debt,
            )
        )
    except NonFiniteInputError as e:
        logging.warning(f"Rejected scoring input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_score(result.score, result.risk_level)
    log_score(request_id, result.score, result.risk_level, duration_ms)

    return ScoreResponse.model_validate(result)
