"""POST /v1/risks - Risk alert endpoint"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from finhealth.api.dependencies import get_request_id
from finhealth.api.v1.schemas import AlertSchema, AlertSummarySchema, RiskRequest, RiskResponse
from finhealth.domain.exceptions import NonFiniteInputError
from finhealth.domain.models import RiskDetectionInput
from finhealth.domain.risk import detect_financial_risks, get_alert_summary, get_overall_risk_level
from finhealth.infrastructure.observability.logging import log_risk_scan
from finhealth.infrastructure.observability.metrics import record_alerts

router = APIRouter()


@router.post("/risks", response_model=RiskResponse)
def scan_risks(request_body: RiskRequest, request: Request):
    """Run every risk rule and return the alerts that fire, in rule order"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        alerts = detect_financial_risks(
            RiskDetectionInput(
                monthly_income=request_body.monthly_income,
                monthly_expenses=request_body.monthly_expenses,
                monthly_savings=request_body.monthly_savings,
                emergency_fund=request_body.emergency_fund,
            )
        )
    except NonFiniteInputError as e:
        logging.warning(f"Rejected risk input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    overall = get_overall_risk_level(alerts)
    duration_ms = (time.time() - start_time) * 1000
    record_alerts(alerts)
    log_risk_scan(request_id, len(alerts), overall, duration_ms)

    return RiskResponse(
        alerts=[AlertSchema.model_validate(a) for a in alerts],
        overall_risk_level=overall,
        summary=AlertSummarySchema.model_validate(get_alert_summary(alerts)),
    )
