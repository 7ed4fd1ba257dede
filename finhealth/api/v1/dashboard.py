"""POST /v1/dashboard - All engines composed over a month of transactions"""

import logging
import time
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from finhealth.api.dependencies import get_request_id, get_settings
from finhealth.api.v1.schemas import DashboardRequest, DashboardResponse
from finhealth.config import Settings
from finhealth.domain.aggregation import build_dashboard
from finhealth.domain.exceptions import DomainException
from finhealth.domain.models import Transaction
from finhealth.infrastructure.observability.logging import log_risk_scan, log_score, log_tax_comparison
from finhealth.infrastructure.observability.metrics import record_alerts, record_score, record_tax_recommendation

router = APIRouter()


@router.post("/dashboard", response_model=DashboardResponse)
def create_dashboard(
    request_body: DashboardRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Build the dashboard snapshot for one month.

    Flow:
    1. Aggregate current/previous month and the trailing trend
    2. Score the month, compare tax regimes, detect risks
    3. Record metrics and return everything side by side
    """
    start_time = time.time()
    request_id = get_request_id(request)

    today = date.today()
    year = request_body.year or today.year
    month = request_body.month or today.month
    debt = request_body.debt if request_body.debt is not None else settings.default_debt
    deductions = request_body.section_80_deductions
    if deductions is None:
        deductions = settings.default_section_80_deductions

    transactions = [
        Transaction(
            amount=t.amount,
            type=t.type,
            category=t.category,
            description=t.description,
            date=t.date,
        )
        for t in request_body.transactions
    ]

    try:
        snapshot = build_dashboard(
            transactions,
            emergency_fund=request_body.emergency_fund,
            debt=debt,
            year=year,
            month=month,
            section_80_deductions=deductions,
            is_salaried=request_body.is_salaried,
            trend_months=settings.trend_months,
        )
    except DomainException as e:
        logging.warning(f"Rejected dashboard input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_score(snapshot.score.score, snapshot.score.risk_level)
    record_tax_recommendation(snapshot.tax_comparison.recommended_regime)
    record_alerts(snapshot.alerts)
    log_score(request_id, snapshot.score.score, snapshot.score.risk_level, duration_ms)
    log_tax_comparison(
        request_id,
        snapshot.tax_comparison.recommended_regime,
        snapshot.tax_comparison.savings,
        duration_ms,
    )
    log_risk_scan(request_id, len(snapshot.alerts), snapshot.overall_risk_level, duration_ms)

    return DashboardResponse.model_validate(snapshot)
