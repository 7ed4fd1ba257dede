"""Transaction aggregation and dashboard composition"""

import logging
from typing import Dict, List, Optional

from finhealth.domain.exceptions import InvalidTransactionDataError
from finhealth.domain.models import (
    DashboardSnapshot,
    MonthlyMetrics,
    RiskDetectionInput,
    ScoringInput,
    ScoringResult,
    TaxInput,
    Transaction,
)
from finhealth.domain.risk import detect_financial_risks, get_alert_summary, get_overall_risk_level
from finhealth.domain.scoring import calculate_financial_score
from finhealth.domain.tax import compare_tax_regimes
from finhealth.utils.date_utils import in_month, month_range, previous_month
from finhealth.utils.numbers import ensure_finite

logger = logging.getLogger(__name__)

TRANSACTION_TYPES = ("income", "expense")


def _check(transactions: List[Transaction]) -> None:
    for txn in transactions:
        if txn.type not in TRANSACTION_TYPES:
            raise InvalidTransactionDataError(f"Unknown transaction type: {txn.type!r}")
        ensure_finite(amount=txn.amount)


def summarize_month(transactions: List[Transaction], year: int, month: int) -> MonthlyMetrics:
    """
    Aggregate one calendar month of transactions.

    Requirements:
    - Income and expenses summed separately, savings = income - expenses
    - Expense totals per category, in first-seen order
    """
    _check(transactions)
    month_txns = [t for t in transactions if in_month(t.date, year, month)]

    income = sum(t.amount for t in month_txns if t.type == "income")
    expenses = sum(t.amount for t in month_txns if t.type == "expense")

    category_breakdown: Dict[str, float] = {}
    for txn in month_txns:
        if txn.type == "expense":
            category_breakdown[txn.category] = category_breakdown.get(txn.category, 0) + txn.amount

    return MonthlyMetrics(
        year=year,
        month=month,
        income=income,
        expenses=expenses,
        savings=income - expenses,
        transaction_count=len(month_txns),
        category_breakdown=category_breakdown,
    )


def monthly_trend(
    transactions: List[Transaction],
    end_year: int,
    end_month: int,
    months: int = 6,
) -> List[MonthlyMetrics]:
    """Monthly metrics for the trailing window ending at the given month, oldest first"""
    return [summarize_month(transactions, y, m) for y, m in month_range(end_year, end_month, months)]


def _score_month(metrics: MonthlyMetrics, emergency_fund: float, debt: float) -> ScoringResult:
    # An empty month scores against income 1 rather than hitting the zero-income guard
    return calculate_financial_score(
        ScoringInput(
            monthly_income=metrics.income or 1,
            total_expenses=metrics.expenses,
            savings=metrics.savings,
            emergency_fund=emergency_fund,
            debt=debt,
        )
    )


def _annualized_income(transactions: List[Transaction], current: MonthlyMetrics) -> float:
    if current.income:
        return current.income * 12
    all_income = sum(t.amount for t in transactions if t.type == "income")
    return all_income / max(len(transactions), 1) * 12


def build_dashboard(
    transactions: List[Transaction],
    emergency_fund: float,
    debt: float,
    year: int,
    month: int,
    section_80_deductions: float = 150_000,
    is_salaried: bool = True,
    trend_months: int = 6,
) -> DashboardSnapshot:
    """
    Main entry point: run all three engines on one month of transactions.

    Flow:
    1. Aggregate the current and previous month
    2. Score both months (previous only when it has transactions)
    3. Compare tax regimes on annualized income
    4. Detect risks for the current month and summarize them
    """
    current = summarize_month(transactions, year, month)
    prev_year, prev_month = previous_month(year, month)
    previous = summarize_month(transactions, prev_year, prev_month)

    score = _score_month(current, emergency_fund, debt)
    previous_score: Optional[ScoringResult] = None
    if previous.transaction_count > 0:
        previous_score = _score_month(previous, emergency_fund, debt)

    tax_comparison = compare_tax_regimes(
        TaxInput(
            annual_income=_annualized_income(transactions, current),
            section_80_deductions=section_80_deductions,
            is_salaried=is_salaried,
        )
    )

    alerts = detect_financial_risks(
        RiskDetectionInput(
            monthly_income=current.income or 1,
            monthly_expenses=current.expenses,
            monthly_savings=current.savings,
            emergency_fund=emergency_fund,
        )
    )

    logger.debug(
        "Dashboard built",
        extra={"year": year, "month": month, "transaction_count": current.transaction_count},
    )

    return DashboardSnapshot(
        metrics=current,
        score=score,
        previous_score=previous_score,
        tax_comparison=tax_comparison,
        alerts=alerts,
        overall_risk_level=get_overall_risk_level(alerts),
        alert_summary=get_alert_summary(alerts),
        trend=monthly_trend(transactions, year, month, trend_months),
    )
