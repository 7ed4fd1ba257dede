"""Risk detection engine - threshold rules over monthly cash flow"""

import logging
from typing import List

from finhealth.domain.models import AlertSummary, FinancialAlert, RiskDetectionInput
from finhealth.utils.numbers import ensure_finite

logger = logging.getLogger(__name__)

BURN_RATE_THRESHOLD = 0.85  # 85% of income
SAVINGS_RATIO_THRESHOLD = 0.20  # 20% of income
SAVINGS_RATIO_CRITICAL = 0.10
EMERGENCY_MONTHS_THRESHOLD = 3  # months of expenses

SEVERITY_ORDER = ("High", "Medium", "Low")


def detect_financial_risks(risk_input: RiskDetectionInput) -> List[FinancialAlert]:
    """
    Evaluate every risk rule and return the alerts that fire, in rule order.

    Rules are independent, so one call may raise several alerts:
    1. High Burn Rate: expenses above 85% of income
    2. Low Savings: savings below 20% of income (High below 10%)
    3. Financial Vulnerability: emergency fund under 3 months (High under 1)
    4. Negative Cash Flow: expenses above income
    5. Critical Financial State: no savings and under 1 month of cover
    """
    ensure_finite(
        monthly_income=risk_input.monthly_income,
        monthly_expenses=risk_input.monthly_expenses,
        monthly_savings=risk_input.monthly_savings,
        emergency_fund=risk_input.emergency_fund,
    )

    monthly_income = risk_input.monthly_income
    monthly_expenses = risk_input.monthly_expenses
    monthly_savings = risk_input.monthly_savings

    if monthly_income <= 0:
        return [
            FinancialAlert(
                type="Invalid Data",
                severity="High",
                message="Income must be greater than zero to perform risk analysis.",
            )
        ]

    alerts: List[FinancialAlert] = []

    expense_ratio = monthly_expenses / monthly_income
    if expense_ratio > BURN_RATE_THRESHOLD:
        alerts.append(
            FinancialAlert(
                type="High Burn Rate",
                severity="High",
                message=(
                    f"Your expenses ({expense_ratio * 100:.1f}% of income) exceed the safe limit of "
                    f"{BURN_RATE_THRESHOLD * 100:g}%. Consider reducing discretionary spending."
                ),
            )
        )

    savings_ratio = monthly_savings / monthly_income
    if savings_ratio < SAVINGS_RATIO_THRESHOLD:
        alerts.append(
            FinancialAlert(
                type="Low Savings",
                severity="High" if savings_ratio < SAVINGS_RATIO_CRITICAL else "Medium",
                message=(
                    f"Your savings rate ({savings_ratio * 100:.1f}%) is below the recommended "
                    f"{SAVINGS_RATIO_THRESHOLD * 100:g}%. Aim to save at least 20% of your income."
                ),
            )
        )

    months_covered = risk_input.emergency_fund / monthly_expenses if monthly_expenses > 0 else 0
    if months_covered < EMERGENCY_MONTHS_THRESHOLD:
        alerts.append(
            FinancialAlert(
                type="Financial Vulnerability",
                severity="High" if months_covered < 1 else "Medium",
                message=(
                    f"Your emergency fund covers only {months_covered:.1f} months of expenses. "
                    f"Build it up to at least {EMERGENCY_MONTHS_THRESHOLD} months for financial security."
                ),
            )
        )

    net_cash_flow = monthly_income - monthly_expenses
    if net_cash_flow < 0:
        alerts.append(
            FinancialAlert(
                type="Negative Cash Flow",
                severity="High",
                message=(
                    f"You are spending more than you earn by ₹{abs(net_cash_flow):.2f} per month. "
                    "This is unsustainable and requires immediate action."
                ),
            )
        )

    if monthly_savings <= 0 and months_covered < 1:
        alerts.append(
            FinancialAlert(
                type="Critical Financial State",
                severity="High",
                message=(
                    "You have no monthly savings and less than 1 month of emergency funds. "
                    "You are at high risk of financial distress."
                ),
            )
        )

    logger.debug("Risk rules evaluated", extra={"alert_count": len(alerts)})
    return alerts


def get_overall_risk_level(alerts: List[FinancialAlert]) -> str:
    """Highest severity among the alerts, or "None" when there are none"""
    if not alerts:
        return "None"

    severities = {alert.severity for alert in alerts}
    for severity in SEVERITY_ORDER:
        if severity in severities:
            return severity
    return "Low"


def get_alert_summary(alerts: List[FinancialAlert]) -> AlertSummary:
    """Count alerts by severity"""
    return AlertSummary(
        high=sum(1 for a in alerts if a.severity == "High"),
        medium=sum(1 for a in alerts if a.severity == "Medium"),
        low=sum(1 for a in alerts if a.severity == "Low"),
    )
