"""Financial health scoring engine - weighted 0-100 score and risk tier"""

import logging
from typing import List, Optional, Tuple

from finhealth.domain.models import ScoreBreakdown, ScoringInput, ScoringResult
from finhealth.utils.numbers import ensure_finite, round_half_up

logger = logging.getLogger(__name__)

SAVINGS_WEIGHT = 0.30
BURN_RATE_WEIGHT = 0.20
EMERGENCY_WEIGHT = 0.35
DEBT_WEIGHT = 0.15

# Score ceiling while the emergency fund covers less than 3 months
EMERGENCY_SCORE_CAP = 80

SubScore = Tuple[float, Optional[str]]


def score_savings_ratio(savings_ratio: float) -> SubScore:
    """
    Savings ratio = (income - expenses) / income.

    - >= 40%:  100
    - 20-40%:  50 -> 99
    - 0-20%:   0 -> 49
    - <= 0:    0
    """
    if savings_ratio >= 0.40:
        return 100.0, None
    if savings_ratio >= 0.20:
        return 50 + ((savings_ratio - 0.20) / 0.20) * 49, None
    if savings_ratio > 0:
        return (savings_ratio / 0.20) * 49, "Try to save at least 20% of your income."
    return 0.0, "Expenses exceed income. Reduce spending immediately."


def score_burn_rate(burn_rate: float) -> SubScore:
    """
    Burn rate = expenses / income.

    - <= 70%:  100
    - 70-85%:  99 -> 50
    - 85-100%: 49 -> 0
    - >= 100%: 0
    """
    if burn_rate <= 0.70:
        return 100.0, None
    if burn_rate <= 0.85:
        return 99 - ((burn_rate - 0.70) / 0.15) * 49, None

    suggestion = "High burn rate! Expenses are consuming too much of your income."
    if burn_rate >= 1.0:
        return 0.0, suggestion
    return 49 - ((burn_rate - 0.85) / 0.15) * 49, suggestion


def score_emergency_fund(emergency_months: float) -> SubScore:
    """
    Months of expenses covered by the emergency fund.

    - >= 6:  100
    - 3-6:   50 -> 99
    - 1-3:   20 -> 49
    - < 1:   0 -> 19
    """
    if emergency_months >= 6:
        return 100.0, None
    if emergency_months >= 3:
        return 50 + ((emergency_months - 3) / 3) * 49, None
    if emergency_months >= 1:
        return (
            20 + ((emergency_months - 1) / 2) * 29,
            "Build emergency fund to cover at least 3-6 months.",
        )
    return (
        emergency_months * 19,
        "CRITICAL: Emergency fund is less than 1 month. Prioritize savings.",
    )


def score_debt_ratio(debt_to_income_ratio: float) -> SubScore:
    """
    Total debt / annual income.

    - <= 10%:   100
    - 10-40%:   99 -> 70
    - 40-100%:  69 -> 30
    - > 100%:   29, decaying 10 points per extra 100% of income, floor 0
    """
    if debt_to_income_ratio <= 0.10:
        return 100.0, None
    if debt_to_income_ratio <= 0.40:
        return 99 - ((debt_to_income_ratio - 0.10) / 0.30) * 29, None
    if debt_to_income_ratio <= 1.0:
        return 69 - ((debt_to_income_ratio - 0.40) / 0.60) * 39, None
    return (
        max(0.0, 29 - (debt_to_income_ratio - 1.0) * 10),
        "Total debt is high relative to annual income. Focus on paying down debt.",
    )


def classify_risk(score: int) -> str:
    """80-100 Low, 50-79 Moderate, 0-49 High"""
    if score >= 80:
        return "Low"
    elif score >= 50:
        return "Moderate"
    else:
        return "High"


def calculate_financial_score(scoring_input: ScoringInput) -> ScoringResult:
    """
    Main entry point: weighted financial health score with override rules.

    Scoring weights:
    - 35%: Emergency fund coverage
    - 30%: Savings ratio
    - 20%: Burn rate
    - 15%: Debt to annual income

    Overrides:
    - Emergency fund below 3 months caps the score at 80
    - Emergency fund below 1 month can never be classified "Low" risk;
      the numeric score is left untouched
    """
    ensure_finite(
        monthly_income=scoring_input.monthly_income,
        total_expenses=scoring_input.total_expenses,
        savings=scoring_input.savings,
        emergency_fund=scoring_input.emergency_fund,
        debt=scoring_input.debt,
    )

    monthly_income = scoring_input.monthly_income
    total_expenses = scoring_input.total_expenses

    if monthly_income <= 0:
        return ScoringResult(
            score=0,
            risk_level="High",
            improvement_suggestions=["Income is required to calculate score."],
            breakdown=ScoreBreakdown(savings_score=0, emergency_score=0, debt_score=0, burn_rate_score=0),
        )

    # Caller-supplied savings is ignored so the ratios stay consistent
    calculated_savings = monthly_income - total_expenses

    # Zero expenses would make coverage infinite
    effective_expenses = total_expenses if total_expenses > 0 else 1
    emergency_months = scoring_input.emergency_fund / effective_expenses

    annual_income = monthly_income * 12
    if annual_income > 0:
        debt_to_income_ratio = scoring_input.debt / annual_income
    else:
        debt_to_income_ratio = 100 if scoring_input.debt > 0 else 0

    savings_score, savings_tip = score_savings_ratio(calculated_savings / monthly_income)
    burn_rate_score, burn_rate_tip = score_burn_rate(total_expenses / monthly_income)
    emergency_score, emergency_tip = score_emergency_fund(emergency_months)
    debt_score, debt_tip = score_debt_ratio(debt_to_income_ratio)

    suggestions: List[str] = [
        tip for tip in (savings_tip, burn_rate_tip, emergency_tip, debt_tip) if tip is not None
    ]

    total_score = (
        savings_score * SAVINGS_WEIGHT
        + burn_rate_score * BURN_RATE_WEIGHT
        + emergency_score * EMERGENCY_WEIGHT
        + debt_score * DEBT_WEIGHT
    )

    if emergency_months < 3:
        total_score = min(total_score, EMERGENCY_SCORE_CAP)

    final_score = round_half_up(total_score)
    risk_level = classify_risk(final_score)

    if emergency_months < 1 and risk_level == "Low":
        risk_level = "Moderate"

    logger.debug(
        "Financial score calculated",
        extra={"score": final_score, "risk_level": risk_level, "emergency_months": emergency_months},
    )

    return ScoringResult(
        score=final_score,
        risk_level=risk_level,
        improvement_suggestions=suggestions,
        breakdown=ScoreBreakdown(
            savings_score=round_half_up(savings_score),
            emergency_score=round_half_up(emergency_score),
            debt_score=round_half_up(debt_score),
            burn_rate_score=round_half_up(burn_rate_score),
        ),
    )
