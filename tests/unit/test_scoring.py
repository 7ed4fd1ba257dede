"""Unit tests for financial health scoring logic"""

import pytest
from finhealth.domain import scoring
from finhealth.domain.exceptions import NonFiniteInputError
from finhealth.domain.models import ScoreBreakdown, ScoringInput
from finhealth.domain.scoring import (
    calculate_financial_score,
    classify_risk,
    score_burn_rate,
    score_debt_ratio,
    score_emergency_fund,
    score_savings_ratio,
)


def make_input(**overrides) -> ScoringInput:
    values = dict(
        monthly_income=100_000,
        total_expenses=60_000,
        savings=40_000,
        emergency_fund=400_000,
        debt=100_000,
    )
    values.update(overrides)
    return ScoringInput(**values)


def test_strong_finances_score_full_marks():
    """40% savings, 60% burn, 6.7 months of cover, 8% debt ratio"""
    result = calculate_financial_score(make_input())

    assert result.score == 100
    assert result.risk_level == "Low"
    assert result.improvement_suggestions == []
    assert result.breakdown == ScoreBreakdown(
        savings_score=100, emergency_score=100, debt_score=100, burn_rate_score=100
    )


@pytest.mark.parametrize("income", [0, -5_000])
def test_no_income_short_circuits(income):
    result = calculate_financial_score(make_input(monthly_income=income))

    assert result.score == 0
    assert result.risk_level == "High"
    assert result.improvement_suggestions == ["Income is required to calculate score."]
    assert result.breakdown == ScoreBreakdown(0, 0, 0, 0)


def test_savings_curve_breakpoints():
    assert score_savings_ratio(0.40) == (100.0, None)
    assert score_savings_ratio(0.20)[0] == pytest.approx(50)
    assert score_savings_ratio(0.30)[0] == pytest.approx(74.5)
    assert score_savings_ratio(0.10) == (pytest.approx(24.5), "Try to save at least 20% of your income.")
    assert score_savings_ratio(0) == (0.0, "Expenses exceed income. Reduce spending immediately.")
    assert score_savings_ratio(-0.5)[0] == 0


def test_burn_rate_curve_breakpoints():
    assert score_burn_rate(0.70) == (100.0, None)
    assert score_burn_rate(0.85)[0] == pytest.approx(50)
    assert score_burn_rate(0.85)[1] is None

    score, tip = score_burn_rate(0.90)
    assert score == pytest.approx(49 - (0.05 / 0.15) * 49)
    assert tip == "High burn rate! Expenses are consuming too much of your income."

    assert score_burn_rate(1.0)[0] == 0
    assert score_burn_rate(1.5)[0] == 0


def test_emergency_fund_curve_breakpoints():
    assert score_emergency_fund(6) == (100.0, None)
    assert score_emergency_fund(3) == (50, None)
    assert score_emergency_fund(4.5)[0] == pytest.approx(74.5)
    assert score_emergency_fund(1) == (20, "Build emergency fund to cover at least 3-6 months.")
    assert score_emergency_fund(0.5) == (
        9.5,
        "CRITICAL: Emergency fund is less than 1 month. Prioritize savings.",
    )
    assert score_emergency_fund(0)[0] == 0


def test_debt_curve_breakpoints():
    assert score_debt_ratio(0.10) == (100.0, None)
    assert score_debt_ratio(0.40)[0] == pytest.approx(70)
    assert score_debt_ratio(0.70)[0] == pytest.approx(49.5)
    assert score_debt_ratio(1.0)[0] == pytest.approx(30)

    score, tip = score_debt_ratio(2.0)
    assert score == pytest.approx(19)
    assert tip == "Total debt is high relative to annual income. Focus on paying down debt."

    assert score_debt_ratio(10.0)[0] == 0


def test_classify_risk_thresholds():
    assert classify_risk(100) == "Low"
    assert classify_risk(80) == "Low"
    assert classify_risk(79) == "Moderate"
    assert classify_risk(50) == "Moderate"
    assert classify_risk(49) == "High"
    assert classify_risk(0) == "High"


def test_thin_emergency_fund_caps_score_at_80():
    """Weighted total of 81.6 is capped because cover is under 3 months"""
    result = calculate_financial_score(
        make_input(total_expenses=10_000, emergency_fund=29_000, debt=0)
    )

    assert result.score == 80
    assert result.risk_level == "Low"
    assert result.breakdown.emergency_score == 48
    assert result.improvement_suggestions == ["Build emergency fund to cover at least 3-6 months."]


@pytest.mark.parametrize("emergency_fund", [0, 5_000, 15_000, 25_000, 29_999])
def test_score_never_exceeds_80_below_three_months(emergency_fund):
    result = calculate_financial_score(
        make_input(total_expenses=10_000, emergency_fund=emergency_fund, debt=0)
    )
    assert result.score <= 80


@pytest.mark.parametrize("emergency_fund", [0, 1_000, 5_000, 9_999])
def test_risk_never_low_below_one_month(emergency_fund):
    result = calculate_financial_score(
        make_input(total_expenses=10_000, emergency_fund=emergency_fund, debt=0)
    )
    assert result.risk_level != "Low"


def test_under_one_month_forces_moderate_even_at_score_80(monkeypatch):
    """Risk tier moves to Moderate while the numeric score stays at 80"""
    monkeypatch.setattr(scoring, "score_emergency_fund", lambda months: (100.0, None))

    result = calculate_financial_score(
        make_input(total_expenses=10_000, emergency_fund=5_000, debt=0)
    )

    assert result.score == 80
    assert result.risk_level == "Moderate"


def test_critical_emergency_fund_rounds_half_up():
    result = calculate_financial_score(
        make_input(total_expenses=10_000, emergency_fund=5_000, debt=0)
    )

    # 30 + 20 + 0.35 * 9.5 + 15
    assert result.score == 68
    assert result.risk_level == "Moderate"
    assert result.breakdown.emergency_score == 10
    assert result.improvement_suggestions == [
        "CRITICAL: Emergency fund is less than 1 month. Prioritize savings."
    ]


def test_overspending_collects_suggestions_in_order():
    result = calculate_financial_score(
        make_input(monthly_income=50_000, total_expenses=60_000, savings=-10_000, emergency_fund=0, debt=0)
    )

    assert result.score == 15
    assert result.risk_level == "High"
    assert result.improvement_suggestions == [
        "Expenses exceed income. Reduce spending immediately.",
        "High burn rate! Expenses are consuming too much of your income.",
        "CRITICAL: Emergency fund is less than 1 month. Prioritize savings.",
    ]
    assert result.breakdown == ScoreBreakdown(
        savings_score=0, emergency_score=0, debt_score=100, burn_rate_score=0
    )


def test_low_savings_and_high_burn_suggestions():
    result = calculate_financial_score(make_input(total_expenses=90_000, emergency_fund=600_000))

    assert result.breakdown.savings_score == 25  # 24.5 rounds up
    assert result.breakdown.burn_rate_score == 33
    assert result.improvement_suggestions == [
        "Try to save at least 20% of your income.",
        "High burn rate! Expenses are consuming too much of your income.",
    ]


def test_heavy_debt_adds_suggestion():
    result = calculate_financial_score(make_input(monthly_income=10_000, total_expenses=6_000,
                                                  emergency_fund=60_000, debt=240_000))

    assert result.breakdown.debt_score == 19
    assert result.improvement_suggestions == [
        "Total debt is high relative to annual income. Focus on paying down debt."
    ]


def test_caller_savings_is_recomputed():
    consistent = calculate_financial_score(make_input(savings=40_000))
    stale = calculate_financial_score(make_input(savings=-999_999))
    assert consistent == stale


def test_zero_expenses_treated_as_one_for_coverage():
    no_fund = calculate_financial_score(make_input(total_expenses=0, emergency_fund=0, debt=0))
    assert no_fund.breakdown.emergency_score == 0
    assert no_fund.score == 65

    small_fund = calculate_financial_score(make_input(total_expenses=0, emergency_fund=10, debt=0))
    assert small_fund.breakdown.emergency_score == 100
    assert small_fund.score == 100


def test_score_is_idempotent():
    scoring_input = make_input(total_expenses=72_000, emergency_fund=150_000, debt=500_000)
    assert calculate_financial_score(scoring_input) == calculate_financial_score(scoring_input)


def test_non_finite_input_rejected():
    with pytest.raises(NonFiniteInputError) as exc_info:
        calculate_financial_score(make_input(emergency_fund=float("inf")))
    assert exc_info.value.field_name == "emergency_fund"
