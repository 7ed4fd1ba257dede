"""Pydantic schemas for API request/response validation"""

import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; NaN/Infinity rejected"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


# Tax

class TaxRequest(CamelModel):
    """Request body for POST /v1/tax/*"""

    annual_income: float = Field(..., description="Annual gross income")
    section_80_deductions: float = Field(0.0, alias="section80Deductions", description="Old regime only")
    is_salaried: bool = True


class RegimeBreakdownSchema(CamelModel):
    regime: Literal["Old", "New"]
    gross_income: float
    deductions: float
    taxable_income: float
    tax_before_cess: float
    cess: float
    total_tax: float


class TaxComparisonResponse(CamelModel):
    """Response for POST /v1/tax/compare"""

    old_regime: RegimeBreakdownSchema
    new_regime: RegimeBreakdownSchema
    recommended_regime: Literal["Old", "New"]
    savings: float
    savings_percentage: float


# Scoring

class ScoreRequest(CamelModel):
    """Request body for POST /v1/score"""

    monthly_income: float
    total_expenses: float
    savings: float = 0.0
    emergency_fund: float = 0.0
    debt: float = 0.0


class ScoreBreakdownSchema(CamelModel):
    savings_score: int
    emergency_score: int
    debt_score: int
    burn_rate_score: int


class ScoreResponse(CamelModel):
    """Response for POST /v1/score"""

    score: int
    risk_level: Literal["Low", "Moderate", "High"]
    improvement_suggestions: List[str]
    breakdown: ScoreBreakdownSchema


# Risk

class RiskRequest(CamelModel):
    """Request body for POST /v1/risks"""

    monthly_income: float
    monthly_expenses: float
    monthly_savings: float
    emergency_fund: float = 0.0


class AlertSchema(CamelModel):
    type: str
    severity: Literal["Low", "Medium", "High"]
    message: str


class AlertSummarySchema(CamelModel):
    high: int
    medium: int
    low: int


class RiskResponse(CamelModel):
    """Response for POST /v1/risks"""

    alerts: List[AlertSchema]
    overall_risk_level: Literal["None", "Low", "Medium", "High"]
    summary: AlertSummarySchema


# Categorization

class CategorizeRequest(CamelModel):
    """Request body for POST /v1/categorize"""

    description: str
    extra_rules: Dict[str, List[str]] = Field(default_factory=dict)


class CategorizeResponse(CamelModel):
    description: str
    category: str


# Dashboard

class TransactionSchema(CamelModel):
    """Single income or expense entry"""

    amount: float = Field(..., ge=0)
    type: Literal["income", "expense"]
    category: str = "Uncategorized"
    description: str = ""
    date: datetime.date


class DashboardRequest(CamelModel):
    """Request body for POST /v1/dashboard"""

    transactions: List[TransactionSchema]
    emergency_fund: float = 0.0
    debt: Optional[float] = None
    year: Optional[int] = Field(None, ge=1)
    month: Optional[int] = Field(None, ge=1, le=12)
    section_80_deductions: Optional[float] = Field(None, alias="section80Deductions")
    is_salaried: bool = True


class MonthlyMetricsSchema(CamelModel):
    year: int
    month: int
    income: float
    expenses: float
    savings: float
    transaction_count: int
    category_breakdown: Dict[str, float]


class DashboardResponse(CamelModel):
    """Response for POST /v1/dashboard"""

    metrics: MonthlyMetricsSchema
    score: ScoreResponse
    previous_score: Optional[ScoreResponse] = None
    tax_comparison: TaxComparisonResponse
    alerts: List[AlertSchema]
    overall_risk_level: Literal["None", "Low", "Medium", "High"]
    alert_summary: AlertSummarySchema
    trend: List[MonthlyMetricsSchema]
