"""Domain models - pure Python dataclasses representing financial inputs and results"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Literal, Optional

Regime = Literal["Old", "New"]
RiskLevel = Literal["Low", "Moderate", "High"]
AlertSeverity = Literal["Low", "Medium", "High"]


@dataclass(frozen=True)
class TaxSlab:
    """Income band [min_income, max_income) taxed at a single marginal rate"""

    min_income: float
    max_income: float
    rate: float


@dataclass
class TaxInput:
    """Annual income and deduction figures for a tax comparison"""

    annual_income: float
    section_80_deductions: float = 0.0  # honored by the old regime only
    is_salaried: bool = True


@dataclass(frozen=True)
class RegimeBreakdown:
    """Tax liability computed under one regime"""

    regime: Regime
    gross_income: float
    deductions: float
    taxable_income: float
    tax_before_cess: float
    cess: float
    total_tax: float


@dataclass(frozen=True)
class TaxComparisonResult:
    """Old vs new regime side by side with the cheaper one recommended"""

    old_regime: RegimeBreakdown
    new_regime: RegimeBreakdown
    recommended_regime: Regime
    savings: float
    savings_percentage: float


@dataclass
class ScoringInput:
    """Monthly figures consumed by the financial health score"""

    monthly_income: float
    total_expenses: float
    savings: float  # may be negative; recomputed from income and expenses
    emergency_fund: float
    debt: float


@dataclass(frozen=True)
class ScoreBreakdown:
    """Rounded 0-100 sub-scores behind the weighted total"""

    savings_score: int
    emergency_score: int
    debt_score: int
    burn_rate_score: int


@dataclass(frozen=True)
class ScoringResult:
    """Output of the financial health assessment"""

    score: int
    risk_level: RiskLevel
    improvement_suggestions: List[str]
    breakdown: ScoreBreakdown


@dataclass
class RiskDetectionInput:
    """Monthly figures evaluated by the risk rules"""

    monthly_income: float
    monthly_expenses: float
    monthly_savings: float
    emergency_fund: float


@dataclass(frozen=True)
class FinancialAlert:
    """Single risk alert raised by a threshold rule"""

    type: str
    severity: AlertSeverity
    message: str


@dataclass(frozen=True)
class AlertSummary:
    """Alert counts per severity"""

    high: int
    medium: int
    low: int


@dataclass
class Transaction:
    """Income or expense entry logged by the user"""

    amount: float
    type: str  # "income" or "expense"
    category: str
    description: str
    date: date


@dataclass
class MonthlyMetrics:
    """Income, expenses and savings aggregated over one calendar month"""

    year: int
    month: int
    income: float
    expenses: float
    savings: float
    transaction_count: int
    category_breakdown: Dict[str, float] = field(default_factory=dict)


@dataclass
class DashboardSnapshot:
    """Engine outputs composed side by side for one month"""

    metrics: MonthlyMetrics
    score: ScoringResult
    previous_score: Optional[ScoringResult]
    tax_comparison: TaxComparisonResult
    alerts: List[FinancialAlert]
    overall_risk_level: str
    alert_summary: AlertSummary
    trend: List[MonthlyMetrics] = field(default_factory=list)
