"""Prometheus metrics for score distribution, regime recommendations and risk alerts"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from finhealth.domain.models import FinancialAlert

# Scoring metrics
score_counter = Counter(
    "finhealth_score_total",
    "Financial health scores computed",
    ["risk_level"],  # Low | Moderate | High
)

score_histogram = Histogram(
    "finhealth_score_value",
    "Distribution of financial health scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Tax metrics
tax_recommendation_counter = Counter(
    "finhealth_tax_recommendation_total",
    "Tax regime recommendations issued",
    ["regime"],  # Old | New
)

# Risk metrics
alert_counter = Counter(
    "finhealth_alert_total",
    "Risk alerts emitted",
    ["type", "severity"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: int, risk_level: str) -> None:
    """Record score metrics for monitoring the risk tier mix"""
    score_counter.labels(risk_level=risk_level).inc()
    score_histogram.observe(score)


def record_tax_recommendation(regime: str) -> None:
    tax_recommendation_counter.labels(regime=regime).inc()


def record_alerts(alerts: Iterable[FinancialAlert]) -> None:
    for alert in alerts:
        alert_counter.labels(type=alert.type, severity=alert.severity).inc()
