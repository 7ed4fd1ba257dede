"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from finhealth.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_score(request_id: str, score: int, risk_level: str, duration_ms: float) -> None:
    """Log structured score outcome"""
    logging.info(
        "Financial score computed",
        extra={
            "request_id": request_id,
            "step": "score_complete",
            "score": score,
            "risk_level": risk_level,
            "duration_ms": duration_ms,
        },
    )


def log_tax_comparison(
    request_id: str,
    recommended_regime: str,
    savings: float,
    duration_ms: float,
) -> None:
    """Log structured tax comparison outcome"""
    logging.info(
        "Tax regimes compared",
        extra={
            "request_id": request_id,
            "step": "tax_compare_complete",
            "recommended_regime": recommended_regime,
            "savings": savings,
            "duration_ms": duration_ms,
        },
    )


def log_risk_scan(request_id: str, alert_count: int, overall_risk_level: str, duration_ms: float) -> None:
    """Log structured risk detection outcome"""
    logging.info(
        "Risk scan completed",
        extra={
            "request_id": request_id,
            "step": "risk_scan_complete",
            "alert_count": alert_count,
            "overall_risk_level": overall_risk_level,
            "duration_ms": duration_ms,
        },
    )
