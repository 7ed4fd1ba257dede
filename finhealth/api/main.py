"""FastAPI application factory"""

import math
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from finhealth.api.middleware import MetricsMiddleware, RequestIDMiddleware
from finhealth.api.v1 import categorize, dashboard, risk, score, tax
from finhealth.config import settings
from finhealth.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def _json_safe(value: Any) -> Any:
    """Replace NaN/Infinity (not valid JSON) with their string form"""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 for invalid bodies, including ones that echo back non-finite numbers"""
    errors = _json_safe(jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=422, content={"detail": errors})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinHealth Gateway",
        description="Financial health score, tax regime comparison and risk detection service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(tax.router, prefix="/v1", tags=["tax"])
    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(risk.router, prefix="/v1", tags=["risk"])
    app.include_router(categorize.router, prefix="/v1", tags=["categorization"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn (console script entry point)"""
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
