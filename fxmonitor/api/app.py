"""API application factory."""

from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from fxmonitor.core.config import Settings, settings as default_settings
from fxmonitor.core.exceptions import register_exception_handlers
from fxmonitor.core.logging import get_logger, request_id_var
from fxmonitor.core.random_source import create_rng
from fxmonitor.domain import CurrencyCatalog
from fxmonitor.schemas.common import ErrorResponse
from fxmonitor.services import AlertStore, MarketDataService, demo_alerts

from .routes import alerts, health, history, rates


logger = get_logger("api")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    def __init__(self, app, https_enabled: bool = False):
        super().__init__(app)
        self.https_enabled = https_enabled

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if self.https_enabled:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add request ID to all requests for tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        request_id_var.set(request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.monotonic()

        response = await call_next(request)

        duration = time.monotonic() - start_time
        path = request.url.path

        logger.info(
            f"{request.method} {path} -> {response.status_code} ({duration:.3f}s)",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": int(duration * 1000),
            },
        )

        return response


def create_api_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the API application.

    The currency catalog, random source and alert store are built here once
    and shared by every request through ``app.state``.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Simulated foreign-exchange monitoring API",
        root_path=settings.root_path,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        responses={
            400: {"model": ErrorResponse, "description": "Bad Request"},
            404: {"model": ErrorResponse, "description": "Not Found"},
            500: {"model": ErrorResponse, "description": "Internal Server Error"},
        },
    )

    app.state.settings = settings
    app.state.market_data = MarketDataService(
        catalog=CurrencyCatalog(),
        rng=create_rng(settings.random_seed),
        volatility=settings.rate_volatility,
    )
    app.state.alerts = AlertStore(demo_alerts() if settings.seed_demo_alerts else ())

    # Middlewares (first added is innermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, https_enabled=settings.https_enabled)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(rates.router, tags=["Rates"])
    app.include_router(history.router, tags=["History"])
    app.include_router(alerts.router, tags=["Alerts"])

    logger.debug(
        "API app created",
        extra={"pairs": len(app.state.market_data.catalog), "seeded": settings.random_seed is not None},
    )
    return app
