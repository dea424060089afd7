#!/usr/bin/env python3
"""
Namakarana API - Main Application
FastAPI application for birth-chart based name analysis
"""

import os
import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from api.routers.naming import router as naming_router
from app.core.config import SERVICE_NAME, SERVICE_VERSION
from app.core.logging import get_api_logger, setup_logging
from app.models.base import ErrorResponse
from app.models.responses import HealthStatus, ServiceInfo
from config.feature_flags import get_feature_flags

# Initialize structured logging EARLY (before any logger usage)
setup_logging(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format_json=os.getenv("LOG_FORMAT", "json").lower() == "json",
)
logger = get_api_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    flags = get_feature_flags()
    logger.info(
        "Starting Namakarana API", extra={"features": flags.enabled_features()}
    )
    yield
    logger.info("Namakarana API stopped")


app = FastAPI(
    title="Namakarana API",
    description="Vedic name analysis from a precomputed sidereal birth chart",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.include_router(naming_router)


@app.get("/", response_model=ServiceInfo, tags=["health"])
async def root() -> ServiceInfo:
    return ServiceInfo(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        docs="/api/docs",
        features=get_feature_flags().enabled_features(),
    )


@app.get("/api/v1/health", response_model=HealthStatus, tags=["health"])
async def health() -> HealthStatus:
    """Liveness probe. Returns 200 while the process is responsive."""
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(UTC),
        version=SERVICE_VERSION,
        features=get_feature_flags().to_dict(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    req_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    codes = {403: "FEATURE_DISABLED", 404: "NOT_FOUND", 422: "INVALID_INPUT"}
    problem = ErrorResponse(
        error=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        detail=f"{request.method} {request.url.path}",
        code=codes.get(exc.status_code),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(),
        headers={"X-Request-ID": req_id},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    req_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    logger.exception("Unhandled error", extra={"path": request.url.path, "request_id": req_id})
    problem = ErrorResponse(
        error="Internal Server Error", detail=str(exc)[:200], code="INTERNAL_ERROR"
    )
    return JSONResponse(
        status_code=500, content=problem.model_dump(), headers={"X-Request-ID": req_id}
    )
