from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_SERVICE_CONFIG
from .recommendations.data_store import Catalog, get_catalog
from .recommendations.models import (
    DestinationListResponse,
    HealthResponse,
    NoMatchResult,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.retrieval import filter_destinations, recommend

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /api/health",
    "GET /api/destinations",
    "POST /api/recommendations",
]

NO_MATCH_MESSAGE = (
    "No destinations found matching your criteria. Try expanding your region "
    "preferences or adjusting your budget range."
)

# Checked in this order; the first failing field is reported.
_FIELD_ERRORS = {
    "userId": "userId is required and must be a string",
    "pastVacations": "pastVacations must be a non-empty array",
    "filters": "filters must be an object",
}

_STARTED_AT = time.monotonic()


def configure_logging(level: str = DEFAULT_SERVICE_CONFIG.log_level) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _timestamp() -> str:
    """UTC ISO-8601 timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message, **extra, "timestamp": _timestamp()},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = get_catalog()
    logger.info("Vacation Recommendation Microservice started (%d destinations)", len(catalog))
    logger.info(
        "Listening on http://localhost:%d, endpoints: %s",
        DEFAULT_SERVICE_CONFIG.port,
        ", ".join(AVAILABLE_ENDPOINTS),
    )
    yield
    logger.info("Shutting down %s", DEFAULT_SERVICE_CONFIG.name)


configure_logging()

app = FastAPI(
    title="Vacation Recommendation API",
    version=DEFAULT_SERVICE_CONFIG.version,
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(DEFAULT_SERVICE_CONFIG.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    failed = {
        err["loc"][1]
        for err in exc.errors()
        if len(err["loc"]) > 1 and err["loc"][0] == "body"
    }
    # A body that is not a JSON object has no fields, so userId is the first to fail.
    details = next(
        (msg for field, msg in _FIELD_ERRORS.items() if field in failed),
        _FIELD_ERRORS["userId"],
    )
    body = exc.body if isinstance(exc.body, dict) else {}
    return _error(400, "Invalid input format", details=details, userId=body.get("userId") or None)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return _error(404, "Endpoint not found", availableEndpoints=AVAILABLE_ENDPOINTS)
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


# ── Endpoints ────────────────────────────────────────────────────────────


@app.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(
        service=DEFAULT_SERVICE_CONFIG.name,
        version=DEFAULT_SERVICE_CONFIG.version,
        timestamp=_timestamp(),
        uptime=time.monotonic() - _STARTED_AT,
    )


@app.get("/api/destinations", response_model=DestinationListResponse)
def destinations(
    region: str | None = None,
    budget: str | None = None,
    climate: str | None = None,
    catalog: Catalog = Depends(get_catalog),
) -> DestinationListResponse:
    matched = filter_destinations(catalog, region=region, budget=budget, climate=climate)
    return DestinationListResponse(total=len(matched), destinations=matched)


@app.post("/api/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    catalog: Catalog = Depends(get_catalog),
):
    start_time = time.perf_counter()

    try:
        result = recommend(body, catalog)
    except Exception as exc:
        logger.exception("Error processing recommendations for user %s", body.user_id)
        return _error(500, "Internal server error", details=str(exc), userId=body.user_id)

    elapsed_ms = round((time.perf_counter() - start_time) * 1000)

    if isinstance(result, NoMatchResult):
        logger.info("No matches for user %s", body.user_id)
        return _error(
            404,
            NO_MATCH_MESSAGE,
            suggestions=result.suggestions,
            userId=body.user_id,
            responseTimeMs=elapsed_ms,
        )

    return RecommendationResponse(
        user_id=body.user_id,
        total_recommendations=len(result.recommendations),
        recommendations=result.recommendations,
        based_on_pattern=result.based_on_pattern,
        filters=result.filters,
        generated_at=_timestamp(),
        response_time_ms=elapsed_ms,
    )
