import json
import logging
import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from homehealth.config import get_settings
from homehealth.routers import catalog_router, measurements_router, properties_router, reports_router
from homehealth.scoring import baselines_for, build_scoring_config

settings = get_settings()
logger = logging.getLogger("homehealth")
logging.basicConfig(level=settings.log_level.upper())

# Rate limiter
limiter = Limiter(key_func=get_remote_address)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the scoring config once; a ConfigurationError aborts startup."""
    app.state.scoring_config = build_scoring_config(settings.threshold_overrides)
    app.state.baselines = baselines_for(settings.baseline_region)
    logger.info(
        f"Scoring config loaded: {len(app.state.scoring_config.catalog)} metrics, "
        f"{len(settings.threshold_overrides)} threshold overrides, baselines={settings.baseline_region}"
    )
    yield


app = FastAPI(
    title="Home Health Report API",
    description="Residential air, water and EMF assessments: readings in, scored reports out",
    version="1.0.0",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


@app.middleware("http")
async def structured_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    req_id = request.headers.get("X-Request-ID", str(uuid4()))
    request.state.request_id = req_id

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = req_id
        return response
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        payload = {
            "request_id": req_id,
            "path": request.url.path,
            "method": request.method,
            "status": status_code,
            "duration_ms": duration_ms,
        }
        logger.info(json.dumps(payload, default=str))


# Include routers
app.include_router(catalog_router)
app.include_router(properties_router)
app.include_router(measurements_router)
app.include_router(reports_router)

Instrumentator().instrument(app).expose(app, include_in_schema=False, should_gzip=True)


@app.get("/health")
def health_check():
    """Health check endpoint for Docker."""
    return {"status": "healthy"}


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "Home Health Report API",
        "version": "1.0.0",
        "docs": "/docs",
        "report": "/properties/{id}/report",
        "catalog": "/catalog",
    }
