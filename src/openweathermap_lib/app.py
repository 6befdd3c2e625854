"""FastAPI application hosting the weather bridge."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from opentelemetry import metrics
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from prometheus_client import REGISTRY, generate_latest

from .api import health, routes
from .core.config import settings


def setup_logging():
    """Configure loguru for structured logging.

    Logs are written to stderr at the configured level, with keyword context
    appended after the message.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> | {extra}",
        level=settings.LOG_LEVEL,
        serialize=settings.ENVIRONMENT == "production",
        colorize=settings.ENVIRONMENT != "production",
        backtrace=True,
        diagnose=settings.ENVIRONMENT != "production",
    )

    logger.info("Logging configured", level=settings.LOG_LEVEL)


def setup_metrics():
    """Configure OpenTelemetry metrics with a Prometheus exporter."""
    reader = PrometheusMetricReader()

    resource = Resource.create(
        {
            "service.name": "openweathermap-lib-bridge",
            "service.version": "0.1.0",
        }
    )

    provider = MeterProvider(
        resource=resource,
        metric_readers=[reader],
    )
    metrics.set_meter_provider(provider)

    logger.info("OpenTelemetry metrics configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    logger.info("Starting OpenWeatherMap bridge host")

    # API keys arrive per request and are never part of the configuration
    logger.info(
        "Configuration loaded",
        geocoding_url=settings.GEOCODING_URL,
        weather_url=settings.WEATHER_URL,
        upstream_timeout=settings.UPSTREAM_TIMEOUT,
        default_units=settings.DEFAULT_UNITS,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        environment=settings.ENVIRONMENT,
    )

    yield

    logger.info("Shutting down OpenWeatherMap bridge host")


setup_logging()
setup_metrics()

app = FastAPI(
    title="OpenWeatherMap Bridge",
    description="Resolves a postal code with OpenWeatherMap and returns current weather as a JSON envelope",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.LOG_LEVEL == "DEBUG" else None,
    redoc_url=None,
)

# Browser modules call the bridge from arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(routes.router, tags=["Weather"])


@app.get("/metrics", include_in_schema=False)
async def metrics_endpoint():
    """Prometheus metrics in text exposition format."""
    return PlainTextResponse(content=generate_latest(REGISTRY).decode("utf-8"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors and return a generic 500 without internal details."""
    logger.exception(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


FastAPIInstrumentor.instrument_app(app)

logger.info("FastAPI application created")
