"""
Prometheus Metrics

Metrics for the Synthesis backend, exposed at /metrics for scraping.

ARCHITECTURE: Metrics are decoupled from business logic.
Only increment/observe; never block on metrics operations.
"""

import time
from functools import wraps
from typing import Callable

from fastapi import APIRouter, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Gauge,
    Histogram,
    Info,
    generate_latest,
)

from synthesis.domain.errors import GatewayConfigurationError

# =============================================================================
# GATEWAY METRICS
# =============================================================================

GATEWAY_REQUESTS_TOTAL = Counter(
    "synthesis_gateway_requests_total",
    "Gateway calls by kind and outcome",
    ["kind", "status"],  # success, error, unconfigured
)

GATEWAY_LATENCY = Histogram(
    "synthesis_gateway_latency_seconds",
    "Gateway call latency",
    ["kind"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

# =============================================================================
# SCREEN METRICS
# =============================================================================

DIARY_ENTRIES_TOTAL = Counter(
    "synthesis_diary_entries_total",
    "Diary submissions by outcome",
    ["outcome"],  # saved, failed, invalid
)

CRISIS_REQUESTS_TOTAL = Counter(
    "synthesis_crisis_requests_total",
    "SOS advice requests by outcome",
    ["outcome"],  # advice, failed
)

ACTIVE_APP_SESSIONS = Gauge(
    "synthesis_active_app_sessions",
    "Number of open app sessions",
)

# =============================================================================
# SYSTEM INFO
# =============================================================================

SYSTEM_INFO = Info(
    "synthesis_system",
    "Synthesis system information",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def track_gateway_call(kind: str) -> Callable:
    """Decorator to track gateway call metrics."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                GATEWAY_REQUESTS_TOTAL.labels(kind=kind, status="success").inc()
                return result
            except GatewayConfigurationError:
                GATEWAY_REQUESTS_TOTAL.labels(kind=kind, status="unconfigured").inc()
                raise
            except Exception:
                GATEWAY_REQUESTS_TOTAL.labels(kind=kind, status="error").inc()
                raise
            finally:
                GATEWAY_LATENCY.labels(kind=kind).observe(time.time() - start_time)
        return wrapper
    return decorator


def track_diary_submission(outcome: str) -> None:
    """Record diary submission outcome."""
    DIARY_ENTRIES_TOTAL.labels(outcome=outcome).inc()


def track_crisis_request(outcome: str) -> None:
    """Record SOS advice outcome."""
    CRISIS_REQUESTS_TOTAL.labels(outcome=outcome).inc()


def update_system_info(environment: str, version: str = "0.1.0") -> None:
    """Update system info metric with current environment."""
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
    })


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

metrics_router = APIRouter(tags=["metrics"])


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
    )
