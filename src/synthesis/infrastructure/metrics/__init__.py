"""Metrics infrastructure package."""

from synthesis.infrastructure.metrics.prometheus_metrics import (
    # Gateway metrics
    GATEWAY_REQUESTS_TOTAL,
    GATEWAY_LATENCY,
    # Screen metrics
    DIARY_ENTRIES_TOTAL,
    CRISIS_REQUESTS_TOTAL,
    ACTIVE_APP_SESSIONS,
    # Helpers
    track_gateway_call,
    track_diary_submission,
    track_crisis_request,
    update_system_info,
    # Router
    metrics_router,
)

__all__ = [
    "GATEWAY_REQUESTS_TOTAL",
    "GATEWAY_LATENCY",
    "DIARY_ENTRIES_TOTAL",
    "CRISIS_REQUESTS_TOTAL",
    "ACTIVE_APP_SESSIONS",
    "track_gateway_call",
    "track_diary_submission",
    "track_crisis_request",
    "update_system_info",
    "metrics_router",
]
