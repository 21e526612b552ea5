"""Monitoring infrastructure package."""

from synthesis.infrastructure.monitoring.sentry_integration import (
    init_sentry,
    report_exception,
)

__all__ = [
    "init_sentry",
    "report_exception",
]
