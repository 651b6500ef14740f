"""Structured-logging helpers for latency and event metrics."""

import logging
import time
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)


@contextmanager
def timed_operation(operation_name: str, **extra: Any):
    """Time the wrapped block and log the outcome.

    Usage:
        with timed_operation("ticket_classification", provider="openai"):
            parsed = await chat.complete_structured(prompt, schema)

    Exceptions are logged with success=False and re-raised unchanged.
    """
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        logger.warning(
            f"{operation_name} failed",
            extra={
                "metric_type": operation_name,
                "latency_ms": round((time.perf_counter() - start) * 1000, 2),
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
                **extra,
            },
        )
        raise
    logger.info(
        f"{operation_name} completed",
        extra={
            "metric_type": operation_name,
            "latency_ms": round((time.perf_counter() - start) * 1000, 2),
            "success": True,
            **extra,
        },
    )


def log_metric(metric_type: str, level: int = logging.INFO, **data: Any) -> None:
    """Log a metric event with structured data.

    Usage:
        log_metric("classification_rate_limited", level=logging.DEBUG)
    """
    logger.log(level, metric_type, extra={"metric_type": metric_type, **data})
