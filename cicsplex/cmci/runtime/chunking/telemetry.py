"""Structured logging for result cache paging."""

from __future__ import annotations

import logging

from .definitions import WindowResult

logger = logging.getLogger(__name__)


def log_window_plan(*, resource_name: str, total_windows: int, record_count: int, increment: int) -> None:
    """Log window plan creation."""
    logger.info(
        "window_plan_created",
        extra={
            "resource_name": resource_name,
            "total_windows": total_windows,
            "record_count": record_count,
            "increment": increment,
        },
    )


def log_window_completed(
    *,
    resource_name: str,
    window_index: int,
    start: int,
    rows_aggregated: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single window.

    Args:
        resource_name: CMCI resource table being paged
        window_index: Zero-based index of the window
        start: 1-based first record of the window
        rows_aggregated: Number of records the window returned
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "window_completed",
        extra={
            "resource_name": resource_name,
            "window_index": window_index,
            "start": start,
            "rows_aggregated": rows_aggregated,
            "latency_ms": latency_ms,
        },
    )


def log_window_size_mismatch(*, resource_name: str, window_index: int, expected: int, received: int) -> None:
    logger.warning(
        "window_size_mismatch",
        extra={
            "resource_name": resource_name,
            "window_index": window_index,
            "expected": expected,
            "received": received,
        },
    )


def log_window_execution_complete(
    *,
    resource_name: str,
    result: WindowResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a paged retrieval."""
    logger.info(
        "window_execution_complete",
        extra={
            "resource_name": resource_name,
            "windows_used": result.windows_used,
            "total_records": result.total_records,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_window_error(
    *,
    resource_name: str,
    window_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed window request.

    Args:
        resource_name: CMCI resource table being paged
        window_index: Zero-based index of the window that failed
        error_type: Exception class name (e.g., "RemoteError")
        error_message: Error message
    """
    logger.error(
        "window_error",
        extra={
            "resource_name": resource_name,
            "window_index": window_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
