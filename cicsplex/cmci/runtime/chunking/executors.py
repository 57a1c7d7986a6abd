"""Window execution: fetch result cache windows and reassemble them in order.

Windows of one cache token are independent once the token exists, so they may
be fetched concurrently. Output order always follows window start, whatever
order the responses arrive in.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter

from ...core.exceptions import RetrievalCancelled, ValidationError
from ...models.cache import NormalizedRecord, RecordWindow
from .definitions import WindowResult
from .telemetry import (
    log_window_completed,
    log_window_error,
    log_window_execution_complete,
    log_window_size_mismatch,
)

FetchWindow = Callable[[RecordWindow], Awaitable[list[NormalizedRecord]]]


class WindowExecutor:
    """Executes window plans and aggregates their records.

    A failing window is re-raised unchanged and no partial result is returned.
    """

    def __init__(self, concurrency: int = 1) -> None:
        """Initialize window executor.

        Args:
            concurrency: Maximum windows in flight at once
        """
        if concurrency < 1:
            raise ValidationError(f"Expect Error: Concurrency must be >= 1, got {concurrency}")
        self._concurrency = concurrency

    async def execute(
        self,
        *,
        plans: list[RecordWindow],
        record_count: int,
        fetch_window: FetchWindow,
        resource_name: str = "unknown",
        cancel_event: asyncio.Event | None = None,
    ) -> WindowResult:
        """Fetch every planned window and concatenate the records.

        Args:
            plans: Windows to fetch, as produced by WindowPlanner
            record_count: Record count the plans were made for
            fetch_window: Async function returning normalized records for a window
            resource_name: Resource table, used for logging only
            cancel_event: Optional event; once set, no further window is started

        Returns:
            WindowResult with records in window-start order

        Raises:
            RetrievalCancelled: If cancel_event was set before all windows ran
        """
        started = perf_counter()
        ordered = sorted(plans, key=lambda w: w.start)

        async def run(window: RecordWindow) -> list[NormalizedRecord]:
            if cancel_event is not None and cancel_event.is_set():
                raise RetrievalCancelled(
                    f"Retrieval of {resource_name} cancelled before window {window.window_index}"
                )
            window_start = perf_counter()
            try:
                records = await fetch_window(window)
            except Exception as e:
                log_window_error(
                    resource_name=resource_name,
                    window_index=window.window_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            expected = window.size(record_count)
            if len(records) != expected:
                log_window_size_mismatch(
                    resource_name=resource_name,
                    window_index=window.window_index,
                    expected=expected,
                    received=len(records),
                )
            log_window_completed(
                resource_name=resource_name,
                window_index=window.window_index,
                start=window.start,
                rows_aggregated=len(records),
                latency_ms=(perf_counter() - window_start) * 1000.0,
            )
            return records

        if self._concurrency == 1:
            batches = [await run(window) for window in ordered]
        else:
            batches = await self._run_concurrently(ordered, run)

        aggregated: list[NormalizedRecord] = []
        for batch in batches:
            aggregated.extend(batch)

        result = WindowResult(
            records=aggregated,
            windows_used=len(batches),
            total_records=len(aggregated),
        )
        log_window_execution_complete(
            resource_name=resource_name,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return result

    async def _run_concurrently(
        self,
        windows: list[RecordWindow],
        run: FetchWindow,
    ) -> list[list[NormalizedRecord]]:
        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(window: RecordWindow) -> list[NormalizedRecord]:
            async with semaphore:
                return await run(window)

        tasks = [asyncio.ensure_future(bounded(window)) for window in windows]
        try:
            # gather keeps argument order, which is window-start order
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
