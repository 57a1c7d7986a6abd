"""Window planning for result cache paging.

The planner splits ``[1, record_count]`` into consecutive, non-overlapping
windows of at most ``increment`` records.
"""

from __future__ import annotations

from ...config import DEFAULT_INCREMENT
from ...core.exceptions import ValidationError
from ...models.cache import RecordWindow
from .telemetry import log_window_plan


class WindowPlanner:
    """Plans CICSResultCache windows for a cached result set."""

    def __init__(self, increment: int = DEFAULT_INCREMENT) -> None:
        """Initialize window planner.

        Args:
            increment: Maximum records per window

        Raises:
            ValidationError: If increment is not positive
        """
        if increment < 1:
            raise ValidationError(f"Expect Error: Window increment must be >= 1, got {increment}")
        self._increment = increment

    @property
    def increment(self) -> int:
        return self._increment

    def plan(self, record_count: int, *, resource_name: str = "unknown") -> list[RecordWindow]:
        """Plan windows covering every record.

        Args:
            record_count: Number of records in the cached result set
            resource_name: Resource table, used for logging only

        Returns:
            ``ceil(record_count / increment)`` windows ordered by start;
            empty when record_count is 0

        Raises:
            ValidationError: If record_count is negative
        """
        if record_count < 0:
            raise ValidationError(f"Expect Error: Record count must be >= 0, got {record_count}")

        plans = [
            RecordWindow(start=start, increment=self._increment, window_index=index)
            for index, start in enumerate(range(1, record_count + 1, self._increment))
        ]

        log_window_plan(
            resource_name=resource_name,
            total_windows=len(plans),
            record_count=record_count,
            increment=self._increment,
        )
        return plans
