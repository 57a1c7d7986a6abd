"""Window definitions and result structures for result cache paging."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...models.cache import NormalizedRecord


@dataclass
class WindowResult:
    """Result of paging through a cached result set.

    Attributes:
        records: Normalized records from every window, in window-start order
        windows_used: Number of windows that were fetched
        total_records: Number of records aggregated
    """

    records: list[NormalizedRecord] = field(default_factory=list)
    windows_used: int = 0
    total_records: int = 0
