"""Result cache paging layer.

Architecture:
    - definitions.py: WindowResult aggregate
    - planners.py: Splits a record count into CICSResultCache windows
    - executors.py: Fetches windows (optionally concurrently) and reassembles them
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import WindowResult
from .executors import FetchWindow, WindowExecutor
from .planners import WindowPlanner

__all__ = [
    "FetchWindow",
    "WindowExecutor",
    "WindowPlanner",
    "WindowResult",
]
