"""Data models for CMCI requests and responses.

All models are pydantic v2 and frozen so a query, token or window cannot be
changed after it has been handed to the runtime.
"""

from .cache import (
    CacheToken,
    NormalizedRecord,
    RecordWindow,
    ResourceResponse,
    ResultSummary,
    RetrievalResult,
)
from .connection import CMCIConnection
from .query import QueryParams, ResourceQuery

__all__ = [
    "CMCIConnection",
    "CacheToken",
    "NormalizedRecord",
    "QueryParams",
    "RecordWindow",
    "ResourceQuery",
    "ResourceResponse",
    "ResultSummary",
    "RetrievalResult",
]
