"""CICSPlex CMCI - async client for the CICS management REST interface."""

from .api import CacheRetrieval, CacheTokenIssuer, CMCIClient, PaginatedRetriever
from .core import (
    CMCIError,
    NotFoundError,
    Protocol,
    RemoteError,
    ResourceLimitExceeded,
    RetrievalCancelled,
    RetrievalState,
    ValidationError,
    enforce_parentheses,
    get_resource_uri,
    get_result_cache_uri,
    normalize_records,
    to_escaped_criteria,
)
from .models import (
    CacheToken,
    CMCIConnection,
    NormalizedRecord,
    QueryParams,
    RecordWindow,
    ResourceQuery,
    ResourceResponse,
    ResultSummary,
    RetrievalResult,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "CMCIClient",
    "CacheRetrieval",
    "CacheTokenIssuer",
    "PaginatedRetriever",
    # Models
    "CMCIConnection",
    "CacheToken",
    "NormalizedRecord",
    "QueryParams",
    "RecordWindow",
    "ResourceQuery",
    "ResourceResponse",
    "ResultSummary",
    "RetrievalResult",
    "Protocol",
    "RetrievalState",
    # URI building and normalization
    "get_resource_uri",
    "get_result_cache_uri",
    "enforce_parentheses",
    "to_escaped_criteria",
    "normalize_records",
    # Exceptions
    "CMCIError",
    "ValidationError",
    "RemoteError",
    "NotFoundError",
    "ResourceLimitExceeded",
    "RetrievalCancelled",
]
