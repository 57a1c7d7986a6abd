"""High-level CMCI API."""

from .client import CMCIClient
from .retrieval import CacheRetrieval, CacheTokenIssuer, PaginatedRetriever

__all__ = [
    "CMCIClient",
    "CacheRetrieval",
    "CacheTokenIssuer",
    "PaginatedRetriever",
]
