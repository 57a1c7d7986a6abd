"""Core components."""

from .codec import cmci_xml_to_tree
from .enums import Protocol, RetrievalState
from .exceptions import (
    CMCIError,
    NotFoundError,
    RemoteError,
    ResourceLimitExceeded,
    RetrievalCancelled,
    ValidationError,
    classify_remote_error,
)
from .normalize import as_sequence, extract_records, extract_summary, normalize_records
from .uri import (
    encode_component,
    enforce_parentheses,
    get_resource_uri,
    get_result_cache_uri,
    to_escaped_criteria,
)

__all__ = [
    "Protocol",
    "RetrievalState",
    # Exceptions
    "CMCIError",
    "ValidationError",
    "RemoteError",
    "NotFoundError",
    "ResourceLimitExceeded",
    "RetrievalCancelled",
    "classify_remote_error",
    # URI building
    "get_resource_uri",
    "get_result_cache_uri",
    "enforce_parentheses",
    "encode_component",
    "to_escaped_criteria",
    # Wire payloads
    "cmci_xml_to_tree",
    "as_sequence",
    "normalize_records",
    "extract_records",
    "extract_summary",
]
