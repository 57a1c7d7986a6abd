"""Record normalization for CMCI responses.

A CMCI response carries a single matching record as a bare element and several
records as a list of elements. Everything here turns that into an explicit
list of flat attribute mappings. The ambiguity recurs in every result cache
window, so each window is normalized on its own.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..models.cache import NormalizedRecord, ResultSummary
from .codec import ATTRIBUTES_KEY
from .exceptions import RemoteError


def as_sequence(value: Any) -> list[Any]:
    """Wrap a singleton in a list; pass lists through; None becomes []."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def normalize_records(raw_records: Any) -> list[NormalizedRecord]:
    """Flatten one record or a sequence of records into attribute mappings.

    Args:
        raw_records: A compact-tree record element, a list of them, or None

    Returns:
        One mapping per record, in response order

    Raises:
        RemoteError: If an entry is not a record element
    """
    records: list[NormalizedRecord] = []
    for entry in as_sequence(raw_records):
        if not isinstance(entry, dict):
            raise RemoteError(f"Malformed CMCI record: expected element, got {type(entry).__name__}")
        records.append(dict(entry.get(ATTRIBUTES_KEY, {})))
    return records


def _response_body(tree: dict[str, Any]) -> dict[str, Any]:
    body = tree.get("response")
    if not isinstance(body, dict):
        raise RemoteError("Malformed CMCI response: missing <response> element")
    return body


def extract_records(tree: dict[str, Any], resource_name: str) -> list[NormalizedRecord]:
    """Pull the normalized records for ``resource_name`` out of a response tree.

    Records are keyed by the lower-cased resource table name, so a query for
    ``CICSLocalFile`` yields records under ``cicslocalfile``. A response with no
    records element yields an empty list.
    """
    records = _response_body(tree).get("records")
    if not isinstance(records, dict):
        return []
    return normalize_records(records.get(resource_name.lower()))


def extract_summary(tree: dict[str, Any]) -> ResultSummary:
    """Parse the ``resultsummary`` envelope of a response tree.

    Raises:
        RemoteError: If the summary is missing or its counts are not integers
    """
    summary = _response_body(tree).get("resultsummary")
    if not isinstance(summary, dict):
        raise RemoteError("Malformed CMCI response: missing <resultsummary> element")
    try:
        return ResultSummary.model_validate(summary.get(ATTRIBUTES_KEY, {}))
    except PydanticValidationError as e:
        raise RemoteError(f"Malformed CMCI result summary: {e}") from e
