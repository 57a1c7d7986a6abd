"""CICSResultCache window endpoint."""

from __future__ import annotations

from typing import Any

from ..core.normalize import extract_records
from ..core.uri import get_result_cache_uri
from ..models import NormalizedRecord, RecordWindow
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .common import xml_headers


def _window_path(params: dict[str, Any]) -> str:
    window: RecordWindow = params["window"]
    return get_result_cache_uri(
        params["cache_token"],
        window.start,
        window.size(params["record_count"]),
    )


SPEC = RestEndpointSpec(
    id="result_cache",
    build_path=_window_path,
    build_headers=xml_headers,
)


class Adapter(ResponseAdapter):
    """Normalizes the records of a single window.

    A window holding one record comes back as a bare element, so every window
    is normalized independently.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> list[NormalizedRecord]:
        return extract_records(response, params["resource_name"])
