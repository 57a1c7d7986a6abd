"""Plain resource query endpoint: one request, summary plus records."""

from __future__ import annotations

from typing import Any

from ..core.normalize import extract_records, extract_summary
from ..core.uri import get_resource_uri
from ..models import ResourceQuery, ResourceResponse
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .common import xml_headers


def _resource_path(params: dict[str, Any]) -> str:
    query: ResourceQuery = params["query"]
    return get_resource_uri(query)


SPEC = RestEndpointSpec(
    id="resource",
    build_path=_resource_path,
    build_headers=xml_headers,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a resource query into ResourceResponse."""

    def parse(self, response: Any, params: dict[str, Any]) -> ResourceResponse:
        query: ResourceQuery = params["query"]
        return ResourceResponse(
            summary=extract_summary(response),
            records=extract_records(response, query.name or ""),
        )
