"""Cache token issuance endpoint.

Sends the resource query with SUMMONLY, NODISCARD and OVERRIDEWARNINGCOUNT so
the server keeps the result set and answers with only its summary: a cache
token and the total record count.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.exceptions import RemoteError
from ..core.normalize import extract_summary
from ..core.uri import get_resource_uri
from ..models import CacheToken, QueryParams, ResourceQuery
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .common import xml_headers

logger = logging.getLogger(__name__)

CACHE_QUERY_PARAMS = QueryParams(summonly=True, nodiscard=True, override_warning_count=True)


def cache_query(query: ResourceQuery) -> ResourceQuery:
    """Return ``query`` with the terms that make the server cache its result."""
    return query.model_copy(update={"query_params": CACHE_QUERY_PARAMS})


def _cache_token_path(params: dict[str, Any]) -> str:
    return get_resource_uri(cache_query(params["query"]))


SPEC = RestEndpointSpec(
    id="cache_token",
    build_path=_cache_token_path,
    build_headers=xml_headers,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a SUMMONLY result summary into a CacheToken."""

    def parse(self, response: Any, params: dict[str, Any]) -> CacheToken:
        """Parse the summary envelope.

        Raises:
            RemoteError: If the summary carries no cache token
        """
        query: ResourceQuery = params["query"]
        summary = extract_summary(response)
        if not summary.cache_token:
            raise RemoteError(
                f"CMCI result summary for {query.name} did not include a cache token",
                api_response1=summary.api_response1,
                api_response2=summary.api_response2,
            )
        token = CacheToken(cache_token=summary.cache_token, record_count=summary.record_count)
        logger.info(
            "cache_token_issued",
            extra={"resource_name": query.name, "record_count": token.record_count},
        )
        return token
