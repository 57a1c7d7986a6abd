"""CMCI client facade.

This client wraps one caller-owned connection and exposes resource queries,
cache token issuance, paginated retrieval and plex/region discovery. Nothing is
stored at module level; create one client per connection and close it when
done (or use it as an async context manager).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..config import (
    CICS_CICSPLEX,
    CICS_MANAGED_REGION,
    CICS_REGION,
    CICS_REGION_GROUP,
    DEFAULT_INCREMENT,
)
from ..core.exceptions import NotFoundError
from ..endpoints import get_endpoint_adapter, get_endpoint_spec
from ..models import CacheToken, CMCIConnection, NormalizedRecord, ResourceQuery, ResourceResponse
from ..runtime.rest import RestRunner, RESTTransport
from .retrieval import CacheRetrieval, CacheTokenIssuer, PaginatedRetriever

logger = logging.getLogger(__name__)


class CMCIClient:
    """Async client for one CMCI server."""

    def __init__(self, connection: CMCIConnection, *, transport: RESTTransport | None = None) -> None:
        """Initialize the client.

        Args:
            connection: Host, port, credentials and TLS settings
            transport: Optional pre-built transport (mainly for tests)
        """
        self.connection = connection
        self._transport = transport or RESTTransport.from_connection(connection)
        self._runner = RestRunner(self._transport)
        self._issuer = CacheTokenIssuer(self._runner)
        self._retriever = PaginatedRetriever(self._runner)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch from a registered endpoint.

        Raises:
            ValueError: If endpoint_id is not registered
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def get_resource(self, query: ResourceQuery) -> ResourceResponse:
        """Run a resource query in a single request."""
        return await self.fetch("resource", {"query": query})

    async def get_cache_token(self, query: ResourceQuery) -> CacheToken:
        """Cache the result set of ``query`` on the server and return its token."""
        return await self._issuer.issue(query)

    async def get_cached_resources(
        self,
        token: CacheToken,
        resource_name: str,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> list[NormalizedRecord]:
        """Page through every record behind ``token``."""
        return await self._retriever.retrieve_all(
            token.cache_token,
            resource_name,
            token.record_count,
            increment,
            concurrency=concurrency,
            cancel_event=cancel_event,
        )

    def cache_retrieval(self, query: ResourceQuery) -> CacheRetrieval:
        """Start a stateful two-phase retrieval for ``query``."""
        return CacheRetrieval(query, self._issuer, self._retriever)

    async def get_all_resources(
        self,
        query: ResourceQuery,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> list[NormalizedRecord]:
        """Issue a cache token for ``query`` and collect every matching record."""
        result = await self.cache_retrieval(query).run(
            increment, concurrency=concurrency, cancel_event=cancel_event
        )
        return result.records

    async def list_plexes(self) -> list[NormalizedRecord]:
        """List the CICSplexes known to the server; none found gives []."""
        try:
            response = await self.get_resource(ResourceQuery(name=CICS_CICSPLEX))
        except NotFoundError:
            logger.debug("no_plexes_found", extra={"host": self.connection.host})
            return []
        return response.records

    async def get_regions(
        self,
        cics_plex: str | None = None,
        region_name: str | None = None,
        *,
        managed: bool = True,
    ) -> list[NormalizedRecord]:
        """List regions, managed ones from a plex or a standalone SMSS region.

        A plex or region the server does not know gives [].
        """
        query = ResourceQuery(
            name=CICS_MANAGED_REGION if managed else CICS_REGION,
            cics_plex=cics_plex,
            region_name=region_name,
        )
        try:
            response = await self.get_resource(query)
        except NotFoundError:
            logger.debug(
                "no_regions_found",
                extra={"cics_plex": cics_plex, "region_name": region_name},
            )
            return []
        return response.records

    async def is_region_group(self, cics_plex: str, region_name: str) -> bool:
        """Whether ``region_name`` names a region group within ``cics_plex``."""
        query = ResourceQuery(
            name=CICS_REGION_GROUP,
            cics_plex=cics_plex,
            region_name=region_name,
            criteria=f"GROUP={region_name}",
        )
        try:
            response = await self.get_resource(query)
        except NotFoundError:
            return False
        return response.summary.record_count > 0

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> CMCIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
