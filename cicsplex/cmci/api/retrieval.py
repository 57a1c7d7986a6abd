"""Two-phase result cache retrieval.

Architecture:
    CacheTokenIssuer sends a SUMMONLY/NODISCARD query and gets back a cache
    token plus the total record count. PaginatedRetriever then pages through
    that token with CICSResultCache windows, normalizing every window. A
    CacheRetrieval ties the two together for one query and tracks its state
    (UNISSUED -> TOKEN_ISSUED -> PAGINATING -> COMPLETE, or FAILED from any
    non-terminal state).

    A token is consumed by exactly one retrieval and never reused.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import DEFAULT_INCREMENT
from ..core.enums import RetrievalState
from ..core.exceptions import CMCIError
from ..endpoints import cache_token, result_cache
from ..models import CacheToken, NormalizedRecord, RecordWindow, ResourceQuery, RetrievalResult
from ..runtime.chunking import WindowExecutor, WindowPlanner, WindowResult
from ..runtime.rest import RestRunner

logger = logging.getLogger(__name__)


class CacheTokenIssuer:
    """Issues cache tokens for resource queries."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def issue(self, query: ResourceQuery) -> CacheToken:
        """Run ``query`` server side and return its cache token.

        Raises:
            ValidationError: If the resource name is missing or blank
            NotFoundError: If the server has no matching plex, region or records
            RemoteError: For any other failure
        """
        return await self._runner.run(
            spec=cache_token.SPEC,
            adapter=cache_token.Adapter(),
            params={"query": query},
        )


class PaginatedRetriever:
    """Collects every record behind a cache token, one window at a time."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def retrieve_all(
        self,
        cache_token: str,
        resource_name: str,
        record_count: int,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> list[NormalizedRecord]:
        """Fetch ``ceil(record_count / increment)`` windows and concatenate them.

        Args:
            cache_token: Token returned by CacheTokenIssuer
            resource_name: Resource table the token was issued for
            record_count: Record count returned with the token
            increment: Maximum records per window
            concurrency: Windows fetched at once; output order is unaffected
            cancel_event: Set to stop at the next window boundary

        Returns:
            Records in server order. Empty, with no requests made, when
            record_count is 0.

        Raises:
            RemoteError: As soon as any window fails
            RetrievalCancelled: If cancel_event is set mid-retrieval
        """
        result = await self._page(
            cache_token,
            resource_name,
            record_count,
            increment,
            concurrency=concurrency,
            cancel_event=cancel_event,
        )
        return result.records

    async def collect(
        self,
        token: CacheToken,
        resource_name: str,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> RetrievalResult:
        """Like retrieve_all, but keeps the token and window count with the records."""
        result = await self._page(
            token.cache_token,
            resource_name,
            token.record_count,
            increment,
            concurrency=concurrency,
            cancel_event=cancel_event,
        )
        return RetrievalResult(
            cache_token=token.cache_token,
            record_count=token.record_count,
            records=result.records,
            windows_used=result.windows_used,
        )

    async def _page(
        self,
        cache_token: str,
        resource_name: str,
        record_count: int,
        increment: int,
        *,
        concurrency: int,
        cancel_event: asyncio.Event | None,
    ) -> WindowResult:
        plans = WindowPlanner(increment).plan(record_count, resource_name=resource_name)
        if not plans:
            return WindowResult()

        async def fetch_window(window: RecordWindow) -> list[NormalizedRecord]:
            return await self._runner.run(
                spec=result_cache.SPEC,
                adapter=result_cache.Adapter(),
                params={
                    "cache_token": cache_token,
                    "resource_name": resource_name,
                    "record_count": record_count,
                    "window": window,
                },
            )

        return await WindowExecutor(concurrency).execute(
            plans=plans,
            record_count=record_count,
            fetch_window=fetch_window,
            resource_name=resource_name,
            cancel_event=cancel_event,
        )


class CacheRetrieval:
    """One query taken through token issuance and pagination."""

    def __init__(
        self,
        query: ResourceQuery,
        issuer: CacheTokenIssuer,
        retriever: PaginatedRetriever,
    ) -> None:
        self.query = query
        self.state = RetrievalState.UNISSUED
        self.token: CacheToken | None = None
        self._issuer = issuer
        self._retriever = retriever

    def _transition(self, state: RetrievalState) -> None:
        logger.debug(
            "retrieval_state_changed",
            extra={"resource_name": self.query.name, "from": self.state.value, "to": state.value},
        )
        self.state = state

    async def issue(self) -> CacheToken:
        """Obtain the cache token. Only valid once, from UNISSUED."""
        if self.state is not RetrievalState.UNISSUED:
            raise CMCIError(f"Cannot issue a cache token from state {self.state.value}")
        try:
            self.token = await self._issuer.issue(self.query)
        except BaseException:
            self._transition(RetrievalState.FAILED)
            raise
        self._transition(RetrievalState.TOKEN_ISSUED)
        return self.token

    async def retrieve(
        self,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> RetrievalResult:
        """Page through the issued token. Only valid once, from TOKEN_ISSUED."""
        if self.state is not RetrievalState.TOKEN_ISSUED or self.token is None:
            raise CMCIError(f"Cannot retrieve records from state {self.state.value}")
        token = self.token
        self._transition(RetrievalState.PAGINATING)
        try:
            result = await self._retriever.collect(
                token,
                self.query.name or "",
                increment,
                concurrency=concurrency,
                cancel_event=cancel_event,
            )
        except BaseException:
            self._transition(RetrievalState.FAILED)
            raise
        self._transition(RetrievalState.COMPLETE)
        return result

    async def run(
        self,
        increment: int = DEFAULT_INCREMENT,
        *,
        concurrency: int = 1,
        cancel_event: asyncio.Event | None = None,
    ) -> RetrievalResult:
        """Issue the token and retrieve every record."""
        await self.issue()
        return await self.retrieve(increment, concurrency=concurrency, cancel_event=cancel_event)
