"""Async HTTP client for CMCI requests."""

from __future__ import annotations

import asyncio
import logging
from time import perf_counter
from typing import Any
from xml.parsers.expat import ExpatError

import aiohttp
import xmltodict
from yarl import URL

from ...core.exceptions import RemoteError, classify_remote_error

logger = logging.getLogger(__name__)


def _summary_codes(body: bytes) -> tuple[int | None, int | None]:
    """Best-effort read of api_response1/2 from an error body."""
    try:
        parsed = xmltodict.parse(body)
    except (ExpatError, ValueError):
        return None, None
    summary: Any = (parsed or {}).get("response", {}) or {}
    summary = summary.get("resultsummary") if isinstance(summary, dict) else None
    if not isinstance(summary, dict):
        return None, None

    def _code(key: str) -> int | None:
        value = summary.get(f"@{key}")
        return int(value) if value and value.isdigit() else None

    return _code("api_response1"), _code("api_response2")


class HTTPClient:
    """Async HTTP client wrapper.

    Paths handed to ``get`` are already percent-encoded by the URI builder and
    are sent verbatim.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        auth: aiohttp.BasicAuth | None = None,
        verify_ssl: bool = True,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.auth = auth
        self.verify_ssl = verify_ssl
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, auth=self.auth)
        return self._session

    def _url(self, path: str) -> URL:
        if self.base_url and not path.startswith("http"):
            path = f"{self.base_url.rstrip('/')}{path}"
        return URL(path, encoded=True)

    async def request(self, path: str, headers: dict[str, str] | None = None) -> tuple[int, str]:
        """GET request returning the HTTP status and the decoded body.

        Raises:
            NotFoundError: On 404 or a NODATA result summary
            ResourceLimitExceeded: When the server reports a resource limit
            RemoteError: On any other non-2xx status, transport failure or
                undecodable body
        """
        url = self._url(path)
        start = perf_counter()
        try:
            async with self.session.get(url, headers=headers, ssl=self.verify_ssl) as response:
                raw = await response.read()
                status = response.status
                reason = response.reason or ""
                charset = response.charset or "utf-8"
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(
                "cmci_transport_error",
                extra={"path": path, "error_type": type(e).__name__, "error_message": str(e)},
            )
            raise RemoteError(f"Request to {path} failed: {e}") from e

        logger.debug(
            "cmci_request",
            extra={
                "path": path,
                "status": status,
                "latency_ms": (perf_counter() - start) * 1000.0,
            },
        )

        if status >= 400:
            api_response1, api_response2 = _summary_codes(raw)
            message = f"{status} {reason}".strip()
            body = raw.decode(charset, errors="replace").strip()
            if body:
                message = f"{message}: {body}"
            raise classify_remote_error(
                message,
                status_code=status,
                api_response1=api_response1,
                api_response2=api_response2,
            )

        try:
            return status, raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            raise RemoteError(
                f"Response from {path} is not valid {charset}: {e}", status_code=status
            ) from e

    async def get(self, path: str, headers: dict[str, str] | None = None) -> str:
        """GET request returning the response body as text."""
        _, body = await self.request(path, headers=headers)
        return body

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
