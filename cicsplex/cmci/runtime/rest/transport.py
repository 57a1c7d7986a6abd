"""REST transport that turns CMCI XML bodies into compact trees."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...config import RESPONSE_OK
from ...core.codec import ATTRIBUTES_KEY, TEXT_KEY, cmci_xml_to_tree
from ...core.exceptions import classify_remote_error
from ...core.normalize import as_sequence
from ...models.connection import CMCIConnection
from .http_client import HTTPClient


def _int_or_none(value: Any) -> int | None:
    return int(value) if isinstance(value, str) and value.isdigit() else None


def _feedback_text(response: dict[str, Any]) -> str:
    """Flatten the ``errors`` block of a response into one line."""
    errors = response.get("errors")
    if not isinstance(errors, dict):
        return ""
    parts: list[str] = []
    if errors.get(TEXT_KEY):
        parts.append(str(errors[TEXT_KEY]).strip())
    for feedback in as_sequence(errors.get("feedback")):
        if not isinstance(feedback, dict):
            continue
        attributes = feedback.get(ATTRIBUTES_KEY, {})
        if attributes:
            parts.append(" ".join(f"{k}={v}" for k, v in attributes.items()))
        if feedback.get(TEXT_KEY):
            parts.append(str(feedback[TEXT_KEY]).strip())
    return "; ".join(p for p in parts if p)


def raise_for_summary(tree: dict[str, Any], status_code: int | None = None) -> None:
    """Raise when a 2xx response carries a non-OK CMCI result summary.

    Responses without a summary are left alone. Any ``errors`` feedback in the
    body is folded into the message before the error is classified.
    """
    response = tree.get("response")
    if not isinstance(response, dict):
        return
    summary = response.get("resultsummary")
    if not isinstance(summary, dict):
        return
    attributes = summary.get(ATTRIBUTES_KEY, {})
    api_response1 = _int_or_none(attributes.get("api_response1"))
    if api_response1 is None or api_response1 == RESPONSE_OK:
        return
    alt = attributes.get("api_response1_alt") or str(api_response1)
    message = f"CMCI request failed with {alt}"
    detail = _feedback_text(response)
    if detail:
        message = f"{message}: {detail}"
    raise classify_remote_error(
        message,
        status_code=status_code,
        api_response1=api_response1,
        api_response2=_int_or_none(attributes.get("api_response2")),
    )


class RESTTransport:
    """Thin wrapper over HTTPClient returning parsed response trees."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        *,
        auth: aiohttp.BasicAuth | None = None,
        verify_ssl: bool = True,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, auth=auth, verify_ssl=verify_ssl)

    @classmethod
    def from_connection(cls, connection: CMCIConnection) -> RESTTransport:
        """Build a transport from caller-owned connection settings."""
        auth = None
        if connection.user is not None:
            auth = aiohttp.BasicAuth(connection.user, connection.password or "")
        return cls(
            base_url=connection.base_url,
            timeout=connection.timeout,
            auth=auth,
            verify_ssl=connection.reject_unauthorized,
        )

    async def get(self, path: str, headers: dict[str, str] | None = None) -> dict[str, Any]:
        status, body = await self._http.request(path, headers=headers)
        tree = cmci_xml_to_tree(body)
        raise_for_summary(tree, status_code=status)
        return tree

    async def close(self) -> None:
        await self._http.close()
