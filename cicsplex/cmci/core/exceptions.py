"""Custom exception hierarchy."""

from __future__ import annotations

from ..config import RESOURCE_LIMIT_MARKER, RESPONSE_NODATA


class CMCIError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(CMCIError):
    """Required request parameter missing or blank.

    Raised before any network call is made.
    """

    pass


class RemoteError(CMCIError):
    """Error reported by the CMCI server or the transport beneath it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        api_response1: int | None = None,
        api_response2: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.api_response1 = api_response1
        self.api_response2 = api_response2


class NotFoundError(RemoteError):
    """Server found no matching plex, region or resource instances."""

    pass


class ResourceLimitExceeded(RemoteError):
    """Query matched more records than the server is willing to enumerate.

    Callers should prompt for a narrower criteria filter.
    """

    pass


class RetrievalCancelled(CMCIError):
    """Paginated retrieval was aborted at a window boundary."""

    pass


def classify_remote_error(
    message: str,
    status_code: int | None = None,
    api_response1: int | None = None,
    api_response2: int | None = None,
) -> RemoteError:
    """Build the most specific RemoteError for a failed CMCI exchange.

    Args:
        message: Server or transport message
        status_code: HTTP status, None for transport failures
        api_response1: CMCI api_response1 code from the result summary
        api_response2: CMCI api_response2 code from the result summary

    Returns:
        NotFoundError, ResourceLimitExceeded or RemoteError
    """
    if RESOURCE_LIMIT_MARKER in message.lower():
        cls: type[RemoteError] = ResourceLimitExceeded
    elif status_code == 404 or api_response1 == RESPONSE_NODATA:
        cls = NotFoundError
    else:
        cls = RemoteError
    return cls(
        message,
        status_code=status_code,
        api_response1=api_response1,
        api_response2=api_response2,
    )
