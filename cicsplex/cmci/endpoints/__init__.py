"""CMCI REST endpoint registry."""

from __future__ import annotations

from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .cache_token import SPEC as CacheTokenSpec  # noqa: N811
from .cache_token import Adapter as CacheTokenAdapter
from .resource import SPEC as ResourceSpec  # noqa: N811
from .resource import Adapter as ResourceAdapter
from .result_cache import SPEC as ResultCacheSpec  # noqa: N811
from .result_cache import Adapter as ResultCacheAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "resource": (ResourceSpec, ResourceAdapter),
    "cache_token": (CacheTokenSpec, CacheTokenAdapter),
    "result_cache": (ResultCacheSpec, ResultCacheAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "resource", "result_cache")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = ["get_endpoint_adapter", "get_endpoint_spec"]
