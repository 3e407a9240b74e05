# tripclient/core/client_lifecycle.py
from tripclient.core.http_client import ApiClient
from tripclient.core.identity_cache import IdentityCache
from typing import Optional

_api_client: Optional[ApiClient] = None
_identity_cache: Optional[IdentityCache] = None


def init_api_client() -> ApiClient:
    """Initialize and return the shared ApiClient (for startup)."""
    global _api_client

    if _api_client is None:
        _api_client = ApiClient()

    return _api_client


async def get_api_client() -> ApiClient:
    """FastAPI dependency injection for the shared ApiClient."""
    return init_api_client()


def get_identity_cache() -> IdentityCache:
    """FastAPI dependency injection for the identity mapping cache."""
    global _identity_cache

    if _identity_cache is None:
        _identity_cache = IdentityCache()

    return _identity_cache


async def close_api_client():
    """Close the http connection pool on application shutdown."""
    global _api_client, _identity_cache
    if _api_client:
        await _api_client.aclose()
        _api_client = None
    if _identity_cache is not None:
        _identity_cache.clear()
        _identity_cache = None
