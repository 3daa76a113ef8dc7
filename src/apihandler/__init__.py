"""apihandler -- small HTTP helpers with a time-based GET response cache.

The package wraps :mod:`httpx` with two request helpers (GET and POST) and
memoizes successful GET bodies per URL for a fixed time-to-live. Expiry is
evaluated lazily on read; there is no background eviction.

Typical usage::

    from apihandler import AsyncApiHandler

    async with AsyncApiHandler() as api:
        body = await api.get("https://api.example.com/status")
        again = await api.get("https://api.example.com/status")  # cache hit

Modules:
    client: :class:`AsyncApiHandler` and its blocking twin :class:`SyncApiHandler`.
    cache: :class:`ResponseCache` and :class:`CacheEntry`.
    models: Pydantic configuration models.
    exceptions: Exception hierarchy.
    output: stderr diagnostics with Rich support.
"""

from apihandler.cache import CacheEntry, ResponseCache
from apihandler.client import AsyncApiHandler, SyncApiHandler
from apihandler.exceptions import (
    ApiHandlerError,
    ConfigError,
    ConnectionError_,
    HttpStatusError,
    InvalidUsageError,
    SerializationError,
    TransportError,
)
from apihandler.models import CacheConfig, HandlerConfig, RequestConfig

__version__ = "0.1.0"

__all__ = [
    "ApiHandlerError",
    "AsyncApiHandler",
    "CacheConfig",
    "CacheEntry",
    "ConfigError",
    "ConnectionError_",
    "HandlerConfig",
    "HttpStatusError",
    "InvalidUsageError",
    "RequestConfig",
    "ResponseCache",
    "SerializationError",
    "SyncApiHandler",
    "TransportError",
]
