"""Asynchronous API handler with a time-based GET cache.

This module provides :class:`AsyncApiHandler`, the primary client of the
package. It wraps one long-lived :class:`httpx.AsyncClient` and layers a
:class:`~apihandler.cache.ResponseCache` in front of GET requests:

- **GET** -- served from the cache while the entry for the exact URL is
  fresh; otherwise fetched, stored and returned.
- **POST** -- JSON body, never cached.
- **Errors** -- transport failures and non-2xx statuses raise
  :class:`~apihandler.exceptions.TransportError` after a diagnostic line on
  stderr. The cache is never modified on an error path and nothing is
  retried.

Concurrent GETs for the same URL are not coalesced: each miss issues its
own request and the last one to finish owns the entry.

See Also:
    :class:`~apihandler.client.sync_client.SyncApiHandler` for the
    blocking equivalent.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from apihandler.cache import ResponseCache
from apihandler.client.response import (
    JSON_CONTENT_TYPE,
    encode_json_payload,
    read_text,
    wrap_transport_error,
)
from apihandler.exceptions import InvalidUsageError, TransportError
from apihandler.models import HandlerConfig
from apihandler.output import get_output


class AsyncApiHandler:
    """Asynchronous GET/POST helper with per-URL response caching.

    Owns an :class:`httpx.AsyncClient` that must be released with
    :meth:`aclose` or by using the handler as an async context manager.

    Args:
        config: Transport and cache settings. Defaults to
            ``HandlerConfig()`` (``httpx`` default timeout, 60 s cache).
        transport: Optional ``httpx`` transport, e.g.
            :class:`httpx.MockTransport` in tests.
        cache: Optional pre-built cache. When omitted, one is created
            from ``config.cache``. Ignored when ``config.cache.enabled`` is
            false.

    Example::

        async with AsyncApiHandler() as api:
            users = await api.get("https://api.example.com/users")
            created = await api.post("https://api.example.com/users", {"name": "foo"})
    """

    def __init__(
        self,
        config: Optional[HandlerConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cache: Optional[ResponseCache] = None,
    ) -> None:
        self._config = config or HandlerConfig()
        self._cache: Optional[ResponseCache] = None
        if self._config.cache.enabled:
            self._cache = cache if cache is not None else ResponseCache(
                ttl_seconds=self._config.cache.ttl_seconds
            )
        self._client: Optional[httpx.AsyncClient] = httpx.AsyncClient(
            transport=transport,
            **self._config.request.client_kwargs(),
        )

    @property
    def cache(self) -> Optional[ResponseCache]:
        """The response cache, or ``None`` when caching is disabled."""
        return self._cache

    @property
    def closed(self) -> bool:
        return self._client is None

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncApiHandler:
        self._require_client()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport. Safe to call more than once."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    async def get(self, url: str, use_cache: bool = True) -> str:
        """Send a GET request, serving fresh cached bodies when allowed.

        With ``use_cache=False`` the cache is not read, but a successful
        response still replaces the cached entry.

        Args:
            url: Absolute URL. Used verbatim as the cache key.
            use_cache: Whether a fresh cached body may be returned.

        Returns:
            The response body text.

        Raises:
            HttpStatusError: On a non-2xx status.
            ConnectionError_: On connection, DNS or timeout failures.
        """
        output = get_output()
        if use_cache and self._cache is not None:
            cached = self._cache.lookup(url)
            if cached is not None:
                output.debug(f"Cache hit: GET {url}")
                return cached
            output.debug(f"Cache miss: GET {url}")

        content = await self._send("GET", url)

        if self._cache is not None:
            self._cache.store(url, content)
            output.debug(f"Cached: GET {url}")
        return content

    async def post(self, url: str, payload: Any) -> str:
        """Send *payload* as a JSON POST body. Responses are never cached.

        Args:
            url: Absolute URL.
            payload: JSON-serialisable object or Pydantic model.

        Returns:
            The response body text.

        Raises:
            SerializationError: If *payload* cannot be encoded; no request
                is sent.
            HttpStatusError: On a non-2xx status.
            ConnectionError_: On connection, DNS or timeout failures.
        """
        body = encode_json_payload(payload)
        return await self._send(
            "POST",
            url,
            content=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    def clear_cache(self) -> None:
        """Remove every cached response."""
        if self._cache is not None:
            self._cache.clear()

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise InvalidUsageError("AsyncApiHandler is closed")
        return self._client

    async def _send(self, method: str, url: str, **kwargs: Any) -> str:
        """Perform one request and return its body text or raise."""
        client = self._require_client()
        try:
            response = await client.request(method, url, **kwargs)
            return read_text(response, url)
        except TransportError as exc:
            get_output().error(f"Request error: {exc}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = wrap_transport_error(exc, url)
            get_output().error(f"Request error: {error}")
            raise error from exc
