"""Synchronous API handler -- mirrors :class:`~apihandler.client.async_client.AsyncApiHandler`.

:class:`SyncApiHandler` offers the same GET/POST/cache surface backed by a
blocking :class:`httpx.Client`. One instance may be shared between
threads: ``httpx.Client`` is thread-safe and the
:class:`~apihandler.cache.ResponseCache` guards its mapping with a lock.
As with the async handler, concurrent misses for one URL are not
coalesced.
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


class SyncApiHandler:
    """Blocking GET/POST helper with per-URL response caching.

    Args:
        config: Transport and cache settings.
        transport: Optional ``httpx`` transport, e.g.
            :class:`httpx.MockTransport` in tests.
        cache: Optional pre-built cache. Ignored when caching is disabled.

    Example::

        with SyncApiHandler() as api:
            body = api.get("https://api.example.com/users")
    """

    def __init__(
        self,
        config: Optional[HandlerConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        cache: Optional[ResponseCache] = None,
    ) -> None:
        self._config = config or HandlerConfig()
        self._cache: Optional[ResponseCache] = None
        if self._config.cache.enabled:
            self._cache = cache if cache is not None else ResponseCache(
                ttl_seconds=self._config.cache.ttl_seconds
            )
        self._client: Optional[httpx.Client] = httpx.Client(
            transport=transport,
            **self._config.request.client_kwargs(),
        )

    @property
    def cache(self) -> Optional[ResponseCache]:
        return self._cache

    @property
    def closed(self) -> bool:
        return self._client is None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncApiHandler:
        self._require_client()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport. Safe to call more than once."""
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def get(self, url: str, use_cache: bool = True) -> str:
        """Send a GET request. See :meth:`AsyncApiHandler.get`."""
        output = get_output()
        if use_cache and self._cache is not None:
            cached = self._cache.lookup(url)
            if cached is not None:
                output.debug(f"Cache hit: GET {url}")
                return cached
            output.debug(f"Cache miss: GET {url}")

        content = self._send("GET", url)

        if self._cache is not None:
            self._cache.store(url, content)
            output.debug(f"Cached: GET {url}")
        return content

    def post(self, url: str, payload: Any) -> str:
        """Send *payload* as a JSON POST body. See :meth:`AsyncApiHandler.post`."""
        body = encode_json_payload(payload)
        return self._send(
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

    def _require_client(self) -> httpx.Client:
        if self._client is None:
            raise InvalidUsageError("SyncApiHandler is closed")
        return self._client

    def _send(self, method: str, url: str, **kwargs: Any) -> str:
        client = self._require_client()
        try:
            # Body is read eagerly; the connection goes back to the pool here.
            response = client.request(method, url, **kwargs)
            return read_text(response, url)
        except TransportError as exc:
            get_output().error(f"Request error: {exc}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = wrap_transport_error(exc, url)
            get_output().error(f"Request error: {error}")
            raise error from exc
