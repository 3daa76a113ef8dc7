"""In-memory response caching for apihandler.

This package provides :class:`ResponseCache`, a per-handler mapping from
URL to :class:`CacheEntry` with a fixed time-to-live. Only GET bodies are
stored; expiry is checked when an entry is read.

The cache is owned by :class:`~apihandler.client.AsyncApiHandler` (or
:class:`~apihandler.client.SyncApiHandler`) and is controlled by
:class:`~apihandler.models.CacheConfig`.
"""

from apihandler.cache.cache import CacheEntry, ResponseCache

__all__ = ["CacheEntry", "ResponseCache"]
