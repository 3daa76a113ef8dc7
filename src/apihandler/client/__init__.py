"""HTTP handlers for apihandler.

Provides asynchronous and synchronous handlers that wrap :mod:`httpx`
with GET/POST helpers and a per-URL, fixed-TTL GET response cache.

Classes:
    :class:`AsyncApiHandler` -- non-blocking handler backed by :class:`httpx.AsyncClient`.
    :class:`SyncApiHandler` -- blocking handler backed by :class:`httpx.Client`.

Both handlers own their transport and must be closed, either explicitly
or by using them as (async) context managers.

Example::

    from apihandler.client import AsyncApiHandler

    async with AsyncApiHandler() as api:
        body = await api.get("https://api.example.com/users")
"""

from apihandler.client.async_client import AsyncApiHandler
from apihandler.client.sync_client import SyncApiHandler

__all__ = ["AsyncApiHandler", "SyncApiHandler"]
