"""Request/response helpers shared by the sync and async handlers.

:func:`encode_json_payload` turns a POST payload into the UTF-8 JSON body,
:func:`read_text` turns an :class:`httpx.Response` into its body text or a
:class:`~apihandler.exceptions.HttpStatusError`, and
:func:`wrap_transport_error` maps :mod:`httpx` exceptions onto the
:mod:`apihandler.exceptions` hierarchy.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import BaseModel

from apihandler.exceptions import (
    ConnectionError_,
    HttpStatusError,
    SerializationError,
    TransportError,
)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def encode_json_payload(payload: Any) -> bytes:
    """Serialise *payload* to compact UTF-8 JSON.

    Dicts become objects, sequences become arrays and primitives map
    directly. Pydantic models are dumped in JSON mode first.

    Raises:
        SerializationError: If the payload has no JSON representation.
    """
    try:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        # PydanticSerializationError is a ValueError.
        raise SerializationError(f"Payload is not JSON-serialisable: {exc}") from exc
    return text.encode("utf-8")


def read_text(response: httpx.Response, url: str) -> str:
    """Return the body text of a 2xx *response*.

    The body is decoded using the response charset, falling back to the
    ``httpx`` default. Error bodies are never parsed.

    Raises:
        HttpStatusError: If the status is outside the 2xx range.
    """
    if not response.is_success:
        raise HttpStatusError(response.status_code, url, response.reason_phrase or "")
    return response.text


def wrap_transport_error(exc: Exception, url: str) -> TransportError:
    """Map an :mod:`httpx` exception onto :class:`TransportError`."""
    if isinstance(exc, httpx.RequestError):
        return ConnectionError_(f"Request to {url} failed: {exc}", url=url)
    return TransportError(f"Request to {url} failed: {exc}", url=url)
