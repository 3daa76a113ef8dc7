"""Tests for the shared request/response helpers."""

from __future__ import annotations

import httpx
import pytest
from pydantic import BaseModel, ConfigDict

from apihandler.client.response import encode_json_payload, read_text, wrap_transport_error
from apihandler.exceptions import (
    ConnectionError_,
    HttpStatusError,
    SerializationError,
    TransportError,
)


def _make_response(status_code: int = 200, text: str = "") -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        text=text,
        request=httpx.Request("GET", "https://api.example.com/test"),
    )


class TestEncodeJsonPayload:
    def test_object(self) -> None:
        assert encode_json_payload({"name": "foo"}) == b'{"name":"foo"}'

    def test_primitives(self) -> None:
        assert encode_json_payload("text") == b'"text"'
        assert encode_json_payload(None) == b"null"
        assert encode_json_payload(False) == b"false"

    def test_tuple_becomes_array(self) -> None:
        assert encode_json_payload((1, 2)) == b"[1,2]"

    def test_non_ascii_kept_as_utf8(self) -> None:
        assert encode_json_payload({"city": "Zürich"}) == '{"city":"Zürich"}'.encode("utf-8")

    def test_unsupported_type(self) -> None:
        with pytest.raises(SerializationError):
            encode_json_payload({"items": {1, 2}})

    def test_unserialisable_model_field(self) -> None:
        class Opaque:
            pass

        class Item(BaseModel):
            model_config = ConfigDict(arbitrary_types_allowed=True)

            thing: Opaque

        with pytest.raises(SerializationError):
            encode_json_payload(Item(thing=Opaque()))

    def test_too_deeply_nested(self) -> None:
        payload: list = []
        for _ in range(100_000):
            payload = [payload]
        with pytest.raises(SerializationError):
            encode_json_payload(payload)


class TestReadText:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_returns_text(self, status: int) -> None:
        body = "" if status == 204 else "ok"
        assert read_text(_make_response(status, body), "https://api.example.com/test") == body

    @pytest.mark.parametrize("status", [301, 400, 401, 404, 500, 503])
    def test_non_2xx_raises(self, status: int) -> None:
        with pytest.raises(HttpStatusError) as exc_info:
            read_text(_make_response(status, "error body"), "https://api.example.com/test")
        assert exc_info.value.status_code == status
        assert "error body" not in str(exc_info.value)


class TestWrapTransportError:
    def test_request_error_becomes_connection_error(self) -> None:
        exc = httpx.ConnectTimeout("slow")
        wrapped = wrap_transport_error(exc, "http://x/a")
        assert isinstance(wrapped, ConnectionError_)
        assert wrapped.url == "http://x/a"

    def test_invalid_url_becomes_transport_error(self) -> None:
        wrapped = wrap_transport_error(httpx.InvalidURL("bad"), "::bad")
        assert type(wrapped) is TransportError
