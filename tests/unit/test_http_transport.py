"""Tests for HttpTransport against an httpx.MockTransport."""

import json

import httpx
import pytest

from src.lr_common.errors import EnvelopeDecodeError, TransportError
from src.lr_common.response import error_response, success_response
from src.lr_fetch.infrastructure.http_transport import HttpTransport


def _client(handler: httpx.MockTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=handler, base_url="http://ledger.test/api/v1")


class TestHttpTransport:
    async def test_posts_params_and_returns_data(self) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=success_response([{"id": "1"}]).model_dump())

        async with HttpTransport(client=_client(httpx.MockTransport(handler))) as transport:
            result = await transport("transactionsByEmployee", {"employeeId": "1"})

        assert result == [{"id": "1"}]
        assert seen == {
            "path": "/api/v1/transactionsByEmployee",
            "body": {"employeeId": "1"},
        }

    async def test_error_envelope_message_surfaces(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            body = error_response(2001, "Employee id cannot be empty").model_dump()
            return httpx.Response(422, json=body)

        transport = HttpTransport(client=_client(httpx.MockTransport(handler)))
        with pytest.raises(TransportError, match="Employee id cannot be empty") as exc_info:
            await transport("transactionsByEmployee", {"employeeId": ""})
        assert exc_info.value.code == 2001

    async def test_http_error_without_envelope(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="upstream down")

        transport = HttpTransport(client=_client(httpx.MockTransport(handler)))
        with pytest.raises(TransportError, match="HTTP 503") as exc_info:
            await transport("employees", {})
        assert exc_info.value.http_status == 503

    async def test_http_error_with_foreign_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"detail": "boom"})

        transport = HttpTransport(client=_client(httpx.MockTransport(handler)))
        with pytest.raises(TransportError, match="HTTP 500"):
            await transport("employees", {})

    async def test_non_json_success_is_decode_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        transport = HttpTransport(client=_client(httpx.MockTransport(handler)))
        with pytest.raises(EnvelopeDecodeError):
            await transport("employees", {})

    async def test_network_failure_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        transport = HttpTransport(client=_client(httpx.MockTransport(handler)))
        with pytest.raises(TransportError, match="Connection refused"):
            await transport("employees", {})

    async def test_injected_client_left_open(self) -> None:
        client = _client(httpx.MockTransport(lambda r: httpx.Response(200, json={"code": 0})))
        async with HttpTransport(client=client):
            pass
        assert client.is_closed is False
        await client.aclose()
