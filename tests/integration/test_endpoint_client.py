"""Integration tests for EndpointClient — fallback and error handling."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from wallet_factory.errors import ConfigurationError, DelegatedProviderError
from wallet_factory.providers.base import EndpointClient

_SESSION = "wallet_factory.providers.base.aiohttp.ClientSession"
_CONNECTOR = "wallet_factory.providers.base.aiohttp.TCPConnector"


@pytest.fixture()
def client() -> EndpointClient:
    return EndpointClient(
        ["https://rpc1.example.com", "https://rpc2.example.com", "https://rpc3.example.com"],
        timeout=5,
    )


def _response(data: object, status: int = 200) -> AsyncMock:
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=data)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _mock_session(side_effect: list | Exception) -> AsyncMock:
    session = AsyncMock()
    session.get = MagicMock(side_effect=side_effect)
    session.post = MagicMock(side_effect=side_effect)
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)
    return session


class TestRequest:
    def test_requires_endpoints(self) -> None:
        with pytest.raises(ConfigurationError):
            EndpointClient([])

    @pytest.mark.asyncio
    async def test_get_joins_path(self, client: EndpointClient) -> None:
        session = _mock_session([_response(812345)])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            result = await client.request("/blocks/tip/height")

        assert result == 812345
        assert session.get.call_args.args[0] == "https://rpc1.example.com/blocks/tip/height"

    @pytest.mark.asyncio
    async def test_post_when_payload_given(self, client: EndpointClient) -> None:
        session = _mock_session([_response({"ok": True})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            await client.request("addresses", payload={"addresses": ["a"]})

        session.get.assert_not_called()
        assert session.post.call_args.kwargs["json"] == {"addresses": ["a"]}

    @pytest.mark.asyncio
    async def test_fallback_on_connection_error(self, client: EndpointClient) -> None:
        session = _mock_session([ConnectionError("first endpoint down"), _response({"ok": 1})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            result = await client.request()

        assert result == {"ok": 1}
        assert client.current_index == 1
        assert session.get.call_args.args[0] == "https://rpc2.example.com"

    @pytest.mark.asyncio
    async def test_sticky_endpoint_after_switch(self, client: EndpointClient) -> None:
        client.current_index = 2
        session = _mock_session([_response({})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            await client.request()

        assert session.get.call_args.args[0] == "https://rpc3.example.com"

    @pytest.mark.asyncio
    async def test_http_error_falls_back(self, client: EndpointClient) -> None:
        session = _mock_session([_response({}, status=503), _response({"ok": 2})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            result = await client.request()

        assert result == {"ok": 2}

    @pytest.mark.asyncio
    async def test_all_endpoints_fail(self, client: EndpointClient) -> None:
        session = _mock_session(ConnectionError("down"))

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            with pytest.raises(DelegatedProviderError, match="All endpoints failed"):
                await client.request()

        assert session.get.call_count == 3
        assert client.current_index == 0


class TestRpcCall:
    @pytest.mark.asyncio
    async def test_unwraps_result(self, client: EndpointClient) -> None:
        session = _mock_session([_response({"jsonrpc": "2.0", "id": 1, "result": "0x10"})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            result = await client.rpc_call("eth_blockNumber", [])

        assert result == "0x10"
        payload = session.post.call_args.kwargs["json"]
        assert payload["method"] == "eth_blockNumber"
        assert payload["jsonrpc"] == "2.0"

    @pytest.mark.asyncio
    async def test_rpc_error_raises(self, client: EndpointClient) -> None:
        error = {"jsonrpc": "2.0", "error": {"code": -32000, "message": "bad"}}
        session = _mock_session([_response(error), _response(error), _response(error)])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            with pytest.raises(DelegatedProviderError, match="RPC Error"):
                await client.rpc_call("test_method", [])

    @pytest.mark.asyncio
    async def test_rpc_error_on_one_endpoint_falls_back(self, client: EndpointClient) -> None:
        error = {"jsonrpc": "2.0", "error": {"code": -32000, "message": "bad"}}
        session = _mock_session([_response(error), _response({"result": 7})])

        with patch(_SESSION, return_value=session), patch(_CONNECTOR):
            assert await client.rpc_call("getBlockHeight", []) == 7
