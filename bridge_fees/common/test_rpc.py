"""Tests for the shared JSON-RPC helper."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from bridge_fees.common.errors import RpcError
from bridge_fees.common.rpc import rpc_call

RPC_URL = "https://rpc.example.org"


@pytest.fixture
def mock_httpx_client():
    with patch("bridge_fees.common.rpc.httpx.AsyncClient") as mock:
        mock_client = AsyncMock()
        mock.return_value.__aenter__.return_value = mock_client
        yield mock_client


def _response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    return response


@pytest.mark.asyncio
async def test_rpc_call_returns_result(mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        {"jsonrpc": "2.0", "id": 1, "result": "0x3b9aca00"}
    )

    result = await rpc_call(RPC_URL, "eth_gasPrice", [])

    assert result == "0x3b9aca00"
    mock_httpx_client.post.assert_awaited_once_with(
        RPC_URL,
        json={"jsonrpc": "2.0", "id": 1, "method": "eth_gasPrice", "params": []},
    )


@pytest.mark.asyncio
async def test_rpc_call_raises_on_rpc_error(mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        {
            "jsonrpc": "2.0",
            "id": 1,
            "error": {"code": -32000, "message": "server error"},
        }
    )

    with pytest.raises(RpcError) as exc_info:
        await rpc_call(RPC_URL, "gas_price", [None])

    assert exc_info.value.method == "gas_price"
    assert exc_info.value.error == {"code": -32000, "message": "server error"}


@pytest.mark.asyncio
async def test_rpc_call_raises_without_result(mock_httpx_client):
    mock_httpx_client.post.return_value = _response({"jsonrpc": "2.0", "id": 1})

    with pytest.raises(RpcError):
        await rpc_call(RPC_URL, "eth_gasPrice", [])


@pytest.mark.asyncio
async def test_rpc_call_propagates_http_error(mock_httpx_client):
    mock_httpx_client.post.side_effect = httpx.HTTPError("Connection failed")

    with pytest.raises(httpx.HTTPError):
        await rpc_call(RPC_URL, "eth_gasPrice", [])


@pytest.mark.asyncio
async def test_rpc_call_propagates_bad_status(mock_httpx_client):
    response = _response({})
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "503 Service Unavailable",
        request=httpx.Request("POST", RPC_URL),
        response=httpx.Response(503),
    )
    mock_httpx_client.post.return_value = response

    with pytest.raises(httpx.HTTPStatusError):
        await rpc_call(RPC_URL, "eth_gasPrice", [])
