"""Minimal JSON-RPC 2.0 client shared by the NEAR and EVM gas queries."""

import logging
from typing import Any

import httpx

from bridge_fees.common.errors import RpcError
from bridge_fees.config import settings

logger = logging.getLogger(__name__)


async def rpc_call(url: str, method: str, params: list | dict) -> Any:
    """Send a single JSON-RPC request and return its ``result``.

    Args:
        url: The RPC endpoint
        method: The JSON-RPC method name
        params: Positional or named parameters for the method

    Returns:
        The decoded ``result`` member of the response

    Raises:
        httpx.HTTPError: If the request fails or returns a non-2xx status
        RpcError: If the response carries an error or no result
    """
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT) as client:
        response = await client.post(
            url,
            json={
                "jsonrpc": "2.0",
                "id": 1,
                "method": method,
                "params": params,
            },
        )
        response.raise_for_status()
        data = response.json()

    if "error" in data:
        raise RpcError(url, method, data["error"])
    if "result" not in data:
        raise RpcError(url, method, "response has no result")

    logger.debug(f"{method} via {url} returned {data['result']}")
    return data["result"]
