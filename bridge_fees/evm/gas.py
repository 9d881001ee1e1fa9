"""Gas price utilities for the EVM destination chains."""

import logging

from bridge_fees.common.models import ChainKind
from bridge_fees.common.rpc import rpc_call
from bridge_fees.config import settings

logger = logging.getLogger(__name__)

EVM_CHAINS = (ChainKind.BASE, ChainKind.ARB)


class NotEvmChainError(ValueError):
    """Raised when a chain other than Base or Arbitrum reaches an EVM-only function."""

    def __init__(self, chain: ChainKind, func: str):
        self.chain = chain
        super().__init__(
            f"Invalid chain {chain.value!r} was provided to `{func}` "
            "(only Base and Arb are supported)"
        )


def validate_evm_chain(chain: ChainKind, func: str) -> None:
    """Validate that the chain is one of the supported EVM chains.

    Args:
        chain: The chain to validate
        func: Name of the calling function, used in the error message

    Raises:
        NotEvmChainError: If the chain is not Base or Arbitrum
    """
    if chain not in EVM_CHAINS:
        raise NotEvmChainError(chain, func)


def _get_rpc_url(chain: ChainKind) -> str:
    validate_evm_chain(chain, "get_gas_price")

    if chain == ChainKind.BASE:
        return settings.BASE_RPC_URL
    return settings.ARB_RPC_URL


async def get_gas_price(chain: ChainKind) -> int:
    """Get current gas price for an EVM chain in wei.

    Uses the eth_gasPrice RPC method.

    Args:
        chain: The EVM chain to get gas price for

    Returns:
        Gas price in wei

    Raises:
        NotEvmChainError: If the chain is not Base or Arbitrum
        RpcError: If the node answers with an error
        httpx.HTTPError: If the request fails
    """
    rpc_url = _get_rpc_url(chain)
    result = await rpc_call(rpc_url, "eth_gasPrice", [])

    # Result is hex string like "0x3b9aca00"
    gas_price = int(result, 16)
    logger.debug(f"{chain.label} gas price: {gas_price} wei")
    return gas_price
