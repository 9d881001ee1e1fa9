"""Gas price query for NEAR mainnet."""

import logging

from bridge_fees.common.rpc import rpc_call
from bridge_fees.config import settings

logger = logging.getLogger(__name__)


async def get_near_gas_price() -> int:
    """Get the current NEAR gas price in yoctoNEAR per gas unit.

    Uses the ``gas_price`` RPC method with a null block id, which
    resolves to the latest block.
    """
    result = await rpc_call(settings.NEAR_RPC_URL, "gas_price", [None])
    # NEAR encodes u128 values as decimal strings
    gas_price = int(result["gas_price"])
    logger.debug(f"NEAR gas price: {gas_price} yoctoNEAR")
    return gas_price
