"""Per-chain estimates of the tokens burned by a batch of bridge transfers.

The ``*_burn`` helpers are pure and do all arithmetic on integers in the
chain's smallest unit, converting to the display unit with a single float
division at the end. The ``get_*_fees`` coroutines fetch the live inputs
(gas price, token price) and return a ``FeeEstimate``.
"""

from bridge_fees.common.models import ChainKind, FeeEstimate
from bridge_fees.evm.gas import get_gas_price, validate_evm_chain
from bridge_fees.fees.constants import (
    EVM_GAS,
    LAMPORTS_PER_SOL,
    NEAR_FIN_TRANSFER_DEPOSIT,
    NEAR_GAS,
    SOLANA_GAS,
    WEI_PER_ETH,
    YOCTO_NEAR_PER_NEAR,
)
from bridge_fees.near.gas import get_near_gas_price
from bridge_fees.pricing.coingecko import CoinGeckoClient


def near_burn(gas_price: int, amount: int) -> float:
    return (gas_price * NEAR_GAS + NEAR_FIN_TRANSFER_DEPOSIT) * amount / YOCTO_NEAR_PER_NEAR


def evm_burn(chain: ChainKind, gas_price: int, amount: int) -> float:
    validate_evm_chain(chain, "evm_burn")
    return gas_price * EVM_GAS[chain] * amount / WEI_PER_ETH


def solana_burn(amount: int) -> float:
    return SOLANA_GAS * amount / LAMPORTS_PER_SOL


async def get_near_fees(
    amount: int, currency: str, price_client: CoinGeckoClient | None = None
) -> FeeEstimate:
    price_client = price_client or CoinGeckoClient()

    burn = near_burn(await get_near_gas_price(), amount)
    price = await price_client.get_price(ChainKind.NEAR, currency)

    return FeeEstimate(
        chain=ChainKind.NEAR,
        amount=amount,
        burn=burn,
        fiat_amount=burn * price,
        currency=currency,
    )


async def get_evm_fees(
    chain: ChainKind,
    amount: int,
    currency: str,
    price_client: CoinGeckoClient | None = None,
) -> FeeEstimate:
    """Estimate fees for Base or Arbitrum.

    Raises:
        NotEvmChainError: If called with any other chain. This is a caller
            bug rather than bad user input.
    """
    validate_evm_chain(chain, "get_evm_fees")
    price_client = price_client or CoinGeckoClient()

    burn = evm_burn(chain, await get_gas_price(chain), amount)
    price = await price_client.get_price(chain, currency)

    return FeeEstimate(
        chain=chain,
        amount=amount,
        burn=burn,
        fiat_amount=burn * price,
        currency=currency,
    )


async def get_solana_fees(
    amount: int, currency: str, price_client: CoinGeckoClient | None = None
) -> FeeEstimate:
    price_client = price_client or CoinGeckoClient()

    # Solana fees are flat, so only the token price is fetched
    burn = solana_burn(amount)
    price = await price_client.get_price(ChainKind.SOL, currency)

    return FeeEstimate(
        chain=ChainKind.SOL,
        amount=amount,
        burn=burn,
        fiat_amount=burn * price,
        currency=currency,
    )
