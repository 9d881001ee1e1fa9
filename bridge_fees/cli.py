import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

import sentry_sdk

from bridge_fees.common.models import ChainKind, FeeEstimate
from bridge_fees.config import settings
from bridge_fees.fees.calculators import get_evm_fees, get_near_fees, get_solana_fees
from bridge_fees.pricing.coingecko import CoinGeckoClient

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT = 1000
DEFAULT_CURRENCY = "usd"

# Ethereum is skipped here, it is only reported when requested explicitly
ALL_CHAINS = (ChainKind.NEAR, ChainKind.BASE, ChainKind.ARB, ChainKind.SOL)

ETH_NOT_SUPPORTED = "Fee calculation for Ethereum chain is not supported yet"


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def chain_kind(value: str) -> ChainKind:
    try:
        return ChainKind.parse(value)
    except ValueError:
        choices = ", ".join(chain.value for chain in ChainKind)
        raise argparse.ArgumentTypeError(
            f"invalid chain: {value!r} (choose from {choices})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bridge-fees",
        description=(
            "Estimate the gas burned by bridge transfers to NEAR, Base, "
            "Arbitrum and Solana, and its value in a chosen currency."
        ),
    )
    parser.add_argument(
        "-d",
        "--destination-chain",
        type=chain_kind,
        metavar="{" + ",".join(chain.value for chain in ChainKind) + "}",
        help=(
            "Destination chain (e.g during NEAR to Solana transfer, the "
            "destination chain is Solana). Don't specify this argument if you "
            "want to calculate fees for all chains"
        ),
    )
    parser.add_argument(
        "-a",
        "--amount",
        type=non_negative_int,
        default=DEFAULT_AMOUNT,
        help=f"Amount of transfers (default: {DEFAULT_AMOUNT})",
    )
    parser.add_argument(
        "-c",
        "--currency",
        default=DEFAULT_CURRENCY,
        help=f"Currency to display fees in (default: {DEFAULT_CURRENCY})",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


async def estimate_fees(
    chain: ChainKind, amount: int, currency: str, price_client: CoinGeckoClient
) -> FeeEstimate:
    if chain == ChainKind.NEAR:
        return await get_near_fees(amount, currency, price_client)
    if chain == ChainKind.SOL:
        return await get_solana_fees(amount, currency, price_client)
    return await get_evm_fees(chain, amount, currency, price_client)


async def run(
    destination_chain: ChainKind | None,
    amount: int = DEFAULT_AMOUNT,
    currency: str = DEFAULT_CURRENCY,
) -> list[FeeEstimate]:
    """Print one fee line per requested chain, querying chains one at a time.

    Any network or parsing failure propagates and stops the run; lines for
    chains that already finished stay printed.
    """
    if destination_chain == ChainKind.ETH:
        print(ETH_NOT_SUPPORTED, file=sys.stderr)
        return []

    chains = ALL_CHAINS if destination_chain is None else (destination_chain,)
    price_client = CoinGeckoClient()

    estimates = []
    for chain in chains:
        logger.info(f"Estimating fees for {amount} transfers to {chain.label}")
        estimate = await estimate_fees(chain, amount, currency, price_client)
        print(estimate.describe())
        estimates.append(estimate)

    return estimates


def _release() -> str:
    try:
        return f"bridge-fees@{version('bridge-fees')}"
    except PackageNotFoundError:
        return "bridge-fees@unknown"


def setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging()
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        release=_release(),
    )

    asyncio.run(run(args.destination_chain, args.amount, args.currency))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
