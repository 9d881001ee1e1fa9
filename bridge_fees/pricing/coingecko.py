import logging

import httpx

from bridge_fees.common.errors import PriceNotFoundError
from bridge_fees.common.models import ChainKind
from bridge_fees.config import settings

logger = logging.getLogger(__name__)


class CoinGeckoClient:
    def __init__(self):
        self.base_url = (
            "https://api.coingecko.com/api/v3"
            if not settings.COINGECKO_API_KEY
            else "https://pro-api.coingecko.com/api/v3"
        )

    @staticmethod
    def _create_client() -> httpx.AsyncClient:
        headers = (
            {"x-cg-pro-api-key": settings.COINGECKO_API_KEY}
            if settings.COINGECKO_API_KEY
            else None
        )
        return httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT, headers=headers)

    async def get_price(self, chain: ChainKind, currency: str) -> float:
        """Get the spot price of the chain's native token in ``currency``.

        The currency code is forwarded to CoinGecko verbatim, so an unknown
        code shows up as a missing field in the response.

        Raises:
            httpx.HTTPError: If the request fails or returns a non-2xx status
            PriceNotFoundError: If the response has no price for the pair
        """
        token = chain.coingecko_id
        params = {"ids": token, "vs_currencies": currency}

        async with self._create_client() as client:
            response = await client.get(f"{self.base_url}/simple/price", params=params)
            response.raise_for_status()
            data = response.json()

        try:
            price = float(data[token][currency])
        except (KeyError, TypeError) as e:
            raise PriceNotFoundError(token, currency) from e

        logger.debug(f"{token} price is {price} {currency}")
        return price
