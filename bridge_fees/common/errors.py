class BridgeFeesError(Exception):
    """Base class for errors raised while estimating bridge fees."""


class RpcError(BridgeFeesError):
    def __init__(self, url: str, method: str, error: object):
        self.url = url
        self.method = method
        self.error = error
        super().__init__(f"RPC call {method} to {url} failed: {error}")


class PriceNotFoundError(BridgeFeesError, KeyError):
    def __init__(self, token: str, currency: str):
        self.token = token
        self.currency = currency
        super().__init__(f"No {currency} price for {token} in CoinGecko response")

    def __str__(self):
        return self.args[0]
