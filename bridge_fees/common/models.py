from enum import Enum

from pydantic import BaseModel, Field


class ChainKind(str, Enum):
    NEAR = "near"
    ETH = "eth"
    BASE = "base"
    ARB = "arb"
    SOL = "sol"

    @property
    def coingecko_id(self) -> str:
        """CoinGecko id of the chain's native token."""
        return _COINGECKO_IDS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def native_unit(self) -> str:
        return _NATIVE_UNITS[self]

    @property
    def burn_precision(self) -> int:
        """Decimal places used when printing the burned amount."""
        return 6 if self == ChainKind.SOL else 3

    @classmethod
    def parse(cls, value: str) -> "ChainKind":
        return cls(value.strip().lower())

    def __str__(self):
        return self.value


_COINGECKO_IDS = {
    ChainKind.NEAR: "near",
    ChainKind.ETH: "ethereum",
    ChainKind.BASE: "ethereum",
    ChainKind.ARB: "ethereum",
    ChainKind.SOL: "solana",
}

_LABELS = {
    ChainKind.NEAR: "NEAR",
    ChainKind.ETH: "Eth",
    ChainKind.BASE: "Base",
    ChainKind.ARB: "Arb",
    ChainKind.SOL: "Solana",
}

_NATIVE_UNITS = {
    ChainKind.NEAR: "NEARs",
    ChainKind.ETH: "ETHs",
    ChainKind.BASE: "ETHs",
    ChainKind.ARB: "ETHs",
    ChainKind.SOL: "SOLs",
}


class FeeEstimate(BaseModel):
    chain: ChainKind = Field(description="Destination chain of the transfers")
    amount: int = Field(ge=0, description="Number of transfers")
    burn: float = Field(description="Native tokens burned by all transfers")
    fiat_amount: float = Field(description="Burn converted to the display currency")
    currency: str = Field(description="Display currency code")

    def describe(self) -> str:
        return (
            f"{self.amount} transfers to {self.chain.label} will burn "
            f"{self.burn:.{self.chain.burn_precision}f} {self.chain.native_unit} "
            f"(approx. {self.fiat_amount:.3f} {self.currency})"
        )
