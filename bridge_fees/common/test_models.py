import pytest

from bridge_fees.common.models import ChainKind, FeeEstimate


@pytest.mark.parametrize(
    "chain,expected",
    [
        (ChainKind.NEAR, "near"),
        (ChainKind.ETH, "ethereum"),
        (ChainKind.BASE, "ethereum"),
        (ChainKind.ARB, "ethereum"),
        (ChainKind.SOL, "solana"),
    ],
)
def test_coingecko_id(chain, expected):
    assert chain.coingecko_id == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("near", ChainKind.NEAR),
        ("NEAR", ChainKind.NEAR),
        ("Base", ChainKind.BASE),
        (" arb ", ChainKind.ARB),
        ("eth", ChainKind.ETH),
        ("sol", ChainKind.SOL),
    ],
)
def test_parse_is_case_insensitive(value, expected):
    assert ChainKind.parse(value) == expected


def test_parse_rejects_unknown_chain():
    with pytest.raises(ValueError):
        ChainKind.parse("polygon")


def test_describe_near():
    estimate = FeeEstimate(
        chain=ChainKind.NEAR, amount=1000, burn=3.922, fiat_amount=7.844, currency="usd"
    )
    assert (
        estimate.describe()
        == "1000 transfers to NEAR will burn 3.922 NEARs (approx. 7.844 usd)"
    )


def test_describe_evm_uses_chain_label():
    estimate = FeeEstimate(
        chain=ChainKind.ARB, amount=10, burn=0.0001, fiat_amount=0.25, currency="eur"
    )
    assert (
        estimate.describe()
        == "10 transfers to Arb will burn 0.000 ETHs (approx. 0.250 eur)"
    )


def test_describe_solana_uses_six_decimals():
    estimate = FeeEstimate(
        chain=ChainKind.SOL,
        amount=1000,
        burn=0.103372,
        fiat_amount=15.5058,
        currency="usd",
    )
    assert (
        estimate.describe()
        == "1000 transfers to Solana will burn 0.103372 SOLs (approx. 15.506 usd)"
    )


def test_fee_estimate_rejects_negative_amount():
    with pytest.raises(ValueError):
        FeeEstimate(
            chain=ChainKind.SOL, amount=-1, burn=0.0, fiat_amount=0.0, currency="usd"
        )
