from bridge_fees.common.models import ChainKind

# Storage deposit attached to fin_transfer on the NEAR bridge, in yoctoNEAR
# Ref: https://github.com/Near-One/bridge-sdk-rs/blob/78d96e8ba2c657d3860da46bbc0f02e9a013c1a0/bridge-sdk/bridge-clients/near-bridge-client/src/near_bridge_client.rs#L33
NEAR_FIN_TRANSFER_DEPOSIT = 600_000_000_000_000_000_000

# Gas burned by a single bridge transfer, taken from reference transactions
# Ref: https://nearblocks.io/txns/7L6J5qi3Yqabb8i8KrtixN5ujyoswrSzW9egjFuGD8Vv
NEAR_GAS = 33_220_000_000_000
# Ref: https://basescan.org/tx/0xa779997b00a73277bc90dda525e61cf8fb919fd1f2c347cc370f720745e0c21b
BASE_GAS = 127_652
# Ref: https://arbiscan.io/tx/0x179c58a791909f5e1ac328aa3c810bde916dd3a9070205f6b56758404188fb8d
ARB_GAS = 149_503
# Flat fee in lamports
# Ref: https://solscan.io/tx/35V7H2BGsyEPw3v2hMzjmQYTC4PwTmu8bY7LiNm2UFMfGhfe86eZPLsKpQFyqsq9vs7HtBrLqFfBUPvLtPW4Qed
SOLANA_GAS = 103_372

EVM_GAS = {
    ChainKind.BASE: BASE_GAS,
    ChainKind.ARB: ARB_GAS,
}

# Smallest unit -> display unit
YOCTO_NEAR_PER_NEAR = 1e24
WEI_PER_ETH = 1e18
LAMPORTS_PER_SOL = 1e9
