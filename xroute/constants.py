"""Default parameters for the route optimizer.

Centralizes chain metadata, gas model constants and configuration defaults.
"""

# Gas units consumed by the bridge transaction on each side of a hop
BRIDGE_OUT_GAS_UNITS = 150_000
BRIDGE_IN_GAS_UNITS = 100_000

# gwei -> native token
GWEI = 1e-9

# Reference native token price in USD used to convert gas to fee units
NATIVE_TOKEN_USD = 3000.0

# Balanced objective reference scales: a route costing COST_REFERENCE USD
# and one taking TIME_REFERENCE seconds contribute equally
BALANCE_COST_REFERENCE = 100.0
BALANCE_TIME_REFERENCE = 600.0
BALANCE_COST_WEIGHT = 0.5
BALANCE_TIME_WEIGHT = 0.5

DEFAULT_MAX_HOPS = 3
DEFAULT_SLIPPAGE_TOLERANCE = 0.5  # percent
DEFAULT_GAS_MULTIPLIER = 1.0

# Known chains: id -> (display name, native token)
CHAIN_INFO: dict[str, tuple[str, str]] = {
    "solana": ("Solana", "SOL"),
    "base": ("Base", "ETH"),
    "ethereum": ("Ethereum", "ETH"),
    "arbitrum": ("Arbitrum", "ETH"),
    "polygon": ("Polygon", "MATIC"),
    "optimism": ("Optimism", "ETH"),
}

DEFAULT_CHAINS: tuple[str, ...] = tuple(CHAIN_INFO)

# Standard-tier gas prices (gwei) served by the simulated oracle
SIMULATED_GAS_PRICES: dict[str, float] = {
    "solana": 0.000005,
    "ethereum": 30.0,
    "base": 0.5,
    "arbitrum": 0.3,
    "polygon": 50.0,
    "optimism": 0.4,
}

# Simulated gas prices (gwei) per tier; standard matches SIMULATED_GAS_PRICES
SIMULATED_GAS_PRICE_TIERS: dict[str, dict[str, float]] = {
    "standard": SIMULATED_GAS_PRICES,
    "fast": {
        "solana": 0.00001,
        "ethereum": 50.0,
        "base": 1.0,
        "arbitrum": 0.6,
        "polygon": 100.0,
        "optimism": 0.8,
    },
    "instant": {
        "solana": 0.00002,
        "ethereum": 100.0,
        "base": 2.0,
        "arbitrum": 1.2,
        "polygon": 200.0,
        "optimism": 1.5,
    },
}
