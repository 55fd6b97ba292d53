"""Test helpers module for shared test utilities.

- constants: Chain ids, bridge names and gas prices
- factories: Config, optimizer and hop factory functions
"""

from tests.helpers.constants import (
    ALLBRIDGE,
    ARBITRUM,
    BASE,
    ETHEREUM,
    HOP,
    MAYAN,
    OPTIMISM,
    POLYGON,
    SOLANA,
    STARGATE,
    TEST_BRIDGES,
    TEST_CHAINS,
    TEST_GAS_PRICES,
    WORMHOLE,
)
from tests.helpers.factories import (
    SwitchableGasPriceSource,
    make_config,
    make_hop,
    make_optimizer,
)

__all__ = [
    # Chains
    "SOLANA",
    "BASE",
    "ETHEREUM",
    "ARBITRUM",
    "POLYGON",
    "OPTIMISM",
    # Bridges
    "WORMHOLE",
    "MAYAN",
    "ALLBRIDGE",
    "STARGATE",
    "HOP",
    # Defaults
    "TEST_CHAINS",
    "TEST_BRIDGES",
    "TEST_GAS_PRICES",
    # Factories
    "make_config",
    "make_hop",
    "make_optimizer",
    "SwitchableGasPriceSource",
]
