"""Tests for the chain/bridge catalog."""

import pytest

from xroute.catalog import ChainCatalog, normalize_chain
from xroute.errors import ConfigurationError, UnsupportedChainError
from xroute.models import BridgeProfile
from tests.helpers import (
    ALLBRIDGE,
    ARBITRUM,
    ETHEREUM,
    MAYAN,
    POLYGON,
    SOLANA,
    STARGATE,
    TEST_BRIDGES,
    TEST_CHAINS,
    WORMHOLE,
    make_config,
)


class TestChainCatalog:
    """Tests for ChainCatalog."""

    def test_exposes_configured_chains_in_order(self, catalog: ChainCatalog) -> None:
        assert catalog.chains == tuple(TEST_CHAINS)

    def test_exposes_configured_bridges_in_order(self, catalog: ChainCatalog) -> None:
        assert catalog.bridges == tuple(TEST_BRIDGES)

    def test_only_configured_bridges(self) -> None:
        catalog = ChainCatalog(make_config(bridges=[WORMHOLE, MAYAN]))
        assert catalog.bridges == (WORMHOLE, MAYAN)
        with pytest.raises(KeyError):
            catalog.bridge(STARGATE)

    def test_unknown_bridge_fails_at_construction(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown bridge"):
            ChainCatalog(make_config(bridges=[WORMHOLE, "Teleporter"]))

    def test_custom_bridge_table(self) -> None:
        table = {
            "Direct": BridgeProfile(
                name="Direct", base_fee=1, fee_percentage=0, average_time=10, reliability=1.0
            )
        }
        catalog = ChainCatalog(make_config(bridges=["Direct"]), bridge_table=table)
        assert catalog.bridge("Direct").average_time == 10

    def test_has_chain_is_case_insensitive(self, catalog: ChainCatalog) -> None:
        assert catalog.has_chain("Solana")
        assert not catalog.has_chain(POLYGON)

    def test_require_chain(self, catalog: ChainCatalog) -> None:
        assert catalog.require_chain(" ETHEREUM ") == ETHEREUM
        with pytest.raises(UnsupportedChainError) as exc_info:
            catalog.require_chain(POLYGON)
        assert exc_info.value.chain == POLYGON
        assert "Unsupported chain" in str(exc_info.value)

    def test_bridges_between_respects_supported_chains(self, catalog: ChainCatalog) -> None:
        names = [b.name for b in catalog.bridges_between(SOLANA, ETHEREUM)]
        assert names == [WORMHOLE, MAYAN, ALLBRIDGE]

        names = [b.name for b in catalog.bridges_between(ETHEREUM, ARBITRUM)]
        assert names == [WORMHOLE, MAYAN, STARGATE]

    def test_bridges_between_same_chain_is_empty(self, catalog: ChainCatalog) -> None:
        assert catalog.bridges_between(SOLANA, SOLANA) == []

    def test_describe_chain(self) -> None:
        assert ChainCatalog.describe_chain(SOLANA) == {
            "id": "solana",
            "name": "Solana",
            "nativeToken": "SOL",
        }
        assert ChainCatalog.describe_chain("devnet")["name"] == "devnet"


def test_normalize_chain() -> None:
    assert normalize_chain("  Arbitrum ") == "arbitrum"
