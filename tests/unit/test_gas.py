"""Tests for gas price sources and snapshots."""

import random

import pytest

from xroute.constants import SIMULATED_GAS_PRICE_TIERS, SIMULATED_GAS_PRICES
from xroute.errors import GasPriceUnavailableError
from xroute.gas import (
    FixedGasPriceSource,
    GasPriceSnapshot,
    GasTier,
    SimulatedGasOracle,
    gas_tier_for,
)
from xroute.models import Objective


class TestFixedGasPriceSource:
    def test_returns_configured_price(self) -> None:
        source = FixedGasPriceSource({"ethereum": 42.0})
        assert source.current_gas_price("ethereum") == 42.0

    def test_missing_chain_raises(self) -> None:
        source = FixedGasPriceSource({"ethereum": 42.0})
        with pytest.raises(GasPriceUnavailableError):
            source.current_gas_price("solana")


class TestSimulatedGasOracle:
    def test_default_table_without_jitter(self) -> None:
        oracle = SimulatedGasOracle()
        for chain, price in SIMULATED_GAS_PRICES.items():
            assert oracle.current_gas_price(chain) == price

    def test_jitter_stays_within_bounds(self) -> None:
        oracle = SimulatedGasOracle(jitter=0.1, rng=random.Random(7))
        for _ in range(100):
            price = oracle.current_gas_price("ethereum")
            assert 27.0 - 1e-9 <= price <= 33.0 + 1e-9

    def test_seeded_jitter_is_reproducible(self) -> None:
        first = SimulatedGasOracle(jitter=0.2, rng=random.Random(1))
        second = SimulatedGasOracle(jitter=0.2, rng=random.Random(1))
        assert [first.current_gas_price("base") for _ in range(5)] == [
            second.current_gas_price("base") for _ in range(5)
        ]

    @pytest.mark.parametrize("jitter", [-0.1, 1.0, 2.0])
    def test_invalid_jitter_rejected(self, jitter: float) -> None:
        with pytest.raises(ValueError, match="jitter"):
            SimulatedGasOracle(jitter=jitter)

    def test_unknown_chain_raises(self) -> None:
        with pytest.raises(GasPriceUnavailableError):
            SimulatedGasOracle().current_gas_price("dogecoin")

    @pytest.mark.parametrize("tier", list(GasTier))
    def test_tier_selects_table(self, tier: GasTier) -> None:
        oracle = SimulatedGasOracle(tier=tier)
        assert oracle.tier is tier
        expected = SIMULATED_GAS_PRICE_TIERS[tier.value]["ethereum"]
        assert oracle.current_gas_price("ethereum") == expected

    def test_faster_tiers_cost_more(self) -> None:
        standard, fast, instant = (SimulatedGasOracle(tier=tier) for tier in GasTier)
        for chain in SIMULATED_GAS_PRICES:
            assert (
                standard.current_gas_price(chain)
                < fast.current_gas_price(chain)
                < instant.current_gas_price(chain)
            )

    def test_explicit_prices_override_tier(self) -> None:
        oracle = SimulatedGasOracle(prices={"ethereum": 7.0}, tier=GasTier.INSTANT)
        assert oracle.current_gas_price("ethereum") == 7.0


class TestGasTierFor:
    @pytest.mark.parametrize(
        "objective,tier",
        [
            (Objective.COST, GasTier.STANDARD),
            (Objective.BALANCE, GasTier.FAST),
            (Objective.SPEED, GasTier.INSTANT),
        ],
    )
    def test_objective_mapping(self, objective: Objective, tier: GasTier) -> None:
        assert gas_tier_for(objective) is tier


class TestGasPriceSnapshot:
    def test_take_queries_each_chain(self) -> None:
        snapshot = GasPriceSnapshot.take(SimulatedGasOracle(), ["solana", "base"])
        assert snapshot.as_dict() == {"solana": 0.000005, "base": 0.5}

    def test_snapshot_is_read_only(self) -> None:
        snapshot = GasPriceSnapshot.take(SimulatedGasOracle(), ["solana"])
        with pytest.raises(TypeError):
            snapshot.prices["solana"] = 1.0  # type: ignore[index]

    def test_price_for_missing_chain_raises(self) -> None:
        snapshot = GasPriceSnapshot.take(SimulatedGasOracle(), ["solana"])
        with pytest.raises(GasPriceUnavailableError):
            snapshot.price("ethereum")

    def test_as_dict_returns_copy(self) -> None:
        snapshot = GasPriceSnapshot.take(SimulatedGasOracle(), ["solana"])
        copy = snapshot.as_dict()
        copy["solana"] = 99.0
        assert snapshot.price("solana") == 0.000005
