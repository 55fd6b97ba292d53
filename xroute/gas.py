"""Gas price sources and per-call gas snapshots.

The optimizer never reads gas prices from module state. It holds a
GasPriceSource and, at the start of every routing call, takes an immutable
GasPriceSnapshot of the configured chains. Costing within that call reads
only from the snapshot.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from types import MappingProxyType
from typing import Protocol

from xroute.constants import SIMULATED_GAS_PRICE_TIERS
from xroute.errors import GasPriceUnavailableError
from xroute.models.config import Objective


class GasTier(str, Enum):
    """Inclusion speed a gas price buys."""

    STANDARD = "standard"
    FAST = "fast"
    INSTANT = "instant"


_OBJECTIVE_TIERS: dict[Objective, GasTier] = {
    Objective.COST: GasTier.STANDARD,
    Objective.BALANCE: GasTier.FAST,
    Objective.SPEED: GasTier.INSTANT,
}


def gas_tier_for(objective: Objective) -> GasTier:
    """Gas tier that matches an objective: cheapest for cost, fastest for speed."""
    return _OBJECTIVE_TIERS[objective]


class GasPriceSource(Protocol):
    """Anything that can quote a current gas price for a chain."""

    def current_gas_price(self, chain: str) -> float:
        """Return the current gas price for a chain, in gwei.

        Raises:
            GasPriceUnavailableError: If the chain has no price
        """
        ...


class FixedGasPriceSource:
    """Gas price source returning constant prices (for tests and replays)."""

    def __init__(self, prices: Mapping[str, float]) -> None:
        self._prices = dict(prices)

    def current_gas_price(self, chain: str) -> float:
        try:
            return self._prices[chain]
        except KeyError:
            raise GasPriceUnavailableError(f"No gas price for chain: {chain}") from None


class SimulatedGasOracle:
    """In-process stand-in for a gas price oracle.

    Serves one tier of prices from a table. With jitter > 0, each reading
    is scaled by a factor drawn uniformly from [1 - jitter, 1 + jitter],
    simulating prices moving between calls.

    Args:
        prices: Base prices in gwei. Defaults to the built-in table for tier.
        jitter: Relative price movement per reading, in [0, 1)
        rng: Random generator, injectable for reproducible jitter
        tier: Tier read from the built-in table (ignored when prices is given)
    """

    def __init__(
        self,
        prices: Mapping[str, float] | None = None,
        jitter: float = 0.0,
        rng: random.Random | None = None,
        tier: GasTier = GasTier.STANDARD,
    ) -> None:
        if not 0.0 <= jitter < 1.0:
            raise ValueError(f"jitter must be in [0, 1), got {jitter}")
        self.tier = GasTier(tier)
        table = SIMULATED_GAS_PRICE_TIERS[self.tier.value] if prices is None else prices
        self._prices = dict(table)
        self._jitter = jitter
        self._rng = rng or random.Random()

    def current_gas_price(self, chain: str) -> float:
        base = self._prices.get(chain)
        if base is None:
            raise GasPriceUnavailableError(f"No simulated gas price for chain: {chain}")
        if self._jitter == 0.0:
            return base
        return base * self._rng.uniform(1.0 - self._jitter, 1.0 + self._jitter)


@dataclass(frozen=True)
class GasPriceSnapshot:
    """Immutable gas price reading for a set of chains."""

    prices: Mapping[str, float]
    taken_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def take(cls, source: GasPriceSource, chains: Iterable[str]) -> GasPriceSnapshot:
        """Query the source once per chain and freeze the result."""
        prices = {chain: source.current_gas_price(chain) for chain in chains}
        return cls(prices=MappingProxyType(prices))

    def price(self, chain: str) -> float:
        """Gas price in gwei for a chain in this snapshot."""
        try:
            return self.prices[chain]
        except KeyError:
            raise GasPriceUnavailableError(f"Chain {chain} missing from gas snapshot") from None

    def as_dict(self) -> dict[str, float]:
        return dict(self.prices)


__all__ = [
    "FixedGasPriceSource",
    "GasPriceSnapshot",
    "GasPriceSource",
    "GasTier",
    "SimulatedGasOracle",
    "gas_tier_for",
]
