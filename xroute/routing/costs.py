"""Edge cost model.

Turns a (from_chain, to_chain, bridge, amount) tuple into a Hop with cost,
time, gas and reliability estimates:

    bridge_fee = base_fee + amount * fee_percentage / 100
    gas        = gas_usd(from_chain, BRIDGE_OUT_GAS_UNITS)
                 + gas_usd(to_chain, BRIDGE_IN_GAS_UNITS)
    gas_usd    = units * gwei * 1e-9 * native_token_usd * gas_multiplier
    cost       = bridge_fee + gas

Bridges that do not service both chains, or whose amount limits exclude the
transfer, yield no hop.
"""

from __future__ import annotations

from xroute.catalog import ChainCatalog
from xroute.constants import (
    BRIDGE_IN_GAS_UNITS,
    BRIDGE_OUT_GAS_UNITS,
    DEFAULT_GAS_MULTIPLIER,
    GWEI,
    NATIVE_TOKEN_USD,
)
from xroute.gas import GasPriceSnapshot
from xroute.models.bridges import BridgeProfile
from xroute.routing.types import Hop


class EdgeCostModel:
    """Per-hop cost, time and reliability estimator.

    Args:
        catalog: Catalog providing bridge profiles
        gas_multiplier: Safety factor applied to gas costs
        native_token_usd: USD price used to convert gas to fee units
    """

    def __init__(
        self,
        catalog: ChainCatalog,
        gas_multiplier: float = DEFAULT_GAS_MULTIPLIER,
        native_token_usd: float = NATIVE_TOKEN_USD,
    ) -> None:
        self._catalog = catalog
        self.gas_multiplier = gas_multiplier
        self.native_token_usd = native_token_usd

    def gas_cost(self, chain: str, gas_units: int, gas: GasPriceSnapshot) -> float:
        """USD cost of spending gas_units on a chain at the snapshot price."""
        return gas_units * gas.price(chain) * GWEI * self.native_token_usd * self.gas_multiplier

    def bridge_fee(self, bridge: BridgeProfile, amount: float) -> float:
        return bridge.base_fee + amount * bridge.fee_percentage / 100

    def estimate(
        self,
        from_chain: str,
        to_chain: str,
        bridge_name: str,
        amount: float,
        gas: GasPriceSnapshot,
    ) -> Hop | None:
        """Estimate one hop, or return None if the bridge cannot carry it."""
        bridge = self._catalog.bridge(bridge_name)
        if from_chain == to_chain:
            return None
        if not (bridge.services(from_chain) and bridge.services(to_chain)):
            return None
        if not bridge.accepts_amount(amount):
            return None

        gas_estimate = self.gas_cost(from_chain, BRIDGE_OUT_GAS_UNITS, gas) + self.gas_cost(
            to_chain, BRIDGE_IN_GAS_UNITS, gas
        )
        return Hop(
            from_chain=from_chain,
            to_chain=to_chain,
            bridge=bridge.name,
            amount=amount,
            estimated_cost=self.bridge_fee(bridge, amount) + gas_estimate,
            estimated_time=bridge.average_time,
            gas_estimate=gas_estimate,
            reliability=bridge.reliability,
        )

    def estimate_all(
        self,
        from_chain: str,
        to_chain: str,
        amount: float,
        gas: GasPriceSnapshot,
    ) -> list[Hop]:
        """Estimates for every configured bridge able to carry the transfer."""
        hops = []
        for bridge in self._catalog.bridges_between(from_chain, to_chain):
            hop = self.estimate(from_chain, to_chain, bridge.name, amount, gas)
            if hop is not None:
                hops.append(hop)
        return hops


__all__ = ["EdgeCostModel"]
