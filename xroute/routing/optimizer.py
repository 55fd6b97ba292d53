"""Multi-chain route optimizer.

RouteOptimizer is the entry point for routing a payment between chains. It
composes the catalog, edge cost model, path enumerator and selector:

    request -> gas snapshot -> enumerate paths -> score -> select -> recommendation

The only state shared between calls is the latest gas snapshot, which is
replaced as a whole under a lock. Each call computes from its own snapshot,
so concurrent calls cannot observe each other's partial work.
"""

from __future__ import annotations

import asyncio
import math
import os
import threading
from collections.abc import Mapping

import structlog

from xroute.catalog import ChainCatalog
from xroute.constants import DEFAULT_CHAINS
from xroute.errors import (
    ConfigurationError,
    GasPriceUnavailableError,
    NoRouteFoundError,
    RoutingDisabledError,
    UnsupportedChainError,
)
from xroute.gas import GasPriceSnapshot, GasPriceSource, SimulatedGasOracle, gas_tier_for
from xroute.models.bridges import DEFAULT_BRIDGES, BridgeProfile
from xroute.models.config import RouteConfig
from xroute.routing.costs import EdgeCostModel
from xroute.routing.pathfinding import ChainGraph, PathEnumerator
from xroute.routing.selection import RouteSelector
from xroute.routing.types import EMPTY_PATH, RouteRecommendation, RouteRequest, ScoredRoute

logger = structlog.get_logger()


class RouteOptimizer:
    """Finds the best bridge route between two chains.

    Args:
        config: Chains, bridges, objective and limits
        gas_source: Gas price source queried at the start of every call.
            Defaults to a SimulatedGasOracle without jitter.
        bridge_table: Known bridge profiles. Defaults to DEFAULT_BRIDGES.

    Raises:
        ConfigurationError: If a configured bridge has no profile, or the gas
            source cannot price a configured chain
    """

    def __init__(
        self,
        config: RouteConfig,
        gas_source: GasPriceSource | None = None,
        bridge_table: Mapping[str, BridgeProfile] | None = None,
    ) -> None:
        self.config = config
        self.catalog = ChainCatalog(config, bridge_table)
        self.gas_source: GasPriceSource = gas_source or SimulatedGasOracle()
        self.cost_model = EdgeCostModel(self.catalog, gas_multiplier=config.gas_multiplier)
        self.enumerator = PathEnumerator(ChainGraph.from_catalog(self.catalog), self.cost_model)
        self.selector = RouteSelector(
            weights=config.balance_weights,
            slippage_tolerance=config.slippage_tolerance,
        )
        self._gas_lock = threading.Lock()
        self._gas_snapshot: GasPriceSnapshot | None = None
        self._check_gas_coverage()

    def _check_gas_coverage(self) -> None:
        """Query the gas source once for every configured chain.

        The reading is discarded; gas_prices stays empty until the first
        routing call.
        """
        try:
            GasPriceSnapshot.take(self.gas_source, self.catalog.chains)
        except GasPriceUnavailableError as e:
            raise ConfigurationError(f"Gas source cannot price configured chains: {e}") from e

    @property
    def supported_chains(self) -> tuple[str, ...]:
        return self.catalog.chains

    @property
    def supported_bridges(self) -> tuple[str, ...]:
        return self.catalog.bridges

    @property
    def gas_prices(self) -> dict[str, float]:
        """Latest gas reading (gwei per chain); empty before the first refresh."""
        with self._gas_lock:
            snapshot = self._gas_snapshot
        return snapshot.as_dict() if snapshot is not None else {}

    @property
    def last_gas_snapshot(self) -> GasPriceSnapshot | None:
        with self._gas_lock:
            return self._gas_snapshot

    def refresh_gas_prices(self) -> GasPriceSnapshot:
        """Take a fresh gas snapshot and publish it as the latest reading.

        The snapshot is built before the lock is taken, so readers see either
        the previous reading or the new one, never a partial update.
        """
        snapshot = GasPriceSnapshot.take(self.gas_source, self.catalog.chains)
        with self._gas_lock:
            self._gas_snapshot = snapshot
        logger.debug("gas_prices_refreshed", chains=len(snapshot.prices))
        return snapshot

    def _make_request(self, source: str, destination: str, amount: float) -> RouteRequest:
        if not self.config.enabled:
            raise RoutingDisabledError("Route optimizer is disabled by configuration")
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"Amount must be a positive number, got {amount}")

        try:
            source_id = self.catalog.require_chain(source)
            destination_id = self.catalog.require_chain(destination)
        except UnsupportedChainError:
            logger.warning(
                "unsupported_chain",
                source=source,
                destination=destination,
                supported=list(self.catalog.chains),
            )
            raise
        return RouteRequest(
            source=source_id,
            destination=destination_id,
            amount=amount,
            max_hops=self.config.max_hops,
        )

    def evaluate_routes(self, source: str, destination: str, amount: float) -> list[ScoredRoute]:
        """Score every feasible route for a request, best first.

        Refreshes gas prices. Returns an empty list when nothing is feasible.

        Raises:
            UnsupportedChainError: If either chain is not configured
        """
        request = self._make_request(source, destination, amount)
        if request.source == request.destination:
            return self.selector.rank([EMPTY_PATH], self.config.optimize_for)
        gas = self.refresh_gas_prices()
        candidates = self.enumerator.enumerate_paths(
            request.source, request.destination, request.amount, request.max_hops, gas
        )
        return self.selector.rank(candidates, self.config.optimize_for)

    def find_optimal_route(
        self,
        source: str,
        destination: str,
        amount: float,
    ) -> RouteRecommendation:
        """Find the best route for moving amount from source to destination.

        Args:
            source: Source chain id
            destination: Destination chain id
            amount: Transfer amount (USD)

        Returns:
            RouteRecommendation for the best-ranked path

        Raises:
            UnsupportedChainError: If either chain is not configured
            NoRouteFoundError: If no path fits within max_hops and bridge limits
            RoutingDisabledError: If the optimizer is disabled
            ValueError: If amount is not a positive number
            GasPriceUnavailableError: If the gas source stops pricing a chain
        """
        request = self._make_request(source, destination, amount)
        logger.info(
            "finding_route",
            source=request.source,
            destination=request.destination,
            amount=amount,
            objective=self.config.optimize_for.value,
        )

        # Same chain: no search, no gas refresh
        if request.source == request.destination:
            return self.selector.select_best([EMPTY_PATH], self.config.optimize_for, request)

        gas = self.refresh_gas_prices()
        candidates = self.enumerator.enumerate_paths(
            request.source, request.destination, request.amount, request.max_hops, gas
        )
        logger.debug(
            "route_candidates_enumerated",
            source=request.source,
            destination=request.destination,
            candidates=len(candidates),
        )

        try:
            result = self.selector.select_best(candidates, self.config.optimize_for, request)
        except NoRouteFoundError:
            logger.warning(
                "no_route_found",
                source=request.source,
                destination=request.destination,
                amount=amount,
                max_hops=request.max_hops,
            )
            raise

        logger.info(
            "route_selected",
            hops=result.total_hops,
            bridges=result.bridges_used,
            total_cost=round(result.total_cost, 4),
            total_time=result.total_time,
            success_probability=round(result.success_probability, 4),
            candidates=result.candidates_evaluated,
        )
        return result

    async def find_optimal_route_async(
        self,
        source: str,
        destination: str,
        amount: float,
    ) -> RouteRecommendation:
        """Run find_optimal_route in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, self.find_optimal_route, source, destination, amount
        )


def config_from_env() -> RouteConfig:
    """Build a RouteConfig from XROUTE_* environment variables.

    Variables (all optional):
    - XROUTE_CHAINS: comma-separated chain ids (default: all known chains)
    - XROUTE_BRIDGES: comma-separated bridge names (default: all known bridges)
    - XROUTE_OPTIMIZE_FOR: cost | speed | balance (default: balance)
    - XROUTE_MAX_HOPS, XROUTE_SLIPPAGE_TOLERANCE, XROUTE_GAS_MULTIPLIER
    - XROUTE_ENABLED: true/false (default: true)

    Raises:
        ConfigurationError: If any value is invalid
    """
    data: dict[str, object] = {
        "chains": os.environ.get("XROUTE_CHAINS", ",".join(DEFAULT_CHAINS)),
        "bridges": os.environ.get("XROUTE_BRIDGES", ",".join(DEFAULT_BRIDGES)),
        "enabled": os.environ.get("XROUTE_ENABLED", "true").lower() in ("true", "1", "yes"),
    }
    optional = {
        "optimize_for": "XROUTE_OPTIMIZE_FOR",
        "max_hops": "XROUTE_MAX_HOPS",
        "slippage_tolerance": "XROUTE_SLIPPAGE_TOLERANCE",
        "gas_multiplier": "XROUTE_GAS_MULTIPLIER",
    }
    for field_name, env_var in optional.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[field_name] = value
    return RouteConfig.from_mapping(data)


_default_optimizer: RouteOptimizer | None = None
_default_lock = threading.Lock()


def get_default_optimizer() -> RouteOptimizer:
    """Return the process-wide optimizer, building it from the environment once."""
    global _default_optimizer
    with _default_lock:
        if _default_optimizer is None:
            config = config_from_env()
            logger.info(
                "default_optimizer_created",
                chains=list(config.chains),
                bridges=list(config.bridges),
                objective=config.optimize_for.value,
                max_hops=config.max_hops,
                gas_tier=gas_tier_for(config.optimize_for).value,
            )
            _default_optimizer = RouteOptimizer(
                config, gas_source=SimulatedGasOracle(tier=gas_tier_for(config.optimize_for))
            )
        return _default_optimizer


__all__ = ["RouteOptimizer", "config_from_env", "get_default_optimizer"]
