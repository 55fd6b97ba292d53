"""Pytest configuration and fixtures."""

import pytest

from xroute.catalog import ChainCatalog
from xroute.gas import FixedGasPriceSource, GasPriceSnapshot
from xroute.models.config import RouteConfig
from xroute.routing.costs import EdgeCostModel
from xroute.routing.optimizer import RouteOptimizer
from tests.helpers import TEST_GAS_PRICES, make_config, make_optimizer


@pytest.fixture
def config() -> RouteConfig:
    """Default four-chain, four-bridge configuration (balanced objective)."""
    return make_config()


@pytest.fixture
def gas_source() -> FixedGasPriceSource:
    return FixedGasPriceSource(TEST_GAS_PRICES)


@pytest.fixture
def gas_snapshot() -> GasPriceSnapshot:
    """Snapshot of the fixed test gas prices."""
    return GasPriceSnapshot.take(FixedGasPriceSource(TEST_GAS_PRICES), TEST_GAS_PRICES)


@pytest.fixture
def catalog(config: RouteConfig) -> ChainCatalog:
    return ChainCatalog(config)


@pytest.fixture
def cost_model(catalog: ChainCatalog) -> EdgeCostModel:
    return EdgeCostModel(catalog)


@pytest.fixture
def optimizer() -> RouteOptimizer:
    """Optimizer over the default configuration with fixed gas prices."""
    return make_optimizer()
