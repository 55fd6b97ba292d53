"""Configuration and API models for the route optimizer."""

from xroute.models.bridges import DEFAULT_BRIDGES, BridgeProfile
from xroute.models.config import (
    DEFAULT_BALANCE_WEIGHTS,
    BalanceWeights,
    Objective,
    RouteConfig,
)

__all__ = [
    "BalanceWeights",
    "BridgeProfile",
    "DEFAULT_BALANCE_WEIGHTS",
    "DEFAULT_BRIDGES",
    "Objective",
    "RouteConfig",
]
