"""Multi-chain bridge route optimizer."""

from xroute.errors import NoRouteFoundError, UnsupportedChainError, XRouteError
from xroute.models import Objective, RouteConfig
from xroute.routing import RouteOptimizer, RouteRecommendation, get_default_optimizer

__version__ = "0.1.0"
__all__ = [
    "NoRouteFoundError",
    "Objective",
    "RouteConfig",
    "RouteOptimizer",
    "RouteRecommendation",
    "UnsupportedChainError",
    "XRouteError",
    "get_default_optimizer",
    "__version__",
]
