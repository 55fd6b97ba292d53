"""Cross-chain route optimization.

Module structure:
- types.py: Hop, RouteRecommendation and scoring result dataclasses
- costs.py: EdgeCostModel for per-hop cost/time/reliability estimates
- pathfinding.py: ChainGraph and PathEnumerator for bounded path search
- scoring.py: One scoring function per Objective
- selection.py: RouteSelector ranking and recommendation assembly
- optimizer.py: RouteOptimizer facade
"""

from xroute.routing.costs import EdgeCostModel
from xroute.routing.optimizer import RouteOptimizer, get_default_optimizer
from xroute.routing.pathfinding import ChainGraph, PathEnumerator
from xroute.routing.scoring import score_path
from xroute.routing.selection import RouteSelector
from xroute.routing.types import Hop, Path, RouteRecommendation, ScoredRoute, ScoringFactor

__all__ = [
    "ChainGraph",
    "EdgeCostModel",
    "Hop",
    "Path",
    "PathEnumerator",
    "RouteOptimizer",
    "RouteRecommendation",
    "RouteSelector",
    "ScoredRoute",
    "ScoringFactor",
    "get_default_optimizer",
    "score_path",
]
