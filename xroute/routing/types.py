"""Type definitions for routing module."""

from __future__ import annotations

import math
from dataclasses import dataclass

from xroute.models.config import Objective


@dataclass(frozen=True)
class Hop:
    """One bridge traversal with its per-call estimates."""

    from_chain: str
    to_chain: str
    bridge: str
    amount: float  # Amount carried into this hop
    estimated_cost: float  # Bridge fee plus gas (USD)
    estimated_time: float  # Seconds
    gas_estimate: float  # Gas part of estimated_cost (USD)
    reliability: float


# Ordered, contiguous, simple sequence of hops. () is the same-chain route.
Path = tuple[Hop, ...]

EMPTY_PATH: Path = ()


def path_total_cost(path: Path) -> float:
    return sum(hop.estimated_cost for hop in path)


def path_total_time(path: Path) -> float:
    return sum(hop.estimated_time for hop in path)


def path_success_probability(path: Path) -> float:
    """Product of hop reliabilities (1.0 for the empty path)."""
    return math.prod((hop.reliability for hop in path), start=1.0)


@dataclass(frozen=True)
class RouteRequest:
    """A single routing query."""

    source: str
    destination: str
    amount: float
    max_hops: int


@dataclass(frozen=True)
class ScoringFactor:
    """One named contribution to a route score.

    contribution == weight * value / reference, and the contributions of a
    score's factors sum to the score.
    """

    name: str
    value: float
    weight: float
    reference: float
    contribution: float


@dataclass(frozen=True)
class RouteScore:
    """Score of a path under one objective (lower is better)."""

    objective: Objective
    score: float
    factors: tuple[ScoringFactor, ...]


@dataclass(frozen=True)
class ScoredRoute:
    """A candidate path, its score and its discovery position."""

    path: Path
    score: RouteScore
    discovery_index: int

    @property
    def total_hops(self) -> int:
        return len(self.path)

    @property
    def total_cost(self) -> float:
        return path_total_cost(self.path)

    @property
    def total_time(self) -> float:
        return path_total_time(self.path)

    @property
    def success_probability(self) -> float:
        return path_success_probability(self.path)

    def rank_key(self) -> tuple[float, int, float, int]:
        """Sort key: score, then fewer hops, higher reliability, discovery order."""
        return (self.score.score, self.total_hops, -self.success_probability, self.discovery_index)


@dataclass(frozen=True)
class RouteRecommendation:
    """Recommended route for a request.

    Invariants:
        total_cost == sum of hop estimated_cost
        total_time == sum of hop estimated_time
        success_probability == product of hop reliability
        total_hops == len(path)
    """

    source_chain: str
    destination_chain: str
    amount: float
    path: Path
    total_cost: float
    total_time: float
    total_hops: int
    success_probability: float
    recommendation: str
    objective: Objective
    score: float
    scoring_factors: tuple[ScoringFactor, ...]
    expected_received: float
    min_received: float
    candidates_evaluated: int = 1

    @property
    def is_same_chain(self) -> bool:
        return self.total_hops == 0

    @property
    def is_multihop(self) -> bool:
        return self.total_hops > 1

    @property
    def bridges_used(self) -> list[str]:
        return [hop.bridge for hop in self.path]


__all__ = [
    "EMPTY_PATH",
    "Hop",
    "Path",
    "RouteRecommendation",
    "RouteRequest",
    "RouteScore",
    "ScoredRoute",
    "ScoringFactor",
    "path_success_probability",
    "path_total_cost",
    "path_total_time",
]
