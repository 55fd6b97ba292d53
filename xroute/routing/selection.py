"""Route selection and recommendation assembly."""

from __future__ import annotations

from collections.abc import Sequence

from xroute.constants import DEFAULT_SLIPPAGE_TOLERANCE
from xroute.errors import NoRouteFoundError
from xroute.models.config import DEFAULT_BALANCE_WEIGHTS, BalanceWeights, Objective
from xroute.routing.scoring import score_path
from xroute.routing.types import (
    Path,
    RouteRecommendation,
    RouteRequest,
    ScoredRoute,
    path_success_probability,
    path_total_cost,
    path_total_time,
)


def describe_path(path: Path, chain: str) -> str:
    """Human-readable rationale for a path.

    Same-chain routes never mention bridges; multi-hop routes always do.
    """
    if not path:
        return f"Direct transfer on {chain} - no cross-chain hop needed"
    if len(path) == 1:
        hop = path[0]
        return f"Single bridge hop via {hop.bridge} ({hop.from_chain} -> {hop.to_chain})"
    legs = ", ".join(f"{hop.bridge} ({hop.from_chain} -> {hop.to_chain})" for hop in path)
    return (
        f"Multi-hop route via {len(path)} bridges: {legs} - "
        "consider consolidating if a direct bridge becomes available"
    )


class RouteSelector:
    """Ranks scored candidates and builds the final recommendation.

    Ranking is by score, then fewer hops, then higher success probability,
    then discovery order.

    Args:
        weights: Normalization for the balanced objective
        slippage_tolerance: Percent used to derive min_received
    """

    def __init__(
        self,
        weights: BalanceWeights = DEFAULT_BALANCE_WEIGHTS,
        slippage_tolerance: float = DEFAULT_SLIPPAGE_TOLERANCE,
    ) -> None:
        self.weights = weights
        self.slippage_tolerance = slippage_tolerance

    def rank(self, candidates: Sequence[Path], objective: Objective) -> list[ScoredRoute]:
        """Score every candidate and sort best-first."""
        scored = [
            ScoredRoute(path=path, score=score_path(path, objective, self.weights), discovery_index=i)
            for i, path in enumerate(candidates)
        ]
        return sorted(scored, key=ScoredRoute.rank_key)

    def select_best(
        self,
        candidates: Sequence[Path],
        objective: Objective,
        request: RouteRequest,
    ) -> RouteRecommendation:
        """Pick the best candidate and assemble the recommendation.

        Raises:
            NoRouteFoundError: If there are no candidates
        """
        if not candidates:
            raise NoRouteFoundError(
                request.source, request.destination, request.amount, request.max_hops
            )

        best = self.rank(candidates, objective)[0]
        return self.build_recommendation(best, request, candidates_evaluated=len(candidates))

    def build_recommendation(
        self,
        route: ScoredRoute,
        request: RouteRequest,
        candidates_evaluated: int = 1,
    ) -> RouteRecommendation:
        path = route.path
        total_cost = path_total_cost(path)
        expected_received = request.amount - total_cost
        return RouteRecommendation(
            source_chain=request.source,
            destination_chain=request.destination,
            amount=request.amount,
            path=path,
            total_cost=total_cost,
            total_time=path_total_time(path),
            total_hops=len(path),
            success_probability=path_success_probability(path),
            recommendation=describe_path(path, request.source),
            objective=route.score.objective,
            score=route.score.score,
            scoring_factors=route.score.factors,
            expected_received=expected_received,
            min_received=expected_received * (1 - self.slippage_tolerance / 100),
            candidates_evaluated=candidates_evaluated,
        )


__all__ = ["RouteSelector", "describe_path"]
