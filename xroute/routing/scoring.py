"""Route scoring.

Each Objective maps to exactly one pure scoring function in _SCORERS.
Scores are minimized. Every score carries its factors (cost and time) so a
caller can see why one route outranked another.
"""

from __future__ import annotations

from collections.abc import Callable

from xroute.models.config import DEFAULT_BALANCE_WEIGHTS, BalanceWeights, Objective
from xroute.routing.types import (
    Path,
    RouteScore,
    ScoringFactor,
    path_total_cost,
    path_total_time,
)

Scorer = Callable[[Path, BalanceWeights], RouteScore]


def _factor(name: str, value: float, weight: float, reference: float = 1.0) -> ScoringFactor:
    return ScoringFactor(
        name=name,
        value=value,
        weight=weight,
        reference=reference,
        contribution=weight * value / reference,
    )


def score_cost(path: Path, _weights: BalanceWeights) -> RouteScore:
    """Score = total cost."""
    cost = path_total_cost(path)
    factors = (_factor("cost", cost, 1.0), _factor("time", path_total_time(path), 0.0))
    return RouteScore(objective=Objective.COST, score=cost, factors=factors)


def score_speed(path: Path, _weights: BalanceWeights) -> RouteScore:
    """Score = total time."""
    time = path_total_time(path)
    factors = (_factor("cost", path_total_cost(path), 0.0), _factor("time", time, 1.0))
    return RouteScore(objective=Objective.SPEED, score=time, factors=factors)


def score_balance(path: Path, weights: BalanceWeights) -> RouteScore:
    """Score = weighted sum of cost and time, each divided by its reference scale."""
    cost_factor = _factor(
        "cost", path_total_cost(path), weights.cost_weight, weights.cost_reference
    )
    time_factor = _factor(
        "time", path_total_time(path), weights.time_weight, weights.time_reference
    )
    return RouteScore(
        objective=Objective.BALANCE,
        score=cost_factor.contribution + time_factor.contribution,
        factors=(cost_factor, time_factor),
    )


_SCORERS: dict[Objective, Scorer] = {
    Objective.COST: score_cost,
    Objective.SPEED: score_speed,
    Objective.BALANCE: score_balance,
}


def score_path(
    path: Path,
    objective: Objective,
    weights: BalanceWeights = DEFAULT_BALANCE_WEIGHTS,
) -> RouteScore:
    """Score a path under an objective (lower is better).

    Args:
        path: Candidate path
        objective: Ranking objective
        weights: Normalization for Objective.BALANCE (ignored otherwise)

    Returns:
        RouteScore with the score and its factor breakdown
    """
    return _SCORERS[objective](path, weights)


__all__ = ["Scorer", "score_balance", "score_cost", "score_path", "score_speed"]
