"""Optimizer configuration models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from xroute.constants import (
    BALANCE_COST_REFERENCE,
    BALANCE_COST_WEIGHT,
    BALANCE_TIME_REFERENCE,
    BALANCE_TIME_WEIGHT,
    DEFAULT_GAS_MULTIPLIER,
    DEFAULT_MAX_HOPS,
    DEFAULT_SLIPPAGE_TOLERANCE,
)
from xroute.errors import ConfigurationError


class Objective(str, Enum):
    """Metric used to rank candidate routes."""

    COST = "cost"
    SPEED = "speed"
    BALANCE = "balance"


class BalanceWeights(BaseModel):
    """Fixed normalization for the balanced objective.

    score = cost_weight * cost / cost_reference + time_weight * time / time_reference
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cost_weight: float = Field(default=BALANCE_COST_WEIGHT, alias="costWeight", ge=0)
    time_weight: float = Field(default=BALANCE_TIME_WEIGHT, alias="timeWeight", ge=0)
    cost_reference: float = Field(default=BALANCE_COST_REFERENCE, alias="costReference", gt=0)
    time_reference: float = Field(default=BALANCE_TIME_REFERENCE, alias="timeReference", gt=0)


DEFAULT_BALANCE_WEIGHTS = BalanceWeights()


def _normalize_ids(values: Any, kind: str, *, lower: bool) -> tuple[str, ...]:
    if isinstance(values, str):
        values = values.split(",")
    elif not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(f"{kind} ids must be a list, got {type(values).__name__}")
    ids = tuple(str(v).strip().lower() if lower else str(v).strip() for v in values)
    if any(not i for i in ids):
        raise ValueError(f"Empty {kind} id")
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate {kind} ids: {', '.join(duplicates)}")
    return ids


class RouteConfig(BaseModel):
    """Construction-time configuration for the route optimizer.

    Attributes:
        enabled: If False, routing calls are refused
        chains: Participating chain ids, in discovery order
        bridges: Usable bridge names, in discovery order
        optimize_for: Objective used to rank routes
        max_hops: Maximum bridge traversals per route (>= 1)
        slippage_tolerance: Percent of the received amount the caller accepts losing
        gas_multiplier: Safety factor applied to gas estimates
        balance_weights: Normalization used by the balanced objective
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = True
    chains: tuple[str, ...] = Field(min_length=1)
    bridges: tuple[str, ...] = Field(min_length=1)
    optimize_for: Objective = Field(default=Objective.BALANCE, alias="optimizeFor")
    max_hops: int = Field(default=DEFAULT_MAX_HOPS, alias="maxHops", ge=1)
    slippage_tolerance: float = Field(
        default=DEFAULT_SLIPPAGE_TOLERANCE, alias="slippageTolerance", ge=0, le=100
    )
    gas_multiplier: float = Field(default=DEFAULT_GAS_MULTIPLIER, alias="gasMultiplier", gt=0)
    balance_weights: BalanceWeights = Field(
        default=DEFAULT_BALANCE_WEIGHTS, alias="balanceWeights"
    )

    @field_validator("chains", mode="before")
    @classmethod
    def _validate_chains(cls, value: Any) -> tuple[str, ...]:
        return _normalize_ids(value, "chain", lower=True)

    @field_validator("bridges", mode="before")
    @classmethod
    def _validate_bridges(cls, value: Any) -> tuple[str, ...]:
        return _normalize_ids(value, "bridge", lower=False)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "RouteConfig":
        """Validate raw configuration, raising ConfigurationError on failure."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid route configuration: {e}") from e
