"""Pydantic models for the HTTP routing API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from xroute.models.config import Objective
from xroute.routing.types import Hop, RouteRecommendation, ScoringFactor


class RouteRequestBody(BaseModel):
    """Body of POST /route."""

    source_chain: str = Field(alias="sourceChain", min_length=1)
    destination_chain: str = Field(alias="destinationChain", min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False, description="Transfer amount (USD)")

    model_config = {"populate_by_name": True}


class HopModel(BaseModel):
    """One bridge traversal."""

    from_chain: str = Field(alias="fromChain")
    to_chain: str = Field(alias="toChain")
    bridge: str
    amount: float
    estimated_cost: float = Field(alias="estimatedCost")
    estimated_time: float = Field(alias="estimatedTime")
    gas_estimate: float = Field(alias="gasEstimate")
    reliability: float

    model_config = {"populate_by_name": True}

    @classmethod
    def from_hop(cls, hop: Hop) -> HopModel:
        return cls(
            from_chain=hop.from_chain,
            to_chain=hop.to_chain,
            bridge=hop.bridge,
            amount=hop.amount,
            estimated_cost=hop.estimated_cost,
            estimated_time=hop.estimated_time,
            gas_estimate=hop.gas_estimate,
            reliability=hop.reliability,
        )


class ScoringFactorModel(BaseModel):
    """One named contribution to the route score."""

    name: str
    value: float
    weight: float
    reference: float
    contribution: float

    @classmethod
    def from_factor(cls, factor: ScoringFactor) -> ScoringFactorModel:
        return cls(
            name=factor.name,
            value=factor.value,
            weight=factor.weight,
            reference=factor.reference,
            contribution=factor.contribution,
        )


class RouteResponse(BaseModel):
    """Recommended route returned by POST /route."""

    source_chain: str = Field(alias="sourceChain")
    destination_chain: str = Field(alias="destinationChain")
    amount: float
    path: list[HopModel]
    total_cost: float = Field(alias="totalCost")
    total_time: float = Field(alias="totalTime")
    total_hops: int = Field(alias="totalHops")
    success_probability: float = Field(alias="successProbability")
    recommendation: str
    objective: Objective
    score: float
    scoring_factors: list[ScoringFactorModel] = Field(alias="scoringFactors")
    expected_received: float = Field(alias="expectedReceived")
    min_received: float = Field(alias="minReceived")
    candidates_evaluated: int = Field(alias="candidatesEvaluated")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_recommendation(cls, result: RouteRecommendation) -> RouteResponse:
        return cls(
            source_chain=result.source_chain,
            destination_chain=result.destination_chain,
            amount=result.amount,
            path=[HopModel.from_hop(hop) for hop in result.path],
            total_cost=result.total_cost,
            total_time=result.total_time,
            total_hops=result.total_hops,
            success_probability=result.success_probability,
            recommendation=result.recommendation,
            objective=result.objective,
            score=result.score,
            scoring_factors=[ScoringFactorModel.from_factor(f) for f in result.scoring_factors],
            expected_received=result.expected_received,
            min_received=result.min_received,
            candidates_evaluated=result.candidates_evaluated,
        )


class ChainInfo(BaseModel):
    """Configured chain and its display metadata."""

    id: str
    name: str
    native_token: str = Field(alias="nativeToken")

    model_config = {"populate_by_name": True}
