"""API endpoints for the route optimizer."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from xroute.errors import (
    GasPriceUnavailableError,
    NoRouteFoundError,
    RoutingDisabledError,
    UnsupportedChainError,
)
from xroute.models.api import ChainInfo, RouteRequestBody, RouteResponse
from xroute.models.bridges import BridgeProfile
from xroute.routing.optimizer import RouteOptimizer, get_default_optimizer

logger = structlog.get_logger()

router = APIRouter()


def get_optimizer() -> RouteOptimizer:
    """Dependency provider for the optimizer instance.

    Override this in tests to inject a configured optimizer:
        app.dependency_overrides[get_optimizer] = lambda: optimizer

    Returns:
        The optimizer used to answer routing requests.
    """
    return get_default_optimizer()


@router.post("/route", response_model=RouteResponse, response_model_by_alias=True)
async def find_route(
    body: RouteRequestBody,
    optimizer: RouteOptimizer = Depends(get_optimizer),
) -> RouteResponse:
    """Find the optimal route for a cross-chain transfer.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Unsupported chain: 400
        - No feasible route: 404
        - Optimizer disabled or gas prices unavailable: 503
    """
    logger.info(
        "route_request",
        source=body.source_chain,
        destination=body.destination_chain,
        amount=body.amount,
    )

    try:
        result = await optimizer.find_optimal_route_async(
            body.source_chain, body.destination_chain, body.amount
        )
    except UnsupportedChainError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except NoRouteFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except RoutingDisabledError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except GasPriceUnavailableError as e:
        logger.error("gas_prices_unavailable", error=str(e))
        raise HTTPException(status_code=503, detail=str(e)) from e

    return RouteResponse.from_recommendation(result)


@router.get("/chains", response_model=list[ChainInfo], response_model_by_alias=True)
async def list_chains(optimizer: RouteOptimizer = Depends(get_optimizer)) -> list[ChainInfo]:
    """Configured chains with display metadata."""
    return [
        ChainInfo.model_validate(optimizer.catalog.describe_chain(chain))
        for chain in optimizer.supported_chains
    ]


@router.get("/bridges", response_model=list[BridgeProfile], response_model_by_alias=True)
async def list_bridges(
    optimizer: RouteOptimizer = Depends(get_optimizer),
) -> list[BridgeProfile]:
    """Configured bridge profiles."""
    return list(optimizer.catalog.bridge_profiles)


@router.get("/gas-prices")
async def gas_prices(optimizer: RouteOptimizer = Depends(get_optimizer)) -> dict[str, object]:
    """Latest gas reading, refreshed on every routing call."""
    snapshot = optimizer.last_gas_snapshot
    if snapshot is None:
        return {"prices": {}, "takenAt": None}
    return {"prices": snapshot.as_dict(), "takenAt": snapshot.taken_at.isoformat()}
