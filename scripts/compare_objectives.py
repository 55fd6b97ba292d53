#!/usr/bin/env python3
"""Compare cost, speed and balanced routing for a set of transfers.

Routes each (source, destination, amount) request under every objective and
prints the chosen path, cost, time and success probability side by side,
followed by a cost-vs-amount table for the first pair.

Usage:
    python scripts/compare_objectives.py

    python scripts/compare_objectives.py \
        --route ethereum:solana:2000 --route base:arbitrum:500 \
        --max-hops 2 --gas-multiplier 1.2 --verbose
"""

import argparse
import sys
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from xroute.constants import DEFAULT_CHAINS  # noqa: E402
from xroute.errors import XRouteError  # noqa: E402
from xroute.gas import SimulatedGasOracle, gas_tier_for  # noqa: E402
from xroute.models import DEFAULT_BRIDGES, Objective, RouteConfig  # noqa: E402
from xroute.routing import RouteOptimizer, RouteRecommendation  # noqa: E402

logger = structlog.get_logger()

DEFAULT_ROUTES = ["solana:ethereum:1000", "base:arbitrum:500", "ethereum:solana:2000"]
AMOUNT_LADDER = [100, 500, 1000, 5000, 10000]


def parse_route(value: str) -> tuple[str, str, float]:
    """Parse 'source:destination:amount'."""
    try:
        source, destination, amount = value.split(":")
        return source, destination, float(amount)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"Expected source:destination:amount, got '{value}'"
        ) from e


def format_path(result: RouteRecommendation) -> str:
    if not result.path:
        return "(same chain)"
    return " -> ".join(f"{hop.from_chain}>{hop.to_chain} [{hop.bridge}]" for hop in result.path)


def print_comparison(
    optimizers: dict[Objective, RouteOptimizer],
    source: str,
    destination: str,
    amount: float,
) -> None:
    print()
    print("=" * 72)
    print(f"{source} -> {destination} ({amount:,.0f} USD)")
    print("=" * 72)
    for objective, optimizer in optimizers.items():
        try:
            result = optimizer.find_optimal_route(source, destination, amount)
        except XRouteError as e:
            print(f"  {objective.value:<8} ERROR: {e}")
            continue
        print(
            f"  {objective.value:<8} cost=${result.total_cost:>8.2f}  "
            f"time={result.total_time:>5.0f}s  "
            f"success={result.success_probability:>6.1%}  "
            f"hops={result.total_hops}"
        )
        print(f"           {format_path(result)}")
        print(f"           {result.recommendation}")


def print_amount_ladder(optimizer: RouteOptimizer, source: str, destination: str) -> None:
    print()
    print(f"Cost vs amount ({source} -> {destination}, {optimizer.config.optimize_for.value})")
    print("-" * 72)
    print(f"{'Amount':>10} | {'Cost':>9} | {'Cost %':>7} | {'Time':>6} | {'Success':>8} | Received")
    for amount in AMOUNT_LADDER:
        try:
            result = optimizer.find_optimal_route(source, destination, amount)
        except XRouteError as e:
            print(f"{amount:>10,} | {e}")
            continue
        print(
            f"{amount:>10,} | ${result.total_cost:>8.2f} | "
            f"{result.total_cost / amount:>7.2%} | {result.total_time:>5.0f}s | "
            f"{result.success_probability:>8.1%} | ${result.min_received:,.2f}"
        )


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compare routing objectives across transfers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--route",
        type=parse_route,
        action="append",
        default=[],
        help="Transfer as source:destination:amount (can be specified multiple times)",
    )
    parser.add_argument("--max-hops", type=int, default=3, help="Maximum hops per route")
    parser.add_argument(
        "--gas-multiplier", type=float, default=1.2, help="Safety factor on gas estimates"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show optimizer log output",
    )

    args = parser.parse_args()
    routes = args.route or [parse_route(r) for r in DEFAULT_ROUTES]

    # Configure logging
    import logging

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    try:
        optimizers = {
            objective: RouteOptimizer(
                RouteConfig(
                    chains=DEFAULT_CHAINS,
                    bridges=tuple(DEFAULT_BRIDGES),
                    optimize_for=objective,
                    max_hops=args.max_hops,
                    gas_multiplier=args.gas_multiplier,
                ),
                gas_source=SimulatedGasOracle(tier=gas_tier_for(objective)),
            )
            for objective in Objective
        }
    except (XRouteError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    print("Cross-Chain Route Objective Comparison")
    print(f"Chains: {', '.join(DEFAULT_CHAINS)}")
    print(f"Bridges: {', '.join(DEFAULT_BRIDGES)}")
    print(f"Max hops: {args.max_hops}, gas multiplier: {args.gas_multiplier}x")

    for source, destination, amount in routes:
        print_comparison(optimizers, source, destination, amount)

    source, destination, _ = routes[0]
    print_amount_ladder(optimizers[Objective.BALANCE], source, destination)
    return 0


if __name__ == "__main__":
    sys.exit(main())
