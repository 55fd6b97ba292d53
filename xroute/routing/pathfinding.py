"""Chain graph and path enumeration for multi-hop routing.

The graph has one node per configured chain and one directed edge per
(from_chain, to_chain, bridge) triple the bridge can service. Enumeration is
an exhaustive depth-first search over simple paths bounded by max_hops,
pricing each hop as it goes so that bridge amount limits prune the search.
"""

from __future__ import annotations

import structlog

from xroute.catalog import ChainCatalog
from xroute.errors import UnsupportedChainError
from xroute.gas import GasPriceSnapshot
from xroute.routing.costs import EdgeCostModel
from xroute.routing.types import EMPTY_PATH, Path

logger = structlog.get_logger()


class ChainGraph:
    """Adjacency list of chains connected by bridges.

    Neighbor lists preserve configuration order (chain order, then bridge
    order), which makes enumeration order deterministic.
    """

    def __init__(self, chains: tuple[str, ...] = ()) -> None:
        self._adjacency: dict[str, list[tuple[str, str]]] = {chain: [] for chain in chains}

    @classmethod
    def from_catalog(cls, catalog: ChainCatalog) -> ChainGraph:
        """Build a ChainGraph from every bridge servicing each chain pair.

        Args:
            catalog: Configured chains and bridges

        Returns:
            ChainGraph containing every configured chain, connected or not
        """
        graph = cls(catalog.chains)
        for from_chain in catalog.chains:
            for to_chain in catalog.chains:
                for bridge in catalog.bridges_between(from_chain, to_chain):
                    graph._add_edge(from_chain, to_chain, bridge.name)
        logger.debug("chain_graph_built", chains=graph.chain_count, edges=graph.edge_count)
        return graph

    def _add_edge(self, from_chain: str, to_chain: str, bridge: str) -> None:
        """Add a directed edge."""
        self._adjacency.setdefault(from_chain, []).append((to_chain, bridge))
        self._adjacency.setdefault(to_chain, [])

    def neighbors(self, chain: str) -> list[tuple[str, str]]:
        """(neighbor_chain, bridge) pairs reachable in one hop from chain."""
        return self._adjacency.get(chain, [])

    def has_chain(self, chain: str) -> bool:
        return chain in self._adjacency

    @property
    def chain_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())


class PathEnumerator:
    """Bounded exhaustive search for simple paths.

    Usage:
        enumerator = PathEnumerator(graph, cost_model)
        paths = enumerator.enumerate_paths("solana", "arbitrum", 1000, 3, gas)
    """

    def __init__(self, graph: ChainGraph, cost_model: EdgeCostModel) -> None:
        self._graph = graph
        self._cost_model = cost_model

    @property
    def graph(self) -> ChainGraph:
        return self._graph

    def enumerate_paths(
        self,
        source: str,
        destination: str,
        amount: float,
        max_hops: int,
        gas: GasPriceSnapshot,
    ) -> list[Path]:
        """Find every feasible simple path from source to destination.

        Each hop is priced at the amount carried into it: the request amount
        for the first hop, minus the cost of every earlier hop afterwards.
        A hop whose bridge rejects the carried amount, or whose cost uses up
        all of it, is not traversed.

        Args:
            source: Starting chain (normalized)
            destination: Target chain (normalized)
            amount: Transfer amount entering the first hop
            max_hops: Maximum number of hops per path
            gas: Gas snapshot for this call

        Returns:
            Paths in discovery order. [EMPTY_PATH] when source == destination;
            empty list if nothing is feasible.

        Raises:
            UnsupportedChainError: If source or destination is not in the graph
        """
        for chain in (source, destination):
            if not self._graph.has_chain(chain):
                raise UnsupportedChainError(chain)

        if source == destination:
            return [EMPTY_PATH]

        results: list[Path] = []
        self._search(source, destination, amount, max_hops, gas, EMPTY_PATH, {source}, results)
        return results

    def _search(
        self,
        current: str,
        destination: str,
        amount: float,
        max_hops: int,
        gas: GasPriceSnapshot,
        path: Path,
        visited: set[str],
        results: list[Path],
    ) -> None:
        for neighbor, bridge in self._graph.neighbors(current):
            if neighbor in visited:
                continue
            # Intermediate chains need budget for at least one more hop
            if neighbor != destination and len(path) + 1 >= max_hops:
                continue

            hop = self._cost_model.estimate(current, neighbor, bridge, amount, gas)
            if hop is None:
                continue

            # A hop that costs the whole carried amount delivers nothing
            remaining = amount - hop.estimated_cost
            if remaining <= 0:
                continue

            extended = path + (hop,)
            if neighbor == destination:
                results.append(extended)
                continue

            visited.add(neighbor)
            self._search(neighbor, destination, remaining, max_hops, gas, extended, visited, results)
            visited.discard(neighbor)


__all__ = ["ChainGraph", "PathEnumerator"]
