"""Chain and bridge catalog.

The catalog is the read-only view of what the optimizer may route through:
the configured chains, the configured bridges and their profiles. It is
built once from a RouteConfig and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from xroute.constants import CHAIN_INFO
from xroute.errors import ConfigurationError, UnsupportedChainError
from xroute.models.bridges import DEFAULT_BRIDGES, BridgeProfile
from xroute.models.config import RouteConfig

logger = structlog.get_logger()


def normalize_chain(chain: str) -> str:
    """Normalize a chain id to its canonical lowercase form."""
    return chain.strip().lower()


class ChainCatalog:
    """Configured chains and bridges.

    Args:
        config: Optimizer configuration listing chains and bridge names
        bridge_table: Known bridge profiles keyed by name. Every configured
            bridge must appear here. Defaults to DEFAULT_BRIDGES.

    Raises:
        ConfigurationError: If a configured bridge has no profile
    """

    def __init__(
        self,
        config: RouteConfig,
        bridge_table: Mapping[str, BridgeProfile] | None = None,
    ) -> None:
        table = DEFAULT_BRIDGES if bridge_table is None else bridge_table
        missing = [name for name in config.bridges if name not in table]
        if missing:
            raise ConfigurationError(
                f"Unknown bridge(s): {', '.join(missing)} "
                f"(known: {', '.join(sorted(table))})"
            )

        self._chains: tuple[str, ...] = config.chains
        self._chain_set = frozenset(config.chains)
        self._bridges: tuple[BridgeProfile, ...] = tuple(table[name] for name in config.bridges)
        self._bridges_by_name = {bridge.name: bridge for bridge in self._bridges}

        idle = [b.name for b in self._bridges if not any(b.services(c) for c in self._chains)]
        if idle:
            logger.warning("bridges_without_configured_chains", bridges=idle)

    @property
    def chains(self) -> tuple[str, ...]:
        """Configured chain ids in configuration order."""
        return self._chains

    @property
    def bridges(self) -> tuple[str, ...]:
        """Configured bridge names in configuration order."""
        return tuple(bridge.name for bridge in self._bridges)

    @property
    def bridge_profiles(self) -> tuple[BridgeProfile, ...]:
        return self._bridges

    def has_chain(self, chain: str) -> bool:
        return normalize_chain(chain) in self._chain_set

    def require_chain(self, chain: str) -> str:
        """Return the normalized chain id, or raise if it is not configured."""
        normalized = normalize_chain(chain)
        if normalized not in self._chain_set:
            raise UnsupportedChainError(chain, self._chains)
        return normalized

    def bridge(self, name: str) -> BridgeProfile:
        """Look up a configured bridge profile by name.

        Raises:
            KeyError: If the bridge is not configured
        """
        return self._bridges_by_name[name]

    def bridges_between(self, chain_a: str, chain_b: str) -> list[BridgeProfile]:
        """Configured bridges that service both chains, in configuration order."""
        if chain_a == chain_b:
            return []
        return [b for b in self._bridges if b.services(chain_a) and b.services(chain_b)]

    @staticmethod
    def describe_chain(chain: str) -> dict[str, str]:
        """Display metadata for a chain id (falls back to the id itself)."""
        name, native_token = CHAIN_INFO.get(chain, (chain, ""))
        return {"id": chain, "name": name, "nativeToken": native_token}


__all__ = ["ChainCatalog", "normalize_chain"]
