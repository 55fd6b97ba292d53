"""Route optimizer error classes.

Everything raised on purpose by the optimizer derives from XRouteError so
callers can catch routing failures without catching programmer errors.
"""


class XRouteError(Exception):
    """Base error for route optimizer operations."""

    pass


class ConfigurationError(XRouteError):
    """Invalid catalog or optimizer configuration (raised at construction)."""

    pass


class UnsupportedChainError(XRouteError):
    """Source or destination chain is not in the configured chain set."""

    def __init__(self, chain: str, supported: tuple[str, ...] = ()) -> None:
        self.chain = chain
        self.supported = supported
        message = f"Unsupported chain: {chain}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class NoRouteFoundError(XRouteError):
    """No feasible path exists within the hop limit for this request."""

    def __init__(
        self,
        source: str,
        destination: str,
        amount: float,
        max_hops: int,
    ) -> None:
        self.source = source
        self.destination = destination
        self.amount = amount
        self.max_hops = max_hops
        super().__init__(
            f"No route found from {source} to {destination} "
            f"for amount {amount} within {max_hops} hop(s)"
        )


class GasPriceUnavailableError(XRouteError):
    """Gas price source has no reading for the requested chain."""

    pass


class RoutingDisabledError(XRouteError):
    """Optimizer was configured with enabled=False."""

    pass
