"""Bridge profiles and the default bridge table.

Fee, timing and limit parameters are static per bridge; the edge cost model
combines them with per-call gas readings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BridgeProfile(BaseModel):
    """Static fee, timing and reliability parameters for one bridge."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    base_fee: float = Field(alias="baseFee", ge=0, description="Flat fee per hop (USD)")
    fee_percentage: float = Field(
        alias="feePercentage",
        ge=0,
        le=100,
        description="Variable fee as a percentage of the transferred amount",
    )
    average_time: float = Field(alias="averageTime", gt=0, description="Seconds per hop")
    reliability: float = Field(gt=0, le=1, description="Single-hop success rate")
    min_amount: float = Field(default=0.0, alias="minAmount", ge=0)
    max_amount: float | None = Field(default=None, alias="maxAmount", gt=0)
    max_slippage: float = Field(default=0.0, alias="maxSlippage", ge=0)
    # None means the bridge services every configured chain
    supported_chains: frozenset[str] | None = Field(default=None, alias="supportedChains")

    @field_validator("supported_chains", mode="before")
    @classmethod
    def _normalize_chains(cls, value: Any) -> frozenset[str] | None:
        if value is None:
            return None
        if isinstance(value, str):
            raise ValueError("supported_chains must be a collection of chain ids")
        return frozenset(str(chain).lower() for chain in value)

    @model_validator(mode="after")
    def _check_amount_bounds(self) -> "BridgeProfile":
        if self.max_amount is not None and self.max_amount < self.min_amount:
            raise ValueError(
                f"Bridge {self.name}: max_amount {self.max_amount} "
                f"below min_amount {self.min_amount}"
            )
        return self

    def services(self, chain: str) -> bool:
        """Check whether this bridge can send to or receive from a chain."""
        return self.supported_chains is None or chain in self.supported_chains

    def accepts_amount(self, amount: float) -> bool:
        """Check the transfer amount against the bridge limits."""
        if amount < self.min_amount:
            return False
        return self.max_amount is None or amount <= self.max_amount


DEFAULT_BRIDGES: dict[str, BridgeProfile] = {
    profile.name: profile
    for profile in (
        BridgeProfile(
            name="Wormhole",
            base_fee=5.0,
            fee_percentage=0.1,
            average_time=180,
            reliability=0.98,
            min_amount=50,
            max_amount=1_000_000,
            max_slippage=0.5,
            supported_chains=["solana", "ethereum", "base", "arbitrum", "polygon", "optimism"],
        ),
        BridgeProfile(
            name="Mayan",
            base_fee=3.0,
            fee_percentage=0.15,
            average_time=120,
            reliability=0.96,
            min_amount=20,
            max_amount=500_000,
            max_slippage=1.0,
            supported_chains=["solana", "ethereum", "base", "arbitrum", "polygon"],
        ),
        BridgeProfile(
            name="Allbridge",
            base_fee=2.0,
            fee_percentage=0.2,
            average_time=240,
            reliability=0.94,
            min_amount=10,
            max_amount=250_000,
            max_slippage=0.8,
            supported_chains=["solana", "ethereum", "base", "polygon"],
        ),
        BridgeProfile(
            name="Stargate",
            base_fee=4.0,
            fee_percentage=0.06,
            average_time=60,
            reliability=0.99,
            min_amount=100,
            max_amount=5_000_000,
            max_slippage=0.3,
            supported_chains=["ethereum", "arbitrum", "optimism", "polygon", "base"],
        ),
        BridgeProfile(
            name="Hop",
            base_fee=3.0,
            fee_percentage=0.04,
            average_time=45,
            reliability=0.97,
            min_amount=50,
            max_amount=1_000_000,
            max_slippage=0.2,
            supported_chains=["ethereum", "arbitrum", "optimism", "polygon"],
        ),
    )
}
