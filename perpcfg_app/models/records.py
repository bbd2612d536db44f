"""Target configuration records and run outcome models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..utils.units import parse_bytes32_string


@dataclass(frozen=True)
class FundingRateParams:
    """Funding rate parameters nested in a market config."""
    max_skew_scale_usd: int                          # 30-decimal USD
    max_funding_rate: int                            # 18-decimal rate


@dataclass(frozen=True)
class MarketConfigRecord:
    """Desired state of one market in ConfigStorage."""
    market_index: int
    asset_id: bytes                                  # bytes32 symbol
    increase_position_fee_rate_bps: int
    decrease_position_fee_rate_bps: int
    initial_margin_fraction_bps: int
    maintenance_margin_fraction_bps: int
    max_profit_rate_bps: int
    asset_class: int
    allow_increase_position: bool
    active: bool
    funding_rate: FundingRateParams
    max_long_position_size: int                      # 30-decimal USD, 0 = unlimited
    max_short_position_size: int                     # 30-decimal USD, 0 = unlimited
    is_adaptive_fee_enabled: bool = False

    @property
    def symbol(self) -> str:
        return parse_bytes32_string(self.asset_id)

    def to_contract_tuple(self) -> tuple:
        """Positional tuple matching the ConfigStorage MarketConfig struct."""
        return (
            self.asset_id,
            self.max_long_position_size,
            self.max_short_position_size,
            self.increase_position_fee_rate_bps,
            self.decrease_position_fee_rate_bps,
            self.initial_margin_fraction_bps,
            self.maintenance_margin_fraction_bps,
            self.max_profit_rate_bps,
            self.asset_class,
            self.allow_increase_position,
            self.active,
            (self.funding_rate.max_skew_scale_usd, self.funding_rate.max_funding_rate),
        )


@dataclass(frozen=True)
class MinimumPositionSizeRecord:
    """Desired minimum position size in ConfigStorage."""
    size: int


@dataclass(frozen=True)
class OracleUpdaterRecord:
    """Desired updater permission in OracleMiddleware."""
    updater: str
    enabled: bool = True


@dataclass(frozen=True)
class ContractCall:
    """A state-changing call: destination, value and encoded calldata."""
    to: str
    value: int
    data: str
    function: str


class OutcomeStatus(str, Enum):
    """Per-record result of a run."""
    SUBMITTED = "submitted"
    PROPOSED = "proposed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class RecordOutcome:
    """Outcome of processing a single target record."""
    index: int
    label: str
    status: OutcomeStatus
    handles: tuple[str, ...] = ()
    error: Optional[str] = None


@dataclass
class RunReport:
    """Ordered outcomes of a run."""
    task: str
    network: str
    outcomes: list[RecordOutcome] = field(default_factory=list)
    completed: bool = False

    @property
    def submitted_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status != OutcomeStatus.ABORTED)

    def handles(self) -> list[str]:
        """All transaction handles in submission order."""
        return [h for o in self.outcomes for h in o.handles]
