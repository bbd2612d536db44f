"""ConfigStorage market config update."""

from typing import Optional, Sequence

from ..config.network import NetworkConfig
from ..contracts.abi import CONFIG_STORAGE, TRADE_HELPER
from ..contracts.gateway import ContractGateway
from ..errors import AssetIdMismatchError
from ..models.records import ContractCall, MarketConfigRecord
from ..targets.markets import MARKET_CONFIGS
from .base import UpdateTask


class SetMarketConfigTask(UpdateTask):
    """Overwrites market configs, guarded by the stored asset id."""

    name = "set-market-config"
    description = "Set market configs on ConfigStorage"
    default_mode = "safe"

    def __init__(
        self,
        gateway: ContractGateway,
        network: NetworkConfig,
        records: Optional[Sequence[MarketConfigRecord]] = None,
        include_rate_updates: Optional[bool] = None,
    ):
        super().__init__(gateway, network)
        self._records = list(MARKET_CONFIGS if records is None else records)
        if include_rate_updates is None:
            include_rate_updates = network.runner.include_rate_updates
        self.include_rate_updates = include_rate_updates

    def records(self) -> Sequence[MarketConfigRecord]:
        return self._records

    def record_index(self, record: MarketConfigRecord) -> int:
        return record.market_index

    def record_label(self, record: MarketConfigRecord) -> str:
        return record.symbol

    def check_precondition(self, record: MarketConfigRecord) -> None:
        stored = self.gateway.read_market_asset_id(record.market_index)
        if stored != record.asset_id:
            raise AssetIdMismatchError(
                record.market_index,
                expected=record.asset_id,
                actual=stored,
                context={"symbol": record.symbol},
            )

    def build_calls(self, record: MarketConfigRecord) -> list[ContractCall]:
        calls = []

        # Settle accrued rates under the old parameters first
        if self.include_rate_updates:
            calls.append(self.gateway.encode_call(
                TRADE_HELPER, "updateBorrowingRate", [record.asset_class]
            ))
            calls.append(self.gateway.encode_call(
                TRADE_HELPER, "updateFundingRate", [record.market_index]
            ))

        calls.append(self.gateway.encode_call(
            CONFIG_STORAGE,
            "setMarketConfig",
            [record.market_index, record.to_contract_tuple(), record.is_adaptive_fee_enabled],
        ))
        return calls
