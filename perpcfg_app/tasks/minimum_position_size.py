"""ConfigStorage minimum position size update."""

from typing import Optional, Sequence

from ..config.network import NetworkConfig
from ..contracts.abi import CONFIG_STORAGE
from ..contracts.gateway import ContractGateway
from ..models.records import ContractCall, MinimumPositionSizeRecord
from ..targets.limits import MINIMUM_POSITION_SIZE
from .base import UpdateTask


class SetMinimumPositionSizeTask(UpdateTask):
    name = "set-minimum-position-size"
    description = "Set the minimum position size on ConfigStorage"
    default_mode = "direct"

    def __init__(
        self,
        gateway: ContractGateway,
        network: NetworkConfig,
        record: Optional[MinimumPositionSizeRecord] = None,
    ):
        super().__init__(gateway, network)
        self.record = record or MINIMUM_POSITION_SIZE

    def records(self) -> Sequence[MinimumPositionSizeRecord]:
        return [self.record]

    def record_label(self, record: MinimumPositionSizeRecord) -> str:
        return f"minimumPositionSize={record.size}"

    def build_calls(self, record: MinimumPositionSizeRecord) -> list[ContractCall]:
        return [self.gateway.encode_call(CONFIG_STORAGE, "setMinimumPositionSize", [record.size])]
