"""OracleMiddleware updater permission."""

from typing import Optional, Sequence

from web3 import Web3

from ..config.network import NetworkConfig
from ..contracts.abi import ORACLE_MIDDLEWARE
from ..contracts.gateway import ContractGateway
from ..models.records import ContractCall, OracleUpdaterRecord
from .base import UpdateTask

# Market status updater bot
UPDATER_HANDLER = "bot"


class SetOracleUpdaterTask(UpdateTask):
    name = "set-oracle-updater"
    description = "Grant the bot handler updater permission on OracleMiddleware"
    default_mode = "direct"

    def __init__(
        self,
        gateway: ContractGateway,
        network: NetworkConfig,
        record: Optional[OracleUpdaterRecord] = None,
    ):
        super().__init__(gateway, network)
        self.record = record or OracleUpdaterRecord(updater=network.handler_address(UPDATER_HANDLER))

    def records(self) -> Sequence[OracleUpdaterRecord]:
        return [self.record]

    def record_label(self, record: OracleUpdaterRecord) -> str:
        return record.updater

    def build_calls(self, record: OracleUpdaterRecord) -> list[ContractCall]:
        return [self.gateway.encode_call(
            ORACLE_MIDDLEWARE,
            "setUpdater",
            [Web3.to_checksum_address(record.updater), record.enabled],
        )]
