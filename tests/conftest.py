"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

from eth_account import Account
from web3 import Web3

from perpcfg_app.config.network import NetworkConfig
from perpcfg_app.contracts.gateway import ContractGateway
from perpcfg_app.errors import PreconditionError
from perpcfg_app.models.records import ContractCall, OutcomeStatus
from perpcfg_app.submission.base import BaseSubmitter
from perpcfg_app.tasks.base import UpdateTask

# Well-known local development key (first Hardhat/Anvil account)
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_DEPLOYER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"

CONFIG_STORAGE_ADDRESS = "0xe7f1725e7734ce288f8367e1bb143e90bb3f0512"
TRADE_HELPER_ADDRESS = "0x9fe46736679d2d9a65f0992f2272de9f3c7fa6e0"
ORACLE_MIDDLEWARE_ADDRESS = "0xcf7ed3acca5a467e9e704c703e8d87f634fb0fc9"
SAFE_ADDRESS = "0x5fbdb2315678afecb367f032d93f642f64180aa3"
BOT_ADDRESS = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"


class StubTask(UpdateTask):
    """Task over integer records; indexes in ``bad_indexes`` fail their precondition."""

    name = "stub"

    def __init__(self, network: NetworkConfig, records: List[int], bad_indexes=()):
        super().__init__(gateway=Mock(), network=network)
        self._records = records
        self.bad_indexes = set(bad_indexes)
        self.checked: List[int] = []

    def records(self):
        return self._records

    def record_index(self, record: int) -> int:
        return record

    def record_label(self, record: int) -> str:
        return f"record-{record}"

    def check_precondition(self, record: int) -> None:
        self.checked.append(record)
        if record in self.bad_indexes:
            raise PreconditionError(f"index {record} failed precondition", record)

    def build_calls(self, record: int) -> List[ContractCall]:
        return [ContractCall(
            to=CONFIG_STORAGE_ADDRESS,
            value=0,
            data=f"0x{record:064x}",
            function="stub.set",
        )]


class RecordingSubmitter(BaseSubmitter):
    """Submitter that records calls and can fail on chosen calldata."""

    mode = "direct"
    outcome_status = OutcomeStatus.SUBMITTED

    def __init__(self, failures: Optional[Dict[str, Exception]] = None):
        super().__init__()
        self.calls: List[ContractCall] = []
        self.failures = failures or {}

    def _submit(self, call: ContractCall) -> str:
        if call.data in self.failures:
            raise self.failures[call.data]
        self.calls.append(call)
        return "0x" + f"{len(self.calls):064x}"


@pytest.fixture
def network_config() -> NetworkConfig:
    """Resolved network configuration for a local chain."""
    return NetworkConfig(
        name="testnet",
        chain_id=31337,
        rpc_url="http://127.0.0.1:8545",
        signer_env="TEST_DEPLOYER_KEY",
        contracts={
            "config_storage": CONFIG_STORAGE_ADDRESS,
            "trade_helper": TRADE_HELPER_ADDRESS,
            "oracle_middleware": ORACLE_MIDDLEWARE_ADDRESS,
        },
        handlers={"bot": BOT_ADDRESS},
        safe=SAFE_ADDRESS,
    )


@pytest.fixture
def deployer():
    """Local signing account."""
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def offline_gateway(network_config, deployer) -> ContractGateway:
    """Gateway that can encode calls without an RPC connection."""
    return ContractGateway(Web3(), network_config, deployer)


@pytest.fixture
def sample_network_entry() -> Dict[str, Any]:
    """Raw networks.yaml entry."""
    return {
        "chain_id": 42161,
        "rpc_url": "https://arb1.arbitrum.io/rpc",
        "signer_env": "ARB_DEPLOYER_KEY",
        "safe": SAFE_ADDRESS,
        "contracts": {
            "config_storage": CONFIG_STORAGE_ADDRESS,
            "trade_helper": TRADE_HELPER_ADDRESS,
            "oracle_middleware": ORACLE_MIDDLEWARE_ADDRESS,
        },
        "handlers": {"bot": BOT_ADDRESS},
    }


@pytest.fixture
def make_stub_task(network_config):
    """Factory for StubTask instances bound to the test network."""
    def _make(records: List[int], bad_indexes=()) -> StubTask:
        return StubTask(network_config, records, bad_indexes)
    return _make


@pytest.fixture
def make_submitter():
    """Factory for RecordingSubmitter instances."""
    def _make(failures: Optional[Dict[str, Exception]] = None) -> RecordingSubmitter:
        return RecordingSubmitter(failures)
    return _make
