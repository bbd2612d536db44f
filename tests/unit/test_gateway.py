"""Unit tests for the contract gateway."""

import pytest
from unittest.mock import Mock

from web3 import Web3

from perpcfg_app.contracts.abi import CONFIG_STORAGE, ORACLE_MIDDLEWARE, TRADE_HELPER
from perpcfg_app.contracts.gateway import ContractGateway
from perpcfg_app.errors import ConfigurationError, TransactionRevertedError
from perpcfg_app.models.records import ContractCall
from perpcfg_app.targets.markets import MARKET_CONFIGS

CONFIG_STORAGE_ADDRESS = "0xe7f1725e7734ce288f8367e1bb143e90bb3f0512"
MARKET_CONFIG_SIGNATURE = (
    "setMarketConfig(uint256,"
    "(bytes32,uint256,uint256,uint32,uint32,uint32,uint32,uint32,uint8,bool,bool,(uint256,uint256)),"
    "bool)"
)


def _selector(signature: str) -> str:
    return Web3.to_hex(Web3.keccak(text=signature)[:4])


class TestEncodeCall:
    """Test suite for offline call encoding."""

    def test_set_minimum_position_size(self, offline_gateway) -> None:
        call = offline_gateway.encode_call(CONFIG_STORAGE, "setMinimumPositionSize", [10])

        assert call.to.lower() == CONFIG_STORAGE_ADDRESS
        assert call.value == 0
        assert call.function == "config_storage.setMinimumPositionSize"
        assert call.data.startswith(_selector("setMinimumPositionSize(uint256)"))
        assert call.data.endswith(f"{10:064x}")

    def test_set_market_config(self, offline_gateway) -> None:
        record = MARKET_CONFIGS[0]
        call = offline_gateway.encode_call(
            CONFIG_STORAGE,
            "setMarketConfig",
            [record.market_index, record.to_contract_tuple(), record.is_adaptive_fee_enabled],
        )

        assert call.data.startswith(_selector(MARKET_CONFIG_SIGNATURE))
        # Static struct is encoded inline: index, 13 struct words, flag
        assert len(call.data) == 2 + 8 + 15 * 64
        assert call.data[10:74] == f"{49:064x}"
        assert call.data[74:138] == record.asset_id.hex()
        assert call.data.endswith(f"{1:064x}")

    def test_set_updater(self, offline_gateway) -> None:
        updater = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"
        call = offline_gateway.encode_call(
            ORACLE_MIDDLEWARE, "setUpdater", [Web3.to_checksum_address(updater), True]
        )

        assert call.data.startswith(_selector("setUpdater(address,bool)"))
        assert updater[2:] in call.data

    def test_trade_helper_rate_updates(self, offline_gateway) -> None:
        borrowing = offline_gateway.encode_call(TRADE_HELPER, "updateBorrowingRate", [0])
        funding = offline_gateway.encode_call(TRADE_HELPER, "updateFundingRate", [49])

        assert borrowing.data.startswith(_selector("updateBorrowingRate(uint8)"))
        assert funding.data.startswith(_selector("updateFundingRate(uint256)"))

    def test_unknown_contract(self, offline_gateway) -> None:
        with pytest.raises(ConfigurationError, match="No ABI registered"):
            offline_gateway.contract("vault_storage")

    def test_contracts_are_cached(self, offline_gateway) -> None:
        assert offline_gateway.contract(CONFIG_STORAGE) is offline_gateway.contract(CONFIG_STORAGE)


class TestReadAndSend:
    """Test suite for gateway reads and transaction sending."""

    def _gateway(self, network_config, deployer, receipt_status: int = 1) -> ContractGateway:
        web3 = Mock()
        web3.eth.get_transaction_count.return_value = 7
        web3.eth.estimate_gas.return_value = 100_000
        web3.eth.gas_price = 1_000_000_000
        web3.eth.send_raw_transaction.return_value = b"\x12" * 32
        web3.eth.wait_for_transaction_receipt.return_value = {
            "status": receipt_status,
            "blockNumber": 1234,
        }
        return ContractGateway(web3, network_config, deployer)

    def _call(self) -> ContractCall:
        return ContractCall(
            to=CONFIG_STORAGE_ADDRESS,
            value=0,
            data="0x" + "ab" * 36,
            function="config_storage.setMinimumPositionSize",
        )

    def test_read_market_asset_id(self, network_config, deployer) -> None:
        web3 = Mock()
        stored = MARKET_CONFIGS[0].asset_id
        contract = web3.eth.contract.return_value
        contract.functions.marketConfigs.return_value.call.return_value = [stored, 0, 0]

        gateway = ContractGateway(web3, network_config, deployer)

        assert gateway.read_market_asset_id(49) == stored
        contract.functions.marketConfigs.assert_called_once_with(49)

    def test_send_waits_for_receipt(self, network_config, deployer) -> None:
        gateway = self._gateway(network_config, deployer)

        tx_hash = gateway.send(self._call())

        assert tx_hash == "0x" + "12" * 32
        gateway.web3.eth.send_raw_transaction.assert_called_once()
        gateway.web3.eth.wait_for_transaction_receipt.assert_called_once_with(
            tx_hash,
            timeout=network_config.runner.receipt_timeout_seconds,
            poll_latency=network_config.runner.receipt_poll_seconds,
        )

        sent_tx = gateway.web3.eth.estimate_gas.call_args[0][0]
        assert sent_tx["nonce"] == 7
        assert sent_tx["chainId"] == 31337
        assert sent_tx["from"] == deployer.address

    def test_send_reverted(self, network_config, deployer) -> None:
        gateway = self._gateway(network_config, deployer, receipt_status=0)

        with pytest.raises(TransactionRevertedError) as exc_info:
            gateway.send(self._call())

        assert exc_info.value.tx_hash == "0x" + "12" * 32
        assert exc_info.value.function == "config_storage.setMinimumPositionSize"

    def test_send_without_account(self, network_config) -> None:
        gateway = ContractGateway(Mock(), network_config, None)

        with pytest.raises(ConfigurationError, match="no signing account"):
            gateway.send(self._call())

    def test_transport_errors_propagate(self, network_config, deployer) -> None:
        gateway = self._gateway(network_config, deployer)
        gateway.web3.eth.send_raw_transaction.side_effect = ConnectionError("rpc down")

        with pytest.raises(ConnectionError, match="rpc down"):
            gateway.send(self._call())
