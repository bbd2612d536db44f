"""
Contract gateway over web3.

Binds named protocol contracts from the network configuration to a web3
connection and the deployer account. Reads are plain ``call()``s; writes
are signed locally, sent raw and awaited for one confirmation.
"""

from typing import Any, Optional, Sequence

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.contract import Contract

from ..config.network import NetworkConfig
from ..errors import ConfigurationError, TransactionRevertedError
from ..logging.config import get_logger
from ..models.records import ContractCall
from .abi import CONFIG_STORAGE, CONTRACT_ABIS

logger = get_logger(__name__)


class ContractGateway:
    """Reads, encodes and sends calls to the protocol's contracts."""

    def __init__(self, web3: Web3, network: NetworkConfig, account: Optional[LocalAccount] = None):
        self.web3 = web3
        self.network = network
        self.account = account
        self._contracts: dict[str, Contract] = {}

    @classmethod
    def connect(cls, network: NetworkConfig, account: Optional[LocalAccount] = None) -> "ContractGateway":
        """Create a gateway with an HTTP provider for the network's RPC URL."""
        web3 = Web3(Web3.HTTPProvider(network.rpc_url))
        return cls(web3, network, account)

    def contract(self, name: str) -> Contract:
        """Contract bound at the network's address for ``name``."""
        if name not in self._contracts:
            if name not in CONTRACT_ABIS:
                raise ConfigurationError(f"No ABI registered for contract '{name}'")
            address = Web3.to_checksum_address(self.network.contract_address(name))
            self._contracts[name] = self.web3.eth.contract(address=address, abi=CONTRACT_ABIS[name])
        return self._contracts[name]

    def encode_call(self, name: str, function: str, args: Sequence[Any]) -> ContractCall:
        """Encode ``function(*args)`` on contract ``name`` without sending it."""
        contract = self.contract(name)
        data = contract.encode_abi(function, args=list(args))
        return ContractCall(
            to=contract.address,
            value=0,
            data=data,
            function=f"{name}.{function}",
        )

    def read_market_asset_id(self, market_index: int) -> bytes:
        """Asset id currently stored for a market index."""
        result = self.contract(CONFIG_STORAGE).functions.marketConfigs(market_index).call()
        return bytes(result[0])

    def send(self, call: ContractCall) -> str:
        """
        Sign and send a call, then block until it is mined.

        Args:
            call: Encoded contract call

        Returns:
            Transaction hash as 0x-prefixed hex

        Raises:
            ConfigurationError: If the gateway has no signing account
            TransactionRevertedError: If the receipt reports failure
        """
        if self.account is None:
            raise ConfigurationError("Gateway has no signing account", network=self.network.name)

        sender = self.account.address
        tx: dict[str, Any] = {
            "from": sender,
            "to": Web3.to_checksum_address(call.to),
            "value": call.value,
            "data": call.data,
            "chainId": self.network.chain_id,
            "nonce": self.web3.eth.get_transaction_count(sender, "pending"),
        }
        tx["gas"] = self.web3.eth.estimate_gas(tx)
        tx["gasPrice"] = self.web3.eth.gas_price

        signed = self.account.sign_transaction(tx)
        tx_hash = Web3.to_hex(self.web3.eth.send_raw_transaction(signed.raw_transaction))
        logger.info("Transaction sent", function=call.function, tx_hash=tx_hash)

        receipt = self.web3.eth.wait_for_transaction_receipt(
            tx_hash,
            timeout=self.network.runner.receipt_timeout_seconds,
            poll_latency=self.network.runner.receipt_poll_seconds,
        )
        if receipt["status"] != 1:
            raise TransactionRevertedError(
                f"Transaction {tx_hash} reverted calling {call.function}",
                tx_hash=tx_hash,
                function=call.function,
            )

        logger.info(
            "Transaction confirmed",
            function=call.function,
            tx_hash=tx_hash,
            block_number=receipt["blockNumber"],
        )
        return tx_hash
