"""Safe multisig proposal submission via the Safe Transaction Service."""

import json
import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from eth_account.signers.local import LocalAccount
from web3 import Web3

from ..contracts.abi import SAFE_ABI
from ..errors import ProposalError
from ..logging.config import get_logger
from ..models.records import ContractCall, OutcomeStatus
from .base import BaseSubmitter

logger = get_logger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
OPERATION_CALL = 0


class SafeWrapper:
    """
    Proposes transactions to a Safe for later approval by its owners.

    The proposer signs the Safe transaction hash with its own key and posts
    it to the transaction service; co-signers approve and execute it out of
    band.
    """

    def __init__(
        self,
        chain_id: int,
        safe_address: str,
        signer: LocalAccount,
        web3: Web3,
        service_url: str,
        timeout_seconds: int = 30,
        origin: str = "perpcfg",
    ):
        self.chain_id = chain_id
        self.safe_address = Web3.to_checksum_address(safe_address)
        self.signer = signer
        self.web3 = web3
        self.service_url = service_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.origin = origin
        self.safe_contract = web3.eth.contract(address=self.safe_address, abi=SAFE_ABI)

    @property
    def api_base(self) -> str:
        return f"{self.service_url}/api/v1/safes/{self.safe_address}"

    def get_next_nonce(self) -> int:
        """Next free Safe nonce, skipping proposals already pending in the service."""
        onchain_nonce = self.safe_contract.functions.nonce().call()
        pending = self._request(
            "GET",
            f"{self.api_base}/multisig-transactions/"
            f"?executed=false&nonce__gte={onchain_nonce}&ordering=-nonce&limit=1",
        )
        results = (pending or {}).get("results") or []
        if results:
            return max(onchain_nonce, int(results[0]["nonce"]) + 1)
        return onchain_nonce

    def get_safe_tx_hash(self, to: str, value: int, data: str, nonce: int) -> bytes:
        """EIP-712 hash of a CALL-operation Safe transaction with no gas refund."""
        return bytes(self.safe_contract.functions.getTransactionHash(
            Web3.to_checksum_address(to),
            value,
            Web3.to_bytes(hexstr=data),
            OPERATION_CALL,
            0,
            0,
            0,
            ZERO_ADDRESS,
            ZERO_ADDRESS,
            nonce,
        ).call())

    def propose_transaction(self, to: str, value: int, data: str) -> str:
        """
        Propose a transaction to the Safe.

        Args:
            to: Destination contract address
            value: Native value to send
            data: 0x-prefixed calldata

        Returns:
            Safe transaction hash identifying the pending proposal

        Raises:
            ProposalError: If the transaction service rejects the proposal
        """
        nonce = self.get_next_nonce()
        safe_tx_hash = self.get_safe_tx_hash(to, value, data, nonce)
        signature = self.signer.unsafe_sign_hash(safe_tx_hash).signature

        payload = {
            "safe": self.safe_address,
            "to": Web3.to_checksum_address(to),
            "value": str(value),
            "data": data,
            "operation": OPERATION_CALL,
            "safeTxGas": "0",
            "baseGas": "0",
            "gasPrice": "0",
            "gasToken": ZERO_ADDRESS,
            "refundReceiver": ZERO_ADDRESS,
            "nonce": nonce,
            "contractTransactionHash": Web3.to_hex(safe_tx_hash),
            "sender": self.signer.address,
            "signature": Web3.to_hex(signature),
            "origin": self.origin,
        }
        self._request("POST", f"{self.api_base}/multisig-transactions/", payload)

        logger.info(
            "Safe transaction proposed",
            safe=self.safe_address,
            chain_id=self.chain_id,
            nonce=nonce,
            safe_tx_hash=payload["contractTransactionHash"],
        )
        return payload["contractTransactionHash"]

    def _request(self, method: str, url: str, body: Optional[dict[str, Any]] = None) -> Any:
        data = json.dumps(body).encode("utf-8") if body is not None else None
        headers = {
            "Accept": "application/json",
            "User-Agent": "perpcfg/0.1",
        }
        if data is not None:
            headers["Content-Type"] = "application/json"

        req = Request(url, data=data, headers=headers, method=method)

        try:
            with urlopen(req, timeout=self.timeout_seconds) as response:
                raw = response.read().decode("utf-8")
        except HTTPError as e:
            detail = e.read().decode("utf-8", errors="replace")[:200]
            raise ProposalError(
                f"Safe transaction service returned HTTP {e.code}: {detail}",
                status_code=e.code,
                safe_address=self.safe_address,
            ) from e
        except (URLError, socket.timeout) as e:
            raise ProposalError(
                f"Safe transaction service unreachable: {e}",
                safe_address=self.safe_address,
            ) from e

        return json.loads(raw) if raw.strip() else None


class SafeSubmitter(BaseSubmitter):
    """Hands calls to a Safe proposal and returns without waiting for quorum."""

    mode = "safe"
    outcome_status = OutcomeStatus.PROPOSED

    def __init__(self, safe_wrapper: SafeWrapper):
        super().__init__()
        self.safe_wrapper = safe_wrapper

    def _submit(self, call: ContractCall) -> str:
        return self.safe_wrapper.propose_transaction(call.to, call.value, call.data)
