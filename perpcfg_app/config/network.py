"""Resolved per-network configuration."""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import ConfigurationError
from .defaults import RunnerParams, SafeServiceParams, default_safe_service_url


@dataclass(frozen=True)
class NetworkConfig:
    """Contract addresses, RPC endpoint and signer source for one network."""
    name: str
    chain_id: int
    rpc_url: str
    signer_env: str
    contracts: dict[str, str] = field(default_factory=dict)
    handlers: dict[str, str] = field(default_factory=dict)
    safe: Optional[str] = None
    runner: RunnerParams = field(default_factory=RunnerParams)
    safe_service: SafeServiceParams = field(default_factory=SafeServiceParams)

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "NetworkConfig":
        """Build from a merged configuration dictionary."""
        for key in ("chain_id", "rpc_url"):
            if key not in data:
                raise ConfigurationError(
                    f"Network '{name}' is missing '{key}'", network=name, field=key
                )

        return cls(
            name=name,
            chain_id=int(data["chain_id"]),
            rpc_url=str(data["rpc_url"]),
            signer_env=str(data["signer_env"]),
            contracts=dict(data.get("contracts") or {}),
            handlers=dict(data.get("handlers") or {}),
            safe=data.get("safe"),
            runner=RunnerParams(**(data.get("runner") or {})),
            safe_service=SafeServiceParams(**(data.get("safe_service") or {})),
        )

    def contract_address(self, contract: str) -> str:
        """Address of a named contract, or ConfigurationError if absent."""
        address = self.contracts.get(contract)
        if not address:
            raise ConfigurationError(
                f"Network '{self.name}' has no address for contract '{contract}'",
                network=self.name,
                field=f"contracts.{contract}",
            )
        return address

    def handler_address(self, handler: str) -> str:
        """Address of a named off-chain handler account."""
        address = self.handlers.get(handler)
        if not address:
            raise ConfigurationError(
                f"Network '{self.name}' has no address for handler '{handler}'",
                network=self.name,
                field=f"handlers.{handler}",
            )
        return address

    def safe_service_url(self) -> Optional[str]:
        return self.safe_service.url or default_safe_service_url(self.chain_id)
