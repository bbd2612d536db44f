"""Default configuration parameters for configuration runs."""

from dataclasses import dataclass
from typing import Optional


# Safe Transaction Service hosts by chain id
SAFE_SERVICE_URLS: dict[int, str] = {
    1: "https://safe-transaction-mainnet.safe.global",
    10: "https://safe-transaction-optimism.safe.global",
    8453: "https://safe-transaction-base.safe.global",
    42161: "https://safe-transaction-arbitrum.safe.global",
    81457: "https://safe-transaction-blast.safe.global",
}


@dataclass(frozen=True)
class RunnerParams:
    """Runner behaviour parameters."""
    receipt_timeout_seconds: int = 120               # Wait for one confirmation
    receipt_poll_seconds: float = 0.5
    include_rate_updates: bool = False               # Refresh borrowing/funding before market config


@dataclass(frozen=True)
class SafeServiceParams:
    """Safe Transaction Service client parameters."""
    url: Optional[str] = None                        # Falls back to SAFE_SERVICE_URLS[chain_id]
    timeout_seconds: int = 30
    origin: str = "perpcfg"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    runner: RunnerParams
    safe_service: SafeServiceParams
    signer_env: str = "DEPLOYER_PRIVATE_KEY"


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        runner=RunnerParams(),
        safe_service=SafeServiceParams(),
    )


def default_safe_service_url(chain_id: int) -> Optional[str]:
    """Known Safe Transaction Service host for a chain, if any."""
    return SAFE_SERVICE_URLS.get(chain_id)
