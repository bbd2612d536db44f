"""Deployer identity resolution."""

import os
from typing import Mapping, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount

from .config.network import NetworkConfig
from .errors import SignerError
from .logging.config import get_logger

logger = get_logger(__name__)


def resolve_deployer(network: NetworkConfig, environ: Optional[Mapping[str, str]] = None) -> LocalAccount:
    """
    Load the deployer account from the environment variable named by the network.

    Args:
        network: Resolved network configuration
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        Local signing account

    Raises:
        SignerError: If the variable is unset or holds an invalid key
    """
    env = os.environ if environ is None else environ
    private_key = env.get(network.signer_env, "").strip()
    if not private_key:
        raise SignerError(
            f"Environment variable {network.signer_env} is not set",
            env_var=network.signer_env,
        )

    try:
        account: LocalAccount = Account.from_key(private_key)
    except (ValueError, TypeError) as e:
        raise SignerError(
            f"Environment variable {network.signer_env} does not hold a valid private key",
            env_var=network.signer_env,
        ) from e

    logger.info("Deployer resolved", network=network.name, address=account.address)
    return account
