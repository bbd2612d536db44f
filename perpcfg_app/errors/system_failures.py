"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that stop the run and require an
operator to fix configuration or inspect the chain before retrying.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable run failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Network configuration is missing or invalid."""

    def __init__(self, message: str, network: Optional[str] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.network = network
        self.field = field


class SignerError(SystemFailureError):
    """Deployer key could not be resolved."""

    def __init__(self, message: str, env_var: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.env_var = env_var


class TransactionRevertedError(SystemFailureError):
    """A directly submitted transaction was mined but reverted."""

    def __init__(self, message: str, tx_hash: Optional[str] = None,
                 function: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.tx_hash = tx_hash
        self.function = function


class ProposalError(SystemFailureError):
    """Safe transaction service rejected or failed a proposal."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 safe_address: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.safe_address = safe_address
