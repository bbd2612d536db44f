"""
Error classification for configuration runs.

Precondition errors abort a run before anything is submitted for the
offending record. System failures cover configuration, signer and
submission problems that stop the run at the process boundary.
"""

from .preconditions import (
    PreconditionError,
    AssetIdMismatchError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    SignerError,
    TransactionRevertedError,
    ProposalError,
)

__all__ = [
    # Precondition Errors
    "PreconditionError",
    "AssetIdMismatchError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "SignerError",
    "TransactionRevertedError",
    "ProposalError",
]
