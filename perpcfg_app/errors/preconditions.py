"""
Precondition error classifications for on-chain safety checks.

Raised when the live contract state does not match what a target record
expects, which usually means the record points at the wrong index.
"""

from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.records import RunReport


class PreconditionError(Exception):
    """Base class for failed read-only checks ahead of a state change."""

    def __init__(self, message: str, index: int,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.index = index
        self.context = context or {}
        self.recoverable = False
        # Filled in by the runner with the outcomes recorded before the abort
        self.report: Optional["RunReport"] = None


class AssetIdMismatchError(PreconditionError):
    """Stored asset id at a market index differs from the configured one."""

    def __init__(self, index: int, expected: bytes, actual: bytes, **kwargs):
        super().__init__(f"marketIndex {index} wrong asset id", index, **kwargs)
        self.expected = expected
        self.actual = actual
