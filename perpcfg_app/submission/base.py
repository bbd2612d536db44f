"""Base class for submission mechanisms."""

from abc import ABC, abstractmethod
from typing import Any

from ..logging.config import get_logger
from ..models.records import ContractCall, OutcomeStatus


class BaseSubmitter(ABC):
    """Base class for submission mechanisms."""

    mode: str = ""
    outcome_status: OutcomeStatus = OutcomeStatus.SUBMITTED

    def __init__(self) -> None:
        self.logger = get_logger(f"perpcfg.submission.{self.mode}")
        self._submission_count = 0

    @abstractmethod
    def _submit(self, call: ContractCall) -> str:
        """Submit a single call and return its handle."""

    def submit(self, call: ContractCall) -> str:
        """
        Submit a call exactly once.

        Errors from the underlying transport are not caught here.

        Args:
            call: Encoded contract call

        Returns:
            Transaction hash (direct) or safe transaction hash (proposal)
        """
        self.logger.debug("Submitting call", function=call.function, to=call.to)
        handle = self._submit(call)
        self._submission_count += 1
        return handle

    def get_stats(self) -> dict[str, Any]:
        """Get submission statistics."""
        return {
            "mode": self.mode,
            "submission_count": self._submission_count,
        }
