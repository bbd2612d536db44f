"""Base class for configuration update tasks."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..config.network import NetworkConfig
from ..contracts.gateway import ContractGateway
from ..models.records import ContractCall


class UpdateTask(ABC):
    """
    A named configuration change applied record by record.

    Subclasses provide the target records and, per record, an optional
    read-only precondition and the encoded call(s) to submit.
    """

    name: str = ""
    description: str = ""
    default_mode: str = "direct"

    def __init__(self, gateway: ContractGateway, network: NetworkConfig):
        self.gateway = gateway
        self.network = network

    @abstractmethod
    def records(self) -> Sequence[Any]:
        """Target records in the order they must be applied."""

    @abstractmethod
    def build_calls(self, record: Any) -> list[ContractCall]:
        """Encode the state-changing call(s) for a record."""

    def record_index(self, record: Any) -> int:
        """On-chain index the record applies to."""
        return 0

    def record_label(self, record: Any) -> str:
        """Human readable label for log lines."""
        return self.name

    def check_precondition(self, record: Any) -> None:
        """Raise a PreconditionError if on-chain state rules the record out."""
