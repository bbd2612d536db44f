"""Direct transaction submission."""

from ..contracts.gateway import ContractGateway
from ..models.records import ContractCall, OutcomeStatus
from .base import BaseSubmitter


class DirectSubmitter(BaseSubmitter):
    """Sends calls from the deployer and waits for one confirmation."""

    mode = "direct"
    outcome_status = OutcomeStatus.SUBMITTED

    def __init__(self, gateway: ContractGateway):
        super().__init__()
        self.gateway = gateway

    def _submit(self, call: ContractCall) -> str:
        return self.gateway.send(call)
