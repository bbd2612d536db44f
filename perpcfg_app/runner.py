"""
Configuration update runner.

Applies an update task's target records to the chain strictly in order:
check precondition, encode, submit. The first failure stops the run;
nothing is retried and nothing already submitted is rolled back.
"""

from typing import Optional

import structlog

from .errors import PreconditionError
from .logging.config import get_runner_logger, log_record_outcome
from .models.records import OutcomeStatus, RecordOutcome, RunReport
from .submission.base import BaseSubmitter
from .tasks.base import UpdateTask

logger = structlog.get_logger(__name__)


class ConfigUpdateRunner:
    """
    Sequential request/response runner for one update task.

    Each record produces exactly one outcome. A failed precondition raises
    ``PreconditionError`` carrying the partial report; transport errors
    propagate unchanged after the aborted outcome is recorded.
    """

    def __init__(self, task: UpdateTask, submitter: BaseSubmitter, network_name: Optional[str] = None) -> None:
        self.task = task
        self.submitter = submitter
        self.report = RunReport(
            task=task.name,
            network=network_name or task.network.name,
        )
        self.audit_logger = get_runner_logger(__name__)

    @property
    def outcomes(self) -> list[RecordOutcome]:
        return self.report.outcomes

    def run(self) -> RunReport:
        """Process every record of the task, in order."""
        records = self.task.records()

        self.audit_logger.info(
            "Starting configuration run",
            task=self.task.name,
            network=self.report.network,
            mode=self.submitter.mode,
            record_count=len(records),
        )

        for record in records:
            self._process_record(record)

        self.report.completed = True
        self.audit_logger.info(
            "Configuration run finished",
            task=self.task.name,
            network=self.report.network,
            submitted=self.report.submitted_count,
        )
        return self.report

    def _process_record(self, record) -> None:
        index = self.task.record_index(record)
        label = self.task.record_label(record)
        handles: list[str] = []

        logger.debug("Processing record", task=self.task.name, record_index=index, record_label=label)

        try:
            self.task.check_precondition(record)
            for call in self.task.build_calls(record):
                handles.append(self.submitter.submit(call))
        except PreconditionError as e:
            self._record(index, label, OutcomeStatus.ABORTED, handles, str(e))
            e.report = self.report
            raise
        except Exception as e:
            self._record(index, label, OutcomeStatus.ABORTED, handles, f"{type(e).__name__}: {e}")
            raise

        self._record(index, label, self.submitter.outcome_status, handles)

    def _record(
        self,
        index: int,
        label: str,
        status: OutcomeStatus,
        handles: list[str],
        error: Optional[str] = None,
    ) -> None:
        outcome = RecordOutcome(
            index=index,
            label=label,
            status=status,
            handles=tuple(handles),
            error=error,
        )
        self.report.outcomes.append(outcome)
        log_record_outcome(
            self.audit_logger,
            task=self.task.name,
            index=index,
            label=label,
            status=status.value,
            handles=list(handles),
            error=error,
        )
