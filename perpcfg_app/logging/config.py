"""
Centralized logging configuration for the configuration runner.

This module provides standardized logging configuration using structlog
for all components. Progress of a run is reported as structured events
rather than free-form console narration, so every record produces one
machine-readable outcome line.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_runner_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for configuration run auditing.

    Every line emitted through it carries the runner subsystem tag so a
    run's submissions can be filtered out of mixed output. The values are
    held by the lazy proxy, so output follows whatever configuration is
    active when the logger is first used.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for runner events
    """
    return structlog.get_logger(
        name,
        subsystem="config_runner",
        audit_trail=True
    )


def log_record_outcome(
    logger: FilteringBoundLogger,
    task: str,
    index: int,
    label: str,
    status: str,
    handles: Optional[list[str]] = None,
    error: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single target record with standardized format.

    Args:
        logger: Structlog logger instance
        task: Name of the update task
        index: On-chain index of the record (market index or 0)
        label: Human readable record label (e.g. asset symbol)
        status: Outcome status value
        handles: Transaction hashes or safe transaction hashes
        error: Error message when the record was aborted
        context: Additional context data
    """
    bound_logger = logger.bind(
        task=task,
        record_index=index,
        record_label=label,
        record_status=status,
        handles=handles or [],
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if error is None:
        bound_logger.info("Record processed")
    else:
        bound_logger.error("Record aborted", error=error)
