"""
Logging configuration and utilities for the configuration runner.
"""
from .config import configure_logging, get_logger, get_runner_logger, log_record_outcome

__all__ = ["configure_logging", "get_logger", "get_runner_logger", "log_record_outcome"]
