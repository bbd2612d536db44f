"""
Submission module.

Submitters take an encoded contract call and either send it directly or
propose it to a Safe multisig, returning a handle for the run report.
"""
from .base import BaseSubmitter
from .direct import DirectSubmitter
from .safe import SafeSubmitter, SafeWrapper

__all__ = ["BaseSubmitter", "DirectSubmitter", "SafeSubmitter", "SafeWrapper"]
