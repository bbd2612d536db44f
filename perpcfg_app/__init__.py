"""
perpcfg - Perp Protocol Configuration Runner

Operational tooling that pushes hand-authored target configuration to
already-deployed protocol contracts. Each run reads a compiled-in list of
target records, verifies an on-chain precondition per record and submits
the change directly or as a Safe multisig proposal.
"""

__version__ = "0.1.0"
__author__ = "perpcfg Team"
