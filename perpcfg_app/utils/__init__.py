"""
Utility functions module.

Value conversions shared by target records and contract calls:
fixed-width bytes32 identifiers and decimal unit scaling.
"""
