"""
Configuration module.

Dataclass defaults, the YAML network loader and validation of both network
entries and compiled-in target records.
"""
