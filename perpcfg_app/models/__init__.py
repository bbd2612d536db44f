"""
Data models module.

Immutable target records and the structured outcome of a configuration run.
Records are frozen dataclasses; a run never mutates them.
"""
