"""
Update tasks module.

Each task owns a compiled-in list of target records, the precondition
checked before touching a record and the call encoding for it.
"""
from .base import UpdateTask
from .market_config import SetMarketConfigTask
from .minimum_position_size import SetMinimumPositionSizeTask
from .oracle_updater import SetOracleUpdaterTask

TASKS: dict[str, type[UpdateTask]] = {
    SetMarketConfigTask.name: SetMarketConfigTask,
    SetMinimumPositionSizeTask.name: SetMinimumPositionSizeTask,
    SetOracleUpdaterTask.name: SetOracleUpdaterTask,
}

__all__ = [
    "TASKS",
    "UpdateTask",
    "SetMarketConfigTask",
    "SetMinimumPositionSizeTask",
    "SetOracleUpdaterTask",
]
