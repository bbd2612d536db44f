"""Target protocol-wide limits."""

from ..models.records import MinimumPositionSizeRecord

MINIMUM_POSITION_SIZE = MinimumPositionSizeRecord(size=10)
