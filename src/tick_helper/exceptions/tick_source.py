from typing import Any

from tick_helper.exceptions.base import TickHelperError
from tick_helper.types.aliases import Tick


class TickSourceError(TickHelperError):
    """
    Exception raised when a tick source cannot deliver the requested pool state.
    """


class TickRecordMissing(TickSourceError):
    """
    The tick is marked as initialized in the bitmap, but no record is held for it.
    """

    def __init__(self, tick: Tick) -> None:
        self.tick = tick
        super().__init__(message=f"Tick {tick} is initialized but has no record.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.tick,)
