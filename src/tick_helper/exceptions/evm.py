from typing import Any

from tick_helper.exceptions.base import TickHelperError


class EVMRevertError(TickHelperError):
    """
    Raised when an operation mirroring an EVM contract would revert.
    """

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(message=f"EVM Revert: {error}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.error,)
