from tick_helper.exceptions.base import TickHelperError, TickHelperTypeError, TickHelperValueError
from tick_helper.exceptions.evm import EVMRevertError
from tick_helper.exceptions.tick_source import TickRecordMissing, TickSourceError

from . import base, evm, tick_source

__all__ = (
    "EVMRevertError",
    "TickHelperError",
    "TickHelperTypeError",
    "TickHelperValueError",
    "TickRecordMissing",
    "TickSourceError",
    "base",
    "evm",
    "tick_source",
)
