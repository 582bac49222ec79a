from .checksum_cache import get_checksum_address
from .config import settings
from .connection import connection_manager, get_web3, set_web3
from .version import __version__

# isort: split

from .constants import MAX_TICK, MIN_TICK, TICK_SPACING
from .libraries.bit_math import least_significant_bit
from .libraries.tick_bitmap import scan_initialized_ticks
from .libraries.tick_range import resolve_tick_range
from .logging import logger
from .packing import fetch_and_pack, pack_tick, unpack_tick
from .sources import InMemoryTickSource, UniswapV3PoolTickSource
from .tick_helper import get_ticks
from .types import TickSource
from .v3_types import PackedTick, PoolGlobalState, TickRange, TickRecord

__all__ = (
    "MAX_TICK",
    "MIN_TICK",
    "TICK_SPACING",
    "InMemoryTickSource",
    "PackedTick",
    "PoolGlobalState",
    "TickRange",
    "TickRecord",
    "TickSource",
    "UniswapV3PoolTickSource",
    "__version__",
    "connection_manager",
    "fetch_and_pack",
    "get_checksum_address",
    "get_ticks",
    "get_web3",
    "least_significant_bit",
    "logger",
    "pack_tick",
    "resolve_tick_range",
    "scan_initialized_ticks",
    "set_web3",
    "settings",
    "unpack_tick",
)
