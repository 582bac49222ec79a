__all__ = (
    "MAX_INT24",
    "MAX_INT56",
    "MAX_INT128",
    "MAX_TICK",
    "MAX_UINT8",
    "MAX_UINT16",
    "MAX_UINT32",
    "MAX_UINT128",
    "MAX_UINT160",
    "MAX_UINT256",
    "MIN_INT24",
    "MIN_INT56",
    "MIN_INT128",
    "MIN_TICK",
    "MIN_UINT8",
    "MIN_UINT16",
    "MIN_UINT32",
    "MIN_UINT128",
    "MIN_UINT160",
    "MIN_UINT256",
    "TICK_SPACING",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


def _min_int(bits: int) -> int:
    return typing.cast("int", -(2 ** (bits - 1)))


def _max_int(bits: int) -> int:
    return typing.cast("int", (2 ** (bits - 1)) - 1)


MIN_INT24 = _min_int(24)
MAX_INT24 = _max_int(24)

MIN_INT56 = _min_int(56)
MAX_INT56 = _max_int(56)

MIN_INT128 = _min_int(128)
MAX_INT128 = _max_int(128)

MIN_UINT8 = _min_uint(8)
MAX_UINT8 = _max_uint(8)

MIN_UINT16 = _min_uint(16)
MAX_UINT16 = _max_uint(16)

MIN_UINT32 = _min_uint(32)
MAX_UINT32 = _max_uint(32)

MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

MIN_UINT160 = _min_uint(160)
MAX_UINT160 = _max_uint(160)

MIN_UINT256 = _min_uint(256)
MAX_UINT256 = _max_uint(256)

# Tick bounds from the Uniswap V3 TickMath.sol library, equal to log base 1.0001 of 2**128
MIN_TICK = -887272
MAX_TICK = -MIN_TICK

# Spacing of the fee tier scanned by default (0.3%)
TICK_SPACING = 60
