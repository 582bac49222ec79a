from collections.abc import Iterable

from eth_abi.packed import encode_packed

from tick_helper.exceptions import TickHelperValueError
from tick_helper.types.abstract import TickSource
from tick_helper.types.aliases import Tick
from tick_helper.v3_types import PackedTick, TickRecord

# Field order and widths of a packed tick, matching Solidity's
# `abi.encodePacked(liquidityGross, liquidityNet, feeGrowthOutside0X128, feeGrowthOutside1X128,
# tick)`
PACKED_TICK_TYPES = (
    "uint128",
    "int128",
    "uint256",
    "uint256",
    "int24",
)
PACKED_TICK_FIELD_SIZES = (16, 16, 32, 32, 3)
PACKED_TICK_SIZE = sum(PACKED_TICK_FIELD_SIZES)


def pack_tick(tick: Tick, record: TickRecord) -> bytes:
    """
    Close-pack the liquidity and fee growth values of a tick record, followed by the tick.
    """

    return encode_packed(
        PACKED_TICK_TYPES,
        (
            record.liquidity_gross,
            record.liquidity_net,
            record.fee_growth_outside0_x128,
            record.fee_growth_outside1_x128,
            tick,
        ),
    )


def unpack_tick(blob: bytes) -> PackedTick:
    """
    Decode a blob produced by `pack_tick`. Values are big-endian, signed values are two's
    complement.
    """

    if len(blob) != PACKED_TICK_SIZE:
        raise TickHelperValueError(
            message=f"Packed tick must be {PACKED_TICK_SIZE} bytes, got {len(blob)}"
        )

    values: list[int] = []
    offset = 0
    for abi_type, byte_length in zip(PACKED_TICK_TYPES, PACKED_TICK_FIELD_SIZES, strict=True):
        chunk = blob[offset : offset + byte_length]
        values.append(int.from_bytes(chunk, byteorder="big", signed=abi_type.startswith("int")))
        offset += byte_length

    liquidity_gross, liquidity_net, fee_growth_outside0, fee_growth_outside1, tick = values
    return PackedTick(
        tick=tick,
        liquidity_gross=liquidity_gross,
        liquidity_net=liquidity_net,
        fee_growth_outside0_x128=fee_growth_outside0,
        fee_growth_outside1_x128=fee_growth_outside1,
    )


def fetch_and_pack(tick_source: TickSource, ticks: Iterable[Tick]) -> list[bytes]:
    """
    Read the record for each tick and pack it. The blobs are returned in the order of `ticks`.
    """

    return [pack_tick(tick, tick_source.tick_record(tick)) for tick in ticks]
