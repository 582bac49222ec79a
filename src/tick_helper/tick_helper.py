from tick_helper.constants import TICK_SPACING
from tick_helper.libraries.tick_bitmap import scan_initialized_ticks
from tick_helper.libraries.tick_range import resolve_tick_range
from tick_helper.logging import logger
from tick_helper.packing import fetch_and_pack
from tick_helper.types.abstract import TickSource


def get_ticks(
    tick_source: TickSource,
    range_multiplier: int,
    tick_spacing: int = TICK_SPACING,
) -> list[bytes]:
    """
    Get a packed blob for every initialized tick within `range_multiplier` tick spacings of the
    pool's current tick, in ascending tick order.

    `tick_spacing` must be the spacing of the pool behind `tick_source`, since it decodes the bit
    positions of the bitmap into ticks. The default of 60 only fits the 0.3% fee tier. For a live
    pool, pass `tick_spacing=tick_source.tick_spacing`.

    Each blob holds liquidityGross (16 bytes), liquidityNet (16 bytes), feeGrowthOutside0X128 (32
    bytes), feeGrowthOutside1X128 (32 bytes) and the tick (3 bytes), big-endian and unpadded. Use
    `tick_helper.packing.unpack_tick` to decode them.
    """

    pivot_tick = tick_source.global_state().tick
    tick_range = resolve_tick_range(
        pivot_tick=pivot_tick,
        range_multiplier=range_multiplier,
        tick_spacing=tick_spacing,
    )
    logger.debug(
        f"Scanning ticks {tick_range.from_tick} to {tick_range.to_tick} "
        f"(words {tick_range.from_word} to {tick_range.to_word}) around tick {pivot_tick}"
    )

    initialized_ticks = list(
        scan_initialized_ticks(
            tick_source=tick_source,
            tick_range=tick_range,
            tick_spacing=tick_spacing,
        )
    )
    logger.debug(f"Found {len(initialized_ticks)} initialized ticks")

    return fetch_and_pack(tick_source, initialized_ticks)
