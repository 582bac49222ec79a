from collections.abc import Generator
from functools import cache

from tick_helper.constants import TICK_SPACING
from tick_helper.libraries.bit_math import least_significant_bit
from tick_helper.types.abstract import TickSource
from tick_helper.types.aliases import Tick, Word
from tick_helper.v3_types import TickRange


@cache
def position(tick: int) -> tuple[Word, int]:
    """
    Computes the position in the tick initialization bitmap for the given tick.

    This function does not account for tick spacing, and ticks must be compressed.
    """
    return (
        tick >> 8,  # word_pos
        tick % 256,  # bit_pos
    )


def tick_at_position(word_position: Word, bit_position: int, tick_spacing: int) -> Tick:
    """
    The inverse of `position`, expanded by the tick spacing.
    """
    return ((word_position << 8) | bit_position) * tick_spacing


def scan_initialized_ticks(
    tick_source: TickSource,
    tick_range: TickRange,
    tick_spacing: int = TICK_SPACING,
) -> Generator[Tick, None, None]:
    """
    Yields every initialized tick inside the range, in ascending order.

    Each word covering the range is read once. Set bits are extracted from the lowest upward,
    clearing each after use, so the word is exhausted when the copy reaches zero. The first and
    last words may hold bits outside the range, which are skipped. An empty range reads nothing.
    """

    if tick_range.is_empty:
        return

    for word_position in range(tick_range.from_word, tick_range.to_word + 1):
        bitmap_at_word = tick_source.tick_bitmap(word_position)

        while bitmap_at_word != 0:
            bit_position = least_significant_bit(bitmap_at_word)
            bitmap_at_word ^= 1 << bit_position

            tick = tick_at_position(word_position, bit_position, tick_spacing)
            if tick_range.from_tick <= tick <= tick_range.to_tick:
                yield tick
