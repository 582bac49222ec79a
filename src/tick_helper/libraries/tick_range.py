from tick_helper.constants import MAX_TICK, MIN_TICK, TICK_SPACING
from tick_helper.exceptions import TickHelperValueError
from tick_helper.libraries.tick_bitmap import position
from tick_helper.logging import logger
from tick_helper.types.aliases import Tick
from tick_helper.v3_types import TickRange


def _round_up(tick: int, tick_spacing: int) -> Tick:
    # Python rounds down to negative infinity, so negate twice to round up
    return -(-tick // tick_spacing) * tick_spacing


def _round_down(tick: int, tick_spacing: int) -> Tick:
    return (tick // tick_spacing) * tick_spacing


def min_usable_tick(tick_spacing: int) -> Tick:
    return _round_up(MIN_TICK, tick_spacing)


def max_usable_tick(tick_spacing: int) -> Tick:
    return _round_down(MAX_TICK, tick_spacing)


def resolve_tick_range(
    pivot_tick: Tick,
    range_multiplier: int,
    tick_spacing: int = TICK_SPACING,
) -> TickRange:
    """
    Resolve the window of `range_multiplier` tick spacings on either side of the pivot tick.

    The window [pivot - range_multiplier * tick_spacing, pivot + range_multiplier * tick_spacing]
    is clamped to [MIN_TICK, MAX_TICK], then the lower bound is rounded up and the upper bound
    rounded down to the tick spacing. The aligned window therefore holds exactly the ticks at this
    spacing that fall inside the unaligned one. An unaligned pivot with a small multiplier can leave
    no aligned tick inside, and the resulting range is empty (`from_tick > to_tick`).

    A pivot outside of [MIN_TICK, MAX_TICK] is clamped into it first.
    """

    if tick_spacing <= 0:
        raise TickHelperValueError(message=f"Invalid tick spacing {tick_spacing}")

    if range_multiplier < 0:
        logger.debug(f"Negative range multiplier {range_multiplier} clamped to 0")
        range_multiplier = 0

    pivot_tick = min(max(pivot_tick, MIN_TICK), MAX_TICK)
    half_width = range_multiplier * tick_spacing

    from_tick = _round_up(max(pivot_tick - half_width, MIN_TICK), tick_spacing)
    to_tick = _round_down(min(pivot_tick + half_width, MAX_TICK), tick_spacing)

    from_word, _ = position(from_tick // tick_spacing)
    to_word, _ = position(to_tick // tick_spacing)

    return TickRange(
        from_tick=from_tick,
        to_tick=to_tick,
        from_word=from_word,
        to_word=to_word,
    )
