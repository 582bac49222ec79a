from . import bit_math, tick_bitmap, tick_range

__all__ = (
    "bit_math",
    "tick_bitmap",
    "tick_range",
)
