from .abstract import TickSource
from .aliases import BitmapWord, BlockNumber, ChainId, Tick, Word

__all__ = (
    "BitmapWord",
    "BlockNumber",
    "ChainId",
    "Tick",
    "TickSource",
    "Word",
)
