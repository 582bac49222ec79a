from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tick_helper.types.aliases import BitmapWord, Tick, Word
    from tick_helper.v3_types import PoolGlobalState, TickRecord


class TickSource(Protocol):
    """
    A minimal protocol allowing the tick helper to read pool state from a generic source, e.g. a
    live pool contract or a stored snapshot.
    """

    # Any class implementing the protocol must implement these methods, transforming data as
    # necessary to return the specified types.
    def global_state(self) -> "PoolGlobalState": ...
    def tick_bitmap(self, word: "Word") -> "BitmapWord": ...
    def tick_record(self, tick: "Tick") -> "TickRecord": ...
