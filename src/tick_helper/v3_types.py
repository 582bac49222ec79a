import dataclasses

import pydantic

from tick_helper.types.aliases import Tick, Word
from tick_helper.validation.evm_values import (
    ValidatedInt24,
    ValidatedInt56,
    ValidatedInt128,
    ValidatedUint8,
    ValidatedUint16,
    ValidatedUint32,
    ValidatedUint128,
    ValidatedUint160,
    ValidatedUint256,
)


class PoolGlobalState(pydantic.BaseModel, frozen=True):
    """
    The decoded `slot0()` values of a Uniswap V3 pool. Only `tick` is needed to locate the range,
    the remaining values are kept so the full struct is available to callers.
    """

    sqrt_price_x96: ValidatedUint160
    tick: ValidatedInt24
    observation_index: ValidatedUint16 = 0
    observation_cardinality: ValidatedUint16 = 0
    observation_cardinality_next: ValidatedUint16 = 0
    fee_protocol: ValidatedUint8 = 0
    unlocked: bool = True


class TickRecord(pydantic.BaseModel, frozen=True):
    """
    The full `ticks(int24)` struct of a Uniswap V3 pool.

    The packed output carries the liquidity and fee growth values. The oracle values and the
    initialization flag are decoded but not packed.
    """

    liquidity_gross: ValidatedUint128
    liquidity_net: ValidatedInt128
    fee_growth_outside0_x128: ValidatedUint256
    fee_growth_outside1_x128: ValidatedUint256
    tick_cumulative_outside: ValidatedInt56 = 0
    seconds_per_liquidity_outside_x128: ValidatedUint160 = 0
    seconds_outside: ValidatedUint32 = 0
    initialized: bool = True


@dataclasses.dataclass(slots=True, frozen=True)
class TickRange:
    """
    An inclusive, spacing-aligned tick window and the bitmap words covering it. The window is
    empty when `from_tick > to_tick`.
    """

    from_tick: Tick
    to_tick: Tick
    from_word: Word
    to_word: Word

    @property
    def is_empty(self) -> bool:
        return self.from_tick > self.to_tick


@dataclasses.dataclass(slots=True, frozen=True)
class PackedTick:
    """
    The values carried by a packed tick blob.
    """

    tick: Tick
    liquidity_gross: int
    liquidity_net: int
    fee_growth_outside0_x128: int
    fee_growth_outside1_x128: int
