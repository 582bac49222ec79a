import random

import pytest

from tick_helper import get_ticks
from tick_helper.constants import MAX_TICK
from tick_helper.libraries.tick_range import max_usable_tick
from tick_helper.packing import unpack_tick
from tick_helper.sources import InMemoryTickSource, UniswapV3PoolTickSource
from tick_helper.v3_types import PackedTick, PoolGlobalState, TickRecord


def _record(liquidity: int, fee: int) -> TickRecord:
    return TickRecord(
        liquidity_gross=liquidity,
        liquidity_net=-liquidity,
        fee_growth_outside0_x128=fee,
        fee_growth_outside1_x128=fee * 2,
    )


def test_single_word_fully_covered():
    source = InMemoryTickSource(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=6000),
        tick_bitmap={0: (1 << 0) | (1 << 5) | (1 << 200)},
        tick_data={
            0: _record(liquidity=100, fee=1),
            300: _record(liquidity=200, fee=2),
            12000: _record(liquidity=300, fee=3),
        },
    )

    blobs = get_ticks(source, range_multiplier=200)

    assert [unpack_tick(blob) for blob in blobs] == [
        PackedTick(
            tick=0,
            liquidity_gross=100,
            liquidity_net=-100,
            fee_growth_outside0_x128=1,
            fee_growth_outside1_x128=2,
        ),
        PackedTick(
            tick=300,
            liquidity_gross=200,
            liquidity_net=-200,
            fee_growth_outside0_x128=2,
            fee_growth_outside1_x128=4,
        ),
        PackedTick(
            tick=12000,
            liquidity_gross=300,
            liquidity_net=-300,
            fee_growth_outside0_x128=3,
            fee_growth_outside1_x128=6,
        ),
    ]


def test_no_initialized_ticks():
    source = InMemoryTickSource(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=0),
        tick_bitmap={},
        tick_data={},
    )
    assert get_ticks(source, range_multiplier=1000) == []


def test_zero_multiplier():
    source = InMemoryTickSource.from_tick_data(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=60),
        tick_data={0: _record(1, 1), 60: _record(2, 2), 120: _record(3, 3)},
    )
    assert [unpack_tick(blob).tick for blob in get_ticks(source, range_multiplier=0)] == [60]


def test_unaligned_pivot():
    source = InMemoryTickSource.from_tick_data(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=65),
        tick_data={0: _record(1, 1), 60: _record(2, 2), 120: _record(3, 3)},
    )

    # [65, 65] holds no tick and [5, 125] holds 60 and 120
    assert get_ticks(source, range_multiplier=0) == []
    assert [unpack_tick(blob).tick for blob in get_ticks(source, range_multiplier=1)] == [60, 120]


def test_pivot_at_max_tick():
    source = InMemoryTickSource.from_tick_data(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=MAX_TICK),
        tick_data={
            886620: _record(1, 1),
            886680: _record(2, 2),
            max_usable_tick(60): _record(3, 3),
        },
    )

    # The window is [886672, 887272], and 887272 is not a multiple of 60
    assert [unpack_tick(blob).tick for blob in get_ticks(source, range_multiplier=10)] == [
        886680,
        max_usable_tick(60),
    ]


def test_other_tick_spacing():
    source = InMemoryTickSource.from_tick_data(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=-15),
        tick_data={-30: _record(1, 1), -10: _record(2, 2), 10: _record(3, 3), 50: _record(4, 4)},
        tick_spacing=10,
    )
    blobs = get_ticks(source, range_multiplier=2, tick_spacing=10)
    # The window is [-35, 5]
    assert [unpack_tick(blob).tick for blob in blobs] == [-30, -10]


def test_live_pool(fake_pool_web3, fake_pool_address):
    source = UniswapV3PoolTickSource(fake_pool_address, w3=fake_pool_web3)

    # Current tick is 1234, so a range of 21 spacings covers -26 through 2494
    blobs = get_ticks(source, range_multiplier=21)
    assert [unpack_tick(blob).tick for blob in blobs] == [0, 300]

    blobs = get_ticks(source, range_multiplier=500)
    decoded = [unpack_tick(blob) for blob in blobs]
    assert [tick.tick for tick in decoded] == [-60, 0, 300, 12000]
    assert decoded[-1].fee_growth_outside0_x128 == 2**255
    assert decoded[1].liquidity_net == -500

    # Only words covering the range are read, and each tick record once
    tick_reads = [args[0] for name, args, _ in fake_pool_web3.eth.calls if name == "ticks"]
    assert tick_reads == [0, 300, -60, 0, 300, 12000]


def test_live_pool_with_pool_tick_spacing(fake_pool_web3, fake_pool_address):
    fake_pool_web3.eth.tick_spacing = 10
    fake_pool_web3.eth.tick_data = {
        -10: (1_000, 1_000, 11, 12, 0, 0, 0, True),
        0: (2_000, -500, 21, 22, 0, 0, 0, True),
        50: (1_500, 1_500, 31, 32, 0, 0, 0, True),
        2_000: (3_000, -2_000, 41, 42, 0, 0, 0, True),
    }
    source = UniswapV3PoolTickSource(fake_pool_address, w3=fake_pool_web3)

    # With spacing 10 the bits set in the fixture are ticks -10, 0, 50 and 2000. The window is
    # [-66, 2534]
    blobs = get_ticks(source, range_multiplier=130, tick_spacing=source.tick_spacing)
    assert [unpack_tick(blob).tick for blob in blobs] == [-10, 0, 50, 2000]


@pytest.mark.parametrize("seed", range(10))
def test_matches_ticks_inside_window(seed: int):
    rng = random.Random(seed)
    tick_spacing = rng.choice([1, 10, 60, 200])

    initialized_ticks = sorted(
        {rng.randrange(-2000, 2000) * tick_spacing for _ in range(rng.randrange(0, 200))}
    )
    pivot_tick = rng.randrange(-2000 * tick_spacing, 2000 * tick_spacing)
    if pivot_tick % tick_spacing == 0:
        pivot_tick += 1
    range_multiplier = rng.randrange(0, 1000)

    source = InMemoryTickSource.from_tick_data(
        global_state=PoolGlobalState(sqrt_price_x96=2**96, tick=pivot_tick),
        tick_data={tick: _record(1, 1) for tick in initialized_ticks},
        tick_spacing=tick_spacing,
    )

    blobs = get_ticks(source, range_multiplier=range_multiplier, tick_spacing=tick_spacing)
    assert [unpack_tick(blob).tick for blob in blobs] == [
        tick
        for tick in initialized_ticks
        if pivot_tick - range_multiplier * tick_spacing
        <= tick
        <= pivot_tick + range_multiplier * tick_spacing
    ]
