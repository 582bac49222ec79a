import logging
from collections.abc import Callable
from typing import Any

import eth_abi.abi
import pytest
from eth_utils.crypto import keccak
from web3.exceptions import ContractLogicError

from tick_helper.connection import connection_manager
from tick_helper.logging import logger
from tick_helper.sources import UniswapV3PoolTickSource

FAKE_POOL_ADDRESS = "0x8ad599c3a0ff1de082011efddc58f1908eb6e6d8"
FAKE_BLOCK_NUMBER = 17_000_000


class FakePoolEth:
    """
    Answers `eth_call` requests for the Uniswap V3 pool getters from in-memory values.
    """

    def __init__(
        self,
        slot0: tuple[Any, ...],
        tick_spacing: int,
        tick_bitmap: dict[int, int],
        tick_data: dict[int, tuple[Any, ...]],
        chain_id: int = 1,
    ) -> None:
        self.slot0 = slot0
        self.tick_spacing = tick_spacing
        self.tick_bitmap = tick_bitmap
        self.tick_data = tick_data
        self.chain_id = chain_id
        self.revert = False
        self.calls: list[tuple[str, tuple[Any, ...], Any]] = []

        self._functions: dict[bytes, tuple[str, list[str], Callable[..., tuple[list[str], Any]]]] = {
            keccak(text="slot0()")[:4]: (
                "slot0",
                [],
                lambda: (list(UniswapV3PoolTickSource.SLOT0_STRUCT_TYPES), self.slot0),
            ),
            keccak(text="tickSpacing()")[:4]: (
                "tickSpacing",
                [],
                lambda: (["int24"], (self.tick_spacing,)),
            ),
            keccak(text="tickBitmap(int16)")[:4]: (
                "tickBitmap",
                ["int16"],
                lambda word: (["uint256"], (self.tick_bitmap.get(word, 0),)),
            ),
            keccak(text="ticks(int24)")[:4]: (
                "ticks",
                ["int24"],
                lambda tick: (
                    list(UniswapV3PoolTickSource.TICK_STRUCT_TYPES),
                    # An uninitialized tick reads as an empty struct
                    self.tick_data.get(tick, (0, 0, 0, 0, 0, 0, 0, False)),
                ),
            ),
        }

    def get_block_number(self) -> int:
        return FAKE_BLOCK_NUMBER

    def get_block(self, block_identifier: Any) -> dict[str, int]:
        return {"number": FAKE_BLOCK_NUMBER}

    def call(self, transaction: dict[str, Any], block_identifier: Any = None) -> bytes:
        if self.revert:
            raise ContractLogicError("execution reverted")

        data = bytes(transaction["data"])
        name, argument_types, handler = self._functions[data[:4]]
        arguments = eth_abi.abi.decode(argument_types, data[4:]) if argument_types else ()
        self.calls.append((name, arguments, block_identifier))

        return_types, values = handler(*arguments)
        return eth_abi.abi.encode(return_types, values)


class FakeWeb3:
    def __init__(self, eth: FakePoolEth) -> None:
        self.eth = eth

    def is_connected(self) -> bool:
        return True


@pytest.fixture
def fake_pool_web3() -> FakeWeb3:
    """
    A fake connection to a tick spacing 60 pool at tick 1234, with three initialized ticks.
    """

    return FakeWeb3(
        FakePoolEth(
            slot0=(79228162514264337593543950336, 1234, 1, 1, 1, 0, True),
            tick_spacing=60,
            tick_bitmap={
                -1: 1 << 255,  # tick -60
                0: (1 << 0) | (1 << 5) | (1 << 200),  # ticks 0, 300, 12000
            },
            tick_data={
                -60: (1_000, 1_000, 11, 12, -5, 7, 3, True),
                0: (2_000, -500, 21, 22, 0, 0, 0, True),
                300: (1_500, 1_500, 31, 32, 0, 0, 0, True),
                12_000: (3_000, -2_000, 2**255, 2**256 - 1, 0, 0, 0, True),
            },
        )
    )


@pytest.fixture
def fake_pool_address() -> str:
    return FAKE_POOL_ADDRESS


@pytest.fixture(autouse=True)
def _initialize_and_reset_after_each_test():
    """
    Before each test, clear/reset global values and singletons
    """
    connection_manager.connections.clear()
    connection_manager._default_chain_id = None


@pytest.fixture(scope="session", autouse=True)
def _set_tick_helper_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
