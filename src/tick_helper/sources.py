from collections.abc import Mapping, Sequence
from typing import Any, Self

from eth_abi.exceptions import DecodingError
from eth_typing import ChecksumAddress
from web3 import Web3
from web3.exceptions import ContractLogicError
from web3.types import BlockIdentifier

from tick_helper.checksum_cache import get_checksum_address
from tick_helper.connection import get_web3
from tick_helper.constants import TICK_SPACING
from tick_helper.exceptions import TickHelperValueError, TickRecordMissing, TickSourceError
from tick_helper.functions import encode_function_calldata, raw_call
from tick_helper.libraries.tick_bitmap import position
from tick_helper.logging import logger
from tick_helper.types.aliases import BitmapWord, Tick, Word
from tick_helper.v3_types import PoolGlobalState, TickRecord


class UniswapV3PoolTickSource:
    """
    Reads tick state from a deployed Uniswap V3 pool (or a fork with the same storage getters).

    All reads are made at a single block, so the values returned for one query are consistent
    with each other. If `block_identifier` is not provided, the latest block number at the time of
    construction is used.
    """

    SLOT0_STRUCT_TYPES = (
        "uint160",
        "int24",
        "uint16",
        "uint16",
        "uint16",
        "uint8",
        "bool",
    )
    TICK_STRUCT_TYPES = (
        "uint128",
        "int128",
        "uint256",
        "uint256",
        "int56",
        "uint160",
        "uint32",
        "bool",
    )

    def __init__(
        self,
        address: str,
        *,
        w3: Web3 | None = None,
        block_identifier: BlockIdentifier | None = None,
    ) -> None:
        self.address: ChecksumAddress = get_checksum_address(address)
        self.w3 = w3 if w3 is not None else get_web3()
        self.block_identifier: BlockIdentifier = (
            block_identifier if block_identifier is not None else self.w3.eth.get_block_number()
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(address={self.address}, "
            f"block_identifier={self.block_identifier})"
        )

    def _call(
        self,
        function_prototype: str,
        function_arguments: Sequence[Any] | None,
        return_types: Sequence[str],
    ) -> tuple[Any, ...]:
        try:
            return raw_call(
                w3=self.w3,
                address=self.address,
                calldata=encode_function_calldata(
                    function_prototype=function_prototype,
                    function_arguments=function_arguments,
                ),
                return_types=return_types,
                block_identifier=self.block_identifier,
            )
        except (ContractLogicError, DecodingError) as exc:
            # Contracts differ slightly across Uniswap V3 forks, so decoding may fail. Catch this
            # here and raise as a source-specific exception
            raise TickSourceError(
                message=f"Could not decode contract data for {function_prototype}"
            ) from exc

    def global_state(self) -> PoolGlobalState:
        (
            sqrt_price_x96,
            tick,
            observation_index,
            observation_cardinality,
            observation_cardinality_next,
            fee_protocol,
            unlocked,
        ) = self._call(
            function_prototype="slot0()",
            function_arguments=None,
            return_types=self.SLOT0_STRUCT_TYPES,
        )
        return PoolGlobalState(
            sqrt_price_x96=sqrt_price_x96,
            tick=tick,
            observation_index=observation_index,
            observation_cardinality=observation_cardinality,
            observation_cardinality_next=observation_cardinality_next,
            fee_protocol=fee_protocol,
            unlocked=unlocked,
        )

    def tick_bitmap(self, word: Word) -> BitmapWord:
        (bitmap_at_word,) = self._call(
            function_prototype="tickBitmap(int16)",
            function_arguments=[word],
            return_types=["uint256"],
        )
        return int(bitmap_at_word)

    def tick_record(self, tick: Tick) -> TickRecord:
        (
            liquidity_gross,
            liquidity_net,
            fee_growth_outside0_x128,
            fee_growth_outside1_x128,
            tick_cumulative_outside,
            seconds_per_liquidity_outside_x128,
            seconds_outside,
            initialized,
        ) = self._call(
            function_prototype="ticks(int24)",
            function_arguments=[tick],
            return_types=self.TICK_STRUCT_TYPES,
        )
        return TickRecord(
            liquidity_gross=liquidity_gross,
            liquidity_net=liquidity_net,
            fee_growth_outside0_x128=fee_growth_outside0_x128,
            fee_growth_outside1_x128=fee_growth_outside1_x128,
            tick_cumulative_outside=tick_cumulative_outside,
            seconds_per_liquidity_outside_x128=seconds_per_liquidity_outside_x128,
            seconds_outside=seconds_outside,
            initialized=initialized,
        )

    @property
    def tick_spacing(self) -> int:
        (tick_spacing,) = self._call(
            function_prototype="tickSpacing()",
            function_arguments=None,
            return_types=["int24"],
        )
        return int(tick_spacing)


class InMemoryTickSource:
    """
    A tick source backed by a snapshot of pool state held in memory.

    The bitmap is sparse: a word not present in `tick_bitmap` reads as empty.
    """

    def __init__(
        self,
        global_state: PoolGlobalState,
        tick_bitmap: Mapping[Word, BitmapWord],
        tick_data: Mapping[Tick, TickRecord],
    ) -> None:
        self._global_state = global_state
        self._tick_bitmap = dict(tick_bitmap)
        self._tick_data = dict(tick_data)

    @classmethod
    def from_tick_data(
        cls,
        global_state: PoolGlobalState,
        tick_data: Mapping[Tick, TickRecord],
        tick_spacing: int = TICK_SPACING,
    ) -> Self:
        """
        Build a snapshot from tick records alone, marking each tick as initialized in the bitmap.
        """

        tick_bitmap: dict[Word, BitmapWord] = {}
        for tick in tick_data:
            if tick % tick_spacing != 0:
                raise TickHelperValueError(message=f"Tick {tick} not correctly spaced!")
            word_pos, bit_pos = position(tick // tick_spacing)
            tick_bitmap[word_pos] = tick_bitmap.get(word_pos, 0) | (1 << bit_pos)

        logger.debug(f"Built bitmap with {len(tick_bitmap)} words for {len(tick_data)} ticks")
        return cls(global_state=global_state, tick_bitmap=tick_bitmap, tick_data=tick_data)

    def global_state(self) -> PoolGlobalState:
        return self._global_state

    def tick_bitmap(self, word: Word) -> BitmapWord:
        return self._tick_bitmap.get(word, 0)

    def tick_record(self, tick: Tick) -> TickRecord:
        try:
            return self._tick_data[tick]
        except KeyError:
            raise TickRecordMissing(tick) from None
