from tick_helper.constants import MAX_UINT256, MIN_UINT256
from tick_helper.exceptions import EVMRevertError

# This module is adapted from the Uniswap V3 BitMath.sol library.
# Reference: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/BitMath.sol

# Binary search thresholds, each the bit length of the half being tested
_SEARCH_WIDTHS = (128, 64, 32, 16, 8, 4, 2, 1)


def least_significant_bit(number: int) -> int:
    """
    Find the least significant bit for the given number.

    The lowest set bit is isolated by the two's complement trick `number & -number`, which clears
    every bit except the lowest one. Its position is then found by a fixed 8-step binary search:
    if the isolated bit sits at or above the midpoint of the remaining width, shift it down and
    add the width to the result.

    e.g. for 0b1011000, the isolated bit is 0b1000
        width 128, 64, 32, 16, 8: 0b1000 < 2**width, unchanged
        width 4: 0b1000 < 2**4, unchanged
        width 2: 0b1000 >= 2**2, shift to 0b10, result = 2
        width 1: 0b10 >= 2**1, shift to 0b1, result = 3
    """

    if number <= MIN_UINT256:
        raise EVMRevertError(error="required: number > 0")
    if number > MAX_UINT256:
        raise EVMRevertError(error="required: number <= max(uint256)")

    isolated = number & -number

    result = 0
    for width in _SEARCH_WIDTHS:
        if isolated >= 1 << width:
            isolated >>= width
            result += width

    return result
