"""
Digit counting for fixed-width integers.

Computes how many characters a number needs when printed in base 10, so
formatters can size buffers and align columns without building the string.

License: MIT
"""

from enum import Enum
from typing import Tuple

# Largest value having k digits, for k = 1..19: 9, 99, 999, ...
_DECIMAL_BOUNDS: Tuple[int, ...] = tuple(10**k - 1 for k in range(1, 20))


class IntegerWidth(Enum):
    """
    Supported fixed-width integer kinds.

    Each member carries (bits, signed, max_digits).
    """

    INT32 = (32, True, 10)
    UINT32 = (32, False, 10)
    INT64 = (64, True, 19)
    UINT64 = (64, False, 20)

    def __init__(self, bits: int, signed: bool, max_digits: int) -> None:
        self.bits = bits
        self.signed = signed
        self.max_digits = max_digits

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def _classify_non_negative(num: int, max_digits: int) -> int:
    for digits, bound in enumerate(_DECIMAL_BOUNDS[: max_digits - 1], start=1):
        if num <= bound:
            return digits
    return max_digits


def _classify_negative(num: int, max_digits: int) -> int:
    # Compare against -bound instead of negating num so the minimum value
    # never has to be represented as a positive number.
    for digits, bound in enumerate(_DECIMAL_BOUNDS[: max_digits - 1], start=1):
        if num >= -bound:
            return digits
    return max_digits


def count_digits(num: int, commas: bool = False, width: IntegerWidth = IntegerWidth.INT32) -> int:
    """
    Count the characters needed to print ``num`` in base 10.

    Includes a leading minus sign for negative values and, when ``commas`` is
    set, one thousands separator per group of three digits.

    Args:
        num: Value to measure; must be representable in ``width``
        commas: Whether thousands separators will be inserted
        width: Integer kind the value belongs to

    Returns:
        Exact rendered length

    Raises:
        TypeError: If num is not an int (bool is rejected)
        ValueError: If num is outside the range of ``width``

    Example:
        >>> count_digits(-1234567, commas=True)
        10
        >>> count_digits(18446744073709551615, width=IntegerWidth.UINT64)
        20
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"num must be an int, got {type(num).__name__}")

    if num < width.min_value or num > width.max_value:
        raise ValueError(
            f"{num} is out of range for {width.name} "
            f"[{width.min_value}, {width.max_value}]"
        )

    if num < 0:
        count = _classify_negative(num, width.max_digits)
    else:
        count = _classify_non_negative(num, width.max_digits)

    if commas:
        count += (count - 1) // 3
    if num < 0:
        count += 1
    return count
