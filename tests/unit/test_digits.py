"""Unit tests for count_digits.

Tests cover:
- Zero and single digits for every width
- Decimal boundaries (9/10, 99/100, ...) for signed and unsigned values
- Minimum and maximum values of each width
- Thousands separators
- Range and type validation
"""

import random

import pytest

from reflectkit_core.utils.digits import IntegerWidth, count_digits


def _boundary_values(width: IntegerWidth):
    values = {0, width.min_value, width.max_value}
    for k in range(1, width.max_digits + 1):
        for candidate in (10**k - 1, 10**k, -(10**k - 1), -(10**k)):
            if width.min_value <= candidate <= width.max_value:
                values.add(candidate)
    return sorted(values)


class TestCountDigitsZero:
    """Zero always needs exactly one character."""

    @pytest.mark.parametrize("width", list(IntegerWidth))
    def test_zero(self, width):
        assert count_digits(0, width=width) == 1

    @pytest.mark.parametrize("width", list(IntegerWidth))
    def test_zero_with_commas(self, width):
        assert count_digits(0, commas=True, width=width) == 1


class TestCountDigitsMatchesStr:
    """Rendered length equals len(str(n)) and len(f'{n:,}')."""

    @pytest.mark.parametrize("width", list(IntegerWidth))
    def test_boundaries(self, width):
        for n in _boundary_values(width):
            assert count_digits(n, width=width) == len(str(n)), n
            assert count_digits(n, commas=True, width=width) == len(f"{n:,}"), n

    def test_random_int32_sample(self):
        rng = random.Random(1234)
        for _ in range(5000):
            n = rng.randint(-(2**31), 2**31 - 1)
            assert count_digits(n) == len(str(n))
            assert count_digits(n, True) == len(f"{n:,}")

    def test_random_uint64_sample(self):
        rng = random.Random(99)
        for _ in range(2000):
            n = rng.randint(0, 2**64 - 1)
            assert count_digits(n, width=IntegerWidth.UINT64) == len(str(n))


class TestCountDigitsExtremes:
    """Minimum values are classified without overflow."""

    def test_int32_min(self):
        assert count_digits(-2147483648) == 11
        assert count_digits(-2147483648, commas=True) == len("-2,147,483,648")

    def test_int32_max(self):
        assert count_digits(2147483647) == 10

    def test_int64_min(self):
        n = -9223372036854775808
        assert count_digits(n, width=IntegerWidth.INT64) == 20
        assert count_digits(n, commas=True, width=IntegerWidth.INT64) == len(f"{n:,}")

    def test_int64_max(self):
        assert count_digits(9223372036854775807, width=IntegerWidth.INT64) == 19

    def test_uint32_max(self):
        assert count_digits(4294967295, width=IntegerWidth.UINT32) == 10

    def test_uint64_max(self):
        assert count_digits(18446744073709551615, width=IntegerWidth.UINT64) == 20
        assert count_digits(18446744073709551615, True, IntegerWidth.UINT64) == 26


class TestCountDigitsSeparators:
    """One separator per full group of three digits left of the first."""

    @pytest.mark.parametrize(
        "num, expected",
        [
            (999, 3),
            (1000, 5),
            (999999, 7),
            (1000000, 9),
            (-1000, 6),
            (-1234567, 10),
        ],
    )
    def test_commas(self, num, expected):
        assert count_digits(num, commas=True) == expected


class TestCountDigitsValidation:
    """Values must be ints representable in the chosen width."""

    def test_int32_overflow_raises(self):
        with pytest.raises(ValueError, match="out of range for INT32"):
            count_digits(2**31)

    def test_int32_underflow_raises(self):
        with pytest.raises(ValueError):
            count_digits(-(2**31) - 1)

    def test_negative_unsigned_raises(self):
        with pytest.raises(ValueError, match="UINT64"):
            count_digits(-1, width=IntegerWidth.UINT64)

    def test_float_raises(self):
        with pytest.raises(TypeError):
            count_digits(1.5)

    def test_bool_raises(self):
        with pytest.raises(TypeError):
            count_digits(True)


class TestIntegerWidth:
    """Range metadata of each width."""

    def test_ranges(self):
        assert IntegerWidth.INT32.min_value == -(2**31)
        assert IntegerWidth.INT32.max_value == 2**31 - 1
        assert IntegerWidth.UINT32.min_value == 0
        assert IntegerWidth.UINT32.max_value == 2**32 - 1
        assert IntegerWidth.INT64.min_value == -(2**63)
        assert IntegerWidth.UINT64.max_value == 2**64 - 1

    def test_max_digits_match_extremes(self):
        for width in IntegerWidth:
            assert width.max_digits == len(str(width.max_value))
