from functools import reduce
from itertools import combinations
from operator import xor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsaprep.bits import (
    bit_is_set,
    clear_bit,
    count_set_bits,
    divide,
    is_power_of_two,
    main,
    min_bit_flips,
    remove_last_set_bit,
    set_bit,
    single_number,
    single_number_thrice,
    subsets,
    swap_xor,
    toggle_bit,
    two_single_numbers,
    xor_range,
    xor_upto,
)

non_negative = st.integers(min_value=0, max_value=2**31 - 1)
positions = st.integers(min_value=0, max_value=30)
int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(st.integers(), st.integers())
def test_swap_xor_exchanges_values(a, b):
    assert swap_xor(a, b) == (b, a)


@given(non_negative, positions)
def test_set_bit_sets_only_that_bit(n, i):
    result = set_bit(n, i)
    assert bit_is_set(result, i)
    assert clear_bit(result, i) == clear_bit(n, i)


@given(non_negative, positions)
def test_clear_bit_clears_only_that_bit(n, i):
    result = clear_bit(n, i)
    assert not bit_is_set(result, i)
    assert set_bit(result, i) == set_bit(n, i)


@given(non_negative, positions)
def test_toggle_bit_flips_and_reverts(n, i):
    toggled = toggle_bit(n, i)
    assert bit_is_set(toggled, i) == (not bit_is_set(n, i))
    assert toggle_bit(toggled, i) == n


@given(st.integers(min_value=1, max_value=2**40))
def test_remove_last_set_bit_drops_one_bit(n):
    result = remove_last_set_bit(n)
    assert count_set_bits(result) == count_set_bits(n) - 1
    assert result < n


@given(st.integers(min_value=1, max_value=62))
def test_is_power_of_two(k):
    assert is_power_of_two(1 << k)
    assert not is_power_of_two((1 << k) + 1)
    assert not is_power_of_two(-(1 << k))


def test_zero_is_not_power_of_two():
    assert not is_power_of_two(0)


@given(st.integers(min_value=0, max_value=2**64))
def test_count_set_bits_matches_binary_digits(n):
    assert count_set_bits(n) == bin(n).count("1")


def test_count_set_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_set_bits(-1)


@given(non_negative, positions)
def test_min_bit_flips_single_flip(a, i):
    assert min_bit_flips(a, a) == 0
    assert min_bit_flips(a, toggle_bit(a, i)) == 1


@given(non_negative, non_negative)
def test_min_bit_flips_symmetric(a, b):
    flips = min_bit_flips(a, b)
    assert flips == min_bit_flips(b, a)
    assert 0 <= flips <= 31


def test_subsets_order():
    assert subsets([1, 2]) == [[1, 2], [2], [1], []]


@given(st.lists(st.integers(), max_size=8, unique=True))
def test_subsets_is_power_set(nums):
    result = subsets(nums)
    expected = {combo for r in range(len(nums) + 1) for combo in combinations(nums, r)}
    assert len(result) == 2 ** len(nums)
    assert {tuple(s) for s in result} == expected
    assert result[0] == nums
    assert result[-1] == []


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=1, max_size=10), st.randoms())
def test_single_number(values, rnd):
    single, *paired = values
    nums = [single, *paired, *paired]
    rnd.shuffle(nums)
    assert single_number(nums) == single


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=1, max_size=10), st.randoms())
def test_single_number_thrice(values, rnd):
    single, *tripled = values
    nums = [single, *tripled, *tripled, *tripled]
    rnd.shuffle(nums)
    assert single_number_thrice(nums) == single


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=10), st.randoms())
def test_two_single_numbers(values, rnd):
    first, second, *paired = values
    nums = [first, second, *paired, *paired]
    rnd.shuffle(nums)
    assert set(two_single_numbers(nums)) == {first, second}


@given(st.integers(min_value=0, max_value=500))
def test_xor_upto_matches_fold(n):
    assert xor_upto(n) == reduce(xor, range(1, n + 1), 0)


@given(st.integers(min_value=1, max_value=300), st.integers(min_value=0, max_value=300))
def test_xor_range_matches_fold(lo, width):
    hi = lo + width
    assert xor_range(lo, hi) == reduce(xor, range(lo, hi + 1), 0)


@given(int32, int32.filter(lambda d: d != 0))
def test_divide_truncates_toward_zero(a, b):
    quotient = abs(a) // abs(b)
    expected = quotient if (a < 0) == (b < 0) else -quotient
    assert divide(a, b) == min(expected, 2**31 - 1)


def test_divide_overflow_clamps():
    assert divide(-(2**31), -1) == 2**31 - 1


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(7, 0)


def test_main_demo(capsys):
    assert main(["demo"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == str(count_set_bits(9982))
    assert lines[2] == str(remove_last_set_bit(9982))
    assert len(lines) == 9


def test_main_flips(capsys):
    assert main(["flips", "10", "7"]) == 0
    assert capsys.readouterr().out.strip() == str(min_bit_flips(10, 7))


def test_main_pair(capsys):
    assert main(["pair", "4", "1", "4", "6"]) == 0
    assert {int(v) for v in capsys.readouterr().out.split()} == {1, 6}


def test_main_xor_range(capsys):
    assert main(["xor", "3", "9"]) == 0
    assert capsys.readouterr().out.strip() == str(xor_range(3, 9))