"""Bit-manipulation solutions to assorted array and string problems."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, combinations, groupby
from operator import or_, xor

from dsaprep.bs_basics import NOT_FOUND

_MOD = 10**9 + 7
_WORD_MASK = 0xFFFFFFFF
_SIGN_BIT = 1 << 31
_INT_BITS = 32
_PRODUCT_BITS = 50


def gray_code(n: int) -> list[int]:
    """The ``n``-bit reflected Gray code sequence."""
    return [i ^ (i >> 1) for i in range(1 << n)]


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer in [left, right]."""
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def single_numbers(nums: Sequence[int]) -> list[int]:
    """The two values that appear once when every other value appears twice."""
    combined = reduce(xor, nums, 0)
    lowest = combined & -combined
    first = second = 0
    for value in nums:
        if value & lowest:
            first ^= value
        else:
            second ^= value
    return [first, second]


def find_duplicate(nums: Sequence[int]) -> int:
    """The repeated value among values that index ``nums``, or NOT_FOUND.

    The input is left untouched.
    """
    marked = list(nums)
    for value in marked:
        index = abs(value)
        if marked[index] < 0:
            return index
        marked[index] = -marked[index]
    return NOT_FOUND


def max_product(words: Sequence[str]) -> int:
    """Largest product of lengths of two words sharing no letter, or 0."""
    masks = [reduce(or_, (1 << (ord(ch) - ord("a")) for ch in word), 0) for word in words]
    return max(
        (
            len(first) * len(second)
            for (first, first_mask), (second, second_mask) in combinations(zip(words, masks), 2)
            if not first_mask & second_mask
        ),
        default=0,
    )


def get_sum(a: int, b: int) -> int:
    """32-bit sum of ``a`` and ``b`` computed with carries instead of addition."""
    a &= _WORD_MASK
    b &= _WORD_MASK
    while b:
        a, b = (a ^ b) & _WORD_MASK, ((a & b) << 1) & _WORD_MASK
    return a if a < _SIGN_BIT else a - (1 << _INT_BITS)


def subarray_bitwise_ors(arr: Sequence[int]) -> int:
    """Number of distinct values taken by the OR of a non-empty subarray."""
    seen: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {value | previous for previous in ending_here} | {value}
        seen |= ending_here
    return len(seen)


def xor_queries(arr: Sequence[int], queries: Sequence[Sequence[int]]) -> list[int]:
    """XOR of arr[left..right] for each inclusive [left, right] query."""
    prefix = [0, *accumulate(arr, xor)]
    return [prefix[right + 1] ^ prefix[left] for left, right in queries]


def num_steps(s: str) -> int:
    """Steps to reduce a binary number to one by halving evens and incrementing odds."""
    steps = carry = 0
    for digit in reversed(s[1:]):
        if int(digit) + carry == 1:
            steps += 2
            carry = 1
        else:
            steps += 1
    return steps + carry


def count_triplets(arr: Sequence[int]) -> int:
    """Number of triplets i < j <= k with xor(arr[i:j]) == xor(arr[j:k + 1])."""
    prefix = [0, *accumulate(arr, xor)]
    seen: defaultdict[int, int] = defaultdict(int)
    index_sum: defaultdict[int, int] = defaultdict(int)
    result = 0
    for index, value in enumerate(prefix):
        result += seen[value] * (index - 1) - index_sum[value]
        seen[value] += 1
        index_sum[value] += index
    return result


def num_splits(s: str) -> int:
    """Number of splits into two non-empty halves with equally many distinct letters."""
    right = Counter(s)
    left: set[str] = set()
    splits = 0
    for ch in s:
        right[ch] -= 1
        if not right[ch]:
            del right[ch]
        left.add(ch)
        if len(left) == len(right):
            splits += 1
    return splits


def maximum_xor_product(a: int, b: int, n: int) -> int:
    """Maximum of (a ^ x) * (b ^ x) over 0 <= x < 2**n, modulo 10**9 + 7."""
    keep = ((1 << _PRODUCT_BITS) - 1) & ~((1 << n) - 1)
    x_a = a & keep
    x_b = b & keep
    for i in reversed(range(n)):
        bit = 1 << i
        if bool(a & bit) == bool(b & bit):
            x_a |= bit
            x_b |= bit
        elif x_a > x_b:
            x_b ^= bit
        else:
            x_a ^= bit
    return (x_a % _MOD) * (x_b % _MOD) % _MOD


def can_sort_array(nums: Sequence[int]) -> bool:
    """Whether swapping adjacent values with equal popcount can sort ``nums``."""
    previous_max: int | None = None
    for _, group in groupby(nums, key=int.bit_count):
        segment = list(group)
        if previous_max is not None and min(segment) < previous_max:
            return False
        previous_max = max(segment)
    return True


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose OR is at least ``k``, or NOT_FOUND."""
    counts = [0] * _INT_BITS

    def update(value: int, delta: int) -> None:
        for bit in range(_INT_BITS):
            if (value >> bit) & 1:
                counts[bit] += delta

    def window_or() -> int:
        return sum(1 << bit for bit, count in enumerate(counts) if count > 0)

    best: int | None = None
    start = 0
    for end, value in enumerate(nums):
        update(value, 1)
        while start <= end and window_or() >= k:
            length = end - start + 1
            best = length if best is None else min(best, length)
            update(nums[start], -1)
            start += 1
    return NOT_FOUND if best is None else best


def _min_or_preimage(x: int) -> int:
    if x % 2 == 0:
        return NOT_FOUND
    lowest_zero = (~x & (x + 1)).bit_length() - 1
    if not 0 < lowest_zero < _INT_BITS:
        return NOT_FOUND
    return x ^ (1 << (lowest_zero - 1))


def min_bitwise_array(nums: Sequence[int]) -> list[int]:
    """For each value v, the smallest a with a | (a + 1) == v, or NOT_FOUND."""
    return [_min_or_preimage(value) for value in nums]


def maximum_or(nums: Sequence[int], k: int) -> int:
    """Largest OR of ``nums`` after doubling one element ``k`` times."""
    items = list(nums)
    prefix = [0, *accumulate(items, or_)]
    suffix = [*accumulate(reversed(items), or_)][::-1] + [0]
    return max(
        (prefix[i] | (value << k) | suffix[i + 1] for i, value in enumerate(items)),
        default=0,
    )