"""Bit manipulation techniques on integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from functools import reduce
from operator import xor

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DEMO_NUMBER = 9982
_DEMO_BIT = 2


def swap_xor(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers using XOR instead of a temporary."""
    a = a ^ b
    b = a ^ b
    a = a ^ b
    return a, b


def bit_is_set(n: int, i: int) -> bool:
    """Whether bit ``i`` of ``n`` is one."""
    return (n >> i) & 1 == 1


def set_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def toggle_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def remove_last_set_bit(n: int) -> int:
    """``n`` with its lowest set bit cleared."""
    return n & (n - 1)


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def count_set_bits(n: int) -> int:
    """Number of one bits in a non-negative integer."""
    if n < 0:
        raise ValueError("count_set_bits() not defined for negative numbers")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def min_bit_flips(a: int, b: int) -> int:
    """Number of bits that must be flipped to turn ``a`` into ``b``."""
    return count_set_bits(a ^ b)


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, from the full set down to the empty one, by bit mask."""
    items = list(nums)
    return [
        [value for j, value in enumerate(items) if (mask >> j) & 1]
        for mask in range((1 << len(items)) - 1, -1, -1)
    ]


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def single_number_thrice(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears three times."""
    ones = twos = 0
    for value in nums:
        ones = (ones ^ value) & ~twos
        twos = (twos ^ value) & ~ones
    return ones


def two_single_numbers(nums: Sequence[int]) -> tuple[int, int]:
    """The two values that appear once when every other value appears twice."""
    combined = reduce(xor, nums, 0)
    lowest = (combined & (combined - 1)) ^ combined
    first = second = 0
    for value in nums:
        if value & lowest:
            first ^= value
        else:
            second ^= value
    return first, second


def xor_upto(n: int) -> int:
    """XOR of all integers from 1 to ``n``."""
    remainder = n % 4
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    if remainder == 3:
        return 0
    return n


def xor_range(lo: int, hi: int) -> int:
    """XOR of all integers from ``lo`` to ``hi`` inclusive."""
    return xor_upto(lo - 1) ^ xor_upto(hi)


def divide(dividend: int, divisor: int) -> int:
    """Truncating 32-bit integer division by shifting and subtracting.

    A quotient beyond the 32-bit range is clamped to it.
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == divisor:
        return 1
    if divisor == 1:
        return dividend
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining >= step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    result = -quotient if negative else quotient
    return max(INT_MIN, min(INT_MAX, result))


def _print_demo() -> None:
    a, b = _DEMO_NUMBER, _DEMO_BIT
    print(count_set_bits(a))
    print(int(is_power_of_two(a)))
    print(remove_last_set_bit(a))
    print(toggle_bit(a, b))
    print(clear_bit(a, b))
    print(set_bit(a, b))
    print(f"The values before swapping of a is {a} and b is {b}")
    swapped_a, swapped_b = swap_xor(a, b)
    print(f"The values after swapping of a is {swapped_a} and b is {swapped_b}")
    print(int(bit_is_set(a, b)))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bit manipulation exercises.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="show the basic bit operations")
    flips = commands.add_parser("flips", help="bit flips needed to turn A into B")
    flips.add_argument("a", type=int)
    flips.add_argument("b", type=int)
    for name, text in (
        ("single", "value appearing once among pairs"),
        ("thrice", "value appearing once among triples"),
        ("pair", "two values appearing once among pairs"),
    ):
        command = commands.add_parser(name, help=text)
        command.add_argument("nums", type=int, nargs="+")
    xor_command = commands.add_parser("xor", help="XOR of 1..N, or of N..M")
    xor_command.add_argument("bounds", type=int, nargs="+", metavar="N")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the bit manipulation exercises from the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command in (None, "demo"):
        _print_demo()
    elif args.command == "flips":
        print(min_bit_flips(args.a, args.b))
    elif args.command == "single":
        print(single_number(args.nums))
    elif args.command == "thrice":
        print(single_number_thrice(args.nums))
    elif args.command == "pair":
        first, second = two_single_numbers(args.nums)
        print(first, second)
    elif args.command == "xor":
        if len(args.bounds) == 1:
            print(xor_upto(args.bounds[0]))
        elif len(args.bounds) == 2:
            print(xor_range(*args.bounds))
        else:
            parser.error("xor takes one or two bounds")
    return 0