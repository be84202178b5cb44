"""Walk-throughs of the basic container types: maps, sets, heaps, queues and arrays."""

from __future__ import annotations

import argparse
import heapq
from collections import deque
from collections.abc import Callable, Sequence

from sortedcontainers import SortedDict, SortedList, SortedSet


def map_demo() -> list[tuple[int, int]]:
    """Key/value pairs of an ordered map, in key order; a key is inserted only once."""
    ordered = SortedDict()
    for key, value in ((1, 2), (2, 3), (4, 5), (0, 3)):
        ordered.setdefault(key, value)
    return list(ordered.items())


def multiset_demo() -> list[int]:
    """A sorted multiset after removing every 1 and a single 2."""
    values = SortedList([1, 2, 2, 1, 3])
    del values[values.bisect_left(1) : values.bisect_right(1)]
    values.remove(2)
    return list(values)


def priority_queue_demo() -> tuple[int, int]:
    """Top of a max-heap, and top of a min-heap after one pop."""
    max_heap: list[int] = []
    for value in (10, 12, 23, 9):
        heapq.heappush(max_heap, -value)
    largest = -max_heap[0]

    min_heap: list[int] = []
    for value in (4, 2, 8, 6, 10):
        heapq.heappush(min_heap, value)
    heapq.heappop(min_heap)
    return largest, min_heap[0]


def list_demo() -> list[int]:
    """A double-ended list built by appending at both ends."""
    items: deque[int] = deque()
    items.append(1)
    items.append(2)
    items.appendleft(3)
    items.appendleft(4)
    return list(items)


def pair_demo() -> tuple[int, tuple[int, int], tuple[int, int], tuple[int, tuple[int, str]]]:
    """Second member of the third pair in a list, two swapped pairs, and a nested pair."""
    first = (1, 2)
    nested = (2, (3, "Boom"))
    pairs = [(1, 2), (2, 3), (3, 4), (4, 5)]
    picked = pairs[2][1]
    other = (4, 3)
    first, other = other, first
    return picked, first, other, nested


def queue_demo() -> tuple[int, int, int]:
    """Back and front of a FIFO queue, then its front after one removal."""
    queue: deque[int] = deque([1, 2, 3, 4])
    back, front = queue[-1], queue[0]
    queue.popleft()
    return back, front, queue[0]


def set_demo() -> tuple[list[int], list[int]]:
    """A sorted set of unique values, before and after removing 4."""
    values = SortedSet([4, 5, 5, 3, 2])
    before = list(values)
    values.remove(4)
    return before, list(values)


def stack_demo() -> tuple[int, list[int]]:
    """Top of a LIFO stack, and the stack (bottom first) after popping it."""
    stack = [1, 2, 3, 4, 5]
    top = stack[-1]
    stack.pop()
    return top, stack


def vector3d_demo() -> list[list[list[int]]]:
    """A three-level nested array of two 2x3 blocks, filled with 11 and 9."""
    return [[[fill] * 3 for _ in range(2)] for fill in (11, 9)]


def vectors_demo() -> tuple[int, list[int], list[int], list[int], list[int], bool]:
    """Common dynamic-array operations.

    Returns the first element, both arrays as built, the second after inserting
    100 at the front, the first after removing its head, and whether the first
    is empty once cleared.
    """
    first = [2, 3, 5, 6]
    second = [50] * 5
    head = first[0]
    built_first, built_second = list(first), list(second)
    second.insert(0, 100)
    inserted = list(second)
    del first[0]
    erased = list(first)
    second.pop()
    first.clear()
    return head, built_first, built_second, inserted, erased, not first


def vectors2d_demo() -> list[list[int]]:
    """A 2x2 matrix stored as nested arrays."""
    return [[1, 2], [3, 4]]


def _join(values: Sequence[object]) -> str:
    return " ".join(str(value) for value in values)


def _format_map() -> str:
    return "\n".join(f"{key} {value}" for key, value in map_demo())


def _format_multiset() -> str:
    return _join(multiset_demo())


def _format_priority_queue() -> str:
    return "\n".join(str(value) for value in priority_queue_demo())


def _format_list() -> str:
    return _join(list_demo())


def _format_pair() -> str:
    return str(pair_demo()[0])


def _format_queue() -> str:
    return "\n".join(str(value) for value in queue_demo())


def _format_set() -> str:
    before, after = set_demo()
    return f"{_join(before)}\n{_join(after)}"


def _format_stack() -> str:
    return str(stack_demo()[0])


def _format_vector3d() -> str:
    return "\n".join(_join(row) for block in vector3d_demo() for row in block)


def _format_vectors() -> str:
    head, built_first, built_second, inserted, erased, empty = vectors_demo()
    lines = [str(head), _join(built_first), _join(built_second), _join(inserted), _join(erased)]
    lines.append(str(int(empty)))
    return "\n".join(lines)


def _format_vectors2d() -> str:
    return "\n".join(_join(row) for row in vectors2d_demo())


_DEMOS: dict[str, Callable[[], str]] = {
    "map": _format_map,
    "multiset": _format_multiset,
    "priority-queue": _format_priority_queue,
    "list": _format_list,
    "pair": _format_pair,
    "queue": _format_queue,
    "set": _format_set,
    "stack": _format_stack,
    "vector3d": _format_vector3d,
    "vectors": _format_vectors,
    "vectors2d": _format_vectors2d,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the named container demos, or of all of them."""
    parser = argparse.ArgumentParser(description="Container walk-throughs.")
    parser.add_argument(
        "demos", nargs="*", metavar="DEMO", help=f"one of: {', '.join(_DEMOS)}"
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in _DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")
    for name in args.demos or list(_DEMOS):
        print(_DEMOS[name]())
    return 0