"""Binary search on the answer space."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from itertools import pairwise

from dsaprep.bs_basics import NOT_FOUND


def floor_sqrt(n: int) -> int:
    """Largest integer whose square is at most ``n``."""
    if n < 0:
        raise ValueError("floor_sqrt() not defined for negative numbers")
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        if mid * mid <= n:
            low = mid + 1
        else:
            high = mid - 1
    return high


class _Power(Enum):
    BELOW = 0
    EQUAL = 1
    ABOVE = 2


def _compare_power(base: int, n: int, m: int) -> _Power:
    value = 1
    for _ in range(n):
        value *= base
        if value > m:
            return _Power.ABOVE
    return _Power.EQUAL if value == m else _Power.BELOW


def nth_root(n: int, m: int) -> int:
    """Integer ``n``-th root of ``m``, or NOT_FOUND when ``m`` is not a perfect power."""
    low, high = 1, m
    while low <= high:
        mid = low + (high - low) // 2
        outcome = _compare_power(mid, n, m)
        if outcome is _Power.EQUAL:
            return mid
        if outcome is _Power.BELOW:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def min_eating_rate(piles: Sequence[int], h: int) -> int:
    """Smallest eating rate that finishes all ``piles`` within ``h`` hours."""
    low, high = 1, max(piles)
    while low < high:
        mid = low + (high - low) // 2
        if sum(_ceil_div(p, mid) for p in piles) <= h:
            high = mid
        else:
            low = mid + 1
    return low


def _bouquets(bloom_days: Sequence[int], day: int, k: int) -> int:
    total = run = 0
    for bloom in bloom_days:
        if bloom <= day:
            run += 1
        else:
            total += run // k
            run = 0
    return total + run // k


def rose_garden(bloom_days: Sequence[int], k: int, m: int) -> int:
    """First day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or NOT_FOUND."""
    if k * m > len(bloom_days):
        return NOT_FOUND
    low, high = min(bloom_days), max(bloom_days)
    while low <= high:
        mid = low + (high - low) // 2
        if _bouquets(bloom_days, mid, k) >= m:
            high = mid - 1
        else:
            low = mid + 1
    return low


def smallest_divisor(arr: Sequence[int], limit: int) -> int:
    """Smallest divisor whose rounded-up quotients sum to at most ``limit``."""
    low, high = 1, max(arr)
    while low <= high:
        mid = low + (high - low) // 2
        if sum(_ceil_div(a, mid) for a in arr) <= limit:
            high = mid - 1
        else:
            low = mid + 1
    return low


def _partitions(values: Sequence[int], capacity: int) -> int:
    """Number of consecutive groups when each group's sum is kept within ``capacity``."""
    count, load = 1, 0
    for value in values:
        if load + value > capacity:
            count += 1
            load = value
        else:
            load += value
    return count


def _min_max_partition(values: Sequence[int], parts: int) -> int:
    low, high = max(values), sum(values)
    while low <= high:
        mid = low + (high - low) // 2
        if _partitions(values, mid) > parts:
            low = mid + 1
        else:
            high = mid - 1
    return low


def least_weight_capacity(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries all ``weights`` in order within ``days``."""
    return _min_max_partition(weights, days)


def missing_kth(vec: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from strictly increasing ``vec``."""
    low, high = 0, len(vec) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if vec[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return low + k


def _can_place(stalls: Sequence[int], distance: int, cows: int) -> bool:
    placed, last = 1, stalls[0]
    for stall in stalls[1:]:
        if stall - last >= distance:
            placed += 1
            last = stall
        if placed >= cows:
            return True
    return False


def aggressive_cows(stalls: Sequence[int], k: int) -> int:
    """Largest minimum distance at which ``k`` cows can be placed in ``stalls``."""
    ordered = sorted(stalls)
    low, high = 0, ordered[-1] - ordered[0]
    while low <= high:
        mid = low + (high - low) // 2
        if _can_place(ordered, mid, k):
            low = mid + 1
        else:
            high = mid - 1
    return high


def find_pages(arr: Sequence[int], m: int) -> int:
    """Minimum of the largest page load when books are split among ``m`` students.

    Returns NOT_FOUND when there are fewer books than students.
    """
    if len(arr) < m:
        return NOT_FOUND
    return _min_max_partition(arr, m)


def split_array_largest_sum(arr: Sequence[int], k: int) -> int:
    """Minimum possible largest sum when ``arr`` is split into ``k`` subarrays."""
    return _min_max_partition(arr, k)


def _stations_needed(positions: Sequence[int], distance: float) -> int:
    count = 0
    for a, b in pairwise(positions):
        gap = b - a
        between = int(gap / distance)
        if between and between * distance == gap:
            between -= 1
        count += between
    return count


def minimise_max_distance(arr: Sequence[int], k: int) -> float:
    """Smallest achievable largest gap after adding ``k`` gas stations, to 1e-6."""
    low = 0.0
    high = float(max((b - a for a, b in pairwise(arr)), default=0))
    while high - low > 1e-6:
        mid = (low + high) / 2.0
        if _stations_needed(arr, mid) > k:
            low = mid
        else:
            high = mid
    return high