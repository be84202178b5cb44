"""Search-based solutions to assorted array and string problems."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise
from math import isqrt

from sortedcontainers import SortedList

from dsaprep.bs_basics import NOT_FOUND

_SCORE_LIMIT = 10**12


def min_absolute_difference(nums: Sequence[int], x: int) -> int:
    """Smallest difference between two elements at least ``x`` indices apart."""
    if not 0 <= x < len(nums):
        raise ValueError(f"x must lie between 0 and {len(nums) - 1}, got {x}")
    seen = SortedList()
    best: int | None = None
    for earlier, value in zip(nums, nums[x:]):
        seen.add(earlier)
        pos = seen.bisect_left(value)
        candidates = [seen[i] for i in (pos - 1, pos) if 0 <= i < len(seen)]
        for candidate in candidates:
            diff = abs(candidate - value)
            if best is None or diff < best:
                best = diff
    assert best is not None
    return best


def _longest_with_flips(key: str, k: int, ch: str) -> int:
    start = 0
    budget = k
    best = 0
    for end, current in enumerate(key):
        if current != ch:
            budget -= 1
        while budget < 0:
            if key[start] != ch:
                budget += 1
            start += 1
        best = max(best, end - start + 1)
    return best


def max_consecutive_answers(answer_key: str, k: int) -> int:
    """Longest run of equal answers after changing at most ``k`` of them."""
    return max(_longest_with_flips(answer_key, k, "T"), _longest_with_flips(answer_key, k, "F"))


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Total profit when each worker takes the best job within their ability."""
    hardest = max(difficulty)
    best = [0] * (hardest + 1)
    for level, gain in zip(difficulty, profit):
        best[level] = max(best[level], gain)
    best = list(accumulate(best, max))
    return sum(best[min(ability, hardest)] for ability in worker)


def max_profit_assignment_sorted(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Same as max_profit_assignment, by sorting jobs and workers."""
    jobs = sorted(zip(difficulty, profit))
    j = 0
    current = 0
    total = 0
    for ability in sorted(worker):
        while j < len(jobs) and ability >= jobs[j][0]:
            current = max(current, jobs[j][1])
            j += 1
        total += current
    return total


def maximum_length(s: str) -> int:
    """Length of the longest one-character substring occurring at least three times.

    Returns NOT_FOUND when there is none.
    """
    runs: dict[str, list[int]] = defaultdict(list)
    for ch, group in groupby(s):
        runs[ch].append(sum(1 for _ in group))

    def possible(length: int) -> bool:
        return any(
            sum(max(0, run - length + 1) for run in lengths) >= 3 for lengths in runs.values()
        )

    answer = NOT_FOUND
    low, high = 1, len(s) - 2
    while low <= high:
        mid = low + (high - low) // 2
        if possible(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def plates_between_candles(s: str, queries: Sequence[Sequence[int]]) -> list[int]:
    """For each inclusive [left, right] query, plates ('*') lying between two candles ('|')."""
    candles = [i for i, ch in enumerate(s) if ch == "|"]
    result = []
    for left, right in queries:
        first = bisect_left(candles, left)
        last = bisect_right(candles, right)
        if last:
            last -= 1
        if first < last:
            span = candles[last] - candles[first] - 1
            result.append(span - (last - first - 1))
        else:
            result.append(0)
    return result


def _gaps_fit(ordered: Sequence[int], d: int, gap: int) -> bool:
    position = ordered[0]
    for low_end in ordered[1:]:
        target = position + gap
        if low_end <= target <= low_end + d:
            position = target
        elif target < low_end:
            position = low_end
        else:
            return False
    return True


def max_possible_score(start: Sequence[int], d: int) -> int:
    """Largest minimum gap when choosing one integer from each [s, s + d]."""
    ordered = sorted(start)
    low, high = 0, _SCORE_LIMIT
    while low <= high:
        mid = low + (high - low) // 2
        if _gaps_fit(ordered, d, mid):
            low = mid + 1
        else:
            high = mid - 1
    return high


def successful_pairs(spells: Sequence[int], potions: Sequence[int], success: int) -> list[int]:
    """For each spell, how many potions make its product reach ``success``."""
    ordered = sorted(potions)

    def count(spell: int) -> int:
        first = bisect_left(ordered, True, key=lambda potion: spell * potion >= success)
        return len(ordered) - first

    return [count(spell) for spell in spells]


def reverse_pairs(nums: Sequence[int]) -> int:
    """Number of pairs i < j with nums[i] > 2 * nums[j]."""
    doubled = SortedList()
    total = 0
    for value in reversed(nums):
        total += doubled.bisect_left(value)
        doubled.add(2 * value)
    return total


def longest_square_streak(nums: Sequence[int]) -> int:
    """Longest chain in which each value is the square of the previous, or NOT_FOUND."""
    streak: dict[int, int] = {}
    best = NOT_FOUND
    for value in sorted(nums):
        root = isqrt(value)
        if root * root == value and root in streak:
            streak[value] = streak[root] + 1
            best = max(best, streak[value])
        else:
            streak[value] = 1
    return best


def _can_rob(nums: Sequence[int], k: int, capability: int) -> bool:
    taken = 0
    last: int | None = None
    for index, value in enumerate(nums):
        if value <= capability and (last is None or index != last + 1):
            last = index
            taken += 1
    return taken >= k


def min_capability(nums: Sequence[int], k: int) -> int:
    """Smallest maximum over ``k`` pairwise non-adjacent chosen values."""
    low, high = 1, max(nums)
    while low <= high:
        mid = low + (high - low) // 2
        if _can_rob(nums, k, mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def max_increasing_subarrays(nums: Sequence[int]) -> int:
    """Largest k with two adjacent strictly increasing subarrays of length k."""
    if not nums:
        return 0
    runs = [1]
    for later, earlier in pairwise(reversed(nums)):
        runs.append(runs[-1] + 1 if earlier < later else 1)
    suffix = runs[::-1]
    n = len(nums)

    def fits(length: int) -> bool:
        return any(
            suffix[i] >= length and suffix[i + length] >= length
            for i in range(n - 2 * length + 1)
        )

    low, high = 1, n // 2
    while low <= high:
        mid = low + (high - low) // 2
        if fits(mid):
            low = mid + 1
        else:
            high = mid - 1
    return high


def minimum_size(nums: Sequence[int], max_operations: int) -> int:
    """Smallest possible largest bag after at most ``max_operations`` splits."""
    low, high = 1, max(nums)
    while low <= high:
        mid = low + (high - low) // 2
        splits = sum((n - 1) // mid for n in nums)
        if splits <= max_operations:
            high = mid - 1
        else:
            low = mid + 1
    return low