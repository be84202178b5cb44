"""Binary search on sorted and rotated sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

NOT_FOUND = -1


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or NOT_FOUND."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def recursive_search(arr: Sequence[int], target: int) -> int:
    """Recursive binary search; return the index of ``target`` or NOT_FOUND."""

    def _search(low: int, high: int) -> int:
        if low > high:
            return NOT_FOUND
        mid = low + (high - low) // 2
        if arr[mid] == target:
            return mid
        if target > arr[mid]:
            return _search(mid + 1, high)
        return _search(low, mid - 1)

    return _search(0, len(arr) - 1)


def lower_bound(arr: Sequence[int], x: int) -> int:
    """Index of the first element not less than ``x``."""
    return bisect_left(arr, x)


def upper_bound(arr: Sequence[int], x: int) -> int:
    """Index of the first element greater than ``x``."""
    return bisect_right(arr, x)


def search_insert(arr: Sequence[int], x: int) -> int:
    """Position at which ``x`` is found or would be inserted."""
    return bisect_left(arr, x)


def find_floor(arr: Sequence[int], x: int) -> int:
    """Largest element not greater than ``x``, or NOT_FOUND."""
    index = bisect_right(arr, x)
    return arr[index - 1] if index else NOT_FOUND


def find_ceil(arr: Sequence[int], x: int) -> int:
    """Smallest element not less than ``x``, or NOT_FOUND."""
    index = bisect_left(arr, x)
    return arr[index] if index < len(arr) else NOT_FOUND


def first_and_last_position(arr: Sequence[int], k: int) -> tuple[int, int]:
    """First and last index of ``k`` in sorted ``arr``, or (NOT_FOUND, NOT_FOUND)."""
    first = bisect_left(arr, k)
    if first == len(arr) or arr[first] != k:
        return NOT_FOUND, NOT_FOUND
    return first, bisect_right(arr, k) - 1


def count_occurrences(arr: Sequence[int], x: int) -> int:
    """Number of times ``x`` occurs in sorted ``arr``."""
    return bisect_right(arr, x) - bisect_left(arr, x)


def search_rotated(arr: Sequence[int], k: int) -> int:
    """Index of ``k`` in a rotated sorted sequence of distinct values, or NOT_FOUND."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] == k:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= k <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= k <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def search_rotated_with_duplicates(arr: Sequence[int], k: int) -> bool:
    """Whether ``k`` occurs in a rotated sorted sequence that may hold duplicates."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] == k:
            return True
        if arr[low] == arr[mid] == arr[high]:
            low += 1
            high -= 1
            continue
        if arr[low] <= arr[mid]:
            if arr[low] <= k <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= k <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def find_min_rotated(arr: Sequence[int]) -> int:
    """Minimum of a rotated sorted sequence of distinct values."""
    if not arr:
        raise ValueError("find_min_rotated() arg is an empty sequence")
    low, high = 0, len(arr) - 1
    best = arr[0]
    while low <= high:
        mid = low + (high - low) // 2
        if arr[low] <= arr[mid]:
            best = min(best, arr[low])
            low = mid + 1
        else:
            best = min(best, arr[mid])
            high = mid - 1
    return best


def find_rotation_count(arr: Sequence[int]) -> int:
    """Index of the minimum of a rotated sorted sequence, i.e. how far it was rotated.

    Returns NOT_FOUND for an empty sequence.
    """
    low, high = 0, len(arr) - 1
    index = NOT_FOUND
    best: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        if arr[low] <= arr[high]:
            if best is None or arr[low] < best:
                index, best = low, arr[low]
            break
        if arr[low] <= arr[mid]:
            if best is None or arr[low] < best:
                index, best = low, arr[low]
            low = mid + 1
        else:
            high = mid - 1
            if best is None or arr[mid] < best:
                index, best = mid, arr[mid]
    return index


def single_non_duplicate(arr: Sequence[int]) -> int:
    """The one value that appears once in a sorted sequence of pairs, or NOT_FOUND."""
    n = len(arr)
    if n == 0:
        raise ValueError("single_non_duplicate() arg is an empty sequence")
    if n == 1 or arr[0] != arr[1]:
        return arr[0]
    if arr[-1] != arr[-2]:
        return arr[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] != arr[mid - 1] and arr[mid] != arr[mid + 1]:
            return arr[mid]
        if mid % 2 == 1:
            on_left = arr[mid] == arr[mid - 1]
        else:
            on_left = arr[mid] == arr[mid + 1]
        if on_left:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def find_peak_element(arr: Sequence[int]) -> int:
    """Index of an element greater than its neighbours, or NOT_FOUND."""
    n = len(arr)
    if n == 0:
        raise ValueError("find_peak_element() arg is an empty sequence")
    if n == 1 or arr[0] > arr[1]:
        return 0
    if arr[-1] > arr[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid] > arr[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND