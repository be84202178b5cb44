"""Binary search over pairs of sorted sequences and over matrices."""

from __future__ import annotations

from collections.abc import Sequence
from math import inf

from dsaprep.bs_basics import NOT_FOUND, lower_bound, upper_bound


def _partition_edges(
    a: Sequence[int], b: Sequence[int], cut_a: int, cut_b: int
) -> tuple[float, float, float, float]:
    """Values either side of a cut through ``a`` and ``b``; missing ones are infinite."""
    left_a = a[cut_a - 1] if cut_a > 0 else -inf
    left_b = b[cut_b - 1] if cut_b > 0 else -inf
    right_a = a[cut_a] if cut_a < len(a) else inf
    right_b = b[cut_b] if cut_b < len(b) else inf
    return left_a, left_b, right_a, right_b


def median_of_two_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    if len(a) > len(b):
        a, b = b, a
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("median_of_two_sorted() needs at least one element")
    left_size = (total + 1) // 2
    low, high = 0, len(a)
    while low <= high:
        cut_a = (low + high) // 2
        cut_b = left_size - cut_a
        l1, l2, r1, r2 = _partition_edges(a, b, cut_a, cut_b)
        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > l2:
            high = cut_a - 1
        else:
            low = cut_a + 1
    raise ValueError("median_of_two_sorted() inputs are not sorted")


def kth_element(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """The ``k``-th smallest (1-based) element of the union of two sorted sequences."""
    if len(a) > len(b):
        a, b = b, a
    if not 1 <= k <= len(a) + len(b):
        raise ValueError(f"k must lie between 1 and {len(a) + len(b)}, got {k}")
    low, high = max(k - len(b), 0), min(k, len(a))
    while low <= high:
        cut_a = (low + high) // 2
        cut_b = k - cut_a
        l1, l2, r1, r2 = _partition_edges(a, b, cut_a, cut_b)
        if l1 <= r2 and l2 <= r1:
            return int(max(l1, l2))
        if l1 > l2:
            high = cut_a - 1
        else:
            low = cut_a + 1
    raise ValueError("kth_element() inputs are not sorted")


def row_with_max_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Index of the first row holding the most ones, rows being sorted 0/1 sequences.

    Returns NOT_FOUND when no row holds a one.
    """
    best_count = 0
    best_row = NOT_FOUND
    for index, row in enumerate(matrix):
        ones = len(row) - lower_bound(row, 1)
        if ones > best_count:
            best_count, best_row = ones, index
    return best_row


def search_matrix(mat: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not mat or not mat[0]:
        return False
    width = len(mat[0])
    low, high = 0, len(mat) * width - 1
    while low <= high:
        mid = low + (high - low) // 2
        row, col = divmod(mid, width)
        value = mat[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows and columns are each sorted."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def find_peak_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Position of a cell greater than its four neighbours, or (NOT_FOUND, NOT_FOUND)."""
    if not grid or not grid[0]:
        raise ValueError("find_peak_grid() needs a non-empty grid")
    width = len(grid[0])
    low, high = 0, width - 1
    while low <= high:
        mid = low + (high - low) // 2
        row = max(range(len(grid)), key=lambda r: grid[r][mid])
        value = grid[row][mid]
        left = grid[row][mid - 1] if mid > 0 else -inf
        right = grid[row][mid + 1] if mid + 1 < width else -inf
        if value > left and value > right:
            return row, mid
        if value < left:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND, NOT_FOUND


def matrix_median(matrix: Sequence[Sequence[int]]) -> int:
    """Median of a matrix with an odd number of cells whose rows are sorted."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix_median() needs a non-empty matrix")
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    required = len(matrix) * len(matrix[0]) // 2
    while low <= high:
        mid = low + (high - low) // 2
        at_most = sum(upper_bound(row, mid) for row in matrix)
        if at_most <= required:
            low = mid + 1
        else:
            high = mid - 1
    return low