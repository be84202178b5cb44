import math

import pytest
from hypothesis import given, strategies as st

from dsaprep import bs_answers as ba
from dsaprep.bs_basics import NOT_FOUND

positive_lists = st.lists(st.integers(1, 50), min_size=1, max_size=20)


@given(st.integers(0, 10**6))
def test_floor_sqrt(n):
    r = ba.floor_sqrt(n)
    assert r * r <= n < (r + 1) * (r + 1)
    assert r == math.isqrt(n)


def test_floor_sqrt_negative():
    with pytest.raises(ValueError):
        ba.floor_sqrt(-4)


@given(st.integers(1, 30), st.integers(1, 5))
def test_nth_root_perfect_power(base, n):
    assert ba.nth_root(n, base**n) == base


@given(st.integers(2, 30), st.integers(2, 4))
def test_nth_root_not_perfect(base, n):
    assert ba.nth_root(n, base**n + 1) == NOT_FOUND


def test_min_eating_rate_example():
    assert ba.min_eating_rate([3, 6, 7, 11], 8) == 4


@given(positive_lists, st.integers(0, 30))
def test_min_eating_rate_invariant(piles, extra):
    h = len(piles) + extra
    rate = ba.min_eating_rate(piles, h)
    assert sum(math.ceil(p / rate) for p in piles) <= h
    if rate > 1:
        assert sum(math.ceil(p / (rate - 1)) for p in piles) > h


def test_min_eating_rate_one_hour_per_pile_needs_largest():
    piles = [5, 9, 2]
    assert ba.min_eating_rate(piles, len(piles)) == max(piles)


def test_rose_garden_impossible():
    assert ba.rose_garden([1, 2, 3], 2, 2) == NOT_FOUND


@given(positive_lists)
def test_rose_garden_single_flowers(days):
    assert ba.rose_garden(days, 1, 1) == min(days)
    assert ba.rose_garden(days, 1, len(days)) == max(days)
    assert ba.rose_garden(days, len(days), 1) == max(days)


@given(positive_lists, st.integers(0, 40))
def test_smallest_divisor_invariant(arr, extra):
    limit = len(arr) + extra
    d = ba.smallest_divisor(arr, limit)
    assert sum(math.ceil(a / d) for a in arr) <= limit
    if d > 1:
        assert sum(math.ceil(a / (d - 1)) for a in arr) > limit


def test_least_weight_capacity_example():
    weights = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert ba.least_weight_capacity(weights, 5) == 15


@given(positive_lists)
def test_partition_extremes(weights):
    assert ba.least_weight_capacity(weights, 1) == sum(weights)
    assert ba.least_weight_capacity(weights, len(weights)) == max(weights)
    assert ba.split_array_largest_sum(weights, 1) == sum(weights)
    assert ba.split_array_largest_sum(weights, len(weights)) == max(weights)
    assert ba.find_pages(weights, 1) == sum(weights)
    assert ba.find_pages(weights, len(weights)) == max(weights)


@given(positive_lists, st.integers(1, 20))
def test_partition_monotone(arr, k):
    result = ba.split_array_largest_sum(arr, k)
    assert max(arr) <= result <= sum(arr)
    assert ba.split_array_largest_sum(arr, k + 1) <= result


def test_find_pages_too_few_books():
    assert ba.find_pages([12, 34], 3) == NOT_FOUND


def test_missing_kth_example():
    assert ba.missing_kth([2, 3, 4, 7, 11], 5) == 9


@given(st.lists(st.integers(1, 60), max_size=20, unique=True).map(sorted), st.integers(1, 30))
def test_missing_kth_invariant(vec, k):
    r = ba.missing_kth(vec, k)
    present = set(vec)
    assert r not in present
    assert sum(1 for x in range(1, r + 1) if x not in present) == k


@given(st.lists(st.integers(0, 1000), min_size=2, max_size=20, unique=True))
def test_aggressive_cows_two(stalls):
    assert ba.aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


@given(st.integers(1, 20), st.integers(2, 10))
def test_aggressive_cows_evenly_spaced(step, n):
    stalls = [i * step for i in range(n)][::-1]
    assert ba.aggressive_cows(stalls, n) == step


def test_minimise_max_distance_example():
    arr = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert ba.minimise_max_distance(arr, 9) == pytest.approx(0.5, abs=1e-5)


@given(st.lists(st.integers(0, 500), min_size=2, max_size=15, unique=True).map(sorted))
def test_minimise_max_distance_no_stations(arr):
    largest_gap = max(b - a for a, b in zip(arr, arr[1:]))
    assert ba.minimise_max_distance(arr, 0) == pytest.approx(largest_gap, abs=1e-5)


@given(st.lists(st.integers(0, 500), min_size=2, max_size=15, unique=True).map(sorted), st.integers(0, 20))
def test_minimise_max_distance_monotone(arr, k):
    with_k = ba.minimise_max_distance(arr, k)
    assert ba.minimise_max_distance(arr, k + 1) <= with_k + 1e-5
    assert with_k > 0