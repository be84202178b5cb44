# dsaprep

Small, self-contained solutions to classic algorithm problems: binary search
on arrays and on answers, searching in matrices, bit manipulation, and short
walk-throughs of the basic container types.

Requires Python 3.10 or later and `sortedcontainers`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

Functions that can fail to find an answer return `dsaprep.bs_basics.NOT_FOUND`
(which is `-1`); inputs that make a question meaningless, such as an empty
sequence where an element is needed, raise `ValueError`.

- `dsaprep.bs_basics` – binary search on sorted and rotated sequences:
  `search`, `recursive_search`, `lower_bound`, `upper_bound`,
  `search_insert`, `find_floor`, `find_ceil`, `first_and_last_position`,
  `count_occurrences`, `search_rotated`, `search_rotated_with_duplicates`,
  `find_min_rotated`, `find_rotation_count`, `single_non_duplicate`,
  `find_peak_element`.
- `dsaprep.bs_answers` – binary search over the answer space:
  `floor_sqrt`, `nth_root`, `min_eating_rate`, `rose_garden`,
  `smallest_divisor`, `least_weight_capacity`, `missing_kth`,
  `aggressive_cows`, `find_pages`, `split_array_largest_sum`,
  `minimise_max_distance` (a float, accurate to 1e-6).
- `dsaprep.bs_advanced` – two sorted sequences and matrices:
  `median_of_two_sorted`, `kth_element` (1-based `k`), `row_with_max_ones`,
  `search_matrix`, `search_sorted_matrix`, `find_peak_grid`,
  `matrix_median`.
- `dsaprep.leetcode_search` – search and sliding-window problems:
  `min_absolute_difference`, `max_consecutive_answers`,
  `max_profit_assignment`, `max_profit_assignment_sorted`, `maximum_length`,
  `plates_between_candles`, `max_possible_score`, `successful_pairs`,
  `reverse_pairs`, `longest_square_streak`, `min_capability`,
  `max_increasing_subarrays`, `minimum_size`.
- `dsaprep.bits` – bit tricks: `swap_xor`, `bit_is_set`, `set_bit`,
  `clear_bit`, `toggle_bit`, `remove_last_set_bit`, `is_power_of_two`,
  `count_set_bits`, `min_bit_flips`, `subsets`, `single_number`,
  `single_number_thrice`, `two_single_numbers`, `xor_upto`, `xor_range`,
  and `divide`, a 32-bit truncating division clamped to the 32-bit range.
- `dsaprep.leetcode_bits` – bitwise problems: `gray_code`,
  `range_bitwise_and`, `single_numbers`, `find_duplicate`, `max_product`,
  `get_sum` (32-bit wrap-around), `subarray_bitwise_ors`, `xor_queries`,
  `num_steps`, `count_triplets`, `num_splits`, `maximum_xor_product`,
  `can_sort_array`, `minimum_subarray_length`, `min_bitwise_array`,
  `maximum_or`.
- `dsaprep.stl_demos` – walk-throughs that return the state of a container
  after a few operations: `map_demo`, `multiset_demo`,
  `priority_queue_demo`, `list_demo`, `pair_demo`, `queue_demo`, `set_demo`,
  `stack_demo`, `vector3d_demo`, `vectors_demo`, `vectors2d_demo`.

## Examples

```python
from dsaprep.bs_basics import lower_bound, search_rotated
from dsaprep.bs_answers import floor_sqrt, min_eating_rate
from dsaprep.bits import count_set_bits, xor_range

lower_bound([1, 2, 2, 3], 2)               # 1
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)   # 4
floor_sqrt(28)                             # 5
min_eating_rate([3, 6, 7, 11], 8)          # 4
count_set_bits(13)                         # 3
xor_range(3, 5)                            # 2
```

## Command line

Two commands are installed.

`dsaprep-bits` runs one bit-manipulation exercise and prints its result:

```
dsaprep-bits                    # same as "demo"
dsaprep-bits demo               # the basic bit operations on 9982 and bit 2
dsaprep-bits flips 10 7         # bit flips needed to turn 10 into 7
dsaprep-bits single 4 1 2 1 2   # value appearing once among pairs
dsaprep-bits thrice 2 2 3 2     # value appearing once among triples
dsaprep-bits pair 1 2 1 3 2 5   # two values appearing once among pairs
dsaprep-bits xor 5              # XOR of 1..5
dsaprep-bits xor 3 5            # XOR of 3..5
```

`dsaprep-stl` prints the output of the named container demos, or of all of
them when none is named. The names are `map`, `multiset`, `priority-queue`,
`list`, `pair`, `queue`, `set`, `stack`, `vector3d`, `vectors` and
`vectors2d`:

```
dsaprep-stl
dsaprep-stl set stack
```

Both commands take their input as arguments; neither reads from standard
input.