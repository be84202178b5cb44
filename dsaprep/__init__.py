"""Binary-search, bit-manipulation and container exercises with worked solutions."""

__version__ = "0.1.0"

__all__ = [
    "bs_basics",
    "bs_answers",
    "bs_advanced",
    "leetcode_search",
    "bits",
    "leetcode_bits",
    "stl_demos",
]