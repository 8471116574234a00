from string_search.search.algorithms.naive import naive_search
from string_search.search.algorithms.kmp import build_failure_table, kmp_search
from string_search.search.algorithms.rabinkarp import (
    RollingHash,
    hash_window,
    leading_coefficient,
    rabin_karp_search,
    roll_hash,
)
from string_search.search.algorithms.horspool import bad_char_shift, build_bad_char_table, horspool_search

__all__ = [
    "RollingHash",
    "bad_char_shift",
    "build_bad_char_table",
    "build_failure_table",
    "hash_window",
    "horspool_search",
    "kmp_search",
    "leading_coefficient",
    "naive_search",
    "rabin_karp_search",
    "roll_hash",
]
