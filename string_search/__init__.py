"""Exact substring search with naive, KMP, Rabin-Karp and Horspool matchers."""

from string_search.search import Algorithm, SearchStats, UnknownAlgorithmError, search, search_with_stats

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "SearchStats",
    "UnknownAlgorithmError",
    "search",
    "search_with_stats",
]
