from string_search.search.base import SearchStats, UnknownAlgorithmError, read_text
from string_search.search.dispatcher import Algorithm, resolve_algorithm, search, search_with_stats
from string_search.search.position import to_row_col, to_row_cols

__all__ = [
    "Algorithm",
    "SearchStats",
    "UnknownAlgorithmError",
    "read_text",
    "resolve_algorithm",
    "search",
    "search_with_stats",
    "to_row_col",
    "to_row_cols",
]
