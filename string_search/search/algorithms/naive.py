from typing import Optional
from string_search.search.base import MatchSet, SearchStats, Text


def naive_search(text: Text, pattern: Text, stats: Optional[SearchStats] = None) -> MatchSet:
    """
    Brute-force scan over every candidate start position.

    Each window ``text[i:i+m]`` is compared left to right and the comparison
    stops at the first mismatching character. After a partial match the scan
    restarts at the next start index, never at the mismatch point.

    Performance characteristics:
        - Time complexity: O(n*m) worst case, O(n) best case
        - Space complexity: O(1) beyond the result list
        - No preprocessing

    Args:
        text: Text to search.
        pattern: Pattern to look for.
        stats (SearchStats, optional): Receives comparison and shift counts.

    Returns:
        list[int]: Every start offset of ``pattern`` in ``text``, ascending.
        Empty when the pattern is empty or longer than the text.
    """
    n = len(text)
    m = len(pattern)
    found_in = []
    comparisons = 0
    shifts = 0

    if 0 < m <= n:
        for i in range(n - m + 1):
            j = 0
            while j < m:
                comparisons += 1
                if text[i + j] != pattern[j]:
                    break
                j += 1
            if j == m:
                found_in.append(i)
            shifts += 1

    if stats is not None:
        stats.comparisons += comparisons
        stats.shifts += shifts
    return found_in
