from typing import List, Optional
from string_search.search.base import MatchSet, SearchStats, Text


def build_failure_table(pattern: Text, stats: Optional[SearchStats] = None) -> List[int]:
    """
    Compute the KMP prefix table (LPS array) for a pattern.

    ``lps[i]`` is the length of the longest proper prefix of ``pattern[0..i]``
    that is also a suffix of it.

    Args:
        pattern: Pattern to preprocess.
        stats (SearchStats, optional): Receives the number of table iterations.

    Returns:
        list[int]: Table of length ``len(pattern)``.
    """
    length = len(pattern)
    lps = [0] * length

    len_prev_lps = 0
    steps = 0
    for i in range(1, length):
        while len_prev_lps > 0 and pattern[i] != pattern[len_prev_lps]:
            steps += 1
            len_prev_lps = lps[len_prev_lps - 1]
        steps += 1
        if pattern[i] == pattern[len_prev_lps]:
            len_prev_lps += 1
        lps[i] = len_prev_lps

    if stats is not None:
        stats.preprocessing_steps += steps
    return lps


def kmp_search(text: Text, pattern: Text, stats: Optional[SearchStats] = None) -> MatchSet:
    """
    Knuth-Morris-Pratt search.

    The failure table lets the scan resume after a mismatch without moving the
    text index backwards, so every text character is examined a bounded
    number of times. After a full match the pattern index falls back through
    the table, which keeps overlapping occurrences.

    Time complexity: O(n + m) regardless of alphabet or repetition.

    Args:
        text: Text to search.
        pattern: Pattern to look for.
        stats (SearchStats, optional): Receives comparison and preprocessing counts.

    Returns:
        list[int]: Every start offset of ``pattern`` in ``text``, ascending.
    """
    n = len(text)
    m = len(pattern)
    if m == 0 or m > n:
        return []

    lps = build_failure_table(pattern, stats)
    found_in = []
    comparisons = 0
    shifts = 0

    i = 0  # Index for text
    j = 0  # Index for pattern
    while i < n:
        comparisons += 1
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                found_in.append(i - j)
                j = lps[j - 1]
                shifts += 1
        elif j > 0:
            j = lps[j - 1]
            shifts += 1
        else:
            i += 1
            shifts += 1

    if stats is not None:
        stats.comparisons += comparisons
        stats.shifts += shifts
    return found_in
