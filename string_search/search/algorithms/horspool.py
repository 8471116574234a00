from typing import Dict, Hashable, Optional
from string_search.search.base import MatchSet, SearchStats, Text


def build_bad_char_table(pattern: Text, stats: Optional[SearchStats] = None) -> Dict[Hashable, int]:
    """
    Build the Horspool bad-character shift table.

    Every character at position ``i < m-1`` maps to ``m-1-i``; scanning left to
    right means the rightmost non-final occurrence wins. The final character
    maps to ``m`` unless it also occurs earlier in the pattern. Characters that
    are not in the table shift by ``m`` (see ``bad_char_shift``).
    """
    pattern_length = len(pattern)
    table = {}
    for i in range(pattern_length - 1):
        table[pattern[i]] = pattern_length - 1 - i
    if pattern_length:
        table.setdefault(pattern[-1], pattern_length)

    if stats is not None:
        stats.preprocessing_steps += pattern_length
    return table


def bad_char_shift(table: Dict[Hashable, int], char: Hashable, pattern_length: int) -> int:
    return table.get(char, pattern_length)


def horspool_search(text: Text, pattern: Text, stats: Optional[SearchStats] = None) -> MatchSet:
    """
    Boyer-Moore-Horspool search.

    The window is compared right to left. On a mismatch the window jumps by
    the shift recorded for the text character under its right edge; after a
    full match it moves by one so overlapping occurrences are still found.

    Time complexity: sub-linear on average for large alphabets, O(n*m) worst case.

    Args:
        text: Text to search.
        pattern: Pattern to look for.
        stats (SearchStats, optional): Receives comparison, shift and preprocessing counts.

    Returns:
        list[int]: Every start offset of ``pattern`` in ``text``, ascending.
    """
    n = len(text)
    m = len(pattern)
    if m == 0 or m > n:
        return []

    bad_char_table = build_bad_char_table(pattern, stats)
    found_in = []
    comparisons = 0
    shifts = 0

    i = m - 1  # Right edge of the window
    while i < n:
        j = 0
        while j < m:
            comparisons += 1
            if pattern[m - 1 - j] != text[i - j]:
                break
            j += 1
        if j == m:
            found_in.append(i - (m - 1))
            i += 1
        else:
            i += bad_char_shift(bad_char_table, text[i], m)
        shifts += 1

    if stats is not None:
        stats.comparisons += comparisons
        stats.shifts += shifts
    return found_in
