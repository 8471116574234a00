from dataclasses import dataclass
from typing import Optional, Union
from string_search.search.base import MatchSet, SearchStats, Text

BASE = 101
MODULUS = (1 << 61) - 1  # Mersenne prime

Char = Union[str, int]


def _char_value(char: Char) -> int:
    # Indexing bytes already yields an int
    return char if isinstance(char, int) else ord(char)


def hash_window(chars: Text, base: int = BASE, modulus: int = MODULUS) -> int:
    """Polynomial hash ``sum(c[k] * base**(len-1-k))`` reduced modulo ``modulus``."""
    hash_value = 0
    for char in chars:
        hash_value = (hash_value * base + _char_value(char)) % modulus
    return hash_value


def leading_coefficient(window_length: int, base: int = BASE, modulus: int = MODULUS) -> int:
    """Weight of the leftmost character in a window, ``base**(m-1) mod modulus``."""
    if window_length <= 0:
        return 0
    return pow(base, window_length - 1, modulus)


def roll_hash(
    old_hash: int,
    outgoing: Char,
    incoming: Char,
    leading: Optional[int],
    window_length: int,
    base: int = BASE,
    modulus: int = MODULUS,
) -> int:
    """
    Slide a window hash one position to the right in O(1).

    Args:
        old_hash (int): Hash of the current window.
        outgoing: Character leaving the window on the left.
        incoming: Character entering the window on the right.
        leading (int, optional): ``base**(window_length-1) mod modulus``.
            Derived from ``window_length`` when None.
        window_length (int): Length of the window.

    Returns:
        int: Hash of the shifted window.
    """
    if leading is None:
        leading = leading_coefficient(window_length, base, modulus)
    new_hash = (old_hash - _char_value(outgoing) * leading) % modulus
    return (new_hash * base + _char_value(incoming)) % modulus


@dataclass(frozen=True)
class RollingHash:
    """
    Hash of a fixed-width window together with the coefficient needed to drop
    its leftmost character.

    Instances are immutable; ``roll`` returns a new value so the leading term
    always travels with the hash it belongs to.
    """
    value: int
    leading_coefficient: int
    window_length: int
    base: int = BASE
    modulus: int = MODULUS

    @classmethod
    def of(cls, chars: Text, base: int = BASE, modulus: int = MODULUS) -> "RollingHash":
        return cls(
            hash_window(chars, base, modulus),
            leading_coefficient(len(chars), base, modulus),
            len(chars),
            base,
            modulus,
        )

    def roll(self, outgoing: Char, incoming: Char) -> "RollingHash":
        value = roll_hash(
            self.value, outgoing, incoming, self.leading_coefficient,
            self.window_length, self.base, self.modulus,
        )
        return RollingHash(value, self.leading_coefficient, self.window_length, self.base, self.modulus)


def _check_window(text: Text, pattern: Text, start: int) -> int:
    """Return how many characters matched before the first mismatch."""
    for i in range(len(pattern)):
        if text[start + i] != pattern[i]:
            return i
    return len(pattern)


def rabin_karp_search(
    text: Text,
    pattern: Text,
    stats: Optional[SearchStats] = None,
    base: int = BASE,
    modulus: int = MODULUS,
) -> MatchSet:
    """
    Rabin-Karp search with a modular rolling hash.

    A hash match only nominates a candidate window; the window is always
    verified character by character before it is reported, so collisions
    cannot produce false matches.

    Time complexity: O(n + m) on average, O(n*m) under adversarial collisions.

    Args:
        text: Text to search.
        pattern: Pattern to look for.
        stats (SearchStats, optional): Receives comparison, shift and collision counts.
        base (int): Polynomial base.
        modulus (int): Prime modulus bounding every hash value.

    Returns:
        list[int]: Every start offset of ``pattern`` in ``text``, ascending.
    """
    n = len(text)
    m = len(pattern)
    if m == 0 or m > n:
        return []

    pattern_hash = hash_window(pattern, base, modulus)
    window = RollingHash.of(text[:m], base, modulus)
    found_in = []
    comparisons = 0
    collisions = 0

    start = 0
    while True:
        if window.value == pattern_hash:
            matched = _check_window(text, pattern, start)
            comparisons += min(matched + 1, m)
            if matched == m:
                found_in.append(start)
            else:
                collisions += 1
        if start + m >= n:
            break
        window = window.roll(text[start], text[start + m])
        start += 1

    if stats is not None:
        stats.preprocessing_steps += 2 * m
        stats.comparisons += comparisons
        stats.shifts += start
        stats.hash_collisions += collisions
    return found_in
