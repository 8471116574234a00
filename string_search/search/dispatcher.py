import logging
import time
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from string_search.search.base import MatchSet, SearchStats, Text, UnknownAlgorithmError
from string_search.search.algorithms.naive import naive_search
from string_search.search.algorithms.kmp import kmp_search
from string_search.search.algorithms.rabinkarp import rabin_karp_search
from string_search.search.algorithms.horspool import horspool_search

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    NAIVE = "naive"
    KMP = "kmp"
    RABIN_KARP = "rabinKarp"
    HORSPOOL = "horspool"


Matcher = Callable[..., MatchSet]

ALGORITHM_MAP: Dict[Algorithm, Matcher] = {
    Algorithm.NAIVE: naive_search,
    Algorithm.KMP: kmp_search,
    Algorithm.RABIN_KARP: rabin_karp_search,
    Algorithm.HORSPOOL: horspool_search,
}

# Keys are lowercased with '_' and '-' removed
ALGORITHM_ALIASES: Dict[str, Algorithm] = {
    "naive": Algorithm.NAIVE,
    "bruteforce": Algorithm.NAIVE,
    "kmp": Algorithm.KMP,
    "knuthmorrispratt": Algorithm.KMP,
    "rabinkarp": Algorithm.RABIN_KARP,
    "hashing": Algorithm.RABIN_KARP,
    "horspool": Algorithm.HORSPOOL,
    "boyermoore": Algorithm.HORSPOOL,
    "bmh": Algorithm.HORSPOOL,
}

DEFAULT_ALGORITHM = Algorithm.NAIVE


def _normalize(algorithm_id: str) -> str:
    return algorithm_id.strip().lower().replace("_", "").replace("-", "")


def is_known_algorithm(algorithm_id: str) -> bool:
    return _normalize(algorithm_id) in ALGORITHM_ALIASES


def resolve_algorithm(algorithm_id: Union[str, Algorithm, None], strict: bool = False) -> Algorithm:
    """
    Map an algorithm identifier onto an ``Algorithm``.

    Unknown identifiers fall back to the naive matcher. With ``strict=True``
    they raise ``UnknownAlgorithmError`` instead.

    Args:
        algorithm_id: Enum member, canonical name or alias (case-insensitive).
        strict (bool): Reject unknown identifiers.

    Returns:
        Algorithm: The resolved algorithm.

    Raises:
        UnknownAlgorithmError: If ``strict`` is set and the identifier is unknown.
    """
    if isinstance(algorithm_id, Algorithm):
        return algorithm_id
    if algorithm_id is not None:
        algorithm = ALGORITHM_ALIASES.get(_normalize(str(algorithm_id)))
        if algorithm is not None:
            return algorithm

    valid = ", ".join(member.value for member in Algorithm)
    if strict:
        raise UnknownAlgorithmError(f"Unknown search algorithm '{algorithm_id}'. Valid options: {valid}")
    logger.warning("Unknown search algorithm '%s', falling back to '%s'", algorithm_id, DEFAULT_ALGORITHM.value)
    return DEFAULT_ALGORITHM


def _check_types(text: Text, pattern: Text) -> None:
    text_is_bytes = isinstance(text, (bytes, bytearray))
    pattern_is_bytes = isinstance(pattern, (bytes, bytearray))
    if text_is_bytes != pattern_is_bytes:
        raise TypeError(
            f"text and pattern must both be str or both be bytes, "
            f"got {type(text).__name__} and {type(pattern).__name__}"
        )


def search(
    text: Text,
    pattern: Text,
    algorithm: Union[str, Algorithm, None] = DEFAULT_ALGORITHM,
    *,
    strict: bool = False,
    stats: Optional[SearchStats] = None,
) -> MatchSet:
    """
    Find every occurrence of ``pattern`` in ``text`` with the chosen algorithm.

    Args:
        text: Text to search (``str`` or ``bytes``).
        pattern: Pattern of the same kind as ``text``.
        algorithm: Algorithm identifier; unknown identifiers fall back to naive.
        strict (bool): Raise ``UnknownAlgorithmError`` for unknown identifiers.
        stats (SearchStats, optional): Filled in by the matcher.

    Returns:
        list[int]: Ascending start offsets, overlapping occurrences included.
    """
    _check_types(text, pattern)
    resolved = resolve_algorithm(algorithm, strict=strict)
    logger.debug("Searching with %s (n=%d, m=%d)", resolved.value, len(text), len(pattern))
    if stats is not None:
        stats.algorithm = resolved.value
        stats.text_length = len(text)
        stats.pattern_length = len(pattern)
    matches = ALGORITHM_MAP[resolved](text, pattern, stats=stats)
    if stats is not None:
        stats.matches = len(matches)
    return matches


def search_with_stats(
    text: Text,
    pattern: Text,
    algorithm: Union[str, Algorithm, None] = DEFAULT_ALGORITHM,
    *,
    strict: bool = False,
) -> Tuple[MatchSet, SearchStats]:
    """Run ``search`` and return its matches with a fresh ``SearchStats``."""
    stats = SearchStats()
    start_time = time.perf_counter()
    matches = search(text, pattern, algorithm, strict=strict, stats=stats)
    stats.search_time = time.perf_counter() - start_time
    return matches, stats
