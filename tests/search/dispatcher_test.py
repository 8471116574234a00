import logging
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from string_search.search.base import SearchStats, UnknownAlgorithmError
from string_search.search.dispatcher import (
    Algorithm,
    is_known_algorithm,
    resolve_algorithm,
    search,
    search_with_stats,
)

ALL_ALGORITHMS = ["naive", "kmp", "rabinKarp", "horspool"]


@pytest.mark.parametrize(
    "algorithm_id, expected",
    [
        ("naive", Algorithm.NAIVE),
        ("kmp", Algorithm.KMP),
        ("KMP", Algorithm.KMP),
        ("rabinKarp", Algorithm.RABIN_KARP),
        ("rabin_karp", Algorithm.RABIN_KARP),
        ("rabin-karp", Algorithm.RABIN_KARP),
        ("hashing", Algorithm.RABIN_KARP),
        ("horspool", Algorithm.HORSPOOL),
        ("boyermoore", Algorithm.HORSPOOL),
        (Algorithm.KMP, Algorithm.KMP),
    ],
)
def test_resolve_algorithm(algorithm_id, expected):
    assert resolve_algorithm(algorithm_id) is expected


def test_unknown_algorithm_falls_back_to_naive(caplog):
    with caplog.at_level(logging.WARNING, logger="string_search"):
        assert resolve_algorithm("quantum") is Algorithm.NAIVE
    assert "falling back" in caplog.text


def test_missing_algorithm_falls_back_to_naive():
    assert resolve_algorithm(None) is Algorithm.NAIVE


def test_strict_resolution_rejects_unknown():
    with pytest.raises(UnknownAlgorithmError, match="Unknown search algorithm 'quantum'"):
        resolve_algorithm("quantum", strict=True)


def test_strict_search_rejects_unknown():
    with pytest.raises(UnknownAlgorithmError):
        search("abc", "b", "quantum", strict=True)


def test_is_known_algorithm():
    assert is_known_algorithm("Rabin_Karp")
    assert not is_known_algorithm("grep")


def test_unknown_algorithm_still_searches():
    assert search("abcabc", "bc", "does-not-exist") == [1, 4]


def test_default_algorithm_is_naive():
    stats = SearchStats()
    assert search("aaaa", "aa", stats=stats) == [0, 1, 2]
    assert stats.algorithm == "naive"


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("aaaa", "aa", [0, 1, 2]),
        ("anything", "", []),
        ("ab", "abc", []),
        ("abcdef", "xyz", []),
        ("abc", "abc", [0]),
    ],
)
def test_search_edge_cases(algorithm, text, pattern, expected):
    assert search(text, pattern, algorithm) == expected


def test_cross_algorithm_agreement():
    rng = random.Random(7)
    for _ in range(100):
        alphabet = rng.choice(["ab", "abc", "ACGT", "abcdefghij"])
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 200)))
        pattern = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
        results = [search(text, pattern, algorithm) for algorithm in ALL_ALGORITHMS]
        assert all(result == results[0] for result in results), (text, pattern, results)


def test_mixed_text_kinds_rejected():
    with pytest.raises(TypeError, match="both be str or both be bytes"):
        search("abc", b"a", "kmp")


def test_bytes_search():
    assert search(b"\x01\x02\x01\x02", b"\x01\x02", "horspool") == [0, 2]


def test_search_with_stats():
    matches, stats = search_with_stats("abracadabra", "abra", "kmp")
    assert matches == [0, 7]
    assert stats.algorithm == "kmp"
    assert stats.text_length == 11
    assert stats.pattern_length == 4
    assert stats.matches == 2
    assert stats.search_time >= 0
    assert stats.as_dict()["comparisons"] == stats.comparisons


def test_search_with_stats_is_fresh_per_call():
    _, first = search_with_stats("abcabc", "abc", "rabinKarp")
    _, second = search_with_stats("abcabc", "abc", "rabinKarp")
    assert first is not second
    assert first.comparisons == second.comparisons


def test_concurrent_searches_are_independent():
    texts = ["ab" * 500, "abc" * 400, "a" * 1000]
    expected = [search(text, "ab", "naive") for text in texts]
    jobs = [(text, algorithm) for text in texts for algorithm in ALL_ALGORITHMS] * 5
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda job: search(job[0], "ab", job[1]), jobs))
    for (text, _), result in zip(jobs, results):
        assert result == expected[texts.index(text)]
