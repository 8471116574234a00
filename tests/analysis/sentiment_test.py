import logging

import pytest

from string_search.analysis.sentiment import (
    SENTIMENT_KEYWORDS,
    KeywordHit,
    Sentiment,
    analyze_sentiment,
)
from string_search.search.base import UnknownAlgorithmError

ALL_ALGORITHMS = ["naive", "kmp", "rabinKarp", "horspool"]

REVIEW = "Great movie, great cast. The ending was bad but the music was fine."


def test_mixed_review_is_positive():
    report = analyze_sentiment(REVIEW, "kmp")

    assert report.positive == [KeywordHit(keyword="great", positions=[0, 13])]
    assert report.negative == [KeywordHit(keyword="bad", positions=[40])]
    assert report.neutral == [KeywordHit(keyword="fine", positions=[62])]
    assert (report.positive_score, report.negative_score, report.neutral_score) == (2, 1, 1)
    assert report.overall is Sentiment.POSITIVE
    assert report.word_count == 13
    assert report.algorithm == "kmp"


def test_negative_review():
    report = analyze_sentiment("Awful plot. Terrible acting, awful music.", "horspool")

    assert report.negative == [
        KeywordHit(keyword="terrible", positions=[12]),
        KeywordHit(keyword="awful", positions=[0, 29]),
    ]
    assert report.negative_score == 3
    assert report.overall is Sentiment.NEGATIVE


@pytest.mark.parametrize(
    "text",
    [
        "good but bad",
        "It was okay.",
        "",
        "Nothing to see here",
    ],
)
def test_neutral_verdicts(text):
    assert analyze_sentiment(text).overall is Sentiment.NEUTRAL


def test_empty_text():
    report = analyze_sentiment("")
    assert report.word_count == 0
    assert report.positive == report.negative == report.neutral == []


def test_keywords_match_inside_longer_words():
    report = analyze_sentiment("I enjoyed it")
    assert report.positive == [
        KeywordHit(keyword="enjoy", positions=[2]),
        KeywordHit(keyword="enjoyed", positions=[2]),
    ]


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
def test_algorithms_agree(algorithm):
    expected = analyze_sentiment(REVIEW, "naive").as_dict()
    result = analyze_sentiment(REVIEW, algorithm).as_dict()
    for key in ("algorithm", "processing_time"):
        expected.pop(key)
        result.pop(key)
    assert result == expected


def test_unknown_algorithm_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="string_search"):
        report = analyze_sentiment(REVIEW, "quantum")
    assert report.algorithm == "naive"
    assert report.positive_score == 2
    assert "quantum" in caplog.text


def test_unknown_algorithm_strict():
    with pytest.raises(UnknownAlgorithmError):
        analyze_sentiment(REVIEW, "quantum", strict=True)


def test_custom_keywords():
    report = analyze_sentiment("spam SPAM eggs", keywords={"positive": ["Spam"]})
    assert report.positive == [KeywordHit(keyword="Spam", positions=[0, 5])]
    assert report.negative == []
    assert report.overall is Sentiment.POSITIVE


def test_default_keyword_lists():
    assert set(SENTIMENT_KEYWORDS) == {"positive", "negative", "neutral"}
    assert len(SENTIMENT_KEYWORDS["positive"]) == 25
    assert len(SENTIMENT_KEYWORDS["negative"]) == 25
    assert len(SENTIMENT_KEYWORDS["neutral"]) == 12


def test_as_dict():
    body = analyze_sentiment(REVIEW, "rabinKarp").as_dict()

    assert body["algorithm"] == "rabinKarp"
    assert body["overall"] == "POSITIVE"
    assert body["positive"] == [{"keyword": "great", "count": 2, "positions": [0, 13]}]
    assert body["negative_score"] == 1
    assert body["word_count"] == 13
    assert body["processing_time"] >= 0
