import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from string_search.search.base import MatchSet
from string_search.search.dispatcher import DEFAULT_ALGORITHM, Algorithm, resolve_algorithm, search

logger = logging.getLogger(__name__)


class Sentiment(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


SENTIMENT_KEYWORDS: Dict[str, Sequence[str]] = {
    "positive": (
        "good", "great", "excellent", "amazing", "wonderful", "fantastic", "awesome",
        "happy", "love", "best", "perfect", "beautiful", "brilliant", "outstanding",
        "superb", "magnificent", "delightful", "pleasant", "enjoy", "enjoyed",
        "impressive", "exceptional", "fabulous", "marvelous", "terrific",
    ),
    "negative": (
        "bad", "terrible", "awful", "horrible", "worst", "poor", "disappointing",
        "hate", "dislike", "ugly", "disgusting", "annoying", "frustrating",
        "useless", "pathetic", "dreadful", "atrocious", "abysmal", "inferior",
        "unpleasant", "mediocre", "regret", "waste", "failure", "boring",
    ),
    "neutral": (
        "okay", "fine", "average", "normal", "standard", "typical", "ordinary",
        "adequate", "acceptable", "moderate", "fair", "reasonable",
    ),
}


@dataclass(frozen=True)
class KeywordHit:
    keyword: str
    positions: MatchSet

    @property
    def count(self) -> int:
        return len(self.positions)


@dataclass
class SentimentReport:
    """
    Keyword hits grouped by sentiment, with the derived scores and verdict.

    Positions are offsets into the lowercased text.
    """
    algorithm: str
    positive: List[KeywordHit] = field(default_factory=list)
    negative: List[KeywordHit] = field(default_factory=list)
    neutral: List[KeywordHit] = field(default_factory=list)
    word_count: int = 0
    processing_time: float = 0.0

    @property
    def positive_score(self) -> int:
        return sum(hit.count for hit in self.positive)

    @property
    def negative_score(self) -> int:
        return sum(hit.count for hit in self.negative)

    @property
    def neutral_score(self) -> int:
        return sum(hit.count for hit in self.neutral)

    @property
    def overall(self) -> Sentiment:
        positive, negative, neutral = self.positive_score, self.negative_score, self.neutral_score
        if positive > negative and positive > neutral:
            return Sentiment.POSITIVE
        if negative > positive and negative > neutral:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def as_dict(self) -> Dict[str, Any]:
        def hits(group: List[KeywordHit]) -> List[Dict[str, Any]]:
            return [{"keyword": h.keyword, "count": h.count, "positions": list(h.positions)} for h in group]

        return {
            "algorithm": self.algorithm,
            "overall": self.overall.value,
            "positive_score": self.positive_score,
            "negative_score": self.negative_score,
            "neutral_score": self.neutral_score,
            "positive": hits(self.positive),
            "negative": hits(self.negative),
            "neutral": hits(self.neutral),
            "word_count": self.word_count,
            "processing_time": self.processing_time,
        }


def analyze_sentiment(
    text: str,
    algorithm: Union[str, Algorithm, None] = DEFAULT_ALGORITHM,
    *,
    strict: bool = False,
    keywords: Optional[Mapping[str, Sequence[str]]] = None,
) -> SentimentReport:
    """
    Score ``text`` by counting sentiment keywords with the chosen matcher.

    Each keyword is searched for separately in the lowercased text, so a
    keyword also counts where it occurs inside a longer word.

    Args:
        text (str): Text to analyse.
        algorithm: Matcher used for every keyword search.
        strict (bool): Raise ``UnknownAlgorithmError`` for unknown identifiers.
        keywords (Mapping, optional): ``positive``/``negative``/``neutral``
            keyword lists replacing ``SENTIMENT_KEYWORDS``.

    Returns:
        SentimentReport: Hits per keyword, scores and the overall verdict.
    """
    resolved = resolve_algorithm(algorithm, strict=strict)
    keywords = SENTIMENT_KEYWORDS if keywords is None else keywords

    start_time = time.perf_counter()
    lowered = text.lower()
    report = SentimentReport(algorithm=resolved.value, word_count=len(text.split()))

    for group in ("positive", "negative", "neutral"):
        hits = getattr(report, group)
        for keyword in keywords.get(group, ()):
            positions = search(lowered, keyword.lower(), resolved)
            if positions:
                hits.append(KeywordHit(keyword=keyword, positions=positions))

    report.processing_time = time.perf_counter() - start_time
    logger.debug(
        "Sentiment %s (+%d/-%d/=%d) over %d words with %s",
        report.overall.value,
        report.positive_score,
        report.negative_score,
        report.neutral_score,
        report.word_count,
        resolved.value,
    )
    return report
