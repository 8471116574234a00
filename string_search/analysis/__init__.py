from string_search.analysis.sentiment import (
    SENTIMENT_KEYWORDS,
    KeywordHit,
    Sentiment,
    SentimentReport,
    analyze_sentiment,
)

__all__ = ["SENTIMENT_KEYWORDS", "KeywordHit", "Sentiment", "SentimentReport", "analyze_sentiment"]
