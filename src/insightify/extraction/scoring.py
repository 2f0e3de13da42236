"""
Score and sentiment extraction from the "Overall Score" section.

The service is asked to write something like ``8.5/10 (Positive)``. The
score is the first number found; the sentiment is decided by keyword rules
evaluated in order.
"""

import re
from typing import Optional, Tuple

from .models import Sentiment

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")

# Evaluated top to bottom, first hit wins. Positive is checked before
# Negative, so text containing both words is classified Positive.
SENTIMENT_RULES: Tuple[Tuple[str, Sentiment], ...] = (
    ("Positive", Sentiment.POSITIVE),
    ("Negative", Sentiment.NEGATIVE),
)

DEFAULT_SENTIMENT = Sentiment.NEUTRAL


def extract_score(text: str) -> Optional[float]:
    """Return the first integer or decimal in text, or None if there is none."""
    match = _NUMBER_RE.search(text)
    return float(match.group(0)) if match else None


def classify_sentiment(text: str) -> Sentiment:
    """Apply SENTIMENT_RULES in order; Neutral when no keyword is present."""
    for keyword, sentiment in SENTIMENT_RULES:
        if keyword in text:
            return sentiment
    return DEFAULT_SENTIMENT


def extract_score_and_sentiment(body: str) -> Tuple[float, Sentiment]:
    """
    Extract the numeric score and sentiment label.

    Args:
        body: "Overall Score" section body

    Returns:
        Tuple of (score, sentiment); score is 0.0 when no number is found
    """
    score = extract_score(body)
    return (score if score is not None else 0.0), classify_sentiment(body)
