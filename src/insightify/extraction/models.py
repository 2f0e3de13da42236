"""
Typed records produced by the extraction engine.

All records are frozen and hold tuples, so a result cannot change after the
Assembler returns it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class Sentiment(str, Enum):
    """Overall sentiment label of a brand analysis."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class ThemeSet:
    """Key themes grouped by tone."""

    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()
    neutral: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SwotSet:
    """Strengths, weaknesses, opportunities and threats."""

    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
    opportunities: Tuple[str, ...] = ()
    threats: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Citation:
    """A supporting web source. Both fields are non-empty."""

    title: str
    uri: str


@dataclass(frozen=True)
class ExtractionResult:
    """
    Brand analysis extracted from one generated document.

    Every field has a default, so a document with no recognizable sections
    still produces a complete record.
    """

    overall_score: float = 0.0
    sentiment: Sentiment = Sentiment.NEUTRAL
    summary: str = ""
    themes: ThemeSet = field(default_factory=ThemeSet)
    recent_news: Tuple[str, ...] = ()
    swot: SwotSet = field(default_factory=SwotSet)
    sources: Tuple[Citation, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the plain structure handed to the presentation layer.

        Returns:
            Dictionary using the external field names (overallScore, recentNews, ...)
        """
        return {
            "overallScore": self.overall_score,
            "sentiment": self.sentiment.value,
            "summary": self.summary,
            "themes": {
                "positive": list(self.themes.positive),
                "negative": list(self.themes.negative),
                "neutral": list(self.themes.neutral),
            },
            "recentNews": list(self.recent_news),
            "swot": {
                "strengths": list(self.swot.strengths),
                "weaknesses": list(self.swot.weaknesses),
                "opportunities": list(self.swot.opportunities),
                "threats": list(self.swot.threats),
            },
            "sources": [{"title": source.title, "uri": source.uri} for source in self.sources],
        }
