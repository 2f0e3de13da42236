"""
Brand Analysis Extraction - Turn a generated brand report into a typed record.

The generation service writes a sectioned Markdown report; this package
splits it, parses each section, and assembles an ExtractionResult.
"""

from .main import AnalysisUnavailableError, analyze_generation_response, extract_analysis
from .models import Citation, ExtractionResult, Sentiment, SwotSet, ThemeSet

__all__ = [
    "extract_analysis",
    "analyze_generation_response",
    "AnalysisUnavailableError",
    "ExtractionResult",
    "Sentiment",
    "ThemeSet",
    "SwotSet",
    "Citation",
]
