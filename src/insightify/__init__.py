"""
Insightify - brand reputation analysis extraction.

Turns the sectioned Markdown report written by the generation service into a
typed ExtractionResult.
"""

__version__ = "0.1.0"
