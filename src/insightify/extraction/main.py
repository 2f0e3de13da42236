"""
Brand Analysis Extraction - Assemble a typed record from a generated report

The generation service writes a Markdown report with a fixed set of
``###`` sections. This module:
1. Splits the report into the sections listed in the layout table
2. Parses each section with the routine for its kind
3. Normalizes the citation candidates returned alongside the text
4. Composes one immutable ExtractionResult

Missing or malformed content never raises; defaults are substituted and the
condition is logged at debug level.

Usage:
    from insightify.extraction.main import extract_analysis
    result = extract_analysis(report_text, grounding_sources)
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

from insightify.extraction.layout import GROUP_TYPES, LayoutConfig, SectionSpec
from insightify.extraction.models import ExtractionResult
from insightify.extraction.scoring import extract_score_and_sentiment
from insightify.extraction.sections import parse_list, parse_sub_list, split_sections
from insightify.extraction.sources import grounding_candidates, normalize_sources
from insightify.utils.logging import get_logger, setup_logging
from insightify.utils.settings import config

setup_logging()
logger = get_logger()


class AnalysisUnavailableError(RuntimeError):
    """The generation service returned no report to extract from."""


_DEFAULT_LAYOUT: Optional[LayoutConfig] = None


def get_default_layout() -> LayoutConfig:
    """
    Load and cache the layout configured in settings.

    Returns:
        LayoutConfig for config.extraction.layout_path
    """
    global _DEFAULT_LAYOUT  # pylint: disable=global-statement
    if _DEFAULT_LAYOUT is None or _DEFAULT_LAYOUT.config_path != config.extraction.layout_path:
        _DEFAULT_LAYOUT = LayoutConfig(config.extraction.layout_path)
    return _DEFAULT_LAYOUT


def _extract_score(spec: SectionSpec, body: str) -> Dict[str, Any]:
    score, sentiment = extract_score_and_sentiment(body)
    return {"overall_score": score, "sentiment": sentiment}


def _extract_text(spec: SectionSpec, body: str) -> Dict[str, Any]:
    return {spec.field_name: body}


def _extract_list(spec: SectionSpec, body: str) -> Dict[str, Any]:
    return {spec.field_name: tuple(parse_list(body))}


def _extract_sublists(spec: SectionSpec, body: str) -> Dict[str, Any]:
    groups = {}
    for attribute, label in spec.labels.items():
        items = parse_sub_list(body, label)
        if body and not items:
            logger.debug("extraction.sublist_empty", section=spec.header, label=label)
        groups[attribute] = tuple(items)
    return {spec.field_name: GROUP_TYPES[spec.field_name](**groups)}


SECTION_EXTRACTORS: Dict[str, Callable[[SectionSpec, str], Dict[str, Any]]] = {
    "score": _extract_score,
    "text": _extract_text,
    "list": _extract_list,
    "sublists": _extract_sublists,
}


def extract_analysis(
    document: str,
    source_candidates: Optional[Iterable[Any]] = None,
    layout: Optional[LayoutConfig] = None,
) -> ExtractionResult:
    """
    Build an ExtractionResult from a generated report.

    Args:
        document: Markdown report produced by the generation service
        source_candidates: Raw citation candidates (title/uri), may contain None
        layout: Section layout, defaults to the configured layout

    Returns:
        Complete ExtractionResult; absent sections keep their defaults

    Raises:
        TypeError: If document is not a string
    """
    if not isinstance(document, str):
        raise TypeError(f"document must be str, got {type(document).__name__}")

    layout = layout or get_default_layout()
    sections = split_sections(document, layout.headers)

    values: Dict[str, Any] = {}
    missing = []
    for spec in layout.sections:
        body = sections[spec.header]
        if not body:
            missing.append(spec.header)
        values.update(SECTION_EXTRACTORS[spec.kind](spec, body))

    values["sources"] = tuple(normalize_sources(source_candidates))

    if missing:
        logger.debug("extraction.sections_missing", sections=missing)

    result = ExtractionResult(**values)
    logger.debug(
        "extraction.completed",
        overall_score=result.overall_score,
        sentiment=result.sentiment.value,
        sources=len(result.sources),
    )
    return result


def analyze_generation_response(
    response: Any, layout: Optional[LayoutConfig] = None
) -> ExtractionResult:
    """
    Extract a brand analysis from a grounded generation response.

    Args:
        response: Generation service response (SDK object or mapping) with
            ``text`` and grounding metadata
        layout: Section layout, defaults to the configured layout

    Returns:
        ExtractionResult built from the response text and its web sources

    Raises:
        AnalysisUnavailableError: If there is no response or it carries no text
    """
    if response is None:
        raise AnalysisUnavailableError("No response from generation service")

    text = response.get("text") if isinstance(response, Mapping) else getattr(response, "text", None)
    if not isinstance(text, str) or not text.strip():
        logger.warning("extraction.response_empty")
        raise AnalysisUnavailableError("Generation service returned no analysis text")

    return extract_analysis(text, grounding_candidates(response), layout=layout)
