"""
Section, list and sub-list parsing for generated Markdown reports.

The generation service is asked to write ``### Header`` sections, bulleted
lines, and emphasized ``**Label:**`` sub-headers. Everything here is
tolerant: a missing header or label yields an empty value, never an error.
"""

import re
from typing import Dict, Iterable, List

HEADER_PREFIX = "### "

# Any line starting with ### ends the current section
_NEXT_HEADER = r"(?=^###|\Z)"

# One leading bullet glyph. Includes cp1252 and latin-1 mis-decodings of "•".
# A "**" run is emphasis, not a bullet, so a lone "*" must not be followed by another.
_BULLET_RE = re.compile(r"^(?:â€¢|â\x80¢|•|-|\*(?!\*))")

# An emphasized label such as **Strengths:**
_LABEL_RE = r"\*\*[^*\n]+?:\*\*"


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _header_pattern(header: str) -> "re.Pattern[str]":
    return re.compile(
        rf"^{re.escape(HEADER_PREFIX + header)}[ \t]*(?:\n|\Z)(.*?){_NEXT_HEADER}",
        re.MULTILINE | re.DOTALL,
    )


def parse_section(document: str, header: str) -> str:
    """
    Return the trimmed body of the first ``### <header>`` section.

    Args:
        document: Full generated document
        header: Header name without the ### marker

    Returns:
        Section body, or "" when the header is absent
    """
    match = _header_pattern(header).search(_normalize_newlines(document))
    return match.group(1).strip() if match else ""


def split_sections(document: str, headers: Iterable[str]) -> Dict[str, str]:
    """
    Map each expected header to its section body.

    Args:
        document: Full generated document
        headers: Header names to look for

    Returns:
        Dictionary with one entry per header; absent headers map to ""
    """
    normalized = _normalize_newlines(document)
    sections = {}
    for header in headers:
        match = _header_pattern(header).search(normalized)
        sections[header] = match.group(1).strip() if match else ""
    return sections


def parse_list(text: str) -> List[str]:
    """
    Turn a block of bulleted lines into clean items.

    >>> parse_list("- Great battery life")
    ['Great battery life']
    """
    items = []
    for line in _normalize_newlines(text).split("\n"):
        item = _BULLET_RE.sub("", line.strip(), count=1).strip()
        if item:
            items.append(item)
    return items


def parse_sub_list(body: str, label: str) -> List[str]:
    """
    Extract the bulleted items under an emphasized ``**<label>:**`` sub-header.

    Capture runs from just after the label to the next emphasized label or
    the end of the body.

    Args:
        body: Section body containing labelled lists
        label: Sub-header text without emphasis or colon (e.g. "Strengths")

    Returns:
        Items under the label, or [] when the label is absent
    """
    pattern = re.compile(
        rf"\*\*{re.escape(label)}:\*\*(.*?)(?={_LABEL_RE}|\Z)",
        re.DOTALL,
    )
    match = pattern.search(_normalize_newlines(body))
    return parse_list(match.group(1)) if match else []
