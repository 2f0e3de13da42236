"""
Citation source handling.

Grounded generation responses carry a list of grounding chunks next to the
text. Web chunks have a title and uri; other chunks have neither. Only
complete (title, uri) pairs become citations.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional

from .models import Citation


def _field(obj: Any, *names: str) -> Any:
    """Read the first present field from a mapping or an attribute object."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _non_empty(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def normalize_sources(candidates: Optional[Iterable[Any]]) -> List[Citation]:
    """
    Keep the candidates that carry both a title and a uri.

    Candidates may be None, mappings, or SDK objects. Incomplete entries are
    dropped as they are, without repair. Order is kept and duplicates are
    not removed.

    Args:
        candidates: Raw citation candidates, or None

    Returns:
        List of Citation records
    """
    citations = []
    for candidate in candidates or ():
        title = _field(candidate, "title")
        uri = _field(candidate, "uri")
        if _non_empty(title) and _non_empty(uri):
            citations.append(Citation(title=title, uri=uri))
    return citations


def grounding_candidates(response: Any) -> Iterator[Any]:
    """
    Yield the web entry of each grounding chunk in a generation response.

    Reads ``candidates[0].groundingMetadata.groundingChunks`` (snake_case
    names are accepted too). Non-web chunks yield None so the caller sees
    every chunk in order.
    """
    candidates = _field(response, "candidates") or []
    if not candidates:
        return
    metadata = _field(candidates[0], "groundingMetadata", "grounding_metadata")
    chunks = _field(metadata, "groundingChunks", "grounding_chunks") or []
    for chunk in chunks:
        yield _field(chunk, "web")
