"""
Report layout loader.

The layout YAML is the single table describing which sections the
generation service writes and how each one is parsed. Adding or renaming a
section is an edit to that file.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

import yaml

from .models import SwotSet, ThemeSet

SECTION_KINDS = ("score", "text", "list", "sublists")

# Record type built for each sublists field
GROUP_TYPES = {
    "themes": ThemeSet,
    "swot": SwotSet,
}

_TEXT_FIELDS = ("summary",)
_LIST_FIELDS = ("recent_news",)


@dataclass(frozen=True)
class SectionSpec:
    """One row of the layout table."""

    header: str
    kind: str
    field_name: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)


class LayoutConfig:
    """
    Layout loader that reads the YAML table and validates every row.

    Misconfiguration is reported when the file is loaded, so extraction
    itself never fails on layout problems.
    """

    def __init__(self, config_path: str):
        """Initialize the layout loader."""
        self.config_path = config_path
        self._config = self._load_config()
        self.sections = self._build_sections()

    def _load_config(self) -> Dict[str, Any]:
        """Load layout from YAML file."""
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Layout file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Layout must be a mapping: {self.config_path}")
        return data

    def _build_sections(self) -> List[SectionSpec]:
        rows = self._config.get("sections")
        if not rows:
            raise ValueError(f"No sections defined in layout: {self.config_path}")

        sections = []
        seen_headers = set()
        for row in rows:
            if not isinstance(row, dict):
                raise ValueError(f"Malformed section entry in layout: {row!r}")
            labels = row.get("labels") or {}
            if not isinstance(labels, dict):
                raise ValueError(f"Labels must be a mapping in layout entry: {row!r}")
            spec = SectionSpec(
                header=str(row.get("header", "")).strip(),
                kind=row.get("kind", ""),
                field_name=row.get("field"),
                labels=dict(labels),
            )
            self._validate(spec)
            if spec.header in seen_headers:
                raise ValueError(f"Duplicate header '{spec.header}' in layout")
            seen_headers.add(spec.header)
            sections.append(spec)
        return sections

    def _validate(self, spec: SectionSpec) -> None:
        if not spec.header:
            raise ValueError(f"Section without header in layout: {self.config_path}")

        if spec.kind not in SECTION_KINDS:
            raise ValueError(
                f"Invalid kind '{spec.kind}' for section '{spec.header}'. "
                f"Valid kinds: {list(SECTION_KINDS)}"
            )

        if spec.kind == "score":
            return

        allowed = {
            "text": _TEXT_FIELDS,
            "list": _LIST_FIELDS,
            "sublists": tuple(GROUP_TYPES),
        }[spec.kind]
        if spec.field_name not in allowed:
            raise ValueError(
                f"Field '{spec.field_name}' cannot hold a '{spec.kind}' section "
                f"('{spec.header}'). Valid fields: {list(allowed)}"
            )

        if spec.kind == "sublists":
            group_fields = {f.name for f in fields(GROUP_TYPES[spec.field_name])}
            unknown = set(spec.labels) - group_fields
            if not spec.labels or unknown:
                raise ValueError(
                    f"Labels for '{spec.header}' must map {sorted(group_fields)} "
                    f"to sub-headers, got {sorted(map(str, spec.labels))}"
                )
            for attribute, label in spec.labels.items():
                if not isinstance(label, str) or not label.strip():
                    raise ValueError(
                        f"Label for '{attribute}' in '{spec.header}' must be a "
                        f"non-empty string, got {label!r}"
                    )

    @property
    def headers(self) -> List[str]:
        """Header names in layout order."""
        return [section.header for section in self.sections]

