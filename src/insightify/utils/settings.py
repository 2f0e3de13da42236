"""
Settings for Insightify.

Values are read from the environment (and a local .env file if present)
once at import time and exposed through the singleton ``config``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import dotenv

dotenv.load_dotenv()

DEFAULT_LAYOUT_PATH = str(Path(__file__).parent.parent / "extraction" / "config" / "layout.yaml")


@dataclass
class ExtractionConfig:
    """Extraction engine settings."""

    layout_path: str = field(
        default_factory=lambda: os.getenv("EXTRACTION_LAYOUT_PATH", DEFAULT_LAYOUT_PATH)
    )


class Config:
    """
    Process-wide configuration singleton.

    Every instantiation returns the same object so tests can patch
    attributes on ``config`` and see the change everywhere.
    """

    _instance: Optional["Config"] = None

    def __new__(cls) -> "Config":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._load()
            cls._instance = instance
        return cls._instance

    def _load(self) -> None:
        """Populate attributes from environment variables."""
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.extraction = ExtractionConfig()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration attribute by name.

        Args:
            key: Attribute name
            default: Value returned when the attribute does not exist

        Returns:
            The attribute value or default
        """
        return getattr(self, key, default)


config = Config()
