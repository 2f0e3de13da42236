"""
Insightify utility modules.

This package contains logging and settings shared across the system.
"""

from .logging import setup_logging, get_logger
from .settings import config

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    # Settings
    "config",
]
