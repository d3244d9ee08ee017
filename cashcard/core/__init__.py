"""Core configuration and process-level helpers."""

from .config import Settings, get_settings
from .logging import setup_logging

__all__ = ["Settings", "get_settings", "setup_logging"]
