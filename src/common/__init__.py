"""Shared utilities for cpquote packages."""

from .config import Settings
from .logging import configure_logging

__all__ = ["Settings", "configure_logging"]
