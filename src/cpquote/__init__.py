"""Quoting, simulation and transcripts for a single constant-product pool."""

from importlib import metadata


DISTRIBUTION = "cpquote"

try:
    __version__ = metadata.version(DISTRIBUTION)
except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0+local"

__all__ = ["DISTRIBUTION", "__version__"]
