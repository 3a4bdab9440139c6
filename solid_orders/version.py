"""
Version information for SOLID Orders.

Single source of truth: pyproject.toml
Runtime access via importlib.metadata with fallback.
"""

from importlib.metadata import PackageNotFoundError, version

# Fallback version if package metadata unavailable (dev mode)
_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Get the package version from metadata or fallback."""
    try:
        return version("solid-orders")
    except PackageNotFoundError:
        return _FALLBACK_VERSION
