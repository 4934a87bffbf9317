"""
Exception types raised by PageHarvest.
"""

from __future__ import annotations


class PageHarvestError(Exception):
    """Base class for all PageHarvest errors."""

    pass


class NavigationError(PageHarvestError):
    """Raised when the browser cannot be launched or the page cannot be loaded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to load {url}: {reason}")


class ConfigurationError(PageHarvestError):
    """Raised when configuration cannot be loaded or validated."""

    pass
