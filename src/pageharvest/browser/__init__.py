"""Browser drivers implementing the extractor's BrowserDriver protocol."""

from .playwright_driver import PlaywrightDriver, PlaywrightPage

__all__ = ["PlaywrightDriver", "PlaywrightPage"]
