"""
PageHarvest - Single-page element extraction with a headless browser.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ExtractionResult, PageExtractor

__all__ = ["__version__", "Config", "ExtractionResult", "PageExtractor"]
