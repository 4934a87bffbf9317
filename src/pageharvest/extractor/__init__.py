"""
PageHarvest Extraction Module

Collects a fixed set of page elements from a single loaded page:
- Banner carousel images, resolved to absolute URLs
- h1 headings
- Phone numbers from tel: links
- Address blocks
- Footer copyright notices
"""

from .models import ContactInfo, ExtractionResult
from .normalize import (
    COPYRIGHT_PATTERN,
    find_copyright_notices,
    normalize_address,
    normalize_heading,
    normalize_phone,
    resolve_image_url,
)
from .page_extractor import PageExtractor
from .protocols import BrowserDriver, DomElement, DomPage

__all__ = [
    "COPYRIGHT_PATTERN",
    "BrowserDriver",
    "ContactInfo",
    "DomElement",
    "DomPage",
    "ExtractionResult",
    "PageExtractor",
    "find_copyright_notices",
    "normalize_address",
    "normalize_heading",
    "normalize_phone",
    "resolve_image_url",
]
