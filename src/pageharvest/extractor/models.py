"""
Data models for extraction results.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class ContactInfo:
    """Contact details found on a page."""

    contact: tuple[str, ...] = field(default_factory=tuple)
    address: tuple[str, ...] = field(default_factory=tuple)
    footer: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "contact": list(self.contact),
            "address": list(self.address),
            "footer": list(self.footer),
        }


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Everything extracted from a single page."""

    url: str
    banner_images: tuple[str, ...] = field(default_factory=tuple)
    h1_headers: tuple[str, ...] = field(default_factory=tuple)
    contact_info: ContactInfo = field(default_factory=ContactInfo)

    def __post_init__(self) -> None:
        """Validate the result."""
        if not self.url:
            raise ValueError("url must not be empty")

    def to_dict(self) -> dict[str, Any]:
        """Return the result in its published camelCase shape."""
        return {
            "url": self.url,
            "bannerImages": list(self.banner_images),
            "h1Headers": list(self.h1_headers),
            "contactInfo": self.contact_info.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
