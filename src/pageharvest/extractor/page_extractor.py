"""
Single-page extractor.

Loads one page through a BrowserDriver and collects banner images, h1
headings, phone numbers, addresses and footer copyright notices.
"""

from __future__ import annotations

import time
from typing import List, Optional

import structlog

from ..config.config import ExtractionSettings
from ..utils.concurrency import bounded_gather
from .models import ContactInfo, ExtractionResult
from .normalize import (
    find_copyright_notices,
    normalize_address,
    normalize_heading,
    normalize_phone,
    resolve_image_url,
)
from .protocols import BrowserDriver, DomElement, DomPage

logger = structlog.get_logger(__name__)


class PageExtractor:
    """
    Extracts a fixed set of elements from a single page.

    Each extraction query runs against the loaded DOM in turn. Attribute reads
    over element lists run concurrently, bounded by
    ``settings.attribute_concurrency``. An empty query yields an empty
    sequence; any other failure propagates.
    """

    def __init__(self, driver: BrowserDriver, settings: Optional[ExtractionSettings] = None) -> None:
        """
        Initialize the PageExtractor.

        Args:
            driver: Browser capability used to load the page
            settings: Selectors and normalization thresholds
        """
        self.driver = driver
        self.settings = settings or ExtractionSettings()
        self.logger = logger.bind(component="PageExtractor")

    async def extract(self, url: Optional[str] = None) -> ExtractionResult:
        """
        Load ``url`` and extract every category from it.

        Args:
            url: Page to load. Falls back to ``settings.default_url``.

        Returns:
            The assembled ExtractionResult
        """
        target = url or self.settings.default_url
        log = self.logger.bind(url=target)
        start_time = time.time()

        log.info("Loading page")
        async with self.driver.open_page(target) as page:
            log.debug("Page loaded", final_url=page.url)

            banner_images = await self.banner_images(page, target)
            h1_headers = await self.h1_headers(page)
            contact = await self.contact_numbers(page)
            address = await self.addresses(page)
            footer = await self.footer_notices(page)

        result = ExtractionResult(
            url=target,
            banner_images=tuple(banner_images),
            h1_headers=tuple(h1_headers),
            contact_info=ContactInfo(
                contact=tuple(contact),
                address=tuple(address),
                footer=tuple(footer),
            ),
        )

        log.info(
            "Extraction completed",
            banner_images=len(result.banner_images),
            h1_headers=len(result.h1_headers),
            contacts=len(contact),
            addresses=len(address),
            footer_notices=len(footer),
            elapsed=round(time.time() - start_time, 3),
        )
        return result

    async def banner_images(self, page: DomPage, base_url: str) -> List[str]:
        """Absolute image URLs from the banner carousel, in DOM order."""
        elements = await page.locate_all(self.settings.banner_image_selector)

        async def read_src(element: DomElement) -> Optional[str]:
            src = await element.get_attribute("src") or await element.get_attribute("data-src")
            return resolve_image_url(src, base_url)

        sources = await bounded_gather(elements, read_src, self.settings.attribute_concurrency)
        images = [src for src in sources if src]
        self.logger.debug("Banner images extracted", found=len(elements), kept=len(images))
        return images

    async def h1_headers(self, page: DomPage) -> List[str]:
        texts = await page.all_text_contents(self.settings.heading_selector)
        headers = [h for h in (normalize_heading(text) for text in texts) if h]
        self.logger.debug("Headings extracted", found=len(texts), kept=len(headers))
        return headers

    async def contact_numbers(self, page: DomPage) -> List[str]:
        """Digits-only phone numbers from ``tel:`` links within the configured length range."""
        elements = await page.locate_all(self.settings.phone_link_selector)

        async def read_phone(element: DomElement) -> Optional[str]:
            href = await element.get_attribute("href")
            return normalize_phone(
                href,
                min_digits=self.settings.phone_min_digits,
                max_digits=self.settings.phone_max_digits,
            )

        numbers = await bounded_gather(elements, read_phone, self.settings.attribute_concurrency)
        phones = [number for number in numbers if number]
        self.logger.debug("Phone numbers extracted", found=len(elements), kept=len(phones))
        return phones

    async def addresses(self, page: DomPage) -> List[str]:
        texts = await page.all_text_contents(self.settings.address_selector)
        kept = [
            a for a in (normalize_address(text, min_length=self.settings.address_min_length) for text in texts) if a
        ]
        self.logger.debug("Addresses extracted", found=len(texts), kept=len(kept))
        return kept

    async def footer_notices(self, page: DomPage) -> List[str]:
        texts = await page.all_text_contents(self.settings.footer_selector)
        notices = find_copyright_notices(texts)
        self.logger.debug("Footer notices extracted", footers=len(texts), notices=len(notices))
        return notices
