"""
Playwright-backed browser driver.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import structlog
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page, async_playwright

from ..config.config import BrowserConfig
from ..exceptions import NavigationError

logger = structlog.get_logger(__name__)


class PlaywrightPage:
    """DomPage adapter over a Playwright ``Page``."""

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    async def locate_all(self, selector: str) -> List[Locator]:
        return await self._page.locator(selector).all()

    async def all_text_contents(self, selector: str) -> List[str]:
        return await self._page.locator(selector).all_text_contents()


class PlaywrightDriver:
    """
    Launches a Playwright browser for each page load.

    The Playwright instance, browser, context and page opened by
    ``open_page`` are closed when the context exits, including when
    navigation or extraction raises.
    """

    def __init__(self, settings: Optional[BrowserConfig] = None) -> None:
        self.settings = settings or BrowserConfig()

    def _context_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {}
        if self.settings.user_agent:
            options["user_agent"] = self.settings.user_agent
        if self.settings.viewport_width and self.settings.viewport_height:
            options["viewport"] = {
                "width": self.settings.viewport_width,
                "height": self.settings.viewport_height,
            }
        return options

    @asynccontextmanager
    async def open_page(self, url: str) -> AsyncIterator[PlaywrightPage]:
        """Launch the configured browser, navigate to ``url`` and yield the page."""
        log = logger.bind(engine=self.settings.engine, url=url)

        async with async_playwright() as playwright:
            browser_type = getattr(playwright, self.settings.engine)
            try:
                browser = await browser_type.launch(headless=self.settings.headless)
            except PlaywrightError as exc:
                raise NavigationError(url, f"could not launch {self.settings.engine}: {exc}") from exc
            log.debug("Browser launched", headless=self.settings.headless)

            try:
                context = await browser.new_context(**self._context_options())
                page = await context.new_page()
                page.set_default_navigation_timeout(self.settings.navigation_timeout_ms)

                try:
                    response = await page.goto(url, wait_until=self.settings.wait_until)
                except PlaywrightError as exc:
                    raise NavigationError(url, str(exc)) from exc

                log.debug(
                    "Navigation finished",
                    status=response.status if response else None,
                    final_url=page.url,
                )
                yield PlaywrightPage(page)
            finally:
                await browser.close()
                log.debug("Browser closed")
