"""
Protocols for the browser-automation capability used by the extractor.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class DomElement(Protocol):
    """A single located element."""

    async def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None when it is absent."""
        ...


@runtime_checkable
class DomPage(Protocol):
    """A loaded page that can be queried with CSS selectors."""

    @property
    def url(self) -> str:
        """The page's current URL."""
        ...

    async def locate_all(self, selector: str) -> Sequence[DomElement]:
        """Return every element matching ``selector`` in document order."""
        ...

    async def all_text_contents(self, selector: str) -> list[str]:
        """Return the text content of every element matching ``selector``."""
        ...


@runtime_checkable
class BrowserDriver(Protocol):
    """Launches a browser and loads pages.

    ``open_page`` must release every browser resource when the context exits,
    whether or not navigation or extraction raised.
    """

    def open_page(self, url: str) -> AbstractAsyncContextManager[DomPage]:
        """Launch a browser, navigate to ``url`` and yield the loaded page."""
        ...
