"""
Test configuration for PageHarvest.

Provides fake browser pages, settings and sample HTML shared across the
unit and integration suites.
"""

# Standard library imports
import logging
import os
import tempfile
from pathlib import Path
from typing import Generator

# Third-party imports
import pytest
import structlog

# Local imports
from pageharvest.config import Config, ExtractionSettings
from tests.helpers.fake_browser import FakeDriver, FakeElement, FakePage

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
    config.addinivalue_line("markers", "browser: Tests that launch a real Playwright browser")


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Keep logging configuration and context from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()


# ============================================================================
# Temporary Directory and File Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_html() -> str:
    """A page carrying every extracted category."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Sample University</title></head>
    <body>
        <div class="carousel">
            <div class="image slide_img"><img src="/img/banner-1.jpg" alt="One"></div>
            <div class="image slide_img"><img data-src="banner-2.jpg" alt="Two"></div>
            <div class="image slide_img"><img src="https://cdn.example.org/banner-3.jpg" alt="Three"></div>
            <div class="image"><img src="/img/not-a-banner.jpg" alt="Ignored"></div>
        </div>
        <h1>  Welcome  </h1>
        <h1>   </h1>
        <a href="tel:+61 2 9852 5222">Call us</a>
        <a href="tel:123">Too short</a>
        <address>
            Locked Bag 1797
            Penrith NSW 2751
        </address>
        <address>Short</address>
        <footer>
            <p>&copy; 2020-2023 Sample University</p>
            <p>Copyright 2019 Example Pty Ltd</p>
        </footer>
    </body>
    </html>
    """


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove PAGEHARVEST_* variables inherited from the caller's environment."""
    for key in list(os.environ):
        if key.startswith("PAGEHARVEST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def test_config(clean_env) -> Config:
    """Provide a default configuration isolated from the environment."""
    return Config()


@pytest.fixture
def extraction_settings() -> ExtractionSettings:
    return ExtractionSettings()


# ============================================================================
# Fake Browser Fixtures
# ============================================================================


@pytest.fixture
def sample_page() -> FakePage:
    """FakePage equivalent of ``sample_html`` served from https://example.com/page."""
    settings = ExtractionSettings()
    return FakePage(
        "https://example.com/page",
        {
            settings.banner_image_selector: [
                FakeElement(src="/img/banner-1.jpg"),
                FakeElement(data_src="banner-2.jpg"),
                FakeElement(src="https://cdn.example.org/banner-3.jpg"),
            ],
            settings.heading_selector: [FakeElement(text="  Welcome  "), FakeElement(text="   ")],
            settings.phone_link_selector: [
                FakeElement(href="tel:+61 2 9852 5222"),
                FakeElement(href="tel:123"),
            ],
            settings.address_selector: [
                FakeElement(text="\n    Locked Bag 1797\n    Penrith NSW 2751\n"),
                FakeElement(text="Short"),
            ],
            settings.footer_selector: [
                FakeElement(text="© 2020-2023 Sample University\nCopyright 2019 Example Pty Ltd"),
            ],
        },
    )


@pytest.fixture
def fake_driver(sample_page) -> FakeDriver:
    return FakeDriver(sample_page)
