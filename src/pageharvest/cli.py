"""Command-line interface for PageHarvest."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional
from uuid import uuid4

import click
import structlog

from pageharvest import __version__
from pageharvest.browser import PlaywrightDriver
from pageharvest.config import Config, load_config
from pageharvest.exceptions import ConfigurationError, PageHarvestError
from pageharvest.extractor import ExtractionResult, PageExtractor
from pageharvest.observability import configure_logging

logger = structlog.get_logger(__name__)


def apply_overrides(
    config: Config,
    log_level: Optional[str] = None,
    engine: Optional[str] = None,
    headed: bool = False,
    timeout: Optional[float] = None,
) -> Config:
    """Return ``config`` with command-line options layered on top."""
    browser_updates = {}
    if engine:
        browser_updates["engine"] = engine
    if headed:
        browser_updates["headless"] = False
    if timeout is not None:
        browser_updates["navigation_timeout"] = timeout

    updates = {}
    if browser_updates:
        updates["browser"] = config.browser.model_copy(update=browser_updates)
    if log_level:
        updates["monitoring"] = config.monitoring.model_copy(update={"log_level": log_level.upper()})
    return config.model_copy(update=updates) if updates else config


async def run_extraction(config: Config, url: Optional[str]) -> ExtractionResult:
    """Load one page with Playwright and extract it."""
    driver = PlaywrightDriver(config.browser)
    extractor = PageExtractor(driver, config.extraction)
    return await extractor.extract(url)


@click.command()
@click.version_option(version=__version__)
@click.argument("url", required=False)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--browser",
    "engine",
    default=None,
    type=click.Choice(["chromium", "firefox", "webkit"]),
    help="Browser engine to launch",
)
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.option(
    "--timeout",
    default=None,
    type=click.FloatRange(min=0, min_open=True),
    help="Navigation timeout in seconds",
)
def cli(
    url: Optional[str],
    config_path: Optional[Path],
    log_level: Optional[str],
    engine: Optional[str],
    headed: bool,
    timeout: Optional[float],
) -> None:
    """Extract banner images, headings and contact details from URL and print them as JSON.

    URL defaults to https://westernsydney.edu.au.
    """
    try:
        config = apply_overrides(load_config(config_path), log_level, engine, headed, timeout)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.monitoring)
    structlog.contextvars.bind_contextvars(run_id=uuid4().hex[:12])

    try:
        result = asyncio.run(run_extraction(config, url))
    except PageHarvestError as e:
        logger.error("Extraction failed", error=str(e), error_type=type(e).__name__)
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.error("Unhandled exception during extraction", error=str(e), error_type=type(e).__name__)
        raise
    finally:
        structlog.contextvars.clear_contextvars()

    click.echo(result.to_json(indent=2))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
