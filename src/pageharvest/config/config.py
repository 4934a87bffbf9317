"""
Configuration management for PageHarvest using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pageharvest.exceptions import ConfigurationError

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_URL = "https://westernsydney.edu.au"

# --- Nested Configuration Models ---


class BrowserConfig(BaseModel):
    """Headless browser configuration."""

    engine: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium", description="Playwright browser engine to launch."
    )
    headless: bool = Field(default=True, description="Run the browser without a visible window.")
    navigation_timeout: float = Field(default=30.0, gt=0, description="Navigation timeout in seconds.")
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="load", description="Load state to wait for before extracting."
    )
    user_agent: Optional[str] = Field(default=None, description="Override the browser User-Agent.")
    viewport_width: Optional[int] = Field(default=None, gt=0)
    viewport_height: Optional[int] = Field(default=None, gt=0)

    @property
    def navigation_timeout_ms(self) -> float:
        return self.navigation_timeout * 1000


class ExtractionSettings(BaseModel):
    """Selectors and normalization thresholds for page extraction."""

    default_url: str = Field(default=DEFAULT_URL, description="URL used when none is given.")
    banner_image_selector: str = "div.image.slide_img img"
    heading_selector: str = "h1"
    phone_link_selector: str = 'a[href^="tel:"]'
    address_selector: str = "address"
    footer_selector: str = "footer"
    phone_min_digits: int = Field(default=8, ge=1)
    phone_max_digits: int = Field(default=12, ge=1)
    address_min_length: int = Field(
        default=10, ge=0, description="Addresses must be strictly longer than this to be kept."
    )
    attribute_concurrency: int = Field(
        default=16, ge=1, description="Maximum concurrent attribute reads per element list."
    )

    @field_validator("default_url")
    @classmethod
    def validate_default_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_url must not be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_phone_range(self) -> ExtractionSettings:
        if self.phone_min_digits > self.phone_max_digits:
            raise ValueError("phone_min_digits must not exceed phone_max_digits")
        return self


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to a JSON log file. If None, logs go to stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "PageHarvest"
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="PAGEHARVEST_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found or is not a file: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            yaml_data = {}
        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {path}")
        try:
            return cls.model_validate(yaml_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` if given, else from the environment and defaults."""
    if path is not None:
        return Config.from_yaml(path)
    try:
        return Config()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
