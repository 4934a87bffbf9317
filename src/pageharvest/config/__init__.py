"""Configuration models and loaders."""

from .config import DEFAULT_URL, BrowserConfig, Config, ExtractionSettings, MonitoringConfig, load_config

__all__ = [
    "DEFAULT_URL",
    "BrowserConfig",
    "Config",
    "ExtractionSettings",
    "MonitoringConfig",
    "load_config",
]
