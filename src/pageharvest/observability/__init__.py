"""Logging setup for PageHarvest."""

from __future__ import annotations

from .logging import configure_logging

__all__ = ["configure_logging"]
